from __future__ import annotations

"""Alias groups: several block variants treated as one material when vein mining.

Purpose: Hold an unordered, deduplicated set of block variants and answer
membership at three granularities: exact variant, concrete block descriptor
(via each variant's encapsulation rule), and coarse material.

How: Queries and removals dispatch on the argument type. Material -> coarse
match; BlockDescriptor -> encapsulation; BlockReference -> resolve to a
descriptor first; anything else -> exact membership.

Engineering notes: Mutations build a new member set and swap it in, so an
iteration already in progress keeps walking the members it started with.
Equality and hash follow member content, never identity. Not thread-safe;
callers sharing a group across threads lock externally or pass snapshots.
"""

import logging
from typing import Any, Callable, FrozenSet, Iterator, Set

from .blocks import BlockDescriptor, BlockReference, BlockVariant, Material


logger = logging.getLogger("veinmine.alias")


class AliasGroup:
    """Set of block variants mined as one material.

    `in` answers the same broad question as `is_aliased`, so a descriptor,
    placed block or material can be `in` a group without ever being yielded
    by iteration, which only walks the member variants.
    """

    def __init__(self, *blocks: BlockVariant) -> None:
        # None entries are skipped; only add_alias rejects them
        self._blocks: FrozenSet[BlockVariant] = frozenset(b for b in blocks if b is not None)

    def add_alias(self, block: BlockVariant) -> None:
        if block is None:
            raise ValueError("Cannot add a null alias")
        if block not in self._blocks:
            self._blocks = self._blocks | {block}

    def remove_alias(self, target: Any) -> None:
        """Remove the exact variant, every variant encapsulating a descriptor,
        or every variant of a material, depending on what `target` is.

        Removing something that is not aliased is a no-op.
        """
        if target is None:
            return
        if isinstance(target, Material):
            removed = self._remove_where(lambda b: b.material == target)
        elif isinstance(target, BlockDescriptor):
            removed = self._remove_where(lambda b: b.encapsulates(target))
        else:
            removed = self._remove_where(lambda b: b == target)
        if removed:
            logger.debug("removed %d alias(es) matching %s", removed, target)

    def _remove_where(self, pred: Callable[[BlockVariant], bool]) -> int:
        kept = frozenset(b for b in self._blocks if not pred(b))
        removed = len(self._blocks) - len(kept)
        if removed:
            self._blocks = kept
        return removed

    def is_aliased(self, target: Any) -> bool:
        """Check whether a variant, descriptor, placed block or material is aliased.

        A block reference that cannot be resolved (or None) is simply not
        aliased.
        """
        if target is None:
            return False
        if isinstance(target, Material):
            return any(b.material == target for b in self._blocks)
        if isinstance(target, BlockReference):
            target = target.resolve()
            if target is None:
                return False
        if isinstance(target, BlockDescriptor):
            return any(b.encapsulates(target) for b in self._blocks)
        try:
            return target in self._blocks
        except TypeError:
            # unhashable, so never a member
            return False

    def aliased_blocks(self) -> Set[BlockVariant]:
        """Return a copy of all aliased variants; changes to it do not affect the group."""
        return set(self._blocks)

    def clone(self) -> "AliasGroup":
        other = AliasGroup()
        other._blocks = self._blocks
        return other

    def __iter__(self) -> Iterator[BlockVariant]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, target: Any) -> bool:
        return self.is_aliased(target)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AliasGroup):
            return NotImplemented
        return self._blocks == other._blocks

    def __hash__(self) -> int:
        return 31 * hash(self._blocks)

    def __repr__(self) -> str:
        inner = ", ".join(sorted(str(b) for b in self._blocks))
        return f"AliasGroup({inner})"
