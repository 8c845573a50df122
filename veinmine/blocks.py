from __future__ import annotations

"""Block identities consumed by alias groups.

Purpose: Provide the small value types an alias group matches against:
coarse materials, concrete block descriptors, variant identities (any state
of a material, or one specific state), and references to placed blocks.

Engineering notes: Everything here is immutable and compared by value so it
can live in sets. Ids follow game naming (e.g., minecraft:stone); a bare id
gets the minecraft: namespace.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple, Union


StatePairs = Tuple[Tuple[str, str], ...]
Position = Tuple[int, int, int]


def _normalize_id(key: str) -> str:
    key = str(key).strip().lower()
    if not key:
        raise ValueError("material id must not be empty")
    return key if ":" in key else f"minecraft:{key}"


def _normalize_states(states: Union[Mapping[str, str], StatePairs, None]) -> StatePairs:
    if not states:
        return ()
    items = states.items() if hasattr(states, "items") else states
    out = {}
    for k, v in items:
        if not isinstance(k, str) or not isinstance(v, str):
            raise TypeError("block states must be str -> str")
        out[k.strip().lower()] = v.strip().lower()
    return tuple(sorted(out.items()))


@dataclass(frozen=True)
class Material:
    """Coarse block type, ignoring any state detail."""

    key: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", _normalize_id(self.key))

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class BlockDescriptor:
    """A concrete block configuration: material plus its state properties."""

    material: Material
    states: StatePairs = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.material, Material):
            object.__setattr__(self, "material", Material(self.material))
        object.__setattr__(self, "states", _normalize_states(self.states))

    def get(self, prop: str) -> Optional[str]:
        for k, v in self.states:
            if k == prop:
                return v
        return None

    def __str__(self) -> str:
        if not self.states:
            return str(self.material)
        inner = ",".join(f"{k}={v}" for k, v in self.states)
        return f"{self.material}[{inner}]"


class BlockVariant:
    """A recognized block configuration that an alias group can hold.

    Subclasses must be immutable and hashable by value, and expose the coarse
    `material` plus an `encapsulates(descriptor)` predicate.
    """

    material: Material

    def encapsulates(self, descriptor: BlockDescriptor) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class MaterialVariant(BlockVariant):
    """Any state of one material."""

    material: Material

    def __post_init__(self) -> None:
        if not isinstance(self.material, Material):
            object.__setattr__(self, "material", Material(self.material))

    def encapsulates(self, descriptor: BlockDescriptor) -> bool:
        return descriptor.material == self.material

    def __str__(self) -> str:
        return str(self.material)


@dataclass(frozen=True)
class StateVariant(BlockVariant):
    """One specific state of a material.

    Matches a descriptor of the same material carrying every property this
    variant specifies; properties the variant leaves out are unconstrained.
    """

    descriptor: BlockDescriptor

    @property
    def material(self) -> Material:  # type: ignore[override]
        return self.descriptor.material

    def encapsulates(self, descriptor: BlockDescriptor) -> bool:
        if descriptor.material != self.descriptor.material:
            return False
        return all(descriptor.get(k) == v for k, v in self.descriptor.states)

    def __str__(self) -> str:
        return str(self.descriptor)


class BlockReference:
    """Handle to a physical block, resolvable to its current descriptor."""

    def resolve(self) -> Optional[BlockDescriptor]:
        raise NotImplementedError


@dataclass(frozen=True)
class PlacedBlock(BlockReference):
    dimension: str
    position: Position
    descriptor: Optional[BlockDescriptor] = None  # None when the chunk is not loaded

    def resolve(self) -> Optional[BlockDescriptor]:
        return self.descriptor
