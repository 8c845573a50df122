"""Vein-mining block alias package.

Purpose: Group block variants into aliases that a vein-mining engine treats as
one material, and provide the block identity types those aliases match on.

"""

from .alias import AliasGroup
from .blocks import (
    BlockDescriptor,
    BlockReference,
    BlockVariant,
    Material,
    MaterialVariant,
    PlacedBlock,
    StateVariant,
)

__all__ = [
    "__version__",
    "AliasGroup",
    "BlockDescriptor",
    "BlockReference",
    "BlockVariant",
    "Material",
    "MaterialVariant",
    "PlacedBlock",
    "StateVariant",
]

__version__ = "0.1.0"
