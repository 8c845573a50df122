from __future__ import annotations

import unittest

from veinmine.blocks import (
    BlockDescriptor,
    BlockReference,
    BlockVariant,
    Material,
    MaterialVariant,
    PlacedBlock,
    StateVariant,
)


class TestMaterial(unittest.TestCase):
    def test_bare_id_gets_namespace(self) -> None:
        self.assertEqual(Material("Stone"), Material("minecraft:stone"))
        self.assertEqual(str(Material("stone")), "minecraft:stone")

    def test_custom_namespace_kept(self) -> None:
        self.assertEqual(Material("mymod:marble").key, "mymod:marble")

    def test_empty_id_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Material("  ")


class TestBlockDescriptor(unittest.TestCase):
    def test_states_normalized_and_order_independent(self) -> None:
        a = BlockDescriptor("chest", {"facing": "north", "type": "single"})
        b = BlockDescriptor(Material("minecraft:chest"), (("type", "single"), ("facing", "NORTH")))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(str(a), "minecraft:chest[facing=north,type=single]")

    def test_get(self) -> None:
        d = BlockDescriptor("oak_log", {"axis": "y"})
        self.assertEqual(d.get("axis"), "y")
        self.assertIsNone(d.get("facing"))

    def test_non_string_state_rejected(self) -> None:
        with self.assertRaises(TypeError):
            BlockDescriptor("repeater", {"delay": 2})  # type: ignore[dict-item]


class TestVariants(unittest.TestCase):
    def test_material_variant_encapsulates_any_state(self) -> None:
        v = MaterialVariant(Material("oak_log"))
        self.assertTrue(v.encapsulates(BlockDescriptor("oak_log", {"axis": "x"})))
        self.assertTrue(v.encapsulates(BlockDescriptor("oak_log")))
        self.assertFalse(v.encapsulates(BlockDescriptor("birch_log")))

    def test_state_variant_matches_specified_properties(self) -> None:
        v = StateVariant(BlockDescriptor("chest", {"facing": "north"}))
        self.assertTrue(v.encapsulates(BlockDescriptor("chest", {"facing": "north"})))
        self.assertTrue(v.encapsulates(BlockDescriptor("chest", {"facing": "north", "type": "left"})))
        self.assertFalse(v.encapsulates(BlockDescriptor("chest", {"facing": "south"})))
        self.assertFalse(v.encapsulates(BlockDescriptor("chest")))
        self.assertFalse(v.encapsulates(BlockDescriptor("trapped_chest", {"facing": "north"})))

    def test_encapsulation_is_not_symmetric(self) -> None:
        broad = StateVariant(BlockDescriptor("chest", {"facing": "north"}))
        narrow = StateVariant(BlockDescriptor("chest", {"facing": "north", "type": "left"}))
        self.assertTrue(broad.encapsulates(narrow.descriptor))
        self.assertFalse(narrow.encapsulates(broad.descriptor))

    def test_variants_compare_by_value(self) -> None:
        self.assertEqual(MaterialVariant(Material("stone")), MaterialVariant(Material("minecraft:stone")))
        self.assertNotEqual(MaterialVariant(Material("stone")), StateVariant(BlockDescriptor("stone")))
        self.assertEqual(StateVariant(BlockDescriptor("stone")).material, Material("stone"))
        self.assertIsInstance(StateVariant(BlockDescriptor("stone")), BlockVariant)

    def test_base_variant_is_abstract(self) -> None:
        with self.assertRaises(NotImplementedError):
            BlockVariant().encapsulates(BlockDescriptor("stone"))


class TestPlacedBlock(unittest.TestCase):
    def test_resolve(self) -> None:
        d = BlockDescriptor("iron_ore")
        placed = PlacedBlock("minecraft:overworld", (1, 12, 1), d)
        self.assertIsInstance(placed, BlockReference)
        self.assertEqual(placed.resolve(), d)
        self.assertIsNone(PlacedBlock("minecraft:nether", (0, 0, 0)).resolve())


if __name__ == "__main__":
    unittest.main()
