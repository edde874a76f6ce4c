"""Pruebas unitarias para las restricciones de enlace."""

import itertools
import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from chemcalc.bonds import (
    BondType,
    allowed_bond_orders,
    bond_type_for_order,
    bond_type_name,
    get_allowed_bond_types,
    get_max_bond_order,
    get_max_total_bond_order,
    is_bond_type_allowed,
    order_for_bond_type,
    validate_bond_order,
)


class AllowedBondTypesTest(unittest.TestCase):
    def test_hydrogen_single_only(self):
        self.assertEqual(get_allowed_bond_types("H"), ["single"])
        self.assertTrue(is_bond_type_allowed("H", "C", "single"))
        self.assertFalse(is_bond_type_allowed("H", "C", "double"))
        self.assertFalse(is_bond_type_allowed("H", "C", "triple"))

    def test_carbon_all_types(self):
        self.assertEqual(get_allowed_bond_types("C"), ["single", "double", "triple"])
        self.assertTrue(is_bond_type_allowed("C", "C", BondType.TRIPLE))

    def test_oxygen_group(self):
        for symbol in ("O", "S", "P", "Si"):
            self.assertEqual(get_allowed_bond_types(symbol), ["single", "double"], symbol)
        self.assertFalse(is_bond_type_allowed("O", "N", "triple"))

    def test_halogens_and_boron(self):
        for symbol in ("F", "Cl", "Br", "I", "B"):
            self.assertEqual(get_allowed_bond_types(symbol), ["single"], symbol)

    def test_unknown_single_only(self):
        self.assertEqual(get_allowed_bond_types("Xx"), ["single"])
        self.assertEqual(get_allowed_bond_types("Fe"), ["single"])

    def test_case_insensitive(self):
        self.assertEqual(get_allowed_bond_types("cl"), ["single"])
        self.assertEqual(get_allowed_bond_types("CL"), ["single"])
        self.assertEqual(get_allowed_bond_types("si"), ["single", "double"])

    def test_unknown_bond_type_is_rejected(self):
        self.assertFalse(is_bond_type_allowed("C", "C", "quadruple"))

    def test_pairwise_legality_is_symmetric(self):
        symbols = ["H", "C", "N", "O", "S", "P", "Si", "B", "F", "Cl", "Br", "I", "Xx", "fe"]
        for a, b in itertools.product(symbols, repeat=2):
            for bond_type in BondType:
                self.assertEqual(
                    is_bond_type_allowed(a, b, bond_type),
                    is_bond_type_allowed(b, a, bond_type),
                    (a, b, bond_type),
                )
            self.assertEqual(get_max_bond_order(a, b), get_max_bond_order(b, a))


class BondOrderLimitsTest(unittest.TestCase):
    def test_max_bond_order(self):
        self.assertEqual(get_max_bond_order("C", "C"), 3)
        self.assertEqual(get_max_bond_order("C", "O"), 2)
        self.assertEqual(get_max_bond_order("H", "C"), 1)
        self.assertEqual(get_max_bond_order("N", "N"), 3)
        self.assertEqual(get_max_bond_order("H", "N"), 1)
        self.assertEqual(get_max_bond_order("F", "C"), 1)
        self.assertEqual(get_max_bond_order("O", "N"), 2)

    def test_max_total_bond_order(self):
        self.assertEqual(get_max_total_bond_order("H"), 1)
        self.assertEqual(get_max_total_bond_order("O"), 2)
        self.assertEqual(get_max_total_bond_order("B"), 3)
        self.assertEqual(get_max_total_bond_order("C"), 4)
        self.assertEqual(get_max_total_bond_order("N"), 4)
        for symbol in ("Si", "P", "S"):
            self.assertEqual(get_max_total_bond_order(symbol), 4, symbol)
        for symbol in ("F", "Cl", "Br", "I", "cl"):
            self.assertEqual(get_max_total_bond_order(symbol), 1, symbol)
        self.assertEqual(get_max_total_bond_order("Xx"), 4)

    def test_allowed_bond_orders_for_controls(self):
        self.assertEqual(allowed_bond_orders("H", "C"), {1: True, 2: False, 3: False})
        self.assertEqual(allowed_bond_orders("C", "O"), {1: True, 2: True, 3: False})
        self.assertEqual(allowed_bond_orders("N", "C"), {1: True, 2: True, 3: True})

    def test_order_conversions(self):
        self.assertEqual(bond_type_for_order(2), BondType.DOUBLE)
        self.assertIsNone(bond_type_for_order(4))
        self.assertEqual(order_for_bond_type("triple"), 3)
        self.assertEqual(bond_type_name(3), "Triple")


class ValidateBondOrderTest(unittest.TestCase):
    def test_valid_bond(self):
        check = validate_bond_order("C", "O", 2)
        self.assertTrue(check.valid)
        self.assertIsNone(check.reason)

    def test_names_offending_element(self):
        check = validate_bond_order("C", "h", 2)
        self.assertFalse(check.valid)
        self.assertEqual(check.element, "H")
        self.assertEqual(check.allowed, (BondType.SINGLE,))
        self.assertEqual(check.reason, "H cannot form double bonds (only single)")

    def test_first_element_checked_first(self):
        check = validate_bond_order("O", "N", 3)
        self.assertFalse(check.valid)
        self.assertEqual(check.element, "O")
        self.assertIn("only single, double", check.reason)

    def test_out_of_range_order(self):
        check = validate_bond_order("C", "C", 4)
        self.assertFalse(check.valid)
        self.assertIsNone(check.element)
        self.assertIn("Bond order 4 is not supported", check.reason)


if __name__ == "__main__":
    unittest.main()
