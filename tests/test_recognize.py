"""Pruebas unitarias para el reconocimiento de moléculas."""

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from core.model import Atom, Bond
from chemcalc.recognize import KNOWN_MOLECULES, lookup_formula, recognize_molecule


def make_atoms(*elements: str) -> list[Atom]:
    return [Atom(id=i + 1, element=element) for i, element in enumerate(elements)]


class RecognizeMoleculeTest(unittest.TestCase):
    def test_water(self):
        atoms = make_atoms("H", "H", "O")
        bonds = [Bond(id=1, a1_id=3, a2_id=1), Bond(id=2, a1_id=3, a2_id=2)]
        self.assertIn("Water", recognize_molecule(atoms, bonds))

    def test_methane_without_bonds(self):
        result = recognize_molecule(make_atoms("C", "H", "H", "H", "H"), [])
        self.assertIn("Methane", result)

    def test_bonds_are_optional(self):
        self.assertEqual(recognize_molecule(make_atoms("O", "C", "O")), ["Carbon Dioxide"])

    def test_unknown_returns_none(self):
        self.assertIsNone(recognize_molecule(make_atoms("Xe"), []))
        self.assertIsNone(recognize_molecule([], []))

    def test_aliases(self):
        self.assertEqual(
            recognize_molecule(make_atoms("C", "C", "O", "H", "H", "H", "H", "H", "H")),
            ["Ethanol", "Dimethyl Ether"],
        )

    def test_case_insensitive_symbols(self):
        self.assertEqual(recognize_molecule(make_atoms("h", "cl")), ["Hydrochloric Acid", "Hydrogen Chloride"])

    def test_result_is_a_fresh_list(self):
        names = lookup_formula("H2O")
        names.append("Ice")
        self.assertEqual(lookup_formula("H2O"), ["Water"])
        self.assertEqual(KNOWN_MOLECULES["H2O"], ("Water",))

    def test_catalog_keys_are_hill_formulas(self):
        from chemcalc.formula import format_formula
        import re

        for formula in KNOWN_MOLECULES:
            counts = {}
            for symbol, count in re.findall(r"([A-Z][a-z]?)(\d*)", formula):
                counts[symbol] = counts.get(symbol, 0) + (int(count) if count else 1)
            self.assertEqual(format_formula(counts), formula)


if __name__ == "__main__":
    unittest.main()
