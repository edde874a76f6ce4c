"""Pruebas unitarias para la contabilidad electrónica por átomo."""

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from core.model import Atom, Bond
from chemcalc.electrons import (
    annotate_formal_charges,
    bond_order_sum,
    calculate_formal_charge,
    check_octet_rule,
    incident_bonds,
)


def star_bonds(center_id: int, count: int, order: int = 1) -> list[Bond]:
    return [
        Bond(id=i + 1, a1_id=center_id, a2_id=center_id + i + 1, order=order)
        for i in range(count)
    ]


class FormalChargeTest(unittest.TestCase):
    def test_water_oxygen_is_neutral(self):
        oxygen = Atom(id=1, element="O", x=100, y=100, valence_electrons=6)
        self.assertEqual(calculate_formal_charge(oxygen, star_bonds(1, 2)), 0)

    def test_ammonium_nitrogen_is_positive(self):
        nitrogen = Atom(id=1, element="N", x=100, y=100, valence_electrons=5)
        self.assertEqual(calculate_formal_charge(nitrogen, star_bonds(1, 4)), 1)

    def test_bonded_hydrogen_is_neutral(self):
        hydrogen = Atom(id=2, element="H", valence_electrons=1)
        bonds = [Bond(id=1, a1_id=1, a2_id=2, order=1)]
        self.assertEqual(calculate_formal_charge(hydrogen, bonds), 0)

    def test_lone_carbon_infers_full_octet_of_nonbonding_electrons(self):
        carbon = Atom(id=1, element="C", valence_electrons=4)
        self.assertEqual(calculate_formal_charge(carbon, []), -4)

    def test_uses_declared_valence(self):
        carbon = Atom(id=1, element="C", valence_electrons=5)
        self.assertEqual(calculate_formal_charge(carbon, star_bonds(1, 4)), 1)

    def test_annotate_returns_copies(self):
        oxygen = Atom(id=1, element="O")
        hydrogen = Atom(id=2, element="H")
        bonds = [Bond(id=1, a1_id=1, a2_id=2, order=1)]
        annotated = annotate_formal_charges([oxygen, hydrogen], bonds)
        self.assertEqual([a.formal_charge for a in annotated], [-1, 0])
        self.assertEqual(oxygen.formal_charge, 0)
        self.assertIsNot(annotated[0], oxygen)


class OctetRuleTest(unittest.TestCase):
    def test_methane_carbon_is_stable(self):
        carbon = Atom(id=1, element="C", x=100, y=100, valence_electrons=4)
        stability = check_octet_rule(carbon, star_bonds(1, 4))
        self.assertTrue(stability.is_stable)
        self.assertTrue(stability.octet_satisfied)
        self.assertEqual(stability.needs_electrons, 0)
        self.assertEqual(stability.current_electrons, 8)

    def test_methyl_radical_needs_one(self):
        carbon = Atom(id=1, element="C", valence_electrons=4)
        stability = check_octet_rule(carbon, star_bonds(1, 3))
        self.assertFalse(stability.is_stable)
        self.assertFalse(stability.octet_satisfied)
        self.assertEqual(stability.needs_electrons, 1)

    def test_hydrogen_duet(self):
        hydrogen = Atom(id=1, element="H", valence_electrons=1)
        stability = check_octet_rule(hydrogen, star_bonds(1, 1))
        self.assertEqual(stability.target_electrons, 2)
        self.assertTrue(stability.is_stable)

    def test_lowercase_hydrogen_uses_duet(self):
        hydrogen = Atom(id=1, element="h")
        stability = check_octet_rule(hydrogen, [])
        self.assertEqual(stability.target_electrons, 2)
        self.assertEqual(stability.element, "H")
        self.assertEqual(stability.needs_electrons, 1)

    def test_double_bonds_count_by_order(self):
        carbon = Atom(id=1, element="C")
        stability = check_octet_rule(carbon, star_bonds(1, 2, order=2))
        self.assertEqual(stability.current_electrons, 8)
        self.assertTrue(stability.is_stable)

    def test_overfilled_atom_is_still_stable(self):
        nitrogen = Atom(id=1, element="N")
        stability = check_octet_rule(nitrogen, star_bonds(1, 4))
        self.assertTrue(stability.is_stable)
        self.assertEqual(stability.needs_electrons, 0)
        self.assertTrue(stability.is_overfilled)
        self.assertEqual(stability.formal_charge, 1)

    def test_needs_matches_rule_for_many_atoms(self):
        cases = [("C", 0), ("C", 2), ("N", 3), ("O", 1), ("H", 0), ("Cl", 1), ("Xx", 2), ("S", 4)]
        for element, count in cases:
            atom = Atom(id=1, element=element)
            stability = check_octet_rule(atom, star_bonds(1, count))
            expected = max(0, stability.target_electrons - (atom.valence_electrons + count))
            self.assertEqual(stability.needs_electrons, expected, (element, count))

    def test_only_incident_bonds_are_counted(self):
        carbon = Atom(id=1, element="C")
        bonds = [Bond(id=1, a1_id=2, a2_id=1, order=2), Bond(id=2, a1_id=2, a2_id=3, order=3)]
        self.assertEqual([b.id for b in incident_bonds(carbon, bonds)], [1])
        self.assertEqual(bond_order_sum(carbon, bonds), 2)


if __name__ == "__main__":
    unittest.main()
