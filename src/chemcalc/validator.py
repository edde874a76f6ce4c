"""Validación de moléculas completas.

`validate_molecule` combina la contabilidad electrónica por átomo, las
restricciones de enlace y la fórmula de Hill en un `ValidationResult`. Los
problemas se reportan como datos (avisos y pistas); la función nunca lanza
excepciones por entradas mal formadas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from .bonds import get_max_total_bond_order, validate_bond_order
from .electrons import AtomStability, bond_order_sum, check_octet_rule
from .formula import EMPTY_FORMULA, get_molecular_formula
from .options import DEFAULT_OPTIONS, ValidationOptions
from .valence import canonical_symbol, element_name, get_valence_electrons

if TYPE_CHECKING:
    from core.model import Atom, Bond

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Informe de validación de una molécula."""
    is_stable: bool
    is_valid: bool
    formula: str
    total_charge: int = 0
    warnings: List[str] = field(default_factory=list)
    hints: List[str] = field(default_factory=list)
    # Mismo orden que los átomos de entrada; cada registro lleva su `atom_id`.
    atom_stability: List[AtomStability] = field(default_factory=list)

    def stability_of(self, atom_id: int) -> Optional[AtomStability]:
        """Busca el registro de estabilidad de un átomo por su ID."""
        for stability in self.atom_stability:
            if stability.atom_id == atom_id:
                return stability
        return None

    @property
    def unstable_atoms(self) -> List[int]:
        return [s.atom_id for s in self.atom_stability if not s.is_stable]


def _need_suggestion(element: str, needs: int) -> str:
    if element == "C" and needs == 4:
        return "4 H atoms or 2 double bonds"
    if element == "C" and needs == 2:
        return "2 H atoms or 1 double bond"
    if element == "N" and needs == 3:
        return "3 H atoms or bonds"
    if element == "O" and needs == 2:
        return "2 H atoms or 1 double bond"
    if element == "H" and needs == 1:
        return "a bond to C, N, or O"
    if needs == 1:
        return "1 more bond"
    if needs == 2:
        return "2 more bonds or 1 double bond"
    return f"{needs} more bonds"


def _hint(stability: AtomStability, options: ValidationOptions) -> str:
    rule = "duet" if stability.target_electrons == 2 else "octet"
    text = (
        f"{element_name(stability.element)} needs {stability.needs_electrons} "
        f"more electron(s) to complete its {rule}."
    )
    if options.suggest_fixes:
        text += f" Try adding {_need_suggestion(stability.element, stability.needs_electrons)}."
    return text


def _label(atom: "Atom") -> str:
    return f"{element_name(atom.element)} (atom {atom.id})"


def _structure_warnings(atoms: Sequence["Atom"], bonds: Sequence["Bond"]) -> List[str]:
    warnings: List[str] = []
    seen_ids = set()
    for atom in atoms:
        if atom.id in seen_ids:
            warnings.append(f"Atom id {atom.id} is used by more than one atom")
        seen_ids.add(atom.id)

    pairs: Dict[frozenset, List[int]] = {}
    for bond in bonds:
        if bond.a1_id == bond.a2_id:
            warnings.append(f"Bond {bond.id} connects atom {bond.a1_id} to itself")
            continue
        for end_id in (bond.a1_id, bond.a2_id):
            if end_id not in seen_ids:
                warnings.append(f"Bond {bond.id} references missing atom {end_id}")
        pairs.setdefault(frozenset((bond.a1_id, bond.a2_id)), []).append(bond.id)

    for pair, bond_ids in pairs.items():
        if len(bond_ids) > 1:
            a1, a2 = sorted(pair)
            ids = ", ".join(str(bond_id) for bond_id in bond_ids)
            warnings.append(
                f"Atoms {a1} and {a2} are joined by more than one bond (bonds {ids}); "
                f"use a higher bond order instead"
            )
    return warnings


def _bond_warnings(atoms_by_id: Dict[int, "Atom"], bonds: Sequence["Bond"]) -> List[str]:
    warnings: List[str] = []
    for bond in bonds:
        atom1 = atoms_by_id.get(bond.a1_id)
        atom2 = atoms_by_id.get(bond.a2_id)
        if atom1 is None or atom2 is None or atom1 is atom2:
            continue
        check = validate_bond_order(atom1.element, atom2.element, bond.order)
        if not check.valid:
            pair = f"{canonical_symbol(atom1.element)}-{canonical_symbol(atom2.element)}"
            warnings.append(f"Bond {bond.id} ({pair}, order {bond.order}): {check.reason}")
    return warnings


def validate_molecule(
    atoms: Sequence["Atom"],
    bonds: Sequence["Bond"],
    options: Optional[ValidationOptions] = None,
) -> ValidationResult:
    """Valida una molécula completa.

    Args:
        atoms: Átomos de la molécula (se respeta su orden).
        bonds: Enlaces que los conectan, referenciados por ID de átomo.
        options: Opciones de avisos y pistas; `DEFAULT_OPTIONS` si es `None`.

    Returns:
        `ValidationResult` completo. Una molécula sin átomos produce
        `is_valid=False` y fórmula "Empty".

    Side Effects:
        No modifica los átomos ni los enlaces recibidos.
    """
    options = options or DEFAULT_OPTIONS
    atoms = list(atoms)
    bonds = list(bonds)

    if not atoms:
        return ValidationResult(is_stable=False, is_valid=False, formula=EMPTY_FORMULA)

    formula = get_molecular_formula(atoms)
    atom_stability = [check_octet_rule(atom, bonds) for atom in atoms]
    total_charge = sum(stability.formal_charge for stability in atom_stability)

    atoms_by_id: Dict[int, "Atom"] = {}
    for atom in atoms:
        atoms_by_id.setdefault(atom.id, atom)

    warnings: List[str] = []
    if options.warn_structure:
        warnings.extend(_structure_warnings(atoms, bonds))
    warnings.extend(_bond_warnings(atoms_by_id, bonds))

    for atom, stability in zip(atoms, atom_stability):
        order_sum = bond_order_sum(atom, bonds)
        max_total = get_max_total_bond_order(atom.element)
        if order_sum > max_total:
            warnings.append(
                f"{_label(atom)} exceeds its maximum total bond order "
                f"({order_sum} > {max_total})"
            )
        if options.warn_valence_cache:
            expected = get_valence_electrons(atom.element)
            if atom.valence_electrons != expected:
                warnings.append(
                    f"{_label(atom)} declares {atom.valence_electrons} valence "
                    f"electrons, expected {expected}"
                )
        if options.warn_high_formal_charge and abs(stability.formal_charge) > 1:
            warnings.append(f"{_label(atom)} has high formal charge ({stability.formal_charge:+d})")
        if options.warn_expanded_octet and stability.is_overfilled:
            warnings.append(
                f"{_label(atom)} has too many electrons "
                f"({stability.current_electrons}/{stability.target_electrons})"
            )

    hints = [_hint(s, options) for s in atom_stability if s.needs_electrons > 0]
    is_stable = all(s.is_stable for s in atom_stability)

    logger.debug(
        "Validated %s: stable=%s charge=%d warnings=%d hints=%d",
        formula, is_stable, total_charge, len(warnings), len(hints),
    )
    return ValidationResult(
        is_stable=is_stable,
        is_valid=True,
        formula=formula,
        total_charge=total_charge,
        warnings=warnings,
        hints=hints,
        atom_stability=atom_stability,
    )
