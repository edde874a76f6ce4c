"""API pública del motor de validación de estructuras moleculares."""

from .bonds import (
    BondOrderCheck,
    BondType,
    allowed_bond_orders,
    get_allowed_bond_types,
    get_max_bond_order,
    get_max_total_bond_order,
    is_bond_type_allowed,
    validate_bond_order,
)
from .electrons import AtomStability, annotate_formal_charges, calculate_formal_charge, check_octet_rule
from .formula import format_formula, get_molecular_formula
from .options import ValidationOptions
from .recognize import recognize_molecule
from .valence import canonical_symbol, get_valence_electrons
from .validator import ValidationResult, validate_molecule

__all__ = [
    "AtomStability",
    "BondOrderCheck",
    "BondType",
    "ValidationOptions",
    "ValidationResult",
    "allowed_bond_orders",
    "annotate_formal_charges",
    "calculate_formal_charge",
    "canonical_symbol",
    "check_octet_rule",
    "format_formula",
    "get_allowed_bond_types",
    "get_max_bond_order",
    "get_max_total_bond_order",
    "get_molecular_formula",
    "get_valence_electrons",
    "is_bond_type_allowed",
    "recognize_molecule",
    "validate_bond_order",
    "validate_molecule",
]
