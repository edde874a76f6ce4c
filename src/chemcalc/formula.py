"""Generación de fórmulas moleculares en orden de Hill.

Cuenta los átomos declarados por elemento y formatea la fórmula con el
carbono primero, el hidrógeno después y el resto en orden alfabético.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable

from .valence import canonical_symbol

if TYPE_CHECKING:
    from core.model import Atom

EMPTY_FORMULA = "Empty"
UNKNOWN_SYMBOL = "?"


def count_elements(atoms: Iterable["Atom"]) -> Dict[str, int]:
    """Cuenta los átomos por elemento.

    Todos los símbolos se normalizan ("cl" -> "Cl", "xx" -> "Xx"); un símbolo
    vacío se cuenta como `UNKNOWN_SYMBOL`.

    Args:
        atoms: Átomos de la molécula.

    Returns:
        Diccionario elemento -> cantidad.
    """
    counts: Dict[str, int] = {}
    for atom in atoms:
        element = canonical_symbol(atom.element) or UNKNOWN_SYMBOL
        counts[element] = counts.get(element, 0) + 1
    return counts


def format_formula(formula_dict: Dict[str, int]) -> str:
    """Formatea una fórmula usando el orden de Hill (C, H, luego alfabético).

    Args:
        formula_dict: Diccionario con símbolos de elementos y cantidades.

    Returns:
        Cadena con la fórmula formateada (p. ej., "CH4O"), o "" si no hay
        elementos con cantidad positiva.

    Side Effects:
        No tiene efectos laterales.
    """
    order = []
    if formula_dict.get("C", 0) > 0:
        order.append("C")
    if formula_dict.get("H", 0) > 0:
        order.append("H")
    order.extend(sorted(e for e in formula_dict if e not in {"C", "H"}))

    parts = []
    for element in order:
        count = formula_dict[element]
        if count <= 0:
            continue
        parts.append(element if count == 1 else f"{element}{count}")
    return "".join(parts)


def get_molecular_formula(atoms: Iterable["Atom"]) -> str:
    """Fórmula molecular canónica de un conjunto de átomos.

    Returns:
        La fórmula en orden de Hill, o "Empty" si no hay átomos.
    """
    counts = count_elements(atoms)
    if not counts:
        return EMPTY_FORMULA
    return format_formula(counts)
