"""Reconocimiento de moléculas conocidas a partir de su fórmula de Hill."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, List, Mapping, Optional, Tuple

from .formula import EMPTY_FORMULA, get_molecular_formula

if TYPE_CHECKING:
    from core.model import Atom, Bond

# Fórmula de Hill -> nombres (el primero es el nombre principal).
KNOWN_MOLECULES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "H2O": ("Water",),
    "CH4": ("Methane",),
    "C2H6": ("Ethane",),
    "C2H4": ("Ethylene", "Ethene"),
    "C2H2": ("Acetylene", "Ethyne"),
    "C3H8": ("Propane",),
    "C6H6": ("Benzene",),
    "CO2": ("Carbon Dioxide",),
    "CO": ("Carbon Monoxide",),
    "H2O2": ("Hydrogen Peroxide",),
    "H3N": ("Ammonia",),
    "N2": ("Nitrogen Gas",),
    "NO2": ("Nitrogen Dioxide",),
    "HCl": ("Hydrochloric Acid", "Hydrogen Chloride"),
    "H2O4S": ("Sulfuric Acid",),
    "HNO3": ("Nitric Acid",),
    "CH4O": ("Methanol",),
    "C2H6O": ("Ethanol", "Dimethyl Ether"),
    "H2": ("Hydrogen Gas",),
    "O2": ("Oxygen Gas",),
    "F2": ("Fluorine Gas",),
    "Cl2": ("Chlorine Gas",),
    "Br2": ("Bromine",),
    "I2": ("Iodine",),
})


def lookup_formula(formula: str) -> Optional[List[str]]:
    """Busca una fórmula de Hill en el catálogo.

    Returns:
        Lista de nombres (copia nueva en cada llamada) o `None`.
    """
    names = KNOWN_MOLECULES.get(formula)
    if names is None:
        return None
    return list(names)


def recognize_molecule(
    atoms: Iterable["Atom"],
    bonds: Optional[Iterable["Bond"]] = None,
) -> Optional[List[str]]:
    """Identifica la molécula por su composición.

    Solo se usa la fórmula calculada a partir de los átomos; los enlaces se
    aceptan por simetría con `validate_molecule` pero no se consultan.

    Args:
        atoms: Átomos de la molécula.
        bonds: Enlaces (ignorados).

    Returns:
        Lista de nombres coincidentes o `None` si la fórmula no está en el
        catálogo.
    """
    formula = get_molecular_formula(atoms)
    if formula == EMPTY_FORMULA:
        return None
    return lookup_formula(formula)
