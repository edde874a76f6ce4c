"""Tabla de electrones de valencia y reglas por elemento.

Cada símbolo canónico se asocia a un registro inmutable `ElementRules` con
sus electrones de valencia, los tipos de enlace admitidos y el tope de la
suma de órdenes de enlace. Los símbolos desconocidos reciben `DEFAULT_RULES`
sin lanzar errores.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

logger = logging.getLogger(__name__)

SINGLE = "single"
DOUBLE = "double"
TRIPLE = "triple"


@dataclass(frozen=True)
class ElementRules:
    """Reglas estáticas de un elemento para el validador."""
    symbol: str
    name: str
    valence_electrons: int
    allowed_bond_types: Tuple[str, ...] = (SINGLE,)
    max_total_bond_order: int = 4


DEFAULT_RULES = ElementRules(symbol="", name="", valence_electrons=4)

# (símbolo, nombre, electrones de valencia). Grupos principales según su
# número de grupo; metales de transición, lantánidos y actínidos con su
# valencia más habitual.
_VALENCE_DATA: Tuple[Tuple[str, str, int], ...] = (
    ("H", "Hydrogen", 1), ("He", "Helium", 2),
    ("Li", "Lithium", 1), ("Be", "Beryllium", 2), ("B", "Boron", 3),
    ("C", "Carbon", 4), ("N", "Nitrogen", 5), ("O", "Oxygen", 6),
    ("F", "Fluorine", 7), ("Ne", "Neon", 8),
    ("Na", "Sodium", 1), ("Mg", "Magnesium", 2), ("Al", "Aluminium", 3),
    ("Si", "Silicon", 4), ("P", "Phosphorus", 5), ("S", "Sulfur", 6),
    ("Cl", "Chlorine", 7), ("Ar", "Argon", 8),
    ("K", "Potassium", 1), ("Ca", "Calcium", 2),
    ("Sc", "Scandium", 3), ("Ti", "Titanium", 4), ("V", "Vanadium", 5),
    ("Cr", "Chromium", 6), ("Mn", "Manganese", 7), ("Fe", "Iron", 2),
    ("Co", "Cobalt", 2), ("Ni", "Nickel", 2), ("Cu", "Copper", 1),
    ("Zn", "Zinc", 2),
    ("Ga", "Gallium", 3), ("Ge", "Germanium", 4), ("As", "Arsenic", 5),
    ("Se", "Selenium", 6), ("Br", "Bromine", 7), ("Kr", "Krypton", 8),
    ("Rb", "Rubidium", 1), ("Sr", "Strontium", 2),
    ("Y", "Yttrium", 3), ("Zr", "Zirconium", 4), ("Nb", "Niobium", 5),
    ("Mo", "Molybdenum", 6), ("Tc", "Technetium", 7), ("Ru", "Ruthenium", 2),
    ("Rh", "Rhodium", 2), ("Pd", "Palladium", 2), ("Ag", "Silver", 1),
    ("Cd", "Cadmium", 2),
    ("In", "Indium", 3), ("Sn", "Tin", 4), ("Sb", "Antimony", 5),
    ("Te", "Tellurium", 6), ("I", "Iodine", 7), ("Xe", "Xenon", 8),
    ("Cs", "Caesium", 1), ("Ba", "Barium", 2),
    ("La", "Lanthanum", 3), ("Ce", "Cerium", 4), ("Pr", "Praseodymium", 3),
    ("Nd", "Neodymium", 3), ("Pm", "Promethium", 3), ("Sm", "Samarium", 3),
    ("Eu", "Europium", 3), ("Gd", "Gadolinium", 3), ("Tb", "Terbium", 3),
    ("Dy", "Dysprosium", 3), ("Ho", "Holmium", 3), ("Er", "Erbium", 3),
    ("Tm", "Thulium", 3), ("Yb", "Ytterbium", 3), ("Lu", "Lutetium", 3),
    ("Hf", "Hafnium", 4), ("Ta", "Tantalum", 5), ("W", "Tungsten", 6),
    ("Re", "Rhenium", 7), ("Os", "Osmium", 2), ("Ir", "Iridium", 2),
    ("Pt", "Platinum", 2), ("Au", "Gold", 1), ("Hg", "Mercury", 2),
    ("Tl", "Thallium", 3), ("Pb", "Lead", 4), ("Bi", "Bismuth", 5),
    ("Po", "Polonium", 6), ("At", "Astatine", 7), ("Rn", "Radon", 8),
    ("Fr", "Francium", 1), ("Ra", "Radium", 2),
    ("Ac", "Actinium", 3), ("Th", "Thorium", 4), ("Pa", "Protactinium", 5),
    ("U", "Uranium", 6), ("Np", "Neptunium", 6), ("Pu", "Plutonium", 6),
    ("Am", "Americium", 6), ("Cm", "Curium", 3), ("Bk", "Berkelium", 3),
    ("Cf", "Californium", 3), ("Es", "Einsteinium", 3), ("Fm", "Fermium", 3),
    ("Md", "Mendelevium", 3), ("No", "Nobelium", 3), ("Lr", "Lawrencium", 3),
    ("Rf", "Rutherfordium", 4), ("Db", "Dubnium", 5), ("Sg", "Seaborgium", 6),
    ("Bh", "Bohrium", 7), ("Hs", "Hassium", 8), ("Mt", "Meitnerium", 9),
    ("Ds", "Darmstadtium", 2), ("Rg", "Roentgenium", 1),
    ("Cn", "Copernicium", 2),
    ("Nh", "Nihonium", 3), ("Fl", "Flerovium", 4), ("Mc", "Moscovium", 5),
    ("Lv", "Livermorium", 6), ("Ts", "Tennessine", 7), ("Og", "Oganesson", 8),
)

# Tipos de enlace y tope de suma de órdenes para los elementos con reglas
# propias; el resto usa enlace simple y tope 4.
_BOND_RULES: Mapping[str, Tuple[Tuple[str, ...], int]] = {
    "H": ((SINGLE,), 1),
    "F": ((SINGLE,), 1),
    "Cl": ((SINGLE,), 1),
    "Br": ((SINGLE,), 1),
    "I": ((SINGLE,), 1),
    "O": ((SINGLE, DOUBLE), 2),
    "S": ((SINGLE, DOUBLE), 4),
    "P": ((SINGLE, DOUBLE), 4),
    "Si": ((SINGLE, DOUBLE), 4),
    "C": ((SINGLE, DOUBLE, TRIPLE), 4),
    "N": ((SINGLE, DOUBLE, TRIPLE), 4),
    "B": ((SINGLE,), 3),
}


def _build_table() -> Mapping[str, ElementRules]:
    table = {}
    for symbol, name, valence in _VALENCE_DATA:
        allowed, max_total = _BOND_RULES.get(
            symbol, (DEFAULT_RULES.allowed_bond_types, DEFAULT_RULES.max_total_bond_order)
        )
        table[symbol] = ElementRules(
            symbol=symbol,
            name=name,
            valence_electrons=valence,
            allowed_bond_types=allowed,
            max_total_bond_order=max_total,
        )
    return MappingProxyType(table)


ELEMENT_TABLE: Mapping[str, ElementRules] = _build_table()


def canonical_symbol(symbol: str) -> str:
    """Normaliza un símbolo químico (primera letra mayúscula, resto minúscula).

    Args:
        symbol: Símbolo en cualquier capitalización (p. ej., "cl", "CL").

    Returns:
        Símbolo canónico (p. ej., "Cl"). Una cadena vacía se devuelve igual.
    """
    symbol = str(symbol).strip()
    if not symbol:
        return symbol
    return symbol[0].upper() + symbol[1:].lower()


def element_rules(symbol: str) -> ElementRules:
    """Obtiene las reglas de un elemento sin distinguir mayúsculas.

    Args:
        symbol: Símbolo del elemento.

    Returns:
        El registro del elemento o `DEFAULT_RULES` si no se reconoce.
    """
    rules = ELEMENT_TABLE.get(canonical_symbol(symbol))
    if rules is None:
        logger.debug("Unknown element %r, using default rules", symbol)
        return DEFAULT_RULES
    return rules


def is_known_element(symbol: str) -> bool:
    return canonical_symbol(symbol) in ELEMENT_TABLE


def get_valence_electrons(symbol: str) -> int:
    """Devuelve los electrones de valencia de un elemento (4 si es desconocido)."""
    return element_rules(symbol).valence_electrons


def element_name(symbol: str) -> str:
    """Nombre del elemento, o el símbolo canónico si no está en la tabla."""
    rules = ELEMENT_TABLE.get(canonical_symbol(symbol))
    if rules is None:
        return canonical_symbol(symbol)
    return rules.name


def target_electrons(symbol: str) -> int:
    """Electrones objetivo: 2 para H (regla del dueto), 8 para el resto."""
    return 2 if canonical_symbol(symbol) == "H" else 8
