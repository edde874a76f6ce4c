"""Restricciones de tipo y orden de enlace entre elementos.

Las reglas son búsquedas estáticas sobre `chemcalc.valence.ELEMENT_TABLE`:
cada elemento admite un subconjunto ordenado de {simple, doble, triple} y un
tope para la suma de órdenes de enlace que concurren en un átomo.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .valence import canonical_symbol, element_rules


class BondType(str, Enum):
    """Tipos de enlace según su orden."""
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"


_ORDER_TO_TYPE: Dict[int, BondType] = {
    1: BondType.SINGLE,
    2: BondType.DOUBLE,
    3: BondType.TRIPLE,
}
_TYPE_TO_ORDER: Dict[BondType, int] = {value: key for key, value in _ORDER_TO_TYPE.items()}

_BOND_NAMES = {1: "Single", 2: "Double", 3: "Triple"}
_BOND_SYMBOLS = {1: "-", 2: "=", 3: "#"}


@dataclass(frozen=True)
class BondOrderCheck:
    """Resultado de `validate_bond_order`.

    Cuando `valid` es falso, `element` y `allowed` identifican al extremo
    que rechaza el enlace y `reason` lo explica en texto.
    """
    valid: bool
    element: Optional[str] = None
    allowed: Tuple[BondType, ...] = ()
    reason: Optional[str] = None


def bond_type_for_order(order: int) -> Optional[BondType]:
    """Convierte un orden (1, 2, 3) en `BondType`; `None` si está fuera de rango."""
    return _ORDER_TO_TYPE.get(order)


def order_for_bond_type(bond_type: BondType | str) -> int:
    return _TYPE_TO_ORDER[BondType(bond_type)]


def get_allowed_bond_types(symbol: str) -> List[BondType]:
    """Tipos de enlace admitidos por un elemento, de menor a mayor orden.

    Args:
        symbol: Símbolo del elemento (sin distinguir mayúsculas).

    Returns:
        Lista ordenada de `BondType`; los símbolos desconocidos solo admiten
        enlace simple.
    """
    return [BondType(value) for value in element_rules(symbol).allowed_bond_types]


def is_bond_type_allowed(element1: str, element2: str, bond_type: BondType | str) -> bool:
    """Indica si ambos extremos admiten el tipo de enlace (relación simétrica)."""
    try:
        bond_type = BondType(bond_type)
    except ValueError:
        return False
    return (
        bond_type in get_allowed_bond_types(element1)
        and bond_type in get_allowed_bond_types(element2)
    )


def get_max_bond_order(element1: str, element2: str) -> int:
    """Orden de enlace máximo entre dos elementos (3, 2 o 1)."""
    if is_bond_type_allowed(element1, element2, BondType.TRIPLE):
        return 3
    if is_bond_type_allowed(element1, element2, BondType.DOUBLE):
        return 2
    return 1


def get_max_total_bond_order(symbol: str) -> int:
    """Tope de la suma de órdenes de enlace alrededor de un átomo del elemento."""
    return element_rules(symbol).max_total_bond_order


def allowed_bond_orders(element1: str, element2: str) -> Dict[int, bool]:
    """Mapa orden -> habilitado, pensado para activar/desactivar controles.

    Args:
        element1: Elemento del primer extremo.
        element2: Elemento del segundo extremo.

    Returns:
        Diccionario `{1: bool, 2: bool, 3: bool}`.
    """
    return {
        order: is_bond_type_allowed(element1, element2, bond_type)
        for order, bond_type in _ORDER_TO_TYPE.items()
    }


def validate_bond_order(element1: str, element2: str, order: int) -> BondOrderCheck:
    """Valida un orden de enlace entre dos elementos.

    Args:
        element1: Elemento del primer extremo.
        element2: Elemento del segundo extremo.
        order: Orden de enlace declarado.

    Returns:
        `BondOrderCheck` válido, o uno inválido que nombra el elemento que
        rechaza el enlace y sus tipos permitidos.

    Side Effects:
        No tiene efectos laterales; nunca lanza excepciones.
    """
    bond_type = bond_type_for_order(order)
    if bond_type is None:
        return BondOrderCheck(
            valid=False,
            allowed=tuple(_ORDER_TO_TYPE.values()),
            reason=f"Bond order {order} is not supported (only 1, 2, 3)",
        )

    for element in (element1, element2):
        allowed = get_allowed_bond_types(element)
        if bond_type not in allowed:
            symbol = canonical_symbol(element)
            allowed_text = ", ".join(item.value for item in allowed)
            return BondOrderCheck(
                valid=False,
                element=symbol,
                allowed=tuple(allowed),
                reason=f"{symbol} cannot form {bond_type.value} bonds (only {allowed_text})",
            )
    return BondOrderCheck(valid=True)


def bond_type_name(order: int) -> str:
    return _BOND_NAMES.get(order, f"Order {order}")


def bond_type_symbol(order: int) -> str:
    return _BOND_SYMBOLS.get(order, "?")
