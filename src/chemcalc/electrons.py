"""Contabilidad electrónica por átomo: regla del octeto/dueto y carga formal.

Las dos cuentas usan supuestos distintos y se mantienen separadas:

- `check_octet_rule` cuenta `valencia + suma de órdenes` alrededor del átomo.
- `calculate_formal_charge` cuenta `2 * suma de órdenes` electrones de
  enlace e infiere los no enlazantes como lo que falte para el objetivo.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, List

from .valence import canonical_symbol, target_electrons

if TYPE_CHECKING:
    from core.model import Atom, Bond


@dataclass(frozen=True)
class AtomStability:
    """Estado de estabilidad derivado para un átomo."""
    atom_id: int
    element: str
    current_electrons: int
    target_electrons: int
    needs_electrons: int
    formal_charge: int
    is_stable: bool
    octet_satisfied: bool

    @property
    def is_overfilled(self) -> bool:
        """Verdadero si el átomo supera su objetivo de electrones."""
        return self.current_electrons > self.target_electrons


def incident_bonds(atom: "Atom", bonds: Iterable["Bond"]) -> List["Bond"]:
    """Enlaces que tocan al átomo, comparando por ID."""
    return [bond for bond in bonds if bond.a1_id == atom.id or bond.a2_id == atom.id]


def bond_order_sum(atom: "Atom", bonds: Iterable["Bond"]) -> int:
    """Suma de órdenes de los enlaces incidentes en el átomo."""
    return sum(bond.order for bond in incident_bonds(atom, bonds))


def calculate_formal_charge(atom: "Atom", bonds: Iterable["Bond"]) -> int:
    """Calcula la carga formal del átomo a partir de sus enlaces.

    Los electrones no enlazantes se infieren como los que faltan para el
    octeto/dueto contando solo los electrones de enlace (nunca negativos).

    Args:
        atom: Átomo a evaluar.
        bonds: Enlaces de la molécula (se filtran los incidentes).

    Returns:
        `valencia - no_enlazantes - suma_de_órdenes`.
    """
    order_sum = bond_order_sum(atom, bonds)
    target = target_electrons(atom.element)
    nonbonding = max(0, target - 2 * order_sum)
    return atom.valence_electrons - nonbonding - order_sum


def check_octet_rule(atom: "Atom", bonds: Iterable["Bond"]) -> AtomStability:
    """Evalúa la regla del octeto (o dueto para H) sobre un átomo.

    Args:
        atom: Átomo a evaluar.
        bonds: Enlaces de la molécula.

    Returns:
        `AtomStability` con el conteo de electrones y el déficit.

    Side Effects:
        No tiene efectos laterales.
    """
    bonds = list(bonds)
    target = target_electrons(atom.element)
    current = atom.valence_electrons + bond_order_sum(atom, bonds)
    satisfied = current >= target
    return AtomStability(
        atom_id=atom.id,
        element=canonical_symbol(atom.element),
        current_electrons=current,
        target_electrons=target,
        needs_electrons=max(0, target - current),
        formal_charge=calculate_formal_charge(atom, bonds),
        is_stable=satisfied,
        octet_satisfied=satisfied,
    )


def annotate_formal_charges(atoms: Iterable["Atom"], bonds: Iterable["Bond"]) -> List["Atom"]:
    """Devuelve copias de los átomos con `formal_charge` recalculada.

    Side Effects:
        No modifica los átomos recibidos.
    """
    bonds = list(bonds)
    return [replace(atom, formal_charge=calculate_formal_charge(atom, bonds)) for atom in atoms]
