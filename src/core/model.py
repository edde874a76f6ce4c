"""Modelos de datos base del constructor de moléculas.

Este módulo concentra las estructuras que representan el grafo molecular
(átomos y enlaces). El motor de validación (`chemcalc`) trabaja sobre listas
de `Atom` y `Bond`; `MolGraph` es el contenedor editable que usan las
plantillas, la importación con RDKit y la interfaz.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from chemcalc.options import ValidationOptions
from chemcalc.valence import get_valence_electrons
from chemcalc.validator import ValidationResult, validate_molecule


@dataclass
class Atom:
    """Representa un átomo en el grafo molecular.

    `valence_electrons` es una copia de la tabla de valencia; si se omite se
    rellena a partir del elemento. `formal_charge` es un campo de salida.
    """
    id: int
    element: str
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    valence_electrons: Optional[int] = None
    formal_charge: int = 0

    def __post_init__(self) -> None:
        if self.valence_electrons is None:
            self.valence_electrons = get_valence_electrons(self.element)

    @property
    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass
class Bond:
    """Representa un enlace químico entre dos átomos (por ID)."""
    id: int
    a1_id: int
    a2_id: int
    order: int = 1

    def other(self, atom_id: int) -> int:
        """Devuelve el ID del extremo opuesto a `atom_id`."""
        return self.a2_id if self.a1_id == atom_id else self.a1_id


class MolGraph:
    """Grafo molecular mutable con operaciones de edición básicas."""

    def __init__(self) -> None:
        """Inicializa el grafo vacío y contadores internos de IDs."""
        self.atoms: Dict[int, Atom] = {}
        self.bonds: Dict[int, Bond] = {}
        self._next_atom_id = 1
        self._next_bond_id = 1

    def add_atom(
        self,
        element: str,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        atom_id: Optional[int] = None,
    ) -> Atom:
        """Crea y registra un átomo en el grafo.

        Args:
            element: Símbolo del elemento químico (p. ej., "C", "O").
            x: Posición X.
            y: Posición Y.
            z: Posición Z (se conserva, el validador no la usa).
            atom_id: ID explícito si se desea restaurar desde una plantilla.

        Returns:
            El átomo creado, con `valence_electrons` tomado de la tabla.

        Side Effects:
            Incrementa el contador de IDs y modifica `self.atoms`.
        """
        if atom_id is None:
            atom_id = self._next_atom_id
            self._next_atom_id += 1
        else:
            self._next_atom_id = max(self._next_atom_id, atom_id + 1)
        atom = Atom(id=atom_id, element=element, x=x, y=y, z=z)
        self.atoms[atom_id] = atom
        return atom

    def remove_atom(self, atom_id: int) -> tuple[Atom, List[Bond]]:
        """Elimina un átomo y todos los enlaces conectados.

        Args:
            atom_id: Identificador del átomo a eliminar.

        Returns:
            Una tupla con el átomo eliminado y la lista de enlaces removidos.

        Side Effects:
            Modifica `self.atoms` y `self.bonds`.
        """
        atom = self.atoms.pop(atom_id)
        removed_bonds = [self.remove_bond(bond.id) for bond in self.bonds_of(atom_id)]
        return atom, removed_bonds

    def add_bond(
        self,
        a1_id: int,
        a2_id: int,
        order: int = 1,
        bond_id: Optional[int] = None,
    ) -> Bond:
        """Crea y registra un enlace entre dos átomos.

        El grafo no corrige enlaces ilegales ni duplicados; esos casos se
        reportan como avisos en `validate`.

        Args:
            a1_id: ID del primer átomo.
            a2_id: ID del segundo átomo.
            order: Orden de enlace (1, 2, 3).
            bond_id: ID explícito si se restaura desde una plantilla.

        Returns:
            El enlace creado.

        Side Effects:
            Incrementa el contador de IDs y modifica `self.bonds`.
        """
        if bond_id is None:
            bond_id = self._next_bond_id
            self._next_bond_id += 1
        else:
            self._next_bond_id = max(self._next_bond_id, bond_id + 1)
        bond = Bond(id=bond_id, a1_id=a1_id, a2_id=a2_id, order=order)
        self.bonds[bond_id] = bond
        return bond

    def remove_bond(self, bond_id: int) -> Bond:
        return self.bonds.pop(bond_id)

    def get_atom(self, atom_id: int) -> Atom:
        return self.atoms[atom_id]

    def get_bond(self, bond_id: int) -> Bond:
        return self.bonds[bond_id]

    def bonds_of(self, atom_id: int) -> List[Bond]:
        """Enlaces que tocan al átomo indicado."""
        return [
            bond for bond in self.bonds.values()
            if bond.a1_id == atom_id or bond.a2_id == atom_id
        ]

    def find_bond_between(self, a1_id: int, a2_id: int) -> Optional[Bond]:
        """Busca un enlace existente entre dos átomos.

        Args:
            a1_id: ID del primer átomo.
            a2_id: ID del segundo átomo.

        Returns:
            El enlace si existe, o `None` en caso contrario.
        """
        for bond in self.bonds.values():
            if {bond.a1_id, bond.a2_id} == {a1_id, a2_id}:
                return bond
        return None

    def update_atom_position(self, atom_id: int, x: float, y: float, z: Optional[float] = None) -> None:
        atom = self.atoms[atom_id]
        atom.x = x
        atom.y = y
        if z is not None:
            atom.z = z

    def update_atom_element(self, atom_id: int, element: str) -> None:
        """Cambia el elemento químico de un átomo.

        Side Effects:
            Modifica `Atom.element` y actualiza `Atom.valence_electrons`.
        """
        atom = self.atoms[atom_id]
        atom.element = element
        atom.valence_electrons = get_valence_electrons(element)

    def update_bond(self, bond_id: int, order: int) -> Bond:
        bond = self.bonds[bond_id]
        bond.order = order
        return bond

    def clear(self) -> None:
        """Elimina todos los átomos y enlaces del grafo.

        Side Effects:
            Limpia `self.atoms`, `self.bonds` y reinicia contadores.
        """
        self.atoms.clear()
        self.bonds.clear()
        self._next_atom_id = 1
        self._next_bond_id = 1

    def validate(self, options: Optional[ValidationOptions] = None) -> ValidationResult:
        """Valida el grafo con `chemcalc.validator.validate_molecule`.

        Returns:
            El informe de validación; los átomos se evalúan en orden de ID.

        Side Effects:
            No tiene efectos laterales; solo calcula y devuelve resultados.
        """
        atoms = sorted(self.atoms.values(), key=lambda a: a.id)
        bonds = sorted(self.bonds.values(), key=lambda b: b.id)
        return validate_molecule(atoms, bonds, options)
