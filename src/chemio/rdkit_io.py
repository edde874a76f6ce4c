"""Puente entre `MolGraph` y RDKit (SMILES y bloques MOL).

El motor de validación solo trabaja con átomos explícitos, así que la
importación añade los hidrógenos como átomos reales y kekuliza los anillos
aromáticos para que todos los enlaces tengan orden 1, 2 o 3.
"""

from __future__ import annotations

import logging
from typing import Dict

from core.model import MolGraph
from chemcalc.valence import canonical_symbol
from .errors import ChemIOError, RDKitUnavailable

try:
    from rdkit import Chem
    from rdkit.Chem import AllChem
except ImportError:  # pragma: no cover - optional dependency at runtime
    Chem = None
    AllChem = None

logger = logging.getLogger(__name__)


def _require_rdkit():
    if Chem is None or AllChem is None:
        raise RDKitUnavailable("RDKit no disponible")


def _ensure_ring_info(mol) -> None:
    if hasattr(Chem, "FastFindRings"):
        Chem.FastFindRings(mol)
    else:
        Chem.GetSymmSSSR(mol)


def molgraph_to_rdkit_with_map(molgraph: MolGraph):
    """Convierte un `MolGraph` en un `Chem.Mol` sin sanitizar.

    Los hidrógenos del grafo se exportan como átomos explícitos y no se
    añaden hidrógenos implícitos.

    Returns:
        Tupla `(mol, id_map)` con el mapeo ID de átomo -> índice RDKit.

    Raises:
        RDKitUnavailable: Si RDKit no está instalado.
        ChemIOError: Si un símbolo no es un elemento que RDKit reconozca.
    """
    _require_rdkit()
    rw = Chem.RWMol()
    id_map: Dict[int, int] = {}

    for atom in sorted(molgraph.atoms.values(), key=lambda a: a.id):
        try:
            rd_atom = Chem.Atom(canonical_symbol(atom.element))
        except (RuntimeError, ValueError) as exc:
            raise ChemIOError(f"RDKit cannot build element {atom.element!r}") from exc
        rd_atom.SetFormalCharge(atom.formal_charge)
        rd_atom.SetNoImplicit(True)
        id_map[atom.id] = rw.AddAtom(rd_atom)

    bond_types = {2: Chem.BondType.DOUBLE, 3: Chem.BondType.TRIPLE}
    for bond in molgraph.bonds.values():
        begin = id_map.get(bond.a1_id)
        end = id_map.get(bond.a2_id)
        if begin is None or end is None or begin == end:
            logger.debug("Skipping bond %s with invalid endpoints", bond.id)
            continue
        # RDKit no admite dos enlaces entre el mismo par de átomos.
        if rw.GetBondBetweenAtoms(begin, end) is None:
            rw.AddBond(begin, end, bond_types.get(bond.order, Chem.BondType.SINGLE))

    mol = rw.GetMol()
    mol.UpdatePropertyCache(strict=False)
    _ensure_ring_info(mol)
    conf = Chem.Conformer(mol.GetNumAtoms())
    for atom_id, idx in id_map.items():
        atom = molgraph.atoms[atom_id]
        conf.SetAtomPosition(idx, (atom.x, atom.y, atom.z))
    mol.AddConformer(conf, assignId=True)
    return mol, id_map


def molgraph_to_rdkit(molgraph: MolGraph):
    mol, _ = molgraph_to_rdkit_with_map(molgraph)
    return mol


def molgraph_to_smiles(molgraph: MolGraph) -> str:
    mol = molgraph_to_rdkit(molgraph)
    return Chem.MolToSmiles(mol, canonical=True)


def molgraph_to_molfile(molgraph: MolGraph) -> str:
    mol = molgraph_to_rdkit(molgraph)
    return Chem.MolToMolBlock(mol)


def smiles_to_molgraph(smiles: str, add_hydrogens: bool = True) -> MolGraph:
    """Importa un SMILES como `MolGraph` con hidrógenos explícitos.

    Raises:
        ChemIOError: Si el SMILES no se puede interpretar.
    """
    _require_rdkit()
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ChemIOError(f"Invalid SMILES: {smiles!r}")
    return rdkit_to_molgraph(mol, add_hydrogens=add_hydrogens)


def molfile_to_molgraph(molfile: str, add_hydrogens: bool = True) -> MolGraph:
    _require_rdkit()
    mol = Chem.MolFromMolBlock(molfile, sanitize=True)
    if mol is None:
        raise ChemIOError("Invalid MOL block")
    return rdkit_to_molgraph(mol, add_hydrogens=add_hydrogens)


def rdkit_to_molgraph(mol, add_hydrogens: bool = True) -> MolGraph:
    """Convierte un `Chem.Mol` sanitizado en `MolGraph`.

    Args:
        mol: Molécula RDKit.
        add_hydrogens: Si se convierten los H implícitos en átomos.

    Returns:
        Grafo con coordenadas 2D escaladas a la longitud de enlace por defecto.

    Raises:
        ChemIOError: Si `mol` es `None`.
    """
    _require_rdkit()
    if mol is None:
        raise ChemIOError("Mol inválido")
    mol = Chem.Mol(mol)
    if add_hydrogens:
        mol = Chem.AddHs(mol, addCoords=mol.GetNumConformers() > 0)
    Chem.Kekulize(mol, clearAromaticFlags=True)
    if mol.GetNumConformers() == 0:
        AllChem.Compute2DCoords(mol)
    conf = mol.GetConformer()

    graph = MolGraph()
    idx_map: Dict[int, int] = {}
    for atom in mol.GetAtoms():
        idx = atom.GetIdx()
        pos = conf.GetAtomPosition(idx)
        new_atom = graph.add_atom(atom.GetSymbol(), pos.x, pos.y, pos.z)
        new_atom.formal_charge = atom.GetFormalCharge()
        idx_map[idx] = new_atom.id

    orders = {Chem.BondType.DOUBLE: 2, Chem.BondType.TRIPLE: 3}
    for bond in mol.GetBonds():
        graph.add_bond(
            idx_map[bond.GetBeginAtomIdx()],
            idx_map[bond.GetEndAtomIdx()],
            orders.get(bond.GetBondType(), 1),
        )

    _scale_to_default(graph)
    return graph


def _scale_to_default(graph: MolGraph, target: float = 40.0) -> None:
    if not graph.bonds:
        return
    lengths = []
    for bond in graph.bonds.values():
        a1 = graph.atoms[bond.a1_id]
        a2 = graph.atoms[bond.a2_id]
        dx = a2.x - a1.x
        dy = a2.y - a1.y
        dz = a2.z - a1.z
        lengths.append((dx * dx + dy * dy + dz * dz) ** 0.5)
    avg = sum(lengths) / len(lengths)
    if avg <= 0:
        return
    scale = target / avg
    for atom in graph.atoms.values():
        atom.x *= scale
        atom.y *= scale
        atom.z *= scale
