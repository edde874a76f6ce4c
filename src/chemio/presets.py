"""Plantillas de moléculas predefinidas (agua, metano, CO2, amoníaco, benceno).

Las plantillas se guardan en `data/presets.json` con una lista de átomos
(`layout`) y enlaces por índice (`bonds`). Al cargarlas se construye un
`MolGraph` equivalente al que dibujaría el usuario a mano.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List

from core.model import MolGraph
from .errors import ChemIOError, PresetNotFound

logger = logging.getLogger(__name__)

PRESETS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "presets.json")


def _read_presets(path: str = PRESETS_PATH) -> Dict[str, Dict[str, Any]]:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ChemIOError(f"Cannot read presets from {path}: {exc}") from exc


def preset_names(path: str = PRESETS_PATH) -> List[str]:
    """Devuelve los nombres de las plantillas disponibles, ordenados."""
    return sorted(_read_presets(path))


def preset_label(name: str, path: str = PRESETS_PATH) -> str:
    """Etiqueta legible de una plantilla (p. ej., "Carbon Dioxide")."""
    presets = _read_presets(path)
    if name not in presets:
        raise PresetNotFound(name)
    return presets[name].get("label", name)


def build_graph(payload: Dict[str, Any]) -> MolGraph:
    """Construye un `MolGraph` a partir de un diccionario de plantilla.

    Args:
        payload: Diccionario con claves `layout` y `bonds`.

    Returns:
        Grafo con IDs consecutivos desde 1 en el orden del `layout`.

    Raises:
        ChemIOError: Si un enlace referencia un índice inexistente.
    """
    graph = MolGraph()
    atom_ids: List[int] = []
    for entry in payload.get("layout", []):
        atom = graph.add_atom(
            entry["element"],
            float(entry.get("x", 0.0)),
            float(entry.get("y", 0.0)),
            float(entry.get("z", 0.0)),
        )
        atom_ids.append(atom.id)

    for entry in payload.get("bonds", []):
        try:
            a1_id = atom_ids[entry["from"]]
            a2_id = atom_ids[entry["to"]]
        except (IndexError, KeyError) as exc:
            raise ChemIOError(f"Invalid preset bond {entry!r}") from exc
        graph.add_bond(a1_id, a2_id, int(entry.get("order", 1)))
    return graph


def load_preset(name: str, path: str = PRESETS_PATH) -> MolGraph:
    """Carga una plantilla por nombre.

    Args:
        name: Clave de la plantilla (p. ej., "water").
        path: Ruta del archivo JSON de plantillas.

    Returns:
        Un `MolGraph` nuevo en cada llamada.

    Raises:
        PresetNotFound: Si la plantilla no existe.
    """
    presets = _read_presets(path)
    if name not in presets:
        raise PresetNotFound(name)
    logger.debug("Loading preset %s", name)
    return build_graph(presets[name])
