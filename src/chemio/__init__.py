"""Entrada/salida de moléculas: plantillas predefinidas y puente con RDKit."""

from .errors import ChemIOError, PresetNotFound, RDKitUnavailable
from .presets import load_preset, preset_names

__all__ = [
    "ChemIOError",
    "PresetNotFound",
    "RDKitUnavailable",
    "load_preset",
    "preset_names",
]
