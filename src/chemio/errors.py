"""Excepciones de la capa de entrada/salida de moléculas."""


class ChemIOError(Exception):
    """Error base de importación, exportación o carga de plantillas."""


class PresetNotFound(ChemIOError, KeyError):
    """Se lanza cuando se pide una plantilla que no existe."""


class RDKitUnavailable(ChemIOError, RuntimeError):
    """Se lanza cuando una operación requiere RDKit y no está instalado."""
