"""Opciones de configuración del validador de moléculas."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationOptions:
    """Opciones de control de los avisos y pistas del validador."""

    # Añadir a cada pista una sugerencia ("Try adding 1 more bond.").
    suggest_fixes: bool = True
    # Avisar de enlaces duplicados, autoenlaces y referencias a átomos ausentes.
    warn_structure: bool = True
    # Avisar si `Atom.valence_electrons` no coincide con la tabla de valencia.
    warn_valence_cache: bool = True
    # Avisar de cargas formales con |carga| > 1.
    warn_high_formal_charge: bool = False
    # Avisar de átomos con más electrones que su objetivo (octeto expandido).
    warn_expanded_octet: bool = False


DEFAULT_OPTIONS = ValidationOptions()
