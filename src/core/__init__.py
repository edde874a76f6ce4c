"""API pública del núcleo químico.

Reexpone las clases base del modelo químico para facilitar importaciones.
"""

from core.model import Atom, Bond, MolGraph

__all__ = ["Atom", "Bond", "MolGraph"]
