"""Key table: strokes, actions, and the registry that binds them."""

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "KeymapResolver",
    "RegistryStats",
    "ResolutionMatch",
    "ResolutionResult",
    "load_default_keymaps",
]
