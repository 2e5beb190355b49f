"""Windows-specific interpreter lookup via PEP 514 registry entries."""

from __future__ import annotations

from ._pep514 import RegistryEntry, _run, discover_pythons
from ._provider import RegistryInterpreterProvider

__all__ = [
    "RegistryEntry",
    "RegistryInterpreterProvider",
    "_run",
    "discover_pythons",
]
