from __future__ import annotations

import logging
from typing import Final

from conda_discovery._records import InterpreterRecord

from ._pep514 import discover_pythons

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


class RegistryInterpreterProvider:
    """Interpreters registered in the Windows registry, including those of Anaconda and Miniconda installers."""

    def list_interpreters(self) -> list[InterpreterRecord]:  # noqa: PLR6301
        interpreters = [
            InterpreterRecord(
                path=entry.exe,
                display_name=entry.display_name,
                company_display_name=entry.company_display_name,
                version=entry.version,
            )
            for entry in discover_pythons()
        ]
        _LOGGER.debug("registry lists %d interpreter(s)", len(interpreters))
        return interpreters

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


__all__ = [
    "RegistryInterpreterProvider",
]
