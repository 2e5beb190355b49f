"""Decide which ``conda`` executable to run."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from ._display import is_conda_environment
from ._version import DottedVersion

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ._records import InterpreterRecord

    PathExists = Callable[[str], bool]

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
IS_WIN: Final[bool] = sys.platform == "win32"
CONDA_COMMAND: Final[str] = "conda"
CONDA_LAUNCHER: Final[str] = "conda.exe" if IS_WIN else "conda"


@runtime_checkable
class InterpreterProvider(Protocol):
    """A secondary source of interpreters, used to find a conda installation that is not on ``PATH``."""

    def list_interpreters(self) -> list[InterpreterRecord]: ...


def path_exists(path: str) -> bool:
    try:
        return Path(path).exists()
    except OSError:
        _LOGGER.debug("failed to stat %s", path, exc_info=True)
        return False


def get_latest_version(interpreters: Iterable[InterpreterRecord]) -> InterpreterRecord | None:
    """Pick the interpreter with the highest version; interpreters without a version are not considered."""
    best: tuple[DottedVersion, InterpreterRecord] | None = None
    for interpreter in interpreters:
        if not interpreter.version:
            continue
        try:
            version = DottedVersion.from_string(interpreter.version)
        except ValueError:
            continue
        if best is None or version >= best[0]:
            best = version, interpreter
    return None if best is None else best[1]


class CondaLocator:
    """Resolve the conda binary, degrading to a bare command name looked up on ``PATH``."""

    def __init__(
        self,
        provider: InterpreterProvider | None = None,
        *,
        fallback: str = CONDA_COMMAND,
        path_exists: PathExists = path_exists,
    ) -> None:
        self.provider = provider
        self.fallback = fallback
        self._path_exists = path_exists

    def get_conda_file(self) -> str:
        if self.provider is None:
            return self.fallback
        try:
            candidate = self._candidate_from_provider(self.provider)
        except Exception:  # noqa: BLE001
            _LOGGER.debug("interpreter lookup for conda failed", exc_info=True)
            return self.fallback
        if candidate is None:
            _LOGGER.debug("no conda interpreter reported, use %s", self.fallback)
            return self.fallback
        _LOGGER.debug("found conda at %s", candidate)
        return candidate

    def _candidate_from_provider(self, provider: InterpreterProvider) -> str | None:
        conda_interpreters = [i for i in provider.list_interpreters() if is_conda_environment(i)]
        latest = get_latest_version(conda_interpreters)
        if latest is None:
            return None
        conda_file = os.path.join(os.path.dirname(latest.path), CONDA_LAUNCHER)
        if self._path_exists(conda_file):
            return conda_file
        _LOGGER.debug("%s does not exist next to %s", CONDA_LAUNCHER, latest.path)
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider={self.provider!r}, fallback={self.fallback!r})"


def default_provider() -> InterpreterProvider | None:
    if IS_WIN:  # pragma: win32 cover
        from ._windows import RegistryInterpreterProvider  # noqa: PLC0415

        return RegistryInterpreterProvider()
    return None  # pragma: win32 no cover


__all__ = [
    "CONDA_COMMAND",
    "CONDA_LAUNCHER",
    "IS_WIN",
    "CondaLocator",
    "InterpreterProvider",
    "default_provider",
    "get_latest_version",
    "path_exists",
]
