"""Interrogate ``conda info --json`` and turn the reported environments into interpreter records."""

from __future__ import annotations

import logging
import os
import subprocess  # noqa: S404
from concurrent.futures import ThreadPoolExecutor
from shlex import quote
from subprocess import Popen  # noqa: S404
from typing import TYPE_CHECKING, Final

from ._display import ANACONDA_COMPANY_NAME, get_display_name
from ._locator import CONDA_COMMAND, IS_WIN, CondaLocator, default_provider, path_exists
from ._records import CondaInfo, InterpreterRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ._locator import InterpreterProvider, PathExists

    Runner = Callable[[str, Sequence[str]], tuple[str, int]]

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
CONDA_RELATIVE_PY_PATH: Final[tuple[str, ...]] = ("python.exe",) if IS_WIN else ("bin", "python")
CONDA_INFO_ARGS: Final[tuple[str, ...]] = ("info", "--json")


def run_command(exe: str, args: Sequence[str]) -> tuple[str, int]:
    """Run *exe* with *args* and return its standard output and exit code; failing to start yields no output."""
    cmd = [exe, *args]
    _LOGGER.debug("run %s", LogCmd(cmd))
    try:
        process = Popen(  # noqa: S603
            cmd,
            stdin=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            stdout=subprocess.PIPE,
            env={**os.environ, "PYTHONUTF8": "1"},
            encoding="utf-8",
            errors="surrogateescape",
        )
        out, err = process.communicate()
        code = process.returncode
    except OSError as os_error:
        out, err, code = "", os_error.strerror, os_error.errno
    if code != 0:
        _LOGGER.debug("%s exited with code %s%s", LogCmd(cmd), code, f" err: {err!r}" if err else "")
    return out, code


class LogCmd:
    def __init__(self, cmd: list[str]) -> None:
        self.cmd = cmd

    def __repr__(self) -> str:
        return " ".join(quote(str(c)) for c in self.cmd)


class CondaEnvService:
    """Suggest the Python interpreters of every environment the local conda installation knows about."""

    def __init__(
        self,
        locator: CondaLocator | None = None,
        *,
        runner: Runner = run_command,
        path_exists: PathExists = path_exists,
        max_workers: int | None = None,
    ) -> None:
        self.locator = CondaLocator() if locator is None else locator
        self._runner = runner
        self._path_exists = path_exists
        self._max_workers = max_workers

    def get_conda_file(self) -> str:
        return self.locator.get_conda_file()

    def get_interpreters(self) -> list[InterpreterRecord]:
        conda_file = self.get_conda_file()
        out, _ = self._runner(conda_file, CONDA_INFO_ARGS)
        if not out.strip():
            _LOGGER.debug("no output from %s", LogCmd([conda_file, *CONDA_INFO_ARGS]))
            return []
        try:
            info = CondaInfo.from_json(out)
        except ValueError:
            # conda missing, a changed CLI or a changed output layout: no suggestions in any case
            _LOGGER.debug("cannot parse output of %s: %r", conda_file, out[:200], exc_info=True)
            return []
        return self.parse_conda_info(info)

    def parse_conda_info(self, info: CondaInfo) -> list[InterpreterRecord]:
        display_name = get_display_name(info)
        candidates = [
            InterpreterRecord(
                path=os.path.join(prefix, *CONDA_RELATIVE_PY_PATH),
                display_name=(
                    display_name if prefix == info.default_prefix else f"{display_name} ({os.path.basename(prefix)})"
                ),
                company_display_name=ANACONDA_COMPANY_NAME,
            )
            for prefix in info.candidate_prefixes()
        ]
        if not candidates:
            return []
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            found = list(executor.map(self._exists, (c.path for c in candidates)))
        result = [candidate for candidate, exists in zip(candidates, found) if exists]
        _LOGGER.debug("found %d of %d conda interpreter(s)", len(result), len(candidates))
        return result

    def _exists(self, path: str) -> bool:
        try:
            exists = self._path_exists(path)
        except OSError:
            _LOGGER.debug("failed to check %s", path, exc_info=True)
            return False
        if not exists:
            _LOGGER.debug("skip missing interpreter %s", path)
        return exists

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(locator={self.locator!r})"


def get_interpreters(
    provider: InterpreterProvider | None = None,
    *,
    conda: str | None = None,
    runner: Runner = run_command,
    path_exists: PathExists = path_exists,
) -> list[InterpreterRecord]:
    """
    Discover conda interpreters on this machine.

    :param provider: secondary interpreter lookup used to find conda when it is not on ``PATH``; defaults to the
        Windows registry on Windows and nothing elsewhere
    :param conda: conda executable to run when nothing better is found, ``conda`` by default
    :param runner: callable running a command and returning its standard output and exit code
    :param path_exists: callable checking whether a path exists
    :return: the interpreters found, empty if conda is missing or broken
    """
    locator = CondaLocator(
        default_provider() if provider is None else provider,
        fallback=conda or CONDA_COMMAND,
        path_exists=path_exists,
    )
    return CondaEnvService(locator, runner=runner, path_exists=path_exists).get_interpreters()


__all__ = [
    "CONDA_INFO_ARGS",
    "CONDA_RELATIVE_PY_PATH",
    "CondaEnvService",
    "LogCmd",
    "get_interpreters",
    "run_command",
]
