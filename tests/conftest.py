from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from conda_discovery import InterpreterRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


class FakeRunner:
    """Stands in for the process runner, recording every invocation."""

    def __init__(self, out: str = "", code: int = 0) -> None:
        self.out = out
        self.code = code
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def __call__(self, exe: str, args: Sequence[str]) -> tuple[str, int]:
        self.calls.append((exe, tuple(args)))
        return self.out, self.code


class FakeProvider:
    def __init__(self, interpreters: list[InterpreterRecord]) -> None:
        self.interpreters = interpreters

    def list_interpreters(self) -> list[InterpreterRecord]:
        return list(self.interpreters)


@pytest.fixture
def conda_info() -> dict[str, Any]:
    return {
        "conda_version": "4.4.0",
        "python_version": "3.6.1.final.0",
        "platform": "linux-64",
        "sys.version": "3.6.1 |Anaconda 4.4.0 (64-bit)| (default, May 11 2017, 13:09:58) \n[GCC 4.4.7]",
        "default_prefix": "/opt/conda",
        "envs": ["/opt/conda/envs/foo", "/opt/conda/envs/bar"],
    }


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    def _make(payload: dict[str, Any] | str = "", code: int = 0) -> FakeRunner:
        out = payload if isinstance(payload, str) else json.dumps(payload)
        return FakeRunner(out, code)

    return _make


@pytest.fixture
def existing() -> set[str]:
    return set()


@pytest.fixture
def fake_exists(existing: set[str]) -> Callable[[str], bool]:
    return existing.__contains__


@pytest.fixture
def make_provider() -> Callable[[list[InterpreterRecord]], FakeProvider]:
    return FakeProvider
