from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from types import ModuleType
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

HKEY_CURRENT_USER = 0x80000001
HKEY_LOCAL_MACHINE = 0x80000002
KEY_READ = 0x20019
KEY_WOW64_64KEY = 0x0100
KEY_WOW64_32KEY = 0x0200


class _Key:
    def __init__(self, values: dict[str | None, object] | None = None, **subkeys: _Key) -> None:
        self.values = values or {}
        self.subkeys = subkeys


def _install(exe: str) -> _Key:
    return _Key({"ExecutablePath": exe})


REGISTRY: dict[tuple[int, int], _Key] = {
    (HKEY_CURRENT_USER, 0): _Key(
        ContinuumAnalytics=_Key(
            {"DisplayName": "Continuum Analytics"},
            **{
                "Anaconda36-64": _Key(
                    {"DisplayName": "Anaconda 4.4.0 (64-bit)", "SysVersion": "3.6"},
                    InstallPath=_install("C:\\Users\\user\\Anaconda3\\python.exe"),
                ),
                "Anaconda310-64": _Key(
                    {"DisplayName": "Anaconda 2022.10 (64-bit)", "SysVersion": "3.10"},
                    InstallPath=_install("C:/Users/user/Anaconda3-2022/python.exe"),
                ),
            },
        ),
        PyLauncher=_Key(InstallPath=_install("C:\\Windows\\py.exe")),
    ),
    (HKEY_LOCAL_MACHINE, KEY_WOW64_64KEY): _Key(
        PythonCore=_Key(
            **{
                "3.12": _Key(
                    {"DisplayName": "Python 3.12 (64-bit)", "SysVersion": "3.12"},
                    InstallPath=_install("C:\\Program Files\\Python312\\python.exe"),
                ),
                "3.11": _Key(
                    {"DisplayName": 311, "SysVersion": "bogus"},
                    InstallPath=_Key({None: "C:\\Program Files\\Python311"}),
                ),
                "3.9": _Key({"DisplayName": "Python 3.9"}, InstallPath=_Key()),
                "3.8": _Key({"DisplayName": "Python 3.8"}),
                "3.7": _Key(
                    {"DisplayName": "Python 3.7"},
                    InstallPath=_install("D:\\Missing\\python.exe"),
                ),
            },
        ),
    ),
}


def _fake_winreg() -> ModuleType:
    winreg = ModuleType("winreg")
    winreg.HKEY_CURRENT_USER = HKEY_CURRENT_USER  # ty: ignore[unresolved-attribute]
    winreg.HKEY_LOCAL_MACHINE = HKEY_LOCAL_MACHINE  # ty: ignore[unresolved-attribute]
    winreg.KEY_READ = KEY_READ  # ty: ignore[unresolved-attribute]
    winreg.KEY_WOW64_64KEY = KEY_WOW64_64KEY  # ty: ignore[unresolved-attribute]
    winreg.KEY_WOW64_32KEY = KEY_WOW64_32KEY  # ty: ignore[unresolved-attribute]

    @contextmanager
    def open_key_ex(key: object, sub_key: str, reserved: int = 0, access: int = KEY_READ) -> Generator[_Key]:  # noqa: ARG001
        if isinstance(key, _Key):
            found = key
            for part in sub_key.split("\\"):
                if part not in found.subkeys:
                    raise FileNotFoundError(sub_key)
                found = found.subkeys[part]
        else:
            hive = REGISTRY.get((key, access & ~KEY_READ))
            if hive is None:
                raise FileNotFoundError(sub_key)
            found = hive
        yield found

    def enum_key(key: _Key, index: int) -> str:
        names = list(key.subkeys)
        if index >= len(names):
            raise OSError(259, "No more data is available")
        return names[index]

    def query_value_ex(key: _Key, name: str | None) -> tuple[object, int]:
        if name not in key.values:
            raise FileNotFoundError(name)
        return key.values[name], 1

    winreg.OpenKeyEx = open_key_ex  # ty: ignore[unresolved-attribute]
    winreg.EnumKey = enum_key  # ty: ignore[unresolved-attribute]
    winreg.QueryValueEx = query_value_ex  # ty: ignore[unresolved-attribute]
    return winreg


@pytest.fixture
def _mock_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "winreg", _fake_winreg())
    real_exists = os.path.exists

    def _mock_exists(path: str) -> bool:
        if isinstance(path, str) and path.startswith("C:"):
            return True
        if isinstance(path, str) and path.startswith("D:"):
            return False
        return real_exists(path)

    monkeypatch.setattr("os.path.exists", _mock_exists)
