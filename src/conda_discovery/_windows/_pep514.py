"""Walk the https://www.python.org/dev/peps/pep-0514/ registry layout - Windows only."""

from __future__ import annotations

import logging
import os
import re
import sys
from logging import basicConfig, getLogger
from typing import TYPE_CHECKING, Any, Final, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Generator

_LOGGER: Final[logging.Logger] = getLogger(__name__)
_VERSION_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (\d+)            # major
    (?:\.(\d+))?     # optional minor
    (?:\.(\d+))?     # optional micro
    $
    """,
    re.VERBOSE,
)


class RegistryEntry(NamedTuple):
    company: str
    company_display_name: str | None
    display_name: str | None
    version: str | None
    exe: str


def _winreg() -> Any:  # noqa: ANN401
    import winreg  # noqa: PLC0415

    return winreg


def enum_keys(key: Any) -> Generator[str, None, None]:  # noqa: ANN401
    winreg = _winreg()
    at = 0
    while True:
        try:
            yield winreg.EnumKey(key, at)
        except OSError:
            break
        at += 1


def get_value(key: Any, value_name: str | None) -> Any:  # noqa: ANN401
    try:
        return _winreg().QueryValueEx(key, value_name)[0]
    except OSError:
        return None


def discover_pythons() -> Generator[RegistryEntry, None, None]:
    winreg = _winreg()
    for hive, hive_name, key, flags in [
        (winreg.HKEY_CURRENT_USER, "HKEY_CURRENT_USER", r"Software\Python", 0),
        (winreg.HKEY_LOCAL_MACHINE, "HKEY_LOCAL_MACHINE", r"Software\Python", winreg.KEY_WOW64_64KEY),
        (winreg.HKEY_LOCAL_MACHINE, "HKEY_LOCAL_MACHINE", r"Software\Python", winreg.KEY_WOW64_32KEY),
    ]:
        yield from process_set(hive, hive_name, key, flags)


def process_set(hive: int, hive_name: str, key: str, flags: int) -> Generator[RegistryEntry, None, None]:
    winreg = _winreg()
    try:
        with winreg.OpenKeyEx(hive, key, 0, winreg.KEY_READ | flags) as root_key:
            for company in enum_keys(root_key):
                if company == "PyLauncher":  # reserved
                    continue
                yield from process_company(hive_name, company, root_key)
    except OSError:
        pass


def process_company(hive_name: str, company: str, root_key: Any) -> Generator[RegistryEntry, None, None]:  # noqa: ANN401
    with _winreg().OpenKeyEx(root_key, company) as company_key:
        company_display_name = load_text(hive_name, company, None, company_key, "DisplayName")
        for tag in enum_keys(company_key):
            entry = process_tag(hive_name, company, company_display_name, company_key, tag)
            if entry is not None:
                yield entry


def process_tag(
    hive_name: str,
    company: str,
    company_display_name: str | None,
    company_key: Any,  # noqa: ANN401
    tag: str,
) -> RegistryEntry | None:
    with _winreg().OpenKeyEx(company_key, tag) as tag_key:
        exe = load_exe(hive_name, company, company_key, tag)
        if exe is None:
            return None
        return RegistryEntry(
            company=company,
            company_display_name=company_display_name or company,
            display_name=load_text(hive_name, company, tag, tag_key, "DisplayName"),
            version=load_version(hive_name, company, tag, tag_key),
            exe=exe,
        )


def load_exe(hive_name: str, company: str, company_key: Any, tag: str) -> str | None:  # noqa: ANN401
    key_path = f"{hive_name}/{company}/{tag}"
    try:
        with _winreg().OpenKeyEx(company_key, rf"{tag}\InstallPath") as ip_key:
            exe = get_value(ip_key, "ExecutablePath")
            if exe is None:
                ip = get_value(ip_key, None)
                if ip is None:
                    msg(key_path, "no ExecutablePath or default for it")
                else:
                    exe = os.path.join(ip, "python.exe")
            if exe is not None and os.path.exists(exe):
                return exe
            msg(key_path, f"could not load exe with value {exe}")
    except OSError:
        msg(f"{key_path}/InstallPath", "missing")
    return None


def load_text(hive_name: str, company: str, tag: str | None, key: Any, value_name: str) -> str | None:  # noqa: ANN401
    value = get_value(key, value_name)
    if value is None or isinstance(value, str):
        return value
    key_path = "/".join(part for part in (hive_name, company, tag, value_name) if part)
    msg(key_path, f"{value_name} is not string: {value!r}")
    return None


def load_version(hive_name: str, company: str, tag: str, tag_key: Any) -> str | None:  # noqa: ANN401
    for candidate, key_path in [
        (get_value(tag_key, "SysVersion"), f"{hive_name}/{company}/{tag}/SysVersion"),
        (tag, f"{hive_name}/{company}/{tag}"),
    ]:
        if candidate is not None:
            try:
                parsed = parse_version(candidate)
            except ValueError as sys_version:
                msg(key_path, sys_version)
            else:
                return ".".join(str(part) for part in parsed if part is not None)
    return None


def parse_version(version_str: Any) -> tuple[int | None, int | None, int | None]:  # noqa: ANN401
    if isinstance(version_str, str):
        if match := _VERSION_RE.match(version_str):
            g1, g2, g3 = match.groups()
            return (
                int(g1) if g1 is not None else None,
                int(g2) if g2 is not None else None,
                int(g3) if g3 is not None else None,
            )
        error = f"invalid format {version_str}"
    else:
        error = f"version is not string: {version_str!r}"
    raise ValueError(error)


def msg(path: str, what: object) -> None:
    _LOGGER.warning("PEP-514 violation in Windows Registry at %s error: %s", path, what)


def _run() -> None:
    basicConfig()
    entries = [repr(entry) for entry in discover_pythons()]
    sys.stdout.write("\n".join(sorted(entries)))
    sys.stdout.write("\n")


if __name__ == "__main__":
    _run()
