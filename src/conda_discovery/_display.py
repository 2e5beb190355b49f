"""Build human-readable labels for conda interpreters from whatever ``conda info`` reports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from ._records import CondaInfo, InterpreterRecord

ANACONDA_COMPANY_NAME: Final[str] = "Anaconda"
ANACONDA_DISPLAY_NAME: Final[str] = "Anaconda"

_X64_MARKERS: Final[tuple[str, ...]] = ("64", "x86", "x86_64")
_X86_MARKERS: Final[tuple[str, ...]] = ("32", "i686", "i386")
_VERSION_SEGMENTS: Final[int] = 3


def get_display_version(value: str | None = None) -> str:
    return ".".join((value or "").split(".")[:_VERSION_SEGMENTS])


def get_bitness_display_name(value: str | None = None) -> str:
    value = value or ""
    if any(marker in value for marker in _X64_MARKERS):
        return "64 bit"
    if any(marker in value for marker in _X86_MARKERS):
        return "32 bit"
    return value


def get_display_name_from_sys_version(value: str | None = None) -> str:
    """
    Pull the distribution label out of a ``sys.version`` string.

    ``3.6.1 |Anaconda 4.4.0 (64-bit)| (default, May 11 2017, 13:25:24)`` yields ``Anaconda 4.4.0 (64-bit)``.
    """
    if not value:
        return ANACONDA_DISPLAY_NAME
    parts = [part.strip() for part in value.split("|")]
    if len(parts) > 1 and "conda" in parts[1]:
        return parts[1]
    return ANACONDA_DISPLAY_NAME


def get_display_name(info: CondaInfo) -> str:
    python_version = get_display_version(info.python_version)
    bitness = get_bitness_display_name(info.platform)
    bitness_and_version = ", ".join(item for item in (bitness, python_version) if item)

    if not info.conda_version and not python_version and not bitness_and_version:
        return get_display_name_from_sys_version(info.sys_version)

    parts = (ANACONDA_COMPANY_NAME, info.conda_version, f"({bitness_and_version})" if bitness_and_version else "")
    return " ".join(part for part in parts if part).strip()


def is_conda_environment(interpreter: InterpreterRecord) -> bool:
    return (
        "ANACONDA" in (interpreter.display_name or "").upper()
        or "CONTINUUM" in (interpreter.company_display_name or "").upper()
    )


__all__ = [
    "ANACONDA_COMPANY_NAME",
    "ANACONDA_DISPLAY_NAME",
    "get_bitness_display_name",
    "get_display_name",
    "get_display_name_from_sys_version",
    "get_display_version",
    "is_conda_environment",
]
