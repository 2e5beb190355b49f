"""Discover the Python interpreters of installed conda environments."""

from __future__ import annotations

from importlib.metadata import version

from ._display import (
    ANACONDA_COMPANY_NAME,
    ANACONDA_DISPLAY_NAME,
    get_bitness_display_name,
    get_display_name,
    get_display_name_from_sys_version,
    get_display_version,
    is_conda_environment,
)
from ._locator import CondaLocator, InterpreterProvider, default_provider, get_latest_version
from ._records import CondaInfo, InterpreterRecord
from ._service import CondaEnvService, get_interpreters, run_command
from ._version import DottedVersion

__version__ = version("conda-discovery")

__all__ = [
    "ANACONDA_COMPANY_NAME",
    "ANACONDA_DISPLAY_NAME",
    "CondaEnvService",
    "CondaInfo",
    "CondaLocator",
    "DottedVersion",
    "InterpreterProvider",
    "InterpreterRecord",
    "__version__",
    "default_provider",
    "get_bitness_display_name",
    "get_display_name",
    "get_display_name_from_sys_version",
    "get_display_version",
    "get_interpreters",
    "get_latest_version",
    "is_conda_environment",
    "run_command",
]
