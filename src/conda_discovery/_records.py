"""Data records exchanged by the conda locator, the discovery service and lookup providers."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Final

from ._version import _DC_KW

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


@dataclass(**_DC_KW)
class InterpreterRecord:
    """A Python interpreter suggestion: executable path plus how to present it."""

    path: str
    display_name: str | None = None
    company_display_name: str | None = None
    version: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)


@dataclass(**_DC_KW)
class CondaInfo:
    """
    The subset of ``conda info --json`` this package understands.

    Every field is optional in the JSON document; missing or mistyped values take the field default.
    """

    envs: tuple[str, ...] = ()
    sys_version: str = ""
    default_prefix: str = ""
    conda_version: str = ""
    python_version: str = ""
    platform: str = ""

    @classmethod
    def from_json(cls, payload: str) -> CondaInfo:
        return cls.from_dict(json.loads(payload))

    @classmethod
    def from_dict(cls, data: Any) -> CondaInfo:  # noqa: ANN401
        if not isinstance(data, dict):
            msg = f"conda info must be a JSON object, got {type(data).__name__}"
            raise ValueError(msg)  # noqa: TRY004
        raw_envs = data.get("envs")
        if isinstance(raw_envs, list):
            envs = tuple(env for env in raw_envs if isinstance(env, str))
        else:
            if raw_envs is not None:
                _LOGGER.debug("ignore envs of type %s", type(raw_envs).__name__)
            envs = ()
        return cls(
            envs=envs,
            sys_version=_text(data, "sys.version"),
            default_prefix=_text(data, "default_prefix"),
            conda_version=_text(data, "conda_version"),
            python_version=_text(data, "python_version"),
            platform=_text(data, "platform"),
        )

    def candidate_prefixes(self) -> list[str]:
        """Environment roots to check: every env, then the default prefix (duplicates are kept)."""
        prefixes = list(self.envs)
        if self.default_prefix:
            prefixes.append(self.default_prefix)
        return prefixes


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if isinstance(value, str):
        return value
    if value is not None:
        _LOGGER.debug("ignore %s of type %s", key, type(value).__name__)
    return ""


__all__ = [
    "CondaInfo",
    "InterpreterRecord",
]
