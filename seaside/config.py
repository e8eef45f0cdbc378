"""The engine's configuration, as read from a ``Seaside.toml`` file."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any

import semver

from seaside.endian import Endian
from seaside.errors import ErrorKind, SeasideError
from seaside.features import Features
from seaside.memory_map import MemoryMap
from seaside.registers import RegisterDefaults
from seaside.version import VersionOrder, compare_versions, format_version, parse_version

SEASIDE_VERSION = "0.1.0"


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"missing field `{key}`") from None


def _endian_from(data: Mapping[str, Any]) -> Endian:
    if "endian" in data and "byte_order" in data:
        raise SeasideError(ErrorKind.INVALID_CONFIG, "duplicate field `endian`")
    if "endian" in data:
        return Endian.parse(data["endian"])
    if "byte_order" in data:
        return Endian.parse(data["byte_order"])
    raise SeasideError(ErrorKind.INVALID_CONFIG, "missing field `endian`")


@dataclass
class Config:
    """Every setting the engine reads from its config file."""

    version: semver.Version
    endian: Endian
    project_directory_is_cwd: bool
    features: Features
    memory_map: MemoryMap
    register_defaults: RegisterDefaults

    @classmethod
    def from_config(cls, data: Any) -> Config:
        """Build a config from a parsed TOML table."""
        if not isinstance(data, Mapping):
            raise SeasideError(ErrorKind.INVALID_CONFIG, "expected a table for the config")
        cwd_flag = _require(data, "project_directory_is_cwd")
        if not isinstance(cwd_flag, bool):
            raise SeasideError(
                ErrorKind.INVALID_CONFIG, "field `project_directory_is_cwd` must be a bool"
            )
        return cls(
            version=parse_version(_require(data, "version")),
            endian=_endian_from(data),
            project_directory_is_cwd=cwd_flag,
            features=Features.from_config(_require(data, "features")),
            memory_map=MemoryMap.from_config(_require(data, "memory_map")),
            register_defaults=RegisterDefaults.from_config(_require(data, "register_defaults")),
        )

    def to_config(self) -> dict[str, Any]:
        """Render the config as a table that ``from_config`` reads back."""
        return {
            "version": format_version(self.version),
            "endian": str(self.endian),
            "project_directory_is_cwd": self.project_directory_is_cwd,
            "features": self.features.to_config(),
            "memory_map": self.memory_map.to_config(),
            "register_defaults": self.register_defaults.to_config(),
        }

    def validate(self) -> None:
        """Raise if the config does not suit this version of seaside or is inconsistent."""
        seaside_version = parse_version(SEASIDE_VERSION)
        comparison = compare_versions(seaside_version, self.version)
        if comparison.order is VersionOrder.A_IS_AHEAD_OF_B:
            raise SeasideError(
                ErrorKind.OUTDATED_VERSION,
                f"consider updating config (v{self.version}) "
                f"to match seaside (v{seaside_version})",
            )
        if comparison.order is VersionOrder.B_IS_AHEAD_OF_A:
            raise SeasideError(
                ErrorKind.OUTDATED_VERSION,
                f"consider updating seaside (v{seaside_version}) "
                f"to match config (v{self.version})",
            )
        self.features.syscalls.validate()
        self.memory_map.validate()


def parse_config(text: str) -> Config:
    """Parse config TOML text without validating it."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as error:
        raise SeasideError(ErrorKind.INVALID_CONFIG, error) from error
    return Config.from_config(data)


def load_config(path: str | PathLike[str]) -> Config:
    """Read and parse a config file without validating it."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        raise SeasideError(ErrorKind.EXTERNAL_FAILURE, "failed to read config file") from None
    return parse_config(text)