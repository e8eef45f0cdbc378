"""Semantic version handling and compatibility comparison."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import semver

from seaside.errors import ErrorKind, SeasideError


class VersionOrder(Enum):
    """How two versions relate to one another."""

    COMPATIBLE = "compatible"
    A_IS_AHEAD_OF_B = "a_is_ahead_of_b"
    B_IS_AHEAD_OF_A = "b_is_ahead_of_a"


@dataclass(frozen=True)
class VersionComparison:
    """Result of comparing two versions by major and minor number."""

    order: VersionOrder
    patch_available: bool = False

    @property
    def compatible(self) -> bool:
        return self.order is VersionOrder.COMPATIBLE


def parse_version(text: str) -> semver.Version:
    """Parse a strict semantic version string."""
    if not isinstance(text, str):
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"expected a version string, got {text!r}")
    try:
        return semver.Version.parse(text)
    except ValueError as error:
        raise SeasideError(ErrorKind.INVALID_CONFIG, error) from error


def format_version(version: semver.Version) -> str:
    """Render a version as its canonical string."""
    return str(version)


def major_and_minor(version: semver.Version) -> tuple[int, int]:
    """Return the (major, minor) pair of a version."""
    return (version.major, version.minor)


def compare_versions(a: semver.Version, b: semver.Version) -> VersionComparison:
    """Compare two versions; equal major.minor means compatible."""
    a_key = major_and_minor(a)
    b_key = major_and_minor(b)
    if a_key == b_key:
        return VersionComparison(VersionOrder.COMPATIBLE, patch_available=a.patch > b.patch)
    if a_key < b_key:
        return VersionComparison(VersionOrder.B_IS_AHEAD_OF_A)
    return VersionComparison(VersionOrder.A_IS_AHEAD_OF_B)