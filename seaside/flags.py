"""Named presets and map-based config conversion for sets of bit flags."""

from __future__ import annotations

import operator
import re
from collections.abc import Mapping
from enum import Enum, Flag
from functools import reduce
from typing import Any, Self

from seaside.errors import ErrorKind, SeasideError

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def _pascal(name: str) -> str:
    """Convert an identifier in any common case style to PascalCase."""
    return "".join(word.capitalize() for word in _WORD.findall(name))


class BasicPreset(Enum):
    """The three presets shared by every flag set."""

    EVERYTHING = "everything"
    NOTHING = "nothing"
    RECOMMENDED = "recommended"

    @classmethod
    def parse(cls, name: str) -> BasicPreset:
        """Look up a preset by name or alias."""
        try:
            return _PRESET_ALIASES[name]
        except (KeyError, TypeError):
            raise SeasideError(
                ErrorKind.INVALID_CONFIG, f"not a valid preset: {name!r}"
            ) from None


_PRESET_ALIASES: dict[str, BasicPreset] = {
    "everything": BasicPreset.EVERYTHING,
    "all": BasicPreset.EVERYTHING,
    "full": BasicPreset.EVERYTHING,
    "nothing": BasicPreset.NOTHING,
    "none": BasicPreset.NOTHING,
    "empty": BasicPreset.NOTHING,
    "recommended": BasicPreset.RECOMMENDED,
    "default": BasicPreset.RECOMMENDED,
}


class PresetFlag(Flag):
    """A flag set that can be read from a preset name or a map of flag names to bools.

    Subclasses override ``recommended`` when their recommended preset is not
    every flag.
    """

    @classmethod
    def recommended(cls) -> Self:
        """The flags enabled by the ``recommended`` preset."""
        return cls.preset(BasicPreset.EVERYTHING)

    @classmethod
    def preset(cls, preset: BasicPreset) -> Self:
        """Return the flags selected by a preset."""
        if preset is BasicPreset.EVERYTHING:
            return reduce(operator.or_, cls, cls(0))
        if preset is BasicPreset.NOTHING:
            return cls(0)
        return cls.recommended()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        """Build flags from a map of flag names to bools; unknown names are ignored."""
        by_name = {_pascal(member.name): member for member in cls}
        flags = cls(0)
        for key, enabled in mapping.items():
            if not isinstance(key, str):
                raise SeasideError(ErrorKind.INVALID_CONFIG, f"flag name must be a string: {key!r}")
            if not isinstance(enabled, bool):
                raise SeasideError(
                    ErrorKind.INVALID_CONFIG, f"expected a bool for flag `{key}`, got {enabled!r}"
                )
            if enabled:
                member = by_name.get(_pascal(key))
                if member is not None:
                    flags |= member
        return flags

    @classmethod
    def from_config(cls, value: Any) -> Self:
        """Build flags from a preset name or an explicit map of flags to bools."""
        if isinstance(value, str):
            return cls.preset(BasicPreset.parse(value))
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise SeasideError(
            ErrorKind.INVALID_CONFIG,
            "expected the name of a preset or an explicit mapping from flags to bools",
        )

    def to_config(self) -> dict[str, bool]:
        """Render every flag of the set as a snake_case name mapped to whether it is set."""
        return {member.name.lower(): bool(self & member) for member in type(self)}