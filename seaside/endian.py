"""Byte order of the emulated machine."""

from __future__ import annotations

import sys
from enum import Enum

from seaside.errors import ErrorKind, SeasideError


class Endian(Enum):
    """Byte order; ``LITTLE`` is the default."""

    LITTLE = "little"
    BIG = "big"

    @classmethod
    def parse(cls, value: str) -> Endian:
        """Read a byte order from its config name or an alias."""
        try:
            return _ALIASES[value]
        except (KeyError, TypeError):
            raise SeasideError(
                ErrorKind.INVALID_CONFIG, f"unknown byte order: {value!r}"
            ) from None

    def should_swap_bytes(self) -> bool:
        """True if this byte order differs from the host's."""
        return self.value != sys.byteorder

    def __str__(self) -> str:
        return self.value


_ALIASES: dict[str, Endian] = {
    "Little": Endian.LITTLE,
    "little": Endian.LITTLE,
    "lsb": Endian.LITTLE,
    "Big": Endian.BIG,
    "big": Endian.BIG,
    "msb": Endian.BIG,
}