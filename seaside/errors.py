"""Error types raised by the seaside engine."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Broad categories of engine failure, each with a default description."""

    EXTERNAL_FAILURE = "something went wrong outside the engine's control"
    INTERNAL_LOGIC_ISSUE = "something went wrong in the engine's internal logic"
    INVALID_CONFIG = "provided config file is invalid"
    INVALID_PROJECT_DIRECTORY = "provided project directory is invalid"
    MIPS_EXCEPTION = "unhandled exception thrown in MIPS interpreter"
    NOT_FOUND = "engine expected a resource, but couldn't find it"
    OUTDATED_VERSION = "this version of seaside is incompatible with the config provided"

    def __str__(self) -> str:
        return self.value


class SeasideError(Exception):
    """An engine error carrying a kind and an optional message."""

    def __init__(self, kind: ErrorKind, message: object = "") -> None:
        self.kind = kind
        self.message = str(message)
        super().__init__(str(self))

    def __str__(self) -> str:
        return self.message if self.message else str(self.kind)

    def __repr__(self) -> str:
        return f"SeasideError({self.kind.name}, {self.message!r})"