"""Feature switches of the engine: assembler options and available syscalls."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from seaside.errors import ErrorKind, SeasideError
from seaside.flags import BasicPreset, PresetFlag


def _expect_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"expected a table for {what}")
    return value


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"missing field `{key}`") from None


def _require_bool(data: Mapping[str, Any], key: str) -> bool:
    value = _require(data, key)
    if not isinstance(value, bool):
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"field `{key}` must be a bool")
    return value


class SpecialDirectives(PresetFlag):
    """Nontrivial assembler directives that can be enabled or disabled."""

    ASCIIZ = 0x01
    EQV = 0x02
    GLOBAL = 0x04
    INCLUDE = 0x08
    MACROS = 0x10
    SET = 0x20

    @classmethod
    def recommended(cls) -> SpecialDirectives:
        return cls.ASCIIZ | cls.GLOBAL | cls.INCLUDE


@dataclass
class AssemblerOptions:
    """Customizes the assembler's behaviour."""

    pseudo_instructions: bool
    directives: SpecialDirectives

    @classmethod
    def from_config(cls, data: Any) -> AssemblerOptions:
        data = _expect_mapping(data, "assembler options")
        return cls(
            pseudo_instructions=_require_bool(data, "pseudo_instructions"),
            directives=SpecialDirectives.from_config(_require(data, "directives")),
        )

    def to_config(self) -> dict[str, Any]:
        return {
            "pseudo_instructions": self.pseudo_instructions,
            "directives": self.directives.to_config(),
        }


class Print(PresetFlag):
    """Syscalls for printing data types to stdout."""

    INT = 0x01
    FLOAT = 0x02
    DOUBLE = 0x04
    STRING = 0x08
    CHAR = 0x10
    HEX = 0x20
    BIN = 0x40
    UINT = 0x80


class Read(PresetFlag):
    """Syscalls for reading data types from stdin."""

    INT = 0x01
    FLOAT = 0x02
    DOUBLE = 0x04
    STRING = 0x08
    CHAR = 0x10


class File(PresetFlag):
    """Syscalls for managing file descriptors."""

    OPEN = 0x01
    READ = 0x02
    WRITE = 0x04
    CLOSE = 0x08


class System(PresetFlag):
    """Miscellaneous syscalls: program exit, heap allocation, time, sound."""

    SBRK = 0x01
    EXIT = 0x02
    EXIT_2 = 0x04
    TIME = 0x08
    MIDI = 0x10
    SLEEP = 0x20
    MIDI_SYNC = 0x40

    @classmethod
    def recommended(cls) -> System:
        return cls.EXIT | cls.EXIT_2 | cls.SLEEP | cls.TIME


class Random(PresetFlag):
    """Syscalls to set up and use random number generators."""

    SET_SEED = 0x01
    RAND_INT = 0x02
    RAND_INT_RANGE = 0x04
    RAND_FLOAT = 0x08
    RAND_DOUBLE = 0x10


class Input(PresetFlag):
    """Syscalls that show input dialogs."""

    CONFIRM = 0x01
    INT = 0x02
    FLOAT = 0x04
    DOUBLE = 0x08
    STRING = 0x10

    @classmethod
    def recommended(cls) -> Input:
        return cls(0)


class Message(PresetFlag):
    """Syscalls that show message dialogs."""

    GENERAL = 0x01
    INT = 0x02
    FLOAT = 0x04
    DOUBLE = 0x08
    STRING = 0x10

    @classmethod
    def recommended(cls) -> Message:
        return cls(0)


@dataclass
class Dialog:
    """Availability of syscalls relating to GUI dialogs."""

    input: Input
    message: Message

    @classmethod
    def preset(cls, preset: BasicPreset) -> Dialog:
        if preset is BasicPreset.EVERYTHING:
            return cls(
                input=Input.preset(BasicPreset.EVERYTHING),
                message=Message.preset(BasicPreset.EVERYTHING),
            )
        return cls(
            input=Input.preset(BasicPreset.NOTHING),
            message=Message.preset(BasicPreset.NOTHING),
        )

    @classmethod
    def from_config(cls, value: Any) -> Dialog:
        if isinstance(value, str):
            return cls.preset(BasicPreset.parse(value))
        data = _expect_mapping(value, "dialog syscalls")
        return cls(
            input=Input.from_config(_require(data, "input")),
            message=Message.from_config(_require(data, "message")),
        )

    def to_config(self) -> dict[str, Any]:
        return {"input": self.input.to_config(), "message": self.message.to_config()}


@dataclass
class Syscalls:
    """Which syscalls are available to the interpreter."""

    print: Print
    read: Read
    file: File
    system: System
    random: Random
    dialog: Dialog

    @classmethod
    def from_config(cls, data: Any) -> Syscalls:
        data = _expect_mapping(data, "syscalls")
        return cls(
            print=Print.from_config(_require(data, "print")),
            read=Read.from_config(_require(data, "read")),
            file=File.from_config(_require(data, "file")),
            system=System.from_config(_require(data, "system")),
            random=Random.from_config(_require(data, "random")),
            dialog=Dialog.from_config(_require(data, "dialog")),
        )

    def to_config(self) -> dict[str, Any]:
        return {
            "print": self.print.to_config(),
            "read": self.read.to_config(),
            "file": self.file.to_config(),
            "system": self.system.to_config(),
            "random": self.random.to_config(),
            "dialog": self.dialog.to_config(),
        }

    def validate(self) -> None:
        """Raise if no syscall is available to exit the program."""
        if not self.system & (System.EXIT | System.EXIT_2):
            raise SeasideError(ErrorKind.INVALID_CONFIG, "missing a syscall to exit program")


@dataclass
class Features:
    """Features available to the engine."""

    kernel_space_accessible: bool
    self_modifying_code: bool
    delay_slot: bool
    show_crash_handler: bool
    assembler: AssemblerOptions
    syscalls: Syscalls

    @classmethod
    def from_config(cls, data: Any) -> Features:
        data = _expect_mapping(data, "features")
        return cls(
            kernel_space_accessible=_require_bool(data, "kernel_space_accessible"),
            self_modifying_code=_require_bool(data, "self_modifying_code"),
            delay_slot=_require_bool(data, "delay_slot"),
            show_crash_handler=_require_bool(data, "show_crash_handler"),
            assembler=AssemblerOptions.from_config(_require(data, "assembler")),
            syscalls=Syscalls.from_config(_require(data, "syscalls")),
        )

    def to_config(self) -> dict[str, Any]:
        return {
            "kernel_space_accessible": self.kernel_space_accessible,
            "self_modifying_code": self.self_modifying_code,
            "delay_slot": self.delay_slot,
            "show_crash_handler": self.show_crash_handler,
            "assembler": self.assembler.to_config(),
            "syscalls": self.syscalls.to_config(),
        }

    def validate(self) -> None:
        self.syscalls.validate()