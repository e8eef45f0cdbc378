"""Register names, numbers and the default values registers start with."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from seaside.constants import Coprocessor0RegisterNumber
from seaside.errors import ErrorKind, SeasideError

_U32_MAX = 0xFFFF_FFFF


def _check_u32(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"{what} must be an integer")
    if not 0 <= value <= _U32_MAX:
        raise SeasideError(
            ErrorKind.INVALID_CONFIG, f"{what} must fit in an unsigned 32-bit integer"
        )
    return value


def _check_number(number: Any) -> int:
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"register number must be an integer, got {number!r}")
    return number


class GprKind(Enum):
    """The role a general-purpose register plays in the calling convention."""

    ZERO = "zero"
    ASSEMBLER_TEMPORARY = "at"
    VALUE = "v"
    ARGUMENT = "a"
    TEMPORARY = "t"
    SAVED = "s"
    KERNEL = "k"
    GLOBAL_POINTER = "gp"
    STACK_POINTER = "sp"
    FRAME_POINTER = "fp"
    RETURN_ADDRESS = "ra"


_GPR_LIMITS: dict[GprKind, int] = {
    GprKind.VALUE: 2,
    GprKind.ARGUMENT: 4,
    GprKind.TEMPORARY: 10,
    GprKind.SAVED: 8,
    GprKind.KERNEL: 2,
}


@dataclass(frozen=True)
class GeneralPurposeRegister:
    """A CPU register, named by its role and its position within that role."""

    kind: GprKind
    n: int = 0

    NUM_REGISTERS: ClassVar[int] = 32
    REGISTER_NAMES: ClassVar[tuple[str, ...]] = (
        "zero", "at", "v0", "v1", "a0", "a1", "a2", "a3",
        "t0", "t1", "t2", "t3", "t4", "t5", "t6", "t7",
        "s0", "s1", "s2", "s3", "s4", "s5", "s6", "s7",
        "t8", "t9", "k0", "k1", "gp", "sp", "fp", "ra",
    )

    def __post_init__(self) -> None:
        limit = _GPR_LIMITS.get(self.kind, 1)
        if not 0 <= self.n < limit:
            raise ValueError(f"no {self.kind.name.lower()} register numbered {self.n}")

    @classmethod
    def parse(cls, name: str) -> GeneralPurposeRegister:
        """Look up a register by its conventional name, e.g. ``"t0"`` or ``"sp"``."""
        try:
            return _GPR_BY_NAME[name]
        except (KeyError, TypeError):
            raise ValueError(f"not a general-purpose register: {name!r}") from None

    @classmethod
    def from_number(cls, number: int) -> GeneralPurposeRegister:
        """Return the register with the given hardware number (0 to 31)."""
        if not 0 <= _check_number(number) < cls.NUM_REGISTERS:
            raise ValueError(f"no general-purpose register numbered {number}")
        return _GPR_BY_NUMBER[number]

    def number(self) -> int:
        """The hardware number of this register."""
        return _GPR_NUMBERS[self]

    def index(self) -> int:
        """The position of this register in a register array."""
        return self.number()

    def __str__(self) -> str:
        return self.REGISTER_NAMES[self.number()]


def _gpr_from_name(name: str) -> GeneralPurposeRegister:
    try:
        return GeneralPurposeRegister(GprKind(name))
    except ValueError:
        return GeneralPurposeRegister(GprKind(name[0]), int(name[1:]))


_GPR_BY_NUMBER: tuple[GeneralPurposeRegister, ...] = tuple(
    _gpr_from_name(name) for name in GeneralPurposeRegister.REGISTER_NAMES
)
_GPR_BY_NAME: dict[str, GeneralPurposeRegister] = dict(
    zip(GeneralPurposeRegister.REGISTER_NAMES, _GPR_BY_NUMBER)
)
_GPR_NUMBERS: dict[GeneralPurposeRegister, int] = {
    register: number for number, register in enumerate(_GPR_BY_NUMBER)
}


@dataclass(frozen=True)
class FloatingPointRegister:
    """One of the 32 floating-point registers ``f0`` to ``f31``."""

    n: int

    NUM_REGISTERS: ClassVar[int] = 32
    REGISTER_NAMES: ClassVar[tuple[str, ...]] = tuple(f"f{n}" for n in range(32))

    def __post_init__(self) -> None:
        if not 0 <= _check_number(self.n) < self.NUM_REGISTERS:
            raise ValueError(f"no floating-point register numbered {self.n}")

    @classmethod
    def parse(cls, name: str) -> FloatingPointRegister:
        """Read a register from a name of the form ``f<n>``."""
        if not isinstance(name, str) or not name.startswith("f"):
            raise ValueError(f"not a floating-point register: {name!r}")
        digits = name[1:].removeprefix("+")
        if not digits or not (digits.isascii() and digits.isdigit()):
            raise ValueError(f"not a floating-point register: {name!r}")
        number = int(digits)
        if number >= cls.NUM_REGISTERS:
            raise ValueError(f"not a floating-point register: {name!r}")
        return cls(number)

    @classmethod
    def from_number(cls, number: int) -> FloatingPointRegister:
        """Return the register with the given number (0 to 31)."""
        return cls(number)

    def number(self) -> int:
        """The hardware number of this register."""
        return self.n

    def index(self) -> int:
        """The position of this register in a register array."""
        return self.n

    def __str__(self) -> str:
        return self.REGISTER_NAMES[self.n]


class Coprocessor0Register(Enum):
    """The coprocessor 0 registers, valued by their conventional names.

    Their hardware numbers are sparse, so register arrays hold them at
    compact indices 0 to 3 instead.
    """

    VADDR = "vaddr"
    STATUS = "status"
    CAUSE = "cause"
    EPC = "epc"

    @classmethod
    def parse(cls, name: str) -> Coprocessor0Register:
        """Look up a register by name: vaddr, status, cause or epc."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"not a coprocessor 0 register: {name!r}") from None

    @classmethod
    def from_number(cls, number: int) -> Coprocessor0Register:
        """Return the register with the given hardware number."""
        try:
            return cls[Coprocessor0RegisterNumber(_check_number(number)).name]
        except ValueError:
            raise ValueError(f"no coprocessor 0 register numbered {number}") from None

    @classmethod
    def from_index(cls, index: int) -> Coprocessor0Register:
        """Return the register stored at a compact array index (0 to 3)."""
        members = list(cls)
        if not 0 <= _check_number(index) < len(members):
            raise ValueError(f"no coprocessor 0 register at index {index}")
        return members[index]

    def number(self) -> int:
        """The hardware number of this register."""
        return int(Coprocessor0RegisterNumber[self.name])

    def index(self) -> int:
        """The compact array index of this register."""
        return list(type(self)).index(self)

    def __str__(self) -> str:
        return self.value


Register = GeneralPurposeRegister | FloatingPointRegister | Coprocessor0Register

_COPROCESSOR_0_NAMES: tuple[str, ...] = tuple(member.value for member in Coprocessor0Register)


def _registers_from_config(
    value: Any, what: str, names: tuple[str, ...], parse: Any
) -> list[int]:
    if not isinstance(value, Mapping):
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"expected a table for {what}")
    registers = [0] * len(names)
    for key, raw in value.items():
        if not isinstance(key, str):
            raise SeasideError(ErrorKind.INVALID_CONFIG, f"register name must be a string: {key!r}")
        number = _check_u32(raw, f"default for register `{key}`")
        try:
            register = parse(key)
        except ValueError:
            continue  # unknown register names are ignored
        registers[register.index()] = number
    return registers


def _registers_to_config(registers: list[int], names: tuple[str, ...]) -> dict[str, int]:
    return {name: value for name, value in zip(names, registers) if value != 0}


@dataclass
class RegisterDefaults:
    """The values registers hold when a program starts."""

    hi: int = 0
    lo: int = 0
    general_purpose: list[int] = field(default_factory=lambda: [0] * 32)
    floating_point: list[int] = field(default_factory=lambda: [0] * 32)
    coprocessor_0: list[int] = field(default_factory=lambda: [0] * 4)

    @classmethod
    def from_config(cls, data: Any) -> RegisterDefaults:
        """Read defaults from a config table; missing entries default to zero."""
        if not isinstance(data, Mapping):
            raise SeasideError(ErrorKind.INVALID_CONFIG, "expected a table for register defaults")
        defaults = cls(
            hi=_check_u32(data.get("hi", 0), "field `hi`"),
            lo=_check_u32(data.get("lo", 0), "field `lo`"),
        )
        if "general_purpose" in data:
            defaults.general_purpose = _registers_from_config(
                data["general_purpose"],
                "general purpose registers",
                GeneralPurposeRegister.REGISTER_NAMES,
                GeneralPurposeRegister.parse,
            )
        if "floating_point" in data:
            defaults.floating_point = _registers_from_config(
                data["floating_point"],
                "floating point registers",
                FloatingPointRegister.REGISTER_NAMES,
                FloatingPointRegister.parse,
            )
        if "coprocessor_0" in data:
            defaults.coprocessor_0 = _registers_from_config(
                data["coprocessor_0"],
                "coprocessor 0 registers",
                _COPROCESSOR_0_NAMES,
                Coprocessor0Register.parse,
            )
        return defaults

    def to_config(self) -> dict[str, Any]:
        """Render the defaults as a config table, leaving out zero values."""
        result: dict[str, Any] = {}
        if self.hi:
            result["hi"] = self.hi
        if self.lo:
            result["lo"] = self.lo
        sets = (
            ("general_purpose", self.general_purpose, GeneralPurposeRegister.REGISTER_NAMES),
            ("floating_point", self.floating_point, FloatingPointRegister.REGISTER_NAMES),
            ("coprocessor_0", self.coprocessor_0, _COPROCESSOR_0_NAMES),
        )
        for key, registers, names in sets:
            if any(registers):
                result[key] = _registers_to_config(registers, names)
        return result

    def __getitem__(self, register: Register) -> int:
        if isinstance(register, GeneralPurposeRegister):
            return self.general_purpose[register.index()]
        if isinstance(register, FloatingPointRegister):
            return self.floating_point[register.index()]
        if isinstance(register, Coprocessor0Register):
            return self.coprocessor_0[register.index()]
        raise TypeError(f"not a register: {register!r}")