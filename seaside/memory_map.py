"""Memory regions of the emulated machine and their address ranges."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from seaside.errors import ErrorKind, SeasideError

_U32_MAX = 0xFFFF_FFFF


def _expect_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"expected a table for {what}")
    return value


def _require_u32(data: Mapping[str, Any], key: str) -> int:
    try:
        value = data[key]
    except KeyError:
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"missing field `{key}`") from None
    return _as_u32(value, key)


def _as_u32(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"field `{key}` must be an integer")
    if not 0 <= value <= _U32_MAX:
        raise SeasideError(
            ErrorKind.INVALID_CONFIG, f"field `{key}` must fit in an unsigned 32-bit integer"
        )
    return value


def _range_of(value: Any) -> AddressRange:
    if isinstance(value, AddressRange):
        return value
    if isinstance(value, (Segment, RuntimeData)):
        return value.address_range
    raise TypeError(f"expected an address range, segment or runtime data, got {value!r}")


@dataclass
class AddressRange:
    """An inclusive range of addresses."""

    base: int
    limit: int

    def contains(self, other: int | AddressRange | Segment | RuntimeData) -> bool:
        """True if an address, or another range entirely, lies within this range."""
        if isinstance(other, int) and not isinstance(other, bool):
            return self.base <= other <= self.limit
        inner = _range_of(other)
        return self.base <= inner.base and inner.limit <= self.limit

    def overlapping(self, other: AddressRange | Segment | RuntimeData) -> bool:
        """True if this range reaches the start of ``other``.

        Ranges are expected in ascending order, so this only checks that this
        range's limit is not below the other's base.
        """
        return self.limit >= _range_of(other).base

    @classmethod
    def from_config(cls, data: Any) -> AddressRange:
        data = _expect_mapping(data, "address range")
        return cls(base=_require_u32(data, "base"), limit=_require_u32(data, "limit"))

    def to_config(self) -> dict[str, Any]:
        return {"base": self.base, "limit": self.limit}


@dataclass
class Segment:
    """The addresses of a segment and the most bytes to allocate for it."""

    address_range: AddressRange
    allocate: int

    def contains(self, other: int | AddressRange | Segment | RuntimeData) -> bool:
        return self.address_range.contains(other)

    def overlapping(self, other: AddressRange | Segment | RuntimeData) -> bool:
        return self.address_range.overlapping(other)

    @classmethod
    def from_config(cls, data: Any) -> Segment:
        data = _expect_mapping(data, "segment")
        return cls(
            address_range=AddressRange.from_config(data),
            allocate=_require_u32(data, "allocate"),
        )

    def to_config(self) -> dict[str, Any]:
        return {**self.address_range.to_config(), "allocate": self.allocate}


@dataclass
class RuntimeData:
    """The addresses of the heap and stack and the bytes allocated for each."""

    address_range: AddressRange
    heap_size: int
    stack_size: int

    @classmethod
    def from_config(cls, data: Any) -> RuntimeData:
        data = _expect_mapping(data, "runtime data")
        return cls(
            address_range=AddressRange.from_config(data),
            heap_size=_require_u32(data, "heap_size"),
            stack_size=_require_u32(data, "stack_size"),
        )

    def to_config(self) -> dict[str, Any]:
        return {
            **self.address_range.to_config(),
            "heap_size": self.heap_size,
            "stack_size": self.stack_size,
        }


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise SeasideError(ErrorKind.INVALID_CONFIG, f"missing field `{key}`") from None


@dataclass
class Segments:
    """The segments of the memory map."""

    text: Segment
    extern: Segment
    data: Segment
    runtime_data: RuntimeData
    ktext: Segment
    kdata: Segment
    mmio: Segment

    @classmethod
    def from_config(cls, data: Any) -> Segments:
        data = _expect_mapping(data, "segments")
        return cls(
            text=Segment.from_config(_require(data, "text")),
            extern=Segment.from_config(_require(data, "extern")),
            data=Segment.from_config(_require(data, "data")),
            runtime_data=RuntimeData.from_config(_require(data, "runtime_data")),
            ktext=Segment.from_config(_require(data, "ktext")),
            kdata=Segment.from_config(_require(data, "kdata")),
            mmio=Segment.from_config(_require(data, "mmio")),
        )

    def to_config(self) -> dict[str, Any]:
        return {
            "text": self.text.to_config(),
            "extern": self.extern.to_config(),
            "data": self.data.to_config(),
            "runtime_data": self.runtime_data.to_config(),
            "ktext": self.ktext.to_config(),
            "kdata": self.kdata.to_config(),
            "mmio": self.mmio.to_config(),
        }

    def validate(self) -> None:
        """Raise if any two segments that share a space overlap."""
        checks = (
            (self.text, self.extern, "text segment cannot overlap with extern segment"),
            (self.text, self.data, "text segment cannot overlap with data segment"),
            (self.text, self.runtime_data, "text segment cannot overlap with runtime data"),
            (self.extern, self.data, "extern segment cannot overlap with data segment"),
            (self.extern, self.runtime_data, "extern segment cannot overlap with runtime data"),
            (self.data, self.runtime_data, "data segment cannot overlap with runtime data"),
            (self.ktext, self.kdata, "ktext segment cannot overlap with kdata segment"),
            (self.ktext, self.mmio, "ktext segment cannot overlap with MMIO segment"),
            (self.kdata, self.mmio, "kdata segment cannot overlap with MMIO segment"),
        )
        for first, second, message in checks:
            if first.overlapping(second):
                raise SeasideError(ErrorKind.INVALID_CONFIG, message)


@dataclass
class MemoryMap:
    """Maps the memory regions of the machine to address ranges."""

    user_space: AddressRange
    kernel_space: AddressRange
    exception_handler: int | None
    segments: Segments

    @classmethod
    def from_config(cls, data: Any) -> MemoryMap:
        data = _expect_mapping(data, "memory map")
        handler = data.get("exception_handler")
        return cls(
            user_space=AddressRange.from_config(_require(data, "user_space")),
            kernel_space=AddressRange.from_config(_require(data, "kernel_space")),
            exception_handler=None if handler is None else _as_u32(handler, "exception_handler"),
            segments=Segments.from_config(_require(data, "segments")),
        )

    def to_config(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "user_space": self.user_space.to_config(),
            "kernel_space": self.kernel_space.to_config(),
        }
        if self.exception_handler is not None:
            result["exception_handler"] = self.exception_handler
        result["segments"] = self.segments.to_config()
        return result

    def _error_message(self) -> str | None:
        if self.user_space.overlapping(self.kernel_space):
            return "user space and kernel space cannot overlap"
        if self.exception_handler is not None:
            # A placed exception handler stands in for the segment placement checks.
            if not self.kernel_space.contains(self.exception_handler):
                return "exception handler must be in kernel space"
            return None
        segments = self.segments
        checks = (
            (self.user_space, segments.text, "text segment must be entirely within user space"),
            (self.user_space, segments.extern, "extern segment must be entirely within user space"),
            (self.user_space, segments.data, "data segment must be entirely within user space"),
            (self.user_space, segments.runtime_data, "runtime data must be entirely within user space"),
            (self.kernel_space, segments.ktext, "ktext segment must be entirely within kernel space"),
            (self.kernel_space, segments.kdata, "kdata segment must be entirely within kernel space"),
            (self.kernel_space, segments.mmio, "MMIO segment must be entirely within kernel space"),
        )
        for space, segment, message in checks:
            if not space.contains(segment):
                return message
        return None

    def validate(self) -> None:
        """Raise if the spaces or segments are placed inconsistently."""
        message = self._error_message()
        if message is not None:
            raise SeasideError(ErrorKind.INVALID_CONFIG, message)
        self.segments.validate()