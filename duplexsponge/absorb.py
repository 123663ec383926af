"""Conversion of values into bytes and field elements for a sponge."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from duplexsponge.field import FieldElement, PrimeField

_WIDTHS = (8, 16, 32, 64, 128)


class Absorb(ABC):
    """A value that knows how to encode itself for a sponge."""

    @abstractmethod
    def to_sponge_bytes(self) -> bytes:
        """Encode the value as bytes."""

    @abstractmethod
    def to_sponge_field_elements(self, field: PrimeField) -> list[FieldElement]:
        """Encode the value as elements of ``field``."""


def _check_width(bits: int) -> None:
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported integer width {bits}")


@dataclass(frozen=True)
class UInt(Absorb):
    """An unsigned integer of a fixed bit width (64 stands for usize too)."""

    value: int
    bits: int = 64

    def __post_init__(self) -> None:
        _check_width(self.bits)
        if not 0 <= self.value < (1 << self.bits):
            raise OverflowError(f"{self.value} does not fit in u{self.bits}")

    def to_sponge_bytes(self) -> bytes:
        return self.value.to_bytes(self.bits // 8, "little")

    def to_sponge_field_elements(self, field: PrimeField) -> list[FieldElement]:
        return [field(self.value)]


@dataclass(frozen=True)
class SInt(Absorb):
    """A signed two's-complement integer of a fixed bit width."""

    value: int
    bits: int = 64

    def __post_init__(self) -> None:
        _check_width(self.bits)
        bound = 1 << (self.bits - 1)
        if not -bound <= self.value < bound:
            raise OverflowError(f"{self.value} does not fit in i{self.bits}")

    def to_sponge_bytes(self) -> bytes:
        return self.value.to_bytes(self.bits // 8, "little", signed=True)

    def to_sponge_field_elements(self, field: PrimeField) -> list[FieldElement]:
        elem = field(abs(self.value))
        return [-elem if self.value < 0 else elem]


@dataclass(frozen=True)
class Maybe(Absorb):
    """An optional value: a presence flag followed by the value, if any."""

    value: Any = None

    def to_sponge_bytes(self) -> bytes:
        present = self.value is not None
        out = to_sponge_bytes(present)
        if present:
            out += to_sponge_bytes(self.value)
        return out

    def to_sponge_field_elements(self, field: PrimeField) -> list[FieldElement]:
        present = self.value is not None
        out = to_sponge_field_elements(present, field)
        if present:
            out += to_sponge_field_elements(self.value, field)
        return out


def _is_byte(value: Any) -> bool:
    return isinstance(value, UInt) and value.bits == 8


def _bytes_to_field_elements(data: bytes, field: PrimeField) -> list[FieldElement]:
    prefixed = len(data).to_bytes(8, "little") + data
    chunk = (field.bit_size - 1) // 8
    if chunk == 0:
        raise ValueError("field is too small to hold a byte")
    return [
        field.from_le_bytes_mod_order(prefixed[start : start + chunk])
        for start in range(0, len(prefixed), chunk)
    ]


def field_cast(elements: list[FieldElement], field: PrimeField) -> list[FieldElement]:
    """Re-express elements of a field with the same characteristic in ``field``."""
    result = []
    for elem in elements:
        if elem.field.characteristic != field.characteristic:
            raise ValueError("trying to absorb non-native field elements")
        result.append(field.from_le_bytes_mod_order(elem.to_bytes_le()))
    return result


def to_sponge_bytes(value: Any) -> bytes:
    """Encode any absorbable value as bytes."""
    if isinstance(value, Absorb):
        return bytes(value.to_sponge_bytes())
    if isinstance(value, bool):
        return b"\x01" if value else b"\x00"
    if isinstance(value, int):
        return SInt(value, 32).to_sponge_bytes()
    if isinstance(value, FieldElement):
        return value.serialize()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple)):
        return b"".join(to_sponge_bytes(item) for item in value)
    raise TypeError(f"cannot absorb a value of type {type(value).__name__}")


def to_sponge_field_elements(value: Any, field: PrimeField) -> list[FieldElement]:
    """Encode any absorbable value as elements of ``field``.

    Plain integers count as 32-bit signed integers. A single element of a
    field with another characteristic encodes to nothing; a list of them
    raises ValueError.
    """
    if isinstance(value, Absorb):
        return list(value.to_sponge_field_elements(field))
    if isinstance(value, bool):
        return [field(int(value))]
    if isinstance(value, int):
        return SInt(value, 32).to_sponge_field_elements(field)
    if isinstance(value, FieldElement):
        if value.field.characteristic != field.characteristic:
            return []
        return field_cast([value], field)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _bytes_to_field_elements(bytes(value), field)
    if isinstance(value, (list, tuple)):
        if value and all(_is_byte(item) for item in value):
            return _bytes_to_field_elements(bytes(item.value for item in value), field)
        if value and all(isinstance(item, FieldElement) for item in value):
            return field_cast(list(value), field)
        return [elem for item in value for elem in to_sponge_field_elements(item, field)]
    raise TypeError(f"cannot absorb a value of type {type(value).__name__}")


def to_sponge_bytes_with_length(values: Any) -> bytes:
    """Encode a sequence as bytes, preceded by its length as a 64-bit integer."""
    return UInt(len(values), 64).to_sponge_bytes() + to_sponge_bytes(values)


def to_sponge_field_elements_with_length(values: Any, field: PrimeField) -> list[FieldElement]:
    """Encode a sequence as field elements, preceded by its length."""
    return UInt(len(values), 64).to_sponge_field_elements(field) + to_sponge_field_elements(
        values, field
    )


def collect_sponge_bytes(*args: Any) -> bytes:
    """Concatenate the byte encodings of several values."""
    return b"".join(to_sponge_bytes(arg) for arg in args)


def collect_sponge_field_elements(field: PrimeField, *args: Any) -> list[FieldElement]:
    """Concatenate the field-element encodings of several values."""
    return [elem for arg in args for elem in to_sponge_field_elements(arg, field)]