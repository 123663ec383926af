"""The sponge interface and its shared behaviour."""

from __future__ import annotations

import copy as _copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from duplexsponge.absorb import UInt
from duplexsponge.field import FieldElement, PrimeField


@dataclass(frozen=True)
class FieldElementSize:
    """Size of a squeezed field element: full, or truncated to some bits."""

    truncated_bits: int | None = None

    @classmethod
    def full(cls) -> FieldElementSize:
        return cls()

    @classmethod
    def truncated(cls, num_bits: int) -> FieldElementSize:
        return cls(num_bits)

    @property
    def is_full(self) -> bool:
        return self.truncated_bits is None

    def num_bits(self, field: PrimeField) -> int:
        """Number of bits to squeeze for one element of ``field``."""
        if self.truncated_bits is not None and self.truncated_bits > field.bit_size:
            raise ValueError("num_bits is greater than the capacity of the field.")
        return field.bit_size - 1


def sum_sizes(sizes: Sequence[FieldElementSize], field: PrimeField) -> int:
    """Total number of bits for all of ``sizes``."""
    return sum(size.num_bits(field) for size in sizes)


class SpongePhase(Enum):
    ABSORBING = "absorbing"
    SQUEEZING = "squeezing"


@dataclass(frozen=True)
class DuplexSpongeMode:
    """Whether a duplex sponge absorbs or squeezes, and the next rate position."""

    phase: SpongePhase
    next_index: int = 0

    @classmethod
    def absorbing(cls, next_absorb_index: int = 0) -> DuplexSpongeMode:
        return cls(SpongePhase.ABSORBING, next_absorb_index)

    @classmethod
    def squeezing(cls, next_squeeze_index: int = 0) -> DuplexSpongeMode:
        return cls(SpongePhase.SQUEEZING, next_squeeze_index)


def squeeze_field_elements_with_sizes_default(
    sponge: CryptographicSponge, field: PrimeField, sizes: Sequence[FieldElementSize]
) -> list[FieldElement]:
    """Squeeze bits and pack them, little-endian, into elements of ``field``."""
    if not sizes:
        return []
    bits = sponge.squeeze_bits(sum_sizes(sizes, field))
    output = []
    position = 0
    for size in sizes:
        num_bits = size.num_bits(field)
        window = bits[position : position + num_bits]
        position += num_bits
        data = bytes(
            sum(1 << i for i, bit in enumerate(window[start : start + 8]) if bit)
            for start in range(0, len(window), 8)
        )
        output.append(field.from_le_bytes_mod_order(data))
    return output


class CryptographicSponge(ABC):
    """Absorbs inputs and squeezes outputs that depend on everything before."""

    @abstractmethod
    def absorb(self, value: Any) -> None:
        """Absorb an input into the sponge."""

    @abstractmethod
    def squeeze_bytes(self, num_bytes: int) -> bytes:
        """Squeeze ``num_bytes`` bytes."""

    @abstractmethod
    def squeeze_bits(self, num_bits: int) -> list[bool]:
        """Squeeze ``num_bits`` bits."""

    def squeeze_field_elements_with_sizes(
        self, field: PrimeField, sizes: Sequence[FieldElementSize]
    ) -> list[FieldElement]:
        """Squeeze one element of ``field`` for each entry of ``sizes``."""
        return squeeze_field_elements_with_sizes_default(self, field, sizes)

    def squeeze_field_elements(self, field: PrimeField, num_elements: int) -> list[FieldElement]:
        """Squeeze ``num_elements`` full-size elements of ``field``."""
        return self.squeeze_field_elements_with_sizes(
            field, [FieldElementSize.full()] * num_elements
        )

    def fork(self, domain: bytes) -> CryptographicSponge:
        """Return a copy with the domain, prefixed by its length, absorbed."""
        new_sponge = self.copy()
        data = bytes(domain)
        new_sponge.absorb(UInt(len(data), 64).to_sponge_bytes() + data)
        return new_sponge

    def copy(self) -> CryptographicSponge:
        """Return an independent copy of this sponge."""
        return _copy.deepcopy(self)


class FieldBasedCryptographicSponge(CryptographicSponge):
    """A sponge whose state is made of elements of a native field."""

    @property
    @abstractmethod
    def native_field(self) -> PrimeField:
        """The field the sponge works over."""

    @abstractmethod
    def squeeze_native_field_elements(self, num_elements: int) -> list[FieldElement]:
        """Squeeze ``num_elements`` elements of the native field."""

    def squeeze_native_field_elements_with_sizes(
        self, sizes: Sequence[FieldElementSize]
    ) -> list[FieldElement]:
        """Squeeze native elements; any truncated size falls back to bit packing."""
        if all(size.is_full for size in sizes):
            return self.squeeze_native_field_elements(len(sizes))
        return squeeze_field_elements_with_sizes_default(self, self.native_field, sizes)