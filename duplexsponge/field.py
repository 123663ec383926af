"""Prime fields and their elements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PrimeField:
    """The field of integers modulo the prime ``modulus``."""

    modulus: int
    name: str = ""
    generator: int | None = None

    def __post_init__(self) -> None:
        if self.modulus < 2:
            raise ValueError("modulus must be at least 2")

    @property
    def bit_size(self) -> int:
        """Number of bits needed to write the modulus."""
        return self.modulus.bit_length()

    @property
    def characteristic(self) -> int:
        return self.modulus

    @property
    def num_limbs(self) -> int:
        """Number of 64-bit limbs in the big-integer representation."""
        return (self.bit_size + 63) // 64

    @property
    def serialized_size(self) -> int:
        """Length in bytes of a compressed serialized element."""
        return (self.bit_size + 7) // 8

    @property
    def zero(self) -> FieldElement:
        return FieldElement(0, self)

    @property
    def one(self) -> FieldElement:
        return FieldElement(1, self)

    def __call__(self, value: int | bool | str | FieldElement) -> FieldElement:
        """Build an element from an integer, a decimal string or an element."""
        if isinstance(value, FieldElement):
            if value.field != self:
                raise ValueError("element belongs to a different field")
            return value
        if isinstance(value, str):
            value = int(value.strip(), 10)
        if not isinstance(value, int):
            raise TypeError(f"cannot build a field element from {type(value).__name__}")
        return FieldElement(value % self.modulus, self)

    def from_le_bytes_mod_order(self, data: bytes | bytearray) -> FieldElement:
        """Read little-endian bytes as an integer and reduce it modulo p."""
        return FieldElement(int.from_bytes(bytes(data), "little") % self.modulus, self)

    def from_bigint(self, value: int) -> FieldElement | None:
        """Return the element for ``value``, or None if it is not below p."""
        if 0 <= value < self.modulus:
            return FieldElement(value, self)
        return None


@dataclass(frozen=True, repr=False)
class FieldElement:
    """An element of a prime field, held as its canonical integer."""

    value: int
    field: PrimeField

    def __post_init__(self) -> None:
        if not 0 <= self.value < self.field.modulus:
            raise ValueError("value is not reduced modulo the field's modulus")

    def __repr__(self) -> str:
        return f"{self.field.name or 'F'}({self.value})"

    def __int__(self) -> int:
        return self.value

    def _other(self, other: object) -> int | None:
        if isinstance(other, FieldElement):
            if other.field != self.field:
                raise TypeError("cannot combine elements of different fields")
            return other.value
        if isinstance(other, int):
            return other % self.field.modulus
        return None

    def _make(self, value: int) -> FieldElement:
        return FieldElement(value % self.field.modulus, self.field)

    def __add__(self, other: object) -> FieldElement:
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return self._make(self.value + rhs)

    __radd__ = __add__

    def __sub__(self, other: object) -> FieldElement:
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return self._make(self.value - rhs)

    def __rsub__(self, other: object) -> FieldElement:
        lhs = self._other(other)
        if lhs is None:
            return NotImplemented
        return self._make(lhs - self.value)

    def __mul__(self, other: object) -> FieldElement:
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return self._make(self.value * rhs)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> FieldElement:
        rhs = self._other(other)
        if rhs is None:
            return NotImplemented
        return self * self._make(rhs).inverse()

    def __neg__(self) -> FieldElement:
        return self._make(-self.value)

    def is_zero(self) -> bool:
        return self.value == 0

    def inverse(self) -> FieldElement:
        """Multiplicative inverse; zero has none."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return FieldElement(pow(self.value, -1, self.field.modulus), self.field)

    def pow(self, exponent: int) -> FieldElement:
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return FieldElement(pow(self.value, exponent, self.field.modulus), self.field)

    def to_bits_le(self) -> list[bool]:
        """Bits of the canonical integer, least significant first, over all limbs."""
        width = 64 * self.field.num_limbs
        return [bool((self.value >> i) & 1) for i in range(width)]

    def to_bytes_le(self) -> bytes:
        """Bytes of the canonical integer, little-endian, over all limbs."""
        return self.value.to_bytes(8 * self.field.num_limbs, "little")

    def serialize(self) -> bytes:
        """Compressed serialization: little-endian, ``serialized_size`` bytes."""
        return self.value.to_bytes(self.field.serialized_size, "little")


FR = PrimeField(
    52435875175126190479447740508185965837690552500527637822603658699938581184513,
    name="bls12_381_fr",
    generator=7,
)