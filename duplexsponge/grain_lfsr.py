"""The Grain LFSR used to derive Poseidon round constants and MDS matrices."""

from __future__ import annotations

from duplexsponge.field import FieldElement, PrimeField

_STATE_BITS = 80
_TAPS = (62, 51, 38, 23, 13, 0)


def _write_bits(state: list[bool], first: int, last: int, value: int) -> None:
    """Write ``value`` big-endian into positions ``first..=last`` of ``state``."""
    for position in range(last, first - 1, -1):
        state[position] = bool(value & 1)
        value >>= 1


class PoseidonGrainLFSR:
    """An 80-bit self-shrinking Grain LFSR seeded from the Poseidon parameters."""

    def __init__(
        self,
        is_sbox_an_inverse: bool,
        prime_num_bits: int,
        state_len: int,
        num_full_rounds: int,
        num_partial_rounds: int,
    ) -> None:
        self.prime_num_bits = prime_num_bits
        state = [False] * _STATE_BITS
        # b0, b1 describe the field; b2..b5 describe the S-box.
        state[1] = True
        state[5] = bool(is_sbox_an_inverse)
        _write_bits(state, 6, 17, prime_num_bits)
        _write_bits(state, 18, 29, state_len)
        _write_bits(state, 30, 39, num_full_rounds)
        _write_bits(state, 40, 49, num_partial_rounds)
        for position in range(50, _STATE_BITS):
            state[position] = True
        self.state = state
        self.head = 0
        for _ in range(2 * _STATE_BITS):
            self._update()

    def _update(self) -> bool:
        new_bit = False
        for tap in _TAPS:
            new_bit ^= self.state[(self.head + tap) % _STATE_BITS]
        self.state[self.head] = new_bit
        self.head = (self.head + 1) % _STATE_BITS
        return new_bit

    def get_bits(self, num_bits: int) -> list[bool]:
        """Return ``num_bits`` output bits after self-shrinking."""
        result = []
        for _ in range(num_bits):
            while not self._update():
                self._update()
            result.append(self._update())
        return result

    def _check_field(self, field: PrimeField) -> None:
        if field.bit_size != self.prime_num_bits:
            raise ValueError(
                f"field has {field.bit_size} bits, the LFSR was seeded for {self.prime_num_bits}"
            )

    def _next_integer(self) -> int:
        value = 0
        for bit in self.get_bits(self.prime_num_bits):
            value = (value << 1) | int(bit)
        return value

    def get_field_elements_rejection_sampling(
        self, field: PrimeField, num_elems: int
    ) -> list[FieldElement]:
        """Draw elements, discarding any integer that is not below the modulus."""
        self._check_field(field)
        result = []
        for _ in range(num_elems):
            while True:
                elem = field.from_bigint(self._next_integer())
                if elem is not None:
                    result.append(elem)
                    break
        return result

    def get_field_elements_mod_p(self, field: PrimeField, num_elems: int) -> list[FieldElement]:
        """Draw elements, reducing each integer modulo the field's modulus."""
        self._check_field(field)
        return [field(self._next_integer()) for _ in range(num_elems)]