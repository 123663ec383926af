"""A duplex sponge built on the Poseidon permutation."""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import Any, Sequence

from duplexsponge.absorb import field_cast, to_sponge_field_elements
from duplexsponge.field import FieldElement, PrimeField
from duplexsponge.sponge import (
    DuplexSpongeMode,
    FieldBasedCryptographicSponge,
    FieldElementSize,
    SpongePhase,
    squeeze_field_elements_with_sizes_default,
)


@dataclass
class PoseidonConfig:
    """Round counts, S-box exponent, round constants, MDS matrix, rate and capacity."""

    full_rounds: int
    partial_rounds: int
    alpha: int
    ark: list[list[FieldElement]]
    mds: list[list[FieldElement]]
    rate: int
    capacity: int

    def __post_init__(self) -> None:
        width = self.rate + self.capacity
        if self.rate < 1:
            raise ValueError("rate must be at least 1")
        if len(self.ark) != self.full_rounds + self.partial_rounds:
            raise ValueError("ark must have one row per round")
        if any(len(row) != width for row in self.ark):
            raise ValueError("each ark row must have rate + capacity entries")
        if len(self.mds) != width or any(len(row) != width for row in self.mds):
            raise ValueError("mds must be a square matrix of size rate + capacity")

    @property
    def field(self) -> PrimeField:
        return self.mds[0][0].field

    @property
    def width(self) -> int:
        return self.rate + self.capacity


@dataclass
class PoseidonSpongeState:
    """The state of a Poseidon sponge, without its parameters."""

    state: list[FieldElement]
    mode: DuplexSpongeMode = dc_field(default_factory=DuplexSpongeMode.absorbing)


class PoseidonSponge(FieldBasedCryptographicSponge):
    """A duplex sponge using the Poseidon permutation over its config's field."""

    def __init__(self, config: PoseidonConfig) -> None:
        self.parameters = config
        self.state = [config.field.zero] * config.width
        self.mode = DuplexSpongeMode.absorbing(0)

    @property
    def native_field(self) -> PrimeField:
        return self.parameters.field

    def copy(self) -> PoseidonSponge:
        clone = PoseidonSponge(self.parameters)
        clone.state = list(self.state)
        clone.mode = self.mode
        return clone

    def _round(self, state: list[FieldElement], round_number: int, full: bool) -> list[FieldElement]:
        params = self.parameters
        state = [elem + key for elem, key in zip(state, params.ark[round_number])]
        if full:
            state = [elem.pow(params.alpha) for elem in state]
        else:
            state[0] = state[0].pow(params.alpha)
        zero = self.native_field.zero
        return [sum((elem * coeff for elem, coeff in zip(state, row)), zero) for row in params.mds]

    def permute(self) -> None:
        """Apply the Poseidon permutation to the state."""
        params = self.parameters
        half = params.full_rounds // 2
        partial_end = half + params.partial_rounds
        state = list(self.state)
        for round_number in range(params.full_rounds + params.partial_rounds):
            full = round_number < half or round_number >= partial_end
            state = self._round(state, round_number, full)
        self.state = state

    def _absorb_internal(self, rate_start: int, elements: list[FieldElement]) -> None:
        rate, capacity = self.parameters.rate, self.parameters.capacity
        remaining = elements
        while True:
            if rate_start + len(remaining) <= rate:
                for offset, elem in enumerate(remaining):
                    position = capacity + rate_start + offset
                    self.state[position] = self.state[position] + elem
                self.mode = DuplexSpongeMode.absorbing(rate_start + len(remaining))
                return
            taken = rate - rate_start
            for offset, elem in enumerate(remaining[:taken]):
                position = capacity + rate_start + offset
                self.state[position] = self.state[position] + elem
            self.permute()
            remaining = remaining[taken:]
            rate_start = 0

    def _squeeze_internal(self, rate_start: int, count: int) -> list[FieldElement]:
        rate, capacity = self.parameters.rate, self.parameters.capacity
        output: list[FieldElement] = []
        remaining = count
        while True:
            start = capacity + rate_start
            if rate_start + remaining <= rate:
                output.extend(self.state[start : start + remaining])
                self.mode = DuplexSpongeMode.squeezing(rate_start + remaining)
                return output
            taken = rate - rate_start
            output.extend(self.state[start : start + taken])
            if remaining != rate:
                self.permute()
            remaining -= taken
            rate_start = 0

    def absorb(self, value: Any) -> None:
        elems = to_sponge_field_elements(value, self.native_field)
        if not elems:
            return
        if self.mode.phase is SpongePhase.ABSORBING:
            index = self.mode.next_index
            if index == self.parameters.rate:
                self.permute()
                index = 0
            self._absorb_internal(index, elems)
        else:
            self.permute()
            self._absorb_internal(0, elems)

    def squeeze_bytes(self, num_bytes: int) -> bytes:
        usable_bytes = (self.native_field.bit_size - 1) // 8
        num_elements = -(-num_bytes // usable_bytes)
        data = b"".join(
            elem.to_bytes_le()[:usable_bytes]
            for elem in self.squeeze_native_field_elements(num_elements)
        )
        return data[:num_bytes]

    def squeeze_bits(self, num_bits: int) -> list[bool]:
        usable_bits = self.native_field.bit_size - 1
        num_elements = -(-num_bits // usable_bits)
        bits = [
            bit
            for elem in self.squeeze_native_field_elements(num_elements)
            for bit in elem.to_bits_le()[:usable_bits]
        ]
        return bits[:num_bits]

    def squeeze_native_field_elements(self, num_elements: int) -> list[FieldElement]:
        if self.mode.phase is SpongePhase.ABSORBING:
            self.permute()
            return self._squeeze_internal(0, num_elements)
        index = self.mode.next_index
        if index == self.parameters.rate:
            self.permute()
            index = 0
        return self._squeeze_internal(index, num_elements)

    def squeeze_field_elements_with_sizes(
        self, field: PrimeField, sizes: Sequence[FieldElementSize]
    ) -> list[FieldElement]:
        if field.characteristic == self.native_field.characteristic:
            return field_cast(self.squeeze_native_field_elements_with_sizes(sizes), field)
        return squeeze_field_elements_with_sizes_default(self, field, sizes)

    def squeeze_field_elements(self, field: PrimeField, num_elements: int) -> list[FieldElement]:
        if field == self.native_field:
            return field_cast(self.squeeze_native_field_elements(num_elements), field)
        return self.squeeze_field_elements_with_sizes(
            field, [FieldElementSize.full()] * num_elements
        )

    def into_state(self) -> PoseidonSpongeState:
        """Return the sponge's state and mode."""
        return PoseidonSpongeState(list(self.state), self.mode)

    @classmethod
    def from_state(cls, state: PoseidonSpongeState, config: PoseidonConfig) -> PoseidonSponge:
        """Build a sponge with ``config`` that resumes from ``state``."""
        if len(state.state) != config.width:
            raise ValueError("state length does not match the configuration")
        sponge = cls(config)
        sponge.state = list(state.state)
        sponge.mode = state.mode
        return sponge