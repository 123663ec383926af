"""Default Poseidon parameters derived from the Grain LFSR."""

from __future__ import annotations

from dataclasses import dataclass

from duplexsponge.field import FR, FieldElement, PrimeField
from duplexsponge.grain_lfsr import PoseidonGrainLFSR
from duplexsponge.poseidon import PoseidonConfig


@dataclass(frozen=True)
class PoseidonDefaultConfigEntry:
    """One row of a default parameter table.

    ``skip_matrices`` is the number of candidate MDS matrices drawn from the
    LFSR and discarded before the one that is used.
    """

    rate: int
    alpha: int
    full_rounds: int
    partial_rounds: int
    skip_matrices: int


@dataclass(frozen=True)
class _DefaultTables:
    opt_for_constraints: tuple[PoseidonDefaultConfigEntry, ...]
    opt_for_weights: tuple[PoseidonDefaultConfigEntry, ...]


_E = PoseidonDefaultConfigEntry

_DEFAULT_TABLES: dict[PrimeField, _DefaultTables] = {
    FR: _DefaultTables(
        opt_for_constraints=(
            _E(2, 17, 8, 31, 0),
            _E(3, 5, 8, 56, 0),
            _E(4, 5, 8, 56, 0),
            _E(5, 5, 8, 57, 0),
            _E(6, 5, 8, 57, 0),
            _E(7, 5, 8, 57, 0),
            _E(8, 5, 8, 57, 0),
        ),
        opt_for_weights=(
            _E(2, 257, 8, 13, 0),
            _E(3, 257, 8, 13, 0),
            _E(4, 257, 8, 13, 0),
            _E(5, 257, 8, 13, 0),
            _E(6, 257, 8, 13, 0),
            _E(7, 257, 8, 13, 0),
            _E(8, 257, 8, 13, 0),
        ),
    ),
}


def find_poseidon_ark_and_mds(
    field: PrimeField,
    prime_bits: int,
    rate: int,
    full_rounds: int,
    partial_rounds: int,
    skip_matrices: int,
) -> tuple[list[list[FieldElement]], list[list[FieldElement]]]:
    """Compute round constants and a Cauchy MDS matrix from the Grain LFSR."""
    width = rate + 1
    lfsr = PoseidonGrainLFSR(False, prime_bits, width, full_rounds, partial_rounds)

    ark = [
        lfsr.get_field_elements_rejection_sampling(field, width)
        for _ in range(full_rounds + partial_rounds)
    ]

    for _ in range(skip_matrices):
        lfsr.get_field_elements_mod_p(field, 2 * width)

    xs = lfsr.get_field_elements_mod_p(field, width)
    ys = lfsr.get_field_elements_mod_p(field, width)
    mds = [[(x + y).inverse() for y in ys] for x in xs]
    return ark, mds


def get_default_poseidon_parameters(
    field: PrimeField, rate: int, optimized_for_weights: bool
) -> PoseidonConfig | None:
    """Default parameters for ``field`` and ``rate``, or None if the rate has none.

    Raises ValueError when no default table exists for ``field``.
    """
    tables = _DEFAULT_TABLES.get(field)
    if tables is None:
        raise ValueError(f"no default Poseidon parameters for field {field.name or field.modulus}")
    entries = tables.opt_for_weights if optimized_for_weights else tables.opt_for_constraints
    entry = next((e for e in entries if e.rate == rate), None)
    if entry is None:
        return None
    ark, mds = find_poseidon_ark_and_mds(
        field,
        field.bit_size,
        rate,
        entry.full_rounds,
        entry.partial_rounds,
        entry.skip_matrices,
    )
    return PoseidonConfig(
        full_rounds=entry.full_rounds,
        partial_rounds=entry.partial_rounds,
        alpha=entry.alpha,
        ark=ark,
        mds=mds,
        rate=entry.rate,
        capacity=1,
    )