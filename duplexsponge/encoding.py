"""Helpers for feeding several values to a sponge and comparing encodings."""

from __future__ import annotations

from typing import Any

from duplexsponge.absorb import to_sponge_bytes
from duplexsponge.field import PrimeField
from duplexsponge.poseidon import PoseidonConfig, PoseidonSponge
from duplexsponge.sponge import CryptographicSponge

_SQUEEZE_COUNT = 3


def absorb_all(sponge: CryptographicSponge, *args: Any) -> None:
    """Absorb each of ``args`` into ``sponge``, one after another."""
    if not args:
        raise ValueError("absorb_all needs at least one value to absorb")
    for value in args:
        sponge.absorb(value)


def encodings_differ(a: Any, b: Any, config: PoseidonConfig, field: PrimeField) -> bool:
    """Tell whether ``a`` and ``b`` encode apart, both as bytes and through a sponge.

    Each value is absorbed into a fresh Poseidon sponge built from ``config``;
    the values count as different only if their byte encodings differ and the
    first three squeezed elements differ too.
    """
    if config.field != field:
        raise ValueError("the configuration does not belong to the given field")
    if to_sponge_bytes(a) == to_sponge_bytes(b):
        return False
    first = PoseidonSponge(config)
    second = PoseidonSponge(config)
    first.absorb(a)
    second.absorb(b)
    return first.squeeze_native_field_elements(
        _SQUEEZE_COUNT
    ) != second.squeeze_native_field_elements(_SQUEEZE_COUNT)