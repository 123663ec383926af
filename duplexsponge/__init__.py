"""Poseidon duplex sponge over prime fields, with Grain LFSR parameter generation."""

__version__ = "0.1.0"

__all__ = [
    "absorb",
    "defaults",
    "encoding",
    "field",
    "grain_lfsr",
    "poseidon",
    "reference_params",
    "sponge",
]