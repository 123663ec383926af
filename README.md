# duplexsponge

A duplex cryptographic sponge built on the Poseidon permutation, working over
prime fields in pure Python, with no dependencies outside the standard
library.

## Modules

- `duplexsponge.field`: `PrimeField` and `FieldElement`, modular arithmetic
  with little-endian bit and byte conversions (`to_bits_le`, `to_bytes_le`,
  `serialize`), `inverse`, `pow`, `from_le_bytes_mod_order` and
  `from_bigint`. `FR` is the BLS12-381 scalar field.
- `duplexsponge.absorb`: how values are turned into sponge bytes or field
  elements. `to_sponge_bytes` and `to_sponge_field_elements` accept bytes,
  booleans, plain integers (encoded as 32-bit signed integers), field
  elements, lists and tuples of these, and the explicit wrappers `UInt`
  (unsigned, 8 to 128 bits), `SInt` (signed, 8 to 128 bits) and `Maybe`
  (a presence flag followed by the value). Byte strings become field
  elements by packing their 64-bit length followed by the bytes. Also
  `to_sponge_bytes_with_length`, `to_sponge_field_elements_with_length`,
  `field_cast`, `collect_sponge_bytes` and `collect_sponge_field_elements`.
  Subclass `Absorb` to give your own types an encoding.
- `duplexsponge.sponge`: the abstract `CryptographicSponge` and
  `FieldBasedCryptographicSponge` interfaces, `FieldElementSize`,
  `sum_sizes`, `SpongePhase`, `DuplexSpongeMode` and
  `squeeze_field_elements_with_sizes_default`.
- `duplexsponge.poseidon`: `PoseidonConfig`, `PoseidonSponge` and
  `PoseidonSpongeState`.
- `duplexsponge.grain_lfsr`: `PoseidonGrainLFSR`, the LFSR used to derive
  round constants and MDS matrices.
- `duplexsponge.defaults`: `PoseidonDefaultConfigEntry`,
  `find_poseidon_ark_and_mds` and `get_default_poseidon_parameters`, which
  derives round constants and a Cauchy MDS matrix for rates 2 to 8,
  optimised either for constraints or for weights.
- `duplexsponge.reference_params`: `reference_poseidon_config`, a fixed
  configuration (alpha 17, rate 2, capacity 1, 8 full and 29 partial rounds)
  over `FR`.
- `duplexsponge.encoding`: `absorb_all`, which absorbs several values in
  turn, and `encodings_differ`, which checks that two values differ both in
  their byte encodings and in what a fresh Poseidon sponge squeezes after
  absorbing them.

## Installing

```
pip install .
```

## Example

```python
from duplexsponge.defaults import get_default_poseidon_parameters
from duplexsponge.field import FR
from duplexsponge.poseidon import PoseidonSponge

config = get_default_poseidon_parameters(FR, 2, False)

sponge = PoseidonSponge(config)
sponge.absorb([FR(0), FR(1), FR(2)])
print(sponge.squeeze_native_field_elements(3))
```

Default parameter tables exist only for `FR`.
`get_default_poseidon_parameters` raises `ValueError` for any other field,
and returns `None` when the table has no entry for the requested rate.

Besides native field elements, a sponge can squeeze bytes (`squeeze_bytes`),
bits (`squeeze_bits`) and elements of another field
(`squeeze_field_elements`, `squeeze_field_elements_with_sizes`). It can be
split with domain separation through `fork(domain)`, copied with `copy()`,
and saved and restored with `into_state()` and
`PoseidonSponge.from_state(state, config)`.

## What it does not do

The package computes sponge outputs directly. It has no in-circuit
(constraint-system) versions of the sponge or of the encodings, and no
command-line tool.

## Running the tests

```
pip install .[test]
pytest
```