import pytest

from duplexsponge.field import FR, PrimeField
from duplexsponge.poseidon import PoseidonConfig, PoseidonSponge, PoseidonSpongeState
from duplexsponge.sponge import DuplexSpongeMode, FieldElementSize


def identity_mds(width):
    return [[FR(1 if i == j else 0) for j in range(width)] for i in range(width)]


def make_config(full_rounds=0, partial_rounds=0, alpha=3, ark_value=0):
    ark = [[FR(ark_value)] * 3 for _ in range(full_rounds + partial_rounds)]
    return PoseidonConfig(full_rounds, partial_rounds, alpha, ark, identity_mds(3), 2, 1)


def mixing_config():
    rounds = 6
    ark = [[FR(7 * r + c + 1) for c in range(3)] for r in range(rounds)]
    mds = [[FR(i + j + 1).inverse() for j in range(3)] for i in range(3)]
    return PoseidonConfig(4, 2, 5, ark, mds, 2, 1)


def test_config_rejects_wrong_ark_length():
    with pytest.raises(ValueError):
        PoseidonConfig(2, 1, 5, [[FR(0)] * 3] * 2, identity_mds(3), 2, 1)


def test_config_rejects_bad_mds():
    with pytest.raises(ValueError):
        PoseidonConfig(0, 0, 5, [], identity_mds(2), 2, 1)


def test_identity_permutation_squeeze_order():
    sponge = PoseidonSponge(make_config())
    sponge.absorb([FR(5), FR(7)])
    assert sponge.squeeze_native_field_elements(1) == [FR(5)]
    assert sponge.squeeze_native_field_elements(2) == [FR(7), FR(5)]


def test_absorb_beyond_rate_wraps():
    sponge = PoseidonSponge(make_config())
    sponge.absorb([FR(1), FR(2), FR(3)])
    assert sponge.mode == DuplexSpongeMode.absorbing(1)
    assert sponge.squeeze_native_field_elements(2) == [FR(4), FR(2)]


def test_empty_absorb_is_noop():
    sponge = PoseidonSponge(make_config())
    sponge.absorb([])
    assert sponge.state == [FR.zero] * 3
    assert sponge.mode == DuplexSpongeMode.absorbing(0)


def test_full_round_applies_sbox_to_every_element():
    sponge = PoseidonSponge(make_config(full_rounds=1, alpha=3))
    sponge.absorb([FR(2), FR(3)])
    assert sponge.squeeze_native_field_elements(2) == [FR(8), FR(27)]


def test_partial_round_applies_sbox_to_first_element_only():
    sponge = PoseidonSponge(make_config(partial_rounds=1, alpha=3, ark_value=1))
    sponge.absorb([FR(2), FR(3)])
    assert sponge.squeeze_native_field_elements(2) == [FR(3), FR(4)]
    assert sponge.state[0] == FR(1)


def test_squeeze_bytes_takes_low_bytes():
    sponge = PoseidonSponge(make_config())
    sponge.absorb([FR(0x0102)])
    assert sponge.squeeze_bytes(3) == bytes([2, 1, 0])


def test_squeeze_bits_takes_low_bits():
    sponge = PoseidonSponge(make_config())
    sponge.absorb([FR(0b1011)])
    assert sponge.squeeze_bits(6) == [True, True, False, True, False, False]


def test_squeeze_lengths():
    sponge = PoseidonSponge(mixing_config())
    sponge.absorb([FR(1)])
    assert len(sponge.squeeze_bytes(100)) == 100
    assert len(sponge.squeeze_bits(600)) == 600
    assert len(sponge.squeeze_native_field_elements(5)) == 5


def test_squeeze_cast_native_matches_native():
    sponge1 = PoseidonSponge(mixing_config())
    sponge1.absorb(FR(12345))
    sponge2 = sponge1.copy()
    assert sponge1.squeeze_native_field_elements(5) == sponge2.squeeze_field_elements(FR, 5)


def test_squeeze_with_full_sizes_matches_native():
    sponge1 = PoseidonSponge(mixing_config())
    sponge1.absorb([FR(3), FR(9)])
    sponge2 = sponge1.copy()
    sizes = [FieldElementSize.full()] * 3
    assert sponge1.squeeze_field_elements_with_sizes(FR, sizes) == (
        sponge2.squeeze_native_field_elements(3)
    )


def test_nonnative_squeeze_is_bounded_and_deterministic():
    small = PrimeField(65537)
    sponge1 = PoseidonSponge(mixing_config())
    sponge1.absorb([FR(42)])
    sponge2 = sponge1.copy()
    out = sponge1.squeeze_field_elements(small, 4)
    assert out == sponge2.squeeze_field_elements(small, 4)
    assert len(out) == 4
    assert all(elem.field == small and elem.value < 2**16 for elem in out)


def test_copy_is_independent():
    sponge = PoseidonSponge(mixing_config())
    sponge.absorb([FR(1), FR(2)])
    clone = sponge.copy()
    clone.absorb([FR(3)])
    other = sponge.copy()
    assert sponge.squeeze_native_field_elements(2) == other.squeeze_native_field_elements(2)
    assert clone.squeeze_native_field_elements(2) != sponge.copy().squeeze_native_field_elements(2)


def test_state_round_trip():
    config = mixing_config()
    sponge = PoseidonSponge(config)
    sponge.absorb([FR(11), FR(22), FR(33)])
    sponge.squeeze_native_field_elements(1)
    reference = sponge.copy()
    state = sponge.into_state()
    restored = PoseidonSponge.from_state(state, config)
    assert restored.mode == reference.mode
    assert restored.squeeze_native_field_elements(4) == reference.squeeze_native_field_elements(4)


def test_from_state_rejects_wrong_length():
    with pytest.raises(ValueError):
        PoseidonSponge.from_state(PoseidonSpongeState([FR(0)] * 2), mixing_config())


def test_fork_is_deterministic_and_separates_domains():
    sponge = PoseidonSponge(mixing_config())
    sponge.absorb([FR(5)])
    a = sponge.fork(b"domain-a").squeeze_native_field_elements(2)
    a_again = sponge.fork(b"domain-a").squeeze_native_field_elements(2)
    b = sponge.fork(b"domain-b").squeeze_native_field_elements(2)
    assert a == a_again
    assert a != b
    assert a != sponge.copy().squeeze_native_field_elements(2)


def test_absorb_after_squeeze_changes_output():
    sponge1 = PoseidonSponge(mixing_config())
    sponge1.absorb([FR(1)])
    sponge1.squeeze_native_field_elements(1)
    sponge2 = sponge1.copy()
    sponge1.absorb([FR(2)])
    assert sponge1.mode == DuplexSpongeMode.absorbing(1)
    assert sponge1.squeeze_native_field_elements(1) != sponge2.squeeze_native_field_elements(1)