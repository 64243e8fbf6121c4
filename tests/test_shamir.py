import itertools
import random

import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from vsss.shamir import Share, generate_shares, reconstruct_secret
from vsss.validation import ParameterError

PRIME = 2**127 - 1


def test_generate_shares():
    secret = 123456789
    parts = generate_shares(secret, 3, 5, PRIME)
    assert len(parts) == 5
    assert [share.index for share in parts] == [1, 2, 3, 4, 5]
    assert all(0 <= share.value < PRIME for share in parts)
    assert all(isinstance(share, Share) for share in parts)


def test_reconstruct_secret_success():
    secret = 424242
    shares = generate_shares(secret, 4, 6, PRIME)
    assert reconstruct_secret(shares[:4], PRIME) == secret
    assert reconstruct_secret(shares[2:], PRIME) == secret
    assert reconstruct_secret(shares, PRIME) == secret


def test_reconstruct_from_any_subset():
    secret = 87985
    shares = generate_shares(secret, 3, 5, PRIME)
    for subset in itertools.combinations(shares, 3):
        assert reconstruct_secret(list(subset), PRIME) == secret


def test_reconstruct_secret_failure():
    secret = 9999
    recovered = []
    for _ in range(20):
        shares = generate_shares(secret, 4, 5, PRIME)
        recovered.append(reconstruct_secret(shares[:3], PRIME))
    assert any(value != secret for value in recovered)


def test_edge_cases():
    secret = 77
    one_share = generate_shares(secret, 1, 1, PRIME)
    assert one_share == [Share(1, secret)]
    assert reconstruct_secret(one_share, PRIME) == secret

    secret2 = 88
    all_required = generate_shares(secret2, 4, 4, PRIME)
    assert reconstruct_secret(all_required, PRIME) == secret2

    assert reconstruct_secret(generate_shares(0, 3, 5, PRIME), PRIME) == 0
    assert reconstruct_secret(generate_shares(PRIME - 1, 3, 5, PRIME), PRIME) == PRIME - 1


def test_small_coefficients_still_reconstruct():
    shares = generate_shares(5, 3, 5, 7919, max_bits=4)
    assert reconstruct_secret(shares[1:4], 7919) == 5


def test_seeded_source_is_reproducible():
    first = generate_shares(31337, 3, 5, PRIME, rng=random.Random(7))
    second = generate_shares(31337, 3, 5, PRIME, rng=random.Random(7))
    assert first == second


def test_plain_tuples_are_accepted():
    shares = generate_shares(1234, 2, 3, PRIME)
    points = [(x, y) for x, y in shares]
    assert reconstruct_secret(points[1:], PRIME) == 1234


@pytest.mark.parametrize(
    "secret, threshold, num_shares, modulus",
    [
        (10, 0, 3, PRIME),
        (10, 4, 3, PRIME),
        (10, 2, 3, 1),
        (-1, 2, 3, PRIME),
        (PRIME, 2, 3, PRIME),
    ],
)
def test_invalid_parameters_rejected(secret, threshold, num_shares, modulus):
    with pytest.raises(ParameterError):
        generate_shares(secret, threshold, num_shares, modulus)


def test_reconstruct_rejects_reserved_index():
    shares = generate_shares(42, 2, 3, PRIME)
    with pytest.raises(ParameterError, match="index 0"):
        reconstruct_secret([Share(0, 42), shares[0]], PRIME)
    with pytest.raises(ParameterError):
        reconstruct_secret([], PRIME)


def test_duplicate_indices_give_no_result():
    shares = generate_shares(42, 3, 5, PRIME)
    assert reconstruct_secret([shares[0], shares[0], shares[1]], PRIME) is None


def test_mismatched_modulus_gives_wrong_secret():
    secret = 2**100 + 17
    shares = generate_shares(secret, 3, 5, PRIME)
    assert reconstruct_secret(shares[:3], 2**61 - 1) != secret


@settings(max_examples=50, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(
    secret=st.integers(min_value=0, max_value=PRIME - 1),
    threshold=st.integers(min_value=1, max_value=6),
    extra=st.integers(min_value=0, max_value=4),
    data=st.data(),
)
def test_round_trip_property(secret, threshold, extra, data):
    shares = generate_shares(secret, threshold, threshold + extra, PRIME)
    subset = data.draw(st.permutations(shares))[:threshold]
    assert reconstruct_secret(subset, PRIME) == secret


def test_reconstruct_rejects_index_congruent_to_zero():
    with pytest.raises(ParameterError, match="congruent to 0"):
        reconstruct_secret([(11, 5), (1, 4)], 11)
    with pytest.raises(ParameterError):
        reconstruct_secret([(22, 5), (1, 4), (2, 7)], 11)
