import pytest

from tip5lab.permutation import CAPACITY, DIGEST_LENGTH, RATE, Domain, hash_10, hash_pair, permute
from tip5lab.permutation.field import P
from tip5lab.permutation.hashing import capacity_padding, initial_state

HASH_10_ONE_TO_TEN = [
    10818500669765797222, 7750847691288459381, 17271032843874487437,
    1108553480921430050, 6029014391627118288,
]

HASH_10_ZEROS = [
    941080798860502477, 5295886365985465639, 14728839126885177993,
    10358449902914633406, 14220746792122877272,
]


def test_sizes():
    assert RATE + CAPACITY == 16
    assert DIGEST_LENGTH == 5


def test_initial_state_domains():
    assert initial_state(Domain.VARIABLE_LENGTH) == [0] * 16
    assert initial_state(Domain.FIXED_LENGTH) == [0] * RATE + [1] * CAPACITY
    assert capacity_padding(Domain.FIXED_LENGTH) == [1] * CAPACITY


def test_hash_10_known_vector():
    assert hash_10(list(range(1, 11))) == HASH_10_ONE_TO_TEN


def test_hash_10_zeros():
    assert hash_10([0] * RATE) == HASH_10_ZEROS


def test_hash_10_is_truncated_permutation():
    inputs = list(range(1, 11))
    assert hash_10(inputs) == permute(inputs + [1] * CAPACITY)[:DIGEST_LENGTH]


def test_hash_pair_concatenates():
    left = [1, 2, 3, 4, 5]
    right = [6, 7, 8, 9, 10]
    assert hash_pair(left, right) == HASH_10_ONE_TO_TEN
    assert hash_pair(right, left) != HASH_10_ONE_TO_TEN


@pytest.mark.parametrize("bad", [[0] * 9, [0] * 11, [P] + [0] * 9])
def test_hash_10_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        hash_10(bad)


def test_hash_pair_rejects_bad_digest():
    with pytest.raises(ValueError):
        hash_pair([0] * 4, [0] * 5)


def test_hash_10_published_chain():
    # Published Tip5 vector: six chained digests written back into the preimage
    preimage = [0] * RATE
    for i in range(6):
        digest = hash_10(preimage)
        preimage[i:i + DIGEST_LENGTH] = digest
    assert hash_10(preimage) == [
        10869784347448351760, 1853783032222938415, 6856460589287344822,
        17178399545409290325, 7650660984651717733,
    ]
