import random

import pytest

from tip5lab.permutation.constants import MDS_MATRIX_FIRST_COLUMN, MDS_MATRIX_FIRST_ROW, STATE_SIZE
from tip5lab.permutation.field import P
from tip5lab.permutation.linear import circulant_multiply, linear_identity, matrix_of, mds_multiply


def test_first_row_is_reversed_column():
    assert MDS_MATRIX_FIRST_ROW[0] == MDS_MATRIX_FIRST_COLUMN[0]
    assert MDS_MATRIX_FIRST_ROW[1] == MDS_MATRIX_FIRST_COLUMN[15]
    assert MDS_MATRIX_FIRST_ROW[15] == MDS_MATRIX_FIRST_COLUMN[1]


def test_basis_vectors_give_circulant_matrix():
    m = matrix_of(mds_multiply)
    for i in range(STATE_SIZE):
        for j in range(STATE_SIZE):
            assert m[i][j] == MDS_MATRIX_FIRST_ROW[(j - i) % STATE_SIZE]
            assert m[i][j] == MDS_MATRIX_FIRST_COLUMN[(i - j) % STATE_SIZE]
    assert [row[0] for row in m] == list(MDS_MATRIX_FIRST_COLUMN)


def test_mds_matches_weighted_sum():
    rng = random.Random(11)
    state = [rng.randrange(0, P) for _ in range(STATE_SIZE)]
    out = mds_multiply(state)
    for i in range(STATE_SIZE):
        expected = sum(MDS_MATRIX_FIRST_ROW[(j - i) % STATE_SIZE] * state[j] for j in range(STATE_SIZE)) % P
        assert out[i] == expected
        assert 0 <= out[i] < P


def test_mds_is_linear():
    rng = random.Random(12)
    x = [rng.randrange(0, P) for _ in range(STATE_SIZE)]
    y = [rng.randrange(0, P) for _ in range(STATE_SIZE)]
    xy = [(a + b) % P for a, b in zip(x, y)]
    assert mds_multiply(xy) == [(a + b) % P for a, b in zip(mds_multiply(x), mds_multiply(y))]


def test_mds_reduces_large_inputs():
    out = mds_multiply([P - 1] * STATE_SIZE)
    assert out == [(-sum(MDS_MATRIX_FIRST_COLUMN)) % P] * STATE_SIZE


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        mds_multiply([0] * 15)
    with pytest.raises(ValueError):
        circulant_multiply([0] * 3, [1, 2])
    with pytest.raises(ValueError):
        linear_identity([0] * 17)
