import random

import pytest

from tip5lab.permutation import field
from tip5lab.permutation.field import P


def test_modulus_value():
    assert P == 18446744069414584321
    assert P == 0xFFFFFFFF00000001


def test_add_mul_wrap():
    assert field.add(P - 1, 1) == 0
    assert field.add(P - 1, P - 1) == P - 2
    assert field.mul(P - 1, P - 1) == 1
    assert field.mul(1 << 32, 1 << 32) == (1 << 32) - 1  # 2^64 = 2^32 - 1 mod p
    assert field.sub(0, 1) == P - 1
    assert field.neg(0) == 0


def test_inverse():
    rng = random.Random(7)
    for _ in range(20):
        a = rng.randrange(1, P)
        assert field.mul(a, field.inverse(a)) == 1
    with pytest.raises(ZeroDivisionError):
        field.inverse(0)


def test_limbs_are_big_endian_halves():
    assert field.to_limbs(0x0123456789ABCDEF % P) == (0x01234567, 0x89ABCDEF)
    assert field.to_limbs(P - 1) == (0xFFFFFFFF, 0)
    assert field.from_limbs(0xFFFFFFFF, 0) == P - 1


def test_limbs_roundtrip_random():
    rng = random.Random(1337)
    for a in [0, 1, P - 1, 1 << 32, (1 << 32) - 1] + [rng.randrange(0, P) for _ in range(200)]:
        assert field.from_limbs(*field.to_limbs(a)) == a


def test_from_limbs_rejects_non_canonical():
    with pytest.raises(ValueError):
        field.from_limbs(0xFFFFFFFF, 1)  # == p
    with pytest.raises(ValueError):
        field.from_limbs(1 << 32, 0)


def test_bytes_roundtrip():
    assert field.to_bytes(0xDEADBEEF) == (0xDE, 0xAD, 0xBE, 0xEF)
    assert field.from_bytes(0xDE, 0xAD, 0xBE, 0xEF) == 0xDEADBEEF
    for limb in (0, 1, 255, 256, 0xFFFFFFFF, 0x01000000):
        assert field.from_bytes(*field.to_bytes(limb)) == limb
    with pytest.raises(ValueError):
        field.to_bytes(1 << 32)
    with pytest.raises(ValueError):
        field.from_bytes(0, 0, 0, 256)


def test_montgomery_roundtrip():
    assert field.MONTGOMERY_R == (1 << 32) - 1
    assert field.to_montgomery(1) == (1 << 32) - 1
    rng = random.Random(99)
    for a in [0, 1, P - 1] + [rng.randrange(0, P) for _ in range(100)]:
        assert field.from_montgomery(field.to_montgomery(a)) == a


@pytest.mark.parametrize("bad", [-1, P, P + 5, True, 1.0])
def test_conversions_reject_non_canonical(bad):
    with pytest.raises(ValueError):
        field.to_limbs(bad)
    with pytest.raises(ValueError):
        field.to_montgomery(bad)
