import pytest

from olympiad.numtheory import MOD, mod_divide


@pytest.mark.parametrize("q", [1, 2, 3, 7, 12345, MOD - 1])
def test_inverse_times_divisor_is_one(q):
    assert mod_divide(1, q) * q % MOD == 1


@pytest.mark.parametrize(
    "x, q",
    [(0, 5), (1, 2), (42, 17), (10**12, 999), (MOD - 3, 123456)],
)
def test_round_trip(x, q):
    assert mod_divide(x * q % MOD, q) == x % MOD


def test_divide_by_one_reduces_numerator():
    assert mod_divide(123456789012, 1) == 123456789012 % MOD


def test_half():
    assert mod_divide(1, 2) == (MOD + 1) // 2


def test_zero_divisor_gives_zero():
    assert mod_divide(5, 0) == 0


def test_result_in_range():
    for p, q in [(10**18, 3), (7, 10**15), (MOD, MOD + 1)]:
        assert 0 <= mod_divide(p, q) < MOD