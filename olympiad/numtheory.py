"""Modular arithmetic helpers."""

MOD = 998_244_353


def mod_divide(p: int, q: int) -> int:
    """Return p / q modulo 998244353, using Fermat's little theorem.

    A divisor of zero yields zero, as the inverse is taken by exponentiation.
    """
    return p * pow(q, MOD - 2, MOD) % MOD