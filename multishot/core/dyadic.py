"""
Exact dyadic rationals: the numeric substrate for everything else.

A Dyadic (a, k) denotes a * 2^k. Mantissas are Python ints, so nothing
ever overflows or rounds. Every operation aligns exponents before touching
mantissas, which keeps equality and ordering exact.

    (3, -2)   ->  3/4
    (0, -1)   ->  0     (the canonical zero)
    (1, 0)    ->  1

Representations are not unique: (2, -2) and (1, -1) are both 1/2.
simp() picks the canonical one (odd mantissa, or the fixed zero).
"""

from dataclasses import dataclass
from fractions import Fraction


MAX_CACHED_EXPONENT = 80

_POWERS_OF_TWO = tuple(1 << i for i in range(MAX_CACHED_EXPONENT))


def pow2(i: int) -> int:
    """2^i for i >= 0. Hot path: served from a table up to 2^79."""
    if i < MAX_CACHED_EXPONENT:
        return _POWERS_OF_TWO[i]
    return 1 << i


@dataclass(frozen=True)
class Dyadic:
    """mantissa * 2^exponent, immutable."""
    mantissa: int
    exponent: int

    # ── Arithmetic ──────────────────────────────────────────────────────────

    def add(self, other: 'Dyadic') -> 'Dyadic':
        a, k = self.mantissa, self.exponent
        b, j = other.mantissa, other.exponent
        if k >= j:
            return Dyadic(pow2(k - j) * a + b, j)
        return Dyadic(a + pow2(j - k) * b, k)

    def neg(self) -> 'Dyadic':
        return Dyadic(-self.mantissa, self.exponent)

    def sub(self, other: 'Dyadic') -> 'Dyadic':
        return self.add(other.neg())

    def mult(self, other: 'Dyadic') -> 'Dyadic':
        return Dyadic(self.mantissa * other.mantissa,
                      self.exponent + other.exponent)

    def rescale(self, delta: int) -> 'Dyadic':
        """Multiply by 2^delta. Only the exponent moves."""
        return Dyadic(self.mantissa, self.exponent + delta)

    def average(self, other: 'Dyadic') -> 'Dyadic':
        """(self + other) / 2"""
        return self.add(other).rescale(-1)

    def left_average(self, other: 'Dyadic') -> 'Dyadic':
        """(3 * self + other) / 4"""
        return self._thrice().add(other).rescale(-2)

    def right_average(self, other: 'Dyadic') -> 'Dyadic':
        """(self + 3 * other) / 4"""
        return self.add(other._thrice()).rescale(-2)

    def _thrice(self) -> 'Dyadic':
        return Dyadic(3 * self.mantissa, self.exponent)

    # ── Comparison ──────────────────────────────────────────────────────────

    def leq(self, other: 'Dyadic') -> bool:
        a, k = self.mantissa, self.exponent
        b, j = other.mantissa, other.exponent
        if k >= j:
            return pow2(k - j) * a <= b
        return a <= pow2(j - k) * b

    def equal(self, other: 'Dyadic') -> bool:
        a, k = self.mantissa, self.exponent
        b, j = other.mantissa, other.exponent
        if k >= j:
            return pow2(k - j) * a == b
        return a == pow2(j - k) * b

    # ── Canonical form ──────────────────────────────────────────────────────

    def simp(self) -> 'Dyadic':
        """
        Canonical representative: ZERO for any zero, otherwise the odd
        mantissa. Strips factors of 4 first, then a single factor of 2.
        """
        a, k = self.mantissa, self.exponent
        if a == 0:
            return ZERO
        while a % 4 == 0:
            a //= 4
            k += 2
        if a % 4 == 2:
            a //= 2
            k += 1
        if a == self.mantissa:
            return self
        return Dyadic(a, k)

    def to_fraction(self) -> Fraction:
        if self.exponent >= 0:
            return Fraction(self.mantissa * pow2(self.exponent))
        return Fraction(self.mantissa, pow2(-self.exponent))

    # ── Python protocol ─────────────────────────────────────────────────────

    __add__ = add
    __sub__ = sub
    __mul__ = mult
    __neg__ = neg
    __le__ = leq

    def __lt__(self, other):
        return self.leq(other) and not self.equal(other)

    def __eq__(self, other):
        return isinstance(other, Dyadic) and self.equal(other)

    def __hash__(self):
        canonical = self.simp()
        return hash((canonical.mantissa, canonical.exponent))

    def __float__(self):
        return float(self.to_fraction())

    def __str__(self):
        return f"({self.mantissa}, {self.exponent})"

    def __repr__(self):
        return f"Dyadic{self}"


ZERO = Dyadic(0, -1)
ONE = Dyadic(1, 0)
HALF = Dyadic(1, -1)
MINUS_HALF = Dyadic(-1, -1)
