"""
Property-based and unit tests for the example integrands.

Core claims:
    - square() is accurate: k output digits land within 2^-k of x^2
    - logistic() computes 1 - 2x^2 to the same accuracy
    - Both accept any signed digit, including 0, and reject anything else
    - Both run on suspended inputs and resume to the concrete answer
    - The registries build what they name and reject unknown names
"""

from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from multishot.core.dyadic import Dyadic, ZERO
from multishot.core.stream import (
    Stream, Suspension, append, const, from_dyadic, negate, to_dyadic, truncate,
)
from multishot.domains import (
    PROBLEMS, INTEGRANDS, make_problem, make_integrand,
    identity, square, logistic, iterate,
)


@st.composite
def unit_dyadics(draw, max_bits=8):
    """Dyadics m * 2^-j in [-1, 1)."""
    j = draw(st.integers(min_value=0, max_value=max_bits))
    m = draw(st.integers(min_value=-(2 ** j), max_value=2 ** j - 1))
    return Dyadic(m, -j)


signed_digits = st.lists(st.sampled_from([-1, 0, 1]), min_size=1, max_size=8)


def value_of(digits):
    return sum(Fraction(d, 2 ** (i + 1)) for i, d in enumerate(digits))


def within(approx: Dyadic, exact: Fraction, k: int) -> bool:
    return abs(approx.to_fraction() - exact) <= Fraction(1, 2 ** k)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestSquare:
    def test_one(self):
        assert within(to_dyadic(square(const(1)), 10), Fraction(1), 10)

    def test_minus_one(self):
        assert within(to_dyadic(square(const(-1)), 10), Fraction(1), 10)

    def test_zero(self):
        assert truncate(square(const(0)), 6) == [0, 0, 0, 0, 0, 0]

    def test_quarter(self):
        x = from_dyadic(Dyadic(1, -2))
        assert within(to_dyadic(square(x), 8), Fraction(1, 16), 8)

    def test_leading_zero_digit(self):
        # 0, 1, 0, 0, ... is 1/4
        x = append([0, 1], const(0))
        assert within(to_dyadic(square(x), 8), Fraction(1, 16), 8)

    def test_rejects_bad_digit(self):
        with pytest.raises(ValueError, match="not a signed digit"):
            square(Stream(2, lambda: const(1)))

    def test_rejects_bad_digit_later(self):
        with pytest.raises(ValueError, match="not a signed digit"):
            truncate(square(append([1, 5], const(1))), 3)


class TestLogistic:
    def test_zero_maps_to_one(self):
        assert within(to_dyadic(logistic(from_dyadic(ZERO)), 8), Fraction(1), 8)

    def test_one_maps_to_minus_one(self):
        assert within(to_dyadic(logistic(const(1)), 8), Fraction(-1), 8)

    def test_iterate_zero_is_identity(self):
        s = const(1)
        assert iterate(0, logistic)(s) is s

    def test_iterate_composes(self):
        twice = iterate(2, negate)
        assert truncate(twice(from_dyadic(Dyadic(3, -3))), 6) == \
               truncate(from_dyadic(Dyadic(3, -3)), 6)


class TestSuspendedInput:
    def paused(self):
        # 1, then a digit chosen later, repeated forever
        return Stream(1, lambda: Suspension(lambda d: const(d)))

    @pytest.mark.parametrize("digit", [-1, 0, 1])
    def test_square_resumes_to_concrete_answer(self, digit):
        result = truncate(square(self.paused()), 5)
        assert isinstance(result, Suspension)
        assert result.resume(digit) == truncate(square(append([1], const(digit))), 5)

    def test_logistic_resumes_twice(self):
        result = to_dyadic(logistic(self.paused()), 4)
        left, right = result.resume(-1), result.resume(1)
        assert left == to_dyadic(logistic(append([1], const(-1))), 4)
        assert right == to_dyadic(logistic(const(1)), 4)


class TestRegistries:
    def test_problem_names(self):
        assert set(PROBLEMS) == {"repeat", "no-repeat"}

    def test_make_problem(self):
        p = make_problem("repeat", 4)
        assert p.dimensions == (4, 4, 4, 4)
        assert make_problem("no-repeat", 0).dimensions == ()

    def test_unknown_encoding(self):
        with pytest.raises(ValueError, match="unknown encoding"):
            make_problem("diagonal", 4)

    def test_negative_size(self):
        with pytest.raises(ValueError, match="non-negative"):
            make_problem("repeat", -1)

    def test_integrand_names(self):
        assert set(INTEGRANDS) == {"id", "square", "logistic"}

    def test_make_integrand(self):
        assert make_integrand("id") is identity
        assert make_integrand("square", 5) is square

    def test_iterations_apply_to_logistic(self):
        f = make_integrand("logistic", 2)
        x = from_dyadic(Dyadic(1, -3))
        assert to_dyadic(f(x), 6) == to_dyadic(logistic(logistic(from_dyadic(Dyadic(1, -3)))), 6)

    def test_unknown_integrand(self):
        with pytest.raises(ValueError, match="unknown integrand"):
            make_integrand("cube")

    def test_negative_iterations(self):
        with pytest.raises(ValueError, match="non-negative"):
            make_integrand("logistic", -1)


# ── Property-based tests ─────────────────────────────────────────────────────

class TestIntegrandProperties:

    @given(unit_dyadics(), st.integers(min_value=0, max_value=12))
    def test_square_accuracy(self, x, k):
        exact = x.to_fraction() ** 2
        assert within(to_dyadic(square(from_dyadic(x)), k), exact, k)

    @given(signed_digits, st.integers(min_value=0, max_value=10))
    def test_square_accuracy_with_zero_digits(self, digits, k):
        exact = value_of(digits) ** 2
        assert within(to_dyadic(square(append(digits, const(0))), k), exact, k)

    @given(unit_dyadics(), st.integers(min_value=0, max_value=12))
    def test_logistic_accuracy(self, x, k):
        exact = 1 - 2 * x.to_fraction() ** 2
        assert within(to_dyadic(logistic(from_dyadic(x)), k), exact, k)

    @given(unit_dyadics(), st.integers(min_value=0, max_value=12))
    def test_identity_reads_back(self, x, k):
        assert within(to_dyadic(identity(from_dyadic(x)), k), x.to_fraction(), k)

    @given(unit_dyadics(max_bits=6))
    def test_square_is_non_negative(self, x):
        assert to_dyadic(square(from_dyadic(x)), 10).to_fraction() >= -Fraction(1, 2 ** 10)
