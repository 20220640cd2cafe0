"""
Integration by modulus: sweep [0, 1] from left to right.

At the current left end x the integrand is evaluated once, on the stream
for x, while result_with_modulus() records the input digits it pulled.
Any input sharing those digits gives the same output, so the digits name
the largest interval starting at x on which the integrand is constant to
the requested precision. Its right end is the next x.

    total += y * (right_end(digits) - x)

No bisection and no search for critical streams: each step costs one
evaluation.
"""

from functools import partial

from ..core.dyadic import Dyadic, ZERO, ONE
from ..core.stream import (
    apply_to_precision, from_dyadic, result_with_modulus, right_end,
)


NAME = "pruned"


def integrate_from(precision: int, integrand, start: Dyadic) -> Dyadic:
    """Integral of the integrand from start up to 1, not canonicalized."""
    g = partial(apply_to_precision, precision, integrand)
    x = start
    total = ZERO
    while x != ONE:
        y, digits = result_with_modulus(g, from_dyadic(x))
        right = right_end(digits)
        total = total + y * (right - x)
        x = right
    return total


def integrate(precision: int, integrand) -> Dyadic:
    return integrate_from(precision, integrand, ZERO).simp()
