"""
Effect-handler integration: resume one paused evaluation twice per digit.

The integrand is evaluated a single time, on the input 1, ?, ?, ... where
every unknown digit is a Suspension. Each time the evaluation needs the
next input digit it pauses, and the handler resumes that same pause once
with -1 and once with 1, left branch first. Everything computed before
the pause is shared by both branches rather than recomputed, the
asymptotic advantage over the bisection integrators, which have to find
shared prefixes again by evaluation or cache lookup.

A leaf reached after reading d unknown digits covers an interval of
width 2^-d, so its value is rescaled by that weight before the two
halves are added.
"""

from ..core.dyadic import Dyadic
from ..core.stream import Stream, Suspension, apply_to_precision


NAME = "eff"


def _branch():
    # an input cell whose digit is chosen by whoever resumes it
    return Suspension(lambda digit: Stream(digit, _branch))


def _handle(result, weight: int) -> Dyadic:
    if isinstance(result, Suspension):
        left = _handle(result.resume(-1), weight - 1)
        right = _handle(result.resume(1), weight - 1)
        return left + right
    return result.rescale(weight)


def integrate(precision: int, integrand) -> Dyadic:
    result = apply_to_precision(precision, integrand, Stream(1, _branch))
    return _handle(result, 0).simp()
