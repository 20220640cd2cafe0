"""
Functional integration (Berger/Simpson) with call-by-need streams.

The same bisection as the naive integrator, but every critical stream is
wrapped in a digit cache, so a digit that cost a nested integrand
evaluation to decide is decided once and then looked up. Caching streams
this way is the lazy-language idiom and stays purely functional in effect.
"""

from ..core.dyadic import Dyadic
from ..core.stream import memo_stream
from .bisection import integrate01


NAME = "berger"


def integrate(precision: int, integrand) -> Dyadic:
    return integrate01(precision, integrand, memo_stream)
