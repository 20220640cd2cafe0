"""
Naive integration: critical-stream bisection without any caching.

Every time a critical stream is explored its digits are recomputed from
scratch, including work an earlier evaluation of the integrand already did.
"""

from ..core.dyadic import Dyadic
from .bisection import integrate01


NAME = "naive"


def _no_cache(stream):
    return stream


def integrate(precision: int, integrand) -> Dyadic:
    return integrate01(precision, integrand, _no_cache)
