"""
Recursive bisection with critical streams (Berger/Simpson).

Shared by the naive and memoized integrators, which differ only in the
wrapper applied to each critical stream (none, or a digit cache).

g maps an input stream to a dyadic (the integrand read to fixed
precision). For a prefix ds naming an interval:

    y = g(ds ++ -1, -1, -1, ...)     value at the left end
    c = critical_stream(g, y, ds)    the leftmost continuation of ds on
                                     which g differs from y, if any
    if g(ds ++ c) == y:  g is constant on the interval  ->  y * width
    else:                split into ds ++ [-1] and ds ++ [1]

The left half keeps the same left end, so its y is passed down instead of
being recomputed.
"""

from functools import partial
from typing import Callable, Optional

from ..core.dyadic import Dyadic
from ..core.stream import Stream, append, apply_to_precision, const


def critical_stream(g: Callable, y: Dyadic, ds: tuple, wrap: Callable) -> Stream:
    """
    The continuation of ds that g can tell apart from the all -1 one.

    Digit by digit: take -1 if some continuation starting with -1 already
    changes g's value, otherwise take 1.
    """
    stream = wrap(Stream(-1, lambda: critical_stream(g, y, ds + (-1,), wrap)))
    if g(append(ds, stream)) != y:
        return stream
    return Stream(1, lambda: critical_stream(g, y, ds + (1,), wrap))


def integrate_prefix(g: Callable, ds: tuple, wrap: Callable,
                     y: Optional[Dyadic] = None) -> Dyadic:
    """Integral of g over the interval named by ds, scaled to [-1, 1]."""
    if y is None:
        y = g(append(ds, const(-1)))
    r = g(append(ds, critical_stream(g, y, ds, wrap)))
    if r == y:
        return y.rescale(1 - len(ds))
    return (integrate_prefix(g, ds + (-1,), wrap, y)
            + integrate_prefix(g, ds + (1,), wrap))


def integrate01(precision: int, integrand: Callable, wrap: Callable) -> Dyadic:
    """Integral over [0, 1] (the prefix [1]), canonicalized."""
    g = partial(apply_to_precision, precision, integrand)
    return integrate_prefix(g, (1,), wrap).simp()
