"""
Domain registry.

Search problems, keyed by encoding:
    make_problem:  (n) -> SearchProblem
    description:   str

Integrands, keyed by name:
    make_integrand:  (iterations) -> stream transformer
    description:     str
"""

from .queens import n_queens, n_queens_no_repeat, bespoke_find_one, bespoke_find_all
from .integrands import identity, square, logistic, iterate


PROBLEMS = {
    "repeat": {
        "make_problem": n_queens,
        "description":  "n queens, re-reading positions for every pair test",
    },
    "no-repeat": {
        "make_problem": n_queens_no_repeat,
        "description":  "n queens, reading each position once, in order",
    },
}

INTEGRANDS = {
    "id": {
        "make_integrand": lambda _iterations: identity,
        "description":    "f(x) = x",
    },
    "square": {
        "make_integrand": lambda _iterations: square,
        "description":    "f(x) = x^2 via a digit transducer",
    },
    "logistic": {
        "make_integrand": lambda iterations: iterate(iterations, logistic),
        "description":    "n iterations of the logistic map 1 - 2x^2",
    },
}


def make_problem(encoding: str, n: int):
    """Build the n-queens problem in the given encoding."""
    if encoding not in PROBLEMS:
        raise ValueError(f"unknown encoding {encoding!r}; expected one of {sorted(PROBLEMS)}")
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    return PROBLEMS[encoding]["make_problem"](n)


def make_integrand(name: str, iterations: int = 1):
    """Build a named integrand; iterations only matters for logistic."""
    if name not in INTEGRANDS:
        raise ValueError(f"unknown integrand {name!r}; expected one of {sorted(INTEGRANDS)}")
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    return INTEGRANDS[name]["make_integrand"](iterations)


__all__ = [
    "PROBLEMS", "INTEGRANDS", "make_problem", "make_integrand",
    "n_queens", "n_queens_no_repeat", "bespoke_find_one", "bespoke_find_all",
    "identity", "square", "logistic", "iterate",
]
