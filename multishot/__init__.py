"""
Multishot: exhaustive computation over effectively infinite spaces, four ways.

Two problems, each solved by four operationally distinct but equivalent
engines, so that their running times can be compared:

    generic search      find one / all witnesses of a search problem
                        (n queens in two encodings)
    exact integration   integrate a signed-digit stream transformer over
                        [0, 1] to a given dyadic precision

    naive    recomputes everything
    berger   caches shared work explicitly (lazy, memoized)
    pruned   exploits early refutation / the modulus of continuity
    eff      pauses at each read and resumes the same paused
             computation once per branch, sharing all prior work

Usage:
    python -m multishot queens eff all 8
    python -m multishot queens bespoke one 20 --board
    python -m multishot integrate pruned square 14
    python -m multishot integrate eff logistic 15 3
    python -m multishot bench --sequential --repetitions 1
"""

from .core.dyadic import Dyadic, ZERO, ONE, HALF, MINUS_HALF
from .core.stream import Stream, Suspension, from_dyadic, to_dyadic, truncate
from .core.problem import Query, SearchProblem
from .search import SEARCHERS, BESPOKE, get_searcher
from .integrate import INTEGRATORS, get_integrator
from .domains import (
    PROBLEMS, INTEGRANDS, make_problem, make_integrand,
    n_queens, n_queens_no_repeat, identity, square, logistic, iterate,
)
from .bench import BenchConfig, run_suites, default_suites

__all__ = [
    "Dyadic", "ZERO", "ONE", "HALF", "MINUS_HALF",
    "Stream", "Suspension", "from_dyadic", "to_dyadic", "truncate",
    "Query", "SearchProblem",
    "SEARCHERS", "BESPOKE", "get_searcher",
    "INTEGRATORS", "get_integrator",
    "PROBLEMS", "INTEGRANDS", "make_problem", "make_integrand",
    "n_queens", "n_queens_no_repeat", "identity", "square", "logistic", "iterate",
    "BenchConfig", "run_suites", "default_suites",
]
