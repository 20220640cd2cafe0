"""
Searcher registry.

Each generic searcher is a dict describing one engine:
    find_one:     (SearchProblem) -> list | None
    find_all:     (SearchProblem) -> list[list]
    description:  str

All four enumerate witnesses in the same lexicographic order; they differ
only in how much work they repeat. "bespoke" solves n queens directly and
takes n instead of a SearchProblem.
"""

from . import naive, berger, pruned, eff
from ..domains.queens import bespoke_find_one, bespoke_find_all


SEARCHERS = {
    naive.NAME: {
        "find_one":    naive.find_one,
        "find_all":    naive.find_all,
        "description": "Enumerate total candidates, test each from scratch",
    },
    berger.NAME: {
        "find_one":    berger.find_one,
        "find_all":    berger.find_all,
        "description": "Berger-style search over lazy memoized candidates",
    },
    pruned.NAME: {
        "find_one":    pruned.find_one,
        "find_all":    pruned.find_all,
        "description": "Backtracking that decides the property on prefixes",
    },
    eff.NAME: {
        "find_one":    eff.find_one,
        "find_all":    eff.find_all,
        "description": "Resume one paused evaluation once per branch value",
    },
}

BESPOKE = {
    "find_one":    bespoke_find_one,
    "find_all":    bespoke_find_all,
    "description": "Hand-written n-queens backtracking over a mutable board",
}


def get_searcher(name: str) -> dict:
    """Look up a generic searcher by name."""
    try:
        return SEARCHERS[name]
    except KeyError:
        raise ValueError(
            f"unknown searcher {name!r}; expected one of {sorted(SEARCHERS)}"
        ) from None


__all__ = ["SEARCHERS", "BESPOKE", "get_searcher"]
