"""
Naive generic search: try every total candidate.

Candidates are built depth-first in lexicographic order and only tested
once complete. Every test runs the property from scratch against a fresh
candidate, so nothing learned from one candidate is reused for the next.
This is the baseline every other engine is measured against.
"""

from ..core.problem import SearchProblem


NAME = "naive"


def find_one(problem: SearchProblem):
    """The lexicographically first witness, or None."""
    dims = problem.dimensions
    candidate = []

    def extend():
        i = len(candidate)
        if i == len(dims):
            return list(candidate) if problem.test(candidate.__getitem__) else None
        for value in range(dims[i]):
            candidate.append(value)
            found = extend()
            candidate.pop()
            if found is not None:
                return found
        return None

    return extend()


def find_all(problem: SearchProblem) -> list:
    """Every witness, in lexicographic order."""
    dims = problem.dimensions
    candidate = []
    witnesses = []

    def extend():
        i = len(candidate)
        if i == len(dims):
            if problem.test(candidate.__getitem__):
                witnesses.append(list(candidate))
            return
        for value in range(dims[i]):
            candidate.append(value)
            extend()
            candidate.pop()

    extend()
    return witnesses
