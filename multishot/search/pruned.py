"""
Pruned generic search: decide the property on partial candidates.

After each extension the property is run against the prefix alone. If it
is refuted without reading past the prefix, the whole subtree is dropped;
if it is confirmed, every completion of the prefix is a witness. Only when
it asks for an unassigned position does the search extend further.

Each decision replays the property from its beginning, which is why the
encoding matters so much here: n_queens re-reads p(0) for every pair and
pays for it on every replay.
"""

from ..core.problem import SearchProblem, completions


NAME = "pruned"


def find_one(problem: SearchProblem):
    """The lexicographically first witness, or None."""
    dims = problem.dimensions
    prefix = []

    def extend():
        verdict = problem.decide(prefix)
        if verdict is False:
            return None
        if verdict is True:
            return next(completions(dims, prefix), None)
        for value in range(dims[len(prefix)]):
            prefix.append(value)
            found = extend()
            prefix.pop()
            if found is not None:
                return found
        return None

    return extend()


def find_all(problem: SearchProblem) -> list:
    """Every witness, in lexicographic order."""
    dims = problem.dimensions
    prefix = []
    witnesses = []

    def extend():
        verdict = problem.decide(prefix)
        if verdict is False:
            return
        if verdict is True:
            witnesses.extend(completions(dims, prefix))
            return
        for value in range(dims[len(prefix)]):
            prefix.append(value)
            extend()
            prefix.pop()

    extend()
    return witnesses
