"""
Effect-handler generic search: resume one paused evaluation many times.

The property runs exactly once from the start. Whenever it reads a
position that has no value yet, it pauses as a Query, and the handler
resumes that same Query once for every value of the position. All work
the property did before the read is shared by every branch instead of
being replayed, which is where the asymptotic advantage over the pruned
search comes from.

    Query(i) with i assigned    ->  answer from the assignment, carry on
    Query(i) with i unassigned  ->  branch on the next position, in order
    True                        ->  every completion is a witness
    False                       ->  nothing below here

Positions are assigned in index order even when the property reads ahead,
so witnesses come out lexicographically like every other engine's.
"""

from ..core.problem import Query, SearchProblem, completions


NAME = "eff"


def _resume_known(node, assignment):
    # answer reads of assigned positions without branching
    while isinstance(node, Query) and node.index < len(assignment):
        node = node.resume(assignment[node.index])
    return node


def find_one(problem: SearchProblem):
    """The lexicographically first witness, or None."""
    dims = problem.dimensions

    def handle(node, assignment):
        node = _resume_known(node, assignment)
        if not isinstance(node, Query):
            return next(completions(dims, assignment), None) if node else None
        for value in range(dims[len(assignment)]):
            found = handle(node, assignment + (value,))
            if found is not None:
                return found
        return None

    return handle(problem.predicate(), ())


def find_all(problem: SearchProblem) -> list:
    """Every witness, in lexicographic order."""
    dims = problem.dimensions
    witnesses = []

    def handle(node, assignment):
        node = _resume_known(node, assignment)
        if not isinstance(node, Query):
            if node:
                witnesses.extend(completions(dims, assignment))
            return
        for value in range(dims[len(assignment)]):
            handle(node, assignment + (value,))

    handle(problem.predicate(), ())
    return witnesses
