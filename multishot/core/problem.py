"""
Search problems: bounded domains plus a decidable property.

A SearchProblem has one domain size per position and a predicate over a
total candidate (a function from position index to value). The predicate
is written as a query program so that it can be paused whenever it reads a
position:

    predicate()            -> True | False | Query(i, resume)
    Query(i, resume)       "I need the value at position i"
    resume(v)              -> the rest of the program, given p(i) = v

resume is a plain closure over immutable state, so it may be called more
than once. That is what lets the effect-handler engine resume a single
paused evaluation once per candidate value. The other engines simply
answer every query from a candidate and never notice the difference.
"""

from dataclasses import dataclass
from itertools import product
from typing import Callable, NamedTuple, Optional


class Query(NamedTuple):
    """A predicate paused on a read of position `index`."""
    index: int
    resume: Callable


@dataclass(frozen=True)
class SearchProblem:
    """
    dimensions: domain size of each position, in order.
    predicate:  () -> bool | Query, the query program for the property.
    """
    dimensions: tuple
    predicate: Callable
    name: str = ""

    @property
    def size(self) -> int:
        return len(self.dimensions)

    def test(self, candidate: Callable) -> bool:
        """Does the total candidate (index -> value) satisfy the property?"""
        node = self.predicate()
        while isinstance(node, Query):
            node = node.resume(candidate(node.index))
        return node

    def decide(self, prefix) -> Optional[bool]:
        """
        Evaluate the property on a partial assignment.

        True/False if the answer only depends on the prefix, None as soon
        as the predicate reads a position beyond it.
        """
        node = self.predicate()
        while isinstance(node, Query):
            if node.index >= len(prefix):
                return None
            node = node.resume(prefix[node.index])
        return node

    def __repr__(self):
        label = self.name or "SearchProblem"
        return f"{label}{list(self.dimensions)}"


def completions(dimensions, prefix):
    """Every total extension of prefix, in lexicographic order."""
    free = [range(d) for d in dimensions[len(prefix):]]
    for rest in product(*free):
        yield list(prefix) + list(rest)
