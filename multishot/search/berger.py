"""
Functional generic search, after Berger's exhaustive search functional.

Candidates are lazy points: the value at each position is computed on
first demand and then remembered. find() builds a point whose head is the
first value v for which some extension of v satisfies the property (the
point where the answer to "is there a witness down here?" flips to yes),
and whose tail is find() again on the property restricted to that head.

    find(dims, p).head  =  least v with exists(rest, p . cons v)
    exists(dims, q)     =  q(find(dims, q))

Because points are memoized, a predicate that reads the same position
again gets the stored value without repeating the nested search behind it.
"""

from ..core.problem import SearchProblem


NAME = "berger"


class _Point:
    """A candidate whose (head, tail) cell is chosen at most once."""

    __slots__ = ("_cell", "_choose")

    def __init__(self, choose=None, cell=None):
        self._choose = choose
        self._cell = cell

    @classmethod
    def cons(cls, value, tail):
        return cls(cell=(value, tail))

    def _force(self):
        if self._cell is None:
            self._cell = self._choose()
        return self._cell

    def head(self):
        return self._force()[0]

    def tail(self):
        return self._force()[1]

    def __call__(self, index: int):
        point = self
        for _ in range(index):
            point = point.tail()
        return point.head()


def _beyond_end():
    raise IndexError("candidate queried past its last position")


# The point for a problem with no positions left.
_NIL = _Point(choose=_beyond_end)


def _restrict(p, value):
    return lambda tail: p(_Point.cons(value, tail))


def _find(dims, p) -> _Point:
    if not dims:
        return _NIL
    size, rest = dims[0], dims[1:]

    def choose():
        # the witness found while testing a value becomes the tail
        for value in range(size - 1):
            q = _restrict(p, value)
            below = _find(rest, q)
            if q(below):
                return value, below
        last = size - 1
        return last, _find(rest, _restrict(p, last))

    return _Point(choose=choose)


def _find_all(dims, p, point=None):
    # point, when given, is already known to satisfy p
    if not dims:
        return [[]] if p(_NIL) else []
    if point is None:
        point = _find(dims, p)
        if not p(point):
            return []
    first = point.head()
    rest = dims[1:]
    witnesses = [[first] + w for w in _find_all(rest, _restrict(p, first), point.tail())]
    for value in range(first + 1, dims[0]):
        witnesses.extend([value] + w for w in _find_all(rest, _restrict(p, value)))
    return witnesses


def find_one(problem: SearchProblem):
    """The lexicographically first witness, or None."""
    dims = tuple(problem.dimensions)
    if 0 in dims:
        return None
    point = _find(dims, problem.test)
    if not problem.test(point):
        return None
    return [point(i) for i in range(len(dims))]


def find_all(problem: SearchProblem) -> list:
    """Every witness, in lexicographic order."""
    dims = tuple(problem.dimensions)
    if 0 in dims:
        return []
    return _find_all(dims, problem.test)
