"""
Property-based and unit tests for the generic search engines.

Core claims:
    - n queens: n=1 has 1 solution, n=2 and n=3 none, n=4 exactly 2
    - All four engines and the bespoke search agree on find_one and on
      find_all, witness for witness, in lexicographic order
    - The same holds for arbitrary small problems, including properties
      that read positions out of order or not at all
    - "No witness" is an ordinary None / [] result, never an exception
    - The effect-handler engine starts the property once and resumes it;
      the pruned engine replays it from the start
"""

from itertools import product

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from multishot.core.problem import Query, SearchProblem
from multishot.domains.queens import (
    n_queens, n_queens_no_repeat, bespoke_find_one, bespoke_find_all,
)
from multishot.search import SEARCHERS, BESPOKE, get_searcher
from multishot.search import eff, pruned


ENGINES = sorted(SEARCHERS)
ENCODINGS = [n_queens, n_queens_no_repeat]

QUEENS_4 = [[1, 3, 0, 2], [2, 0, 3, 1]]


# ── Helpers ──────────────────────────────────────────────────────────────────

def table_problem(dims, order, accepted):
    """
    Reads the positions in `order` (possibly a subset, possibly out of
    index order) and accepts when the values read form a tuple in accepted.
    """
    def read(k, values):
        if k == len(order):
            return values in accepted
        return Query(order[k], lambda v: read(k + 1, values + (v,)))
    return SearchProblem(tuple(dims), lambda: read(0, ()))


def expected_witnesses(dims, order, accepted):
    return [list(c) for c in product(*(range(d) for d in dims))
            if tuple(c[i] for i in order) in accepted]


@st.composite
def table_problems(draw):
    n = draw(st.integers(min_value=1, max_value=3))
    dims = draw(st.lists(st.integers(min_value=1, max_value=3), min_size=n, max_size=n))
    order = draw(st.permutations(range(n)))
    order = order[:draw(st.integers(min_value=0, max_value=n))]
    rows = st.tuples(*(st.integers(min_value=0, max_value=dims[i] - 1) for i in order))
    accepted = frozenset(draw(st.sets(rows, max_size=6)))
    return dims, order, accepted


# ── Unit tests ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("engine", ENGINES)
@pytest.mark.parametrize("encoding", ENCODINGS)
class TestQueensCases:
    def test_one_queen(self, engine, encoding):
        assert SEARCHERS[engine]["find_all"](encoding(1)) == [[0]]
        assert SEARCHERS[engine]["find_one"](encoding(1)) == [0]

    @pytest.mark.parametrize("n", [2, 3])
    def test_no_solution(self, engine, encoding, n):
        assert SEARCHERS[engine]["find_one"](encoding(n)) is None
        assert SEARCHERS[engine]["find_all"](encoding(n)) == []

    def test_four_queens(self, engine, encoding):
        assert SEARCHERS[engine]["find_all"](encoding(4)) == QUEENS_4
        assert SEARCHERS[engine]["find_one"](encoding(4)) == QUEENS_4[0]

    def test_five_queens(self, engine, encoding):
        assert len(SEARCHERS[engine]["find_all"](encoding(5))) == 10
        assert SEARCHERS[engine]["find_one"](encoding(5)) == [0, 2, 4, 1, 3]

    def test_six_queens(self, engine, encoding):
        assert len(SEARCHERS[engine]["find_all"](encoding(6))) == 4
        assert SEARCHERS[engine]["find_one"](encoding(6)) == [1, 3, 5, 0, 2, 4]


class TestBespoke:
    def test_known_counts(self):
        assert [len(bespoke_find_all(n)) for n in range(1, 9)] == [1, 0, 0, 2, 10, 4, 40, 92]

    def test_four_queens(self):
        assert bespoke_find_all(4) == QUEENS_4
        assert bespoke_find_one(4) == QUEENS_4[0]

    def test_no_solution(self):
        assert bespoke_find_one(3) is None

    def test_registry(self):
        assert BESPOKE["find_one"](5) == [0, 2, 4, 1, 3]


class TestCrossEngineAgreement:
    @pytest.mark.parametrize("n", range(0, 7))
    def test_find_all_matches_bespoke(self, n):
        expected = bespoke_find_all(n)
        for engine in ENGINES:
            for encoding in ENCODINGS:
                assert SEARCHERS[engine]["find_all"](encoding(n)) == expected

    @pytest.mark.parametrize("n", range(0, 7))
    def test_find_one_matches_bespoke(self, n):
        expected = bespoke_find_one(n)
        for engine in ENGINES:
            for encoding in ENCODINGS:
                assert SEARCHERS[engine]["find_one"](encoding(n)) == expected

    @pytest.mark.parametrize("engine", ["berger", "pruned", "eff"])
    def test_eight_queens(self, engine):
        witnesses = SEARCHERS[engine]["find_all"](n_queens_no_repeat(8))
        assert witnesses == bespoke_find_all(8)


class TestEdgeCases:
    @pytest.mark.parametrize("engine", ENGINES)
    def test_empty_domain_has_no_witness(self, engine):
        p = SearchProblem((2, 0), lambda: True)
        assert SEARCHERS[engine]["find_one"](p) is None
        assert SEARCHERS[engine]["find_all"](p) == []

    @pytest.mark.parametrize("engine", ENGINES)
    def test_trivial_property_accepts_everything(self, engine):
        p = SearchProblem((2, 3), lambda: True)
        assert SEARCHERS[engine]["find_all"](p) == [[a, b] for a in range(2) for b in range(3)]
        assert SEARCHERS[engine]["find_one"](p) == [0, 0]

    def test_unknown_searcher(self):
        with pytest.raises(ValueError, match="unknown searcher"):
            get_searcher("quantum")


class TestSharing:
    def counting_problem(self, starts):
        def start():
            starts.append(1)
            return Query(0, lambda a: Query(1, lambda b: a + b == 2))
        return SearchProblem((3, 3), start)

    def test_eff_starts_property_once(self):
        starts = []
        assert eff.find_all(self.counting_problem(starts)) == [[0, 2], [1, 1], [2, 0]]
        assert len(starts) == 1

    def test_pruned_replays_property(self):
        starts = []
        assert pruned.find_all(self.counting_problem(starts)) == [[0, 2], [1, 1], [2, 0]]
        assert len(starts) > 1


# ── Property-based tests ─────────────────────────────────────────────────────

class TestSearchProperties:

    @settings(max_examples=60)
    @given(table_problems())
    def test_find_all_is_every_witness_in_order(self, case):
        dims, order, accepted = case
        expected = expected_witnesses(dims, order, accepted)
        for engine in ENGINES:
            assert SEARCHERS[engine]["find_all"](table_problem(dims, order, accepted)) == expected

    @settings(max_examples=60)
    @given(table_problems())
    def test_find_one_is_first_witness(self, case):
        dims, order, accepted = case
        expected = expected_witnesses(dims, order, accepted)
        first = expected[0] if expected else None
        for engine in ENGINES:
            assert SEARCHERS[engine]["find_one"](table_problem(dims, order, accepted)) == first
