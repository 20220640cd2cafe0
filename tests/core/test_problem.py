"""
Unit tests for the search-problem abstraction.

Core claims:
    - test() drives the property against a total candidate
    - decide() answers from a prefix when it can, None when it can't
    - A Query's resume may be called more than once
    - completions() enumerates extensions lexicographically
"""

from multishot.core.problem import Query, SearchProblem, completions
from multishot.domains.queens import n_queens, n_queens_no_repeat


class TestTest:
    def test_queens_witness(self):
        p = n_queens_no_repeat(4)
        assert p.test([1, 3, 0, 2].__getitem__)
        assert not p.test([0, 1, 2, 3].__getitem__)

    def test_both_encodings_agree(self):
        for candidate in ([1, 3, 0, 2], [2, 0, 3, 1], [0, 2, 1, 3], [3, 3, 3, 3]):
            assert n_queens(4).test(candidate.__getitem__) == \
                   n_queens_no_repeat(4).test(candidate.__getitem__)

    def test_size(self):
        assert n_queens(5).size == 5
        assert n_queens(5).dimensions == (5, 5, 5, 5, 5)


class TestDecide:
    def test_refuted_in_prefix(self):
        assert n_queens_no_repeat(4).decide([0, 0]) is False
        assert n_queens_no_repeat(4).decide([0, 1]) is False

    def test_undetermined(self):
        assert n_queens_no_repeat(4).decide([]) is None
        assert n_queens_no_repeat(4).decide([0, 2]) is None
        assert n_queens(4).decide([0]) is None

    def test_confirmed(self):
        assert n_queens(4).decide([1, 3, 0, 2]) is True

    def test_constant_property_needs_no_prefix(self):
        p = SearchProblem((3, 3), lambda: True)
        assert p.decide([]) is True


class TestQuery:
    def test_resume_is_multi_shot(self):
        q = Query(0, lambda v: v > 1)
        assert q.resume(2) is True
        assert q.resume(0) is False
        assert q.resume(2) is True

    def test_repeated_reads_read_the_same_candidate(self):
        reads = []
        columns = [0, 2, 1]

        def candidate(i):
            reads.append(i)
            return columns[i]

        assert not n_queens(3).test(candidate)
        assert reads[:2] == [0, 1]  # pair (1, 0): p(0) first, then p(1)
        assert reads.count(0) > 1


class TestCompletions:
    def test_lexicographic(self):
        assert list(completions((2, 3), [1])) == [[1, 0], [1, 1], [1, 2]]

    def test_complete_prefix(self):
        assert list(completions((2, 2), [1, 0])) == [[1, 0]]

    def test_empty_domain(self):
        assert list(completions((2, 0), [1])) == []
