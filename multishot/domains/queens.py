"""
Domain: n queens.

Position i is the row, its value the column of the queen on that row. A
candidate is a witness when no two queens share a column or a diagonal.

Two encodings of the same property are given, and they are deliberately
kept apart because the engines react to them differently:

    n_queens(n)            re-reads p(j) and p(i) for every pair (i, j).
                           p(0) is asked afresh for each comparison.
    n_queens_no_repeat(n)  reads p(0), p(1), ... once each, in order,
                           remembering the columns seen so far.

Pruned search is far more competitive on the second. The effect-handler
search answers repeated reads from its assignment and barely notices.

Bespoke search is a hand-written backtracker for queens only, the
performance ceiling for the generic engines.
"""

from ..core.problem import Query, SearchProblem


def _no_attack(ipos, jpos, i, j) -> bool:
    return not (ipos == jpos or ipos - jpos == i - j or ipos - jpos == j - i)


# ── First encoding: repeated queries ─────────────────────────────────────────

def _pair_test(i, j, then):
    # reads p(j) before p(i); all engines must see the same query order
    if i == j:
        return then()
    return Query(j, lambda jpos: Query(i, lambda ipos: (
        _pair_test(i, j + 1, then) if _no_attack(ipos, jpos, i, j) else False
    )))


def _queens_from(n, i):
    if i == n:
        return True
    return _pair_test(i, 0, lambda: _queens_from(n, i + 1))


def n_queens(n: int) -> SearchProblem:
    """n queens, querying the candidate afresh for every pair."""
    return SearchProblem(
        dimensions=(n,) * n,
        predicate=lambda: _queens_from(n, 0),
        name=f"queens({n})",
    )


# ── Second encoding: each position read once ─────────────────────────────────

def _safe_against(y, placed) -> bool:
    # placed holds earlier columns, most recent first
    for distance, z in enumerate(placed, start=1):
        if z == y or abs(z - y) == distance:
            return False
    return True


def _read_from(n, i, placed):
    if i == n:
        return True
    return Query(i, lambda y: (
        _read_from(n, i + 1, (y,) + placed) if _safe_against(y, placed) else False
    ))


def n_queens_no_repeat(n: int) -> SearchProblem:
    """n queens, reading each position exactly once."""
    return SearchProblem(
        dimensions=(n,) * n,
        predicate=lambda: _read_from(n, 0, ()),
        name=f"queens-no-repeat({n})",
    )


# ── Bespoke backtracking ─────────────────────────────────────────────────────

def _placed_safely(board, i) -> bool:
    ipos = board[i]
    for j in range(i):
        if not _no_attack(ipos, board[j], i, j):
            return False
    return True


def bespoke_find_one(n: int):
    """First solution in lexicographic order, or None."""
    board = [0] * n

    def extend(i):
        if i == n:
            return list(board)
        for col in range(n):
            board[i] = col
            if _placed_safely(board, i):
                found = extend(i + 1)
                if found is not None:
                    return found
        return None

    return extend(0)


def bespoke_find_all(n: int) -> list:
    """All solutions in lexicographic order."""
    board = [0] * n
    solutions = []

    def extend(i):
        if i == n:
            solutions.append(list(board))
            return
        for col in range(n):
            board[i] = col
            if _placed_safely(board, i):
                extend(i + 1)

    extend(0)
    return solutions
