"""
Signed-digit streams: lazy, unbounded digit sequences representing reals.

A stream is a chain of cells. Each cell holds one digit in {-1, 0, 1} and
a thunk producing the next cell:

    Stream(1, rest)      ->  1/2 + (value of rest())/2
    const(-1)            ->  -1
    from_dyadic(HALF)    ->  1, 1, -1, -1, -1, ...   ( = 1/2 )

The value of d1, d2, d3, ... is sum(d_i * 2^-i), always in [-1, 1].
Thunks are not cached: forcing the same tail twice recomputes it, unless
the stream was wrapped with memo_stream().

A Suspension is a cell whose digit is not known yet. It stands for a
computation paused until someone supplies the next input digit, and its
resume() can be called any number of times, each call continuing from the
same paused point. Consumers reach heads only through with_head(), which
passes suspensions outward, so a stream transformer written once runs both
on concrete inputs and on inputs whose digits will be chosen later.
"""

from dataclasses import dataclass
from typing import Callable

from .dyadic import Dyadic, ZERO, pow2


@dataclass(frozen=True)
class Stream:
    """One cell: a head digit and a thunk for the rest."""
    head: int
    rest: Callable

    def tail(self):
        return self.rest()


@dataclass(frozen=True)
class Suspension:
    """
    A computation waiting for the next input digit.

    resume(digit) continues it. The closure owns everything computed
    before the pause, so resuming twice shares all of that work.
    """
    resume: Callable


def with_head(stream, then: Callable):
    """
    Call then(head, tail_thunk) on a cell.

    If the stream is suspended, the answer is suspended too: the caller
    gets a Suspension that, once resumed, carries on into then().
    """
    if isinstance(stream, Suspension):
        return Suspension(lambda digit: with_head(stream.resume(digit), then))
    return then(stream.head, stream.rest)


def after(result, fn: Callable):
    """Apply fn to a result that may still be suspended."""
    if isinstance(result, Suspension):
        return Suspension(lambda digit: after(result.resume(digit), fn))
    return fn(result)


# ── Construction ─────────────────────────────────────────────────────────────

def const(digit: int) -> Stream:
    """The constant stream digit, digit, digit, ..."""
    return Stream(digit, lambda: const(digit))


def append(prefix, stream) -> Stream:
    """Prepend a finite digit sequence to a stream."""
    prefix = tuple(prefix)
    if not prefix:
        return stream
    return Stream(prefix[0], lambda: append(prefix[1:], stream))


def _of_big(m: int, j: int) -> Stream:
    # m in [-2^j, 2^j), relative to [-2^j, 2^j]
    if j == 0:
        if m == -1:
            return const(-1)
        return Stream(1, lambda: const(-1))
    j -= 1
    if m < 0:
        return Stream(-1, lambda: _of_big(m + pow2(j), j))
    return Stream(1, lambda: _of_big(m - pow2(j), j))


def from_dyadic(d: Dyadic) -> Stream:
    """
    Stream for a dyadic in [-1, 1), made of 1 and -1 only and ending in
    an infinite run of -1.

    For d = m * 2^-j the first j+1 digits are the binary form of m + 2^j
    with -1 written for 0. Always ending in -1 means a dyadic point is
    represented as the left end of the intervals it bounds.
    """
    m, k = d.mantissa, d.exponent
    if k > 0:
        m, k = m * pow2(k), 0
    return _of_big(m, -k)


def negate(stream):
    """Digit-wise negation: the stream for -x."""
    return with_head(stream, lambda d, rest: Stream(-d, lambda: negate(rest())))


# ── Observation ──────────────────────────────────────────────────────────────

def truncate(stream, k: int):
    """
    The first k digits, as a list.

    Stops as soon as the k-th digit is seen, without forcing the tail
    behind it. Returns a Suspension if a digit has to be waited for.
    """
    return _take(stream, k, ())


def _take(stream, k, seen):
    digits = list(seen)
    while len(digits) < k:
        if isinstance(stream, Suspension):
            paused, so_far = stream, tuple(digits)
            return Suspension(lambda d: _take(paused.resume(d), k, so_far))
        digits.append(stream.head)
        if len(digits) < k:
            stream = stream.tail()
    return digits


def dyadic_of_digits(digits) -> Dyadic:
    """sum(d_i * 2^-i): the centre of the interval named by the prefix."""
    digits = tuple(digits)
    if not digits:
        return ZERO
    k = len(digits)
    mantissa = 0
    for d in digits:
        mantissa = 2 * mantissa + d
    return Dyadic(mantissa, -k)


def right_end(digits) -> Dyadic:
    """The right end of the interval named by a finite prefix."""
    digits = tuple(digits)
    k = len(digits)
    mantissa = 0
    for d in digits:
        mantissa = 2 * mantissa + d
    return Dyadic(mantissa + 1, -k)


def to_dyadic(stream, k: int):
    """A dyadic within 2^-k of the stream's value (possibly suspended)."""
    return after(truncate(stream, k), dyadic_of_digits)


def apply_to_precision(k: int, f: Callable, stream):
    """Evaluate the stream transformer f on stream, read to k digits."""
    return to_dyadic(f(stream), k)


# ── Caching and instrumentation ──────────────────────────────────────────────

class _DigitCache:
    """Digits produced so far, plus the thunk for the first unseen cell."""

    def __init__(self, cell: Stream):
        self.digits = [cell.head]
        self.pending = cell.rest

    def cell(self, i: int) -> Stream:
        if i == len(self.digits):
            fresh = self.pending()
            self.digits.append(fresh.head)
            self.pending = fresh.rest
        return Stream(self.digits[i], lambda: self.cell(i + 1))


def memo_stream(stream: Stream) -> Stream:
    """
    Wrap a stream so each position is computed at most once.

    All cells reached from the returned stream share one cache, the
    call-by-need behaviour of a lazy language.
    """
    return _DigitCache(stream).cell(0)


def result_with_modulus(fn: Callable, stream: Stream):
    """
    Run fn on stream and report which input digits it pulled.

    Returns (result, digits) where digits are the input digits forced
    during the call, in order. Their count is the modulus of continuity
    of fn at this input.
    """
    log = []

    def logged(cell):
        log.append(cell.head)
        return Stream(cell.head, lambda: logged(cell.tail()))

    result = fn(logged(stream))
    return result, log
