"""
Domain: example integrands.

An integrand is a stream transformer: it takes the signed-digit stream of
x in [-1, 1] and produces the stream of f(x) in [-1, 1]. Every one of them
reads its input through with_head(), so it runs unchanged on inputs whose
digits are still to be chosen (see core.stream.Suspension).

    identity     x
    square       x^2, by a digit transducer tracking the range of x^2
    logistic     1 - 2x^2, iterates of which behave chaotically
"""

from ..core.dyadic import Dyadic, ZERO, ONE, HALF, MINUS_HALF
from ..core.stream import Stream, with_head, negate


def identity(stream):
    return stream


def _digit_error(digit):
    return ValueError(f"not a signed digit: {digit!r}")


def _square_from(in_wt, out_wt, sq_min, sq_max, rest):
    """
    Emit digits of x^2 once [sq_min, sq_max] fits inside a digit interval.

    [sq_min, sq_max] bounds x^2 given the input read so far, rescaled by
    the output digits already emitted (out_wt counts them, negatively).
    in_wt is the weight of the next input digit. When the interval
    straddles a digit boundary, one more input digit is read to narrow it.
    """
    if ZERO <= sq_min:
        return Stream(1, lambda: _square_from(
            in_wt, out_wt - 1,
            sq_min.rescale(1) - ONE, sq_max.rescale(1) - ONE, rest))
    if sq_max <= ZERO:
        return Stream(-1, lambda: _square_from(
            in_wt, out_wt - 1,
            sq_min.rescale(1) + ONE, sq_max.rescale(1) + ONE, rest))
    if MINUS_HALF <= sq_min and sq_max <= HALF:
        return Stream(0, lambda: _square_from(
            in_wt, out_wt - 1,
            sq_min.rescale(1), sq_max.rescale(1), rest))

    def narrow(digit, rest_after):
        if digit == 1:
            lo = sq_min.average(sq_max) - Dyadic(1, 2 * in_wt - out_wt)
            return _square_from(in_wt - 1, out_wt, lo, sq_max, rest_after)
        if digit == -1:
            hi = sq_min.average(sq_max) - Dyadic(1, 2 * in_wt - out_wt)
            return _square_from(in_wt - 1, out_wt, sq_min, hi, rest_after)
        if digit == 0:
            correction = Dyadic(3, 2 * in_wt - 2 - out_wt)
            lo = sq_min.left_average(sq_max) - correction
            hi = sq_min.right_average(sq_max) - correction
            return _square_from(in_wt - 1, out_wt, lo, hi, rest_after)
        raise _digit_error(digit)

    return with_head(rest(), narrow)


def square(stream):
    """The stream of x^2 for the stream of x."""
    def dispatch(digit, rest):
        if digit == 1:
            return _square_from(-1, 0, ZERO, ONE, rest)
        if digit == -1:
            return _square_from(-1, 0, ZERO, ONE, lambda: negate(rest()))
        if digit == 0:
            # (x/2)^2 = x^2/4
            return Stream(0, lambda: Stream(0, lambda: square(rest())))
        raise _digit_error(digit)

    return with_head(stream, dispatch)


def logistic(stream):
    """1 - 2x^2: drop the leading digit of x^2 (doubling it) and negate."""
    return with_head(square(stream), lambda _digit, rest: negate(rest()))


def iterate(n: int, f):
    """f composed with itself n times (identity for n = 0)."""
    def iterated(stream):
        for _ in range(n):
            stream = f(stream)
        return stream
    return iterated
