from .dyadic import Dyadic, ZERO, ONE, HALF, MINUS_HALF, pow2
from .stream import (
    Stream, Suspension, with_head, after,
    const, append, truncate, from_dyadic, to_dyadic, negate,
    dyadic_of_digits, right_end, apply_to_precision,
    memo_stream, result_with_modulus,
)
from .problem import Query, SearchProblem, completions

__all__ = [
    "Dyadic", "ZERO", "ONE", "HALF", "MINUS_HALF", "pow2",
    "Stream", "Suspension", "with_head", "after",
    "const", "append", "truncate", "from_dyadic", "to_dyadic", "negate",
    "dyadic_of_digits", "right_end", "apply_to_precision",
    "memo_stream", "result_with_modulus",
    "Query", "SearchProblem", "completions",
]
