"""
Integrator registry.

Each integrator is a dict describing one engine:
    integrate:    (precision, integrand) -> Dyadic
    description:  str

For the same precision and integrand all four return the same canonical
dyadic, within 2^-precision of the integral over [0, 1]. They observe the
integrand identically and differ only in how much they recompute.
"""

from . import naive, berger, pruned, eff


INTEGRATORS = {
    naive.NAME: {
        "integrate":   naive.integrate,
        "description": "Critical-stream bisection, recomputing everything",
    },
    berger.NAME: {
        "integrate":   berger.integrate,
        "description": "Critical-stream bisection over memoized streams",
    },
    pruned.NAME: {
        "integrate":   pruned.integrate,
        "description": "Left-to-right sweep using the modulus of continuity",
    },
    eff.NAME: {
        "integrate":   eff.integrate,
        "description": "Resume each paused digit request with -1 and 1",
    },
}


def get_integrator(name: str) -> dict:
    """Look up an integrator by name."""
    try:
        return INTEGRATORS[name]
    except KeyError:
        raise ValueError(
            f"unknown integrator {name!r}; expected one of {sorted(INTEGRATORS)}"
        ) from None


__all__ = ["INTEGRATORS", "get_integrator"]
