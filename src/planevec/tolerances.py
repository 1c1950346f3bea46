from __future__ import annotations

DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12


def is_close(
    a: float,
    b: float,
    rel_tol: float = DEFAULT_REL_TOL,
    abs_tol: float = DEFAULT_ABS_TOL,
) -> bool:
    if rel_tol < 0.0 or abs_tol < 0.0:
        raise ValueError("error tolerances must be non-negative")
    if a == b:
        return True
    diff = abs(b - a)
    # weak: close enough relative to either value
    return (diff <= abs(rel_tol * b)) or (diff <= abs(rel_tol * a)) or (diff <= abs_tol)
