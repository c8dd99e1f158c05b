from collections.abc import Sequence

import numpy as np
from numpy.polynomial import polynomial as P


def _as_array(coeffs: Sequence[float | None]) -> np.ndarray:
    if len(coeffs) == 0:
        msg = "polynomial needs at least one coefficient"
        raise ValueError(msg)
    # missing coefficients propagate as NaN so callers can reject the result
    return np.array([np.nan if c is None else c for c in coeffs], dtype=float)


def evaluate(t: float, coeffs: Sequence[float | None]) -> float:
    """Evaluate sum(coeffs[i] * t**i) at a single time."""
    return float(P.polyval(t, _as_array(coeffs)))


def evaluate_many(ts: np.ndarray, coeffs: Sequence[float | None]) -> np.ndarray:
    """Evaluate the polynomial at every time in ``ts``."""
    return P.polyval(np.asarray(ts, dtype=float), _as_array(coeffs))
