"""Approximate equality of SU(2) matrices up to a sign."""

from __future__ import annotations

import numpy as np


def _coords(m: np.ndarray) -> np.ndarray:
    return np.array([m[0, 0].real, -m[0, 1].imag, m[1, 0].real, m[1, 1].imag])


class Su2Equiv:
    """Compares SU(2) matrices by their real 4-vector coordinates, identifying U and -U."""

    def __init__(self, e: float) -> None:
        self.epsilon = e * e
        self.gamma = (2.0 - e) * (2.0 - e)

    def equals(self, a: np.ndarray, b: np.ndarray) -> bool:
        """True if a and b are within the tolerance of each other or of each other's negation."""
        diff = _coords(a) - _coords(b)
        dist = float(diff @ diff)
        return dist < self.epsilon or dist > self.gamma