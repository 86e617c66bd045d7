"""Single-qubit gate matrices in sparse (CSR) and dense (2x2) form."""

from __future__ import annotations

import math

import numpy as np
from scipy import sparse

_DTYPE = np.complex128


def _csr(entries: dict[tuple[int, int], complex]) -> sparse.csr_matrix:
    rows, cols = zip(*entries) if entries else ((), ())
    data = np.array(list(entries.values()), dtype=_DTYPE)
    return sparse.csr_matrix((data, (rows, cols)), shape=(2, 2), dtype=_DTYPE)


def _dense(rows: list[list[complex]]) -> np.ndarray:
    return np.array(rows, dtype=_DTYPE)


def h_matrix() -> sparse.csr_matrix:
    """Hadamard gate."""
    x = 1.0 / math.sqrt(2.0)
    return sparse.csr_matrix(_dense([[x, x], [x, -x]]))


def rx_matrix(angle: float) -> sparse.csr_matrix:
    """Rotation about the X axis."""
    half = angle / 2.0
    cos = complex(math.cos(half), 0.0)
    sin = complex(0.0, -math.sin(half))
    return _csr({(0, 0): cos, (0, 1): sin, (1, 0): sin, (1, 1): cos})


def rx_dense_matrix(angle: float) -> np.ndarray:
    """Rotation about the X axis as a dense 2x2 array."""
    half = angle / 2.0
    cos = complex(math.cos(half), 0.0)
    sin = complex(0.0, -math.sin(half))
    return _dense([[cos, sin], [sin, cos]])


def ry_matrix(angle: float) -> sparse.csr_matrix:
    """Rotation about the Y axis."""
    half = angle / 2.0
    cos = complex(math.cos(half), 0.0)
    sin = complex(math.sin(half), 0.0)
    return _csr({(0, 0): cos, (0, 1): -sin, (1, 0): sin, (1, 1): cos})


def ry_dense_matrix(angle: float) -> np.ndarray:
    """Dense Y rotation; laid out column-wise as [cos, -sin, sin, cos]."""
    half = angle / 2.0
    cos = complex(math.cos(half), 0.0)
    sin = complex(math.sin(half), 0.0)
    return _dense([[cos, sin], [-sin, cos]])


def rz_matrix(angle: float) -> sparse.csr_matrix:
    """Sparse Z rotation; each diagonal entry is the exponential of the phase factor."""
    first = np.exp(np.exp(complex(0.0, -angle / 2.0)))
    second = np.exp(np.exp(complex(0.0, angle / 2.0)))
    return _csr({(0, 0): first, (1, 1): second})


def rz_dense_matrix(angle: float) -> np.ndarray:
    """Rotation about the Z axis as a dense 2x2 array."""
    return _dense(
        [
            [np.exp(complex(0.0, -angle / 2.0)), 0.0],
            [0.0, np.exp(complex(0.0, angle / 2.0))],
        ]
    )


def x_matrix() -> sparse.csr_matrix:
    """Pauli X gate."""
    return _csr({(0, 1): 1.0, (1, 0): 1.0})


def x_dense_matrix() -> np.ndarray:
    """Pauli X gate as a dense 2x2 array."""
    return _dense([[0.0, 1.0], [1.0, 0.0]])


def y_matrix() -> sparse.csr_matrix:
    """Pauli Y gate."""
    return _csr({(0, 1): -1j, (1, 0): 1j})


def y_dense_matrix() -> np.ndarray:
    """Dense Y; laid out column-wise as [0, -i, i, 0]."""
    return _dense([[0.0, 1j], [-1j, 0.0]])


def z_matrix() -> sparse.csr_matrix:
    """Pauli Z gate."""
    return _csr({(0, 0): 1.0, (1, 1): -1.0})


def z_dense_matrix() -> np.ndarray:
    """Pauli Z gate as a dense 2x2 array."""
    return _dense([[1.0, 0.0], [0.0, -1.0]])


def s_matrix() -> sparse.csr_matrix:
    """Phase gate S."""
    return _csr({(0, 0): 1.0, (1, 1): 1j})


def s_dense_matrix() -> np.ndarray:
    """Phase gate S as a dense 2x2 array."""
    return _dense([[1.0, 0.0], [0.0, 1j]])


def t_matrix() -> sparse.csr_matrix:
    """T gate (pi/8 phase gate)."""
    return _csr({(0, 0): 1.0, (1, 1): np.exp(1j * math.pi / 4.0)})


def inv_t_matrix() -> sparse.csr_matrix:
    """Inverse of the T gate."""
    return _csr({(0, 0): 1.0, (1, 1): np.exp(-1j * math.pi / 4.0)})


def t_dense_matrix() -> np.ndarray:
    """T as the SU(2) element Rz(pi/4)."""
    return _dense(
        [
            [np.exp(-1j * math.pi / 8.0), 0.0],
            [0.0, np.exp(1j * math.pi / 8.0)],
        ]
    )


def h_dense_matrix() -> np.ndarray:
    """Hadamard as an SU(2) element (scaled by i)."""
    x = 1j / math.sqrt(2.0)
    return _dense([[x, x], [x, -x]])