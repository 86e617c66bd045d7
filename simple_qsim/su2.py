"""Geometry of SU(2): distances, phase-insensitive comparison and group factoring."""

from __future__ import annotations

import math

import numpy as np

from .gates import x_dense_matrix, y_dense_matrix, z_dense_matrix

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


def _identity() -> np.ndarray:
    return np.eye(2, dtype=np.complex128)


def _adjoint(m: np.ndarray) -> np.ndarray:
    return m.conj().T


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def group_factor(u: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Split an SU(2) matrix near the identity into a balanced pair of factors."""
    n = _norm3(_mat_to_cart3(u))
    xu = _cart3_to_mat((n, 0.0, 0.0))
    s = _similarity_matrix(u, xu)
    a_s = _adjoint(s)

    a, b = _x_group_factor(xu)
    return s @ a @ a_s, s @ b @ a_s


def proj_trace_dist(a: np.ndarray, b: np.ndarray) -> float:
    """'Projective' trace distance between SU(2) matrices, identifying U and -U."""
    ca = np.array([a[0, 0].real, a[0, 1].imag, a[1, 0].real, a[1, 1].imag])
    cb = np.array([b[0, 0].real, b[0, 1].imag, b[1, 0].real, b[1, 1].imag])
    diff = ca - cb
    total = ca + cb
    d = float(diff @ diff)
    n = float(total @ total)
    return math.sqrt(d) if d < n else math.sqrt(n)


def trace_norm(a: np.ndarray, b: np.ndarray) -> float:
    """Absolute value of the trace of a^dagger b."""
    product = _adjoint(a) @ b
    return float(abs(product[0, 0] + product[1, 1]))


def equals_ignoring_global_phase(a: np.ndarray, b: np.ndarray) -> bool:
    """True if the 2x2 unitaries a and b differ only by a global phase."""
    return abs(trace_norm(a, b) - 2.0) < 1e-10


def _x_group_factor(a: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    ac = _mat_to_cart4(a)

    base = min(max(0.5 - 0.5 * ac[0], 0.0), 1.0)
    st = base**0.25
    ct = math.sqrt(1.0 - st * st)
    theta = 2.0 * math.asin(st)
    alpha = math.atan(st)

    bc = (
        theta * st * math.cos(alpha),
        theta * st * math.sin(alpha),
        theta * ct,
    )
    cc = (bc[0], bc[1], -bc[2])

    b = _cart3_to_mat(cc)
    w = _cart3_to_mat(bc)
    return b, _similarity_matrix(w, _adjoint(b))


def _similarity_matrix(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    ac = _mat_to_cart3(a)
    bc = _mat_to_cart3(b)

    na = _norm3(ac)
    nb = _norm3(bc)

    ab = _dot3(ac, bc)
    s = (
        bc[1] * ac[2] - ac[1] * bc[2],
        ac[0] * bc[2] - bc[0] * ac[2],
        bc[0] * ac[1] - ac[0] * bc[1],
    )

    ns = _norm3(s)
    if abs(ns) < 1e-12:
        return _identity()
    v = math.acos(_clamp_unit(ab / (na * nb))) / ns
    return _cart3_to_mat((s[0] * v, s[1] * v, s[2] * v))


def _norm3(v: Vec3) -> float:
    return math.sqrt(_dot3(v, v))


def _dot3(v1: Vec3, v2: Vec3) -> float:
    return v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]


def _mat_to_cart3(u: np.ndarray) -> Vec3:
    sx1 = -1.0 * u[0, 1].imag
    sx2 = u[1, 0].real
    sx3 = (u[1, 1].real - u[0, 0].real) / 2.0

    costh = (u[0, 0].real + u[1, 1].real) / 2.0
    sinth = math.sqrt(sx1 * sx1 + sx2 * sx2 + sx3 * sx3)

    if sinth < 1e-10:
        return (2.0 * math.acos(_clamp_unit(costh)), 0.0, 0.0)
    th = math.atan2(sinth, costh)
    return (
        2.0 * th * sx1 / sinth,
        2.0 * th * sx2 / sinth,
        2.0 * th * sx3 / sinth,
    )


def _mat_to_cart4(u: np.ndarray) -> Vec4:
    def snap(v: float) -> float:
        return 0.0 if abs(v) < 1e-15 else float(v)

    return (
        snap(u[0, 0].real),
        snap(-1.0 * u[0, 1].imag),
        snap(u[1, 0].real),
        snap(u[1, 1].imag),
    )


def _cart3_to_mat(cart3: Vec3) -> np.ndarray:
    a, b, c = cart3
    th = math.sqrt(a * a + b * b + c * c)

    if th < 1e-10:
        return _identity()
    imag_sin = 1j * math.sin(th / 2.0)
    return (
        _identity() * complex(math.cos(th / 2.0), 0.0)
        + x_dense_matrix() * (imag_sin * a / th)
        + y_dense_matrix() * (imag_sin * b / th)
        + z_dense_matrix() * (imag_sin * c / th)
    )