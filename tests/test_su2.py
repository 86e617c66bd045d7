import numpy as np
import pytest

from simple_qsim.gates import (
    h_dense_matrix,
    rx_dense_matrix,
    ry_dense_matrix,
    rz_dense_matrix,
    t_dense_matrix,
)
from simple_qsim.su2 import (
    equals_ignoring_global_phase,
    group_factor,
    proj_trace_dist,
    trace_norm,
)

IDENTITY = np.eye(2, dtype=np.complex128)

MATRICES = [
    IDENTITY,
    h_dense_matrix(),
    t_dense_matrix(),
    rx_dense_matrix(0.3),
    ry_dense_matrix(1.2),
    rz_dense_matrix(-0.7),
]


@pytest.mark.parametrize("m", MATRICES)
def test_proj_trace_dist_to_itself_is_zero(m):
    assert proj_trace_dist(m, m) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("m", MATRICES)
def test_proj_trace_dist_ignores_sign(m):
    assert proj_trace_dist(m, -m) == pytest.approx(0.0, abs=1e-12)


def test_proj_trace_dist_is_symmetric_and_positive_for_distinct():
    d1 = proj_trace_dist(IDENTITY, t_dense_matrix())
    d2 = proj_trace_dist(t_dense_matrix(), IDENTITY)
    assert d1 == pytest.approx(d2)
    assert d1 > 0.1


@pytest.mark.parametrize("m", MATRICES)
def test_trace_norm_of_same_matrix(m):
    assert trace_norm(m, m) == pytest.approx(2.0, abs=1e-10)


@pytest.mark.parametrize("m", MATRICES)
def test_trace_norm_insensitive_to_phase(m):
    assert trace_norm(m, np.exp(0.9j) * m) == pytest.approx(2.0, abs=1e-10)


def test_equals_ignoring_global_phase():
    assert equals_ignoring_global_phase(IDENTITY, -IDENTITY)
    assert equals_ignoring_global_phase(h_dense_matrix(), 1j * h_dense_matrix())
    assert not equals_ignoring_global_phase(h_dense_matrix(), t_dense_matrix())


def test_group_factor_of_identity_is_identity_pair():
    v, w = group_factor(IDENTITY)
    assert np.allclose(v, IDENTITY)
    assert np.allclose(w, IDENTITY)


@pytest.mark.parametrize(
    "u", [rx_dense_matrix(0.1), ry_dense_matrix(0.2), rz_dense_matrix(0.05)]
)
def test_group_factor_returns_special_unitaries(u):
    v, w = group_factor(u)
    for m in (v, w):
        assert np.allclose(m @ m.conj().T, IDENTITY, atol=1e-10)
        assert np.linalg.det(m) == pytest.approx(1.0, abs=1e-10)


def test_group_factor_is_deterministic():
    u = rx_dense_matrix(0.25)
    v1, w1 = group_factor(u)
    v2, w2 = group_factor(u)
    assert np.array_equal(v1, v2)
    assert np.array_equal(w1, w2)