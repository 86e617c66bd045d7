import numpy as np

from simple_qsim.gates import h_dense_matrix, t_dense_matrix
from simple_qsim.su2equiv import Su2Equiv


def test_su2equiv_equals_identity():
    su2 = Su2Equiv(1e-8)
    identity = np.eye(2, dtype=complex)
    assert su2.equals(identity, identity)


def test_su2equiv_equals_h_and_h():
    su2 = Su2Equiv(1e-8)
    h = h_dense_matrix()
    assert su2.equals(h, h)


def test_su2equiv_not_equals_h_and_t():
    su2 = Su2Equiv(1e-8)
    assert not su2.equals(h_dense_matrix(), t_dense_matrix())


def test_su2equiv_equals_with_small_difference():
    su2 = Su2Equiv(1e-6)
    h1 = h_dense_matrix()
    h2 = h_dense_matrix()
    h2[0, 0] += 1e-8
    assert su2.equals(h1, h2)


def test_su2equiv_not_equals_with_large_difference():
    su2 = Su2Equiv(1e-8)
    h1 = h_dense_matrix()
    h2 = h_dense_matrix()
    h2[0, 0] += 1e-2
    assert not su2.equals(h1, h2)


def test_su2equiv_equals_with_h_adjoint():
    su2 = Su2Equiv(1e-8)
    h = h_dense_matrix()
    assert su2.equals(h, h.conj().T)


def test_su2equiv_identifies_negation():
    su2 = Su2Equiv(1e-8)
    t = t_dense_matrix()
    assert su2.equals(t, -t)


def test_su2equiv_thresholds():
    su2 = Su2Equiv(0.5)
    assert su2.epsilon == 0.25
    assert su2.gamma == 2.25