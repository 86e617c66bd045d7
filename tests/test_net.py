import math

import numpy as np
import pytest

from simple_qsim import su2
from simple_qsim.gates import (
    h_dense_matrix,
    rx_dense_matrix,
    ry_dense_matrix,
    rz_dense_matrix,
    t_dense_matrix,
)
from simple_qsim.net import Knot, Net


@pytest.fixture(scope="module")
def net():
    n = Net(0.18)
    n.generate(14)
    return n


def _check_sk(net, u, expected_word, depth, eps):
    ska = net.solovay_kitaev(u, depth)
    approx = net.evaluate(ska.word)

    if expected_word is not None:
        assert ska.word == expected_word
    assert abs(0.0 - su2.proj_trace_dist(u, ska.matrix)) < eps
    assert abs(2.0 - su2.trace_norm(u, ska.matrix)) < eps
    assert abs(2.0 - su2.trace_norm(u, approx)) < eps


@pytest.mark.parametrize(
    "u, word",
    [
        (h_dense_matrix(), "H"),
        (h_dense_matrix().conj().T, "H"),
        (t_dense_matrix(), "T"),
        (t_dense_matrix().conj().T, "t"),
    ],
)
def test_solovay_kitaev_depth0(net, u, word):
    _check_sk(net, u, word, 0, 1e-10)


@pytest.mark.parametrize(
    "u", [rx_dense_matrix(0.1), ry_dense_matrix(0.1), rz_dense_matrix(0.1)]
)
def test_solovay_kitaev_depth3_small_angles(net, u):
    _check_sk(net, u, None, 3, 0.1)


@pytest.mark.parametrize(
    "u",
    [
        rx_dense_matrix(math.pi / 2.0),
        ry_dense_matrix(math.pi / 2.0),
        rz_dense_matrix(math.pi / 2.0),
    ],
)
def test_solovay_kitaev_depth3_quarter_turns(net, u):
    _check_sk(net, u, None, 3, 1e-10)


def test_evaluate(net):
    assert np.array_equal(net.evaluate("H"), h_dense_matrix())
    assert np.array_equal(net.evaluate("T"), t_dense_matrix())
    assert su2.equals_ignoring_global_phase(
        np.eye(2, dtype=np.complex128), net.evaluate("HH")
    )


def test_evaluate_empty_word_is_identity(net):
    assert np.array_equal(net.evaluate(""), np.eye(2))


def test_evaluate_unknown_gate(net):
    with pytest.raises(ValueError, match="Unknown gate"):
        net.evaluate("HX")


def test_invert(net):
    assert net.invert("H") == "H"
    assert net.invert("T") == "t"
    assert net.invert("HH") == "HH"
    assert net.invert("HTH") == "HtH"
    assert net.invert("THT") == "tHt"


def test_invert_unknown_gate(net):
    with pytest.raises(ValueError, match="Unknown gate"):
        net.invert("Q")


def test_word_times_inverse_is_identity(net):
    word = "HTHtTH"
    product = net.evaluate(word) @ net.evaluate(net.invert(word))
    assert su2.equals_ignoring_global_phase(np.eye(2, dtype=np.complex128), product)


def test_ungenerated_net_has_no_knots():
    empty = Net(0.18)
    with pytest.raises(LookupError):
        empty.solovay_kitaev(h_dense_matrix(), 0)
    with pytest.raises(ValueError):
        empty.evaluate("H")


def test_knot_equality_by_word():
    a = Knot("HT", h_dense_matrix())
    b = Knot("HT", t_dense_matrix())
    c = Knot("TH", h_dense_matrix())
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2