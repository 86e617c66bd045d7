import numpy as np
import pytest

from simple_qsim.qstate import QState


def _approx(expected_re, expected_im, actual):
    assert abs(expected_re - actual.real) < 1e-10
    assert abs(expected_im - actual.imag) < 1e-10


def test_qstate_from_2bit_str():
    qstate = QState.from_str("00")
    assert qstate.num_of_qbits() == 2
    assert len(qstate.state) == 4
    _approx(1.0, 0.0, qstate.state[0])
    _approx(0.0, 0.0, qstate.state[1])
    _approx(0.0, 0.0, qstate.state[2])
    _approx(0.0, 0.0, qstate.state[3])

    qstate = QState.from_str("01")
    _approx(0.0, 0.0, qstate.state[0])
    _approx(1.0, 0.0, qstate.state[1])
    _approx(0.0, 0.0, qstate.state[2])
    _approx(0.0, 0.0, qstate.state[3])

    qstate = QState.from_str("11")
    _approx(0.0, 0.0, qstate.state[0])
    _approx(0.0, 0.0, qstate.state[1])
    _approx(0.0, 0.0, qstate.state[2])
    _approx(1.0, 0.0, qstate.state[3])


def test_qstate_from_3bit_str():
    qstate = QState.from_str("100")
    assert qstate.num_of_qbits() == 3
    assert len(qstate.state) == 8
    _approx(1.0, 0.0, qstate.state[4])


@pytest.mark.parametrize("bad", ["", "012", "ab"])
def test_from_str_rejects_invalid(bad):
    with pytest.raises(ValueError):
        QState.from_str(bad)


@pytest.mark.parametrize("size", [0, 3, 6])
def test_new_rejects_non_power_of_two(size):
    with pytest.raises(ValueError):
        QState(np.ones(size))


def test_new_keeps_values():
    amp = 1 / np.sqrt(2)
    qstate = QState([amp, amp])
    assert qstate.num_of_qbits() == 1
    assert np.allclose(qstate.state, [amp, amp])


@pytest.mark.parametrize("n", [1, 2, 4])
def test_zero_state(n):
    qstate = QState.zero_state(n)
    assert qstate.num_of_qbits() == n
    assert qstate.state[0] == 1
    assert np.count_nonzero(qstate.state) == 1


def test_zero_state_matches_all_zero_string():
    assert np.array_equal(QState.zero_state(3).state, QState.from_str("000").state)


def test_array_conversion():
    assert np.array_equal(np.asarray(QState.from_str("10")), QState.from_str("10").state)


def test_str_lists_basis_states():
    lines = str(QState.from_str("01")).splitlines()
    assert lines == [
        "|00>: 0+0i (0)",
        "|01>: 1+0i (1)",
        "|10>: 0+0i (0)",
        "|11>: 0+0i (0)",
    ]


def test_str_negative_imaginary():
    text = str(QState([0, -1j]))
    assert text.splitlines()[1] == "|1>: 0-1i (1)"