"""State vectors of a register of qubits."""

from __future__ import annotations

import numpy as np


def _format_float(value: float) -> str:
    if value == 0.0:
        return "-0" if np.signbit(value) else "0"
    if float(value).is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))


def _format_complex(value: complex) -> str:
    re = _format_float(value.real)
    im = value.imag
    if im < 0 or (im == 0 and np.signbit(im)):
        return f"{re}-{_format_float(-im)}i"
    return f"{re}+{_format_float(im)}i"


class QState:
    """A state vector whose length is a power of two."""

    def __init__(self, state) -> None:
        vector = np.array(state, dtype=np.complex128).reshape(-1)
        size = vector.size
        if size == 0 or (size & (size - 1)) != 0:
            raise ValueError("State vector length must be a non-zero power of 2")
        self.state = vector

    @classmethod
    def zero_state(cls, num_of_qbits: int) -> "QState":
        """Return |0...0> on the given number of qubits."""
        vector = np.zeros(2**num_of_qbits, dtype=np.complex128)
        vector[0] = 1.0
        return cls(vector)

    @classmethod
    def from_str(cls, qbits: str) -> "QState":
        """Return the basis state named by a binary string such as "01"."""
        if not qbits or any(ch not in "01" for ch in qbits):
            raise ValueError(f"Invalid binary string: {qbits!r}")
        vector = np.zeros(2 ** len(qbits), dtype=np.complex128)
        vector[int(qbits, 2)] = 1.0
        return cls(vector)

    def num_of_qbits(self) -> int:
        """Number of qubits the state spans."""
        return int(self.state.size).bit_length() - 1

    def __array__(self, dtype=None, copy=None):
        return self.state if dtype is None else self.state.astype(dtype)

    def __str__(self) -> str:
        width = self.num_of_qbits()
        return "".join(
            f"|{i:0{width}b}>: {_format_complex(complex(v))} ({_format_float(abs(v) ** 2)})\n"
            for i, v in enumerate(self.state)
        )