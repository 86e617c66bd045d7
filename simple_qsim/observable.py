"""Observables built as weighted sums of Pauli strings."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

import numpy as np
from scipy import sparse as sp

from .circuit import kronecker_product
from .gates import x_matrix, y_matrix, z_matrix
from .qstate import QState


class Pauli(enum.Enum):
    """Single-qubit Pauli operators."""

    I = "I"  # noqa: E741
    X = "X"
    Y = "Y"
    Z = "Z"

    def matrix(self) -> sp.csr_matrix:
        if self is Pauli.I:
            return sp.identity(2, dtype=np.complex128, format="csr")
        if self is Pauli.X:
            return x_matrix()
        if self is Pauli.Y:
            return y_matrix()
        return z_matrix()


@dataclass(frozen=True)
class _PauliTerm:
    coefficient: float
    ops: tuple[tuple[Pauli, int], ...]


class Observable:
    """A sum of coefficients times tensor products of Pauli operators."""

    def __init__(self) -> None:
        self._operators: list[_PauliTerm] = []

    def add_pauli_operator(
        self, coefficient: float, ops: Iterable[tuple[Pauli, int]]
    ) -> None:
        """Add a term; ops pairs each Pauli with the qubit it acts on."""
        term = _PauliTerm(
            float(coefficient), tuple((Pauli(kind), int(index)) for kind, index in ops)
        )
        self._operators.append(term)

    def __len__(self) -> int:
        return len(self._operators)

    def expectation_value(self, qstate: QState) -> float:
        """Sum of coefficient times the real part of s^T O s over all terms."""
        n = qstate.num_of_qbits()
        vector = np.asarray(qstate.state, dtype=np.complex128)
        total = 0.0
        for term in self._operators:
            kinds = [Pauli.I] * n
            for kind, index in term.ops:
                if not 0 <= index < n:
                    raise IndexError(
                        f"Qubit index {index} out of range for {n} qubits"
                    )
                kinds[index] = kind

            op = sp.identity(1, dtype=np.complex128, format="csr")
            for kind in reversed(kinds):
                op = kronecker_product(op, kind.matrix())

            value = complex(vector @ (op @ vector))
            total += term.coefficient * value.real
        return total