"""Quantum circuits: gate sequences applied to state vectors."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, ClassVar, Iterable

import numpy as np
from scipy import sparse as sp

from . import gates
from .net import Knot, Net
from .qstate import QState

_DTYPE = np.complex128

_TILE_WIDTH = 0.18
_NET_MAX_LENGTH = 14
_SK_DEPTH = 5

_FIXED_SPARSE: dict[str, Callable[[], sp.csr_matrix]] = {
    "H": gates.h_matrix,
    "X": gates.x_matrix,
    "Y": gates.y_matrix,
    "Z": gates.z_matrix,
    "S": gates.s_matrix,
    "T": gates.t_matrix,
    "InvT": gates.inv_t_matrix,
}
_ROTATION_SPARSE: dict[str, Callable[[float], sp.csr_matrix]] = {
    "RX": gates.rx_matrix,
    "RY": gates.ry_matrix,
    "RZ": gates.rz_matrix,
}
_FIXED_DENSE: dict[str, Callable[[], np.ndarray]] = {
    "S": gates.s_dense_matrix,
    "X": gates.x_dense_matrix,
    "Y": gates.y_dense_matrix,
    "Z": gates.z_dense_matrix,
}
_ROTATION_DENSE: dict[str, Callable[[float], np.ndarray]] = {
    "RX": gates.rx_dense_matrix,
    "RY": gates.ry_dense_matrix,
    "RZ": gates.rz_dense_matrix,
}
_MATRIX_KINDS = ("Dense", "Sparse")


@lru_cache(maxsize=1)
def _default_net() -> Net:
    net = Net(_TILE_WIDTH)
    net.generate(_NET_MAX_LENGTH)
    return net


def kronecker_product(x, y) -> sp.csr_matrix:
    """Kronecker product of two sparse matrices, as CSR."""
    return sp.kron(x, y, format="csr").astype(_DTYPE)


def _identity(size: int) -> sp.csr_matrix:
    return sp.identity(size, dtype=_DTYPE, format="csr")


@dataclass(frozen=True, eq=False)
class GateKind:
    """What a gate does: a named gate, a rotation, or an explicit matrix."""

    name: str
    angle: float | None = None
    matrix: object = None

    H: ClassVar[GateKind]
    X: ClassVar[GateKind]
    Y: ClassVar[GateKind]
    Z: ClassVar[GateKind]
    S: ClassVar[GateKind]
    T: ClassVar[GateKind]
    INV_T: ClassVar[GateKind]

    def __post_init__(self) -> None:
        known = set(_FIXED_SPARSE) | set(_ROTATION_SPARSE) | set(_MATRIX_KINDS)
        if self.name not in known:
            raise ValueError(f"Unknown gate kind: {self.name}")
        if self.name in _ROTATION_SPARSE and self.angle is None:
            raise ValueError(f"{self.name} needs an angle")
        if self.name in _MATRIX_KINDS and self.matrix is None:
            raise ValueError(f"{self.name} needs a matrix")

    @classmethod
    def rx(cls, angle: float) -> GateKind:
        return cls("RX", angle=float(angle))

    @classmethod
    def ry(cls, angle: float) -> GateKind:
        return cls("RY", angle=float(angle))

    @classmethod
    def rz(cls, angle: float) -> GateKind:
        return cls("RZ", angle=float(angle))

    @classmethod
    def dense(cls, matrix) -> GateKind:
        return cls("Dense", matrix=np.asarray(matrix, dtype=_DTYPE))

    @classmethod
    def sparse(cls, matrix) -> GateKind:
        return cls("Sparse", matrix=sp.csr_matrix(matrix, dtype=_DTYPE))

    def to_sparse(self) -> sp.csr_matrix:
        """The gate's matrix in CSR form."""
        if self.name == "Dense":
            return sp.csr_matrix(self.matrix, dtype=_DTYPE)
        if self.name == "Sparse":
            return self.matrix
        if self.name in _ROTATION_SPARSE:
            return _ROTATION_SPARSE[self.name](self.angle)
        return _FIXED_SPARSE[self.name]()

    def _transpile_target(self) -> np.ndarray | None:
        if self.name in _ROTATION_DENSE:
            return _ROTATION_DENSE[self.name](self.angle)
        fixed = _FIXED_DENSE.get(self.name)
        return fixed() if fixed is not None else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GateKind):
            return NotImplemented
        if self.name != other.name or self.angle != other.angle:
            return False
        if self.matrix is None or other.matrix is None:
            return self.matrix is None and other.matrix is None
        if self.name == "Sparse":
            left, right = self.matrix, other.matrix
            return left.shape == right.shape and (left != right).nnz == 0
        return bool(np.array_equal(self.matrix, other.matrix))

    def __repr__(self) -> str:
        if self.matrix is not None:
            return f"{self.name}({self.matrix!r})"
        if self.angle is not None:
            return f"{self.name}({self.angle!r})"
        return self.name


GateKind.H = GateKind("H")
GateKind.X = GateKind("X")
GateKind.Y = GateKind("Y")
GateKind.Z = GateKind("Z")
GateKind.S = GateKind("S")
GateKind.T = GateKind("T")
GateKind.INV_T = GateKind("InvT")


@dataclass(frozen=True)
class GateIndex:
    """Where a gate acts: the whole register, one qubit, or a controlled target."""

    target: int | None = None
    controls: tuple[int, ...] | None = None

    ALL: ClassVar[GateIndex]

    @classmethod
    def one(cls, index: int) -> GateIndex:
        return cls(target=index)

    @classmethod
    def control(cls, controls: Iterable[int], target: int) -> GateIndex:
        return cls(target=target, controls=tuple(controls))

    @property
    def is_all(self) -> bool:
        return self.target is None

    @property
    def is_control(self) -> bool:
        return self.controls is not None


GateIndex.ALL = GateIndex()


class ParameterizedGate(enum.Enum):
    """Rotation gates whose angle is a circuit parameter."""

    RX = "RX"
    RY = "RY"
    RZ = "RZ"

    def kind(self, value: float) -> GateKind:
        return GateKind(self.value, angle=float(value))


@dataclass(frozen=True)
class Gate:
    """A gate kind placed at a gate index."""

    kind: GateKind
    index: GateIndex

    def __str__(self) -> str:
        if self.index.is_all:
            return repr(self.kind)
        if self.index.is_control:
            return f"{self.kind!r}({list(self.index.controls)!r}, {self.index.target})"
        return f"{self.kind!r}({self.index.target})"


@dataclass
class _Parameter:
    gate_index: int
    qbit_index: int
    gate: ParameterizedGate
    value: float


_KNOT_LABELS = {"H": GateKind.H, "T": GateKind.T, "t": GateKind.INV_T}


def _gates_from_knot(knot: Knot, index: GateIndex) -> list[Gate]:
    result = []
    for label in knot.word:
        kind = _KNOT_LABELS.get(label)
        if kind is None:
            raise ValueError(f"Unsupported gate: {label}")
        result.append(Gate(kind, index))
    return result


class Circuit:
    """An ordered list of gates on a fixed number of qubits."""

    def __init__(self, num_of_qbits: int) -> None:
        self.num_of_qbits = num_of_qbits
        self._gates: list[Gate] = []
        self._parameters: list[_Parameter] = []

    @property
    def gates(self) -> list[Gate]:
        return list(self._gates)

    def check_and_reverse_index(self, index: int) -> int:
        """Validate a qubit index and return its position in Kronecker order."""
        if not 0 <= index < self.num_of_qbits:
            raise IndexError(
                f"Index out of bounds for the number of qubits {self.num_of_qbits}"
            )
        return self.num_of_qbits - 1 - index

    def gate_at(self, index: int, gate: GateKind) -> Circuit:
        self.add_gate(gate, index)
        return self

    def add_gate_at(self, index: int, gate: GateKind) -> None:
        self.add_gate(gate, index)

    def sparse_gate_at(self, index: int, gate) -> Circuit:
        self.add_gate(GateKind.sparse(gate), index)
        return self

    def add_sparse_gate_at(self, index: int, gate) -> None:
        self.add_gate(GateKind.sparse(gate), index)

    def add_parametric_gate_at(
        self, index: int, gate: ParameterizedGate, value: float
    ) -> None:
        """Append a rotation whose angle becomes the next circuit parameter."""
        param = _Parameter(len(self._gates), index, gate, float(value))
        self._parameters.append(param)
        self.add_gate(gate.kind(value), index)

    @property
    def parameters(self) -> list[float]:
        """Current values of the circuit parameters, in insertion order."""
        return [param.value for param in self._parameters]

    def set_parameter(self, param_index: int, value: float) -> None:
        if not 0 <= param_index < len(self._parameters):
            raise IndexError("Parameter index out of bounds")
        param = self._parameters[param_index]
        param.value = float(value)
        self._gates[param.gate_index] = Gate(
            param.gate.kind(value), GateIndex.one(param.qbit_index)
        )

    def set_parameters(self, values) -> None:
        values = list(values)
        if len(values) != len(self._parameters):
            raise ValueError("Number of values does not match number of parameters")
        for i, value in enumerate(values):
            self.set_parameter(i, value)

    def h(self, index: int) -> Circuit:
        return self.gate_at(index, GateKind.H)

    def control(self, control: int, target: int, kind: GateKind) -> Circuit:
        self._gates.append(Gate(kind, GateIndex.control([control], target)))
        return self

    def cnot(self, control: int, target: int) -> Circuit:
        return self.control(control, target, GateKind.X)

    def swap(self, index1: int, index2: int) -> Circuit:
        """Append three CNOTs on the reversed indices."""
        first = self.check_and_reverse_index(index1)
        second = self.check_and_reverse_index(index2)
        if first == second:
            raise ValueError("Cannot swap a qubit with itself")
        return self.cnot(first, second).cnot(second, first).cnot(first, second)

    def add_gate(self, kind: GateKind, index: int) -> None:
        self._gates.append(Gate(kind, GateIndex.one(index)))

    def add_dense_gate(self, gate, index: GateIndex) -> None:
        self._gates.append(Gate(GateKind.dense(gate), index))

    def transpile(self) -> None:
        """Rewrite S, X, Y, Z and rotations as H/T/T-inverse words via Solovay-Kitaev."""
        if any(gate.index.is_all or gate.index.is_control for gate in self._gates):
            raise ValueError("Only single qubit gates are supported for transpilation")

        new_gates: list[Gate] = []
        for gate in self._gates:
            target = gate.kind._transpile_target()
            if target is None:
                new_gates.append(gate)
                continue
            compiled = _default_net().solovay_kitaev(target, _SK_DEPTH)
            new_gates.extend(_gates_from_knot(compiled, gate.index))
        self._gates = new_gates

    def apply(self, state: QState) -> QState:
        """Return the state obtained by applying every gate in order."""
        result = np.array(state.state, dtype=_DTYPE, copy=True)
        for gate in self._gates:
            matrix = gate.kind.to_sparse()
            index = gate.index
            if index.is_control:
                matrix = self._build_control_matrix(index.controls, index.target, matrix)
            elif not index.is_all:
                matrix = self._create_gate_for_index(index.target, matrix)
            result = matrix @ result
        return QState(result)

    def _create_gate_for_index(self, index: int, gate) -> sp.csr_matrix:
        position = self.check_and_reverse_index(index)
        matrix = _identity(1)
        for i in range(self.num_of_qbits):
            matrix = kronecker_product(matrix, gate if i == position else _identity(2))
        return matrix

    def _build_control_matrix(self, controls, target: int, gate) -> sp.csr_matrix:
        control_positions = [self.check_and_reverse_index(c) for c in controls]
        target_position = self.check_and_reverse_index(target)
        if target_position in control_positions:
            raise ValueError("Control and target qubits cannot be the same")

        zero_zero = sp.csr_matrix(([1.0], ([0], [0])), shape=(2, 2), dtype=_DTYPE)
        one_one = sp.csr_matrix(([1.0], ([1], [1])), shape=(2, 2), dtype=_DTYPE)
        identity = _identity(2)

        zero_matrix = _identity(1)
        one_matrix = _identity(1)
        for i in range(self.num_of_qbits):
            if i in control_positions:
                zero_matrix = kronecker_product(zero_matrix, zero_zero)
                one_matrix = kronecker_product(one_matrix, one_one)
            elif i == target_position:
                zero_matrix = kronecker_product(zero_matrix, identity)
                one_matrix = kronecker_product(one_matrix, gate)
            else:
                zero_matrix = kronecker_product(zero_matrix, identity)
                one_matrix = kronecker_product(one_matrix, identity)
        return (zero_matrix + one_matrix).tocsr()

    def __str__(self) -> str:
        return "".join(f"{gate}\n" for gate in self._gates)