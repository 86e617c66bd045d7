# simple_qsim

A small state-vector quantum circuit simulator built on NumPy and SciPy sparse matrices.

## What it provides

- `simple_qsim.gates`: single-qubit gate matrices. Sparse (CSR) forms `h_matrix`, `x_matrix`, `y_matrix`, `z_matrix`, `s_matrix`, `t_matrix`, `inv_t_matrix`, `rx_matrix`, `ry_matrix`, `rz_matrix`; dense 2x2 forms `x_dense_matrix`, `y_dense_matrix`, `z_dense_matrix`, `s_dense_matrix`, `rx_dense_matrix`, `ry_dense_matrix`, `rz_dense_matrix`, and the SU(2) versions `h_dense_matrix` (Hadamard times i) and `t_dense_matrix` (Rz(π/4)). Note that the sparse `rz_matrix` puts the exponential of the phase factor on its diagonal, so it is not the same matrix as `rz_dense_matrix`.
- `simple_qsim.qstate.QState`: a state vector whose length must be a non-zero power of two (otherwise `ValueError`). Build one from amplitudes, with `QState.zero_state(n)`, or from a bit string with `QState.from_str("01")`. `num_of_qbits()` gives the register size and `str()` lists every basis state with its amplitude and probability.
- `simple_qsim.circuit`: `Circuit` holds an ordered list of `Gate`s, each a `GateKind` (`GateKind.H`, `X`, `Y`, `Z`, `S`, `T`, `INV_T`, `GateKind.rx/ry/rz(angle)`, `GateKind.dense(matrix)`, `GateKind.sparse(matrix)`) placed at a `GateIndex` (one qubit, a controlled target, or `GateIndex.ALL` for a full-register matrix). Also `kronecker_product(x, y)`.
- `simple_qsim.observable`: `Observable`, a weighted sum of Pauli strings built from `Pauli.I/X/Y/Z`, with `expectation_value(state)`. The value is the real part of sᵀ·O·s (transpose without conjugation) summed over the terms.
- `simple_qsim.su2`: `proj_trace_dist`, `trace_norm`, `equals_ignoring_global_phase` and `group_factor` for 2x2 SU(2) matrices; `simple_qsim.su2equiv.Su2Equiv` compares SU(2) matrices up to sign within a tolerance.
- `simple_qsim.net`: `Net`, an ε-net of words over {H, T, t} (t is T inverse), with `generate(max_length)`, `evaluate(word)`, `invert(word)` and `solovay_kitaev(u, depth)`, which returns a `Knot` (a word and its matrix).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

A Bell state:

```python
from simple_qsim.qstate import QState
from simple_qsim.circuit import Circuit

state = QState.from_str("00")
result = Circuit(2).h(0).cnot(0, 1).apply(state)
print(result)
```

Measuring an observable:

```python
from simple_qsim.observable import Observable, Pauli

obs = Observable()
obs.add_pauli_operator(1.0, [(Pauli.Z, 0)])
print(obs.expectation_value(result))
```

Parametric gates can be read and updated for variational algorithms:

```python
from math import pi
from simple_qsim.circuit import Circuit, ParameterizedGate

circuit = Circuit(1)
circuit.add_parametric_gate_at(0, ParameterizedGate.RX, pi)
circuit.set_parameters([pi / 2])
print(circuit.parameters)  # [1.5707963267948966]
```

`set_parameters` raises `ValueError` when the number of values differs from the number of parameters; `set_parameter` raises `IndexError` for an unknown parameter index.

Qubit 0 is the least significant bit of a basis-state index: in `QState.from_str("01")` qubit 0 is set. Qubit indices are checked when the circuit is applied; an index outside the register raises `IndexError`, and a control equal to its target raises `ValueError`.

`Circuit.swap(i, j)` appends three CNOTs between the reversed indices `n-1-i` and `n-1-j`.

### Transpiling

`Circuit.transpile()` replaces every S, X, Y, Z, RX, RY and RZ gate by an H/T/T† word found with Solovay-Kitaev (depth 5, on a net of words up to length 14 that is built once and reused). H, T, T†, dense and sparse gates are kept as they are. A circuit holding any controlled or full-register gate raises `ValueError`. Building the net takes a noticeable amount of time on first use.

## Commands

```
simple-qsim-transpile
```

Applies H and RY(π/4) on qubit 0 to |00>, transpiles the circuit to H/T/T† gates, and prints the state before and after.

```
simple-qsim-vqe [--seed N] [--iterations N]
```

Finds the ground-state energy of a fixed two-qubit Hamiltonian with a six-parameter circuit and Powell's method (10 iterations by default), printing the cost at each iteration and the final cost and parameters.

```
simple-qsim-qcl [--seed N] [--max-iters N] [--output-dir DIR]
```

Quantum circuit learning: fits sin(πx) from 50 noisy samples with a three-qubit circuit trained by SciPy's Nelder-Mead (1000 iterations by default). Writes `train.png`, `pred_init.png` and `result.png` to the output directory (the current directory by default).

## What it does not do

The simulator keeps the full state vector and builds a full-register sparse matrix for every gate, so it is meant for a handful of qubits. It has no measurement sampling, no noise models and no circuit file format; controlled gates have a single control qubit.