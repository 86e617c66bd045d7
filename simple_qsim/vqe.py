"""Variational quantum eigensolver for a two-qubit Hamiltonian, optimised by Powell's method."""

from __future__ import annotations

import argparse
import math
from typing import Callable, Sequence

import numpy as np

from .circuit import Circuit, GateKind
from .qstate import QState

TAU = 2.0 * math.pi

HAMILTONIAN = np.array(
    [
        [-2.85405, 0.0, 0.0, 0.13065],
        [0.0, -2.04305, 0.13065, -0.2288],
        [0.0, 0.13065, -2.04305, -0.2288],
        [0.13065, -0.2288, -0.2288, -0.76085],
    ],
    dtype=np.complex128,
)


def run_pqc_circuit(phi: Sequence[float]) -> QState:
    """Run the six-parameter ansatz circuit on |00>."""
    circuit = (
        Circuit(2)
        .gate_at(0, GateKind.rx(phi[0]))
        .gate_at(0, GateKind.rz(phi[1]))
        .gate_at(1, GateKind.rx(phi[2]))
        .gate_at(1, GateKind.rz(phi[3]))
        .cnot(1, 0)
        .gate_at(1, GateKind.rz(phi[4]))
        .gate_at(1, GateKind.rx(phi[5]))
    )
    return circuit.apply(QState.from_str("00"))


def expect_val(operator, state) -> float:
    """Real part of s^T O s, with the transpose taken without conjugation."""
    vector = np.asarray(state, dtype=np.complex128).reshape(-1)
    matrix = np.asarray(operator, dtype=np.complex128)
    return float(complex(vector @ matrix @ vector).real)


def cost(phi: Sequence[float], hamiltonian) -> float:
    """Energy of the ansatz state for the given parameters."""
    return expect_val(hamiltonian, run_pqc_circuit(phi))


def find_min_alpha(
    phi,
    search_vec,
    delta: float,
    cost_fun: Callable[[np.ndarray], float],
) -> tuple[float, float]:
    """Scan phi + alpha * search_vec in steps of delta over one turn; return the best alpha and its cost."""
    phi = np.asarray(phi, dtype=float)
    search_vec = np.asarray(search_vec, dtype=float)
    if np.linalg.norm(search_vec) == 0.0 or delta == 0.0:
        raise ValueError("Search vector and step must be non-zero")

    min_cost = cost_fun(phi)
    best_alpha = 0.0
    curr_alpha = 0.0

    while np.linalg.norm(curr_alpha * search_vec) < TAU:
        curr_alpha += delta
        new_cost = cost_fun(curr_alpha * search_vec + phi)
        if new_cost < min_cost:
            min_cost = new_cost
            best_alpha = curr_alpha

    return best_alpha, min_cost


def _last_argmax(values: Sequence[float]) -> int:
    return max(range(len(values)), key=lambda k: (values[k], k))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Find the ground energy with a VQE.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--iterations", type=int, default=10, help="Powell iterations")
    args = parser.parse_args(argv)

    rng = np.random.default_rng(args.seed)
    phi0 = rng.uniform(0.0, TAU, 6)

    def objective(p: np.ndarray) -> float:
        return cost(p, HAMILTONIAN)

    search_vecs = [row.copy() for row in np.eye(6)]
    phi = phi0.copy()
    delta = math.pi / 1000.0

    for i in range(args.iterations):
        alphas: list[float] = []

        for search_vec in search_vecs:
            if np.linalg.norm(search_vec) < 1e-10:
                continue

            alpha_pos, cost_pos = find_min_alpha(phi, search_vec, delta, objective)
            alpha_neg, cost_neg = find_min_alpha(phi, search_vec, -delta, objective)
            best_alpha = alpha_pos if cost_pos < cost_neg else alpha_neg

            phi = phi + best_alpha * search_vec
            alphas.append(float(np.linalg.norm(best_alpha * search_vec)))

        if not alphas:
            raise RuntimeError("All search vectors vanished")
        del search_vecs[_last_argmax(alphas)]
        search_vecs.append(phi - phi0)

        if sum(float(np.linalg.norm(sv)) for sv in search_vecs) < 1e-10:
            break

        phi0 = phi.copy()
        print(f"Iteration: {i}, Cost: {objective(phi0)}")

    print(f"Final cost: {objective(phi)}")
    print(f"Final parameters: {phi.tolist()}")
    return 0