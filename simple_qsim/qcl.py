"""Quantum circuit learning: fit sin(pi x) with a parameterised three-qubit circuit."""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Sequence

import numpy as np
from matplotlib.figure import Figure
from scipy.optimize import minimize

from .circuit import Circuit, GateIndex, GateKind, ParameterizedGate
from .observable import Observable, Pauli
from .qstate import QState

_C_DEPTH = 3
_NOISE = 0.05


def _rng(rng) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def prepare_train_data(
    x_min: float, x_max: float, num_x_train: int, rng=None
) -> tuple[list[float], list[float]]:
    """Sorted uniform samples in [x_min, x_max) with noisy sin(pi x) targets."""
    rng = _rng(rng)
    x_train = sorted(
        float(x_min + (x_max - x_min) * rng.random()) for _ in range(num_x_train)
    )
    y_train = [math.sin(x * math.pi) + float(rng.normal(0.0, _NOISE)) for x in x_train]
    return x_train, y_train


def plot_data(x_data: Sequence[float], y_data: Sequence[float], file_name) -> None:
    """Save a 640x480 scatter plot of the points to an image file."""
    if not len(x_data) or not len(y_data):
        raise ValueError("Cannot plot empty data")

    points = list(zip(x_data, y_data))
    xs = [x for x, _ in points]
    ys = [y for _, y in points]

    fig = Figure(figsize=(6.4, 4.8), dpi=100, facecolor="white")
    ax = fig.add_subplot()
    ax.set_facecolor("white")
    ax.grid(True)
    ax.scatter(xs, ys, s=18, c="red")
    ax.set_xlim(min(x_data), max(x_data))
    ax.set_ylim(min(y_data), max(y_data))
    fig.savefig(file_name)


def u_in(x: float, nqubit: int) -> Circuit:
    """Encoding circuit: RY(asin x) then RZ(acos x^2) on every qubit."""
    angle_y = math.asin(x)
    angle_z = math.acos(x * x)

    circuit = Circuit(nqubit)
    for i in range(nqubit):
        circuit.add_gate_at(i, GateKind.ry(angle_y))
        circuit.add_gate_at(i, GateKind.rz(angle_z))
    return circuit


def u_out(nqubit: int, rng=None) -> Circuit:
    """Trainable circuit: layers of time evolution followed by RX, RZ, RX on each qubit."""
    rng = _rng(rng)
    time_evol_op = time_evol_op_for_3qubit()

    circuit = Circuit(nqubit)
    for _ in range(_C_DEPTH):
        circuit.add_dense_gate(time_evol_op.copy(), GateIndex.ALL)
        for i in range(nqubit):
            for gate in (ParameterizedGate.RX, ParameterizedGate.RZ, ParameterizedGate.RX):
                circuit.add_parametric_gate_at(i, gate, 2.0 * math.pi * rng.random())
    return circuit


def qcl_pred(nqubit: int, x: float, u_out: Circuit, obs: Observable) -> float:
    """Model output for input x."""
    state = QState.zero_state(nqubit)
    state = u_in(x, nqubit).apply(state)
    state = u_out.apply(state)
    return obs.expectation_value(state)


def cost_func(
    nqubit: int,
    theta: Sequence[float],
    x_train: Sequence[float],
    y_train: Sequence[float],
    obs: Observable,
    rng=None,
) -> float:
    """Sum of squared errors of the model with parameters theta."""
    circuit = u_out(nqubit, rng)
    circuit.set_parameters(theta)
    return sum(
        (qcl_pred(nqubit, x, circuit, obs) - y) ** 2 for x, y in zip(x_train, y_train)
    )


def arange(start: float, stop: float, step: float) -> list[float]:
    """Values from start, advancing by step, while below stop."""
    if step <= 0:
        raise ValueError("Step must be positive")
    values = []
    current = start
    while current < stop:
        values.append(current)
        current += step
    return values


_TIME_EVOL_OP_3QUBIT = (
    (0.4502467309110266, 0.3989530928005264),
    (0.09127768914919739, -0.3898217983118638),
    (-0.21116625840396, 0.15526661742554448),
    (0.15323067719786393, -0.019275471961844055),
    (-0.19572522532670836, -0.3999361624040975),
    (-0.3408643369229124, -0.08980539004289571),
    (0.1956517811210468, 0.014323824626186366),
    (0.02897812566021865, -0.1530889916860413),
    (0.09127768914919737, -0.3898217983118638),
    (0.5408644987409207, -0.1685973910633376),
    (0.1523584015039502, 0.0215817794028314),
    (0.20212497053543885, 0.14333732469272967),
    (-0.3416246292810889, 0.08509693027683517),
    (0.21352666943961596, -0.448666258109923),
    (-0.008387660766444774, -0.15578782306263497),
    (0.1956517811210468, 0.01432382462618683),
    (-0.21116625840396, 0.15526661742554448),
    (0.1523584015039502, 0.021581779402831392),
    (0.2594865368165453, 0.5560193013892835),
    (-0.07638424203262105, -0.3019861576213608),
    (0.19700633729908354, -0.011474722524068497),
    (0.048362714399835256, -0.14720951956132353),
    (0.21352666943961587, -0.4486662581099231),
    (-0.34086433692291257, -0.08980539004289574),
    (0.15323067719786393, -0.019275471961844023),
    (0.20212497053543885, 0.14333732469272964),
    (-0.07638424203262105, -0.3019861576213608),
    (0.013120702675468858, -0.65787838783485),
    (-0.06495359781934837, -0.13919086454595508),
    (0.19700633729908346, -0.011474722524068627),
    (-0.3416246292810889, 0.08509693027683513),
    (-0.19572522532670825, -0.3999361624040974),
    (-0.19572522532670836, -0.3999361624040975),
    (-0.3416246292810889, 0.08509693027683517),
    (0.19700633729908357, -0.011474722524068491),
    (-0.06495359781934837, -0.13919086454595508),
    (0.0131207026754692, -0.65787838783485),
    (-0.076384242032621, -0.3019861576213607),
    (0.20212497053543885, 0.14333732469272942),
    (0.153230677197864, -0.01927547196184382),
    (-0.34086433692291235, -0.08980539004289571),
    (0.21352666943961598, -0.448666258109923),
    (0.04836271439983526, -0.14720951956132353),
    (0.19700633729908346, -0.01147472252406864),
    (-0.076384242032621, -0.3019861576213607),
    (0.25948653681654515, 0.5560193013892836),
    (0.1523584015039505, 0.021581779402831316),
    (-0.21116625840396028, 0.1552666174255442),
    (0.1956517811210468, 0.014323824626186376),
    (-0.00838766076644478, -0.155787823062635),
    (0.2135266694396159, -0.4486662581099231),
    (-0.3416246292810889, 0.08509693027683511),
    (0.20212497053543885, 0.14333732469272942),
    (0.1523584015039505, 0.021581779402831302),
    (0.5408644987409208, -0.16859739106333757),
    (0.09127768914919757, -0.3898217983118638),
    (0.028978125660218703, -0.15308899168604131),
    (0.19565178112104678, 0.014323824626186815),
    (-0.3408643369229126, -0.08980539004289571),
    (-0.19572522532670825, -0.3999361624040974),
    (0.153230677197864, -0.01927547196184383),
    (-0.21116625840396028, 0.1552666174255442),
    (0.0912776891491976, -0.38982179831186375),
    (0.4502467309110268, 0.39895309280052693),
)


def time_evol_op_for_3qubit() -> np.ndarray:
    """Precomputed 8x8 time-evolution operator of a random three-qubit Hamiltonian."""
    values = [complex(re, im) for re, im in _TIME_EVOL_OP_3QUBIT]
    return np.array(values, dtype=np.complex128).reshape(8, 8)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Train a QCL model on sin(pi x).")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--max-iters", type=int, default=1000, help="optimiser iterations")
    parser.add_argument("--output-dir", default=".", help="directory for the plots")
    args = parser.parse_args(argv)

    rng = np.random.default_rng(args.seed)
    out = Path(args.output_dir)

    nqubit = 3
    x_min, x_max = -1.0, 1.0
    num_x_train = 50

    x_train, y_train = prepare_train_data(x_min, x_max, num_x_train, rng)
    plot_data(x_train, y_train, out / "train.png")

    circuit = u_out(nqubit, rng)
    theta = circuit.parameters

    obs = Observable()
    obs.add_pauli_operator(2.0, [(Pauli.Z, 0)])

    xlist = arange(x_min, x_max, 0.02)
    y_init = [qcl_pred(nqubit, x, circuit, obs) for x in xlist]
    plot_data(xlist, y_init, out / "pred_init.png")

    simplex = rng.random((len(theta) + 1, len(theta))) * 2.0 * math.pi

    print("Training started...")
    res = minimize(
        lambda t: cost_func(nqubit, t, x_train, y_train, obs, rng),
        simplex[0],
        method="Nelder-Mead",
        options={"initial_simplex": simplex, "maxiter": args.max_iters},
    )
    print(res)

    circuit.set_parameters(res.x)
    y_result = [qcl_pred(nqubit, x, circuit, obs) for x in xlist]
    plot_data(xlist, y_result, out / "result.png")

    print("Training completed. Results saved to 'result.png'.")
    return 0