"""Show a small circuit's output before and after transpiling it to H/T gates."""

from __future__ import annotations

import argparse
import math

from .circuit import Circuit, GateKind
from .qstate import QState


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Apply H then RY(pi/4) to |00>, then again after transpilation."
    )
    parser.parse_args(argv)

    circuit = Circuit(2).h(0).gate_at(0, GateKind.ry(math.pi / 4.0))
    qs = QState.from_str("00")

    result = circuit.apply(qs)
    print(f"Resulting state:\n{result}")

    circuit.transpile()

    result2 = circuit.apply(qs)
    print(f"Resulting state after transpile:\n{result2}")
    return 0