"""An epsilon-net over SU(2) and the Solovay-Kitaev approximation built on it."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from . import su2
from .gates import h_dense_matrix, t_dense_matrix
from .su2equiv import Su2Equiv

ICoord = tuple[int, int, int, int]

_ORDER_LIMIT = 50


@dataclass(eq=False)
class Knot:
    """A point in a Net: a word over the gate labels and the matrix it evaluates to."""

    word: str
    matrix: np.ndarray

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Knot):
            return NotImplemented
        return self.word == other.word

    def __hash__(self) -> int:
        return hash(self.word)


def _to_int(value: float, rounding) -> int:
    return 0 if math.isnan(value) else int(rounding(value))


def _scaled_coords(m: np.ndarray, g: float) -> tuple[float, float, float, float]:
    return (
        g * m[0, 0].real,
        g * (-1.0 * m[0, 1].imag),
        g * m[1, 0].real,
        g * m[1, 1].imag,
    )


def _canonical(t: int, x: int, y: int, z: int) -> ICoord:
    # Make the first non-zero coordinate positive (multiply by -I if necessary).
    if t < 0:
        return (-t, -x, -y, -z)
    if t == 0:
        if x < 0:
            return (t, -x, -y, -z)
        if x == 0:
            if y < 0:
                return (t, x, -y, -z)
            if y == 0 and z < 0:
                return (t, x, y, -z)
    return (t, x, y, z)


def _corner_coord(
    ceils: list[int], floors: list[int], corner: int
) -> ICoord:
    t, x, y, z = (
        floors[k] if corner & (1 << k) else ceils[k] for k in range(4)
    )
    return _canonical(t, x, y, z)


def _icoord(m: np.ndarray, corner: int | None, g: float) -> ICoord:
    scaled = _scaled_coords(m, g)
    if corner is None:
        t, x, y, z = (_to_int(v + 0.5, math.floor) for v in scaled)
        return _canonical(t, x, y, z)
    ceils = [_to_int(v, math.ceil) for v in scaled]
    floors = [_to_int(v, math.floor) for v in scaled]
    return _corner_coord(ceils, floors, corner)


class Net:
    """A grid-bucketed set of gate words approximating points of SU(2)."""

    def __init__(self, tile_width: float) -> None:
        self._knots: list[Knot] = []
        self._g = int(2.0 / tile_width)
        self._su2net: dict[ICoord, dict[str, Knot]] = {}
        self._gate_set: list[np.ndarray] = []
        self._gate_labels: list[str] = []
        self._gate_inverses: list[int] = []

    def generate(self, max_length: int) -> None:
        """Fill the net with every reduced word over H, T and t up to max_length."""
        self._gate_set = [h_dense_matrix(), t_dense_matrix()]
        self._gate_labels = ["H", "T"]
        self._gate_inverses = [0] * len(self._gate_set)

        equiv = Su2Equiv(1e-15)

        for i in range(len(self._gate_set)):
            inv = self._gate_set[i].conj().T
            existing = next(
                (j for j, g in enumerate(self._gate_set) if equiv.equals(g, inv)),
                None,
            )
            if existing is not None:
                self._gate_inverses[i] = existing
                self._gate_inverses[existing] = i
            else:
                self._gate_set.append(inv)
                self._gate_labels.append(self._gate_labels[i].lower())
                self._gate_inverses.append(i)
                self._gate_inverses[i] = len(self._gate_inverses) - 1

        gate_orders = [self._order(gate, equiv) for gate in self._gate_set]

        word: list[str] = []
        products: list[np.ndarray] = []
        sequence: list[int] = []
        depth = 0
        num_gates = len(self._gate_set)

        while True:
            if len(sequence) <= depth:
                sequence.append(0)
            else:
                sequence[depth] += 1

            current = sequence[depth]
            if current < num_gates:
                if depth > 0 and sequence[depth - 1] == self._gate_inverses[current]:
                    continue

                label = self._gate_labels[current]
                order = gate_orders[current]
                if word and order is not None:
                    repeat = 1
                    while (
                        depth - repeat >= 0
                        and word[depth - repeat] == label
                        and repeat < order
                    ):
                        repeat += 1
                    if repeat >= order:
                        continue

                gate = self._gate_set[current]
                new_prod = products[depth - 1] @ gate if depth > 0 else gate
                if len(products) > depth:
                    products[depth] = new_prod
                else:
                    products.append(new_prod)

                if len(word) > depth:
                    word[depth] = label
                else:
                    word.append(label)

                self._add(products[depth], "".join(word))

                if depth < max_length - 1:
                    depth += 1
            else:
                if word:
                    word.pop()
                if products:
                    products.pop()
                sequence.pop()

                if depth == 0:
                    break
                depth -= 1

    @staticmethod
    def _order(gate: np.ndarray, equiv: Su2Equiv) -> int | None:
        identity = np.eye(2, dtype=np.complex128)
        n = 1
        c = gate.copy()
        while n < _ORDER_LIMIT and not equiv.equals(c, identity):
            c = c @ gate
            n += 1
        # Orders of 50 or more are treated as infinite.
        return None if n == _ORDER_LIMIT else n

    def _add(self, u: np.ndarray, word: str) -> None:
        knot = Knot(word, u)
        self._knots.append(knot)

        scaled = _scaled_coords(u, float(self._g))
        ceils = [_to_int(v, math.ceil) for v in scaled]
        floors = [_to_int(v, math.floor) for v in scaled]
        for corner in range(16):
            key = _corner_coord(ceils, floors, corner)
            self._su2net.setdefault(key, {}).setdefault(word, knot)

    def _label_index(self, label: str) -> int:
        try:
            return self._gate_labels.index(label)
        except ValueError:
            raise ValueError(f"Unknown gate: {label}") from None

    def evaluate(self, word: str) -> np.ndarray:
        """Multiply out the gates a word names, left to right."""
        u = np.eye(2, dtype=np.complex128)
        for label in word:
            u = u @ self._gate_set[self._label_index(label)]
        return u

    def invert(self, word: str) -> str:
        """Return the word for the inverse: reversed, each gate replaced by its inverse."""
        return "".join(
            self._gate_labels[self._gate_inverses[self._label_index(label)]]
            for label in reversed(word)
        )

    def solovay_kitaev(self, u: np.ndarray, depth: int) -> Knot:
        """Approximate u by a gate word, refining the net's nearest point depth times."""
        if depth == 0:
            return self._nearest(u)

        ku = self.solovay_kitaev(u, depth - 1)
        v, w = su2.group_factor(u @ ku.matrix.conj().T)

        kv = self.solovay_kitaev(v, depth - 1)
        kw = self.solovay_kitaev(w, depth - 1)

        kv_inv = self.invert(kv.word)
        kw_inv = self.invert(kw.word)

        return Knot(
            word=f"{kv.word}{kw.word}{kv_inv}{kw_inv}{ku.word}",
            matrix=kv.matrix
            @ kw.matrix
            @ kv.matrix.conj().T
            @ kw.matrix.conj().T
            @ ku.matrix,
        )

    def _knots_at(self, key: ICoord) -> dict[str, Knot]:
        return self._su2net.get(key, {})

    def _nearest(self, u: np.ndarray) -> Knot:
        g = float(self._g)
        cell = self._knots_at(_icoord(u, None, g))
        if not cell:
            for corner in range(16):
                cell = self._knots_at(_icoord(u, corner, g))
                if cell:
                    break

        if not cell:
            raise LookupError("No knots found near the given matrix")
        return min(cell.values(), key=lambda k: su2.proj_trace_dist(u, k.matrix))