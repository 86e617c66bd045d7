"""A small state-vector quantum circuit simulator with a Solovay-Kitaev transpiler and Pauli observables."""

__version__ = "0.1.0"