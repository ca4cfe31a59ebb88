"""qubitsim - small state-vector quantum circuit simulator."""

__version__ = "0.1.0"

from .circuit import Circuit
from .errors import DimensionMismatchError, InvalidGateArgumentError, QubitSimError
from .gates import CNOT, Gate, H, P, S, X, Y, Z
from .simulator import Simulator
from .state import State

__all__ = [
    "Circuit",
    "Gate",
    "State",
    "Simulator",
    "H", "X", "Y", "Z", "P", "S", "CNOT",
    "QubitSimError",
    "DimensionMismatchError",
    "InvalidGateArgumentError",
]
