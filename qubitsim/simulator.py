# qubitsim/simulator.py
from numbers import Real

import numpy as np

from .circuit import Circuit
from .logging import get_logger
from .state import State

logger = get_logger(__name__)


def initial_state(initial) -> State:
    """Turn a classical description into a State.

    Accepts a State (copied), a basis label such as ``"|01>"``, a pair of
    reals (real parts of a two-amplitude state) or any sequence of complex
    amplitudes.
    """
    if isinstance(initial, State):
        return initial.copy()
    if isinstance(initial, str):
        return State.from_label(initial)
    if isinstance(initial, tuple) and len(initial) == 2 and all(isinstance(v, Real) for v in initial):
        a, b = initial
        return State.from_amplitudes([complex(a, 0.0), complex(b, 0.0)])
    try:
        amplitudes = np.asarray(initial, dtype=complex)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot build an initial state from {initial!r}") from e
    if amplitudes.ndim != 1 or amplitudes.shape[0] == 0:
        raise ValueError(f"Initial amplitudes must be a non-empty flat sequence, got shape {amplitudes.shape}")
    return State.from_amplitudes(amplitudes)


class Simulator:
    """Stateless entry point: (circuit, initial description) -> final State."""

    @staticmethod
    def run(circuit: Circuit, initial, backend=None, check_norm=False) -> State:
        st = initial_state(initial)
        logger.debug("simulating %d-qubit state through %d gates", st.n or 0, len(circuit))
        return circuit.run(st, backend=backend, check_norm=check_norm)
