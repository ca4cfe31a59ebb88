# qubitsim/bloch.py
from typing import List, Tuple

import numpy as np

from .state import State


def bloch_angles(pair) -> Tuple[float, float]:
    """(theta, phi) of a single-qubit state alpha|0> + beta|1>."""
    alpha, beta = complex(pair[0]), complex(pair[1])
    theta = 2.0 * float(np.arccos(np.clip(abs(alpha), 0.0, 1.0)))
    phi = 0.0 if abs(alpha) == 0.0 else float(np.angle(beta) - np.angle(alpha))
    return theta, phi


def bloch_coordinates(theta: float, phi: float) -> Tuple[float, float, float]:
    return (float(np.sin(theta) * np.cos(phi)),
            float(np.sin(theta) * np.sin(phi)),
            float(np.cos(theta)))


def qubit_bloch_vectors(state: State) -> List[Tuple[float, float, float]]:
    """Bloch point of every qubit, from its reduced amplitude pair."""
    n = state.n if state.n is not None else max(1, (len(state) - 1).bit_length())
    return [bloch_coordinates(*bloch_angles(state.reduced_single_qubit_state(k)))
            for k in range(n)]
