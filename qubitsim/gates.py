# qubitsim/gates.py
from dataclasses import dataclass

import numpy as np

from . import config
from .errors import DimensionMismatchError, InvalidGateArgumentError
from .logging import get_logger
from .state import State

logger = get_logger(__name__)


def kernels(backend=None):
    """Module holding hadamard_matrix / cnot_matrix / matvec for `backend`."""
    backend = config.resolve_backend(backend)
    if backend == "numba":
        try:
            from . import apply_numba as K
        except ImportError as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
        return K
    from . import apply_serial as K
    return K


@dataclass(frozen=True, eq=False)
class Gate:
    """Square complex matrix applied to the whole state vector.

    A gate sized for k qubits acts on a 2^k state; gates meant for part of a
    larger register must already be embedded in the full space (the
    multi-qubit factories below return full-size matrices).
    """
    matrix: np.ndarray
    name: str = "U"

    def __post_init__(self):
        mat = np.array(self.matrix)
        if not np.iscomplexobj(mat):
            mat = mat.astype(config.DEFAULT_DTYPE)
        if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
            raise InvalidGateArgumentError(f"{self.name}: gate matrix must be square, got shape {mat.shape}")
        d = mat.shape[0]
        if d < 1 or d & (d - 1):
            raise InvalidGateArgumentError(f"{self.name}: gate dimension {d} is not a power of two")
        mat.setflags(write=False)
        object.__setattr__(self, "matrix", mat)

    @property
    def dim(self) -> int:
        return self.matrix.shape[0]

    @property
    def num_qubits(self) -> int:
        return self.dim.bit_length() - 1

    def apply(self, state: State, backend=None) -> State:
        """Return matrix @ state as a new State; the input is left untouched."""
        N = len(state)
        if self.dim != N:
            raise DimensionMismatchError(self.dim, N, self.name)
        psi = kernels(backend).matvec(self.matrix, state.psi)
        return State(state.n, psi)

    def __repr__(self):
        return f"Gate({self.name}, {self.dim}x{self.dim})"


# ---------- single-qubit (2x2) ----------

def X(dtype=config.DEFAULT_DTYPE) -> Gate:
    return Gate(np.array([[0, 1],
                          [1, 0]], dtype=dtype), "X")

def Y(dtype=config.DEFAULT_DTYPE) -> Gate:
    return Gate(np.array([[0, -1j],
                          [1j, 0]], dtype=dtype), "Y")

def Z(dtype=config.DEFAULT_DTYPE) -> Gate:
    return Gate(np.array([[1, 0],
                          [0, -1]], dtype=dtype), "Z")

def P(theta: float, dtype=config.DEFAULT_DTYPE) -> Gate:
    """Phase shift: |1> picks up e^{i theta}."""
    return Gate(np.array([[1, 0],
                          [0, complex(np.cos(theta), np.sin(theta))]], dtype=dtype), f"P({theta:g})")

def S(dtype=config.DEFAULT_DTYPE) -> Gate:
    g = P(np.pi / 2, dtype=dtype)
    return Gate(g.matrix, "S")


# ---------- multi-qubit, full register size ----------

def H(n: int = 1, dtype=config.DEFAULT_DTYPE, backend=None) -> Gate:
    """Hadamard on every one of `n` qubits (2^n x 2^n)."""
    if n < 1:
        raise InvalidGateArgumentError(f"Hadamard needs at least one qubit, got {n}")
    mat = kernels(backend).hadamard_matrix(n, dtype=dtype)
    logger.debug("built H[%d] (%dx%d)", n, mat.shape[0], mat.shape[0])
    return Gate(mat, "H" if n == 1 else f"H[{n}]")

def CNOT(control: int, target: int, n: int, dtype=config.DEFAULT_DTYPE, backend=None) -> Gate:
    """Controlled-NOT over an `n`-qubit register (little-endian: bit k is qubit k)."""
    if n < 2:
        raise InvalidGateArgumentError(f"CNOT needs at least two qubits, got {n}")
    if control == target:
        raise InvalidGateArgumentError("control and target must differ")
    for role, q in (("control", control), ("target", target)):
        if not 0 <= q < n:
            raise InvalidGateArgumentError(f"{role} qubit {q} out of range for {n} qubits")
    mat = kernels(backend).cnot_matrix(control, target, n, dtype=dtype)
    logger.debug("built CNOT(%d->%d) on %d qubits", control, target, n)
    return Gate(mat, f"CNOT({control},{target})")


hadamard = H
pauli_x = X
pauli_y = Y
pauli_z = Z
phase = P
s_gate = S
cnot = CNOT
