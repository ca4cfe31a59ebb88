# qubitsim/apply_numba.py
import numpy as np
from numba import njit

from .apply_serial import H_SCALE

# ---------- low-level kernels (Numba JIT) ----------
# Kernels fill caller-allocated arrays so the dtype stays a Python-side choice.

@njit(fastmath=True)
def _hadamard_kernel(mat, n, h):
    N = mat.shape[0]
    for i in range(N):
        for j in range(N):
            v = 1.0
            for k in range(n):
                if (i >> k) & (j >> k) & 1:
                    v *= -h
                else:
                    v *= h
            mat[i, j] = v

@njit(fastmath=True)
def _cnot_kernel(mat, control, target):
    N = mat.shape[0]
    mc = 1 << control
    mt = 1 << target
    for i in range(N):
        if i & mc:
            mat[i ^ mt, i] = 1.0
        else:
            mat[i, i] = 1.0

@njit(fastmath=True)
def _matvec_kernel(mat, psi, out):
    N = mat.shape[0]
    for i in range(N):
        acc = 0j
        for j in range(N):
            acc += mat[i, j] * psi[j]
        out[i] = acc

# ---------- user-facing helpers (same signatures as apply_serial) ----------

def hadamard_matrix(n: int, dtype=np.complex128) -> np.ndarray:
    N = 1 << n
    mat = np.zeros((N, N), dtype=dtype)
    _hadamard_kernel(mat, n, H_SCALE)
    return mat

def cnot_matrix(control: int, target: int, n: int, dtype=np.complex128) -> np.ndarray:
    N = 1 << n
    mat = np.zeros((N, N), dtype=dtype)
    _cnot_kernel(mat, control, target)
    return mat

def matvec(mat: np.ndarray, psi: np.ndarray) -> np.ndarray:
    out = np.empty(mat.shape[0], dtype=np.result_type(mat.dtype, psi.dtype))
    _matvec_kernel(mat, psi, out)
    return out
