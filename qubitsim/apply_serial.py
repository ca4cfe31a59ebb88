# qubitsim/apply_serial.py
import numpy as np

H_SCALE = 1.0 / np.sqrt(2.0)


def hadamard_matrix(n: int, dtype=np.complex128) -> np.ndarray:
    """n-qubit Hadamard built entry by entry from bit parity (no Kronecker products)."""
    N = 1 << n
    mat = np.zeros((N, N), dtype=dtype)
    h = H_SCALE
    for i in range(N):
        for j in range(N):
            v = 1.0
            # -h where bit k is set in both i and j, +h otherwise: h^n (-1)^popcount(i & j)
            for k in range(n):
                if (i >> k) & (j >> k) & 1:
                    v *= -h
                else:
                    v *= h
            mat[i, j] = v
    return mat


def cnot_matrix(control: int, target: int, n: int, dtype=np.complex128) -> np.ndarray:
    """Full 2^n x 2^n CNOT: column i goes to row i^(1<<target) when bit `control` of i is set."""
    N = 1 << n
    mat = np.zeros((N, N), dtype=dtype)
    mc = 1 << control
    mt = 1 << target
    for i in range(N):
        if i & mc:
            mat[i ^ mt, i] = 1.0
        else:
            mat[i, i] = 1.0
    return mat


def matvec(mat: np.ndarray, psi: np.ndarray) -> np.ndarray:
    """Row i of the result is the dot product of row i of `mat` with `psi`."""
    N = mat.shape[0]
    out = np.empty(N, dtype=np.result_type(mat.dtype, psi.dtype))
    for i in range(N):
        out[i] = np.dot(mat[i], psi)
    return out
