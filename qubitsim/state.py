# qubitsim/state.py
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from . import config
from .logging import get_logger

logger = get_logger(__name__)


def _qubit_count(N: int) -> Optional[int]:
    # None when N is not a power of two
    if N < 1 or N & (N - 1):
        return None
    return N.bit_length() - 1


@dataclass
class State:
    n: Optional[int]
    psi: np.ndarray  # shape (2**n,), complex, little-endian: bit k of the index is qubit k

    @staticmethod
    def zero(n: int, dtype=config.DEFAULT_DTYPE) -> "State":
        N = 1 << n
        psi = np.zeros(N, dtype=dtype)
        psi[0] = 1.0 + 0.0j
        return State(n=n, psi=psi)

    @staticmethod
    def from_basis_state(dtype=config.DEFAULT_DTYPE) -> "State":
        """Single-qubit |0>."""
        return State.zero(1, dtype=dtype)

    @staticmethod
    def from_label(label: str, dtype=config.DEFAULT_DTYPE) -> "State":
        """Basis state from a label such as ``"|010>"`` (leftmost char is the highest qubit)."""
        bits = label.strip().strip("|>⟩ ")
        if not bits or set(bits) - {"0", "1"}:
            raise ValueError(f"Not a basis-state label: {label!r}")
        st = State.zero(len(bits), dtype=dtype)
        st.psi[0] = 0.0
        st.psi[int(bits, 2)] = 1.0
        return st

    @staticmethod
    def from_amplitudes(amplitudes, dtype=config.DEFAULT_DTYPE) -> "State":
        """Wrap caller amplitudes verbatim.

        Nothing is validated; a length that is not a power of two or a norm
        away from 1 only produces a warning.
        """
        psi = np.array(amplitudes, dtype=dtype).reshape(-1)
        n = _qubit_count(psi.shape[0])
        if n is None:
            logger.warning("amplitude list of length %d is not a power of two", psi.shape[0])
        st = State(n=n, psi=psi)
        n2 = st.norm2()
        if abs(1.0 - n2) > config.NORM_TOL:
            logger.warning("initial state is not normalized: ||psi||^2=%.6g", n2)
        return st

    @property
    def dtype(self):
        return self.psi.dtype

    def __len__(self) -> int:
        return self.psi.shape[0]

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def check_normalized(self, tol=None):
        if tol is None:
            tol = config.NORM_TOL
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: ||psi||^2={n2}")

    def probabilities(self) -> np.ndarray:
        return np.abs(self.psi) ** 2

    def measure(self, rng: Optional[np.random.Generator] = None) -> int:
        """Sample one basis index from |psi|^2 using a single uniform draw.

        Returns the first index whose cumulative probability exceeds the
        draw, or the last index when rounding leaves the total short of it.
        The amplitudes are not touched; see ``collapse``.
        """
        if rng is None:
            rng = np.random.default_rng()
        r = rng.random()
        cumulative = 0.0
        for i, p in enumerate(self.probabilities()):
            cumulative += p
            if cumulative > r:
                return i
        return len(self) - 1

    def sample(self, shots: int, rng: Optional[np.random.Generator] = None) -> Dict[str, int]:
        """Histogram of ``shots`` independent measurements, keyed by basis label."""
        if rng is None:
            rng = np.random.default_rng()
        counts = Counter(self.basis_label(self.measure(rng)) for _ in range(shots))
        return dict(sorted(counts.items()))

    def collapse(self, outcome: int) -> "State":
        """Post-measurement state: keep only ``outcome`` and renormalize."""
        N = len(self)
        if not 0 <= outcome < N:
            raise ValueError(f"outcome {outcome} out of range for {N} amplitudes")
        amp = self.psi[outcome]
        if abs(amp) == 0.0:
            raise ValueError(f"outcome {outcome} has zero probability")
        psi = np.zeros_like(self.psi)
        psi[outcome] = amp / abs(amp)
        return State(self.n, psi)

    def reduced_single_qubit_state(self, index: int) -> np.ndarray:
        """Effective (alpha, beta) for qubit ``index``.

        Sums the amplitudes of all basis states with bit ``index`` = 0 and = 1,
        then scales the pair to unit norm (left at zero if it sums to zero).
        """
        mask = 1 << index
        pair = np.zeros(2, dtype=self.dtype)
        for i, a in enumerate(self.psi):
            if i & mask:
                pair[1] += a
            else:
                pair[0] += a
        norm = np.sqrt(np.sum(np.abs(pair) ** 2))
        if norm > 0.0:
            pair /= norm
        return pair

    def basis_label(self, index: int) -> str:
        width = self.n if self.n is not None else max(1, (len(self) - 1).bit_length())
        return format(index, f"0{width}b")

    def copy(self) -> "State":
        return State(self.n, self.psi.copy())

    def as_numpy(self) -> np.ndarray:
        return self.psi
