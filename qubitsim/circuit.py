# qubitsim/circuit.py
from dataclasses import dataclass, field
from typing import Iterator, List

from . import config
from . import gates as G
from .gates import Gate
from .logging import get_logger
from .state import State

logger = get_logger(__name__)


@dataclass
class Circuit:
    ops: List[Gate] = field(default_factory=list)

    @staticmethod
    def empty() -> "Circuit":
        return Circuit([])

    def append(self, gate: Gate) -> "Circuit":
        # dimensions are checked when the circuit runs, not here
        self.ops.append(gate)
        return self

    def h(self, n: int = 1): return self.append(G.H(n))
    def x(self): return self.append(G.X())
    def y(self): return self.append(G.Y())
    def z(self): return self.append(G.Z())
    def phase(self, theta: float): return self.append(G.P(theta))
    def s(self): return self.append(G.S())
    def cnot(self, c: int, t: int, n: int): return self.append(G.CNOT(c, t, n))

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[Gate]:
        return iter(self.ops)

    def run(self, state: State, backend=None, check_norm=False, check_norm_tol=None) -> State:
        """Apply every gate in insertion order and return the final state.

        Gates are applied one at a time (never pre-multiplied) so the
        floating-point result depends only on the gate order. The input
        state is not modified.
        """
        backend = config.resolve_backend(backend)
        logger.debug("running %d gates on %d amplitudes (backend=%s)", len(self.ops), len(state), backend)
        st = state
        for gate in self.ops:
            st = gate.apply(st, backend=backend)
        if st is state:
            st = state.copy()

        if check_norm:
            st.check_normalized(tol=check_norm_tol)
        return st
