"""Exceptions raised by the simulation engine."""


class QubitSimError(Exception):
    """Base class for qubitsim errors."""


class DimensionMismatchError(QubitSimError, ValueError):
    """A gate was applied to a state of a different dimension."""

    def __init__(self, gate_dim: int, state_dim: int, gate_name: str = "gate"):
        self.gate_dim = gate_dim
        self.state_dim = state_dim
        super().__init__(
            f"{gate_name} is {gate_dim}x{gate_dim} but the state has {state_dim} amplitudes"
        )


class InvalidGateArgumentError(QubitSimError, ValueError):
    """A gate factory was called with arguments that describe no valid gate."""
