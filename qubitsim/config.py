"""Process-wide defaults.

Read from the environment once at import time:

- ``QUBITSIM_BACKEND``: ``serial`` (default) or ``numba``
- ``QUBITSIM_LOG_LEVEL``: logging level name, default ``WARNING``

Explicit keyword arguments (``backend=``, ``dtype=``...) always win.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

import numpy as np

from .logging import set_log_level

BACKENDS = ("serial", "numba")

DEFAULT_DTYPE = np.complex128
NORM_TOL = 1e-6

_BACKEND_ENV_VAR = "QUBITSIM_BACKEND"
_LOG_LEVEL_ENV_VAR = "QUBITSIM_LOG_LEVEL"


def _check_backend(backend: str) -> str:
    backend = str(backend).lower()
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend: {backend!r} (expected one of {', '.join(BACKENDS)})")
    return backend


_default_backend: str = _check_backend(os.getenv(_BACKEND_ENV_VAR, "serial"))

set_log_level(os.getenv(_LOG_LEVEL_ENV_VAR, "WARNING"))


def get_default_backend() -> str:
    return _default_backend


def set_default_backend(backend: str) -> None:
    global _default_backend
    _default_backend = _check_backend(backend)


def resolve_backend(backend=None) -> str:
    """Return ``backend`` validated, or the configured default when None."""
    if backend is None:
        return _default_backend
    return _check_backend(backend)


@contextmanager
def backend_context(backend: str) -> Iterator[None]:
    """Temporarily switch the default backend.

    >>> with backend_context("numba"):
    ...     state = circuit.run(state)
    """
    global _default_backend
    prev = _default_backend
    _default_backend = _check_backend(backend)
    try:
        yield
    finally:
        _default_backend = prev
