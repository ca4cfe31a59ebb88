# qubitsim/cli.py
import argparse
import logging
import time

import numpy as np

from . import config
from . import gates as G
from .bloch import qubit_bloch_vectors
from .circuit import Circuit
from .errors import QubitSimError
from .logging import configure_logging
from .simulator import Simulator
from .state import State

# ---------------------------------------------------------------------

def parse_gate(token: str, n: int) -> G.Gate:
    """One gate from the --gates grammar: H, X, Y, Z, S, P:<theta>, CNOT:<c>:<t>."""
    name, *args = token.strip().split(":")
    name = name.upper()
    try:
        if name == "H" and not args:
            return G.H(n)
        if name in ("X", "Y", "Z", "S") and not args:
            return getattr(G, name)()
        if name == "P" and len(args) == 1:
            return G.P(float(args[0]))
        if name == "CNOT" and len(args) == 2:
            return G.CNOT(int(args[0]), int(args[1]), n)
    except ValueError as e:
        if isinstance(e, QubitSimError):
            raise
        raise ValueError(f"bad arguments in gate {token!r}") from e
    raise ValueError(f"unknown gate {token!r}")

def build_circuit(gate_list: str, n: int) -> Circuit:
    c = Circuit.empty()
    for token in gate_list.split(","):
        if token.strip():
            c.append(parse_gate(token, n))
    return c

def parse_initial(args):
    if args.amplitudes:
        return [complex(a.strip().replace(" ", "")) for a in args.amplitudes.split(",")]
    if args.init:
        return args.init
    return State.zero(args.qubits)

# ---------------------------------------------------------------------

def cmd_run(args, parser):
    try:
        circ = build_circuit(args.gates, args.qubits)
        final = Simulator.run(circ, parse_initial(args), backend=args.backend)
    except (QubitSimError, ValueError) as e:
        parser.error(str(e))

    print("Final state:")
    for i, amp in enumerate(final.as_numpy()):
        print(f"  |{final.basis_label(i)}>: {amp.real:+.6f}{amp.imag:+.6f}j")
    print("Probabilities:")
    for i, p in enumerate(final.probabilities()):
        print(f"  |{final.basis_label(i)}>: {p:.4f}")

    if final.n is not None:
        for k, (x, y, z) in enumerate(qubit_bloch_vectors(final)):
            print(f"Qubit {k}: Bloch (x: {x:.4f}, y: {y:.4f}, z: {z:.4f})")

    rng = np.random.default_rng(args.seed)
    if args.shots > 1:
        for label, count in final.sample(args.shots, rng).items():
            print(f"  |{label}>: {count}")
    else:
        print(f"Measurement result: |{final.basis_label(final.measure(rng))}>")

def cmd_bench(args, parser):
    ns = [int(x) for x in args.ns.split(",")]
    for n in ns:
        t0 = time.perf_counter()
        circ = Circuit.empty().append(G.H(n, backend=args.backend))
        for k in range(n - 1):
            circ.append(G.CNOT(k, k + 1, n, backend=args.backend))
        t1 = time.perf_counter()
        circ.run(State.zero(n), backend=args.backend)
        t2 = time.perf_counter()
        print(f"  n={n}  gates={len(circ)}  build={(t1 - t0) * 1e3:.2f} ms  run={(t2 - t1) * 1e3:.2f} ms")
    print("✓ done.")

# ---------------------------------------------------------------------
def main(argv=None):
    p = argparse.ArgumentParser(prog="qubitsim", description="state-vector quantum circuit simulator")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--backend", type=str, default=None, choices=list(config.BACKENDS))
    sub = p.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run")
    p_run.add_argument("--qubits", type=int, default=1)
    p_run.add_argument("--gates", type=str, required=True)
    init = p_run.add_mutually_exclusive_group()
    init.add_argument("--init", type=str, help="basis label, e.g. '|010>'")
    init.add_argument("--amplitudes", type=str, help="comma-separated complex amplitudes")
    p_run.add_argument("--shots", type=int, default=1)
    p_run.add_argument("--seed", type=int, default=None)

    p_bench = sub.add_parser("bench")
    p_bench.add_argument("--ns", type=str, default="2,4,6,8")

    args = p.parse_args(argv)
    if args.verbose:
        configure_logging(logging.DEBUG if args.verbose > 1 else logging.INFO)

    if args.cmd == "run":
        cmd_run(args, p_run)
    elif args.cmd == "bench":
        cmd_bench(args, p_bench)

if __name__ == "__main__":
    main()
