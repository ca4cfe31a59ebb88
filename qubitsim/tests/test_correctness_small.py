import numpy as np
import pytest

from qubitsim.circuit import Circuit
from qubitsim.gates import CNOT, H, Gate, P, X, Y, Z
from qubitsim.simulator import Simulator
from qubitsim.state import State

TOL = 1e-10

def almost(p, q, tol=TOL):
    return np.allclose(p, q, atol=tol, rtol=0)

def probs(psi):
    return np.abs(psi)**2

def test_x_flips_exactly():
    st = Simulator.run(Circuit.empty().x(), [1, 0])
    assert np.array_equal(st.as_numpy(), np.array([0, 1], dtype=complex))
    st = Simulator.run(Circuit.empty().x(), [0, 1])
    assert np.array_equal(st.as_numpy(), np.array([1, 0], dtype=complex))

def test_y_on_zero():
    st = Simulator.run(Circuit.empty().y(), [1, 0])
    assert almost(st.as_numpy(), [0, 1j])

def test_z_on_basis_states():
    assert almost(Simulator.run(Circuit.empty().z(), [1, 0]).as_numpy(), [1, 0])
    assert almost(Simulator.run(Circuit.empty().z(), [0, 1]).as_numpy(), [0, -1])

def test_phase_half_pi_on_one():
    st = Simulator.run(Circuit.empty().phase(np.pi / 2), [0, 1])
    psi = st.as_numpy()
    assert psi[0] == 0
    assert abs(psi[1] - complex(6.123233995736766e-17, 1.0)) < 1e-9

@pytest.mark.parametrize("theta", [0.0, 0.3, np.pi, -1.2])
def test_phase_is_e_i_theta(theta):
    st = P(theta).apply(State.from_amplitudes([0, 1]))
    assert almost(st.as_numpy(), [0, np.exp(1j * theta)])

def test_s_is_phase_half_pi():
    st = Simulator.run(Circuit.empty().s(), [0, 1])
    assert almost(st.as_numpy(), [0, 1j])

def test_hadamard_then_x():
    c = Circuit.empty().h(1).x()
    st = Simulator.run(c, [1.0, 0.0])
    h = 1 / np.sqrt(2)
    assert almost(st.as_numpy(), [h, h])

def test_real_pair_initial_state():
    st = Simulator.run(Circuit.empty().h(1), (1.0, 0.0))
    assert st.n == 1
    assert almost(st.as_numpy(), [1 / np.sqrt(2)] * 2)

def test_hadamard_three_qubits_uniform():
    st = Simulator.run(Circuit.empty().h(3), State.zero(3))
    psi = st.as_numpy()
    assert psi.shape == (8,)
    assert almost(psi, np.full(8, 1 / np.sqrt(8)))
    assert np.all(psi.imag == 0)

def test_cnot_keeps_uniform_superposition():
    # CNOT only permutes basis states, so H^3 |000> is unchanged
    st = Simulator.run(Circuit.empty().h(3).cnot(0, 1, 3), "|000>")
    assert almost(st.as_numpy(), np.full(8, 1 / np.sqrt(8)))

def test_cnot_control_off_noop():
    st = Simulator.run(Circuit.empty().cnot(1, 0, 2), "|00>")
    assert almost(probs(st.as_numpy()), [1, 0, 0, 0])

def test_cnot_control_on_flips():
    # |10> (qubit 1 set) --CNOT(1->0)--> |11>
    st = Simulator.run(Circuit.empty().cnot(1, 0, 2), "|10>")
    assert almost(probs(st.as_numpy()), [0, 0, 0, 1])

def test_bell_pair():
    h_on_q0 = Gate(np.kron(np.eye(2), H(1).matrix), "H0")
    c = Circuit.empty().append(h_on_q0).append(CNOT(0, 1, 2))
    st = Simulator.run(c, "|00>")
    assert almost(probs(st.as_numpy()), [0.5, 0, 0, 0.5])

@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_hadamard_is_involutory(n):
    rng = np.random.default_rng(n)
    psi = rng.normal(size=1 << n) + 1j * rng.normal(size=1 << n)
    psi /= np.linalg.norm(psi)
    st = Circuit.empty().h(n).h(n).run(State.from_amplitudes(psi))
    assert almost(st.as_numpy(), psi)

def test_gates_applied_left_to_right():
    # append order is application order: x().z() is Z X |0> = -|1>
    assert almost(Circuit.empty().x().z().run(State.from_basis_state()).as_numpy(), [0, -1])
    assert almost(Circuit.empty().z().x().run(State.from_basis_state()).as_numpy(), [0, 1])

def test_run_does_not_mutate_input():
    st = State.zero(2)
    Circuit.empty().h(2).run(st)
    assert almost(st.as_numpy(), [1, 0, 0, 0])
    assert Circuit.empty().run(st) is not st

def test_circuit_is_reusable():
    c = Circuit.empty().h(1)
    a = c.run(State.from_label("|0>"))
    b = c.run(State.from_label("|1>"))
    h = 1 / np.sqrt(2)
    assert almost(a.as_numpy(), [h, h])
    assert almost(b.as_numpy(), [h, -h])
    assert len(c) == 1

def test_normalization():
    c = Circuit.empty().h(2).cnot(1, 0, 2).append(Gate(np.kron(Z().matrix, Y().matrix)))
    st = c.run(State.zero(2), check_norm=True)
    n2 = float((st.as_numpy().conj()*st.as_numpy()).sum().real)
    assert abs(1.0 - n2) < 1e-12

def test_check_norm_flags_non_unitary():
    c = Circuit.empty().append(Gate([[2, 0], [0, 1]]))
    with pytest.raises(AssertionError):
        c.run(State.from_basis_state(), check_norm=True)
    # without the check the drift is returned as-is
    assert almost(c.run(State.from_basis_state()).as_numpy(), [2, 0])

def test_hadamard_matches_kronecker_power():
    h1 = np.array([[1, 1], [1, -1]]) / np.sqrt(2)
    expect = h1
    for n in range(2, 5):
        expect = np.kron(expect, h1)
        assert np.allclose(H(n).matrix, expect, atol=1e-15, rtol=0)

def test_x_matrix():
    assert np.array_equal(X().matrix, [[0, 1], [1, 0]])
