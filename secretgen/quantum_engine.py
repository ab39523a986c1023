"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.

The bits are only ever mixed into os.urandom output (see mixing.py);
they never replace it.
"""

from __future__ import annotations

from qiskit import QuantumCircuit
from qiskit import transpile
from qiskit_aer import AerSimulator

from .mixing import EntropyPool, mixed_byte_source
from .secure_random import SecureRandom


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, num_qubits: int = 20, shots: int = 64) -> None:
        if num_qubits < 1 or shots < 1:
            raise ValueError("num_qubits and shots must be positive")
        self.num_qubits = num_qubits
        self.shots = shots
        # Local simulator backend.
        self.backend = AerSimulator()

        self.last_measurement_basis: list[str] | None = None

        # Safety: ensure requested num_qubits does not exceed backend capability.
        max_qubits = getattr(self.backend.configuration(), "num_qubits", None)
        if max_qubits is not None and num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={num_qubits} exceeds "
                f"backend limit ({max_qubits})."
            )

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, ...).
        """
        n = self.num_qubits
        measurement_basis: list[str] = []

        qc = QuantumCircuit(n, n)

        # 1) Put all qubits into superposition with H gate.
        for i in range(n):
            qc.h(i)

        # 2) Alternate measurement basis:
        #    - even index: measure in Z basis directly.
        #    - odd index: apply H again, i.e. measure in X basis.
        for i in range(n):
            if i % 2 == 1:
                measurement_basis.append("X")
                qc.h(i)
            else:
                measurement_basis.append("Z")
            qc.measure(i, i)

        return qc, measurement_basis

    def sample_bits(self) -> list[int]:
        """
        Run the circuit `shots` times and return num_qubits * shots bits.
        """
        qc, measurement_basis = self._build_circuit()
        tqc = transpile(qc, self.backend)

        # memory=True keeps every shot instead of aggregated counts.
        result = self.backend.run(tqc, shots=self.shots, memory=True).result()

        bits: list[int] = []
        for bitstring in result.get_memory():
            # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
            bits.extend(int(b) for b in bitstring[::-1])

        self.last_measurement_basis = measurement_basis
        return bits


def quantum_random(
    num_qubits: int = 20,
    shots: int = 64,
    streams: int = 2,
    rounds: int = 2,
) -> SecureRandom:
    """
    SecureRandom whose bytes are os.urandom XOR amplified quantum samples.
    """
    engine = QuantumEngine(num_qubits=num_qubits, shots=shots)
    pool = EntropyPool(engine.sample_bits, streams=streams, rounds=rounds)
    return SecureRandom(mixed_byte_source(pool))
