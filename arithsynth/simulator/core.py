"""
Gate-Level Netlist Simulator.

Evaluates a netlist in wire order. Because operands always precede the
gates that use them, a single forward pass computes every wire.

Values are numpy ``uint8`` arrays, so one pass can evaluate many input
vectors at once: give each input wire an array with one entry per test
case and every wire comes back as an array of the same shape.

Example:
    >>> nl = Netlist()
    >>> a = make_inputs(nl, "a", 2)
    >>> b = make_inputs(nl, "b", 2)
    >>> out = adder(nl, a, b)
    >>> sim = NetlistSimulator(nl)
    >>> values = {**bind(a, 3), **bind(b, 2)}
    >>> sim.run(values, out)
    5
"""

from __future__ import annotations
from typing import Dict, List, Sequence, Union

import numpy as np

from ..common.netlist import Netlist, Wire, GateOp, InputGate, BufferGate


BitValue = Union[int, np.ndarray]

# int64 arrays hold unsigned values up to 63 bits
MAX_ARRAY_BITS = 63

# exhaustive_inputs allocates 2**n entries per input bit
MAX_EXHAUSTIVE_BITS = 24

_OPS = {
    GateOp.AND: np.bitwise_and,
    GateOp.OR: np.bitwise_or,
    GateOp.XOR: np.bitwise_xor,
}


def int_to_bits(value: BitValue, width: int) -> List[np.ndarray]:
    """
    Split an unsigned integer (or array of them) into ``width`` bits.

    Returns:
        List of uint8 arrays, LSB first
    """
    if np.ndim(value) == 0:
        value = int(value)
        return [np.uint8((value >> i) & 1) for i in range(width)]
    if width > MAX_ARRAY_BITS:
        raise ValueError(f"Arrays hold at most {MAX_ARRAY_BITS} bits, got width {width}")
    value = np.asarray(value, dtype=np.int64)
    return [((value >> i) & 1).astype(np.uint8) for i in range(width)]


def bits_to_int(bits: Sequence[BitValue]) -> BitValue:
    """
    Combine bits (LSB first) into an unsigned integer.

    Scalar bits give a Python int of any size; array bits give an int64
    array and are limited to MAX_ARRAY_BITS bits.
    """
    if all(np.ndim(bit) == 0 for bit in bits):
        return sum(int(bit) << i for i, bit in enumerate(bits))
    if len(bits) > MAX_ARRAY_BITS:
        raise ValueError(f"Arrays hold at most {MAX_ARRAY_BITS} bits, got {len(bits)}")
    total = np.int64(0)
    for i, bit in enumerate(bits):
        total = total + (np.asarray(bit, dtype=np.int64) << i)
    if np.ndim(total) == 0:
        return int(total)
    return total


def bind(wires: Sequence[Wire], value: BitValue) -> Dict[Wire, np.ndarray]:
    """Assign an unsigned integer (or array of them) to a group of input wires."""
    return dict(zip(wires, int_to_bits(value, len(wires))))


def exhaustive_inputs(n: int) -> np.ndarray:
    """
    Every assignment of ``n`` bits.

    Returns:
        uint8 array of shape (n, 2**n); column k holds the bits of k
    """
    if n < 0:
        raise ValueError(f"Bit count must be non-negative, got {n}")
    if n > MAX_EXHAUSTIVE_BITS:
        raise ValueError(f"Exhaustive inputs are limited to {MAX_EXHAUSTIVE_BITS} bits, got {n}")
    index = np.arange(1 << n, dtype=np.int64)
    return np.array(int_to_bits(index, n), dtype=np.uint8).reshape(n, 1 << n)


class NetlistSimulator:
    """
    Forward evaluator for a netlist.

    Usage:
        >>> sim = NetlistSimulator(netlist)
        >>> values = sim.evaluate({x: 1, y: 0})
        >>> values[sum_wire]
    """

    def __init__(self, netlist: Netlist):
        self.netlist = netlist

    def evaluate(self, assignment: Dict[int, BitValue]) -> List[np.ndarray]:
        """
        Compute the value of every wire.

        Args:
            assignment: Value (0/1 or uint8 array) for each primary input

        Returns:
            One value per wire, indexed by wire
        """
        values: List[np.ndarray] = []
        for wire, gate in enumerate(self.netlist):
            if isinstance(gate, InputGate):
                if wire not in assignment:
                    raise ValueError(f"No value for input {gate.label} (wire {wire})")
                values.append(np.asarray(assignment[wire], dtype=np.uint8) & 1)
            elif isinstance(gate, BufferGate):
                values.append(values[gate.source])
            else:
                values.append(_OPS[gate.op](values[gate.a], values[gate.b]))
        return values

    def run(self, assignment: Dict[int, BitValue], outputs: Sequence[Wire]) -> BitValue:
        """Evaluate and read ``outputs`` (LSB first) as an unsigned integer."""
        values = self.evaluate(assignment)
        return bits_to_int([values[w] for w in outputs])
