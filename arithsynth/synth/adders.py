"""
Half-adder and full-adder builders.

These are the only places where the synthesizer creates XOR, AND and OR
gates for arithmetic. Each builder appends to the given netlist and
returns the (sum, carry) wires.
"""

from __future__ import annotations
from typing import Tuple

from ..common.netlist import Netlist, Wire, GateOp


def half_adder(netlist: Netlist, x: Wire, y: Wire) -> Tuple[Wire, Wire]:
    """
    Add two bits.

    Appends XOR(x, y) then AND(x, y).

    Returns:
        (sum, carry)
    """
    return netlist.gate(GateOp.XOR, x, y), netlist.gate(GateOp.AND, x, y)


def full_adder(netlist: Netlist, x: Wire, y: Wire, z: Wire) -> Tuple[Wire, Wire]:
    """
    Add three bits with two chained half-adders.

    The two half-adder carries can never both be 1, so OR-ing them gives
    the carry-out without a majority gate:

        (s1, c1) = half_adder(x, y)
        (s2, c2) = half_adder(s1, z)
        carry    = OR(c1, c2)

    Returns:
        (sum, carry)
    """
    s1, c1 = half_adder(netlist, x, y)
    s2, c2 = half_adder(netlist, s1, z)
    return s2, netlist.gate(GateOp.OR, c1, c2)
