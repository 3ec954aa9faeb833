"""
Arithmetic Operators.

Each operator lays out its input bits as weighted columns and hands them
to the shared compressor:

    - adder:      column i = [a[i], b[i]]
    - popcount:   a single column holding every bit
    - multiplier: column d = all partial products a[i] AND b[j] with i+j = d

All operators take the netlist explicitly and append to it. Bit lists are
always least-significant bit first.

Example:
    >>> nl = Netlist()
    >>> a = make_inputs(nl, "a", 4)
    >>> b = make_inputs(nl, "b", 4)
    >>> s = adder(nl, a, b)
    >>> len(s)
    5
"""

from __future__ import annotations
from typing import List, Sequence

from ..common.netlist import Netlist, Wire, GateOp
from .compressor import compress


def make_inputs(netlist: Netlist, label: str, n: int) -> List[Wire]:
    """
    Allocate ``n`` primary inputs labeled ``label0`` .. ``label{n-1}``.

    Labels are not deduplicated across calls.
    """
    if n < 0:
        raise ValueError(f"Input count must be non-negative, got {n}")
    return [netlist.input(f"{label}{i}") for i in range(n)]


def adder(netlist: Netlist, a_bits: Sequence[Wire], b_bits: Sequence[Wire]) -> List[Wire]:
    """
    Unsigned n-bit adder.

    Args:
        netlist: Netlist to append to
        a_bits: First operand, LSB first
        b_bits: Second operand, same width as a_bits

    Returns:
        Sum bits, LSB first (up to n+1 bits; no truncation)
    """
    if len(a_bits) != len(b_bits):
        raise ValueError(
            f"Input bit arrays must have the same length "
            f"({len(a_bits)} != {len(b_bits)})"
        )
    columns = [[a, b] for a, b in zip(a_bits, b_bits)]
    return compress(netlist, columns)


def popcount(netlist: Netlist, bits: Sequence[Wire]) -> List[Wire]:
    """
    Population count: the number of set bits, in binary, LSB first.

    The result has ceil(log2(n+1)) bits for n inputs.
    """
    return compress(netlist, [list(bits)])


def multiplier(netlist: Netlist, a_bits: Sequence[Wire], b_bits: Sequence[Wire]) -> List[Wire]:
    """
    Unsigned array multiplier.

    Builds the schoolbook partial-product array by diagonals and reduces
    it with the compressor. Every use of an input bit goes through a fresh
    buffer of its latest copy, so each partial product gets its own wire.

    Args:
        netlist: Netlist to append to
        a_bits: First operand, LSB first
        b_bits: Second operand, LSB first

    Returns:
        Product bits, LSB first
    """
    na, nb = len(a_bits), len(b_bits)
    a_bits = list(a_bits)
    b_bits = list(b_bits)
    columns: List[List[Wire]] = [[] for _ in range(na + nb - 1)]

    for d in range(na + nb - 1):
        for i in range(max(0, d - nb + 1), min(na, d + 1)):
            j = d - i
            a_bits[i] = netlist.buffer(a_bits[i])
            b_bits[j] = netlist.buffer(b_bits[j])
            columns[d].append(netlist.gate(GateOp.AND, a_bits[i], b_bits[j]))

    return compress(netlist, columns)
