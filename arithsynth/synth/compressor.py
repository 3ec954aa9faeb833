"""
Multi-Column Carry-Save Compressor.

The compressor is the single routine behind addition, population count
and multiplication. It takes a list of columns, where column ``w`` holds
wires of binary weight 2^w, and reduces them to one output bit per weight.

Algorithm (always working on the lowest remaining column):
    - 1 wire:   it is the output bit of this weight; move to the next column
    - 3+ wires: full-adder on the first three; the sum goes back into this
                column and the carry into the next column
    - 2 wires:  same with a half-adder
    - 0 wires:  the weight has no bit; drop it

This is a Wallace/Dadda-style reduction generalized to columns of any
height. Every step removes one or two wires from the current column and
adds exactly one carry above it, so the total work is linear in the
number of wires.

Value preservation:
    sum(value(out) * 2^weight(out)) == sum(value(in) * 2^weight(column(in)))
"""

from __future__ import annotations
from typing import Iterator, List, Sequence, Tuple

from ..common.netlist import Netlist, Wire
from .adders import half_adder, full_adder


def compress_columns(
    netlist: Netlist,
    columns: Sequence[Sequence[Wire]],
) -> Iterator[Tuple[int, Wire]]:
    """
    Reduce weighted columns to one bit per weight.

    Args:
        netlist: Netlist to append adder gates to
        columns: columns[w] holds the wires of weight w

    Yields:
        (weight, wire) pairs in increasing weight order

    The caller's column lists are copied, never modified. Gates are
    appended as the generator advances, so it must be consumed fully.
    """
    work: List[List[Wire]] = [list(col) for col in columns]
    weight = 0
    while work:
        col = work[0]
        if len(col) == 0:
            work.pop(0)
            weight += 1
            continue
        if len(col) == 1:
            yield weight, work.pop(0)[0]
            weight += 1
            continue

        if len(col) >= 3:
            s, c = full_adder(netlist, *col[:3])
            del col[:3]
        else:
            s, c = half_adder(netlist, *col)
            del col[:2]

        col.append(s)
        if len(work) == 1:
            work.append([c])
        else:
            work[1].append(c)


def compress(netlist: Netlist, columns: Sequence[Sequence[Wire]]) -> List[Wire]:
    """
    Reduce weighted columns and return the output bits, LSB first.

    For columns that are never empty (all the arithmetic operators), bit
    ``i`` of the result has weight 2^i. Use ``compress_columns`` to get the
    weights explicitly.
    """
    return [wire for _, wire in compress_columns(netlist, columns)]
