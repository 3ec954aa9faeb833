"""
Common data structures for the arithmetic circuit synthesizer.

This module provides:
    - Netlist: the append-only gate store
    - Gate variants (InputGate, OpGate, BufferGate) and GateOp
    - Wire: integer handle of a gate inside a netlist
"""

from .netlist import Netlist, Wire, Gate, GateOp, InputGate, OpGate, BufferGate

__all__ = [
    "Netlist",
    "Wire",
    "Gate",
    "GateOp",
    "InputGate",
    "OpGate",
    "BufferGate",
]
