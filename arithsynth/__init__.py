"""
Arithmetic Circuit Synthesizer
==============================

Lowers addition, population count and multiplication into flat netlists
of two-input AND/OR/XOR gates and prices them under two target
representations (native-XOR graphs and AND-only graphs).

Modules:
    - common: Netlist, gates and wires
    - synth: Adder cells, the column compressor and arithmetic operators
    - cost: XAIG and AIG cost models
    - simulator: Vectorized gate-level evaluation and exhaustive checks
    - visualizer: Node/edge export for layout tools

Quick Start:
    >>> from arithsynth import Netlist, make_inputs, multiplier, cost_xaig, cost_aig
    >>> nl = Netlist()
    >>> a = make_inputs(nl, "a", 4)
    >>> b = make_inputs(nl, "b", 4)
    >>> product = multiplier(nl, a, b)
    >>> print(cost_xaig(nl), cost_aig(nl))
"""

__version__ = "0.1.0"

from . import common
from . import synth
from . import cost
from . import simulator
from . import visualizer

from .common.netlist import Netlist, Wire, GateOp
from .synth.operators import make_inputs, adder, popcount, multiplier
from .cost.models import cost_xaig, cost_aig

__all__ = [
    "Netlist",
    "Wire",
    "GateOp",
    "make_inputs",
    "adder",
    "popcount",
    "multiplier",
    "cost_xaig",
    "cost_aig",
]
