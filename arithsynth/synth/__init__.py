"""
Arithmetic Circuit Synthesis

Lowers addition, population count and multiplication into AND/OR/XOR
gates on a shared netlist.

Key Components:
    - half_adder, full_adder: Primitive adder cells
    - compress: Multi-column carry-save reduction
    - make_inputs, adder, popcount, multiplier: Arithmetic operators
    - SynthesisReport: Operator + costs in one record

Usage:
    >>> from arithsynth.common import Netlist
    >>> from arithsynth.synth import make_inputs, multiplier
    >>> nl = Netlist()
    >>> a = make_inputs(nl, "a", 4)
    >>> b = make_inputs(nl, "b", 4)
    >>> product = multiplier(nl, a, b)
"""

from .adders import half_adder, full_adder
from .compressor import compress, compress_columns
from .operators import make_inputs, adder, popcount, multiplier
from .report import (
    SynthesisReport,
    synthesize_adder,
    synthesize_multiplier,
    synthesize_popcount,
)

__all__ = [
    "half_adder",
    "full_adder",
    "compress",
    "compress_columns",
    "make_inputs",
    "adder",
    "popcount",
    "multiplier",
    "SynthesisReport",
    "synthesize_adder",
    "synthesize_multiplier",
    "synthesize_popcount",
]
