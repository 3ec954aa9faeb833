"""
Gate-Level Simulator

Evaluates netlists on concrete inputs and checks synthesized operators
against integer arithmetic.

Key Components:
    - NetlistSimulator: Vectorized forward evaluation (numpy)
    - int_to_bits, bits_to_int, bind: LSB-first bit conversions
    - exhaustive_inputs: All assignments of n bits
    - verify_adder, verify_multiplier, verify_popcount: Exhaustive checks

Usage:
    >>> from arithsynth.simulator import verify_multiplier
    >>> result = verify_multiplier(4)
    >>> print(result.summary())
"""

from .core import (
    NetlistSimulator,
    int_to_bits,
    bits_to_int,
    bind,
    exhaustive_inputs,
    MAX_ARRAY_BITS,
    MAX_EXHAUSTIVE_BITS,
)
from .verify import (
    VerificationResult,
    verify_adder,
    verify_multiplier,
    verify_popcount,
)

__all__ = [
    "NetlistSimulator",
    "int_to_bits",
    "bits_to_int",
    "bind",
    "exhaustive_inputs",
    "MAX_ARRAY_BITS",
    "MAX_EXHAUSTIVE_BITS",
    "VerificationResult",
    "verify_adder",
    "verify_multiplier",
    "verify_popcount",
]
