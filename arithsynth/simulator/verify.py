"""
Exhaustive Verification of Synthesized Operators.

Synthesizes an operator, evaluates it on every possible input with a
single vectorized simulator pass, and compares against Python integer
arithmetic. Intended for small widths: the number of cases is 2**(total
input bits), and operators with more than MAX_EXHAUSTIVE_BITS input bits
are rejected with ValueError before anything is synthesized.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from ..synth.report import (
    SynthesisReport,
    synthesize_adder,
    synthesize_multiplier,
    synthesize_popcount,
)
from .core import NetlistSimulator, bits_to_int, exhaustive_inputs, MAX_EXHAUSTIVE_BITS


@dataclass
class VerificationResult:
    """
    Outcome of an exhaustive check.

    Attributes:
        report: The synthesized operator
        cases: Number of input combinations evaluated
        failures: (inputs, expected, actual) for every mismatching case
    """
    report: SynthesisReport
    cases: int
    failures: List[Tuple[Tuple[int, ...], int, int]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures

    def summary(self) -> str:
        """Return summary string."""
        status = "PASS" if self.passed else f"FAIL ({len(self.failures)} mismatches)"
        return (
            f"Verification of '{self.report.name}': {status}\n"
            f"  Cases: {self.cases:,}\n"
            f"  XAIG cost: {self.report.xaig}\n"
            f"  AIG cost: {self.report.aig}"
        )


def _require_bits(name: str, total_bits: int):
    if total_bits > MAX_EXHAUSTIVE_BITS:
        raise ValueError(
            f"{name} has {total_bits} input bits; exhaustive checks are "
            f"limited to {MAX_EXHAUSTIVE_BITS}"
        )


def _check(report: SynthesisReport, expected_fn, verbose: bool) -> VerificationResult:
    groups = list(report.inputs.values())
    total_bits = sum(len(g) for g in groups)
    _require_bits(report.name, total_bits)
    patterns = exhaustive_inputs(total_bits)

    wires = [w for g in groups for w in g]
    assignment = {w: patterns[k] for k, w in enumerate(wires)}
    values = NetlistSimulator(report.netlist).evaluate(assignment)
    actual = np.broadcast_to(
        bits_to_int([values[w] for w in report.outputs]), (patterns.shape[1],)
    )

    operands = []
    offset = 0
    for g in groups:
        operands.append(bits_to_int(list(patterns[offset:offset + len(g)])))
        offset += len(g)
    operands = [np.broadcast_to(op, (patterns.shape[1],)) for op in operands]
    expected = expected_fn(*operands)

    result = VerificationResult(report=report, cases=patterns.shape[1])
    for k in np.nonzero(actual != expected)[0]:
        case = tuple(int(op[k]) for op in operands)
        result.failures.append((case, int(expected[k]), int(actual[k])))
        if verbose:
            print(f"  {report.name}{case}: expected {int(expected[k])}, got {int(actual[k])}")

    if verbose:
        print(result.summary())
    return result


def verify_adder(width: int, verbose: bool = False) -> VerificationResult:
    """Check a ``width``-bit adder against a + b for all inputs."""
    _require_bits(f"adder {width}", 2 * width)
    return _check(synthesize_adder(width), lambda a, b: a + b, verbose)


def verify_multiplier(width_a: int, width_b: Optional[int] = None, verbose: bool = False) -> VerificationResult:
    """Check a multiplier against a * b for all inputs."""
    _require_bits(f"multiplier {width_a}", width_a + (width_a if width_b is None else width_b))
    return _check(synthesize_multiplier(width_a, width_b), lambda a, b: a * b, verbose)


def verify_popcount(width: int, verbose: bool = False) -> VerificationResult:
    """Check a population count against the number of set bits for all inputs."""
    _require_bits(f"popcount {width}", width)

    def count(x):
        return np.array([bin(int(v)).count("1") for v in x], dtype=np.int64)
    return _check(synthesize_popcount(width), count, verbose)
