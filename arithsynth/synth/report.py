"""
Synthesis Reports.

Convenience builders that synthesize one operator into a fresh netlist
and collect the result together with its cost under both standard
models.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..common.netlist import Netlist, Wire
from ..cost.models import cost_xaig, cost_aig
from .operators import make_inputs, adder, popcount, multiplier


@dataclass
class SynthesisReport:
    """
    Result of synthesizing one arithmetic operator.

    Attributes:
        name: Operator description (e.g. "adder 8")
        netlist: The synthesized netlist
        inputs: Input wires per operand label, LSB first
        outputs: Output wires, LSB first
        xaig: Cost with native XOR
        aig: Cost with AND-only gates
        gate_counts: Gate counts by kind
    """
    name: str
    netlist: Netlist
    inputs: Dict[str, List[Wire]]
    outputs: List[Wire]
    xaig: int = 0
    aig: int = 0
    gate_counts: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def collect(cls, name: str, netlist: Netlist,
                inputs: Dict[str, List[Wire]], outputs: List[Wire]) -> "SynthesisReport":
        return cls(
            name=name,
            netlist=netlist,
            inputs=inputs,
            outputs=outputs,
            xaig=cost_xaig(netlist),
            aig=cost_aig(netlist),
            gate_counts=netlist.gate_counts(),
        )

    @property
    def num_outputs(self) -> int:
        return len(self.outputs)

    @property
    def xor_overhead(self) -> float:
        """AIG cost relative to XAIG cost."""
        return self.aig / self.xaig if self.xaig else 1.0

    def summary(self) -> str:
        """Return summary string."""
        widths = ", ".join(f"{k}={len(v)}" for k, v in self.inputs.items())
        return (
            f"SynthesisReport '{self.name}':\n"
            f"  Inputs: {widths}\n"
            f"  Outputs: {self.num_outputs} bits\n"
            f"  Netlist size: {len(self.netlist)}\n"
            f"  XAIG cost: {self.xaig}\n"
            f"  AIG cost: {self.aig} ({self.xor_overhead:.2f}x)"
        )

    def __repr__(self) -> str:
        return f"SynthesisReport('{self.name}', xaig={self.xaig}, aig={self.aig})"


def synthesize_adder(width: int) -> SynthesisReport:
    """Synthesize a ``width``-bit adder with inputs a0.. and b0.."""
    nl = Netlist(f"adder{width}")
    a = make_inputs(nl, "a", width)
    b = make_inputs(nl, "b", width)
    return SynthesisReport.collect(f"adder {width}", nl, {"a": a, "b": b}, adder(nl, a, b))


def synthesize_multiplier(width_a: int, width_b: Optional[int] = None) -> SynthesisReport:
    """Synthesize a ``width_a`` x ``width_b`` multiplier (square by default)."""
    if width_b is None:
        width_b = width_a
    nl = Netlist(f"mul{width_a}x{width_b}")
    a = make_inputs(nl, "a", width_a)
    b = make_inputs(nl, "b", width_b)
    return SynthesisReport.collect(
        f"multiplier {width_a}x{width_b}", nl, {"a": a, "b": b}, multiplier(nl, a, b)
    )


def synthesize_popcount(width: int) -> SynthesisReport:
    """Synthesize a population count over ``width`` bits with inputs x0.."""
    nl = Netlist(f"popcount{width}")
    x = make_inputs(nl, "x", width)
    return SynthesisReport.collect(f"popcount {width}", nl, {"x": x}, popcount(nl, x))
