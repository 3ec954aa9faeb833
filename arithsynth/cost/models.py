"""
Cost Models for Synthesized Netlists.

The same netlist can be priced under different target representations
without re-synthesizing it:

    - XAIG: AND, OR and XOR are all native gates (cost 1 each)
    - AIG:  only AND is native, with free inversion. OR is an AND with
            complemented inputs and output (cost 1), XOR needs three ANDs

Only two-operand gates are ever priced. Primary inputs and fan-out
buffers are free in every model.

Example:
    >>> nl = Netlist()
    >>> x, y = nl.input("x"), nl.input("y")
    >>> s, c = half_adder(nl, x, y)
    >>> cost_xaig(nl), cost_aig(nl)
    (2, 4)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..common.netlist import Netlist, GateOp, OpGate


@dataclass
class CostModel:
    """
    Prices for each two-input gate operator in a target representation.

    Attributes:
        name: Model identifier
        op_costs: Cost of one gate per operator; every GateOp must be priced
        description: Human-readable description
    """
    name: str
    op_costs: Dict[GateOp, int] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self):
        """Validate prices."""
        missing = [op.value for op in GateOp if op not in self.op_costs]
        if missing:
            raise ValueError(f"Cost model '{self.name}' has no price for: {', '.join(missing)}")
        for op, price in self.op_costs.items():
            if price < 0:
                raise ValueError(f"Cost of {op.value} must be non-negative, got {price}")

    def price(self, op: GateOp) -> int:
        """Cost of one gate with this operator."""
        return self.op_costs[op]

    def cost(self, netlist: Netlist) -> int:
        """Total cost of all two-operand gates in a netlist."""
        return sum(self.op_costs[g.op] for g in netlist if isinstance(g, OpGate))

    def summary(self) -> str:
        """Return summary string."""
        prices = ", ".join(f"{op.value}={self.op_costs[op]}" for op in GateOp)
        return (
            f"CostModel '{self.name}':\n"
            f"  {self.description}\n"
            f"  Prices: {prices}"
        )

    def __repr__(self) -> str:
        return f"CostModel('{self.name}')"


# =============================================================================
# PREDEFINED COST MODELS
# =============================================================================

XAIG_MODEL = CostModel(
    name="XAIG",
    op_costs={GateOp.AND: 1, GateOp.OR: 1, GateOp.XOR: 1},
    description="AND/XOR-inverter graph: XOR is a native gate",
)

AIG_MODEL = CostModel(
    name="AIG",
    op_costs={GateOp.AND: 1, GateOp.OR: 1, GateOp.XOR: 3},
    description="AND-inverter graph: OR by De Morgan, XOR from three ANDs",
)


def create_cost_model(
    name: str,
    and_cost: int = 1,
    or_cost: int = 1,
    xor_cost: int = 1,
    description: str = "",
) -> CostModel:
    """
    Create a custom cost model.

    Args:
        name: Model name
        and_cost: Price of an AND gate
        or_cost: Price of an OR gate
        xor_cost: Price of an XOR gate
        description: Human-readable description

    Returns:
        New CostModel
    """
    return CostModel(
        name=name,
        op_costs={GateOp.AND: and_cost, GateOp.OR: or_cost, GateOp.XOR: xor_cost},
        description=description,
    )


def cost(netlist: Netlist, model: CostModel) -> int:
    """Price a netlist under a cost model."""
    return model.cost(netlist)


def cost_xaig(netlist: Netlist) -> int:
    """Number of two-operand gates (AND, OR, XOR all cost 1)."""
    return XAIG_MODEL.cost(netlist)


def cost_aig(netlist: Netlist) -> int:
    """AND-only gate count: XOR costs 3, AND and OR cost 1."""
    return AIG_MODEL.cost(netlist)


# =============================================================================
# MODEL COMPARISON UTILITIES
# =============================================================================

def compare_models(
    netlist: Netlist,
    models: Optional[Sequence[CostModel]] = None,
) -> Dict:
    """
    Price one netlist under several models.

    Args:
        netlist: Netlist to price
        models: Models to compare; defaults to [XAIG_MODEL, AIG_MODEL]

    Returns:
        Dict with per-model costs and each model's ratio to the first one
    """
    chosen: List[CostModel] = list(models or [XAIG_MODEL, AIG_MODEL])
    costs = {m.name: m.cost(netlist) for m in chosen}
    base = costs[chosen[0].name]
    return {
        "baseline": chosen[0].name,
        "costs": costs,
        "ratios": {
            name: (value / base if base else 1.0)
            for name, value in costs.items()
        },
    }
