"""
Netlist Cost Metrics

Read-only passes that price a finished netlist under a target
representation.

Key Components:
    - CostModel: Per-operator gate prices
    - XAIG_MODEL, AIG_MODEL: The two standard targets
    - cost_xaig, cost_aig: Shortcuts for the standard targets

Usage:
    >>> from arithsynth.cost import cost_xaig, cost_aig
    >>> print(cost_xaig(netlist), cost_aig(netlist))
"""

from .models import (
    CostModel,
    XAIG_MODEL,
    AIG_MODEL,
    create_cost_model,
    cost,
    cost_xaig,
    cost_aig,
    compare_models,
)

__all__ = [
    "CostModel",
    "XAIG_MODEL",
    "AIG_MODEL",
    "create_cost_model",
    "cost",
    "cost_xaig",
    "cost_aig",
    "compare_models",
]
