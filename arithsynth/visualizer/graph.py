"""
Node/Edge View of a Netlist.

Layout and rendering tools do not need gate semantics: they only need
each node's label and the nodes it is connected to. This module exports
that view.

Formats:
    - preds:     ordered predecessor wires of each node (0, 1 or 2)
    - neighbors: undirected adjacency lists, the structure a
                 force-directed layout consumes
    - links:     one (source, target) pair per edge with source < target

Example:
    >>> view = to_graph(netlist)
    >>> for source, target in view.links:
    ...     draw_edge(source, target)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..common.netlist import Netlist, InputGate, BufferGate


@dataclass
class GraphView:
    """
    Generic graph extracted from a netlist.

    Attributes:
        labels: Display label of each node
        preds: Predecessor nodes of each node, in operand order
        kinds: "input", "buffer" or "gate" for each node
    """
    labels: List[str]
    preds: List[List[int]]
    kinds: List[str] = field(default_factory=list)

    @property
    def num_nodes(self) -> int:
        return len(self.labels)

    @property
    def neighbors(self) -> List[List[int]]:
        """Undirected adjacency list (predecessors and successors)."""
        adj: List[List[int]] = [[] for _ in self.labels]
        for node, preds in enumerate(self.preds):
            for p in preds:
                adj[node].append(p)
                adj[p].append(node)
        return adj

    @property
    def links(self) -> List[Tuple[int, int]]:
        """Edges as (source, target) with source < target."""
        return [(p, node) for node, preds in enumerate(self.preds) for p in preds]

    def __repr__(self) -> str:
        return f"GraphView(nodes={self.num_nodes}, links={len(self.links)})"


def to_graph(netlist: Netlist) -> GraphView:
    """Export a netlist as a labeled node/edge graph."""
    view = GraphView(labels=[], preds=[], kinds=[])
    for wire, gate in enumerate(netlist):
        view.labels.append(netlist.name_of(wire))
        view.preds.append(list(gate.operands))
        if isinstance(gate, InputGate):
            view.kinds.append("input")
        elif isinstance(gate, BufferGate):
            view.kinds.append("buffer")
        else:
            view.kinds.append("gate")
    return view


def format_netlist(netlist: Netlist, outputs: Optional[List[int]] = None) -> str:
    """
    Render a netlist as a text listing, one gate per line.

    Args:
        netlist: Netlist to render
        outputs: Optional output wires, marked as out0, out1, ...

    Returns:
        Multi-line string
    """
    marks = {w: f"out{i}" for i, w in enumerate(outputs or [])}
    width = len(str(max(len(netlist) - 1, 0)))
    lines = [f"# {netlist.name}: {len(netlist)} gates"]
    for wire, gate in enumerate(netlist):
        if isinstance(gate, InputGate):
            text = f"input  {gate.label}"
        elif isinstance(gate, BufferGate):
            text = f"buf    {gate.source}"
        else:
            text = f"{gate.op.value:<6} {gate.a} {gate.b}"
        if wire in marks:
            text += f"  -> {marks[wire]}"
        lines.append(f"{wire:>{width}}: {text}")
    return "\n".join(lines)
