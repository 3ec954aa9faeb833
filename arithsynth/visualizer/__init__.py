"""
Netlist Visualization Support

Exports netlists as plain node/edge graphs for external layout and
rendering tools, and as text listings.

Key Components:
    - GraphView: Labels, predecessors, adjacency and links
    - to_graph: Netlist to GraphView
    - format_netlist: Text listing of a netlist
"""

from .graph import GraphView, to_graph, format_netlist

__all__ = [
    "GraphView",
    "to_graph",
    "format_netlist",
]
