"""
GenoWeaver v0.1.0

I/O utilities: DOT export of networks and developed graphs.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .dot_export import (
    DotNode,
    DotEdge,
    edges_to_dot,
    node_graph_to_dot,
    structured_graph_to_dot,
    network_to_dot,
    write_dot,
)

__all__ = [
    "DotNode",
    "DotEdge",
    "edges_to_dot",
    "node_graph_to_dot",
    "structured_graph_to_dot",
    "network_to_dot",
    "write_dot",
]
