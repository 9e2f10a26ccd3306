"""
GenoWeaver v0.1.0

Development module: the per-edge automaton and the graph builder it drives.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .edge_automaton import RESIZE_FACTOR, DevelopmentGene, Edge, EdgeAutomaton
from .graph_builder import GraphBuilder

__all__ = [
    "RESIZE_FACTOR",
    "DevelopmentGene",
    "Edge",
    "EdgeAutomaton",
    "GraphBuilder",
]
