"""
GenoWeaver v0.1.0

Structure module: collapse of the developed graph and merging of connective paths.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .collapse import NodeInfo, NodeGraph, collapse_edges
from .path_merger import StructuredNode, StructuredGraph, merge_paths

__all__ = [
    "NodeInfo",
    "NodeGraph",
    "collapse_edges",
    "StructuredNode",
    "StructuredGraph",
    "merge_paths",
]
