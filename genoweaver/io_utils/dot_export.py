#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Graph Export — DOT (Graphviz) rendering of every graph GenoWeaver produces:
the developed edge list, the collapsed node graph, the structured graph of
processing nodes, and the gene regulatory network.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from ..development.edge_automaton import Edge
from ..network.gene_network import GeneNetwork
from ..structure.collapse import NodeGraph
from ..structure.path_merger import StructuredGraph

logger = logging.getLogger(__name__)


# ============================================================================
#                           DOT RECORDS
# ============================================================================

def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class DotNode:
    """A DOT node statement."""
    node_id: int
    label: str

    def to_dot_line(self) -> str:
        """Format: <id> [label="<label>"];"""
        return f'    {self.node_id} [label="{self.label}"];'


@dataclass
class DotEdge:
    """A DOT edge statement."""
    src: int
    dst: int
    weight: float
    label: Optional[str] = None

    def to_dot_line(self) -> str:
        """Format: <src> -> <dst> [weight=<w> label="<label>"];"""
        label = self.label if self.label is not None else _fmt(self.weight)
        return f'    {self.src} -> {self.dst} [weight={_fmt(self.weight)} label="{label}"];'


def _render(nodes: List[DotNode], edges: List[DotEdge]) -> str:
    lines = ["digraph {"]
    lines.extend(node.to_dot_line() for node in nodes)
    lines.extend(edge.to_dot_line() for edge in edges)
    lines.append("}")
    return '\n'.join(lines) + '\n'


# ============================================================================
#                           GRAPH RENDERERS
# ============================================================================

def edges_to_dot(edges: Iterable[Edge]) -> str:
    """
    Render the developed edge list.

    Node ids are the builder's node ids; each edge is labelled
    ``length:type_count`` and weighted by its length.
    """
    edges = list(edges)
    node_ids = sorted({n for e in edges for n in e.endpoints})
    nodes = [DotNode(node_id=n, label=str(n)) for n in node_ids]
    dot_edges = [
        DotEdge(src=e.src_node, dst=e.dst_node, weight=e.length,
                label=f"{_fmt(e.length)}:{e.type_count}")
        for e in edges
    ]
    return _render(nodes, dot_edges)


def node_graph_to_dot(graph: NodeGraph) -> str:
    """Render a collapsed node graph; nodes are labelled ``id:length:type_count``."""
    nodes = [
        DotNode(node_id=i, label=f"{i}:{_fmt(n.length)}:{n.type_count}")
        for i, n in enumerate(graph.nodes)
    ]
    dot_edges = [DotEdge(src=s, dst=d, weight=1, label="") for s, d in sorted(graph.edges)]
    return _render(nodes, dot_edges)


def structured_graph_to_dot(graph: StructuredGraph) -> str:
    """Render a structured graph; edges carry the aggregated path length."""
    nodes = [
        DotNode(node_id=i, label=f"{i}:{_fmt(graph[i].length)}:{graph[i].type_count}")
        for i in sorted(graph.nodes)
    ]
    dot_edges = [DotEdge(src=s, dst=d, weight=length) for s, d, length in graph.edges()]
    return _render(nodes, dot_edges)


def network_to_dot(network: GeneNetwork) -> str:
    """Render a gene network; edges carry their signed weight."""
    nodes = [
        DotNode(node_id=i, label=f"{i}:{network.labels[i]}")
        for i in range(network.num_nodes)
    ]
    dot_edges = [
        DotEdge(src=s, dst=d, weight=w, label=f"{w:+d}")
        for s, d, w in network.edges()
    ]
    return _render(nodes, dot_edges)


def write_dot(text: str, output_path: str | Path) -> Path:
    """Write rendered DOT text to ``output_path``."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        f.write(text)
    logger.info(f"Wrote DOT graph: {output_path}")
    return output_path


__all__ = [
    'DotNode',
    'DotEdge',
    'edges_to_dot',
    'node_graph_to_dot',
    'structured_graph_to_dot',
    'network_to_dot',
    'write_dot',
]

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
