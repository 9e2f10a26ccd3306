#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Graph Collapse — turn the developed edge list into a node graph.

Every distinct (src, dst) edge becomes a node. Parallel edges are reduced to
the one with the highest type count (the first one wins ties). Collapsed
node i (former edge a -> b) connects to every collapsed node j whose former
edge starts at b.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set, Tuple

from ..development.edge_automaton import Edge
from ..errors import InvariantViolation

logger = logging.getLogger(__name__)


@dataclass
class NodeInfo:
    """A collapsed edge: its length and type count."""
    length: float
    type_count: int


@dataclass
class NodeGraph:
    """
    Fixed node set plus unique directed connections.

    Attributes:
        nodes: Collapsed nodes, indexed by position
        edges: Unique (src, dst) index pairs
    """
    nodes: List[NodeInfo] = field(default_factory=list)
    edges: Set[Tuple[int, int]] = field(default_factory=set)

    def add_edge(self, src: int, dst: int):
        for node in (src, dst):
            if not 0 <= node < len(self.nodes):
                raise InvariantViolation(f"Node {node} outside graph of {len(self.nodes)} nodes")
        self.edges.add((src, dst))

    def adjacency(self) -> Dict[int, List[int]]:
        """Sorted out-neighbour lists for every node."""
        adj: Dict[int, List[int]] = {i: [] for i in range(len(self.nodes))}
        for src, dst in self.edges:
            adj[src].append(dst)
        for targets in adj.values():
            targets.sort()
        return adj

    def __len__(self) -> int:
        return len(self.nodes)


def collapse_edges(edges: Iterable[Edge]) -> NodeGraph:
    """
    Collapse an edge list into a NodeGraph.

    Args:
        edges: Developed edges

    Returns:
        NodeGraph whose nodes follow the first appearance of each (src, dst)
    """
    kept: List[Edge] = []
    index_of: Dict[Tuple[int, int], int] = {}

    for edge in edges:
        key = edge.endpoints
        if key not in index_of:
            index_of[key] = len(kept)
            kept.append(edge)
        elif edge.type_count > kept[index_of[key]].type_count:
            kept[index_of[key]] = edge

    graph = NodeGraph(nodes=[NodeInfo(length=e.length, type_count=e.type_count) for e in kept])

    starting_at: Dict[int, List[int]] = defaultdict(list)
    for i, edge in enumerate(kept):
        starting_at[edge.src_node].append(i)

    for i, edge in enumerate(kept):
        for j in starting_at.get(edge.dst_node, []):
            graph.add_edge(i, j)

    logger.info(f"Collapsed {len(index_of)} distinct edges into {len(graph.nodes)} nodes "
                f"with {len(graph.edges)} connections")
    return graph


__all__ = ['NodeInfo', 'NodeGraph', 'collapse_edges']

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
