#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Path Merger — reduce a node graph to its processing nodes.

Nodes whose type count reaches the threshold are "processing" nodes; the
rest are "connective". From every processing node an exhaustive depth-first
search walks through connective nodes only. Each time it reaches a
processing node it records (target, summed connective length) and stops that
branch; sibling branches carry on. Adjacent processing nodes are linked with
length 0.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set, Tuple

from .collapse import NodeGraph

logger = logging.getLogger(__name__)


@dataclass
class StructuredNode:
    """
    A processing node and the processing nodes it reaches.

    Attributes:
        length: Length of the collapsed node
        type_count: Type count of the collapsed node
        paths: ``(target, aggregated_length)`` per path found
    """
    length: float
    type_count: int
    paths: List[Tuple[int, float]] = field(default_factory=list)


@dataclass
class StructuredGraph:
    """Mapping from processing-node index to StructuredNode."""
    nodes: Dict[int, StructuredNode] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, node: int) -> StructuredNode:
        return self.nodes[node]

    def __contains__(self, node: int) -> bool:
        return node in self.nodes

    def edges(self) -> Iterator[Tuple[int, int, float]]:
        """Iterate ``(src, dst, aggregated_length)`` over all recorded paths."""
        for src in sorted(self.nodes):
            for dst, length in self.nodes[src].paths:
                yield src, dst, length


def _find_paths(graph: NodeGraph, adjacency: Dict[int, List[int]], start: int,
                is_processing: List[bool], visited: Set[int]) -> List[Tuple[int, float]]:
    """
    Depth-first enumeration of connective paths leaving ``start``.

    ``visited`` holds the connective nodes on the current path; every node
    added on descent is removed again on backtrack.
    """
    paths: List[Tuple[int, float]] = []
    # Frame: (node, length accumulated up to and including node, targets iterator)
    stack = [(start, 0.0, iter(adjacency[start]))]

    while stack:
        node, acc, targets = stack[-1]
        nxt = next(targets, None)

        if nxt is None:
            stack.pop()
            if node != start:
                visited.discard(node)
            continue

        if is_processing[nxt]:
            paths.append((nxt, acc))
        elif nxt not in visited:
            visited.add(nxt)
            stack.append((nxt, acc + graph.nodes[nxt].length, iter(adjacency[nxt])))

    return paths


def merge_paths(graph: NodeGraph, threshold: int) -> StructuredGraph:
    """
    Build the structured graph of processing nodes.

    Args:
        graph: Collapsed node graph
        threshold: Minimum type count of a processing node

    Returns:
        StructuredGraph keyed by processing-node index
    """
    is_processing = [node.type_count >= threshold for node in graph.nodes]
    adjacency = graph.adjacency()
    visited: Set[int] = set()

    structured = StructuredGraph()
    for index, node in enumerate(graph.nodes):
        if not is_processing[index]:
            continue
        paths = _find_paths(graph, adjacency, index, is_processing, visited)
        structured.nodes[index] = StructuredNode(
            length=node.length, type_count=node.type_count, paths=paths
        )

    num_paths = sum(len(n.paths) for n in structured.nodes.values())
    logger.info(f"Merged {len(graph.nodes)} nodes into {len(structured)} processing nodes "
                f"with {num_paths} paths (threshold={threshold})")
    return structured


__all__ = ['StructuredNode', 'StructuredGraph', 'merge_paths']

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
