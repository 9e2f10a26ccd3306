#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Graph Builder — grows a directed graph from a single zygote edge.

The builder owns an append-only edge list and a monotonic node-id counter.
Each generation develops every existing edge once and only then appends the
edges created during that generation.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from typing import Any, Dict, List

from ..errors import InvariantViolation
from ..network.gene_network import GeneNetwork
from ..network.regulatory_state import RegulatoryState
from .edge_automaton import RESIZE_FACTOR, Edge, EdgeAutomaton

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Drives the edge automaton over a growing edge list.

    Usage:
        builder = GraphBuilder(network, RegulatoryState.from_active(n, [1]))
        builder.develop(iterations=5)
        edges = builder.edges
    """

    def __init__(self, network: GeneNetwork, initial_state: RegulatoryState,
                 resize_factor: float = RESIZE_FACTOR):
        """
        Initialize with the zygote edge 0 -> 1.

        Args:
            network: Shared gene network
            initial_state: Regulatory state of the zygote edge
            resize_factor: Grow/shrink fraction passed to the automaton
        """
        if len(initial_state) != network.num_nodes:
            raise InvariantViolation(
                f"Initial state has {len(initial_state)} bits but network has "
                f"{network.num_nodes} nodes"
            )
        self.network = network
        self.automaton = EdgeAutomaton(network, resize_factor=resize_factor)
        self.edges: List[Edge] = [
            Edge(src_node=0, dst_node=1, length=1.0, type_count=0, state=initial_state)
        ]
        self.next_node_id = 2
        self.generation = 0

    def allocate_node_id(self) -> int:
        node_id = self.next_node_id
        self.next_node_id += 1
        return node_id

    def advance(self) -> int:
        """
        Run one generation over all current edges.

        Returns:
            Number of edges added
        """
        new_edges: List[Edge] = []
        for edge in self.edges:
            new_edges.extend(self.automaton.step(edge, self.allocate_node_id))

        self.edges.extend(new_edges)
        self.generation += 1
        logger.debug(f"Generation {self.generation}: +{len(new_edges)} edges, "
                     f"{len(self.edges)} total")
        return len(new_edges)

    def develop(self, iterations: int) -> List[Edge]:
        """Run ``iterations`` generations and return the edge list."""
        for _ in range(iterations):
            self.advance()
        logger.info(f"Development finished after {self.generation} generations: "
                    f"{len(self.edges)} edges, {self.next_node_id} node ids")
        return self.edges

    def stats(self) -> Dict[str, Any]:
        return {
            'generation': self.generation,
            'num_edges': len(self.edges),
            'next_node_id': self.next_node_id,
            'total_length': sum(e.length for e in self.edges),
            'total_type_count': sum(e.type_count for e in self.edges),
        }


__all__ = ['GraphBuilder']

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
