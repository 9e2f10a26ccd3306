#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Edge Automaton — one developmental step of one edge of the growing graph.

Every edge carries its own regulatory state. A step first advances that
state through the gene network, then reads the reserved development genes
of the new state and rewrites the edge accordingly:

    bit 0  DIFFERENTIATE  lineage flag, inverted in every child edge
    bit 1  SPLIT          insert a fresh node in the middle of the edge
    bit 2  DUPLICATE      add a reversed copy of the edge
    bit 3  SWAP           reverse the edge in place
    bit 4  GROW           length += RESIZE_FACTOR * length
    bit 5  SHRINK         length -= RESIZE_FACTOR * length
    bit 6  TYPE           type_count += 1

Rules fire independently in that order. Child edges are returned to the
caller rather than appended, so they never develop in the step that
created them.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, Tuple

from ..network.gene_network import GeneNetwork
from ..network.regulatory_state import RegulatoryState, transition

logger = logging.getLogger(__name__)

RESIZE_FACTOR = 0.25


class DevelopmentGene(IntEnum):
    """Network nodes with a fixed developmental meaning."""
    DIFFERENTIATE = 0
    SPLIT = 1
    DUPLICATE = 2
    SWAP = 3
    GROW = 4
    SHRINK = 5
    TYPE = 6


@dataclass
class Edge:
    """
    Edge of the graph under development.

    Attributes:
        src_node: Source node id
        dst_node: Target node id
        length: Positive edge length
        type_count: Number of steps the TYPE gene was active
        state: Regulatory state of this edge
    """
    src_node: int
    dst_node: int
    length: float
    type_count: int
    state: RegulatoryState

    @property
    def endpoints(self) -> Tuple[int, int]:
        return self.src_node, self.dst_node

    def child(self, src_node: int, dst_node: int, length: float) -> "Edge":
        """New edge inheriting this edge's type count, with the lineage flag inverted."""
        return Edge(
            src_node=src_node,
            dst_node=dst_node,
            length=length,
            type_count=self.type_count,
            state=self.state.with_flipped(DevelopmentGene.DIFFERENTIATE),
        )


class EdgeAutomaton:
    """
    Applies the development rules to edges against a shared gene network.

    Args:
        network: Gene network driving every edge state
        resize_factor: Fraction an edge grows/shrinks by per active step
    """

    def __init__(self, network: GeneNetwork, resize_factor: float = RESIZE_FACTOR):
        self.network = network
        self.resize_factor = resize_factor

    def step(self, edge: Edge, allocate_node_id: Callable[[], int]) -> List[Edge]:
        """
        Advance ``edge`` by one generation, in place.

        Args:
            edge: Edge to develop
            allocate_node_id: Returns a fresh, never-used node id

        Returns:
            Edges created by this step (not yet part of any graph)
        """
        edge.state = transition(self.network, edge.state)
        state = edge.state
        new_edges: List[Edge] = []

        if state.is_active(DevelopmentGene.SPLIT):
            middle = allocate_node_id()
            half = edge.length / 2.0
            new_edges.append(edge.child(middle, edge.dst_node, half))
            edge.dst_node = middle
            edge.length = half

        if state.is_active(DevelopmentGene.DUPLICATE):
            new_edges.append(edge.child(edge.dst_node, edge.src_node, edge.length))

        if state.is_active(DevelopmentGene.SWAP):
            edge.src_node, edge.dst_node = edge.dst_node, edge.src_node

        if state.is_active(DevelopmentGene.GROW):
            edge.length += self.resize_factor * edge.length

        if state.is_active(DevelopmentGene.SHRINK):
            edge.length -= self.resize_factor * edge.length

        if state.is_active(DevelopmentGene.TYPE):
            edge.type_count += 1

        if new_edges:
            logger.debug(f"Edge {edge.src_node}->{edge.dst_node} produced {len(new_edges)} edges")
        return new_edges


__all__ = ['RESIZE_FACTOR', 'DevelopmentGene', 'Edge', 'EdgeAutomaton']

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
