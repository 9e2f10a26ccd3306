#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Regulatory State — which genes of a network are currently active.

A state is a fixed-width bit vector with one bit per network node. The
network advances a state synchronously: a node becomes active iff the summed
weight of its inputs from currently active nodes is strictly positive.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Iterable, List

import numpy as np

from ..errors import InvariantViolation
from .gene_network import GeneNetwork


class RegulatoryState:
    """
    Fixed-size bit vector indexed by network node id.

    Value semantics: equality and hashing are by bits, and every modifying
    helper returns a new state.
    """

    __slots__ = ('_bits',)

    def __init__(self, bits):
        self._bits = np.array(bits, dtype=bool).reshape(-1)
        self._bits.setflags(write=False)

    @classmethod
    def zeros(cls, size: int) -> "RegulatoryState":
        """All-inactive state of ``size`` bits."""
        return cls(np.zeros(size, dtype=bool))

    @classmethod
    def from_active(cls, size: int, active: Iterable[int]) -> "RegulatoryState":
        """State of ``size`` bits with the given node indices active."""
        bits = np.zeros(size, dtype=bool)
        for index in active:
            if not 0 <= index < size:
                raise InvariantViolation(f"Active index {index} outside state of {size} bits")
            bits[index] = True
        return cls(bits)

    def __len__(self) -> int:
        return int(self._bits.shape[0])

    def is_active(self, index: int) -> bool:
        """Bit ``index``; indices past the end are inactive."""
        if 0 <= index < len(self):
            return bool(self._bits[index])
        return False

    def __getitem__(self, index: int) -> bool:
        return bool(self._bits[index])

    def active_nodes(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(self._bits)]

    def with_flipped(self, index: int) -> "RegulatoryState":
        """Copy of this state with one bit inverted."""
        bits = self._bits.copy()
        bits[index] = not bits[index]
        return RegulatoryState(bits)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RegulatoryState):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._bits, other._bits))

    def __hash__(self) -> int:
        return hash((len(self), self._bits.tobytes()))

    def __str__(self) -> str:
        return ''.join('1' if b else '0' for b in self._bits)

    def __repr__(self) -> str:
        return f"RegulatoryState({self})"


# ============================================================================
#                           EVALUATION
# ============================================================================

def _check_size(network: GeneNetwork, state: RegulatoryState):
    if len(state) != network.num_nodes:
        raise InvariantViolation(
            f"State has {len(state)} bits but network has {network.num_nodes} nodes"
        )


def sum_incoming(network: GeneNetwork, node: int, state: RegulatoryState) -> int:
    """Sum the weights of edges into ``node`` whose source is active."""
    _check_size(network, state)
    return sum(weight for src, weight in network.incoming(node) if state[src])


def transition(network: GeneNetwork, state: RegulatoryState) -> RegulatoryState:
    """
    Advance a state by one synchronous step.

    Every new bit is computed from the old state only; a node is active iff
    its incoming sum is strictly positive.
    """
    _check_size(network, state)
    bits = np.zeros(network.num_nodes, dtype=bool)
    for node in range(network.num_nodes):
        bits[node] = sum_incoming(network, node, state) > 0
    return RegulatoryState(bits)


__all__ = ['RegulatoryState', 'sum_incoming', 'transition']

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
