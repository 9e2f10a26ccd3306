#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Gene Regulatory Network — genes linked by where their products bind.

Every gene becomes one node (node id = position in the scanned gene list).
Gene ``src`` regulates gene ``dst`` with weight

    sign_of(product(src)) * count(regulatory_region(dst), product(src))

and the edge exists only when that weight is nonzero. Self-regulation is
kept. Once built, the network is read-only and may be shared by any number
of regulatory states.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from ..errors import ConfigurationError, InvariantViolation
from ..genome.bases import format_bases
from ..genome.expression import count_product, product
from ..genome.genome import Gene

logger = logging.getLogger(__name__)


class RegulationSign(IntEnum):
    """Effect a gene product has where it binds."""
    ENHANCE = 1
    INHIBIT = -1


# ============================================================================
#                           NETWORK STRUCTURE
# ============================================================================

class GeneNetwork:
    """
    Directed, weighted network over a fixed set of gene nodes.

    Each node stores its incoming ``(src, weight)`` pairs, which is the only
    direction the state transition needs.
    """

    def __init__(self, num_nodes: int, labels: Optional[Sequence[str]] = None):
        if num_nodes < 1:
            raise ConfigurationError("A gene network needs at least one node")
        if labels is not None and len(labels) != num_nodes:
            raise InvariantViolation(
                f"Got {len(labels)} labels for {num_nodes} nodes"
            )
        self._num_nodes = num_nodes
        self._incoming: List[List[Tuple[int, int]]] = [[] for _ in range(num_nodes)]
        self.labels: List[str] = list(labels) if labels is not None else [str(i) for i in range(num_nodes)]

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @property
    def num_edges(self) -> int:
        return sum(len(inc) for inc in self._incoming)

    def __len__(self) -> int:
        return self._num_nodes

    def _check_node(self, node: int):
        if not 0 <= node < self._num_nodes:
            raise InvariantViolation(
                f"Node {node} outside network of {self._num_nodes} nodes"
            )

    def add_edge(self, src: int, dst: int, weight: int):
        """Add ``src -> dst``; zero weights are not stored."""
        self._check_node(src)
        self._check_node(dst)
        if weight == 0:
            return
        self._incoming[dst].append((src, weight))

    def incoming(self, node: int) -> List[Tuple[int, int]]:
        """Incoming ``(src, weight)`` pairs of a node."""
        self._check_node(node)
        return list(self._incoming[node])

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        """Iterate ``(src, dst, weight)`` over all edges."""
        for dst, inc in enumerate(self._incoming):
            for src, weight in inc:
                yield src, dst, weight

    def describe(self) -> str:
        """Human-readable listing of nodes and their inputs."""
        lines = [f"GeneNetwork: {self.num_nodes} nodes, {self.num_edges} edges"]
        for dst, inc in enumerate(self._incoming):
            inputs = ', '.join(
                f"{self.labels[src]}({weight:+d})" for src, weight in inc
            ) or '-'
            lines.append(f"  {dst} [{self.labels[dst]}] <- {inputs}")
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"GeneNetwork(nodes={self.num_nodes}, edges={self.num_edges})"


# ============================================================================
#                           CONSTRUCTION
# ============================================================================

def build_network(
    genes: Sequence[Gene],
    sign_of: Callable[[Tuple], RegulationSign],
    name_of: Optional[Callable[[Tuple], str]] = None,
) -> GeneNetwork:
    """
    Build the regulatory network of a list of genes.

    Args:
        genes: Genes in scan order (index = node id)
        sign_of: Maps a gene product to its RegulationSign
        name_of: Optional labeller for coding regions

    Returns:
        GeneNetwork with one node per gene

    Raises:
        ConfigurationError: If ``genes`` is empty
    """
    genes = list(genes)
    if not genes:
        raise ConfigurationError("No genes found")

    labels = None
    if name_of is not None:
        labels = [str(name_of(gene.coding_region)) for gene in genes]

    network = GeneNetwork(len(genes), labels=labels)
    products = [product(gene) for gene in genes]

    for src, src_product in enumerate(products):
        sign = int(sign_of(src_product))
        # Self-regulation (src == dst) is intentional
        for dst, dst_gene in enumerate(genes):
            weight = sign * count_product(dst_gene.regulatory_region, src_product)
            if weight != 0:
                network.add_edge(src, dst, weight)
                logger.debug(f"Gene {src} -> gene {dst}: weight {weight:+d}")

    logger.info(f"Built gene network: {network.num_nodes} nodes, {network.num_edges} edges")
    return network


def last_base_sign(inhibitor) -> Callable[[Tuple], RegulationSign]:
    """
    Sign rule: a product ending in ``inhibitor`` inhibits, all others enhance.

    Args:
        inhibitor: Base whose presence at the end of a product marks an inhibitor
    """
    def sign_of(gene_product: Tuple) -> RegulationSign:
        if gene_product and gene_product[-1] == inhibitor:
            return RegulationSign.INHIBIT
        return RegulationSign.ENHANCE

    return sign_of


def table_namer(names: Dict[str, str], default: str = 'X') -> Callable[[Tuple], str]:
    """
    Label coding regions from a lookup table keyed by their text form.

    Example:
        >>> name_of = table_namer({'0311': 'T', '3213': 'W'})
    """
    def name_of(coding_region: Tuple) -> str:
        return names.get(format_bases(coding_region), default)

    return name_of


def sign_rule_from_config(config: Dict, base_type) -> Callable[[Tuple], RegulationSign]:
    """
    Build the sign rule described by the 'network' section of a configuration.

    Args:
        config: Configuration dictionary
        base_type: Alphabet the inhibitor base is written in

    Raises:
        ConfigurationError: If the inhibitor is not a single base of ``base_type``
    """
    inhibitor = str(config.get('network', {}).get('inhibitor_base', ''))
    inhibitor_base = base_type.from_char(inhibitor) if len(inhibitor) == 1 else None
    if inhibitor_base is None:
        raise ConfigurationError(f"Invalid inhibitor_base: '{inhibitor}'")
    return last_base_sign(inhibitor_base)


def namer_from_config(config: Dict) -> Optional[Callable[[Tuple], str]]:
    """Gene labeller from 'network.gene_names', or None when no names are configured."""
    names = config.get('network', {}).get('gene_names') or {}
    if not names:
        return None
    return table_namer({str(k): str(v) for k, v in names.items()})


__all__ = [
    'RegulationSign',
    'GeneNetwork',
    'build_network',
    'last_base_sign',
    'table_namer',
    'sign_rule_from_config',
    'namer_from_config',
]

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
