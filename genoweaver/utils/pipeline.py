#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Development Pipeline — runs a configured simulation end to end:

    genome -> genes -> regulatory network -> graph development
           -> collapse -> structured graph -> DOT export

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config.schema import validate_config
from ..development.edge_automaton import Edge
from ..development.graph_builder import GraphBuilder
from ..errors import ConfigurationError
from ..genome.bases import get_alphabet, parse_bases
from ..genome.genome import Gene, Genome
from ..io_utils.dot_export import (
    edges_to_dot,
    network_to_dot,
    node_graph_to_dot,
    structured_graph_to_dot,
    write_dot,
)
from ..network.gene_network import (
    GeneNetwork,
    build_network,
    namer_from_config,
    sign_rule_from_config,
)
from ..network.regulatory_state import RegulatoryState
from ..structure.collapse import NodeGraph, collapse_edges
from ..structure.path_merger import StructuredGraph, merge_paths


@dataclass
class DevelopmentResult:
    """Everything one pipeline run produced."""
    genome: Genome
    genes: List[Gene]
    network: GeneNetwork
    edges: List[Edge]
    node_graph: NodeGraph
    structured_graph: StructuredGraph
    builder_stats: Dict[str, Any] = field(default_factory=dict)
    output_files: Dict[str, Path] = field(default_factory=dict)

    def summary(self) -> Dict[str, Any]:
        return {
            'genome_length': len(self.genome),
            'num_genes': len(self.genes),
            'network_nodes': self.network.num_nodes,
            'network_edges': self.network.num_edges,
            'generations': self.builder_stats.get('generation', 0),
            'developed_edges': len(self.edges),
            'collapsed_nodes': len(self.node_graph.nodes),
            'collapsed_connections': len(self.node_graph.edges),
            'processing_nodes': len(self.structured_graph),
            'structured_paths': sum(1 for _ in self.structured_graph.edges()),
        }


class DevelopmentPipeline:
    """
    Orchestrates a single simulation run from a configuration dictionary.

    Usage:
        config = load_config(Path("genoweaver.yaml"))
        result = DevelopmentPipeline(config).run()
        print(result.summary())
    """

    def __init__(self, config: Dict[str, Any], configure_logging: bool = True):
        """
        Initialize pipeline.

        Args:
            config: Configuration dictionary (see config.schema.DEFAULT_CONFIG)
            configure_logging: Set up root logging to console and log file
        """
        errors = validate_config(config)
        if errors:
            raise ConfigurationError("Invalid configuration: " + "; ".join(errors))

        self.config = config
        self.output_dir = Path(config['output']['directory'])
        self.base_type = get_alphabet(config['genome']['alphabet'])

        # basicConfig is a no-op once the root logger has handlers
        if configure_logging and not logging.getLogger().handlers:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            log_level = getattr(logging, config['output']['logging']['level'])
            logging.basicConfig(
                level=log_level,
                format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                handlers=[
                    logging.FileHandler(self.output_dir / config['output']['logging']['log_file']),
                    logging.StreamHandler()
                ]
            )
        self.logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def build_genome(self) -> Genome:
        genome_cfg = self.config['genome']
        if genome_cfg.get('random_length') is not None:
            genome = Genome.random(genome_cfg['random_length'], self.base_type,
                                   seed=genome_cfg.get('seed'))
            self.logger.info(f"Generated random genome of {len(genome)} bases")
        else:
            genome = Genome.from_str(genome_cfg['sequence'], self.base_type)
            self.logger.info(f"Parsed genome of {len(genome)} bases")
        return genome

    def scan_genes(self, genome: Genome) -> List[Gene]:
        scanning = self.config['scanning']
        promoter = parse_bases(str(scanning['promoter']), self.base_type)
        genes = list(genome.iter_genes(promoter, scanning['gene_length']))
        self.logger.info(f"Found {len(genes)} genes")
        return genes

    def build_network(self, genes: List[Gene]) -> GeneNetwork:
        return build_network(genes, sign_rule_from_config(self.config, self.base_type),
                             name_of=namer_from_config(self.config))

    def initial_state(self, network: GeneNetwork) -> RegulatoryState:
        active = self.config['development']['initial_active']
        out_of_range = [i for i in active if i >= network.num_nodes]
        if out_of_range:
            raise ConfigurationError(
                f"initial_active {out_of_range} outside network of {network.num_nodes} nodes"
            )
        return RegulatoryState.from_active(network.num_nodes, active)

    def export(self, result: DevelopmentResult) -> Dict[str, Path]:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        renders = {
            'network': network_to_dot(result.network),
            'edges': edges_to_dot(result.edges),
            'nodes': node_graph_to_dot(result.node_graph),
            'structure': structured_graph_to_dot(result.structured_graph),
        }
        return {
            name: write_dot(text, self.output_dir / f"{name}.dot")
            for name, text in renders.items()
        }

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def run(self, write_output: Optional[bool] = None) -> DevelopmentResult:
        """
        Run every stage.

        Args:
            write_output: Override ``output.write_dot``

        Returns:
            DevelopmentResult
        """
        development = self.config['development']

        genome = self.build_genome()
        genes = self.scan_genes(genome)
        network = self.build_network(genes)

        builder = GraphBuilder(network, self.initial_state(network),
                               resize_factor=development['resize_factor'])
        edges = builder.develop(development['iterations'])

        node_graph = collapse_edges(edges)
        structured = merge_paths(node_graph, self.config['structure']['processing_threshold'])

        result = DevelopmentResult(
            genome=genome,
            genes=genes,
            network=network,
            edges=edges,
            node_graph=node_graph,
            structured_graph=structured,
            builder_stats=builder.stats(),
        )

        if write_output is None:
            write_output = self.config['output']['write_dot']
        if write_output:
            result.output_files = self.export(result)

        self.logger.info(f"Pipeline complete: {result.summary()}")
        return result


__all__ = ['DevelopmentPipeline', 'DevelopmentResult']

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
