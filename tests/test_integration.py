"""
Integration test - small end-to-end development runs.

These tests run the complete pipeline on tiny genomes to verify every stage
is wired together.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
import logging

import pytest

from genoweaver.config import DEFAULT_CONFIG
from genoweaver.errors import ConfigurationError
from genoweaver.utils.pipeline import DevelopmentPipeline


# Genes 0..6 each carry product 1111 (coding 0000). The regulatory region of
# every gene contains 1111 once, so all products enhance all genes: once any
# gene is active, every gene stays active.
SELF_SUSTAINING_GENOME = " ".join(["1111 0101 0000"] * 7)


def make_config(output_dir, **sections):
    config = copy.deepcopy(DEFAULT_CONFIG)
    config['output']['directory'] = str(output_dir)
    for section, values in sections.items():
        config[section].update(values)
    return config


class TestEndToEnd:
    """End-to-end pipeline runs."""

    def test_demo_genome(self, temp_output_dir):
        """The default two-gene genome scans, builds and develops."""
        config = make_config(temp_output_dir)

        result = DevelopmentPipeline(config, configure_logging=False).run()

        summary = result.summary()
        assert summary['num_genes'] == 2
        assert summary['network_edges'] == 2
        assert result.network.labels == ['T', 'W']
        assert summary['generations'] == 5

    def test_dot_files_written(self, temp_output_dir):
        config = make_config(temp_output_dir)

        result = DevelopmentPipeline(config, configure_logging=False).run()

        assert set(result.output_files) == {'network', 'edges', 'nodes', 'structure'}
        for path in result.output_files.values():
            assert path.exists()
            assert path.read_text().startswith("digraph {")

    def test_no_dot_output(self, temp_output_dir):
        config = make_config(temp_output_dir)

        result = DevelopmentPipeline(config, configure_logging=False).run(write_output=False)

        assert result.output_files == {}

    def test_self_sustaining_development(self, temp_output_dir):
        """Every development gene fires each generation."""
        config = make_config(
            temp_output_dir,
            genome={'sequence': SELF_SUSTAINING_GENOME},
            network={'gene_names': {}},
            development={'iterations': 2, 'initial_active': [0], 'resize_factor': 0.25},
        )

        result = DevelopmentPipeline(config, configure_logging=False).run(write_output=False)

        assert len(result.genes) == 7
        assert result.network.num_edges == 49
        # Split and duplicate both fire: every edge yields two children per generation
        assert len(result.edges) == 9
        assert result.edges[0].type_count == 2
        processing = {i for i, n in enumerate(result.node_graph.nodes) if n.type_count >= 1}
        assert set(result.structured_graph.nodes) == processing

    def test_random_genome_is_reproducible(self, temp_output_dir):
        config = make_config(
            temp_output_dir,
            genome={'random_length': 400, 'seed': 11},
            scanning={'promoter': '01', 'gene_length': 3},
            network={'gene_names': {}},
            development={'iterations': 3, 'initial_active': [1]},
        )

        first = DevelopmentPipeline(copy.deepcopy(config), configure_logging=False).run(write_output=False)
        second = DevelopmentPipeline(copy.deepcopy(config), configure_logging=False).run(write_output=False)

        assert first.summary() == second.summary()
        assert first.genome == second.genome

    def test_invalid_config_rejected(self, temp_output_dir):
        config = make_config(temp_output_dir, scanning={'gene_length': 0})

        with pytest.raises(ConfigurationError):
            DevelopmentPipeline(config, configure_logging=False)

    def test_initial_state_outside_network(self, temp_output_dir):
        config = make_config(temp_output_dir, development={'initial_active': [5]})

        with pytest.raises(ConfigurationError):
            DevelopmentPipeline(config, configure_logging=False).run()

    def test_genome_without_genes(self, temp_output_dir):
        config = make_config(temp_output_dir, genome={'sequence': "2222 3333"})

        with pytest.raises(ConfigurationError, match="No genes found"):
            DevelopmentPipeline(config, configure_logging=False).run()

    def test_existing_logging_is_left_alone(self, temp_output_dir):
        """A second pipeline in the same process adds no log handlers."""
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            before = list(root.handlers)
            DevelopmentPipeline(make_config(temp_output_dir), configure_logging=True)
            assert root.handlers == before
        finally:
            root.removeHandler(handler)

        assert not (temp_output_dir / DEFAULT_CONFIG['output']['logging']['log_file']).exists()
