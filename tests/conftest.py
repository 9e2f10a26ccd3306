#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Pytest configuration and shared fixtures.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from genoweaver.genome import Base4, Genome
from genoweaver.network import GeneNetwork

DEMO_GENOME = "...11 _0320_23 <0101> T:0311 2...3 _1022_ 133 <0101> W:3213 121..."


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="genoweaver_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def promoter():
    """Base4 promoter 0101."""
    return (Base4.B0, Base4.B1, Base4.B0, Base4.B1)


@pytest.fixture
def demo_genome():
    """Two-gene Base4 genome whose genes regulate each other."""
    return Genome.from_str(DEMO_GENOME, Base4)


@pytest.fixture
def make_network():
    """
    Factory for hand-built networks.

    ``make_network(7, (1, 1, 1))`` builds seven nodes with a +1 self-loop on
    node 1, which keeps node 1 active forever once it is active.
    """
    def _make(num_nodes, *edges):
        network = GeneNetwork(num_nodes)
        for src, dst, weight in edges:
            network.add_edge(src, dst, weight)
        return network

    return _make

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
