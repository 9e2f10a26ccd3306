#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Tests for CLI command interface.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import os

import pytest
from click.testing import CliRunner
from genoweaver.cli import main

DEMO_GENOME = "...11 _0320_23 <0101> T:0311 2...3 _1022_ 133 <0101> W:3213 121..."


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self):
        """Test that --help runs without error."""
        runner = CliRunner()
        result = runner.invoke(main, ['--help'])

        assert result.exit_code == 0
        assert 'GenoWeaver' in result.output

    def test_cli_version(self):
        """Test that --version displays version."""
        runner = CliRunner()
        result = runner.invoke(main, ['--version'])

        assert result.exit_code == 0
        assert '0.1' in result.output

    def test_invalid_command(self):
        """Test that invalid commands are handled gracefully."""
        runner = CliRunner()
        result = runner.invoke(main, ['nonexistent_command'])

        assert result.exit_code != 0


class TestConfigCommands:
    """Test config init/validate/show."""

    def test_config_init_command(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            result = runner.invoke(main, ['config', 'init', '--output', 'test_config.yaml'])

            assert result.exit_code == 0
            assert os.path.exists('test_config.yaml')

    @pytest.mark.parametrize("template", ['default', 'dna', 'random'])
    def test_config_init_then_validate(self, template):
        runner = CliRunner()

        with runner.isolated_filesystem():
            runner.invoke(main, ['config', 'init', '-o', 'c.yaml', '-t', template])
            result = runner.invoke(main, ['config', 'validate', 'c.yaml'])

            assert result.exit_code == 0
            assert 'Configuration is valid' in result.output

    def test_config_validate_invalid(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            with open('bad.yaml', 'w') as f:
                f.write("scanning:\n  gene_length: 0\n")
            result = runner.invoke(main, ['config', 'validate', 'bad.yaml'])

            assert result.exit_code != 0

    def test_config_show(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            runner.invoke(main, ['config', 'init', '-o', 'c.yaml'])
            result = runner.invoke(main, ['config', 'show', 'c.yaml'])

            assert result.exit_code == 0
            assert 'Promoter: 0101' in result.output

    def test_config_show_yaml(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            runner.invoke(main, ['config', 'init', '-o', 'c.yaml'])
            result = runner.invoke(main, ['config', 'show', 'c.yaml', '-f', 'yaml'])

            assert result.exit_code == 0
            assert 'scanning:' in result.output


class TestScanCommand:
    """Tests for the scan command."""

    def test_scan_single_gene(self):
        runner = CliRunner()
        result = runner.invoke(main, ['scan', '--genome', '0101 1111'])

        assert result.exit_code == 0
        assert 'Genome: 8 bases, 1 genes' in result.output
        assert 'coding=1111' in result.output
        assert 'product=2222' in result.output

    def test_scan_genome_file(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            with open('genome.txt', 'w') as f:
                f.write(DEMO_GENOME)
            result = runner.invoke(main, ['scan', '--genome-file', 'genome.txt'])

            assert result.exit_code == 0
            assert '2 genes' in result.output

    def test_scan_dna(self):
        runner = CliRunner()
        result = runner.invoke(main, ['scan', '-a', 'dna', '-g', 'GGA TATA CGTC', '-p', 'TATA'])

        assert result.exit_code == 0
        assert 'regulatory=GGA coding=CGTC product=ACGA' in result.output

    def test_scan_missing_genome(self):
        runner = CliRunner()
        result = runner.invoke(main, ['scan'])

        assert result.exit_code != 0

    def test_scan_empty_promoter(self):
        runner = CliRunner()
        result = runner.invoke(main, ['scan', '-g', '0101 1111', '-p', 'xx'])

        assert result.exit_code == 1

    def test_scan_promoter_outside_alphabet(self):
        runner = CliRunner()
        result = runner.invoke(main, ['scan', '-g', '011 2222', '-p', '01X1', '-l', '4'])

        assert result.exit_code == 1
        assert 'X' in result.output
        assert 'genes' not in result.output


class TestNetworkCommand:
    """Tests for the network command."""

    def test_network_demo(self):
        runner = CliRunner()
        result = runner.invoke(main, ['network', '-g', DEMO_GENOME])

        assert result.exit_code == 0
        assert 'GeneNetwork: 2 nodes, 2 edges' in result.output

    def test_network_dot(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            result = runner.invoke(main, ['network', '-g', DEMO_GENOME, '--dot', 'net.dot'])

            assert result.exit_code == 0
            assert os.path.exists('net.dot')

    def test_network_no_genes(self):
        runner = CliRunner()
        result = runner.invoke(main, ['network', '-g', '2222'])

        assert result.exit_code == 1

    def test_network_bad_inhibitor(self):
        runner = CliRunner()
        result = runner.invoke(main, ['network', '-g', DEMO_GENOME, '--inhibitor', 'Q'])

        assert result.exit_code == 1

    def test_network_default_labels(self):
        runner = CliRunner()
        result = runner.invoke(main, ['network', '-g', DEMO_GENOME])

        assert result.exit_code == 0
        assert '0 [T] <- W(-1)' in result.output
        assert '1 [W] <- T(+1)' in result.output

    def test_network_named_genes(self):
        runner = CliRunner()
        result = runner.invoke(main, ['network', '-g', DEMO_GENOME, '-N', '0311=Tx'])

        assert result.exit_code == 0
        assert '0 [Tx] <- X(-1)' in result.output

    def test_network_bad_name(self):
        runner = CliRunner()
        result = runner.invoke(main, ['network', '-g', DEMO_GENOME, '-N', '0311'])

        assert result.exit_code == 2

    def test_network_promoter_outside_alphabet(self):
        runner = CliRunner()
        result = runner.invoke(main, ['network', '-g', DEMO_GENOME, '-p', '01Z1'])

        assert result.exit_code == 1


class TestDevelopCommand:
    """Tests for the develop command."""

    def test_develop_default(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            result = runner.invoke(main, ['develop', '--output', 'out', '-n', '2'])

            assert result.exit_code == 0
            assert 'Development complete' in result.output
            assert 'num_genes: 2' in result.output
            assert os.path.exists(os.path.join('out', 'structure.dot'))

    def test_develop_no_dot(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            result = runner.invoke(main, ['develop', '--output', 'out', '--no-dot'])

            assert result.exit_code == 0
            assert not os.path.exists(os.path.join('out', 'edges.dot'))

    def test_develop_with_config(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            runner.invoke(main, ['config', 'init', '-o', 'c.yaml', '-t', 'dna'])
            result = runner.invoke(main, ['develop', '-c', 'c.yaml', '-o', 'out', '-n', '1'])

            assert result.exit_code == 0
            assert 'num_genes: 2' in result.output

    def test_develop_invalid_random_length(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            result = runner.invoke(main, ['develop', '--output', 'out', '--random-length', '0'])

            assert result.exit_code == 1
            assert 'random_length' in result.output

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
