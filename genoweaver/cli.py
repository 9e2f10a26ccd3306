#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for GenoWeaver.

This module provides the main CLI entry point and all subcommands for
scanning artificial genomes, building their regulatory networks and running
graph development.
"""

import logging
import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.schema import (
    DEFAULT_CONFIG,
    apply_overrides,
    load_config,
    save_config_template,
    validate_config,
)
from .genome.bases import ALPHABETS, format_bases, get_alphabet, parse_bases
from .genome.expression import product
from .genome.genome import Genome
from .io_utils.dot_export import network_to_dot, write_dot
from .network.gene_network import build_network, namer_from_config, sign_rule_from_config


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    GenoWeaver: Artificial Genome Development Simulator

    Decodes a symbolic genome into a gene regulatory network and grows a
    directed graph from it by iterative, network-driven edge rewriting.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet

    if verbose:
        logging.getLogger('genoweaver').setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger('genoweaver').setLevel(logging.ERROR)


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='genoweaver_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t',
              type=click.Choice(['default', 'dna', 'random']),
              default='default', help='Configuration template type')
def config_init(output, template):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating {template} configuration template: {output}")

    try:
        save_config_template(Path(output), template=template)
        click.echo(f"✓ Configuration file created: {output}")
        click.echo("\nThe configuration file includes:")
        click.echo("  • Genome source (hand-written or random) and alphabet")
        click.echo("  • Promoter and gene length for scanning")
        click.echo("  • Regulation sign rule and gene labels")
        click.echo("  • Development iterations and zygote state")
        click.echo("  • Processing-node threshold and output settings")
    except Exception as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
        errors = validate_config(config)

        if errors:
            click.echo("\n✗ Configuration validation failed:")
            for error in errors:
                click.echo(f"  • {error}", err=True)
            sys.exit(1)
        else:
            click.echo("✓ Configuration is valid")
    except Exception as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        config = load_config(Path(config_file))

        if format == 'yaml':
            click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        else:
            click.echo(f"Configuration from: {config_file}")
            click.echo("=" * 60)

            genome = config['genome']
            click.echo("\nGenome:")
            click.echo(f"  Alphabet: {genome['alphabet']}")
            if genome.get('random_length') is not None:
                click.echo(f"  Random: {genome['random_length']} bases (seed={genome.get('seed')})")
            else:
                click.echo(f"  Sequence: {genome['sequence']}")

            click.echo("\nScanning:")
            click.echo(f"  Promoter: {config['scanning']['promoter']}")
            click.echo(f"  Gene length: {config['scanning']['gene_length']}")

            click.echo("\nDevelopment:")
            click.echo(f"  Iterations: {config['development']['iterations']}")
            click.echo(f"  Initial active genes: {config['development']['initial_active']}")
            click.echo(f"  Resize factor: {config['development']['resize_factor']}")

            click.echo("\nStructure:")
            click.echo(f"  Processing threshold: {config['structure']['processing_threshold']}")

    except Exception as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)


# ============================================================================
# Genome Commands
# ============================================================================

def _genome_options(func):
    """Shared options selecting a genome and how it is scanned."""
    func = click.option('--genome', '-g', 'genome_text',
                        help='Genome text (characters outside the alphabet are ignored)')(func)
    func = click.option('--genome-file', type=click.Path(exists=True),
                        help='File containing the genome text')(func)
    func = click.option('--alphabet', '-a', type=click.Choice(sorted(ALPHABETS)),
                        default='base4', help='Genome alphabet')(func)
    func = click.option('--promoter', '-p', default=DEFAULT_CONFIG['scanning']['promoter'],
                        help='Promoter pattern')(func)
    func = click.option('--gene-length', '-l', type=int,
                        default=DEFAULT_CONFIG['scanning']['gene_length'],
                        help='Coding region length')(func)
    return func


def _read_genome(genome_text, genome_file, alphabet):
    if genome_file:
        genome_text = Path(genome_file).read_text()
    if not genome_text:
        raise click.UsageError("Provide --genome or --genome-file")
    return Genome.from_str(genome_text, get_alphabet(alphabet))


def _parse_promoter(promoter, base_type, alphabet):
    foreign = sorted({c for c in promoter if base_type.from_char(c) is None})
    if foreign:
        raise click.BadParameter(
            f"promoter '{promoter}' contains non-{alphabet} characters: {''.join(foreign)}",
            param_hint='--promoter',
        )
    return parse_bases(promoter, base_type)


@main.command()
@_genome_options
def scan(genome_text, genome_file, alphabet, promoter, gene_length):
    """List the genes of a genome."""
    genome = _read_genome(genome_text, genome_file, alphabet)
    try:
        base_type = get_alphabet(alphabet)
        genes = list(genome.iter_genes(_parse_promoter(promoter, base_type, alphabet), gene_length))
    except Exception as e:
        click.echo(f"✗ Error scanning genome: {e}", err=True)
        sys.exit(1)

    click.echo(f"Genome: {len(genome)} bases, {len(genes)} genes")
    for i, gene in enumerate(genes):
        click.echo(f"  [{i}] regulatory={format_bases(gene.regulatory_region) or '-'} "
                   f"coding={format_bases(gene.coding_region)} "
                   f"product={format_bases(product(gene))}")


@main.command()
@_genome_options
@click.option('--inhibitor', default=DEFAULT_CONFIG['network']['inhibitor_base'],
              help='Products ending in this base inhibit; all others enhance')
@click.option('--name', '-N', 'names', multiple=True, metavar='CODING=LABEL',
              help='Label genes by coding region (base4 defaults: 0311=T, 3213=W)')
@click.option('--dot', 'dot_path', type=click.Path(), help='Write the network as DOT')
def network(genome_text, genome_file, alphabet, promoter, gene_length, inhibitor, names,
            dot_path):
    """Build and print the gene regulatory network of a genome."""
    genome = _read_genome(genome_text, genome_file, alphabet)

    gene_names = {}
    for entry in names:
        coding, sep, label = entry.partition('=')
        if not sep or not coding or not label:
            raise click.BadParameter(f"expected CODING=LABEL, got '{entry}'", param_hint='--name')
        gene_names[coding] = label
    if not names and alphabet == DEFAULT_CONFIG['genome']['alphabet']:
        gene_names = dict(DEFAULT_CONFIG['network']['gene_names'])
    network_config = {'network': {'inhibitor_base': inhibitor, 'gene_names': gene_names}}

    try:
        base_type = get_alphabet(alphabet)
        genes = list(genome.iter_genes(_parse_promoter(promoter, base_type, alphabet), gene_length))
        gene_network = build_network(genes, sign_rule_from_config(network_config, base_type),
                                     name_of=namer_from_config(network_config))
    except Exception as e:
        click.echo(f"✗ Error building network: {e}", err=True)
        sys.exit(1)

    click.echo(gene_network.describe())
    if dot_path:
        write_dot(network_to_dot(gene_network), dot_path)
        click.echo(f"✓ Network written to {dot_path}")


# ============================================================================
# Development Commands
# ============================================================================

@main.command()
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Configuration file (YAML)')
@click.option('--genome', '-g', 'genome_text', help='Genome text (overrides config)')
@click.option('--alphabet', '-a', type=click.Choice(sorted(ALPHABETS)),
              help='Genome alphabet')
@click.option('--random-length', type=int, help='Develop a random genome of this length')
@click.option('--seed', type=int, help='Random seed')
@click.option('--iterations', '-n', type=int, help='Number of development generations')
@click.option('--threshold', type=int, help='Processing-node type-count threshold')
@click.option('--output', '-o', type=click.Path(), help='Output directory')
@click.option('--no-dot', is_flag=True, help='Do not write DOT files')
def develop(config_file, genome_text, alphabet, random_length, seed, iterations,
            threshold, output, no_dot):
    """Run the full pipeline: scan, network, development, structure."""
    from .utils.pipeline import DevelopmentPipeline

    try:
        config = load_config(Path(config_file) if config_file else None)
        apply_overrides(config, {
            'genome.sequence': genome_text,
            'genome.alphabet': alphabet,
            'genome.random_length': random_length,
            'genome.seed': seed,
            'development.iterations': iterations,
            'structure.processing_threshold': threshold,
            'output.directory': output,
        })
        if genome_text:
            config['genome']['random_length'] = None
        if no_dot:
            config['output']['write_dot'] = False

        result = DevelopmentPipeline(config).run()
    except Exception as e:
        click.echo(f"✗ Development failed: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Development complete")
    for key, value in result.summary().items():
        click.echo(f"  {key}: {value}")
    for name, path in result.output_files.items():
        click.echo(f"  {name}: {path}")


if __name__ == '__main__':
    main()
