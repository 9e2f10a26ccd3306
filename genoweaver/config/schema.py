"""
GenoWeaver v0.1.0

Configuration schema for GenoWeaver.

Defines all available configuration parameters with defaults and validation.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Genome
    # ========================================================================
    'genome': {
        'alphabet': 'base4',  # 'base4' (0123) or 'dna' (ATGC)
        # Hand-written genome; non-base characters are ignored
        'sequence': "...11 _0320_23 <0101> T:0311 2...3 _1022_ 133 <0101> W:3213 121...",
        'random_length': None,  # Draw a random genome of this length instead
        'seed': None,  # Random seed for reproducibility
    },

    # ========================================================================
    # Gene Scanning
    # ========================================================================
    'scanning': {
        'promoter': '0101',
        'gene_length': 4,
    },

    # ========================================================================
    # Regulatory Network
    # ========================================================================
    'network': {
        'inhibitor_base': '0',  # Products ending in this base inhibit
        'gene_names': {  # Optional labels keyed by coding region
            '0311': 'T',
            '3213': 'W',
        },
    },

    # ========================================================================
    # Development
    # ========================================================================
    'development': {
        'iterations': 5,
        'initial_active': [1],  # Active network nodes of the zygote edge
        'resize_factor': 0.25,
    },

    # ========================================================================
    # Structure Extraction
    # ========================================================================
    'structure': {
        'processing_threshold': 1,  # Minimum type count of a processing node
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'directory': 'genoweaver_output',
        'write_dot': True,

        # Logging
        'logging': {
            'level': 'INFO',  # 'DEBUG', 'INFO', 'WARNING', 'ERROR'
            'log_file': 'genoweaver.log',
        },
    },
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        with open(config_path) as f:
            user_config = yaml.safe_load(f)

        if user_config:
            # Deep merge user config into defaults
            config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def apply_overrides(config: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply command-line overrides to a configuration.

    Args:
        config: Configuration to update in place
        overrides: Values keyed by dotted path (e.g. 'development.iterations');
                   None values are skipped

    Returns:
        The updated configuration
    """
    for key, value in overrides.items():
        if value is None:
            continue

        keys = key.split('.')
        target = config
        for k in keys[:-1]:
            target = target.setdefault(k, {})
        target[keys[-1]] = value

    return config


def save_config_template(output_path: Path, template: str = 'default'):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default', 'dna', 'random')
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Customize for specific templates
    if template == 'dna':
        config['genome']['alphabet'] = 'dna'
        config['genome']['sequence'] = "GGA TATA CGTC AAT TATA GCAT TC"
        config['scanning']['promoter'] = 'TATA'
        config['network']['inhibitor_base'] = 'A'
        config['network']['gene_names'] = {}

    elif template == 'random':
        config['genome']['sequence'] = None
        config['genome']['random_length'] = 5000
        config['genome']['seed'] = 42
        config['network']['gene_names'] = {}
        config['development']['iterations'] = 6
        config['development']['initial_active'] = [1, 6]

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    # Imported here: the genome package does not depend on configuration
    from ..genome.bases import ALPHABETS

    errors = []

    # Genome source
    genome = config.get('genome', {})
    alphabet = str(genome.get('alphabet', '')).lower()
    if alphabet not in ALPHABETS:
        errors.append(f"Invalid alphabet: {genome.get('alphabet')}")

    random_length = genome.get('random_length')
    if random_length is None and not genome.get('sequence'):
        errors.append("Either genome.sequence or genome.random_length must be set")
    if random_length is not None and (not isinstance(random_length, int) or random_length < 1):
        errors.append(f"Invalid random_length: {random_length} (must be a positive integer)")

    # Scanning
    scanning = config.get('scanning', {})
    promoter = scanning.get('promoter')
    if not promoter:
        errors.append("Promoter must not be empty")
    elif alphabet in ALPHABETS:
        base_type = ALPHABETS[alphabet]
        if any(base_type.from_char(c) is None for c in str(promoter)):
            errors.append(f"Promoter '{promoter}' contains characters outside the {alphabet} alphabet")

    gene_length = scanning.get('gene_length')
    if not isinstance(gene_length, int) or gene_length < 1:
        errors.append(f"Invalid gene_length: {gene_length} (must be a positive integer)")

    inhibitor = config.get('network', {}).get('inhibitor_base')
    if alphabet in ALPHABETS and ALPHABETS[alphabet].from_char(str(inhibitor)) is None:
        errors.append(f"Invalid inhibitor_base: {inhibitor}")

    # Development
    development = config.get('development', {})
    iterations = development.get('iterations')
    if not isinstance(iterations, int) or iterations < 0:
        errors.append(f"Invalid iterations: {iterations} (must be >= 0)")

    initial_active = development.get('initial_active', [])
    if not isinstance(initial_active, list) or any(
            not isinstance(i, int) or i < 0 for i in initial_active):
        errors.append(f"Invalid initial_active: {initial_active} (must be a list of node indices)")

    resize_factor = development.get('resize_factor')
    if not isinstance(resize_factor, (int, float)) or not 0 <= resize_factor < 1:
        errors.append(f"Invalid resize_factor: {resize_factor} (must be in [0, 1))")

    threshold = config.get('structure', {}).get('processing_threshold')
    if not isinstance(threshold, int) or threshold < 0:
        errors.append(f"Invalid processing_threshold: {threshold} (must be >= 0)")

    level = config.get('output', {}).get('logging', {}).get('level', 'INFO')
    if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR'):
        errors.append(f"Invalid logging level: {level}")

    return errors
