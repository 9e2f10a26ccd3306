"""
GenoWeaver v0.1.0

Genome module: alphabets, genome construction, gene scanning and expression.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .bases import (
    Base,
    Base4,
    DNABase,
    ALPHABETS,
    get_alphabet,
    parse_bases,
    format_bases,
)
from .genome import Gene, GeneScanner, Genome
from .expression import product, count_product, contains_product

__all__ = [
    # Alphabets
    "Base",
    "Base4",
    "DNABase",
    "ALPHABETS",
    "get_alphabet",
    "parse_bases",
    "format_bases",
    # Genome and scanning
    "Gene",
    "GeneScanner",
    "Genome",
    # Expression
    "product",
    "count_product",
    "contains_product",
]
