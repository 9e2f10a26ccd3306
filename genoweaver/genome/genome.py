#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Genome — an immutable base sequence, and the scanner that splits it into
genes at promoter sites.

A gene is the pair (regulatory region, coding region): the regulatory region
is everything between the end of the previous gene and the next promoter,
the coding region is the fixed-length window right after that promoter.
Promoter sites are consumed, so the same bases never anchor two genes.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Type

from ..errors import ConfigurationError
from ..utils.sequence_utils import locate_pattern
from .bases import format_bases, parse_bases

logger = logging.getLogger(__name__)


# ============================================================================
#                           GENE RECORD
# ============================================================================

@dataclass(frozen=True)
class Gene:
    """
    A gene extracted from a genome.

    Attributes:
        regulatory_region: Bases between the previous gene and the promoter
        coding_region: ``length_of_gene`` bases after the promoter
        regulatory_start: Genome index where the regulatory region begins
        promoter_start: Genome index of the promoter match
        coding_start: Genome index where the coding region begins
        coding_end: Genome index one past the coding region
    """
    regulatory_region: Tuple
    coding_region: Tuple
    regulatory_start: int = 0
    promoter_start: int = 0
    coding_start: int = 0
    coding_end: int = 0

    def __str__(self) -> str:
        return (f"Gene(regulatory={format_bases(self.regulatory_region) or '-'}, "
                f"coding={format_bases(self.coding_region)})")


# ============================================================================
#                           GENE SCANNER
# ============================================================================

class GeneScanner:
    """
    Lazy, single-use iterator over the genes of a base sequence.

    Each step searches the unconsumed remainder for the promoter. Scanning
    ends when no promoter is left or when the coding region after a promoter
    would run past the end of the genome (the trailing fragment is dropped).
    """

    def __init__(self, genome: Sequence, promoter: Sequence, length_of_gene: int):
        if len(promoter) == 0:
            raise ConfigurationError("Promoter must contain at least one base")
        if length_of_gene < 1:
            raise ConfigurationError(
                f"length_of_gene must be >= 1, got {length_of_gene}"
            )
        self.genome = genome
        self.promoter = tuple(promoter)
        self.length_of_gene = length_of_gene
        self.start_pos = 0
        self._exhausted = False

    def __iter__(self) -> "GeneScanner":
        return self

    def __next__(self) -> Gene:
        if self._exhausted:
            raise StopIteration

        pos = locate_pattern(self.genome, self.promoter, self.start_pos)
        if pos is None:
            self._exhausted = True
            raise StopIteration

        gene_start = pos + len(self.promoter)
        gene_end = gene_start + self.length_of_gene

        # Gene is not complete
        if gene_end > len(self.genome):
            logger.debug(f"Incomplete gene at position {gene_start}, scan stopped")
            self._exhausted = True
            raise StopIteration

        gene = Gene(
            regulatory_region=tuple(self.genome[self.start_pos:pos]),
            coding_region=tuple(self.genome[gene_start:gene_end]),
            regulatory_start=self.start_pos,
            promoter_start=pos,
            coding_start=gene_start,
            coding_end=gene_end,
        )
        self.start_pos = gene_end
        return gene


# ============================================================================
#                           GENOME
# ============================================================================

class Genome:
    """
    An immutable sequence of bases over one alphabet.

    Usage:
        genome = Genome.from_str("<0101> 1111 | 2222 <0101> 3101", Base4)
        genes = list(genome.iter_genes([Base4.B0, Base4.B1, Base4.B0, Base4.B1], 4))
    """

    def __init__(self, bases: Sequence, base_type: Optional[Type] = None):
        self.bases: Tuple = tuple(bases)
        if base_type is None and self.bases:
            base_type = type(self.bases[0])
        self.base_type = base_type

    @classmethod
    def from_str(cls, text: str, base_type: Type) -> "Genome":
        """
        Build a genome from text, skipping characters that are not bases.

        Spaces, brackets, underscores and annotation letters may be used
        freely to make a hand-written genome readable.
        """
        return cls(parse_bases(text, base_type), base_type)

    @classmethod
    def random(cls, length: int, base_type: Type, seed: Optional[int] = None,
               rng: Optional[random.Random] = None) -> "Genome":
        """
        Draw a genome of ``length`` bases uniformly from the alphabet.

        Args:
            length: Number of bases (>= 1)
            base_type: Alphabet enum
            seed: Seed for a fresh generator (ignored when ``rng`` is given)
            rng: Source of randomness

        Raises:
            ConfigurationError: On a non-positive length or an empty alphabet
        """
        if length < 1:
            raise ConfigurationError(f"Random genome length must be >= 1, got {length}")
        alphabet = list(base_type)
        if not alphabet:
            raise ConfigurationError(f"Alphabet {base_type.__name__} has no bases")

        if rng is None:
            rng = random.Random(seed)

        return cls(rng.choices(alphabet, k=length), base_type)

    def __len__(self) -> int:
        return len(self.bases)

    def __getitem__(self, index):
        return self.bases[index]

    def __iter__(self):
        return iter(self.bases)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return self.bases == other.bases

    def __hash__(self) -> int:
        return hash(self.bases)

    def __str__(self) -> str:
        return format_bases(self.bases)

    def __repr__(self) -> str:
        return f"Genome(length={len(self)}, alphabet={getattr(self.base_type, '__name__', None)})"

    def iter_genes(self, promoter: Sequence, length_of_gene: int) -> GeneScanner:
        """Return a lazy scanner over the genes of this genome."""
        return GeneScanner(self.bases, promoter, length_of_gene)

    def construct_network(self, promoter: Sequence, length_of_gene: int,
                          sign_of: Callable, name_of: Optional[Callable] = None):
        """
        Scan this genome and build its gene regulatory network.

        Args:
            promoter: Promoter pattern
            length_of_gene: Coding region length
            sign_of: Maps a product to a RegulationSign
            name_of: Optional labeller for coding regions

        Returns:
            GeneNetwork
        """
        from ..network.gene_network import build_network

        genes: List[Gene] = list(self.iter_genes(promoter, length_of_gene))
        logger.info(f"Found {len(genes)} genes in genome of length {len(self)}")
        return build_network(genes, sign_of, name_of=name_of)


__all__ = [
    'Gene',
    'GeneScanner',
    'Genome',
]

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
