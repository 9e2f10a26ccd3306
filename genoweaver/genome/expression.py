"""
GenoWeaver v0.1.0

Gene expression — the product of a gene and where that product binds.
"""

from typing import Sequence, Tuple, Union

from ..utils.sequence_utils import contains_pattern, count_occurrences
from .genome import Gene


def product(gene: Union[Gene, Sequence]) -> Tuple:
    """
    Express a gene: every coding base replaced by its successor.

    Accepts a Gene or a bare coding region.
    """
    coding = gene.coding_region if isinstance(gene, Gene) else gene
    return tuple(base.succ() for base in coding)


def count_product(region: Sequence, gene_product: Sequence) -> int:
    """Count (possibly overlapping) binding sites of a product in a region."""
    return count_occurrences(region, gene_product)


def contains_product(region: Sequence, gene_product: Sequence) -> bool:
    """Test whether a product binds anywhere in a region."""
    return contains_pattern(region, gene_product)


__all__ = ['product', 'count_product', 'contains_product']
