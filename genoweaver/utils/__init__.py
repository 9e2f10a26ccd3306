"""
Utilities module for GenoWeaver.

This module provides shared utilities. The pipeline orchestrator lives in
``genoweaver.utils.pipeline`` and is imported from there directly.
"""

from .sequence_utils import (
    iter_windows,
    locate_pattern,
    count_occurrences,
    contains_pattern,
)

__all__ = [
    # Sequence search
    "iter_windows",
    "locate_pattern",
    "count_occurrences",
    "contains_pattern",
]
