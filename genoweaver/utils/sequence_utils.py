"""
GenoWeaver v0.1.0

Sequence utility functions for GenoWeaver.

Sliding-window pattern search over arbitrary symbol sequences. Works on any
sequence whose elements support equality (base enums, characters, ints).
"""

from typing import Iterator, Optional, Sequence, Tuple

from ..errors import ConfigurationError


def iter_windows(sequence: Sequence, size: int) -> Iterator[Tuple]:
    """
    Yield every contiguous window of ``size`` elements.

    Args:
        sequence: Symbol sequence
        size: Window size

    Returns:
        Iterator of tuples

    Example:
        >>> list(iter_windows("0123", 3))
        [('0', '1', '2'), ('1', '2', '3')]
    """
    for i in range(len(sequence) - size + 1):
        yield tuple(sequence[i:i + size])


def _check_pattern(pattern: Sequence):
    if len(pattern) == 0:
        raise ConfigurationError("Search pattern must not be empty")


def locate_pattern(sequence: Sequence, pattern: Sequence, start: int = 0) -> Optional[int]:
    """
    Find the first index >= ``start`` at which ``pattern`` occurs.

    Args:
        sequence: Symbol sequence to search
        pattern: Non-empty pattern
        start: First index to consider

    Returns:
        Absolute index of the match, or None if there is none

    Example:
        >>> locate_pattern("11010122", "0101")
        2
    """
    _check_pattern(pattern)
    plen = len(pattern)
    pattern = tuple(pattern)

    for i in range(start, len(sequence) - plen + 1):
        if tuple(sequence[i:i + plen]) == pattern:
            return i

    return None


def count_occurrences(sequence: Sequence, pattern: Sequence) -> int:
    """
    Count all (possibly overlapping) occurrences of ``pattern``.

    Example:
        >>> count_occurrences("1111", "11")
        3
    """
    _check_pattern(pattern)
    pattern = tuple(pattern)
    return sum(1 for window in iter_windows(sequence, len(pattern)) if window == pattern)


def contains_pattern(sequence: Sequence, pattern: Sequence) -> bool:
    """Test whether ``pattern`` occurs anywhere in ``sequence``."""
    return locate_pattern(sequence, pattern) is not None


__all__ = [
    'iter_windows',
    'locate_pattern',
    'count_occurrences',
    'contains_pattern',
]
