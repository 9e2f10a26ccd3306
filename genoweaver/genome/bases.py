#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Genome alphabets — the symbols ("bases") an artificial genome is written in.

Every alphabet is a closed enum satisfying the ``Base`` protocol: a cyclic
successor (used to express gene products), parsing from a single character,
and value equality. Two alphabets ship with the package:

- ``Base4``: the abstract four-symbol alphabet ``0 1 2 3``
- ``DNABase``: the biological alphabet ``A T G C``

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from enum import Enum
from typing import Dict, Iterable, Optional, Protocol, Type

from ..errors import ConfigurationError


# ============================================================================
#                           BASE PROTOCOL
# ============================================================================

class Base(Protocol):
    """
    Protocol every genome alphabet implements.

    ``succ`` must be total and cycle with period equal to the alphabet size.
    """

    def succ(self) -> "Base":
        """Return the next base, wrapping around."""
        ...

    @classmethod
    def from_char(cls, c: str) -> Optional["Base"]:
        """Parse a single character, or None if it is not a base."""
        ...

    @property
    def symbol(self) -> str:
        """Display character of the base."""
        ...


# ============================================================================
#                           CONCRETE ALPHABETS
# ============================================================================

class Base4(Enum):
    """Abstract four-symbol alphabet."""
    B0 = 0
    B1 = 1
    B2 = 2
    B3 = 3

    def succ(self) -> "Base4":
        return Base4((self.value + 1) & 3)

    @classmethod
    def from_char(cls, c: str) -> Optional["Base4"]:
        if c in ('0', '1', '2', '3'):
            return cls(int(c))
        return None

    @property
    def symbol(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return self.symbol


class DNABase(Enum):
    """
    Biological alphabet.

    Successor order follows the declaration order: A -> T -> G -> C -> A.
    """
    A = 'A'
    T = 'T'
    G = 'G'
    C = 'C'

    def succ(self) -> "DNABase":
        return _DNA_SUCCESSOR[self]

    @classmethod
    def from_char(cls, c: str) -> Optional["DNABase"]:
        try:
            return cls(c)
        except ValueError:
            return None

    @property
    def symbol(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.symbol


_DNA_SUCCESSOR = {
    DNABase.A: DNABase.T,
    DNABase.T: DNABase.G,
    DNABase.G: DNABase.C,
    DNABase.C: DNABase.A,
}


# ============================================================================
#                           ALPHABET REGISTRY
# ============================================================================

ALPHABETS: Dict[str, Type[Enum]] = {
    'base4': Base4,
    'dna': DNABase,
}


def get_alphabet(name: str) -> Type[Enum]:
    """
    Resolve an alphabet by its configuration name.

    Args:
        name: 'base4' or 'dna' (case-insensitive)

    Returns:
        The alphabet enum class

    Raises:
        ConfigurationError: If the name is unknown
    """
    try:
        return ALPHABETS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown alphabet '{name}' (choose from: {', '.join(sorted(ALPHABETS))})"
        )


def parse_bases(text: str, base_type: Type[Enum]) -> tuple:
    """Parse every recognised character of ``text``, skipping the rest."""
    parsed = (base_type.from_char(c) for c in text)
    return tuple(b for b in parsed if b is not None)


def format_bases(bases: Iterable) -> str:
    """Render a base sequence back to its characters."""
    return ''.join(b.symbol for b in bases)


__all__ = [
    'Base',
    'Base4',
    'DNABase',
    'ALPHABETS',
    'get_alphabet',
    'parse_bases',
    'format_bases',
]

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
