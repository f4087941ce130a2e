"""
Verlax Version Module

- tokens: Lexical split of a version string into digit/letter runs and markers
- qualifier: Qualifier alias and rank lookup
- version: Version record and the three-tier comparator
- parser: Classification of tokens into release, date and qualifiers
- sorting: Sorting and min/max helpers for callers

Usage:
    from verlax.version import parse, Version
"""

from .tokens import Token, TokenKind, tokenize
from .qualifier import Qualifier, canonical_name, rank_of
from .version import Version, compare
from .parser import VersionParser, parse, is_date
from .sorting import sort_versions, latest, earliest

__all__ = [
    'Token',
    'TokenKind',
    'tokenize',
    'Qualifier',
    'canonical_name',
    'rank_of',
    'Version',
    'compare',
    'VersionParser',
    'parse',
    'is_date',
    'sort_versions',
    'latest',
    'earliest',
]
