"""
hashkit — hash code combinators and conditional equality comparers.
"""

from hashkit.core.comparison import ConditionalComparer, StringComparison
from hashkit.core.hashing import (
    DEFAULT_COMPARER,
    DEFAULT_FOLD_PRIMES,
    EqualityComparer,
    FoldPrimes,
    NativeEqualityComparer,
    hash_from,
    hash_from_list,
    hash_from_set,
    hash_of,
)

__version__ = "0.1.0"

__all__ = [
    # Combinator
    "hash_from",
    "hash_from_list",
    "hash_from_set",
    "hash_of",
    "FoldPrimes",
    "DEFAULT_FOLD_PRIMES",
    # Comparers
    "EqualityComparer",
    "NativeEqualityComparer",
    "DEFAULT_COMPARER",
    "ConditionalComparer",
    "StringComparison",
]
