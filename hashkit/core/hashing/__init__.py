"""
Hashing модули для hashkit

Комбинаторы hash code, int32 арифметика и стратегии равенства.
"""

# Int32 Arithmetic
from hashkit.core.hashing.numeric import (
    HASH_BITS,
    INT32_MAX,
    INT32_MIN,
    UINT32_MASK,
    is_int32,
    native_hash_code,
    to_int32,
)

# Fold Primes
from hashkit.core.hashing.primes import (
    BASE_PRIME,
    DEFAULT_FOLD_PRIMES,
    ITERATION_PRIME,
    NULL_PRIME,
    FoldPrimes,
)

# Equality Comparer
from hashkit.core.hashing.equality import (
    DEFAULT_COMPARER,
    EqualityComparer,
    NativeEqualityComparer,
)

# Combinator
from hashkit.core.hashing.combinator import (
    hash_from,
    hash_from_list,
    hash_from_set,
    hash_of,
)

__all__ = [
    # Int32 Arithmetic — Constants
    "HASH_BITS",
    "INT32_MAX",
    "INT32_MIN",
    "UINT32_MASK",
    # Int32 Arithmetic — Functions
    "is_int32",
    "native_hash_code",
    "to_int32",
    # Fold Primes
    "BASE_PRIME",
    "ITERATION_PRIME",
    "NULL_PRIME",
    "DEFAULT_FOLD_PRIMES",
    "FoldPrimes",
    # Equality Comparer
    "DEFAULT_COMPARER",
    "EqualityComparer",
    "NativeEqualityComparer",
    # Combinator
    "hash_from",
    "hash_from_list",
    "hash_from_set",
    "hash_of",
]
