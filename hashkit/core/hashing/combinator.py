"""
Combinator — Комбинирование hash code коллекций значений

Модуль сворачивает последовательность произвольных значений в один int32:
- hash_from: позиционно-взвешенный полиномиальный fold (multiply-then-add)
- hash_of: то же для позиционных аргументов
- hash_from_list: fold с учётом позиции (1-based) и pluggable comparer
- hash_from_set: XOR fold, не зависящий от порядка элементов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. values=None эквивалентно пустой последовательности → base_prime
2. Элемент None вносит null_prime, а не ошибку
3. Переполнение: wraparound int32, никогда не исключение
4. hash_from_set инвариантен к перестановкам (XOR коммутативен и ассоциативен)
5. comparer=None → ValueError (единственная ошибка модуля)

ФОРМУЛЫ (h_0 = base_prime, t_i = null_prime если v_i is None, иначе hash(v_i)):
    hash_from:      h_i = h_{i-1} * iteration_prime + t_i
    hash_from_list: h_i = h_{i-1} * iteration_prime + t_i + i
    hash_from_set:  h_i = h_{i-1} XOR t_i

hash_from, несмотря на название, чувствителен к порядку элементов.
Это поведение сохраняется: от него зависят ранее вычисленные hash code.
hash_from_set не удаляет дубликаты, каждый элемент вносит свой XOR-терм.
"""

import logging
from typing import Any, Iterable

from hashkit.core.hashing.equality import DEFAULT_COMPARER, EqualityComparer
from hashkit.core.hashing.numeric import native_hash_code, to_int32
from hashkit.core.hashing.primes import DEFAULT_FOLD_PRIMES, FoldPrimes

logger = logging.getLogger(__name__)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _require_comparer(comparer: EqualityComparer | None, operation: str) -> EqualityComparer:
    if comparer is None:
        logger.debug("%s: rejected comparer=None", operation)
        raise ValueError(f"{operation}: comparer must not be None")
    return comparer


# =============================================================================
# ПОЗИЦИОННЫЙ FOLD
# =============================================================================


def hash_from(
    values: Iterable[Any] | None,
    primes: FoldPrimes = DEFAULT_FOLD_PRIMES,
) -> int:
    """
    Полиномиальный hash code последовательности значений.

    Для каждого элемента по порядку: аккумулятор умножается на
    iteration_prime, затем прибавляется null_prime (для None)
    или нативный hash code элемента.

    Args:
        values: Последовательность значений (None трактуется как пустая)
        primes: Константы fold (default: 17, 23, 31)

    Returns:
        int32 hash code

    Raises:
        TypeError: Если элемент unhashable

    Examples:
        >>> hash_from(None)
        17
        >>> hash_from([])
        17
        >>> hash_from([None])
        422
    """
    h = primes.base_prime

    if values is None:
        return h

    for value in values:
        h *= primes.iteration_prime

        if value is None:
            h += primes.null_prime
        else:
            h += native_hash_code(value)

        h = to_int32(h)

    return h


def hash_of(*values: Any, primes: FoldPrimes = DEFAULT_FOLD_PRIMES) -> int:
    """
    hash_from для позиционных аргументов.

    Examples:
        >>> hash_of()
        17
        >>> hash_of(None) == hash_from([None])
        True
    """
    return hash_from(values, primes=primes)


# =============================================================================
# УПОРЯДОЧЕННЫЙ LIST FOLD
# =============================================================================


def hash_from_list(
    values: Iterable[Any] | None,
    comparer: EqualityComparer | None = DEFAULT_COMPARER,
    primes: FoldPrimes = DEFAULT_FOLD_PRIMES,
) -> int:
    """
    Hash code упорядоченной коллекции.

    Fold как в hash_from, но hash элемента берётся из comparer, и после
    каждого шага прибавляется 1-based позиция элемента. Поэтому коллекции,
    отличающиеся порядком или длиной, дают разные hash code
    (с подавляющей вероятностью).

    Args:
        values: Последовательность значений (None → base_prime)
        comparer: Стратегия hash code для не-None элементов
        primes: Константы fold

    Returns:
        int32 hash code

    Raises:
        ValueError: Если comparer is None (проверяется до values)

    Examples:
        >>> hash_from_list(None)
        17
        >>> hash_from_list([None])
        423
    """
    comparer = _require_comparer(comparer, "hash_from_list")

    h = primes.base_prime

    if values is None:
        return h

    for position, value in enumerate(values, start=1):
        h *= primes.iteration_prime

        if value is None:
            h += primes.null_prime
        else:
            h += comparer.hash_code(value)

        h += position
        h = to_int32(h)

    return h


# =============================================================================
# НЕУПОРЯДОЧЕННЫЙ SET FOLD
# =============================================================================


def hash_from_set(
    values: Iterable[Any] | None,
    comparer: EqualityComparer | None = DEFAULT_COMPARER,
    primes: FoldPrimes = DEFAULT_FOLD_PRIMES,
) -> int:
    """
    Hash code коллекции, не зависящий от порядка элементов.

    Чистый XOR fold без умножения и позиционных весов. Дубликаты
    не удаляются: пара одинаковых элементов взаимно гасится.

    Args:
        values: Последовательность значений в любом порядке (None → base_prime)
        comparer: Стратегия hash code для не-None элементов
        primes: Константы fold (iteration_prime не используется)

    Returns:
        int32 hash code

    Raises:
        ValueError: Если comparer is None (проверяется до values)

    Examples:
        >>> hash_from_set(None)
        17
        >>> hash_from_set([None])
        14
    """
    comparer = _require_comparer(comparer, "hash_from_set")

    h = primes.base_prime

    if values is None:
        return h

    for value in values:
        if value is None:
            h ^= primes.null_prime
        else:
            h ^= to_int32(comparer.hash_code(value))

    return h
