"""
Int32 Arithmetic — 32-bit Wraparound Primitives

Модуль приводит произвольные Python int к знаковому 32-битному диапазону:
- Wraparound (two's complement) вместо ошибки переполнения
- Нативный hash code любого значения, усечённый до int32
- Проверка попадания значения в диапазон int32

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат to_int32 всегда в [INT32_MIN, INT32_MAX]
2. to_int32(a + b) == to_int32(to_int32(a) + to_int32(b)) (арифметика по модулю 2**32)
3. native_hash_code(None) == 0
"""

from typing import Any, Final

# =============================================================================
# INT32 КОНСТАНТЫ
# =============================================================================

# Разрядность hash code
HASH_BITS: Final[int] = 32

# Маска младших 32 бит
UINT32_MASK: Final[int] = (1 << HASH_BITS) - 1

# Знаковый бит int32
INT32_SIGN_BIT: Final[int] = 1 << (HASH_BITS - 1)

INT32_MIN: Final[int] = -INT32_SIGN_BIT
INT32_MAX: Final[int] = INT32_SIGN_BIT - 1


# =============================================================================
# WRAPAROUND
# =============================================================================


def to_int32(value: int) -> int:
    """
    Приведение int к знаковому 32-битному значению (two's complement).

    Эквивалент unchecked-арифметики: старшие биты отбрасываются,
    переполнение никогда не приводит к ошибке.

    Args:
        value: Произвольное целое (может быть больше 32 бит)

    Returns:
        Значение в диапазоне [INT32_MIN, INT32_MAX]

    Examples:
        >>> to_int32(17)
        17
        >>> to_int32(INT32_MAX + 1)
        -2147483648
        >>> to_int32(-1)
        -1
        >>> to_int32(1 << 40)
        0
    """
    value &= UINT32_MASK

    if value & INT32_SIGN_BIT:
        return value - (1 << HASH_BITS)

    return value


def is_int32(value: int) -> bool:
    """Проверка, что значение помещается в знаковый int32."""
    return INT32_MIN <= value <= INT32_MAX


# =============================================================================
# НАТИВНЫЙ HASH CODE
# =============================================================================


def native_hash_code(value: Any) -> int:
    """
    Нативный hash code значения, усечённый до int32.

    Использует встроенный hash(). Для str результат зависит от PYTHONHASHSEED
    и стабилен только в пределах одного процесса.

    Args:
        value: Любое hashable значение или None

    Returns:
        0 для None, иначе to_int32(hash(value))

    Raises:
        TypeError: Если значение unhashable (list, dict, set)
    """
    if value is None:
        return 0

    return to_int32(hash(value))
