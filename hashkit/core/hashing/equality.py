"""
EqualityComparer — Протокол стратегии равенства и hash code

Стратегия из двух операций {equals, hash_code}, которую принимают
комбинаторы hash_from_list / hash_from_set. Реализация по умолчанию
делегирует нативным == и hash().
"""

from typing import Any, Final, Protocol, runtime_checkable

from hashkit.core.hashing.numeric import native_hash_code


# =============================================================================
# ПРОТОКОЛ
# =============================================================================


@runtime_checkable
class EqualityComparer(Protocol):
    """
    Стратегия сравнения значений на равенство и вычисления hash code.

    Контракт: equals(a, b) → hash_code(a) == hash_code(b).
    """

    def equals(self, left: Any, right: Any) -> bool:
        ...

    def hash_code(self, value: Any) -> int:
        ...


# =============================================================================
# NATIVE COMPARER
# =============================================================================


class NativeEqualityComparer:
    """Нативные == и hash() с обработкой None."""

    __slots__ = ()

    def equals(self, left: Any, right: Any) -> bool:
        if left is None or right is None:
            return left is None and right is None

        return left == right

    def hash_code(self, value: Any) -> int:
        return native_hash_code(value)

    def __repr__(self) -> str:
        return "NativeEqualityComparer()"


# Comparer по умолчанию для комбинаторов
DEFAULT_COMPARER: Final[NativeEqualityComparer] = NativeEqualityComparer()
