"""
ConditionalComparer — Сравнение с особыми правилами для строк

EqualityComparer для произвольных объектов. Если оба сравниваемых значения
являются str, применяется заданная политика StringComparison. Иначе
используются нативные == и hash() каждого типа.

Четыре экземпляра (по одному на политику) являются членами Enum: других экземпляров
создать нельзя, все они immutable и разделяются всем процессом.

ПРАВИЛА:
    hash_code(None)          → 0
    hash_code(str)           → policy.hash_code(str)
    hash_code(other)         → native hash
    equals(None, None)       → True
    equals(None, x)          → False
    equals(str, str)         → policy.equals
    equals(x, y)             → x == y (без проверки типов)
"""

from enum import Enum
from typing import Any

from hashkit.core.comparison.policy import StringComparison
from hashkit.core.hashing.numeric import native_hash_code


class ConditionalComparer(Enum):
    """
    EqualityComparer, применяющий политику сравнения только к строкам.

    Смешанные типы (например, 65 и "A") сравниваются нативно.
    """

    CURRENT_CULTURE = StringComparison.CURRENT_CULTURE
    CURRENT_CULTURE_IGNORE_CASE = StringComparison.CURRENT_CULTURE_IGNORE_CASE
    ORDINAL = StringComparison.ORDINAL
    ORDINAL_IGNORE_CASE = StringComparison.ORDINAL_IGNORE_CASE

    @property
    def policy(self) -> StringComparison:
        """Политика сравнения строк этого comparer"""
        return self.value

    @classmethod
    def for_policy(cls, policy: StringComparison | str) -> "ConditionalComparer":
        """
        Singleton comparer для политики.

        Args:
            policy: StringComparison или его строковое значение ("ordinal", ...)

        Returns:
            Общий экземпляр ConditionalComparer

        Raises:
            ValueError: Если политика неизвестна
        """
        return cls(StringComparison(policy))

    def hash_code(self, value: Any) -> int:
        if value is None:
            return 0

        if isinstance(value, str):
            return self.policy.hash_code(value)

        return native_hash_code(value)

    def equals(self, left: Any, right: Any) -> bool:
        if left is None or right is None:
            return left is None and right is None

        if isinstance(left, str) and isinstance(right, str):
            return self.policy.equals(left, right)

        return left == right

    def __repr__(self) -> str:
        return f"ConditionalComparer.{self.name}"
