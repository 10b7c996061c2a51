"""
Comparison модули для hashkit

Политики сравнения строк и условный comparer для произвольных объектов.
"""

from hashkit.core.comparison.comparer import ConditionalComparer
from hashkit.core.comparison.policy import StringComparison

__all__ = [
    "ConditionalComparer",
    "StringComparison",
]
