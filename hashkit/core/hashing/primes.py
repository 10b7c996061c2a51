"""
FoldPrimes — Константы полиномиального fold

Immutable Pydantic модель с тремя константами, которыми параметризуются
все комбинаторы hash code:
- base_prime: начальное значение аккумулятора
- iteration_prime: множитель на каждом шаге fold
- null_prime: вклад отсутствующего (None) элемента

Значения по умолчанию (17, 23, 31) фиксированы для совместимости
с ранее сохранёнными hash code. Сами значения не несут смысла, кроме того,
что они простые и снижают вероятность коллизий для различных объектов.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from hashkit.core.hashing.numeric import INT32_MAX


# =============================================================================
# КОНСТАНТЫ ПО УМОЛЧАНИЮ
# =============================================================================

BASE_PRIME: Final[int] = 17
ITERATION_PRIME: Final[int] = 23
NULL_PRIME: Final[int] = 31


# =============================================================================
# FOLD PRIMES MODEL
# =============================================================================


class FoldPrimes(BaseModel):
    """
    Константы fold для комбинаторов hash code.

    Каждая константа должна быть нечётным целым в (1, INT32_MAX]: чётный множитель
    по модулю 2**32 теряет младшие биты аккумулятора.
    """

    base_prime: int = Field(
        BASE_PRIME, gt=1, le=INT32_MAX, description="Начальное значение аккумулятора"
    )
    iteration_prime: int = Field(
        ITERATION_PRIME, gt=1, le=INT32_MAX, description="Множитель аккумулятора на каждом элементе"
    )
    null_prime: int = Field(
        NULL_PRIME, gt=1, le=INT32_MAX, description="Вклад элемента None"
    )

    model_config = {"frozen": True}

    @field_validator("base_prime", "iteration_prime", "null_prime")
    @classmethod
    def validate_odd(cls, v: int, info) -> int:
        """Проверка, что константа нечётная"""
        if v % 2 == 0:
            raise ValueError(f"{info.field_name} must be odd, got {v}")
        return v


# Общий экземпляр по умолчанию (17, 23, 31)
DEFAULT_FOLD_PRIMES: Final[FoldPrimes] = FoldPrimes()
