"""
Тесты для Int32 Arithmetic

Проверяет:
1. Wraparound to_int32 (two's complement)
2. Границы int32
3. native_hash_code: None → 0, усечение до int32
"""

import pytest

from hashkit.core.hashing.numeric import (
    HASH_BITS,
    INT32_MAX,
    INT32_MIN,
    UINT32_MASK,
    is_int32,
    native_hash_code,
    to_int32,
)


# =============================================================================
# ТЕСТЫ: Константы
# =============================================================================


class TestInt32Constants:
    """Тесты констант int32"""

    def test_bounds(self) -> None:
        """Границы соответствуют знаковому 32-битному целому"""
        assert HASH_BITS == 32
        assert INT32_MIN == -(2**31)
        assert INT32_MAX == 2**31 - 1
        assert UINT32_MASK == 0xFFFFFFFF


# =============================================================================
# ТЕСТЫ: to_int32
# =============================================================================


class TestToInt32:
    """Тесты для to_int32"""

    def test_small_values_unchanged(self) -> None:
        """Значения внутри диапазона не меняются"""
        assert to_int32(0) == 0
        assert to_int32(17) == 17
        assert to_int32(-17) == -17
        assert to_int32(INT32_MAX) == INT32_MAX
        assert to_int32(INT32_MIN) == INT32_MIN

    def test_overflow_wraps_to_min(self) -> None:
        """INT32_MAX + 1 → INT32_MIN"""
        assert to_int32(INT32_MAX + 1) == INT32_MIN

    def test_underflow_wraps_to_max(self) -> None:
        """INT32_MIN - 1 → INT32_MAX"""
        assert to_int32(INT32_MIN - 1) == INT32_MAX

    def test_high_bits_discarded(self) -> None:
        """Биты старше 32 отбрасываются"""
        assert to_int32(1 << 40) == 0
        assert to_int32((1 << 40) + 5) == 5
        assert to_int32(0xFFFFFFFF) == -1

    def test_modular_addition(self) -> None:
        """Сложение по модулю 2**32 не зависит от промежуточного усечения"""
        a, b = 3_000_000_000, 4_000_000_000
        assert to_int32(a + b) == to_int32(to_int32(a) + to_int32(b))

    def test_modular_multiplication(self) -> None:
        """Умножение по модулю 2**32 не зависит от промежуточного усечения"""
        a = 2**35 + 12345
        assert to_int32(a * 23) == to_int32(to_int32(a) * 23)


class TestIsInt32:
    """Тесты для is_int32"""

    def test_inside_range(self) -> None:
        assert is_int32(0)
        assert is_int32(INT32_MAX)
        assert is_int32(INT32_MIN)

    def test_outside_range(self) -> None:
        assert not is_int32(INT32_MAX + 1)
        assert not is_int32(INT32_MIN - 1)


# =============================================================================
# ТЕСТЫ: native_hash_code
# =============================================================================


class TestNativeHashCode:
    """Тесты для native_hash_code"""

    def test_none_is_zero(self) -> None:
        """None → 0"""
        assert native_hash_code(None) == 0

    def test_small_int_is_identity(self) -> None:
        """hash небольшого int совпадает со значением"""
        assert native_hash_code(123) == 123
        assert native_hash_code(-5) == -5

    def test_string_is_stable_within_process(self) -> None:
        """hash строки стабилен в пределах процесса"""
        assert native_hash_code("Foo") == native_hash_code("Foo")
        assert is_int32(native_hash_code("Foo"))

    def test_wide_hash_truncated(self) -> None:
        """hash шире 32 бит усекается"""
        value = 2**40 + 9
        assert native_hash_code(value) == to_int32(hash(value))
        assert is_int32(native_hash_code(value))

    def test_unhashable_raises(self) -> None:
        """Unhashable значение → TypeError"""
        with pytest.raises(TypeError):
            native_hash_code({"a": 1})
