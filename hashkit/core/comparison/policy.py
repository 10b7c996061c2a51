"""
StringComparison — Политики сравнения строк

Четыре фиксированных политики:
- CURRENT_CULTURE: с учётом регистра, по правилам текущей локали (LC_COLLATE)
- CURRENT_CULTURE_IGNORE_CASE: без учёта регистра, по правилам текущей локали
- ORDINAL: с учётом регистра, посимвольно (code points)
- ORDINAL_IGNORE_CASE: без учёта регистра, посимвольно

Каждая политика сводит строку к sort key; равенство и hash code
вычисляются по этому ключу, поэтому equals(a, b) → hash_code(a) == hash_code(b).
Culture-aware политики читают локаль процесса в момент вызова.
"""

import locale
import unicodedata
from enum import Enum

from hashkit.core.hashing.numeric import native_hash_code


# =============================================================================
# SIMPLE CASE MAPPING
# =============================================================================


def _simple_upper(text: str) -> str:
    """Посимвольный uppercase; символы с многосимвольным upper ('ß' → 'SS') не меняются"""
    chars = []
    for ch in text:
        upper = ch.upper()
        chars.append(upper if len(upper) == 1 else ch)
    return "".join(chars)


# =============================================================================
# ENUMS
# =============================================================================


class StringComparison(str, Enum):
    """Политика сравнения строк"""

    CURRENT_CULTURE = "current_culture"
    CURRENT_CULTURE_IGNORE_CASE = "current_culture_ignore_case"
    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"

    @property
    def culture_aware(self) -> bool:
        """True для политик, зависящих от локали"""
        return self in (
            StringComparison.CURRENT_CULTURE,
            StringComparison.CURRENT_CULTURE_IGNORE_CASE,
        )

    @property
    def ignore_case(self) -> bool:
        """True для политик без учёта регистра"""
        return self in (
            StringComparison.CURRENT_CULTURE_IGNORE_CASE,
            StringComparison.ORDINAL_IGNORE_CASE,
        )

    def sort_key(self, text: str) -> str | tuple[str, ...]:
        """
        Ключ, по которому политика сравнивает и хеширует строку.

        Culture-aware: NFC-нормализация (канонически эквивалентные строки
        равны), casefold() для ignore-case, затем locale.strxfrm по кускам
        между символами NUL (strxfrm не принимает "\\x00"), ключ является tuple.
        Ordinal ignore-case: посимвольный simple uppercase, длина строки
        не меняется.

        Args:
            text: Исходная строка

        Returns:
            Нормализованный ключ (str для ordinal, tuple[str, ...] для culture-aware)

        Examples:
            >>> StringComparison.ORDINAL.sort_key("Foo")
            'Foo'
            >>> StringComparison.ORDINAL_IGNORE_CASE.sort_key("Foo")
            'FOO'
        """
        if self.culture_aware:
            text = unicodedata.normalize("NFC", text)

            if self.ignore_case:
                text = text.casefold()

            return tuple(locale.strxfrm(part) for part in text.split("\x00"))

        if self.ignore_case:
            return _simple_upper(text)

        return text

    def equals(self, left: str, right: str) -> bool:
        """Равенство двух строк по правилам политики"""
        if self is StringComparison.ORDINAL:
            return left == right

        return self.sort_key(left) == self.sort_key(right)

    def hash_code(self, text: str) -> int:
        """int32 hash code строки по правилам политики"""
        return native_hash_code(self.sort_key(text))
