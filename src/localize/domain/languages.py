from __future__ import annotations

from enum import Enum


class LanguageCode(str, Enum):
    ENGLISH = 'en'
    SPANISH = 'es'
    CATALAN = 'ca'
    FRENCH = 'fr'
    GERMAN = 'de'
    ITALIAN = 'it'
    PORTUGUESE = 'pt'
    DUTCH = 'nl'
    RUSSIAN = 'ru'
    ARABIC = 'ar'
    HEBREW = 'he'
    JAPANESE = 'ja'
    KOREAN = 'ko'
    CHINESE = 'zh'

    def __str__(self) -> str:
        return self.value


# Declaration order is the order reported by available_languages().
SUPPORTED_LANGUAGES: tuple[LanguageCode, ...] = (
    LanguageCode.ENGLISH,
    LanguageCode.SPANISH,
    LanguageCode.CATALAN,
    LanguageCode.FRENCH,
    LanguageCode.GERMAN,
    LanguageCode.ITALIAN,
    LanguageCode.PORTUGUESE,
    LanguageCode.DUTCH,
    LanguageCode.RUSSIAN,
    LanguageCode.ARABIC,
    LanguageCode.HEBREW,
    LanguageCode.JAPANESE,
    LanguageCode.KOREAN,
    LanguageCode.CHINESE,
)

_BY_VALUE = {code.value: code for code in SUPPORTED_LANGUAGES}


def parse_language(value: LanguageCode | str | None) -> LanguageCode | None:
    if isinstance(value, LanguageCode):
        return value
    if not value:
        return None
    return _BY_VALUE.get(value)
