from __future__ import annotations

from babel import Locale, UnknownLocaleError

from localize.domain.rules import primary_subtag


class CldrLocaleNames:
    """Language names from CLDR, written in the language of ``locale_identifier``."""

    def display_name(self, locale_identifier: str, code: str) -> str | None:
        try:
            locale = Locale.parse(primary_subtag(locale_identifier))
        except (UnknownLocaleError, ValueError, TypeError):
            return None
        return locale.languages.get(primary_subtag(code)) or None
