from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Protocol

from localize.domain import LanguageCode, LocalizeConfig, parse_language

log = logging.getLogger(__name__)

_STORAGE_KEY = 'localize.language'


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class LanguageState:
    """Active and default language plus the resource configuration.

    The active language comes from the persisted preference, then the
    system's preferred language, then the configured default.
    """

    def __init__(
        self,
        preferences: PreferenceStore,
        system_language: Callable[[], str],
        config: LocalizeConfig | None = None,
    ) -> None:
        self._preferences = preferences
        self._system_language = system_language
        self.config = replace(config) if config is not None else LocalizeConfig()

    @property
    def file_name(self) -> str:
        return self.config.file_name

    @property
    def default_language(self) -> LanguageCode:
        return self.config.default_language

    @property
    def testing(self) -> bool:
        return self.config.testing

    def persisted_language(self) -> str | None:
        return self._preferences.get(_STORAGE_KEY) or None

    def current_language(self) -> str:
        stored = self.persisted_language()
        if stored:
            return stored
        system = self._system_language()
        if system:
            return system
        return self.default_language.value

    def store_language(self, code: LanguageCode) -> None:
        self._preferences.set(_STORAGE_KEY, code.value)

    def clear_language(self) -> None:
        self._preferences.remove(_STORAGE_KEY)

    def resolve_code(self, value: LanguageCode | str) -> LanguageCode | None:
        code = parse_language(value)
        if code is None:
            log.debug('Ignoring unsupported language %r', value)
        return code

    def set_default_language(self, code: LanguageCode) -> None:
        self.config = replace(self.config, default_language=code)

    def set_file_name(self, name: str) -> None:
        self.config = replace(self.config, file_name=name)

    def enable_testing(self) -> None:
        self.config = replace(self.config, testing=True)
