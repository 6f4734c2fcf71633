from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Protocol, Sequence

from PySide6 import QtCore

from localize.application.dictionary_cache import DictionaryCache
from localize.application.language_state import LanguageState, PreferenceStore
from localize.domain import SUPPORTED_LANGUAGES, LanguageCode, LocalizeConfig, resource_name
from localize.domain.rules import replace_named, replace_single, replace_values, resolve
from localize.infrastructure.fs.resources import PackageResources, ResourceStore
from localize.infrastructure.locale_names import CldrLocaleNames
from localize.infrastructure.qt.system_locale import system_language as qt_system_language

log = logging.getLogger(__name__)

LANGUAGE_CHANGE_NOTIFICATION = 'LanguageChangeNotification'


class LocaleNames(Protocol):
    def display_name(self, locale_identifier: str, code: str) -> str | None: ...


class Localize(QtCore.QObject):
    """Resolves keys to text from per-language JSON dictionaries.

    Construct one instance per process and hand it to whatever needs text.
    Lookups never raise: a key that cannot be resolved is returned as is.
    Not thread-safe apart from the dictionary cache; callers that share an
    instance across threads must serialize language changes themselves.
    """

    language_changed = QtCore.Signal(name=LANGUAGE_CHANGE_NOTIFICATION)

    def __init__(
        self,
        resources: ResourceStore,
        preferences: PreferenceStore,
        *,
        test_resources: ResourceStore | None = None,
        system_language: Callable[[], str] | None = None,
        locale_names: LocaleNames | None = None,
        config: LocalizeConfig | None = None,
        parent: QtCore.QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if system_language is None:
            system_language = qt_system_language
        if locale_names is None:
            locale_names = CldrLocaleNames()
        self._resources = resources
        self._test_resources = test_resources if test_resources is not None else PackageResources()
        self._locale_names = locale_names
        self._state = LanguageState(preferences, system_language, config)
        self._cache = DictionaryCache(self._state, self._active_resources)

    def _active_resources(self) -> ResourceStore:
        return self._test_resources if self._state.testing else self._resources

    @property
    def config(self) -> LocalizeConfig:
        return self._state.config

    @property
    def file_name(self) -> str:
        return self._state.file_name

    @property
    def default_language(self) -> LanguageCode:
        return self._state.default_language

    # Lookup

    def _resolve(self, key: str) -> str:
        dictionary = self._cache.get_dictionary()
        if dictionary is None:
            return key
        found = resolve(dictionary, key)
        if found is not None:
            return found
        fallback = self._cache.get_default_dictionary()
        if fallback is not None:
            found = resolve(fallback, key)
            if found is not None:
                return found
        return key

    def localize(
        self,
        key: str,
        replace: str | None = None,
        *,
        values: Sequence[Any] | None = None,
        dictionary: Mapping[str, str] | None = None,
    ) -> str:
        """Localized text for ``key``, or ``key`` itself when it is missing.

        ``replace`` substitutes every ``%``, ``values`` fills each ``%`` in
        order, ``dictionary`` fills ``:name`` tokens. Only one of them is
        applied, checked in that order. ``%`` substitution is skipped for
        missing keys; ``:name`` substitution is not.
        """
        text = self._resolve(key)
        if replace is not None:
            return key if text == key else replace_single(text, replace)
        if values is not None:
            return key if text == key else replace_values(text, values)
        if dictionary is not None:
            return replace_named(text, dictionary)
        return text

    # Language state

    def current_language(self) -> str:
        return self._state.current_language()

    def set_language(self, language: LanguageCode | str) -> None:
        code = self._state.resolve_code(language)
        if code is None:
            return
        self._state.store_language(code)
        self._cache.clear()
        log.debug('Language set to %s', code.value)
        self.language_changed.emit()

    def reset_language(self) -> None:
        before = self._state.current_language()
        self._state.clear_language()
        self._cache.clear()
        if self._state.current_language() != before:
            self.language_changed.emit()

    def set_default_language(self, language: LanguageCode) -> None:
        self._state.set_default_language(language)
        self._cache.clear()

    def set_file_name(self, name: str) -> None:
        self._state.set_file_name(name)
        self._cache.clear()

    def enable_test_mode(self) -> None:
        self._state.enable_testing()
        self._cache.clear()

    def available_languages(self) -> list[LanguageCode]:
        store = self._active_resources()
        return [
            code for code in SUPPORTED_LANGUAGES
            if store.exists(resource_name(self._state.file_name, code))
        ]

    def display_name(self, language: LanguageCode | str) -> str:
        code = language.value if isinstance(language, LanguageCode) else language
        name = self._locale_names.display_name(self.current_language(), code)
        if not name:
            return ''
        return name.title()

    # Observers

    def add_observer(self, callback: Callable[[], Any]) -> None:
        self.language_changed.connect(callback)

    def remove_observer(self, callback: Callable[[], Any]) -> None:
        try:
            self.language_changed.disconnect(callback)
        except (RuntimeError, TypeError):
            log.debug('Observer %r was not connected', callback)
