from __future__ import annotations

import logging
import threading
from typing import Callable

from localize.application.language_state import LanguageState
from localize.domain import DictionaryError, LocalizationDictionary, resource_name
from localize.domain.rules import parse_dictionary
from localize.infrastructure.fs.resources import ResourceStore

log = logging.getLogger(__name__)


class DictionaryCache:
    """Parsed dictionaries for the active and the default language.

    Both slots are filled lazily and stay filled, hits and misses alike,
    until ``clear()`` is called.
    """

    def __init__(self, state: LanguageState, resources: Callable[[], ResourceStore]) -> None:
        self._state = state
        self._resources = resources
        self._lock = threading.RLock()
        self.clear()

    def clear(self) -> None:
        with self._lock:
            self._dictionary: LocalizationDictionary | None = None
            self._loaded = False
            self._loaded_from: str | None = None
            self._default: LocalizationDictionary | None = None
            self._default_loaded = False

    def get_dictionary(self) -> LocalizationDictionary | None:
        with self._lock:
            if self._loaded:
                return self._dictionary

            language = self._state.current_language()
            default = self._state.default_language.value
            name = resource_name(self._state.file_name, language)
            dictionary = self._read(name)

            if dictionary is None and language != default:
                name = resource_name(self._state.file_name, default)
                dictionary = self._read(name)
                if dictionary is not None:
                    log.info('No dictionary for %r, using default language %r', language, default)

            self._dictionary = dictionary
            self._loaded_from = name if dictionary is not None else None
            self._loaded = True
            return dictionary

    def get_default_dictionary(self) -> LocalizationDictionary | None:
        """The default-language dictionary, or None when it is the active one."""
        with self._lock:
            name = resource_name(self._state.file_name, self._state.default_language)
            if self._loaded and self._loaded_from == name:
                return None
            if not self._default_loaded:
                self._default = self._read(name)
                self._default_loaded = True
            return self._default

    def _read(self, name: str) -> LocalizationDictionary | None:
        try:
            raw = self._resources().lookup(name)
        except OSError as exc:
            log.warning('Cannot read resource %s: %s', name, exc)
            return None
        if raw is None:
            log.debug('Resource %s not found', name)
            return None
        try:
            return parse_dictionary(raw)
        except DictionaryError as exc:
            log.warning('Cannot parse resource %s: %s (%s)', name, exc.message_key, exc.detail)
            return None
