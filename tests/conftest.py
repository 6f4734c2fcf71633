from __future__ import annotations

import json

import pytest
from PySide6 import QtCore

from localize import Localize, LocalizeConfig


class MemoryResources:
    def __init__(self, files: dict[str, object] | None = None) -> None:
        self.files: dict[str, bytes] = {}
        self.reads: list[str] = []
        for name, content in (files or {}).items():
            self.add(name, content)

    def add(self, name: str, content: object) -> None:
        if isinstance(content, bytes):
            self.files[name] = content
        else:
            self.files[name] = json.dumps(content).encode('utf-8')

    def exists(self, name: str) -> bool:
        return name in self.files

    def lookup(self, name: str) -> bytes | None:
        self.reads.append(name)
        return self.files.get(name)


class MemoryPreferences:
    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)


class FakeLocaleNames:
    NAMES = {
        ('en', 'en'): 'english',
        ('en', 'es'): 'spanish',
        ('es', 'es'): 'español',
        ('es', 'en'): 'inglés',
    }

    def display_name(self, locale_identifier: str, code: str) -> str | None:
        return self.NAMES.get((locale_identifier, code))


@pytest.fixture(scope='session', autouse=True)
def qt_core_app():
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app


@pytest.fixture
def resources() -> MemoryResources:
    return MemoryResources({
        'lang-en': {
            'hello': 'Hello',
            'greeting': 'Hello %',
            'range': 'From % to %',
            'welcome': 'Hi :name',
            'english_only': 'Only in English',
            'menu': {'file': 'File', 'edit': {'copy': 'Copy', 'paste': 'Paste'}},
        },
        'lang-es': {
            'hello': 'Hola',
            'greeting': 'Hola %',
            'spanish_only': 'Solo en español',
            'menu': {'file': 'Archivo', 'edit': {'copy': 'Copiar'}},
        },
        'lang-fr': {
            'hello': 'Bonjour',
        },
    })


@pytest.fixture
def preferences() -> MemoryPreferences:
    return MemoryPreferences()


def make_localize(resources, preferences, system: str = 'en', **kwargs) -> Localize:
    kwargs.setdefault('locale_names', FakeLocaleNames())
    kwargs.setdefault('config', LocalizeConfig())
    return Localize(
        resources,
        preferences,
        system_language=lambda: system,
        **kwargs,
    )
