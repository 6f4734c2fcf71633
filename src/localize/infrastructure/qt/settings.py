from __future__ import annotations

from PySide6 import QtCore

ORGANIZATION = 'localize'
APPLICATION = 'localize'


class QSettingsPreferenceStore:
    def __init__(self, settings: QtCore.QSettings | None = None) -> None:
        self._settings = settings if settings is not None else QtCore.QSettings(ORGANIZATION, APPLICATION)

    def get(self, key: str) -> str | None:
        value = self._settings.value(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._settings.sync()
