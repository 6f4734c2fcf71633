from __future__ import annotations

from PySide6 import QtCore

from localize.domain.rules import primary_subtag


def system_language() -> str:
    """Primary subtag of the user's preferred UI language, '' if unknown."""
    system = QtCore.QLocale.system()
    languages = system.uiLanguages()
    name = languages[0] if languages else system.name()
    return primary_subtag(name or '')
