from pathlib import Path

from PySide6 import QtCore

from localize.infrastructure.fs.config_store import JsonPreferenceStore
from localize.infrastructure.fs.resources import DirectoryResources, PackageResources
from localize.infrastructure.locale_names import CldrLocaleNames
from localize.infrastructure.qt.settings import QSettingsPreferenceStore
from localize.infrastructure.qt.system_locale import system_language


def test_directory_resources_search_roots_in_order(tmp_path: Path):
    first = tmp_path / 'first'
    second = tmp_path / 'second'
    first.mkdir()
    second.mkdir()
    (second / 'lang-en.json').write_text('{"a": "second"}', encoding='utf-8')
    (second / 'lang-es.json').write_text('{"a": "segundo"}', encoding='utf-8')
    (first / 'lang-es.json').write_text('{"a": "primero"}', encoding='utf-8')

    store = DirectoryResources([first, second])
    assert store.exists('lang-en')
    assert store.lookup('lang-es') == b'{"a": "primero"}'
    assert store.path('lang-en') == second / 'lang-en.json'
    assert store.lookup('lang-fr') is None
    assert not store.exists('lang-fr')


def test_directory_resources_default_to_working_directory(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / 'lang-en.json').write_text('{}', encoding='utf-8')
    assert DirectoryResources().path('lang-en') == tmp_path.resolve() / 'lang-en.json'


def test_package_resources_find_bundled_files():
    store = PackageResources()
    assert store.exists('lang-en')
    assert b'"hello"' in store.lookup('lang-en')
    assert store.lookup('lang-xx') is None


def test_package_resources_missing_package():
    store = PackageResources('localize_no_such_package')
    assert not store.exists('lang-en')
    assert store.lookup('lang-en') is None


def test_json_preference_store_round_trip(tmp_path: Path):
    path = tmp_path / 'prefs' / 'prefs.json'
    store = JsonPreferenceStore(path)
    assert store.get('language') is None
    store.set('language', 'es')
    assert JsonPreferenceStore(path).get('language') == 'es'
    store.remove('language')
    assert store.get('language') is None


def test_json_preference_store_ignores_corrupt_file(tmp_path: Path):
    path = tmp_path / 'prefs.json'
    path.write_text('{broken', encoding='utf-8')
    store = JsonPreferenceStore(path)
    assert store.get('language') is None
    store.set('language', 'fr')
    assert store.get('language') == 'fr'


def test_qsettings_preference_store_round_trip(tmp_path: Path):
    ini = str(tmp_path / 'settings.ini')
    settings = QtCore.QSettings(ini, QtCore.QSettings.Format.IniFormat)
    store = QSettingsPreferenceStore(settings)
    assert store.get('localize.language') is None
    store.set('localize.language', 'de')

    reopened = QSettingsPreferenceStore(QtCore.QSettings(ini, QtCore.QSettings.Format.IniFormat))
    assert reopened.get('localize.language') == 'de'
    reopened.remove('localize.language')
    assert reopened.get('localize.language') is None


def test_cldr_locale_names_use_active_language():
    names = CldrLocaleNames()
    assert names.display_name('en', 'es') == 'Spanish'
    assert names.display_name('es', 'fr') == 'francés'
    assert names.display_name('es-ES', 'es') == 'español'
    assert names.display_name('de', 'en') == 'Englisch'


def test_cldr_locale_names_unknown_codes():
    names = CldrLocaleNames()
    assert names.display_name('en', '!!') is None
    assert names.display_name('xx', 'es') is None
    assert names.display_name('', 'es') is None


def test_system_language_is_a_primary_subtag():
    language = system_language()
    assert isinstance(language, str)
    assert '-' not in language
    assert '_' not in language
