from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from localize.domain import LocalizeConfig, parse_language
from localize.infrastructure.fs.atomic_write import atomic_write_text

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'file_name': 'lang',
    'default_language': 'en',
    'testing': False,
}


def _read_json(path: Path) -> dict[str, Any] | None:
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except (OSError, ValueError) as exc:
        log.warning('Cannot read %s: %s', path, exc)
        return None
    if not isinstance(data, dict):
        log.warning('Ignoring %s: expected a JSON object', path)
        return None
    return data


def load_config(path: Path) -> LocalizeConfig:
    cfg = DEFAULT_CONFIG.copy()
    data = _read_json(path)
    if data:
        cfg.update({k: v for k, v in data.items() if k in cfg})

    file_name = cfg['file_name'] if isinstance(cfg['file_name'], str) and cfg['file_name'] else DEFAULT_CONFIG['file_name']
    default_language = parse_language(cfg['default_language']) or parse_language(DEFAULT_CONFIG['default_language'])
    return LocalizeConfig(
        file_name=file_name,
        default_language=default_language,
        testing=bool(cfg['testing']),
    )


def save_config(path: Path, config: LocalizeConfig) -> None:
    payload = {
        'file_name': config.file_name,
        'default_language': config.default_language.value,
        'testing': config.testing,
    }
    atomic_write_text(path, json.dumps(payload, ensure_ascii=False, indent=2))


class JsonPreferenceStore:
    """String preferences kept in a small JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        data = _read_json(self._path) or {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        try:
            atomic_write_text(self._path, json.dumps(data, ensure_ascii=False, indent=2))
        except OSError as exc:
            log.warning('Cannot write preferences to %s: %s', self._path, exc)

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)
