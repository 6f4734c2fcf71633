from __future__ import annotations

import sys
from importlib import resources
from pathlib import Path
from typing import Iterable, Protocol


RESOURCE_EXTENSION = '.json'
TEST_RESOURCE_PACKAGE = 'localize.resources'


class ResourceStore(Protocol):
    def lookup(self, name: str) -> bytes | None: ...

    def exists(self, name: str) -> bool: ...


def get_app_root() -> Path:
    """Directory holding the running application.

    When frozen (PyInstaller): the directory containing the executable.
    Otherwise: the current working directory.
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).resolve().parent
    return Path.cwd()


class DirectoryResources:
    """Main resource bundle: ``<name>.json`` searched across candidate roots."""

    def __init__(self, roots: Iterable[Path | str] | None = None) -> None:
        if roots is None:
            roots = [get_app_root()]
        self._roots = [Path(root) for root in roots]

    def path(self, name: str) -> Path | None:
        filename = f'{name}{RESOURCE_EXTENSION}'
        for root in self._roots:
            candidate = root / filename
            if candidate.is_file():
                return candidate
        return None

    def exists(self, name: str) -> bool:
        return self.path(name) is not None

    def lookup(self, name: str) -> bytes | None:
        path = self.path(name)
        if path is None:
            return None
        return path.read_bytes()


class PackageResources:
    """Resources shipped inside an importable package."""

    def __init__(self, package: str = TEST_RESOURCE_PACKAGE) -> None:
        self._package = package

    def _resource(self, name: str):
        return resources.files(self._package).joinpath(f'{name}{RESOURCE_EXTENSION}')

    def exists(self, name: str) -> bool:
        try:
            return self._resource(name).is_file()
        except ModuleNotFoundError:
            return False

    def lookup(self, name: str) -> bytes | None:
        if not self.exists(name):
            return None
        return self._resource(name).read_bytes()
