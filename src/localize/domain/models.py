from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from localize.domain.languages import LanguageCode


DEFAULT_FILE_NAME = 'lang'


@dataclass(frozen=True)
class Leaf:
    text: str


@dataclass(frozen=True)
class Node:
    entries: Mapping[str, 'Value'] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mapping so a parsed dictionary cannot change under the cache.
        object.__setattr__(self, 'entries', MappingProxyType(dict(self.entries)))

    def get(self, key: str) -> 'Value | None':
        return self.entries.get(key)

    def __len__(self) -> int:
        return len(self.entries)


Value = Union[Leaf, Node]
LocalizationDictionary = Node


@dataclass(frozen=True)
class LocalizeConfig:
    file_name: str = DEFAULT_FILE_NAME
    default_language: LanguageCode = LanguageCode.ENGLISH
    testing: bool = False


def resource_name(file_name: str, language: LanguageCode | str) -> str:
    return f'{file_name}-{language}'
