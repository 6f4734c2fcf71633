from __future__ import annotations

import json
import re
from typing import Any, Mapping, Sequence

from localize.domain.errors import DictionaryError
from localize.domain.models import Leaf, LocalizationDictionary, Node, Value

PATH_SEPARATOR = '.'
PLACEHOLDER = '%'
TOKEN_PREFIX = ':'


def parse_dictionary(raw: bytes) -> LocalizationDictionary:
    try:
        data = json.loads(raw.decode('utf-8-sig'))
        if not isinstance(data, dict):
            raise DictionaryError('dictionary_not_object', type(data).__name__)
        return _to_node(data)
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise DictionaryError('dictionary_invalid_json', str(exc)) from exc


def _to_node(data: dict[str, Any]) -> Node:
    entries: dict[str, Value] = {}
    for key, value in data.items():
        if isinstance(value, str):
            entries[key] = Leaf(value)
        elif isinstance(value, dict):
            entries[key] = _to_node(value)
        # numbers, booleans, arrays and null are not translatable text
    return Node(entries)


def lookup_flat(dictionary: LocalizationDictionary, key: str) -> str | None:
    value = dictionary.get(key)
    if isinstance(value, Leaf):
        return value.text
    return None


def lookup_path(dictionary: LocalizationDictionary, key: str) -> str | None:
    current: Value = dictionary
    for segment in key.split(PATH_SEPARATOR):
        if not isinstance(current, Node):
            return None
        child = current.get(segment)
        if child is None:
            return None
        current = child
    if isinstance(current, Leaf):
        return current.text
    return None


def resolve(dictionary: LocalizationDictionary, key: str) -> str | None:
    """Exact flat key first, then the dot path."""
    found = lookup_flat(dictionary, key)
    if found is not None:
        return found
    return lookup_path(dictionary, key)


def primary_subtag(locale_name: str) -> str:
    """'en-US' -> 'en', 'pt_BR' -> 'pt'."""
    return re.split(r'[-_]', locale_name, maxsplit=1)[0]


def replace_single(text: str, replace: str) -> str:
    return text.replace(PLACEHOLDER, replace)


def replace_values(text: str, values: Sequence[Any]) -> str:
    """Fill each ``%`` in order.

    Extra values are ignored. Missing values drop the remaining ``%`` marks
    and keep the literal text around them.
    """
    segments = text.split(PLACEHOLDER)
    slots = len(segments) - 1
    parts: list[str] = []
    for index, segment in enumerate(segments):
        parts.append(segment)
        if index < slots and index < len(values):
            parts.append(str(values[index]))
    return ''.join(parts)


def replace_named(text: str, replacements: Mapping[str, str]) -> str:
    """Replace ``:name`` tokens in a single pass.

    Inserted values are never scanned again, so a value that contains another
    token stays as given. When tokens overlap, the earlier mapping entry wins.
    """
    if not replacements:
        return text
    lookup = {f'{TOKEN_PREFIX}{name}': str(value) for name, value in replacements.items()}
    pattern = re.compile('|'.join(re.escape(token) for token in lookup))
    return pattern.sub(lambda match: lookup[match.group(0)], text)
