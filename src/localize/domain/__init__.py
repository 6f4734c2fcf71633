from .errors import DictionaryError
from .languages import SUPPORTED_LANGUAGES, LanguageCode, parse_language
from .models import (
    DEFAULT_FILE_NAME,
    Leaf,
    LocalizationDictionary,
    LocalizeConfig,
    Node,
    Value,
    resource_name,
)

__all__ = [
    'DEFAULT_FILE_NAME',
    'DictionaryError',
    'LanguageCode',
    'Leaf',
    'LocalizationDictionary',
    'LocalizeConfig',
    'Node',
    'SUPPORTED_LANGUAGES',
    'Value',
    'parse_language',
    'resource_name',
]
