from localize.application.localizer import LANGUAGE_CHANGE_NOTIFICATION, Localize
from localize.domain import SUPPORTED_LANGUAGES, LanguageCode, LocalizeConfig

__all__ = [
    'LANGUAGE_CHANGE_NOTIFICATION',
    'LanguageCode',
    'Localize',
    'LocalizeConfig',
    'SUPPORTED_LANGUAGES',
]

__version__ = '1.0.0'
