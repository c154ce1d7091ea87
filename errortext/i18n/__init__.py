"""
Internationalization (i18n) for errortext.

Provides:
- Per-language translation tables for every error kind
- Language resolution from codes, locale strings and names
- Locale-aware list joining and long-date formatting

Usage:
    from errortext.i18n import Translator, render

    render("no", GeneralError())
    Translator("en").translate(InvalidWeekday(weekday="HappyDay"))

Supported languages:
    - en: English (default)
    - no: Norwegian
"""

from errortext.i18n.formatter import LocaleFormatter, format_list, format_long_date, join_list
from errortext.i18n.languages import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    Language,
    get_language_info,
    get_supported_languages,
    resolve_language,
)
from errortext.i18n.translations import TRANSLATIONS, Translations
from errortext.i18n.translator import Translator, get_translations, render

__all__ = [
    # Rendering
    "render",
    "Translator",
    "get_translations",
    "Translations",
    "TRANSLATIONS",
    # Languages
    "Language",
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "resolve_language",
    "get_language_info",
    "get_supported_languages",
    # Formatting
    "LocaleFormatter",
    "join_list",
    "format_list",
    "format_long_date",
]
