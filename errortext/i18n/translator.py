"""
Error message rendering for errortext.

Provides:
- render(): the dispatcher from (language, error) to a message
- Translator: a language-bound renderer with a debug mode
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, NoReturn

from errortext.errors import (
    ErrorVariant,
    GeneralError,
    InvalidEmailDomain,
    InvalidWeekday,
    TooLateToAppologize,
    UnknownErrorKind,
    UnsupportedLanguage,
    error_from_dict,
)
from errortext.i18n.languages import DEFAULT_LANGUAGE, Language, resolve_language
from errortext.i18n.translations import TRANSLATIONS, Translations

logger = logging.getLogger(__name__)


def _unknown_kind(error: NoReturn) -> NoReturn:
    """
    Fail on an error outside the known kinds.

    Typed NoReturn so type checkers flag a render() match that misses a kind.
    """
    kind = getattr(error, "kind", type(error).__name__)
    logger.debug("No renderer for error kind %r", kind)
    raise UnknownErrorKind(f"Unknown error code: {kind}")


def get_translations(language: Language | str) -> Translations:
    """
    Get the translation table for a language.

    Raises:
        UnsupportedLanguage: If the language has no translation table
    """
    lang = resolve_language(language)
    try:
        return TRANSLATIONS[lang]
    except KeyError:
        raise UnsupportedLanguage(f"No translations for language: {lang.value}") from None


def render(language: Language | str, error: ErrorVariant) -> str:
    """
    Render an error as a message in the given language.

    Args:
        language: Language or language code (e.g., 'en', 'no')
        error: One of the error dataclasses from errortext.errors

    Returns:
        The localized message

    Raises:
        UnsupportedLanguage: If the language has no translation table
        UnknownErrorKind: If error is not one of the known error kinds

    Examples:
        >>> render("en", InvalidWeekday(weekday="HappyDay"))
        '"HappyDay" is not a valid weekday'
    """
    translations = get_translations(language)

    match error:
        case GeneralError():
            return translations.general_error
        case InvalidWeekday():
            return translations.invalid_weekday(error)
        case InvalidEmailDomain():
            return translations.invalid_email_domain(error)
        case TooLateToAppologize():
            return translations.too_late_to_appologize(error)
        case _:
            _unknown_kind(error)


class Translator:
    """
    Renders errors in one language.

    Features:
    - Validates the language on construction and assignment
    - Renders error dataclasses or tagged mappings
    - Supports debug mode to show error kinds instead of messages
    """

    def __init__(self, language: Language | str = DEFAULT_LANGUAGE, debug: bool = False):
        """
        Initialize the translator.

        Args:
            language: Language or language code (e.g., 'en', 'no')
            debug: If True, show error kinds instead of translated text

        Raises:
            UnsupportedLanguage: If the language is not supported
        """
        self._language = self._validate(language)
        self._debug = debug

    @staticmethod
    def _validate(language: Language | str) -> Language:
        lang = resolve_language(language)
        get_translations(lang)
        return lang

    @property
    def language(self) -> Language:
        """Get the current language."""
        return self._language

    @language.setter
    def language(self, value: Language | str) -> None:
        """
        Set the current language.

        Raises:
            UnsupportedLanguage: If language is not supported
        """
        self._language = self._validate(value)

    @property
    def debug(self) -> bool:
        """Get debug mode status."""
        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        """Set debug mode."""
        self._debug = value

    def translate(self, error: ErrorVariant) -> str:
        """
        Render an error in this translator's language.

        In debug mode the bracketed error kind is returned instead, e.g.
        "[invalidWeekday]". The error is rendered either way, so unknown
        kinds still raise.

        Raises:
            UnknownErrorKind: If error is not one of the known error kinds
        """
        message = render(self._language, error)
        if self._debug:
            return f"[{error.kind.value}]"
        return message

    def translate_dict(self, data: Mapping[str, Any]) -> str:
        """
        Render a tagged mapping such as {"code": "generalError"}.

        Raises:
            UnknownErrorKind: If the code is not a known error kind
            InvalidErrorPayload: If a required field is missing
        """
        return self.translate(error_from_dict(data))
