"""
Locale-aware formatting for errortext.

Provides locale-specific formatting for:
- Lists joined with a localized conjunction ("a, b or c")
- Long-form dates ("January 1st, 2020", "1. januar 2020")

Dates are rendered from compiled-in month names and ordinal rules rather
than the process locale, so output does not depend on the host.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Any

from errortext.errors import UnsupportedLanguage
from errortext.i18n.languages import Language, resolve_language

# Language-specific formatting configurations
LOCALE_CONFIGS: dict[Language, dict[str, Any]] = {
    Language.ENGLISH: {
        "conjunction": "or",
        "list_separator": ", ",
        "months": (
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ),
        # 1st, 2nd, 3rd, 4th ... 11th, 12th, 13th ... 21st
        "ordinal_suffixes": {1: "st", 2: "nd", 3: "rd"},
        "ordinal_default": "th",
        "long_date": "{month} {ordinal}, {year}",
    },
    Language.NORWEGIAN: {
        "conjunction": "eller",
        "list_separator": ", ",
        "months": (
            "januar",
            "februar",
            "mars",
            "april",
            "mai",
            "juni",
            "juli",
            "august",
            "september",
            "oktober",
            "november",
            "desember",
        ),
        "ordinal_suffixes": {},
        "ordinal_default": ".",
        "long_date": "{ordinal} {month} {year}",
    },
}


def join_list(items: Iterable[str], conjunction: str, separator: str = ", ") -> str:
    """
    Join items into a grammatical enumeration.

    The input is read, never modified.

    Args:
        items: Strings to join, in order
        conjunction: Word placed before the last item (e.g., "or")
        separator: Separator between the other items

    Returns:
        "a" for one item, "a or b" for two, "a, b or c" for three or more

    Raises:
        ValueError: If items is empty
    """
    values = list(items)
    if not values:
        raise ValueError("Cannot join an empty list")
    if len(values) == 1:
        return values[0]
    return f"{separator.join(values[:-1])} {conjunction} {values[-1]}"


class LocaleFormatter:
    """
    Provides locale-aware formatting for a single language.
    """

    def __init__(self, language: Language | str = Language.ENGLISH):
        """
        Initialize the formatter with a language.

        Args:
            language: Language or language code (defaults to English)

        Raises:
            UnsupportedLanguage: If the language has no formatting rules
        """
        self._language = self._validate(language)

    @staticmethod
    def _validate(language: Language | str) -> Language:
        lang = resolve_language(language)
        if lang not in LOCALE_CONFIGS:
            raise UnsupportedLanguage(f"No formatting rules for language: {lang.value}")
        return lang

    @property
    def language(self) -> Language:
        """Get the current language."""
        return self._language

    @language.setter
    def language(self, value: Language | str) -> None:
        """Set the language."""
        self._language = self._validate(value)

    def _get_config(self) -> dict[str, Any]:
        """Get the locale configuration for the current language."""
        return LOCALE_CONFIGS[self._language]

    def format_list(self, items: Iterable[str]) -> str:
        """
        Join items with the language's conjunction.

        Args:
            items: Strings to join, in order

        Returns:
            Enumeration such as "valid.com, valid.no or also.valid.com"
        """
        config = self._get_config()
        return join_list(items, config["conjunction"], config["list_separator"])

    def format_ordinal(self, day: int) -> str:
        """Format a day of the month as an ordinal (1st, 22nd, 1.)."""
        config = self._get_config()
        suffixes = config["ordinal_suffixes"]
        default = config["ordinal_default"]

        # 11th, 12th, 13th
        if 11 <= day % 100 <= 13:
            return f"{day}{default}"
        return f"{day}{suffixes.get(day % 10, default)}"

    def format_long_date(self, value: date) -> str:
        """
        Format a date in the language's long form.

        Only the calendar fields are read; no time zone conversion is done.

        Args:
            value: date or datetime to format

        Returns:
            Formatted date string (e.g., "January 1st, 2020")
        """
        config = self._get_config()
        return config["long_date"].format(
            month=config["months"][value.month - 1],
            ordinal=self.format_ordinal(value.day),
            year=value.year,
        )


def format_list(items: Iterable[str], language: Language | str) -> str:
    """Join items with the conjunction of the given language."""
    return LocaleFormatter(language).format_list(items)


def format_long_date(value: date, language: Language | str) -> str:
    """Format a long-form date in the given language."""
    return LocaleFormatter(language).format_long_date(value)
