"""
Translation tables for errortext.

Each supported language has one Translations record holding an entry per
error kind: a fixed string or a function of the error's payload. Every
field is required, so a table that misses a kind fails at import.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from errortext.errors import InvalidEmailDomain, InvalidWeekday, TooLateToAppologize
from errortext.i18n.formatter import LocaleFormatter
from errortext.i18n.languages import Language

_english = LocaleFormatter(Language.ENGLISH)
_norwegian = LocaleFormatter(Language.NORWEGIAN)


@dataclass(frozen=True)
class Translations:
    """Renderers for every error kind in one language."""

    general_error: str
    invalid_weekday: Callable[[InvalidWeekday], str]
    invalid_email_domain: Callable[[InvalidEmailDomain], str]
    too_late_to_appologize: Callable[[TooLateToAppologize], str]


ENGLISH = Translations(
    general_error="An error has occurred",
    invalid_weekday=lambda error: f'"{error.weekday}" is not a valid weekday',
    invalid_email_domain=lambda error: (
        f"The email address {error.email} must have domain "
        f"{_english.format_list(error.valid_domains)}"
    ),
    too_late_to_appologize=lambda error: (
        f"It's too late to appologize on {_english.format_long_date(error.date)}"
    ),
)

NORWEGIAN = Translations(
    general_error="En feil har oppstått",
    invalid_weekday=lambda error: f'"{error.weekday}" er ikke en gyldig ukedag',
    invalid_email_domain=lambda error: (
        f"E-postadressen {error.email} må ha domene "
        f"{_norwegian.format_list(error.valid_domains)}"
    ),
    too_late_to_appologize=lambda error: (
        f"Det er for sent å beklage på {_norwegian.format_long_date(error.date)}"
    ),
)

TRANSLATIONS: dict[Language, Translations] = {
    Language.ENGLISH: ENGLISH,
    Language.NORWEGIAN: NORWEGIAN,
}
