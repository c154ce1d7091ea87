"""
errortext: localized messages for tagged error values.

Usage:
    from errortext import InvalidEmailDomain, render

    render("en", InvalidEmailDomain(email="test@invalid.now", valid_domains=["valid.com"]))
"""

from errortext.errors import (
    ErrorKind,
    ErrorTextError,
    ErrorVariant,
    GeneralError,
    InvalidEmailDomain,
    InvalidErrorPayload,
    InvalidWeekday,
    TooLateToAppologize,
    UnknownErrorKind,
    UnsupportedLanguage,
    error_from_dict,
)
from errortext.i18n import Language, Translator, render

__all__ = [
    "render",
    "Translator",
    "Language",
    # Error values
    "ErrorKind",
    "ErrorVariant",
    "GeneralError",
    "InvalidWeekday",
    "InvalidEmailDomain",
    "TooLateToAppologize",
    "error_from_dict",
    # Exceptions
    "ErrorTextError",
    "UnsupportedLanguage",
    "UnknownErrorKind",
    "InvalidErrorPayload",
]
