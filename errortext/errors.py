"""
Error taxonomy for errortext.

Defines:
- The closed set of error kinds (ErrorKind) and one frozen dataclass per kind
- Construction of error values from tagged mappings
- The exceptions raised when a language or error kind cannot be rendered

Usage:
    from errortext.errors import InvalidWeekday, error_from_dict

    error = InvalidWeekday(weekday="HappyDay")
    error = error_from_dict({"code": "invalidWeekday", "weekday": "HappyDay"})
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar, Union


class ErrorTextError(Exception):
    """Base class for errortext failures."""


class UnsupportedLanguage(ErrorTextError, ValueError):
    """Raised when a language has no translation table."""


class UnknownErrorKind(ErrorTextError, LookupError):
    """Raised when an error value is not one of the known kinds."""


class InvalidErrorPayload(ErrorTextError, ValueError):
    """Raised when an error payload is missing fields or malformed."""


class ErrorKind(str, Enum):
    """Discriminant values of the error taxonomy."""

    GENERAL_ERROR = "generalError"
    INVALID_WEEKDAY = "invalidWeekday"
    INVALID_EMAIL_DOMAIN = "invalidEmailDomain"
    TOO_LATE_TO_APPOLOGIZE = "tooLateToAppologize"


@dataclass(frozen=True)
class GeneralError:
    """Something went wrong; carries no details."""

    kind: ClassVar[ErrorKind] = ErrorKind.GENERAL_ERROR


@dataclass(frozen=True)
class InvalidWeekday:
    """A weekday name that was not accepted."""

    weekday: str

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_WEEKDAY


@dataclass(frozen=True)
class InvalidEmailDomain:
    """
    An email address whose domain is not one of the allowed domains.

    valid_domains is stored as a tuple; the caller's sequence is copied and
    never referenced afterwards. At least one domain is required.
    """

    email: str
    valid_domains: tuple[str, ...]

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_EMAIL_DOMAIN

    def __post_init__(self) -> None:
        if isinstance(self.valid_domains, str):
            raise InvalidErrorPayload("valid_domains must be a sequence of strings, not a string")
        try:
            domains = tuple(self.valid_domains)
        except TypeError:
            raise InvalidErrorPayload("valid_domains must be a sequence of strings") from None
        if not domains:
            raise InvalidErrorPayload("valid_domains must contain at least one domain")
        if not all(isinstance(domain, str) for domain in domains):
            raise InvalidErrorPayload("valid_domains must only contain strings")
        object.__setattr__(self, "valid_domains", domains)


@dataclass(frozen=True)
class TooLateToAppologize:
    """An apology attempted after the given date."""

    date: date

    kind: ClassVar[ErrorKind] = ErrorKind.TOO_LATE_TO_APPOLOGIZE

    def __post_init__(self) -> None:
        if not isinstance(self.date, date):
            raise InvalidErrorPayload(f"date must be a date or datetime, not {type(self.date).__name__}")


ErrorVariant = Union[GeneralError, InvalidWeekday, InvalidEmailDomain, TooLateToAppologize]

# One class per kind; kept in ErrorKind order
ERROR_TYPES: dict[ErrorKind, type] = {
    ErrorKind.GENERAL_ERROR: GeneralError,
    ErrorKind.INVALID_WEEKDAY: InvalidWeekday,
    ErrorKind.INVALID_EMAIL_DOMAIN: InvalidEmailDomain,
    ErrorKind.TOO_LATE_TO_APPOLOGIZE: TooLateToAppologize,
}


def _require(data: Mapping[str, Any], field: str, code: str) -> Any:
    if field not in data or data[field] is None:
        raise InvalidErrorPayload(f"Error '{code}' is missing required field '{field}'")
    return data[field]


def _parse_date(value: Any) -> date:
    """
    Accept a date, a datetime or an ISO-8601 string.

    Strings are parsed as given; no time zone conversion is applied, so
    "2020-01-01" stays January 1st regardless of the host.
    """
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            if "T" in value or " " in value.strip():
                return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidErrorPayload(f"Invalid date value: {value!r}") from e
    raise InvalidErrorPayload(f"Invalid date value: {value!r}")


def error_from_dict(data: Mapping[str, Any]) -> ErrorVariant:
    """
    Build an error value from a tagged mapping.

    The discriminant is read from "code" (or "kind"); payload keys use the
    camelCase names of the wire form, e.g. "validDomains".

    Args:
        data: Mapping such as {"code": "invalidWeekday", "weekday": "HappyDay"}

    Returns:
        The matching error dataclass instance

    Raises:
        UnknownErrorKind: If the discriminant is not a known kind
        InvalidErrorPayload: If a required payload field is missing
    """
    code = data.get("code", data.get("kind"))
    try:
        kind = ErrorKind(code)
    except ValueError:
        raise UnknownErrorKind(f"Unknown error code: {code!r}") from None

    if kind is ErrorKind.GENERAL_ERROR:
        return GeneralError()
    if kind is ErrorKind.INVALID_WEEKDAY:
        return InvalidWeekday(weekday=str(_require(data, "weekday", code)))
    if kind is ErrorKind.INVALID_EMAIL_DOMAIN:
        domains = _require(data, "validDomains", code)
        if isinstance(domains, str) or not isinstance(domains, Iterable):
            raise InvalidErrorPayload("validDomains must be a list of strings")
        return InvalidEmailDomain(
            email=str(_require(data, "email", code)),
            valid_domains=tuple(str(domain) for domain in domains),
        )
    if kind is ErrorKind.TOO_LATE_TO_APPOLOGIZE:
        return TooLateToAppologize(date=_parse_date(_require(data, "date", code)))

    raise UnknownErrorKind(f"Unknown error code: {code!r}")
