"""
Tests for the error taxonomy

Covers error kinds, payload validation and tagged-mapping parsing.
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from errortext.errors import (
    ERROR_TYPES,
    ErrorKind,
    ErrorTextError,
    GeneralError,
    InvalidEmailDomain,
    InvalidErrorPayload,
    InvalidWeekday,
    TooLateToAppologize,
    UnknownErrorKind,
    UnsupportedLanguage,
    error_from_dict,
)


class TestErrorKind:
    """Tests for ErrorKind enum."""

    def test_error_kinds(self):
        """Test all error kinds are defined."""
        assert ErrorKind.GENERAL_ERROR.value == "generalError"
        assert ErrorKind.INVALID_WEEKDAY.value == "invalidWeekday"
        assert ErrorKind.INVALID_EMAIL_DOMAIN.value == "invalidEmailDomain"
        assert ErrorKind.TOO_LATE_TO_APPOLOGIZE.value == "tooLateToAppologize"

    def test_every_kind_has_a_type(self):
        """Test each kind maps to a class carrying that kind."""
        assert set(ERROR_TYPES) == set(ErrorKind)
        for kind, error_type in ERROR_TYPES.items():
            assert error_type.kind is kind


class TestErrorValues:
    """Tests for the error dataclasses."""

    def test_errors_are_frozen(self):
        """Test error values cannot be modified."""
        error = InvalidWeekday(weekday="HappyDay")
        with pytest.raises(FrozenInstanceError):
            error.weekday = "Monday"

    def test_email_domains_copied_to_tuple(self):
        """Test the caller's list is copied."""
        domains = ["valid.com", "valid.no"]
        error = InvalidEmailDomain(email="test@invalid.now", valid_domains=domains)

        domains.append("late.com")

        assert error.valid_domains == ("valid.com", "valid.no")

    def test_equal_errors_compare_equal(self):
        """Test value equality for list and tuple input."""
        first = InvalidEmailDomain(email="a@b.c", valid_domains=["valid.com"])
        second = InvalidEmailDomain(email="a@b.c", valid_domains=("valid.com",))
        assert first == second
        assert hash(first) == hash(second)

    def test_empty_domains_rejected(self):
        """Test at least one valid domain is required."""
        with pytest.raises(InvalidErrorPayload):
            InvalidEmailDomain(email="test@invalid.now", valid_domains=[])

    def test_string_domains_rejected(self):
        """Test a bare string is not split into characters."""
        with pytest.raises(InvalidErrorPayload):
            InvalidEmailDomain(email="test@invalid.now", valid_domains="valid.com")

    @pytest.mark.parametrize("domains", [[1, 2], ["valid.com", None], 5])
    def test_non_string_domains_rejected(self, domains):
        """Test every domain must be a string."""
        with pytest.raises(InvalidErrorPayload):
            InvalidEmailDomain(email="a@b", valid_domains=domains)

    @pytest.mark.parametrize("value", ["2020-01-01", 20200101, None])
    def test_non_date_rejected(self, value):
        """Test the date payload must be a date or datetime."""
        with pytest.raises(InvalidErrorPayload):
            TooLateToAppologize(date=value)

    def test_datetime_accepted(self):
        """Test a datetime is a valid date payload."""
        moment = datetime(2020, 1, 1, 12, 0)
        assert TooLateToAppologize(date=moment).date is moment

    def test_empty_weekday_allowed(self):
        """Test an empty weekday is kept as given."""
        assert InvalidWeekday(weekday="").weekday == ""


class TestErrorFromDict:
    """Tests for error_from_dict."""

    @pytest.mark.parametrize(
        "data,expected",
        [
            ({"code": "generalError"}, GeneralError()),
            ({"code": "invalidWeekday", "weekday": "HappyDay"}, InvalidWeekday(weekday="HappyDay")),
            (
                {
                    "code": "invalidEmailDomain",
                    "email": "test@invalid.now",
                    "validDomains": ["valid.com", "valid.no"],
                },
                InvalidEmailDomain(email="test@invalid.now", valid_domains=("valid.com", "valid.no")),
            ),
            (
                {"code": "tooLateToAppologize", "date": "2020-01-01"},
                TooLateToAppologize(date=date(2020, 1, 1)),
            ),
            ({"kind": "generalError"}, GeneralError()),
        ],
    )
    def test_parse(self, data, expected):
        """Test parsing each kind."""
        assert error_from_dict(data) == expected

    def test_parse_iso_datetime(self):
        """Test a UTC timestamp keeps its calendar fields."""
        error = error_from_dict({"code": "tooLateToAppologize", "date": "2020-01-01T00:00:00Z"})

        assert isinstance(error.date, datetime)
        assert (error.date.year, error.date.month, error.date.day) == (2020, 1, 1)

    def test_parse_date_object(self):
        """Test date values pass through."""
        value = date(2019, 6, 30)
        assert error_from_dict({"code": "tooLateToAppologize", "date": value}).date is value

    @pytest.mark.parametrize("code", ["unknownError", "", None, "GeneralError"])
    def test_unknown_code(self, code):
        """Test unknown discriminants raise UnknownErrorKind."""
        with pytest.raises(UnknownErrorKind):
            error_from_dict({"code": code})

    def test_missing_code(self):
        """Test a mapping without a discriminant."""
        with pytest.raises(UnknownErrorKind):
            error_from_dict({"weekday": "HappyDay"})

    @pytest.mark.parametrize(
        "data",
        [
            {"code": "invalidWeekday"},
            {"code": "invalidEmailDomain", "email": "a@b.c"},
            {"code": "invalidEmailDomain", "validDomains": ["valid.com"]},
            {"code": "invalidEmailDomain", "email": "a@b.c", "validDomains": []},
            {"code": "invalidEmailDomain", "email": "a@b.c", "validDomains": "valid.com"},
            {"code": "tooLateToAppologize"},
            {"code": "tooLateToAppologize", "date": "not a date"},
            {"code": "tooLateToAppologize", "date": 20200101},
        ],
    )
    def test_invalid_payload(self, data):
        """Test missing or malformed payload fields."""
        with pytest.raises(InvalidErrorPayload):
            error_from_dict(data)


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        """Test exceptions share a base and standard parents."""
        assert issubclass(UnsupportedLanguage, ErrorTextError)
        assert issubclass(UnsupportedLanguage, ValueError)
        assert issubclass(UnknownErrorKind, ErrorTextError)
        assert issubclass(UnknownErrorKind, LookupError)
        assert issubclass(InvalidErrorPayload, ErrorTextError)
        assert issubclass(InvalidErrorPayload, ValueError)
