"""Tests for domain exceptions and error codes."""

from galfin.domain.shared.exceptions import (
    DataSourceError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class TestErrorCode:
    def test_codes_in_use(self):
        assert {code.value for code in ErrorCode} == {
            "VALIDATION_ERROR",
            "INVALID_DATE_RANGE",
            "INVALID_BUDGET_CONFIGURATION",
            "ENTITY_NOT_FOUND",
            "CATEGORY_NOT_FOUND",
            "BUDGET_NOT_FOUND",
            "DATA_SOURCE_UNAVAILABLE",
            "DATA_SOURCE_MALFORMED",
            "INTERNAL_ERROR",
        }


class TestDomainException:
    def test_defaults(self):
        error = DomainException("Something broke")

        assert str(error) == "Something broke"
        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {}

    def test_subclass_default_codes(self):
        assert ValidationError("x").code == ErrorCode.VALIDATION_ERROR
        assert EntityNotFoundError("x").code == ErrorCode.ENTITY_NOT_FOUND
        assert DataSourceError("x").code == ErrorCode.DATA_SOURCE_UNAVAILABLE

    def test_repr_includes_code_and_details(self):
        error = EntityNotFoundError(
            "Missing",
            ErrorCode.CATEGORY_NOT_FOUND,
            details={"category": "Pets"},
        )

        assert repr(error) == (
            "EntityNotFoundError(message='Missing', "
            "code='CATEGORY_NOT_FOUND', details={'category': 'Pets'})"
        )
