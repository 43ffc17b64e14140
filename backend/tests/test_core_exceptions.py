"""
Tests for app/core/exceptions.py - domain exceptions.
"""
import pytest

from app.core.exceptions import (
    DomainException,
    EntityNotFoundException,
    InvalidEntityStateException,
)


class TestEntityNotFoundException:

    def test_message_and_attributes(self):
        exc = EntityNotFoundException("Employee", 12)

        assert str(exc) == 'Entity "Employee" (12) was not found.'
        assert exc.entity_name == "Employee"
        assert exc.entity_id == 12

    def test_is_domain_exception(self):
        with pytest.raises(DomainException):
            raise EntityNotFoundException("Department", 3)


class TestInvalidEntityStateException:

    def test_errors_are_kept_in_order(self):
        exc = InvalidEntityStateException("Employee", 5, ["first", "second"])

        assert exc.errors == ("first", "second")
        assert exc.entity_id == 5
        assert "Employee" in exc.message

    def test_errors_default_to_empty(self):
        assert InvalidEntityStateException("Employee", 5).errors == ()

    def test_from_message(self):
        exc = InvalidEntityStateException.from_message("Payroll period is closed")

        assert exc.message == "Payroll period is closed"
        assert str(exc) == "Payroll period is closed"
        assert exc.entity_name == ""
        assert exc.errors == ()
