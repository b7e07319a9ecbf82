"""
Unit Tests for HandlerMetadata and HandlerDescriptor.

Test Aspects Covered:
    ✅ Business Logic: Argument construction for typed and catch-all handlers
    ✅ Edge Cases: Surplus arguments dropped, missing arguments left as None
    ✅ State: Immutability of metadata
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recovery_resolver.domain.metadata import (
    HandlerDescriptor,
    HandlerMetadata,
    PrimaryOperation,
)


def lookup(error: Exception, key: str) -> str:
    return key


class TestGetArgs:
    """Test cases for building the handler argument list."""

    def test_exception_goes_first(self) -> None:
        """
        SCENARIO: Typed handler with arg_count 3, original args [a, b]
        EXPECTED: [exception, a, b]
        """
        # Arrange
        meta = HandlerMetadata(arg_count=3, exception_type=ValueError, name="h")
        error = ValueError("boom")

        # Act
        result = meta.get_args(error, ["a", "b"])

        # Assert
        assert result == [error, "a", "b"]

    def test_catch_all_copies_from_start(self) -> None:
        """
        SCENARIO: Catch-all handler with arg_count 2, original args [a, b]
        EXPECTED: [a, b]
        """
        meta = HandlerMetadata(arg_count=2, exception_type=None, name="h")

        result = meta.get_args(ValueError(), ["a", "b"])

        assert result == ["a", "b"]

    def test_surplus_arguments_dropped(self) -> None:
        """
        SCENARIO: Catch-all handler with arg_count 1, original args [a, b]
        EXPECTED: [a]
        """
        meta = HandlerMetadata(arg_count=1, exception_type=None, name="h")

        result = meta.get_args(ValueError(), ["a", "b"])

        assert result == ["a"]

    def test_missing_arguments_stay_none(self) -> None:
        """
        SCENARIO: Handler declares more slots than there are arguments
        EXPECTED: Trailing slots are None
        """
        meta = HandlerMetadata(arg_count=4, exception_type=KeyError, name="h")
        error = KeyError("k")

        result = meta.get_args(error, ["a"])

        assert result == [error, "a", None, None]

    def test_exception_only_handler(self) -> None:
        """
        SCENARIO: Handler takes only the exception, original args [a]
        EXPECTED: [exception]
        """
        meta = HandlerMetadata(arg_count=1, exception_type=KeyError, name="h")
        error = KeyError("k")

        assert meta.get_args(error, ["a"]) == [error]

    def test_zero_arg_handler(self) -> None:
        """
        SCENARIO: Catch-all with no parameters
        EXPECTED: Empty list
        """
        meta = HandlerMetadata(arg_count=0, exception_type=None, name="h")

        assert meta.get_args(ValueError(), ["a", "b"]) == []


class TestHandlerMetadata:
    """Test cases for metadata validation."""

    def test_frozen(self) -> None:
        """
        SCENARIO: Attempt to change a field
        EXPECTED: ValidationError (model is frozen)
        """
        meta = HandlerMetadata(arg_count=1, name="h")

        with pytest.raises(ValidationError):
            meta.arg_count = 2

    def test_negative_arg_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            HandlerMetadata(arg_count=-1, name="h")

    def test_is_default(self) -> None:
        assert HandlerMetadata(arg_count=1, name="h").is_default
        assert not HandlerMetadata(arg_count=1, exception_type=OSError, name="h").is_default


class TestHandlerDescriptor:
    """Test cases for descriptor naming and identity."""

    def test_logical_name_defaults_to_identifier(self) -> None:
        descriptor = HandlerDescriptor(handler=lookup, parameter_types=(Exception, str))

        assert descriptor.identifier == "lookup"
        assert descriptor.logical_name == "lookup"

    def test_explicit_name_wins(self) -> None:
        descriptor = HandlerDescriptor(handler=lookup, name="cached")

        assert descriptor.logical_name == "cached"

    def test_equal_declarations_are_equal(self) -> None:
        """
        SCENARIO: Same handler described twice with the same declaration
        EXPECTED: Descriptors compare and hash equal
        """
        first = HandlerDescriptor(handler=lookup, parameter_types=(Exception, str), return_type=str)
        second = HandlerDescriptor(handler=lookup, parameter_types=(Exception, str), return_type=str)

        assert first == second
        assert len({first, second}) == 1

    def test_to_dict(self) -> None:
        descriptor = HandlerDescriptor(
            handler=lookup, parameter_types=(Exception, str), return_type=str
        )

        assert descriptor.to_dict() == {
            "handler": "lookup",
            "name": "lookup",
            "parameter_types": ["Exception", "str"],
            "return_type": "str",
        }


class TestPrimaryOperation:
    def test_preferred_handler_flag(self) -> None:
        assert PrimaryOperation("fetch", str, "cached").has_preferred_handler
        assert not PrimaryOperation("fetch", str).has_preferred_handler
