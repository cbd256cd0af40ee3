"""Unit tests for the operation failure taxonomy.

Tests cover:
- Message synthesis for direct construction
- handler_not_found / internal_handler_error / invalid_operation constructors
- Path-qualified violation rendering (constraints, children, bare header)
- Closed code sets and subclass-declared custom codes
- Immutability of failure attributes
"""

import pytest
from pydantic import BaseModel

from cqrs_factory.domain.errors import (
    CommandFailedError,
    CommandHandlerNotFoundError,
    ConstraintViolation,
    OperationErrorCode,
    OperationFailedError,
    QueryFailedError,
)


class TestCommand(BaseModel):
    __test__ = False


class TestQuery(BaseModel):
    __test__ = False


@pytest.mark.unit
class TestOperationFailedErrorConstructor:
    """Test direct construction."""

    def test_message_contains_operation_type_and_reason(self):
        """Test message is 'Operation "<type>" failed! <reason>'."""
        exception = CommandFailedError(
            OperationErrorCode.INTERNAL_HANDLER_ERROR,
            TestCommand(),
            "Test reason",
        )

        assert str(exception) == 'Operation "TestCommand" failed! Test reason'
        assert exception.message == str(exception)

    def test_query_message_contains_query_type(self):
        """Test query failures use the query's type name."""
        exception = QueryFailedError(
            OperationErrorCode.INTERNAL_HANDLER_ERROR,
            TestQuery(),
            "Test reason",
        )

        assert str(exception) == 'Operation "TestQuery" failed! Test reason'

    def test_exposes_code_operation_reason_and_orig_error(self):
        """Test attributes are kept as given."""
        operation = TestCommand()
        cause = ValueError("boom")

        exception = CommandFailedError(
            OperationErrorCode.HANDLER_NOT_FOUND, operation, "why", cause
        )

        assert exception.code == "HANDLER_NOT_FOUND"
        assert exception.operation is operation
        assert exception.reason == "why"
        assert exception.orig_error is cause

    def test_orig_error_defaults_to_none(self):
        """Test orig_error is optional."""
        exception = CommandFailedError(
            OperationErrorCode.HANDLER_NOT_FOUND, TestCommand(), "why"
        )

        assert exception.orig_error is None

    def test_attributes_are_read_only(self):
        """Test failure values are immutable once constructed."""
        exception = CommandFailedError(
            OperationErrorCode.HANDLER_NOT_FOUND, TestCommand(), "why"
        )

        with pytest.raises(AttributeError):
            exception.code = "OTHER"  # type: ignore[misc]

    def test_rejects_code_outside_closed_set(self):
        """Test unknown codes are refused."""
        with pytest.raises(ValueError, match="Unknown error code"):
            CommandFailedError("testCode", TestCommand(), "why")

    def test_command_rejects_query_invalid_code(self):
        """Test each kind only accepts its own invalid-operation code."""
        with pytest.raises(ValueError):
            CommandFailedError(OperationErrorCode.INVALID_QUERY, TestCommand(), "why")


@pytest.mark.unit
class TestErrorCodes:
    """Test kind-specific code tables."""

    def test_command_codes(self):
        """Test command failures rename INVALID_OPERATION to INVALID_COMMAND."""
        assert CommandFailedError.allowed_codes() == {
            "INTERNAL_HANDLER_ERROR",
            "HANDLER_NOT_FOUND",
            "INVALID_COMMAND",
        }

    def test_query_codes(self):
        """Test query failures rename INVALID_OPERATION to INVALID_QUERY."""
        assert QueryFailedError.allowed_codes() == {
            "INTERNAL_HANDLER_ERROR",
            "HANDLER_NOT_FOUND",
            "INVALID_QUERY",
        }

    def test_base_codes(self):
        """Test the kind-agnostic base keeps INVALID_OPERATION."""
        assert OperationFailedError.allowed_codes() == {
            "INTERNAL_HANDLER_ERROR",
            "HANDLER_NOT_FOUND",
            "INVALID_OPERATION",
        }

    def test_subclass_adds_custom_codes(self):
        """Test declared subclasses extend the set and inherit the rest."""

        class RegisterUserFailed(CommandFailedError):
            custom_codes = frozenset({"EMAIL_TAKEN"})

        class RegisterAdminFailed(RegisterUserFailed):
            custom_codes = frozenset({"NOT_ALLOWED"})

        assert RegisterAdminFailed.allowed_codes() == {
            "INTERNAL_HANDLER_ERROR",
            "HANDLER_NOT_FOUND",
            "INVALID_COMMAND",
            "EMAIL_TAKEN",
            "NOT_ALLOWED",
        }
        exception = RegisterAdminFailed("EMAIL_TAKEN", TestCommand(), "taken")
        assert exception.code == "EMAIL_TAKEN"


@pytest.mark.unit
class TestHandlerNotFound:
    """Test handler_not_found()."""

    def test_command_message(self):
        """Test message names the command kind and type."""
        command = TestCommand()
        cause = CommandHandlerNotFoundError(TestCommand)

        exception = CommandFailedError.handler_not_found(command, cause)

        assert exception.code == OperationErrorCode.HANDLER_NOT_FOUND
        assert exception.orig_error is cause
        assert str(exception) == (
            'Operation "TestCommand" failed! Handler for Command "TestCommand" not found!'
        )

    def test_query_message(self):
        """Test message names the query kind and type."""
        exception = QueryFailedError.handler_not_found(TestQuery(), LookupError())

        assert str(exception) == (
            'Operation "TestQuery" failed! Handler for Query "TestQuery" not found!'
        )

    def test_returns_instance_of_calling_subclass(self):
        """Test constructors build the declared subclass."""

        class CustomFailed(CommandFailedError):
            pass

        exception = CustomFailed.handler_not_found(TestCommand(), LookupError())

        assert type(exception) is CustomFailed


@pytest.mark.unit
class TestInternalHandlerError:
    """Test internal_handler_error()."""

    def test_reads_message_from_error(self):
        """Test a plain error contributes its own message."""
        cause = RuntimeError("Custom error")

        exception = CommandFailedError.internal_handler_error(TestCommand(), cause)

        assert exception.code == OperationErrorCode.INTERNAL_HANDLER_ERROR
        assert exception.orig_error is cause
        assert str(exception) == (
            'Operation "TestCommand" failed! Internal handler error: Custom error'
        )

    def test_joins_messages_from_exception_group(self):
        """Test a bundle of errors contributes each inner message."""
        cause = ExceptionGroup("many", [ValueError("Error 1"), KeyError("Error 2")])

        exception = QueryFailedError.internal_handler_error(TestQuery(), cause)

        assert str(exception) == (
            "Operation \"TestQuery\" failed! Internal handler error: Error 1\n'Error 2'"
        )

    def test_joins_nested_group_by_its_own_message(self):
        """Test only the first level of a group is expanded."""
        inner = ExceptionGroup("inner", [ValueError("a")])
        cause = ExceptionGroup("outer", [inner, ValueError("b")])

        reason = CommandFailedError.internal_handler_error(TestCommand(), cause).reason

        assert reason == f"Internal handler error: {inner}\nb"


@pytest.mark.unit
class TestInvalidOperation:
    """Test invalid_operation() and violation rendering."""

    def test_violation_without_constraints_renders_bare_header(self):
        """Test a violation with no detail still renders its header line."""
        violation = ConstraintViolation("name")

        exception = CommandFailedError.invalid_operation(TestCommand(), [violation])

        assert exception.code == OperationErrorCode.INVALID_COMMAND
        assert str(exception) == (
            'Operation "TestCommand" failed! '
            'Invalid Command: Validation of "name" failed!'
        )

    def test_violation_with_constraints(self):
        """Test each constraint renders on its own indented line."""
        violation = ConstraintViolation(
            "name", constraints={"isNotEmpty": "name should not be empty"}
        )

        exception = QueryFailedError.invalid_operation(TestQuery(), [violation])

        assert exception.code == OperationErrorCode.INVALID_QUERY
        assert str(exception) == (
            'Operation "TestQuery" failed! '
            'Invalid Query: Validation of "name" failed!'
            '\n\t"isNotEmpty": name should not be empty.'
        )

    def test_violation_with_children(self):
        """Test children render with their path qualified by the parent."""
        violation = ConstraintViolation(
            "name",
            children=[
                ConstraintViolation(
                    "length", constraints={"isNotEmpty": "length should not be empty"}
                )
            ],
        )

        exception = CommandFailedError.invalid_operation(TestCommand(), [violation])

        assert str(exception) == (
            'Operation "TestCommand" failed! '
            'Invalid Command: Validation of "name" failed!'
            '\nValidation of "name.length" failed!'
            '\n\t"isNotEmpty": length should not be empty.'
        )

    def test_multiple_violations_one_block_per_line(self):
        """Test top-level violations are separated by newlines."""
        violations = [
            ConstraintViolation("name", constraints={"missing": "Field required"}),
            ConstraintViolation("age", constraints={"missing": "Field required"}),
        ]

        exception = CommandFailedError.invalid_operation(TestCommand(), violations)

        assert exception.reason == (
            'Invalid Command: Validation of "name" failed!'
            '\n\t"missing": Field required.'
            '\nValidation of "age" failed!'
            '\n\t"missing": Field required.'
        )

    def test_orig_error_groups_all_violations(self):
        """Test orig_error is an exception group of every violation."""
        violations = [ConstraintViolation("name"), ConstraintViolation("age")]

        exception = CommandFailedError.invalid_operation(TestCommand(), violations)

        assert isinstance(exception.orig_error, ExceptionGroup)
        assert str(exception.orig_error).startswith("Validation failed!")
        assert list(exception.orig_error.exceptions) == violations

    def test_empty_violations_rejected(self):
        """Test an invalid operation needs at least one violation."""
        with pytest.raises(ValueError, match="at least one violation"):
            CommandFailedError.invalid_operation(TestCommand(), [])

    def test_build_violation_message_with_parent(self):
        """Test explicit parent qualification."""
        violation = ConstraintViolation("city", constraints={"missing": "Field required"})

        message = CommandFailedError.build_violation_message(violation, "address")

        assert message == (
            'Validation of "address.city" failed!\n\t"missing": Field required.'
        )
