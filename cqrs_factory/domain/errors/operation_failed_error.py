"""Operation failure taxonomy.

Every failed execution surfaces as an ``OperationFailedError`` (or a
subclass) whose ``code`` tells the caller why it failed:

- INVALID_COMMAND / INVALID_QUERY: the operation data broke its constraints
- HANDLER_NOT_FOUND: nothing is registered to handle the operation
- INTERNAL_HANDLER_ERROR: the handler raised something unexpected

Kind-specific behavior (message label, invalid-operation code) comes from
an ``OperationKindConfig`` attached to the class, not from overriding
individual class attributes.

Declared operations may subclass ``CommandFailedError`` or
``QueryFailedError`` to add business codes. A handler can raise such an
error directly and it propagates untouched through the builder.

Usage:
    class RegisterUserFailed(CommandFailedError):
        custom_codes = frozenset({"EMAIL_TAKEN"})

    @command(throws=RegisterUserFailed)
    class RegisterUser(BaseModel):
        email: str
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Self

from cqrs_factory.core.enums import OperationKind
from cqrs_factory.domain.errors.constraint_violation import ConstraintViolation


class OperationErrorCode:
    """Error codes shared by every operation kind."""

    INTERNAL_HANDLER_ERROR = "INTERNAL_HANDLER_ERROR"
    HANDLER_NOT_FOUND = "HANDLER_NOT_FOUND"
    INVALID_OPERATION = "INVALID_OPERATION"
    INVALID_COMMAND = "INVALID_COMMAND"
    INVALID_QUERY = "INVALID_QUERY"


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationKindConfig:
    """Per-kind settings injected into the shared taxonomy logic.

    Attributes:
        kind: Operation kind discriminant.
        invalid_operation_code: Code used when validation fails.
    """

    kind: OperationKind
    invalid_operation_code: str

    @property
    def label(self) -> str:
        return self.kind.label

    @property
    def base_codes(self) -> frozenset[str]:
        return frozenset(
            {
                OperationErrorCode.INTERNAL_HANDLER_ERROR,
                OperationErrorCode.HANDLER_NOT_FOUND,
                self.invalid_operation_code,
            }
        )


OPERATION_KIND = OperationKindConfig(
    kind=OperationKind.OPERATION,
    invalid_operation_code=OperationErrorCode.INVALID_OPERATION,
)
COMMAND_KIND = OperationKindConfig(
    kind=OperationKind.COMMAND,
    invalid_operation_code=OperationErrorCode.INVALID_COMMAND,
)
QUERY_KIND = OperationKindConfig(
    kind=OperationKind.QUERY,
    invalid_operation_code=OperationErrorCode.INVALID_QUERY,
)


def operation_type_name(operation: object) -> str:
    """Declared type name of an operation instance."""
    return type(operation).__name__


class OperationFailedError(Exception):
    """An operation failed.

    Immutable once constructed: ``code``, ``operation``, ``reason`` and
    ``orig_error`` are read-only.

    Attributes:
        code: One of ``allowed_codes()``.
        operation: The operation instance that failed (best effort when the
            failure happened before validation succeeded).
        reason: Human-readable reason, without the operation prefix.
        orig_error: Underlying cause, if any. An ``ExceptionGroup`` when the
            cause is a bundle of errors.
    """

    kind: ClassVar[OperationKindConfig] = OPERATION_KIND
    custom_codes: ClassVar[frozenset[str]] = frozenset()

    def __init__(
        self,
        code: str,
        operation: Any,
        reason: str,
        orig_error: BaseException | None = None,
    ) -> None:
        if code not in self.allowed_codes():
            raise ValueError(
                f"Unknown error code {code!r} for {type(self).__name__}; "
                f"expected one of {sorted(self.allowed_codes())}"
            )
        self._code = code
        self._operation = operation
        self._reason = reason
        self._orig_error = orig_error
        super().__init__(
            f'Operation "{operation_type_name(operation)}" failed! {reason}'
        )

    @property
    def code(self) -> str:
        return self._code

    @property
    def operation(self) -> Any:
        return self._operation

    @property
    def reason(self) -> str:
        return self._reason

    @property
    def orig_error(self) -> BaseException | None:
        return self._orig_error

    @property
    def message(self) -> str:
        return str(self)

    @classmethod
    def allowed_codes(cls) -> frozenset[str]:
        """Closed set of codes this class may carry.

        Base codes of the class's kind plus every ``custom_codes`` declared
        along the class hierarchy.
        """
        codes = set(cls.kind.base_codes)
        for klass in cls.__mro__:
            codes.update(vars(klass).get("custom_codes", ()))
        return frozenset(codes)

    @classmethod
    def handler_not_found(cls, operation: Any, orig_error: BaseException) -> Self:
        """No handler is registered for the operation."""
        return cls(
            OperationErrorCode.HANDLER_NOT_FOUND,
            operation,
            f'Handler for {cls.kind.label} "{operation_type_name(operation)}" not found!',
            orig_error,
        )

    @classmethod
    def internal_handler_error(cls, operation: Any, orig_error: BaseException) -> Self:
        """The handler raised an unexpected error."""
        return cls(
            OperationErrorCode.INTERNAL_HANDLER_ERROR,
            operation,
            f"Internal handler error: {cls.describe_error(orig_error)}",
            orig_error,
        )

    @classmethod
    def invalid_operation(
        cls, operation: Any, violations: Sequence[ConstraintViolation]
    ) -> Self:
        """The operation broke one or more declared constraints.

        Args:
            operation: Best-effort operation instance.
            violations: Every violation found.

        Raises:
            ValueError: ``violations`` is empty.
        """
        if not violations:
            raise ValueError(
                f"{cls.__name__}.invalid_operation() requires at least one violation"
            )
        messages = "\n".join(cls.build_violation_message(v) for v in violations)
        return cls(
            cls.kind.invalid_operation_code,
            operation,
            f"Invalid {cls.kind.label}: {messages}",
            ExceptionGroup("Validation failed!", list(violations)),
        )

    @staticmethod
    def build_violation_message(violation: ConstraintViolation, parent: str = "") -> str:
        """Render one violation tree, path-qualified by ``parent``."""
        return violation.render(parent)

    @staticmethod
    def describe_error(error: BaseException) -> str:
        """Message of an error, joining sub-errors of an exception group."""
        if isinstance(error, BaseExceptionGroup):
            return "\n".join(str(inner) for inner in error.exceptions)
        return str(error)


class CommandFailedError(OperationFailedError):
    """A command failed."""

    kind = COMMAND_KIND


class QueryFailedError(OperationFailedError):
    """A query failed."""

    kind = QUERY_KIND
