"""Result types for railway-oriented handlers.

Handlers may report an expected failure by returning a value instead of
raising. The operation builder unwraps ``Success`` and treats ``Failure``
as a failed dispatch, classifying ``Failure.error`` like a raised error.

Usage:
    async def handle(self, query: GetUser) -> Result[User, str]:
        user = self._users.get(query.user_id)
        if user is None:
            return Failure(error="user_not_found")
        return Success(value=user)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred. Need not be an exception.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
