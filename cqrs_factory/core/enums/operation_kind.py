"""Operation kinds.

Commands express intent to change state, queries intent to read it.
The kind is the discriminant carried by every execution log record.
"""

from enum import Enum


class OperationKind(str, Enum):
    """Kind of a CQRS operation."""

    OPERATION = "operation"  # Kind-agnostic base
    COMMAND = "command"
    QUERY = "query"

    @property
    def label(self) -> str:
        """Capitalized name used in human-readable messages."""
        return self.value.capitalize()
