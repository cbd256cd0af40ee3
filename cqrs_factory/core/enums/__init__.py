"""Core enums package.

Usage:
    from cqrs_factory.core.enums import Environment, OperationKind
"""

from cqrs_factory.core.enums.environment import Environment
from cqrs_factory.core.enums.operation_kind import OperationKind

__all__ = ["Environment", "OperationKind"]
