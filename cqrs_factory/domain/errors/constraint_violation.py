"""Constraint violation reported by operation validation.

A violation describes one property that failed validation. Compound
properties (nested models, sequences) carry their failures as children,
so a single violation is a tree rooted at a top-level field.

Violations are exceptions so that a batch of them can travel as the
members of an ``ExceptionGroup``.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType


class ConstraintViolation(Exception):
    """One failed property, with its broken constraints and nested failures.

    Attributes:
        property: Name of the failed property (not path-qualified).
        constraints: Constraint name -> human-readable message.
        children: Violations of nested properties.

    Example:
        >>> violation = ConstraintViolation(
        ...     "name",
        ...     constraints={"string_too_short": "String should have at least 1 character"},
        ... )
        >>> str(violation)
        'Validation of "name" failed!\\n\\t"string_too_short": String should have at least 1 character.'
    """

    def __init__(
        self,
        property: str,
        *,
        constraints: Mapping[str, str] | None = None,
        children: Iterable["ConstraintViolation"] = (),
    ) -> None:
        self.property = property
        self.constraints: Mapping[str, str] = MappingProxyType(dict(constraints or {}))
        self.children: tuple[ConstraintViolation, ...] = tuple(children)
        super().__init__(self.render())

    def render(self, parent: str = "") -> str:
        """Render this violation and its children as a message block.

        Args:
            parent: Dotted path of the enclosing property, if any.

        Returns:
            Deterministic, path-qualified message. A violation with no
            constraints and no children still renders its header line.
        """
        path = f"{parent}.{self.property}" if parent else self.property
        message = f'Validation of "{path}" failed!'

        if self.constraints:
            message += "\n\t" + "\n\t".join(
                f'"{name}": {text}.' for name, text in self.constraints.items()
            )

        if self.children:
            message += "\n" + "\n\t".join(child.render(path) for child in self.children)

        return message

    def __repr__(self) -> str:
        return (
            f"ConstraintViolation({self.property!r}, "
            f"constraints={dict(self.constraints)!r}, children={list(self.children)!r})"
        )
