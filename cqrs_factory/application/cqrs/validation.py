"""Materialization and validation of operation models.

Operations are pydantic models. Pydantic applies declared defaults and
field transformations and checks constraints in one pass; this module
splits its outcome into the two results the builder needs:

- a materialized instance (validated, or a best-effort unvalidated one
  when validation fails so failures still carry the operation), and
- a list of ``ConstraintViolation`` trees, one per failed top-level field.

Pydantic reports errors flat, each with a location path such as
``("address", "city")`` or ``("tags", 0)``. Errors sharing a path prefix
are folded into one tree so nested failures render under their parent.
"""

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from cqrs_factory.domain.errors import ConstraintViolation

O = TypeVar("O", bound=BaseModel)

# Property name for errors raised by model-level validators (empty location)
ROOT_PROPERTY = "__root__"


def snapshot_defaults(operation_type: type[BaseModel]) -> dict[str, Any]:
    """Field values an operation type has before any input.

    The type is materialized from empty input. When that validates (every
    field has a default), defaults reflect ``validate_default`` transforms;
    otherwise they are the raw declared defaults of the best-effort
    instance. Required fields are absent from the snapshot. Default
    factories run on every call, so each snapshot owns fresh values.

    Args:
        operation_type: Declared operation model.

    Returns:
        Field name -> default value, in declaration order.
    """
    operation, _ = materialize(operation_type, {})
    return {
        name: getattr(operation, name)
        for name, info in operation_type.model_fields.items()
        if not info.is_required()
    }


def materialize(
    operation_type: type[O], fields: Mapping[str, Any]
) -> tuple[O, list[ConstraintViolation]]:
    """Turn a raw field bag into an operation instance.

    Fields are looked up by name or alias. The instance is built from a
    deep copy of ``fields``: it never shares mutable values (nested
    models included) with the input, and ``fields`` is never mutated.
    Idempotent for a given input.

    Args:
        operation_type: Declared operation model.
        fields: Raw field values.

    Returns:
        ``(instance, [])`` when the input is valid (the instance reflects
        any coercion or transformation), otherwise
        ``(unvalidated_instance, violations)``.
    """
    try:
        operation = operation_type.model_validate(
            copy.deepcopy(dict(fields)), by_alias=True, by_name=True
        )
        return operation, []
    except ValidationError as exc:
        operation = operation_type.model_construct(**copy.deepcopy(dict(fields)))
        return operation, violations_from_errors(exc.errors())


@dataclass
class _ViolationNode:
    constraints: dict[str, str] = field(default_factory=dict)
    children: dict[str, "_ViolationNode"] = field(default_factory=dict)

    def to_violation(self, property: str) -> ConstraintViolation:
        return ConstraintViolation(
            property,
            constraints=self.constraints,
            children=[
                child.to_violation(name) for name, child in self.children.items()
            ],
        )


def violations_from_errors(
    errors: Sequence[Mapping[str, Any]],
) -> list[ConstraintViolation]:
    """Fold pydantic error details into violation trees.

    Constraint names are pydantic error types (``string_too_short``,
    ``missing``, ...); messages are pydantic's. Order follows first
    appearance.
    """
    root = _ViolationNode()
    for error in errors:
        node = root
        for part in error["loc"] or (ROOT_PROPERTY,):
            node = node.children.setdefault(str(part), _ViolationNode())
        node.constraints.setdefault(error["type"], error["msg"])
    return [node.to_violation(name) for name, node in root.children.items()]
