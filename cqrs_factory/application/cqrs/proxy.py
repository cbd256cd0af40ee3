"""Fluent field accessors over an operation builder.

Every field of the operation is reachable as a method of the same name:
call it with a value to set the field, with nothing to read it. Builder
methods (``build``, ``clear``, ``execute``, ...) pass through, and any
builder method that returns the builder itself returns the proxy instead,
so calls keep chaining:

    user_id = await factory.create(RegisterUser).name("John").age(30).execute()

Field names are resolved structurally at call time; the proxy does not
enumerate the model's fields and applies no per-type handling to values.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from cqrs_factory.application.cqrs.builder import OperationBuilderBase

O = TypeVar("O", bound=BaseModel)
R = TypeVar("R")

_MISSING = object()


class OperationBuilder(Generic[O, R]):
    """Chainable proxy around an ``OperationBuilderBase``."""

    __slots__ = ("_builder",)

    def __init__(self, builder: OperationBuilderBase[O, R]) -> None:
        object.__setattr__(self, "_builder", builder)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)

        builder = self._builder
        method = getattr(type(builder), name, None)
        if callable(method):
            return self._wrap_method(getattr(builder, name))
        return self._field_accessor(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"Use {name}(value) to set an operation field on {type(self).__name__}"
        )

    def __dir__(self) -> list[str]:
        fields = list(self._builder.operation_type.model_fields)
        methods = [name for name in dir(type(self._builder)) if not name.startswith("_")]
        return sorted(set(fields) | set(methods))

    def __repr__(self) -> str:
        return f"OperationBuilder({self._builder.operation_type.__name__})"

    def _wrap_method(self, method: Callable[..., Any]) -> Callable[..., Any]:
        def call(*args: Any, **kwargs: Any) -> Any:
            result = method(*args, **kwargs)
            return self if result is self._builder else result

        call.__name__ = method.__name__
        call.__doc__ = method.__doc__
        return call

    def _field_accessor(self, name: str) -> Callable[..., Any]:
        def accessor(value: Any = _MISSING, /) -> Any:
            if value is _MISSING:
                return self._builder.get(name)
            self._builder.set(name, value)
            return self

        accessor.__name__ = name
        return accessor
