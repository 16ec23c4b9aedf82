"""Loading flattened values into caller-supplied types.

The flattened mapping is serialized to JSON and validated back into the
destination type with pydantic in strict mode. The destination may read a
subset of keys, but every key it reads must have a compatible shape: a
string where a number is declared, or a list where an object is declared,
is an error rather than a coercion.
"""

from __future__ import annotations

from typing import Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from ..core.exceptions import StructuralMismatchError

T = TypeVar("T")


@overload
def materialize(value: Any, target: type[T]) -> T: ...


@overload
def materialize(value: Any, target: Any = ...) -> Any: ...


def materialize(value: Any, target: Any = Any) -> Any:
    """Convert a flattened item or batch into ``target``.

    Args:
        value: Flattened item (mapping) or batch (list of mappings)
        target: Any type pydantic can validate, e.g. a BaseModel subclass,
            ``list[Page]`` or ``dict[str, Any]``

    Returns:
        The validated value

    Raises:
        StructuralMismatchError: Value does not fit the target type
    """
    payload = to_json(value)
    try:
        return TypeAdapter(target).validate_json(payload, strict=True)
    except ValidationError as e:
        raise StructuralMismatchError(
            f"cannot load flattened value into {_describe(target)}: "
            f"{e.error_count()} validation error(s)",
            errors=e.errors(include_url=False),
        ) from e


def _describe(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)
