"""JSON-ready dicts of models and derived results for host responses."""

import math
from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


def to_dict(obj: Any) -> dict[str, Any]:
    """Convert a model or derived result to a JSON-ready dict.

    Private fields (leading underscore) are skipped. Derived values named
    in a class's ``SERIALIZED_PROPERTIES`` (such as a cost breakdown's
    total) are added after the fields.

    Parameters
    ----------
    obj : Any
        Dataclass instance or mapping.

    Returns
    -------
    dict[str, Any]
        Serialized dictionary.

    Raises
    ------
    TypeError
        If ``obj`` is neither a dataclass instance nor a mapping.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        result = {
            f.name: serialize_value(getattr(obj, f.name))
            for f in fields(obj)
            if not f.name.startswith("_")
        }
        for name in getattr(type(obj), "SERIALIZED_PROPERTIES", ()):
            result[name] = serialize_value(getattr(obj, name))
        return result
    if isinstance(obj, Mapping):
        return {str(key): serialize_value(value) for key, value in obj.items()}
    raise TypeError(f"Cannot serialize {type(obj).__name__} to a dict")


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Non-finite floats become ``None``; JSON has no spelling for them.
    """
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, float) and not math.isfinite(value):
        return None
    elif is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    elif isinstance(value, (dict, MappingProxyType)):
        return {str(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple, set, frozenset)):
        return [serialize_value(v) for v in value]
    return value
