"""JSON payload serialization for calculator results.

The UI consumes camelCase keys (``pAndI``, ``estClosingCosts``), so
dataclass field names are converted on the way out.
"""

from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

# Keys whose camelCase form is not mechanical
KEY_OVERRIDES = {
    "est_arv": "estARV",
}


def camel_case(name: str) -> str:
    """Convert a snake_case field name to camelCase."""
    if name in KEY_OVERRIDES:
        return KEY_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_payload(obj: Any) -> dict:
    """Convert a result dataclass (or dict) to a JSON-ready dict."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return {camel_case(f.name): serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return {camel_case(k) if isinstance(k, str) else k: serialize_value(v) for k, v in obj.items()}
    else:
        raise TypeError(f"Cannot serialize {type(obj).__name__} to a payload")


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, Decimal):
        return float(value)
    elif is_dataclass(value) and not isinstance(value, type):
        return to_payload(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
