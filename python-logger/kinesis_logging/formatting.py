"""Default field formatting and JSON encoding for Kinesis payloads."""

import json
from datetime import date, datetime
from typing import Any, Dict

_JSON_NATIVE = (str, int, float, bool, type(None), list, tuple, dict)


def format_value(value: Any) -> Any:
    """
    Convert a field value into something the JSON encoder understands.

    Resolution order:
        1. Objects with a ``__json__()`` method are replaced by its result.
        2. JSON-native values are kept as they are.
        3. ``datetime`` and ``date`` become ISO-8601 strings.
        4. Exceptions become their message.
        5. Objects defining their own ``__str__`` become ``str(value)``.
        6. Anything else is returned unchanged.
    """
    to_json = getattr(value, "__json__", None)
    if callable(to_json):
        return to_json()
    if isinstance(value, _JSON_NATIVE):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, BaseException):
        return str(value)
    if type(value).__str__ is not object.__str__:
        return str(value)
    return value


def encode_json(data: Dict[str, Any]) -> bytes:
    """Serialize fields to compact JSON bytes with sorted keys."""
    return json.dumps(
        data,
        default=_json_default,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def _json_default(obj: Any) -> Any:
    """Handle datetime serialization for values nested inside fields."""
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")
