"""Log entries as seen by the Kinesis handler."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

# Attributes every LogRecord has; anything else was passed through ``extra``.
_LOG_RECORD_DEFAULTS = frozenset(
    logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None
    ).__dict__.keys()
) | {"message", "asctime"}

# ``extra={"fields": {...}}`` carries keys that ``logging`` refuses in ``extra``.
FIELDS_ATTR = "fields"

ERROR_FIELD = "error"


@dataclass
class LogEntry:
    """A log message and its structured fields."""

    message: str = ""
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEntry":
        """Build an entry from the extra attributes of a log record."""
        fields: Dict[str, Any] = {}
        for key, value in record.__dict__.items():
            if key in _LOG_RECORD_DEFAULTS:
                continue
            if key == FIELDS_ATTR and isinstance(value, dict):
                fields.update(value)
                continue
            fields[key] = value
        if record.exc_info and record.exc_info[1] is not None:
            fields.setdefault(ERROR_FIELD, record.exc_info[1])
        return cls(message=record.getMessage(), fields=fields)
