"""Logging handler that forwards structured log entries to AWS Kinesis."""

__version__ = "1.0.0"

from .builder import KinesisHandlerBuilder
from .config import KinesisConfig
from .entry import LogEntry
from .exceptions import HandlerFrozenError, KinesisLoggingError
from .handler import KinesisHandler, new, new_with_client_config

__all__ = [
    "HandlerFrozenError",
    "KinesisConfig",
    "KinesisHandler",
    "KinesisHandlerBuilder",
    "KinesisLoggingError",
    "LogEntry",
    "new",
    "new_with_client_config",
]
