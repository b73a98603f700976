"""Exceptions raised by the Kinesis logging handler."""

from typing import Optional


class KinesisLoggingError(Exception):
    """Base exception for kinesis_logging errors."""


class HandlerFrozenError(KinesisLoggingError):
    """Raised when a frozen handler's configuration is modified."""

    def __init__(self, setting: str, stream_name: Optional[str] = None):
        """
        Initialize the frozen handler error.

        Args:
            setting: Name of the setting that was being changed
            stream_name: Default stream of the handler, for identification
        """
        self.setting = setting
        self.stream_name = stream_name
        super().__init__(
            f"Cannot change {setting}: handler for stream '{stream_name}' "
            f"is frozen once it starts handling records"
        )
