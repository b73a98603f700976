"""Builder that assembles a frozen KinesisHandler."""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from .config import KinesisConfig
from .handler import DEFAULT_LEVELS, FieldFilter, KinesisHandler, new, new_with_client_config


class KinesisHandlerBuilder:
    """Builder for Kinesis handlers."""

    def __init__(self, stream_name: str):
        """Initialize the builder."""
        self._stream_name = stream_name
        self._config: Optional[KinesisConfig] = None
        self._client_config: Optional[Dict[str, Any]] = None
        self._client: Any = None
        self._levels: Optional[List[int]] = list(DEFAULT_LEVELS)
        self._partition_key = ""
        self._async = False
        self._ignore: List[str] = []
        self._filters: List[Tuple[str, FieldFilter]] = []

    def config(self, value: KinesisConfig) -> "KinesisHandlerBuilder":
        """Set the AWS settings the client is built from."""
        self._config = value
        return self

    def client_config(self, value: Dict[str, Any]) -> "KinesisHandlerBuilder":
        """Set raw ``Session.client`` keyword arguments."""
        self._client_config = value
        return self

    def client(self, value: Any) -> "KinesisHandlerBuilder":
        """Use an existing Kinesis client."""
        self._client = value
        return self

    def levels(self, value: Optional[Iterable[int]]) -> "KinesisHandlerBuilder":
        """Set levels."""
        self._levels = list(value) if value is not None else None
        return self

    def partition_key(self, value: str) -> "KinesisHandlerBuilder":
        """Set the default partition key."""
        self._partition_key = value
        return self

    def asynchronous(self) -> "KinesisHandlerBuilder":
        """Send records on background threads."""
        self._async = True
        return self

    def ignore(self, *names: str) -> "KinesisHandlerBuilder":
        """Drop the named fields from every payload."""
        self._ignore.extend(names)
        return self

    def field_filter(self, name: str, fn: FieldFilter) -> "KinesisHandlerBuilder":
        """Set a filter for one field."""
        self._filters.append((name, fn))
        return self

    def build(self) -> KinesisHandler:
        """
        Create the client and return a frozen handler.

        The client comes from, in order of preference, an explicit client,
        raw client configuration, or a ``KinesisConfig`` (the default one
        when nothing was set).
        """
        if self._client is not None:
            handler = KinesisHandler(self._client, self._stream_name)
        elif self._client_config is not None:
            handler = new_with_client_config(self._stream_name, self._client_config)
        else:
            handler = new(self._stream_name, self._config)

        handler.set_levels(self._levels)
        handler.set_partition_key(self._partition_key)
        if self._async:
            handler.enable_async()
        for name in self._ignore:
            handler.add_ignore(name)
        for name, fn in self._filters:
            handler.add_field_filter(name, fn)

        handler.freeze()
        return handler
