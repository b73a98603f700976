"""Logging handler that publishes log entries to AWS Kinesis."""

import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence

import boto3

from .config import KinesisConfig
from .entry import LogEntry
from .exceptions import HandlerFrozenError
from .formatting import encode_json, format_value

FieldFilter = Callable[[Any], Any]

DEFAULT_LEVELS = [
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
]

STREAM_NAME_FIELD = "stream_name"
PARTITION_KEY_FIELD = "partition_key"
MESSAGE_FIELD = "message"

# Loggers of this package and of the AWS client stack; their records are never forwarded.
_INTERNAL_LOGGERS = ("kinesis_logging", "boto3", "botocore", "urllib3")

logger = logging.getLogger(__name__)


def new(stream_name: str, config: Optional[KinesisConfig] = None) -> "KinesisHandler":
    """
    Create a handler whose client is built from a ``KinesisConfig``.

    Args:
        stream_name: Default Kinesis stream to publish to
        config: AWS settings; empty fields are resolved from the environment

    Raises:
        botocore.exceptions.NoCredentialsError: if no credentials are found
        botocore.exceptions.BotoCoreError: if the client cannot be created
    """
    config = config or KinesisConfig()
    return new_with_client_config(stream_name, config.client_kwargs())


def new_with_client_config(
    stream_name: str, client_config: Optional[Dict[str, Any]] = None
) -> "KinesisHandler":
    """
    Create a handler from raw ``Session.client`` keyword arguments.

    Args:
        stream_name: Default Kinesis stream to publish to
        client_config: Keyword arguments for ``Session.client("kinesis", ...)``
    """
    client = boto3.session.Session().client("kinesis", **(client_config or {}))
    return KinesisHandler(client, stream_name)


class KinesisHandler(logging.Handler):
    """
    Publishes every qualifying log record as one Kinesis record.

    The payload is the record's structured fields serialized to JSON. The
    stream name and partition key can be overridden per record through the
    ``stream_name`` and ``partition_key`` fields.

    Configuration can change until the handler is frozen, which happens on
    the first handled or fired record or an explicit ``freeze()`` call.
    """

    def __init__(self, client: Any, stream_name: str = "", level: int = logging.NOTSET):
        """
        Initialize the handler.

        Args:
            client: boto3 Kinesis client
            stream_name: Default stream name
            level: Threshold of the underlying ``logging.Handler``
        """
        super().__init__(level)
        self.client = client
        self.default_stream_name = stream_name
        self.default_partition_key = ""
        self.is_async = False
        self._levels: Optional[Sequence[int]] = list(DEFAULT_LEVELS)
        self._ignore_fields = set()
        self._field_filters: Dict[str, FieldFilter] = {}
        self._frozen = False

    @property
    def levels(self) -> Optional[Sequence[int]]:
        """Logging levels that fire this handler."""
        return self._levels

    @property
    def ignore_fields(self) -> Iterable[str]:
        return self._ignore_fields

    @property
    def field_filters(self) -> Mapping[str, FieldFilter]:
        return self._field_filters

    @property
    def frozen(self) -> bool:
        return self._frozen

    def set_levels(self, levels: Optional[Iterable[int]]) -> None:
        """Replace the logging levels that fire this handler. ``None`` disables it."""
        self._check_mutable("levels")
        self._levels = list(levels) if levels is not None else None

    def set_partition_key(self, key: str) -> None:
        """Set the default partition key."""
        self._check_mutable("partition key")
        self.default_partition_key = key

    def enable_async(self) -> None:
        """
        Send records on a background thread.

        In async mode ``fire()`` returns immediately and never raises for a
        failed send.
        """
        self._check_mutable("async mode")
        self.is_async = True

    def add_ignore(self, name: str) -> None:
        """Drop the named field from every payload."""
        self._check_mutable("ignored fields")
        self._ignore_fields.add(name)

    def add_field_filter(self, name: str, fn: FieldFilter) -> None:
        """Transform the named field with ``fn`` instead of the default formatting."""
        self._check_mutable("field filters")
        self._field_filters[name] = fn

    def freeze(self) -> None:
        """Make the configuration read-only so it can be shared with sender threads."""
        if self._frozen:
            return
        self._ignore_fields = frozenset(self._ignore_fields)
        self._field_filters = MappingProxyType(dict(self._field_filters))
        if self._levels is not None:
            self._levels = tuple(self._levels)
        self._frozen = True
        logger.info(
            f"Kinesis handler for stream '{self.default_stream_name}' frozen "
            f"(async={self.is_async})"
        )

    def _check_mutable(self, setting: str) -> None:
        if self._frozen:
            raise HandlerFrozenError(setting, self.default_stream_name)

    def handle(self, record: logging.LogRecord) -> bool:
        if self._levels is None or record.levelno not in self._levels:
            return False
        if record.name.split(".", 1)[0] in _INTERNAL_LOGGERS:
            return False
        self.freeze()
        return super().handle(record)

    def emit(self, record: logging.LogRecord) -> None:
        """Publish a record; failures are reported through ``handleError``."""
        try:
            self.fire(LogEntry.from_record(record))
        except Exception:
            self.handleError(record)

    def fire(self, entry: LogEntry) -> Optional[Dict[str, Any]]:
        """
        Send one entry to Kinesis.

        Returns:
            The ``put_record`` response in sync mode, ``None`` in async mode.

        Raises:
            botocore.exceptions.ClientError: sync mode only, when the service rejects the record
        """
        self.freeze()
        if not self.is_async:
            return self._fire(entry)

        # send asynchronously and report no error
        threading.Thread(
            target=self._fire_quietly,
            args=(entry,),
            name="kinesis-logging-sender",
            daemon=True,
        ).start()
        return None

    def _fire(self, entry: LogEntry) -> Dict[str, Any]:
        stream_name = self.get_stream_name(entry)
        response = self.client.put_record(
            StreamName=stream_name,
            PartitionKey=self.get_partition_key(entry),
            Data=self.get_data(entry),
        )
        logger.debug(
            f"Published log record to stream {stream_name} "
            f"shard {response.get('ShardId')} sequence {response.get('SequenceNumber')}"
        )
        return response

    def _fire_quietly(self, entry: LogEntry) -> None:
        try:
            self._fire(entry)
        except Exception as e:
            logger.debug(f"Failed to publish log record to stream {self.get_stream_name(entry)}: {e}")

    def get_stream_name(self, entry: LogEntry) -> str:
        name = entry.fields.get(STREAM_NAME_FIELD)
        if isinstance(name, str):
            return name
        return self.default_stream_name

    def get_partition_key(self, entry: LogEntry) -> str:
        key = entry.fields.get(PARTITION_KEY_FIELD)
        if isinstance(key, str):
            return key
        if self.default_partition_key:
            return self.default_partition_key
        return entry.message

    def get_data(self, entry: LogEntry) -> bytes:
        """
        Serialize the entry's fields to JSON.

        A ``message`` field is added from the entry message when missing.
        Ignored fields are dropped, filtered fields go through their filter
        and the rest through ``format_value``. Returns ``b""`` when the
        fields cannot be serialized.
        """
        fields = dict(entry.fields)
        fields.setdefault(MESSAGE_FIELD, entry.message)

        data = {}
        for key, value in fields.items():
            if key in self._ignore_fields:
                continue
            fn = self._field_filters.get(key)
            if fn is not None:
                value = fn(value)  # custom filter
            else:
                value = format_value(value)  # default formatter
            data[key] = value

        try:
            return encode_json(data)
        except (TypeError, ValueError) as e:
            logger.debug(f"Dropping unserializable payload for stream {self.get_stream_name(entry)}: {e}")
            return b""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} stream={self.default_stream_name!r} async={self.is_async}>"
