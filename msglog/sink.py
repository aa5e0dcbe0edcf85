"""Message log sink: a JSON-lines logger opened once, with stdout fallback."""

import logging
import os
import sys
import threading
from datetime import datetime, timezone

from pythonjsonlogger.json import JsonFormatter

from msglog.config import resolve_config

logger = logging.getLogger(__name__)

DIR_MODE = 0o755
FILE_MODE = 0o644
RFC3339 = "%Y-%m-%dT%H:%M:%SZ"


def format_rfc3339(ts: datetime) -> str:
    """Render *ts* as RFC 3339 UTC. Naive datetimes are taken as UTC."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).strftime(RFC3339)


class MessageRecordFormatter(JsonFormatter):
    """One JSON object per line: record fields, then ``level``, ``msg`` and ``time``."""

    def __init__(self):
        super().__init__("%(message)s", json_ensure_ascii=False)

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record.pop("message", None)
        log_record["level"] = record.levelname.lower()
        log_record["msg"] = record.getMessage()
        log_record["time"] = format_rfc3339(
            datetime.fromtimestamp(record.created, timezone.utc)
        )


def _open_append(path: str):
    return open(
        path, "a", encoding="utf-8",
        opener=lambda p, flags: os.open(p, flags, FILE_MODE),
    )


class MessageLogger:
    """Owns the message logger. The sink is opened on first ``get()``, exactly once."""

    def __init__(self, path: str | None = None, name: str = "msglog.messages"):
        self._path = path
        self._name = name
        self._lock = threading.Lock()
        self._logger: logging.Logger | None = None
        self._stream = None
        self._fallback = False

    @property
    def path(self) -> str:
        """Configured path, read from config on first access when not given."""
        if self._path is None:
            self._path = resolve_config().log_messages_path
        return self._path

    @property
    def uses_fallback(self) -> bool:
        return self._fallback

    def get(self) -> logging.Logger:
        if self._logger is None:
            with self._lock:
                if self._logger is None:
                    self._logger = self._build()
        return self._logger

    def _build(self) -> logging.Logger:
        msg_logger = logging.Logger(self._name, logging.INFO)
        msg_logger.propagate = False

        path = self.path
        stream = self._open_sink(path)
        if stream is None:
            self._fallback = True
            handler = logging.StreamHandler(sys.stdout)
        else:
            self._stream = stream
            handler = logging.StreamHandler(stream)
        handler.setFormatter(MessageRecordFormatter())
        msg_logger.addHandler(handler)
        return msg_logger

    def _open_sink(self, path: str):
        """Open *path* for append. Returns None if the sink cannot be prepared."""
        log_dir = os.path.dirname(path)
        if log_dir:
            try:
                os.makedirs(log_dir, mode=DIR_MODE, exist_ok=True)
            except OSError as e:
                logger.warning("Failed to create message log directory: %s", e)
                return None
        try:
            return _open_append(path)
        except OSError as e:
            logger.warning("Failed to open message log file %s: %s", path, e)
            return None

    def close(self) -> None:
        """Close the sink. A later ``get()`` opens it again."""
        with self._lock:
            if self._logger is not None:
                for handler in list(self._logger.handlers):
                    handler.close()
                    self._logger.removeHandler(handler)
            if self._stream is not None and not self._stream.closed:
                self._stream.close()
            self._logger = None
            self._stream = None
            self._fallback = False


default_message_logger = MessageLogger()


def get_logger() -> logging.Logger:
    """Return the process-wide message logger, initializing it on first use."""
    return default_message_logger.get()
