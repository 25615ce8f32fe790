"""Structured JSON logging module for mosci."""

import json
import uuid
from contextvars import ContextVar
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from filelock import FileLock

DEFAULT_LOG_PATH = Path("data/logs/mosci.jsonl")

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)


def generate_id() -> str:
    """Generate a run identifier.

    Returns:
        UUID4 string, or an ISO8601 timestamp if no entropy source is available

    Example:
        >>> run_id = generate_id()
        >>> isinstance(run_id, str) and len(run_id) > 0
        True
    """
    try:
        return str(uuid.uuid4())
    except OSError:
        return datetime.now(tz=UTC).isoformat()


def set_run_id(run_id: str | None) -> None:
    """Set the run ID attached to every log entry in the current context.

    Example:
        >>> set_run_id("abc123")
        >>> get_run_id()
        'abc123'
        >>> set_run_id(None)
    """
    _run_id.set(run_id)


def get_run_id() -> str | None:
    return _run_id.get()


class JSONLogger:
    """Logger that appends JSON Lines entries to a shared log file."""

    def __init__(self, name: str, log_path: str | Path = DEFAULT_LOG_PATH):
        self.name = name
        self.log_path = log_path

    @property
    def log_path(self) -> Path:
        """Get the log file path."""
        return self._log_path

    @log_path.setter
    def log_path(self, value: str | Path) -> None:
        """Set the log file path."""
        self._log_path = Path(value)
        self._lock_path = self._log_path.with_suffix(self._log_path.suffix + ".lock")

    def _serialize_value(self, value: Any) -> Any:
        """Convert values (including numpy scalars and arrays) to JSON types.

        Args:
            value: Value to serialize

        Returns:
            JSON-serializable value
        """
        if isinstance(value, (str, int, float, bool, type(None))):
            return value
        if hasattr(value, "tolist"):
            return self._serialize_value(value.tolist())
        if isinstance(value, (list, tuple)):
            return [self._serialize_value(v) for v in value]
        if isinstance(value, dict):
            return {str(k): self._serialize_value(v) for k, v in value.items()}
        return str(value)

    def _log(self, level: str, message: str, metadata: dict[str, Any] | None = None) -> None:
        entry = {
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "level": level,
            "logger": self.name,
            "message": message,
        }

        run_id = get_run_id()
        if run_id:
            entry["run_id"] = run_id

        if metadata:
            entry["metadata"] = self._serialize_value(metadata)

        json_line = json.dumps(entry, ensure_ascii=False)

        self._log_path.parent.mkdir(parents=True, exist_ok=True)
        with FileLock(self._lock_path):
            with self._log_path.open("a", encoding="utf-8") as f:
                f.write(json_line + "\n")

    def info(self, message: str, metadata: dict[str, Any] | None = None) -> None:
        self._log("info", message, metadata)

    def error(self, message: str, metadata: dict[str, Any] | None = None) -> None:
        self._log("error", message, metadata)

    def warning(self, message: str, metadata: dict[str, Any] | None = None) -> None:
        self._log("warning", message, metadata)

    def debug(self, message: str, metadata: dict[str, Any] | None = None) -> None:
        self._log("debug", message, metadata)


_loggers: dict[str, JSONLogger] = {}
_log_path: Path = DEFAULT_LOG_PATH


def get_logger(name: str) -> JSONLogger:
    """Get or create a logger with the given name.

    Args:
        name: Logger name (typically module name, e.g., "estimator.engine")

    Returns:
        JSONLogger instance writing to the currently configured log path
    """
    if name not in _loggers:
        _loggers[name] = JSONLogger(name, _log_path)
    return _loggers[name]


def configure_log_path(path: str | Path) -> None:
    """Redirect every existing and future logger to ``path``."""
    global _log_path

    _log_path = Path(path)
    for json_logger in _loggers.values():
        json_logger.log_path = _log_path
