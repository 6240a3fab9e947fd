"""Structured JSON-lines logger with levels, trace ids and error fields."""

from __future__ import annotations

import json
import sys
import threading
import traceback
from datetime import datetime
from typing import Any

DEBUG = 10
INFO = 20
WARN = 30
ERROR = 40

_LEVEL_VALUES = {"debug": DEBUG, "info": INFO, "warn": WARN, "error": ERROR}
_CONFIG_LEVELS = {"debug": DEBUG, "info": INFO, "error": ERROR}
_STANDARD_STREAMS = ("stdout", "stderr")


def _parse_level(level: str) -> int:
    return _CONFIG_LEVELS.get(level.strip().lower(), INFO)


def _parse_output(output: str) -> str:
    return output.strip() or "stdout"


def _timestamp() -> str:
    now = datetime.now().astimezone()
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}" + now.strftime("%z")


def _stacktrace() -> str:
    # Drop this helper and the logging method that called it.
    return "".join(traceback.format_stack()[:-2])


class Logger:
    """Writes one JSON object per record to stdout, stderr or a file."""

    def __init__(self, level: str = "info", output: str = "stdout") -> None:
        self.level = _parse_level(level)
        self.output = _parse_output(output)
        self._lock = threading.Lock()
        if self.output not in _STANDARD_STREAMS:
            with open(self.output, "a", encoding="utf-8"):
                pass

    def _emit(self, level_name: str, msg: str, fields: dict[str, Any]) -> None:
        if _LEVEL_VALUES[level_name] < self.level:
            return
        record: dict[str, Any] = {"level": level_name, "time": _timestamp(), "msg": msg}
        record.update(fields)
        line = json.dumps(record, default=str, ensure_ascii=False) + "\n"
        with self._lock:
            if self.output in _STANDARD_STREAMS:
                stream = sys.stdout if self.output == "stdout" else sys.stderr
                stream.write(line)
                stream.flush()
            else:
                with open(self.output, "a", encoding="utf-8") as handle:
                    handle.write(line)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._emit("debug", msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._emit("info", msg, kwargs)

    def info_t(self, trace_id: str, msg: str, **kwargs: Any) -> None:
        self._emit("info", msg, {**kwargs, "trace_id": trace_id})

    def warn(self, msg: str, **kwargs: Any) -> None:
        self._emit("warn", msg, kwargs)

    def warn_t(self, trace_id: str, msg: str, **kwargs: Any) -> None:
        self._emit("warn", msg, {**kwargs, "trace_id": trace_id})

    def error(self, msg: str, err: BaseException | None, **kwargs: Any) -> None:
        fields = dict(kwargs)
        if err is not None:
            fields["error"] = str(err)
        fields["stacktrace"] = _stacktrace()
        self._emit("error", msg, fields)

    def error_t(self, trace_id: str, msg: str, err: BaseException | None, **kwargs: Any) -> None:
        fields = {**kwargs, "trace_id": trace_id}
        if err is not None:
            fields["error"] = str(err)
        fields["stacktrace"] = _stacktrace()
        self._emit("error", msg, fields)

    def printf(self, fmt: str, *args: Any) -> None:
        """Log at info level, formatting with printf-style arguments when given."""
        self.info(fmt % args if args else fmt)

    def print(self, fmt: str, *args: Any) -> None:
        """Same as printf."""
        self.info(fmt % args if args else fmt)


def new_logger(level: str, output: str) -> Logger:
    """Create a logger; unknown levels mean info and an empty output means stdout."""
    return Logger(level, output)