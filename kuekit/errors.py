"""Error types carrying status codes, database sentinels and typed error formatting."""

from __future__ import annotations

import logging

from kuekit.constants import ERR

_log = logging.getLogger(__name__)


class StatusCodeError(Exception):
    """An error paired with the HTTP status code to answer with."""

    def __init__(self, err: BaseException, status_code: int) -> None:
        super().__init__(str(err))
        self.err = err
        self.status_code = status_code

    def __str__(self) -> str:
        return str(self.err)


class _DatabaseError(Exception):
    default_message = "database error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class DuplicateEntryError(_DatabaseError):
    """A row with the same key already exists."""

    default_message = "duplicated entry"


class InvalidDateError(_DatabaseError):
    """A date value has an invalid format."""

    default_message = "invalid date format"


class NotFoundError(_DatabaseError):
    """The requested data does not exist."""

    default_message = "data not found"


class SQLBuilderError(_DatabaseError):
    """A SQL statement could not be built."""

    default_message = "error when building sql statement"


def new_status_error(message: str, status_code: int) -> StatusCodeError:
    """Create a StatusCodeError from a plain message."""
    return StatusCodeError(Exception(message), status_code)


def wrap_error(err: BaseException, status_code: int) -> StatusCodeError:
    """Attach a status code to an existing error, keeping its message."""
    return StatusCodeError(err, status_code)


def format_error(
    err_type: str, message: str, cause: BaseException | None = None
) -> Exception | None:
    """Build an error of the form "<type> | <message>[: <cause>]" and log it.

    Returns None when a cause is given whose message is empty.
    """
    result: Exception | None = None
    if cause is not None:
        if str(cause) != "":
            result = Exception(f"{err_type} | {message}: {cause}")
            result.__cause__ = cause
    else:
        result = Exception(f"{err_type} | {message}")

    _log.error(message, extra={"log_type": ERR, "error_type": err_type})
    return result


def trim_error_message(err: BaseException | str) -> tuple[str, str, Exception]:
    """Split a formatted error into its type, message and a plain error.

    Raises ValueError when the text holds no "|" separator.
    """
    parts = str(err).split("|")
    if len(parts) < 2:
        raise ValueError(f"error message has no type separator: {str(err)!r}")

    err_type = parts[0].strip()
    err_message = parts[1].strip()
    if len(parts) == 3:
        new_err = Exception(parts[2].strip())
    else:
        new_err = Exception(parts[1].strip())
    return err_type, err_message, new_err