"""Logging setup: root handlers, secret redaction and HTTP access logs."""

import logging
import os
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from tasklist.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"
LOG_FILENAME = "app.log"

REDACTED = "[REDACTED]"
REDACTED_FIELDS = frozenset({"password", "token"})

# Attributes every LogRecord has; anything else came in through extra=.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

# Marks handlers installed here so repeated configuration replaces them.
_HANDLER_FLAG = "_tasklist_handler"

access_logger = logging.getLogger("tasklist.access")


class RedactingFilter(logging.Filter):
    """
    Replace password/token extra fields so secrets never reach a handler.

    Covers top-level extras and keys one level down in dict-valued extras
    (e.g. extra={"body": {"password": ...}}).
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in list(record.__dict__.items()):
            if key in REDACTED_FIELDS:
                setattr(record, key, REDACTED)
            elif isinstance(value, dict) and value.keys() & REDACTED_FIELDS:
                setattr(
                    record,
                    key,
                    {k: REDACTED if k in REDACTED_FIELDS else v for k, v in value.items()},
                )
        return True


class ExtraFormatter(logging.Formatter):
    """Standard format followed by the record's extra= fields as key=value pairs."""

    # LOG_DATEFMT ends in a literal Z.
    converter = time.gmtime

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {
            k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS and not k.startswith("_")
        }
        if not extras:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
        return f"{line} {pairs}"


def configure_logging(settings: Settings) -> None:
    """
    Install stderr (and, with LOG_DIR, file) handlers on the root logger.

    Safe to call more than once: handlers from a previous call are replaced.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                os.path.join(settings.LOG_DIR, LOG_FILENAME), mode="a", encoding="utf-8"
            )
        )

    formatter = ExtraFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(RedactingFilter())
        setattr(handler, _HANDLER_FLAG, True)
        root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL)


def access_log_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """HTTP middleware: one access log line per request (method, path, status; no headers or body)."""
    try:
        response = await call_next(request)
    except Exception:
        access_logger.exception(
            "request_error",
            extra={"method": request.method, "path": request.url.path},
        )
        raise
    access_logger.log(
        access_log_level(response.status_code),
        "request_completed",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
        },
    )
    return response
