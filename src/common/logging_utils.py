"""Centralized logging helpers.

Configures the root logger from the environment and provides small helpers
for structured DEBUG traces (``extra_context``), URL redaction and timing.
"""
from __future__ import annotations

import logging
import os
import re
import time
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from constants import Constants

_SENSITIVE_PARAMS = {"token", "access_token", "api_key", "apikey", "key", "secret", "password"}
_TOKEN_RE = re.compile(r"(gh[pousr]_[A-Za-z0-9]{16,}|glpat-[A-Za-z0-9\-_]{16,})")
_HANDLER_MARK = "_added_by_configure_logging"


def configure_logging(log_file: Optional[str] = None, quiet: bool = False) -> None:
    """Configure the root logger.

    The level is taken from the ``PINBUMP_LOG_LEVEL`` environment variable
    (defaults to INFO). Handlers installed by a previous call are replaced so
    repeated calls (tests, embedding) do not duplicate output.

    Args:
        log_file: Optional path of a file to tee log records to.
        quiet: When True, no console handler is installed.
    """
    level_name = os.environ.get(Constants.ENV_LOG_LEVEL, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(Constants.LOG_FORMAT)
    if not quiet:
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        setattr(stream, _HANDLER_MARK, True)
        root.addHandler(stream)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARK, True)
        root.addHandler(file_handler)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records would be emitted by ``logger``."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records, dropping None values."""
    return {k: v for k, v in fields.items() if v is not None}


def redact(text: str) -> str:
    """Mask anything that looks like an access token."""
    if not text:
        return text
    return _TOKEN_RE.sub("[REDACTED]", text)


def safe_url(url: str) -> str:
    """Return ``url`` with userinfo and sensitive query parameters redacted."""
    if not url:
        return url
    try:
        parts = urlsplit(url)
    except ValueError:
        return redact(url)
    netloc = parts.netloc
    if "@" in netloc:
        netloc = "[REDACTED]@" + netloc.rsplit("@", 1)[1]
    query = parts.query
    if query:
        pairs = [
            (k, "[REDACTED]" if k.lower() in _SENSITIVE_PARAMS else v)
            for k, v in parse_qsl(query, keep_blank_values=True)
        ]
        query = urlencode(pairs, safe="[]")
    return redact(urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment)))


class Timer:
    """Context manager measuring wall-clock duration in milliseconds."""

    def __init__(self):
        self._start: Optional[float] = None
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds, measured up to now while still running."""
        if self._start is None:
            return 0
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
