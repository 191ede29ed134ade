"""Shared HTTP helpers used by the registry lookups.

Every request is attempted exactly once and responses are never cached. A
transport failure ends the run with ``CONNECTION_ERROR``; since the import
map is only written after all lookups, nothing is left half-updated.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, NamedTuple, Optional, Tuple

import requests

from constants import Constants, ExitCodes
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


class HttpResult(NamedTuple):
    """What the registry lookups need from a response."""
    status_code: int
    body: str
    next_url: Optional[str]  # rel="next" Link header, for paginated APIs


def _abort(context: str, reason: str) -> None:
    logger.error("%s lookup aborted: %s", context, reason)
    sys.exit(ExitCodes.CONNECTION_ERROR.value)


def fetch(url: str, *, context: str, headers: Optional[Dict[str, str]] = None) -> HttpResult:
    """GET ``url`` once and return status, body and pagination link.

    Args:
        url: Target URL.
        context: Registry tag for logs (e.g., "deno.land", "npm", "github").
        headers: Optional request headers.

    Returns:
        HttpResult for any HTTP answer, including non-200 ones.
    """
    with Timer() as timer:
        try:
            res = requests.get(url, headers=headers, timeout=Constants.REQUEST_TIMEOUT)
        except requests.Timeout:
            _abort(context, f"no answer within {Constants.REQUEST_TIMEOUT} seconds")
        except requests.RequestException as exc:  # includes ConnectionError
            _abort(context, f"connection error: {exc}")

    next_link = (res.links or {}).get("next") or {}
    result = HttpResult(res.status_code, res.text or "", next_link.get("url"))
    if is_debug_enabled(logger):
        logger.debug(
            "HTTP GET",
            extra=extra_context(
                event="http_response",
                component="http_client",
                status_code=result.status_code,
                duration_ms=timer.duration_ms(),
                target=safe_url(url),
                context=context
            )
        )
    return result


def get_json(
    url: str,
    *,
    context: str,
    headers: Optional[Dict[str, str]] = None
) -> Tuple[int, Optional[Any]]:
    """GET ``url`` and decode its JSON body.

    Returns:
        Tuple of (status_code, parsed_json_or_none); the body is only decoded
        on a 200 answer.
    """
    result = fetch(url, context=context, headers=headers)
    if result.status_code != 200 or not result.body:
        return result.status_code, None
    try:
        return result.status_code, json.loads(result.body)
    except json.JSONDecodeError:
        logger.warning("%s returned a body that is not valid JSON: %s", context, safe_url(url))
        return result.status_code, None
