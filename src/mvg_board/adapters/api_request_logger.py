"""Logging of outgoing API requests, enabled by the ``log_requests`` setting."""

import json
import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def build_url_with_params(url: str, params: Mapping[str, Any] | None) -> str:
    """Build the full URL with query parameters, in the order given."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in params.items())
    return f"{url}&{param_str}" if "?" in url else f"{url}?{param_str}"


def redact_sensitive_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Replace values of credential-bearing headers."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    *,
    enabled: bool = False,
) -> None:
    """Log request details when ``enabled``.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional).
        headers: Request headers (optional, sensitive headers are redacted).
        enabled: Whether request logging is switched on.
    """
    if not enabled:
        return

    log_parts = [f"{method} {build_url_with_params(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(redact_sensitive_headers(headers), indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
