"""Shared HTTP plumbing for platform clients.

All calls go through one httpx.AsyncClient (connection reuse, configured
timeout). Responses are mapped onto the onboarding failure taxonomy:
400/409/422 -> PlatformValidationException (platform message kept verbatim),
network errors and any other non-2xx -> PlatformTransportException.
No retries.
"""

from __future__ import annotations

from typing import Any

import httpx

from portcullis.domain.exceptions import (
    PlatformTransportException,
    PlatformValidationException,
)
from portcullis.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

VALIDATION_STATUS_CODES = frozenset({400, 409, 422})


def create_http_client(timeout_seconds: float = 30.0) -> httpx.AsyncClient:
    """Shared client for all outbound platform calls; close with aclose()."""
    return httpx.AsyncClient(timeout=timeout_seconds)


def extract_error_message(response: httpx.Response) -> tuple[str | None, str | None]:
    """Return (message, code) from a platform error body, when present.

    Understands Clerk ({"errors": [{"message", "long_message", "code"}]}),
    Svix ({"code", "detail"}) and generic {"message"} / {"error"} bodies.
    """
    try:
        body: Any = response.json()
    except ValueError:
        return None, None
    if not isinstance(body, dict):
        return None, None
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        first = errors[0]
        return first.get("message") or first.get("long_message"), first.get("code")
    detail = body.get("detail")
    if isinstance(detail, str):
        return detail, body.get("code")
    if isinstance(detail, list) and detail and isinstance(detail[0], dict):
        return detail[0].get("msg"), body.get("code")
    message = body.get("message")
    if isinstance(message, str):
        return message, body.get("code") or body.get("error")
    error = body.get("error")
    if isinstance(error, str):
        return error, None
    if isinstance(error, dict):
        return error.get("message"), error.get("code")
    return None, None


async def send_platform_request(
    client: httpx.AsyncClient,
    platform: str,
    method: str,
    url: str,
    **kwargs: Any,
) -> httpx.Response:
    """Send one request and map failures; returns the (2xx) response.

    Raises:
        PlatformValidationException: 400/409/422 from the platform.
        PlatformTransportException: Network error or other non-2xx status.
    """
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        logger.error("%s request failed: %s %s error=%s", platform, method, url, exc)
        raise PlatformTransportException(platform, str(exc) or type(exc).__name__) from exc

    if response.is_success:
        return response

    message, code = extract_error_message(response)
    if response.status_code in VALIDATION_STATUS_CODES:
        logger.warning(
            "%s rejected request: status=%d code=%s message=%s",
            platform,
            response.status_code,
            code,
            message,
        )
        raise PlatformValidationException(
            platform,
            message or f"{platform} rejected the request",
            status_code=response.status_code,
            platform_code=code,
        )
    logger.error(
        "%s request failed: %s %s status=%d body=%s",
        platform,
        method,
        url,
        response.status_code,
        response.text[:500],
    )
    raise PlatformTransportException(
        platform,
        message or response.reason_phrase or f"HTTP {response.status_code}",
        status_code=response.status_code,
    )


def json_body(response: httpx.Response, platform: str) -> dict[str, Any]:
    """Decode a JSON object body; a non-object or undecodable body is a transport failure."""
    try:
        body = response.json()
    except ValueError as exc:
        raise PlatformTransportException(platform, "Response body is not JSON") from exc
    if not isinstance(body, dict):
        raise PlatformTransportException(platform, "Response body is not a JSON object")
    return body
