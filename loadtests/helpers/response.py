"""Response error extraction for load test observability.

Parses Storefront API error responses into human-readable messages. Every
error body has the shape ``{"error": "msg", "statusCode": 400}``;
validation failures add ``"fields": {"field": ["msg", ...]}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from requests.exceptions import JSONDecodeError

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except JSONDecodeError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict) or "error" not in body:
        return str(body)[:300]

    message = str(body["error"])
    fields = body.get("fields")
    if isinstance(fields, dict) and fields:
        details = " | ".join(f"{name}: {', '.join(map(str, msgs))}" for name, msgs in fields.items())
        return f"{message} ({details})"
    return message
