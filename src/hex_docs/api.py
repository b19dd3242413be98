from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from .config import Settings
from .errors import AuthError
from .http_client import HttpClient, HttpResponse
from .urls import release_docs_url


def auth_headers(settings: Settings) -> dict[str, str]:
    if not settings.api_key:
        raise AuthError(
            "No API key configured; set HEX_API_KEY to authenticate with the "
            "package API"
        )
    return {"Authorization": settings.api_key, "Accept": "application/json"}


def release_docs_delete(
    http: HttpClient,
    settings: Settings,
    *,
    name: str,
    version: str,
    auth: dict[str, str],
) -> HttpResponse:
    url = release_docs_url(settings.api_url, name, version)
    return http.delete(url, headers=auth)


def _status_line(status_code: int) -> str:
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        return f"HTTP status {status_code}"
    return f"HTTP status {status_code} {phrase}"


def _pretty_errors(errors: Any, *, depth: int = 0) -> list[str]:
    indent = "  " * depth
    if isinstance(errors, dict):
        lines: list[str] = []
        for key, value in errors.items():
            if isinstance(value, (dict, list)):
                lines.append(f"{indent}{key}:")
                lines.extend(_pretty_errors(value, depth=depth + 1))
            else:
                lines.append(f"{indent}{key}: {value}")
        return lines
    if isinstance(errors, list):
        lines = []
        for item in errors:
            lines.extend(_pretty_errors(item, depth=depth))
        return lines
    return [f"{indent}{errors}"]


def format_error_result(status_code: int, body: bytes) -> str:
    """Render an API error response for the terminal.

    JSON bodies contribute their ``message`` and ``errors`` fields; anything
    else is shown verbatim.
    """

    lines = [_status_line(status_code)]
    text = body.decode("utf-8", errors="replace").strip()
    try:
        payload = json.loads(text) if text else None
    except json.JSONDecodeError:
        payload = None

    message = payload.get("message") if isinstance(payload, dict) else None
    errors = payload.get("errors") if isinstance(payload, dict) else None
    if message or errors:
        if message:
            lines.append(str(message))
        if errors:
            lines.extend(_pretty_errors(errors))
    elif text:
        lines.append(text)
    return "\n".join(lines)
