"""Error types raised by the OAuth client and structured CLI error output."""

from __future__ import annotations

import json
import sys

from rich.console import Console

console = Console(stderr=True)


class OAuthClientError(Exception):
    """Base class for every failure raised by battlenet_oauth."""

    code = "RUNTIME_ERROR"


class TransportError(OAuthClientError):
    """DNS, connection, TLS or timeout failure talking to the provider."""

    code = "TRANSPORT_ERROR"


class DecodeError(OAuthClientError):
    """Response body is not JSON or does not match the expected shape.

    ``status_code`` is the HTTP status of the response that failed to decode,
    so callers can tell a provider rejection (e.g. 401 with
    ``{"error": "invalid_client"}``) from a malformed success payload.
    """

    code = "DECODE_ERROR"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedInputError(OAuthClientError, ValueError):
    """Caller supplied an empty credential, token or region, or an unusable region."""

    code = "MALFORMED_INPUT"


# Actionable hints keyed by error substring
_ERROR_HINTS: list[tuple[str, str]] = [
    ("invalid_client", "Provider rejected the credentials — check BATTLENET_CLIENT_ID/BATTLENET_CLIENT_SECRET"),
    ("invalid_token", "Token is unknown or expired — request a new one with `battlenet-oauth token get`"),
    ("http 401", "Provider rejected the request — check your credentials"),
    ("http 404", "Endpoint not found — check the region code"),
    ("must not be empty", "Set the missing value in your .env file or pass it explicitly"),
    ("timeout", "Request timed out — try again or check network connectivity"),
    ("name or service not known", "Host could not be resolved — check the region code"),
    ("connect", "Connection error — check network connectivity and the region code"),
]


def _get_hint(error_message: str) -> str | None:
    """Match an error message to an actionable hint."""
    lower = error_message.lower()
    for pattern, hint in _ERROR_HINTS:
        if pattern in lower:
            return hint
    return None


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout for machine consumption:
    {"error": true, "code": "DECODE_ERROR", "message": "...", "hint": "..."}

    Also prints a human-readable error to stderr.
    """
    message = str(error)
    hint = _get_hint(message)
    code = error.code if isinstance(error, OAuthClientError) else "RUNTIME_ERROR"

    error_obj: dict[str, object] = {
        "error": True,
        "code": code,
        "message": message,
    }
    if isinstance(error, DecodeError) and error.status_code is not None:
        error_obj["status_code"] = error.status_code
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
