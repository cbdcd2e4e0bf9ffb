"""Error types of the WhatsApp Graph API layer.

Purpose:
- Provide typed exceptions thrown by `WhatsAppClient`.
- Expose HTTP-oriented context (status code, Graph error body) for diagnosis.

Usage:
- Catch `WhatsAppApiError` and inspect `status_code` or `details`.
- Catch `WhatsMSError` to handle every error raised by this package.
"""

from __future__ import annotations

from typing import Any, Optional


class WhatsMSError(Exception):
    """Base error for WhatsMS."""


class WhatsAppApiError(WhatsMSError):
    """Failure reported by (or while reaching) the WhatsApp Graph API.

    Args:
        message: Human-readable error description, the Graph ``error.message`` when present.
        status_code: HTTP status code, ``None`` for transport failures.
        details: Raw response payload (parsed JSON or text).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class WhatsAppCredentialsError(WhatsMSError):
    """Raised when the access token or phone number id is missing."""
