from __future__ import annotations

from typing import Any


class TracelinkError(Exception):
    """Raised when the Tracelink API answers with an error envelope."""

    def __init__(self, message: str, code: int | None = None, response: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response

    def __repr__(self) -> str:
        return f"TracelinkError(message={self.message!r}, code={self.code!r})"
