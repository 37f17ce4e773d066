"""Harvest error payload models."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ErrorDetail:
    """Error body returned by the Harvest API.

    Authentication failures use the OAuth shape
    ``{"error": "invalid_token", "error_description": "..."}``, while
    validation failures carry a single ``{"message": "..."}``.
    """

    error: str | None = None  # Machine-readable error code
    error_description: str | None = None  # Human-readable explanation
    message: str | None = None  # Validation message (422)

    # Any other members the API adds
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorDetail | None":
        """Parse the error payload from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorDetail object or None if the body is not a Harvest error object
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, empty bodies, or missing .json() method
            return None

        if not isinstance(data, dict):
            return None

        known_fields = {"error", "error_description", "message"}
        if not any(field in data for field in known_fields):
            return None

        extensions = {k: v for k, v in data.items() if k not in known_fields}

        return cls(
            error=data.get("error"),
            error_description=data.get("error_description"),
            message=data.get("message"),
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert the error payload to an exception message."""
        lines = []

        if self.message:
            lines.append(self.message)

        if self.error_description:
            lines.append(self.error_description)
        elif self.error and not self.message:
            lines.append(self.error)

        if self.error and (self.error_description or self.message):
            lines.append(f"Error code: {self.error}")

        if self.extensions:
            lines.append("Extension fields:")
            for key, value in self.extensions.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines) if lines else "Unknown API error"
