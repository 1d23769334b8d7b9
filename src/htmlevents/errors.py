"""Error codes, messages and the exception raised when rendering fails.

Rendering has no validation layer: malformed names or markup produce
well-defined (if invalid) output rather than errors. The codes below only
cover objects that cannot be rendered at all.
"""

from __future__ import annotations

from typing import Any


def generate_error_message(code: str, detail: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        detail: Optional context (type name, encoding) to include in the message

    Returns:
        Human-readable error message string
    """
    messages = {
        "unknown-event": f"Cannot render object of type {detail}; expected an event",
        "unencodable-text": f"Rendered text cannot be encoded as {detail}",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class RenderError(ValueError):
    """Raised when an event cannot be rendered or encoded."""

    code: str
    event: Any

    def __init__(self, code: str, event: Any = None, detail: str | None = None) -> None:
        self.code = code
        self.event = event
        super().__init__(generate_error_message(code, detail))
