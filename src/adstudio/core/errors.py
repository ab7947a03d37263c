"""Error taxonomy for the Ad Studio backend.

Every failure raised by the core package derives from :class:`AdStudioError`.
Malformed request payloads never reach this layer: they are rejected by
pydantic during request parsing and surface as HTTP 422.

Hierarchy::

    AdStudioError
    ├── PromptNotFoundError   unknown base-prompt id on regenerate
    ├── RemoteError           non-success status or transport failure upstream
    ├── ResponseFormatError   upstream response has an unexpected shape
    └── GenerationError       caller-facing wrapper for batch/regenerate failures
"""

from __future__ import annotations


class AdStudioError(Exception):
    """Base class for all Ad Studio errors."""

    pass


class PromptNotFoundError(AdStudioError):
    """Raised when a base-prompt id is not present in the prompt store."""

    def __init__(self, base_prompt_id: str):
        self.base_prompt_id = base_prompt_id
        super().__init__(f"Base prompt not found: {base_prompt_id}")


class RemoteError(AdStudioError):
    """Raised when the image-generation API call does not succeed.

    Attributes:
        status_code: Upstream HTTP status, or ``None`` when the request never
            produced a response (connection failure, timeout).
        body: Raw upstream response text, or the transport error description.
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ResponseFormatError(AdStudioError):
    """Raised when the upstream response cannot be interpreted."""

    pass


class GenerationError(AdStudioError):
    """Raised to the caller when a batch or regenerate call fails.

    The message embeds the underlying error message; the original exception
    is kept as ``__cause__``.
    """

    pass
