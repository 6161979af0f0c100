"""Error types raised while fetching and rendering Slack messages."""

from typing import Any


class SlackEmbedError(Exception):
    """Base error carrying a machine-readable code and structured context."""

    code = 'slack-embeds.error'

    def __init__(self, message: str, code: str | None = None, **context: Any):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context


class NetworkError(SlackEmbedError):
    """Raised when the Slack API could not be reached."""

    code = 'slack-embeds.request.network'


class MalformedResponseError(SlackEmbedError):
    """Raised when Slack returns an empty or undecodable body."""

    code = 'slack-embeds.request.malformed'


class APIRejectionError(SlackEmbedError):
    """Raised when Slack answers with ``ok: false``."""

    code = 'slack-embeds.request.not_ok'

    def __init__(self, message: str, error: str, **context: Any):
        super().__init__(message, error=error, **context)
        self.error = error


class NotFoundError(SlackEmbedError):
    """Raised when a successful response does not contain the entity."""

    code = 'slack-embeds.not_found'


class UnsupportedReferenceError(SlackEmbedError):
    """Raised for addresses we do not know how to resolve."""

    code = 'slack-embeds.unsupported_reference'
