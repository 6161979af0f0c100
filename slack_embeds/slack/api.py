"""Abstract Slack API capability consumed by the renderer."""

from abc import ABC, abstractmethod

from slack_embeds.models import Bot, Channel, Message, User


class SlackAPI(ABC):
    """Lookups the embed renderer needs from Slack.

    Every fetch raises a :class:`~slack_embeds.errors.SlackEmbedError`
    subclass on failure and may be served from a cache.
    """

    @abstractmethod
    def get_token(self) -> str | None:
        """Return the configured access token, or None if unset."""

    @abstractmethod
    async def fetch_message(self, channel_id: str, ts: str, thread_ts: str | None = None) -> Message:
        """Fetch a single message.

        Args:
            channel_id: Channel the message was posted in.
            ts: Message timestamp in ``seconds.microseconds`` form.
            thread_ts: Parent timestamp when the message is a thread reply.

        Returns:
            The message.
        """

    @abstractmethod
    async def fetch_user(self, user_id: str) -> User:
        """Fetch a user by ID."""

    @abstractmethod
    async def fetch_bot(self, bot_id: str) -> Bot:
        """Fetch a bot by ID."""

    @abstractmethod
    async def fetch_channel(self, channel_id: str) -> Channel:
        """Fetch a channel by ID."""
