"""Pydantic models for the Slack API entities used in embeds."""

from pydantic import BaseModel, ConfigDict


class SlackModel(BaseModel):
    """Base model that keeps any extra fields Slack sends."""

    model_config = ConfigDict(extra='allow')


class UserProfile(SlackModel):
    display_name: str = ''
    image_32: str = ''
    image_48: str = ''
    image_72: str = ''


class BotIcons(SlackModel):
    image_36: str = ''
    image_48: str = ''
    image_72: str = ''


class Author(SlackModel):
    """Message author, either a user or a bot.

    Attributes:
        id: Slack user or bot ID.
        name: Account name.
        real_name: Full name, may be empty.
        profile: User profile (users only).
        icons: Bot icon set (bots only).
    """

    id: str
    name: str = ''
    real_name: str | None = None
    profile: UserProfile | None = None
    icons: BotIcons | None = None

    @property
    def display_name(self) -> str:
        """Real name, falling back to the account name."""
        return self.real_name or self.name

    @property
    def avatar_url(self) -> str:
        """Small avatar: the user's profile image, else the bot icon."""
        if self.profile is not None:
            return self.profile.image_32
        if self.icons is not None:
            return self.icons.image_36
        return ''


class User(Author):
    pass


class Bot(Author):
    user_id: str | None = None


class Channel(SlackModel):
    id: str
    name: str = ''


class Message(SlackModel):
    """A single Slack message.

    Attributes:
        ts: Message timestamp (``seconds.microseconds``).
        text: Raw mrkdwn text.
        user: Author user ID for user messages.
        bot_id: Bot ID for bot messages.
        thread_ts: Parent timestamp for thread replies.
    """

    ts: str
    text: str = ''
    user: str | None = None
    bot_id: str | None = None
    thread_ts: str | None = None
