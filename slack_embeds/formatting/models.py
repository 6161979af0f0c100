"""Reference tokens found in Slack message text."""

from dataclasses import dataclass
from enum import Enum


class ReferenceKind(Enum):
    """What a bracketed ``<...>`` reference points at."""

    CHANNEL = 'channel'  # <#C123|name>
    USER = 'user'  # <@U123|name>
    COMMAND = 'command'  # <!here>, <!subteam^S123|name>
    LINK = 'link'  # <https://example.com|label>


@dataclass(frozen=True)
class Reference:
    """A single bracketed reference, classified.

    Attributes:
        raw: Text between the brackets, before any ``|``.
        kind: Classification of the reference.
        target: Channel or user ID for mentions, URL for links.
        label: Explicit label after ``|``, or None.
        command: Command name (``!here``, ``!subteam``...) for commands.
    """

    raw: str
    kind: ReferenceKind
    target: str | None = None
    label: str | None = None
    command: str | None = None
