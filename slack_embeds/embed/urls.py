"""Slack message permalinks."""

import re
from dataclasses import dataclass
from urllib.parse import parse_qs, urlencode


# Channel, group and direct message URLs all share this form:
#   https://yourteam.slack.com/archives/C0123ABYZ/p1234567890123456
MESSAGE_URL = re.compile(
    r'^https?://(?P<team>[a-zA-Z0-9-]+)\.slack\.com/archives/(?P<channel>[^/?#]+)/p(?P<timestamp>\d+)(?:\?(?P<query>[^#]*))?$'
)


@dataclass(frozen=True)
class MessageURL:
    """Parts of a Slack message permalink.

    Attributes:
        url: The original URL.
        team: Team subdomain.
        channel_id: Channel ID.
        timestamp_token: Digits after ``p`` (microsecond timestamp).
        thread_ts: ``thread_ts`` query parameter, if present.
    """

    url: str
    team: str
    channel_id: str
    timestamp_token: str
    thread_ts: str | None = None

    @property
    def ts(self) -> str:
        """Message timestamp in Slack API form."""
        return timestamp_to_ts(self.timestamp_token)


def timestamp_to_ts(token: str) -> str:
    """Convert permalink digits to ``seconds.microseconds``.

    >>> timestamp_to_ts('1610000000123456')
    '1610000000.123456'
    """
    digits = token.removeprefix('p').zfill(7)
    return f'{digits[:-6]}.{digits[-6:]}'


def parse_message_url(url: str) -> MessageURL | None:
    """Parse a Slack message permalink, or return None if it is not one."""
    match = MESSAGE_URL.match(url.strip())
    if not match:
        return None

    thread_ts = None
    if match.group('query'):
        values = parse_qs(match.group('query')).get('thread_ts')
        if values and values[0]:
            thread_ts = values[0]

    return MessageURL(
        url=url,
        team=match.group('team'),
        channel_id=match.group('channel'),
        timestamp_token=match.group('timestamp'),
        thread_ts=thread_ts,
    )


def build_permalink(team: str, channel_id: str, ts: str, thread_ts: str | None = None) -> str:
    """Build a message permalink from an API timestamp."""
    link = f'https://{team}.slack.com/archives/{channel_id}/p{ts.replace(".", "")}'
    if thread_ts:
        link += '?' + urlencode({'thread_ts': thread_ts})
    return link
