"""Rendering of Slack messages into embeddable HTML."""

import logging
from datetime import datetime, timezone, tzinfo

from slack_embeds.embed.urls import build_permalink, parse_message_url, timestamp_to_ts
from slack_embeds.errors import NotFoundError, SlackEmbedError
from slack_embeds.formatting import escape_html, escape_url, format_message_text
from slack_embeds.log import LogLevel, log
from slack_embeds.models import Author, Channel, Message
from slack_embeds.slack.api import SlackAPI


logger = logging.getLogger(__name__)


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix for a day of the month."""
    if 11 <= day % 100 <= 13:
        return 'th'
    return {1: 'st', 2: 'nd', 3: 'rd'}.get(day % 10, 'th')


def format_timestamp(ts: str | float, tz: tzinfo | None = None) -> str:
    """Format a Slack timestamp like ``Jan 7th at 06:40 (UTC)``.

    Args:
        ts: Seconds since the epoch, possibly fractional.
        tz: Timezone to display in. Defaults to UTC.
    """
    moment = datetime.fromtimestamp(float(ts), tz or timezone.utc)
    return f'{moment:%b} {moment.day}{ordinal_suffix(moment.day)} at {moment:%H:%M} ({moment:%Z})'


def default_embed(url: str) -> str:
    """Plain link used whenever a rich embed cannot be rendered."""
    return f'<a href="{escape_url(url)}">{escape_html(url)}</a>'


class EmbedRenderer:
    """Renders Slack message permalinks as HTML embeds.

    Lookups go through the injected Slack API strictly in sequence:
    message, author, channel, then mentions found in the text.
    """

    def __init__(self, api: SlackAPI, tz: tzinfo | None = None):
        """Initialize the renderer.

        Args:
            api: Slack API used for all lookups.
            tz: Timezone for footer timestamps. Defaults to UTC.
        """
        self.api = api
        self.tz = tz or timezone.utc

    async def embed_url(self, url: str) -> str | None:
        """Render a permalink, or return None if the URL is not one."""
        parsed = parse_message_url(url)
        if parsed is None:
            return None
        return await self.render_message_embed(
            parsed.team,
            parsed.channel_id,
            parsed.timestamp_token,
            parsed.thread_ts,
            url=url,
        )

    async def render_message_embed(
        self,
        team: str,
        channel_id: str,
        timestamp_token: str,
        thread_ts: str | None = None,
        url: str | None = None,
    ) -> str:
        """Render a message embed, falling back to a plain link on failure.

        Never raises. Failures are logged and produce the default embed.

        Args:
            team: Team subdomain.
            channel_id: Channel the message was posted in.
            timestamp_token: Permalink digits (microsecond timestamp).
            thread_ts: Thread parent timestamp, if the message is a reply.
            url: Original permalink; rebuilt from the parts if omitted.

        Returns:
            HTML fragment.
        """
        ts = timestamp_to_ts(timestamp_token)
        if url is None:
            url = build_permalink(team, channel_id, ts, thread_ts)
        fallback = default_embed(url)

        if not self.api.get_token():
            log(LogLevel.WARNING, 'No token set for Slack embeds')
            return fallback

        try:
            message = await self.api.fetch_message(channel_id, ts, thread_ts)
            author = await self.fetch_author(message)
            channel = await self.api.fetch_channel(channel_id)
            return await self.render_message(team, message, channel, author, thread_ts)
        except SlackEmbedError as e:
            log(LogLevel.WARNING, e, {'url': url, 'channel': channel_id, 'timestamp': ts})
            return fallback
        except Exception:
            logger.exception(f'Unexpected error rendering embed for {url}')
            return fallback

    async def fetch_author(self, message: Message) -> Author:
        """Fetch the user or bot who posted a message."""
        if message.user:
            return await self.api.fetch_user(message.user)
        if message.bot_id:
            return await self.api.fetch_bot(message.bot_id)
        raise NotFoundError('Message has no author', timestamp=message.ts)

    async def render_message(
        self,
        team: str,
        message: Message,
        channel: Channel,
        author: Author,
        thread_ts: str | None = None,
    ) -> str:
        """Format a message into the HTML for embedding.

        Args:
            team: Team subdomain.
            message: Message to render.
            channel: Channel the message was posted in.
            author: User or bot who posted the message.
            thread_ts: Thread parent timestamp; switches the footer wording.

        Returns:
            HTML for the embed.
        """
        message_link = escape_url(build_permalink(team, channel.id, message.ts, thread_ts))
        author_link = escape_url(f'https://{team}.slack.com/team/{author.id}')
        author_name = escape_html(author.display_name)

        avatar = (
            f'<img class="slack-embed__author_icon" alt="{author_name}" '
            f'src="{escape_url(author.avatar_url)}" width="16" height="16" />'
        )
        header = f'<div class="slack-embed__author"><a href="{author_link}">{avatar}{author_name}</a></div>'

        body = await format_message_text(team, message.text, self.api)
        text = f'<p class="slack-embed__text">{body}</p>'

        icon = '<span class="slack-embed__footer_icon">&nbsp;</span>'
        posted_in = 'From a thread in' if thread_ts else 'Posted in'
        footer = (
            f'<div class="slack-embed__footer">{icon}'
            f'<a href="{message_link}">{posted_in} #{escape_html(channel.name)}</a>'
            f'<time class="slack-embed__timestamp"><a href="{message_link}">'
            f'{escape_html(format_timestamp(message.ts, self.tz))}</a></time></div>'
        )

        return f'<div class="slack-embed">{header}{text}{footer}</div>'
