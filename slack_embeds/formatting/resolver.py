"""Resolution of Slack references to HTML."""

import logging
from typing import TYPE_CHECKING

from slack_embeds.formatting.escaping import encode_style_delimiters, escape_html, escape_url
from slack_embeds.formatting.models import Reference, ReferenceKind
from slack_embeds.formatting.patterns import (
    BROADCAST_COMMANDS,
    REFERENCE,
    classify_reference,
    escape_brackets,
    format_styles,
)


if TYPE_CHECKING:
    from slack_embeds.slack.api import SlackAPI


logger = logging.getLogger(__name__)


class ReferenceResolver:
    """Rewrites ``<...>`` references in message text to HTML.

    Mention labels are looked up through the Slack API one at a time,
    left to right. Lookup errors propagate to the caller.

    Usage:
        resolver = ReferenceResolver('acme', api)
        html = await resolver.format_references(text)
    """

    def __init__(self, team: str, api: 'SlackAPI'):
        self.team = team
        self.api = api

    async def format_references(self, text: str | None) -> str:
        """Replace every reference in text with its HTML rendering.

        Args:
            text: Raw Slack message text.

        Returns:
            Text with anchors for mentions and links.
        """
        if not text:
            return ''

        parts: list[str] = []
        position = 0
        for match in REFERENCE.finditer(text):
            parts.append(escape_brackets(text[position : match.start()]))
            reference = classify_reference(match.group(1), match.group(2))
            parts.append(await self.resolve(reference))
            position = match.end()
        parts.append(escape_brackets(text[position:]))

        return ''.join(parts)

    async def resolve(self, reference: Reference) -> str:
        """Render a single classified reference."""
        if reference.kind is ReferenceKind.CHANNEL:
            return await self._resolve_channel(reference)
        if reference.kind is ReferenceKind.USER:
            return await self._resolve_user(reference)
        if reference.kind is ReferenceKind.COMMAND:
            return self._resolve_command(reference)
        return self._resolve_link(reference)

    async def _resolve_channel(self, reference: Reference) -> str:
        # The label is always refreshed from Slack, even when one was given
        channel = await self.api.fetch_channel(reference.target)
        url = f'https://{self.team}.slack.com/archives/{reference.target}'
        return f'<a href="{escape_url(url)}">#{escape_html(channel.name)}</a>'

    async def _resolve_user(self, reference: Reference) -> str:
        label = reference.label
        if not label:
            user = await self.api.fetch_user(reference.target)
            label = user.name
        url = f'https://{self.team}.slack.com/team/{reference.target}'
        return f'<a href="{escape_url(url)}">@{escape_html(label)}</a>'

    def _resolve_command(self, reference: Reference) -> str:
        if reference.command in BROADCAST_COMMANDS:
            return escape_html(f'@{reference.raw[1:]}')
        if reference.command == '!subteam':
            return escape_html(f'@{reference.label or ""}')
        if reference.command == '!date':
            return escape_html(reference.label or '')

        logger.debug(f'Unknown command reference: {reference.raw}')
        return escape_html(reference.raw)

    def _resolve_link(self, reference: Reference) -> str:
        # NOTE: labels are emitted unescaped so senders can pass pre-formatted
        # HTML. This is an injection seam if the text is not from Slack.
        label = reference.label or reference.raw
        return f'<a href="{escape_url(encode_style_delimiters(reference.target))}">{label}</a>'


async def format_references(team: str, text: str | None, api: 'SlackAPI') -> str:
    """Resolve references in text for the given team."""
    return await ReferenceResolver(team, api).format_references(text)


async def format_message_text(team: str, text: str | None, api: 'SlackAPI') -> str:
    """Convert raw Slack message text (mrkdwn) to safe HTML.

    Args:
        team: Slack team subdomain, used for mention links.
        text: Raw message text.
        api: Slack API used to look up mention labels.

    Returns:
        HTML fragment for the message body.
    """
    return format_styles(await format_references(team, text, api))
