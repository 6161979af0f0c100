"""Slack message embeds."""

from slack_embeds.embed.renderer import EmbedRenderer, default_embed, format_timestamp
from slack_embeds.embed.urls import MessageURL, build_permalink, parse_message_url, timestamp_to_ts


__all__ = [
    'EmbedRenderer',
    'MessageURL',
    'build_permalink',
    'default_embed',
    'format_timestamp',
    'parse_message_url',
    'timestamp_to_ts',
]
