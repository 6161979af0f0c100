"""Slack mrkdwn to HTML formatting."""

from slack_embeds.formatting.escaping import encode_style_delimiters, escape_html, escape_url
from slack_embeds.formatting.models import Reference, ReferenceKind
from slack_embeds.formatting.patterns import LINE_BREAK, NO_AUTOP_ATTRIBUTE, classify_reference, format_styles
from slack_embeds.formatting.resolver import ReferenceResolver, format_message_text, format_references


__all__ = [
    'LINE_BREAK',
    'NO_AUTOP_ATTRIBUTE',
    'Reference',
    'ReferenceKind',
    'ReferenceResolver',
    'classify_reference',
    'encode_style_delimiters',
    'escape_html',
    'escape_url',
    'format_message_text',
    'format_references',
    'format_styles',
]
