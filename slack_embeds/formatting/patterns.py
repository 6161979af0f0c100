"""Slack mrkdwn patterns, reference classification and inline styles."""

import re

from slack_embeds.formatting.models import Reference, ReferenceKind


# <REF> or <REF|LABEL>
REFERENCE = re.compile(r'<([^<|>]*)(?:\|([^>]*))?>')
STRAY_BRACKET = re.compile(r'[<>]')

# Inline styles, applied in this order. Spans never cross a line break.
BOLD = re.compile(r'\B\*([^\r\n]+?)\*\B')
ITALIC = re.compile(r'\b_([^\r\n]+?)_\b')
STRIKE = re.compile(r'\B~([^\r\n]+?)~\B')
CODE = re.compile(r'\B`([^\r\n]+?)`\B')

STYLES = (
    (BOLD, r'<strong>\1</strong>'),
    (ITALIC, r'<em>\1</em>'),
    (STRIKE, r'<strike>\1</strike>'),
    (CODE, r'<code>\1</code>'),
)

NEWLINE = re.compile(r'\r\n|\n')

# Hosts must not auto-paragraph content around breaks carrying this attribute
NO_AUTOP_ATTRIBUTE = 'data-slack-embed-no-autop'
LINE_BREAK = f'<br {NO_AUTOP_ATTRIBUTE} />'

USER_PREFIXES = ('@U', '@W')
BROADCAST_COMMANDS = frozenset({'!here', '!channel', '!everyone'})


def classify_reference(raw: str, label: str | None = None) -> Reference:
    """Classify the contents of a ``<...>`` reference.

    Args:
        raw: Text between the brackets, before any ``|``.
        label: Text after the ``|``; empty labels count as absent.

    Returns:
        Classified Reference.
    """
    label = label or None

    if raw[:2] == '#C':
        return Reference(raw=raw, kind=ReferenceKind.CHANNEL, target=raw[1:], label=label)

    if raw[:2] in USER_PREFIXES:
        return Reference(raw=raw, kind=ReferenceKind.USER, target=raw[1:], label=label)

    if raw[:1] == '!':
        command = raw.split('^', 1)[0]
        return Reference(raw=raw, kind=ReferenceKind.COMMAND, label=label, command=command)

    return Reference(raw=raw, kind=ReferenceKind.LINK, target=raw, label=label)


def escape_brackets(text: str) -> str:
    """Escape angle brackets left over outside of references."""
    return STRAY_BRACKET.sub(lambda m: '&lt;' if m.group(0) == '<' else '&gt;', text)


def format_styles(text: str) -> str:
    """Apply bold, italic, strike and code styles, then convert newlines.

    Each style is a single non-overlapping pass over the previous result.
    Unpaired delimiters are left as-is.

    Args:
        text: Text with references already resolved.

    Returns:
        HTML with inline styles and line breaks.
    """
    if not text:
        return ''

    result = text
    for pattern, replacement in STYLES:
        result = pattern.sub(replacement, result)

    return NEWLINE.sub(LINE_BREAK, result)
