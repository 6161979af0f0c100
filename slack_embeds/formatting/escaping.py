"""HTML and URL escaping helpers for embed output."""

import re


# Ampersands that do not already start a character reference
BARE_AMPERSAND = re.compile(r'&(?!(?:[a-zA-Z][a-zA-Z0-9]*|#[0-9]+|#[xX][0-9a-fA-F]+);)')

# Characters allowed to survive in a URL; everything else is stripped
URL_DISALLOWED = re.compile(r"[^a-zA-Z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\u0080-\U0010ffff]")

ALLOWED_PROTOCOLS = frozenset(
    {
        'http',
        'https',
        'ftp',
        'ftps',
        'mailto',
        'news',
        'irc',
        'gopher',
        'nntp',
        'feed',
        'telnet',
        'mms',
        'rtsp',
        'sms',
        'svn',
        'tel',
        'fax',
        'xmpp',
        'webcal',
        'urn',
    }
)

# Percent-encoded in message links so hrefs never contain style delimiters
STYLE_DELIMITERS = {
    '*': '%2A',
    '_': '%5F',
    '~': '%7E',
}


def escape_html(text: str) -> str:
    """Escape text for use in HTML content or attributes.

    Existing character references are kept, so escaping is idempotent.
    """
    text = BARE_AMPERSAND.sub('&amp;', text)
    return text.replace('<', '&lt;').replace('>', '&gt;').replace('"', '&quot;').replace("'", '&#039;')


def encode_style_delimiters(url: str) -> str:
    """Percent-encode characters that would be read as inline styles."""
    for char, encoded in STYLE_DELIMITERS.items():
        url = url.replace(char, encoded)
    return url


def escape_url(url: str) -> str:
    """Sanitize a URL for use in an ``href`` attribute.

    Strips characters that are not valid in URLs, rejects unknown
    protocols (returning an empty string) and escapes the result for HTML.

    Args:
        url: Untrusted URL.

    Returns:
        Attribute-safe URL, or ``''`` if the URL is unusable.
    """
    url = url.strip().replace(' ', '%20')
    url = URL_DISALLOWED.sub('', url)
    if not url:
        return ''

    is_relative = url.startswith(('/', '#', '?'))
    if not is_relative:
        if ':' not in url:
            url = f'http://{url}'
        scheme = url.split(':', 1)[0]
        if scheme.lower() not in ALLOWED_PROTOCOLS:
            return ''

    url = BARE_AMPERSAND.sub('&amp;', url)
    return url.replace('&amp;', '&#038;').replace("'", '&#039;')
