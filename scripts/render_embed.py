#!/usr/bin/env python3
"""Render Slack message permalinks as HTML embeds.

Prints one HTML fragment per URL. URLs that are not Slack message
permalinks are echoed unchanged.

Prerequisites:
- SLACK_EMBEDS_TOKEN (or SLACK_USER_TOKEN) environment variable must be set
"""

import argparse
import asyncio
import logging
import sys
from zoneinfo import ZoneInfo

from slack_embeds.config import get_config
from slack_embeds.embed.renderer import EmbedRenderer
from slack_embeds.slack.client import SlackClient


logger = logging.getLogger(__name__)


async def main() -> int:
    """Render each URL given on the command line."""
    parser = argparse.ArgumentParser(description='Render Slack message permalinks as HTML')
    parser.add_argument('urls', nargs='+', help='Slack message permalinks')
    parser.add_argument(
        '--timezone',
        default=None,
        help='Timezone for timestamps (default: SLACK_EMBEDS_TIMEZONE or UTC)',
    )
    args = parser.parse_args()

    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    if not config.slack_token:
        logger.error('SLACK_EMBEDS_TOKEN environment variable is not set')
        return 1

    tz = ZoneInfo(args.timezone) if args.timezone else config.tzinfo
    client = SlackClient(config.slack_token, cache_ttl_seconds=config.cache_ttl_seconds)
    renderer = EmbedRenderer(client, tz=tz)

    for url in args.urls:
        html = await renderer.embed_url(url)
        if html is None:
            logger.warning(f'Not a Slack message URL: {url}')
            html = url
        print(html)

    return 0


if __name__ == '__main__':
    sys.exit(asyncio.run(main()))
