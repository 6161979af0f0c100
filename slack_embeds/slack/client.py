"""Slack API client wrapper with response caching."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

import aiohttp
from slack_sdk.errors import SlackApiError, SlackRequestError
from slack_sdk.web.async_client import AsyncWebClient

from slack_embeds.errors import (
    APIRejectionError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    UnsupportedReferenceError,
)
from slack_embeds.log import LogLevel, log
from slack_embeds.models import Bot, Channel, Message, User
from slack_embeds.slack.api import SlackAPI


logger = logging.getLogger(__name__)

# Channel ID prefixes we can fetch history for (public channels only)
SUPPORTED_CHANNEL_TYPES = frozenset({'C'})


@dataclass
class _CacheEntry:
    """Internal cache entry with expiration."""

    value: Any
    expires_at: datetime


class SlackClient(SlackAPI):
    """Async Slack API client for embed lookups.

    Responses are cached in memory per entity for ``cache_ttl_seconds``.
    All failures are raised as ``SlackEmbedError`` subclasses.
    """

    def __init__(
        self,
        token: str | None,
        cache_ttl_seconds: int = 3600,  # 1 hour
        client: AsyncWebClient | None = None,
    ):
        """Initialize Slack client.

        Args:
            token: Slack OAuth token, or None when not configured.
            cache_ttl_seconds: How long fetched entities stay cached.
            client: Preconfigured web client (mainly for tests).
        """
        self.token = token
        self.client = client or AsyncWebClient(token=token)
        self.cache_ttl = timedelta(seconds=cache_ttl_seconds)
        self._cache: dict[str, _CacheEntry] = {}

    def get_token(self) -> str | None:
        return self.token

    def _cache_get(self, key: str) -> Any | None:
        cached = self._cache.get(key)
        if cached and cached.expires_at > datetime.now():
            return cached.value
        return None

    def _cache_set(self, key: str, value: Any) -> None:
        self._cache[key] = _CacheEntry(value=value, expires_at=datetime.now() + self.cache_ttl)

    def clear_cache(self) -> None:
        """Clear all cached entries."""
        self._cache.clear()

    async def _request(self, method_name: str, func, **params: Any) -> dict[str, Any]:
        """Execute an API call and normalize its failures.

        Args:
            method_name: Slack API method name, used for error context.
            func: Async client method to call.
            **params: Arguments for the API method.

        Returns:
            Decoded response payload.

        Raises:
            NetworkError: If Slack could not be reached.
            MalformedResponseError: If the body was empty or not JSON.
            APIRejectionError: If Slack answered with ``ok: false``.
        """
        logger.debug(f'Calling {method_name}')
        try:
            response = await func(**params)
        except SlackApiError as e:
            data = getattr(e.response, 'data', e.response)
            if not isinstance(data, dict) or not data:
                raise MalformedResponseError(
                    f'Could not decode response body: {e}',
                    method=method_name,
                    params=params,
                ) from e
            raise APIRejectionError(
                'Slack returned a non-OK response',
                error=data.get('error', 'unknown'),
                method=method_name,
                params=params,
            ) from e
        except (SlackRequestError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(
                f'Could not reach Slack: {e}',
                method=method_name,
                params=params,
            ) from e

        data = getattr(response, 'data', response)
        if not isinstance(data, dict) or not data:
            raise MalformedResponseError(
                'Could not retrieve response body for request',
                method=method_name,
                params=params,
            )
        if not data.get('ok'):
            raise APIRejectionError(
                'Slack returned a non-OK response',
                error=data.get('error', 'unknown'),
                method=method_name,
                params=params,
            )

        if data.get('warning'):
            log(
                LogLevel.WARNING,
                f'Slack API warning: {data["warning"]}',
                {'method': method_name, 'params': params},
            )

        return data

    async def fetch_message(self, channel_id: str, ts: str, thread_ts: str | None = None) -> Message:
        """Fetch a message by channel and timestamp.

        Messages are uniquely identified by their microsecond timestamps.
        Thread replies are looked up through ``conversations.replies``.
        """
        cache_key = f'message:{channel_id}:{ts}'
        if thread_ts:
            cache_key += f':thread_{thread_ts}'

        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached

        channel_type = channel_id[:1]
        if channel_type not in SUPPORTED_CHANNEL_TYPES:
            raise UnsupportedReferenceError(
                'Invalid channel type',
                code='slack-embeds.get_message.invalid_channel_type',
                channel=channel_id,
                timestamp=ts,
                channel_type=channel_type,
            )

        if thread_ts:
            data = await self._request(
                'conversations.replies',
                self.client.conversations_replies,
                channel=channel_id,
                ts=thread_ts,
                latest=ts,
                inclusive=True,
            )
            # Replies always start with the thread parent
            candidates = [m for m in data.get('messages', []) if m.get('ts') == ts]
        else:
            data = await self._request(
                'conversations.history',
                self.client.conversations_history,
                channel=channel_id,
                latest=ts,
                limit=1,
                inclusive=True,
            )
            candidates = data.get('messages', [])

        if not candidates:
            raise NotFoundError(
                'No message found for given timestamp/channel',
                code='slack-embeds.get_message.no_messages',
                channel=channel_id,
                timestamp=ts,
            )

        message = Message.model_validate(candidates[0])
        self._cache_set(cache_key, message)
        return message

    async def fetch_user(self, user_id: str) -> User:
        """Fetch a user by ID."""
        cache_key = f'user:{user_id}'
        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached

        data = await self._request('users.info', self.client.users_info, user=user_id)
        if not data.get('user'):
            raise NotFoundError('No user in response', user=user_id)

        user = User.model_validate(data['user'])
        self._cache_set(cache_key, user)
        return user

    async def fetch_bot(self, bot_id: str) -> Bot:
        """Fetch a bot by ID."""
        cache_key = f'bot:{bot_id}'
        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached

        data = await self._request('bots.info', self.client.bots_info, bot=bot_id)
        if not data.get('bot'):
            raise NotFoundError('No bot in response', bot=bot_id)

        bot = Bot.model_validate(data['bot'])
        self._cache_set(cache_key, bot)
        return bot

    async def fetch_channel(self, channel_id: str) -> Channel:
        """Fetch a channel by ID."""
        cache_key = f'channel:{channel_id}'
        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached

        data = await self._request('conversations.info', self.client.conversations_info, channel=channel_id)
        if not data.get('channel'):
            raise NotFoundError('No channel in response', channel=channel_id)

        channel = Channel.model_validate(data['channel'])
        self._cache_set(cache_key, channel)
        return channel
