"""Shared pytest fixtures for Slack embeds tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from slack_embeds.models import Bot, Channel, Message, User
from slack_embeds.slack.api import SlackAPI
from slack_embeds.slack.client import SlackClient
from tests.fixtures.slack_responses import (
    SAMPLE_BOT_INFO,
    SAMPLE_CHANNEL_HISTORY,
    SAMPLE_CHANNEL_INFO,
    SAMPLE_THREAD_REPLIES,
    SAMPLE_USER_INFO,
)


@pytest.fixture
def mock_slack_web_client():
    """Mocked AsyncWebClient for testing."""
    client = MagicMock()
    client.conversations_history = AsyncMock(return_value=SAMPLE_CHANNEL_HISTORY)
    client.conversations_replies = AsyncMock(return_value=SAMPLE_THREAD_REPLIES)
    client.conversations_info = AsyncMock(return_value=SAMPLE_CHANNEL_INFO)
    client.users_info = AsyncMock(return_value=SAMPLE_USER_INFO)
    client.bots_info = AsyncMock(return_value=SAMPLE_BOT_INFO)
    return client


@pytest.fixture
def slack_client(mock_slack_web_client):
    """SlackClient backed by the mocked web client."""
    return SlackClient('xoxp-test', client=mock_slack_web_client)


@pytest.fixture
def message():
    return Message(ts='1610000000.123456', text='hi *team*', user='U1')


@pytest.fixture
def user():
    return User(id='U1', name='bob', real_name='')


@pytest.fixture
def channel():
    return Channel(id='C1', name='general')


@pytest.fixture
def mock_api(message, user, channel):
    """Mocked SlackAPI collaborator with a token and canned entities."""
    api = MagicMock(spec=SlackAPI)
    api.get_token = MagicMock(return_value='xoxp-test')
    api.fetch_message = AsyncMock(return_value=message)
    api.fetch_user = AsyncMock(return_value=user)
    api.fetch_bot = AsyncMock(return_value=Bot(id='B1', name='deploybot'))
    api.fetch_channel = AsyncMock(return_value=channel)
    return api
