"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from slack_embeds.config import Config


class TestConfig:
    """Tests for Config.from_env."""

    def test_defaults(self):
        config = Config.from_env({})
        assert config.slack_token is None
        assert config.cache_ttl_seconds == 3600
        assert config.timezone == 'UTC'
        assert config.log_level == 'INFO'

    def test_from_environment(self):
        config = Config.from_env(
            {
                'SLACK_EMBEDS_TOKEN': 'xoxp-1',
                'SLACK_EMBEDS_CACHE_TTL': '60',
                'SLACK_EMBEDS_TIMEZONE': 'Europe/London',
                'SLACK_EMBEDS_LOG_LEVEL': 'debug',
            }
        )
        assert config.slack_token == 'xoxp-1'
        assert config.cache_ttl_seconds == 60
        assert config.tzinfo.key == 'Europe/London'
        assert config.log_level == 'DEBUG'

    def test_user_token_fallback(self):
        assert Config.from_env({'SLACK_USER_TOKEN': 'xoxp-2'}).slack_token == 'xoxp-2'

    def test_blank_token_is_unset(self):
        assert Config.from_env({'SLACK_EMBEDS_TOKEN': '  '}).slack_token is None

    def test_unknown_timezone(self):
        with pytest.raises(ValidationError):
            Config.from_env({'SLACK_EMBEDS_TIMEZONE': 'Mars/Olympus'})

    def test_invalid_ttl(self):
        with pytest.raises(ValidationError):
            Config.from_env({'SLACK_EMBEDS_CACHE_TTL': 'soon'})
