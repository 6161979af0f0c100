"""Configuration loaded from environment variables."""

import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, field_validator


class Config(BaseModel):
    """Runtime settings for Slack embeds.

    Attributes:
        slack_token: Slack OAuth token used for Web API calls.
        cache_ttl_seconds: Freshness window for cached API responses.
        timezone: IANA timezone name used for embed timestamps.
        log_level: Root log level for scripts.
    """

    slack_token: str | None = None
    cache_ttl_seconds: int = 3600
    timezone: str = 'UTC'
    log_level: str = 'INFO'

    @field_validator('slack_token')
    @classmethod
    def _empty_token_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator('timezone')
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f'Unknown timezone: {value}') from e
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> 'Config':
        """Build a config from environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, str | None] = {
            'slack_token': env.get('SLACK_EMBEDS_TOKEN') or env.get('SLACK_USER_TOKEN'),
        }
        if 'SLACK_EMBEDS_CACHE_TTL' in env:
            values['cache_ttl_seconds'] = env['SLACK_EMBEDS_CACHE_TTL']
        if 'SLACK_EMBEDS_TIMEZONE' in env:
            values['timezone'] = env['SLACK_EMBEDS_TIMEZONE']
        if 'SLACK_EMBEDS_LOG_LEVEL' in env:
            values['log_level'] = env['SLACK_EMBEDS_LOG_LEVEL'].upper()
        return cls.model_validate(values)


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get the process-wide config, read once from the environment."""
    return Config.from_env()
