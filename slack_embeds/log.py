"""Structured logging side-channel."""

import logging
from enum import Enum
from typing import Any

from slack_embeds.errors import SlackEmbedError


logger = logging.getLogger('slack_embeds')

NOTICE = 25
logging.addLevelName(NOTICE, 'NOTICE')


class LogLevel(str, Enum):
    """Severity levels accepted by :func:`log`."""

    DEBUG = 'debug'
    INFO = 'info'
    NOTICE = 'notice'
    WARNING = 'warning'
    ERROR = 'error'
    CRITICAL = 'critical'
    ALERT = 'alert'
    EMERGENCY = 'emergency'


_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.NOTICE: NOTICE,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ALERT: logging.CRITICAL,
    LogLevel.EMERGENCY: logging.CRITICAL,
}


def log(
    level: LogLevel,
    message: str | SlackEmbedError,
    context: dict[str, Any] | None = None,
) -> None:
    """Log a message or error with key-value context.

    Errors are logged as ``"{message} [{code}]"`` with their own context
    attached under ``error_data``.

    Args:
        level: Severity of the entry.
        message: Text to log, or an error to describe.
        context: Extra key-value data attached to the record.
    """
    context = dict(context or {})
    if isinstance(message, SlackEmbedError):
        context['error_data'] = message.context
        message = f'{message.message} [{message.code}]'

    if context:
        details = ', '.join(f'{key}={value!r}' for key, value in context.items())
        logger.log(_LEVELS[LogLevel(level)], f'{message} ({details})', extra={'context': context})
    else:
        logger.log(_LEVELS[LogLevel(level)], message, extra={'context': context})
