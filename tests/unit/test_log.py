"""Tests for the structured logging side-channel."""

import logging

from slack_embeds.errors import NotFoundError
from slack_embeds.log import NOTICE, LogLevel, log


class TestLog:
    """Tests for log()."""

    def test_plain_message(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='slack_embeds'):
            log(LogLevel.INFO, 'hello')

        record = caplog.records[-1]
        assert record.levelno == logging.INFO
        assert record.getMessage() == 'hello'
        assert record.context == {}

    def test_context_attached(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='slack_embeds'):
            log(LogLevel.WARNING, 'Slack API warning', {'method': 'users.info'})

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.context == {'method': 'users.info'}
        assert "method='users.info'" in record.getMessage()

    def test_error_expanded(self, caplog):
        error = NotFoundError('No message found', code='slack-embeds.get_message.no_messages', channel='C1')

        with caplog.at_level(logging.DEBUG, logger='slack_embeds'):
            log(LogLevel.WARNING, error, {'url': 'https://acme.slack.com/archives/C1/p1'})

        record = caplog.records[-1]
        assert record.getMessage().startswith('No message found [slack-embeds.get_message.no_messages]')
        assert record.context == {
            'url': 'https://acme.slack.com/archives/C1/p1',
            'error_data': {'channel': 'C1'},
        }

    def test_level_mapping(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='slack_embeds'):
            log(LogLevel.NOTICE, 'notice')
            log(LogLevel.EMERGENCY, 'emergency')
            log('error', 'by value')

        assert [r.levelno for r in caplog.records[-3:]] == [NOTICE, logging.CRITICAL, logging.ERROR]

    def test_context_not_mutated(self):
        context = {'url': 'x'}
        log(LogLevel.DEBUG, NotFoundError('missing'), context)
        assert context == {'url': 'x'}
