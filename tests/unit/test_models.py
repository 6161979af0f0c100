"""Tests for Slack entity models."""

from slack_embeds.models import Bot, BotIcons, Message, User, UserProfile
from tests.fixtures.slack_responses import SAMPLE_BOT_INFO, SAMPLE_USER_INFO


class TestAuthor:
    """Tests for display name and avatar policies."""

    def test_real_name_preferred(self):
        assert User(id='U1', name='bob', real_name='Bob Smith').display_name == 'Bob Smith'

    def test_empty_real_name_falls_back(self):
        assert User(id='U1', name='bob', real_name='').display_name == 'bob'

    def test_missing_real_name_falls_back(self):
        assert User(id='U1', name='bob').display_name == 'bob'

    def test_profile_avatar(self):
        user = User(id='U1', name='bob', profile=UserProfile(image_32='https://a/32.png'))
        assert user.avatar_url == 'https://a/32.png'

    def test_bot_icon_avatar(self):
        bot = Bot(id='B1', name='bot', icons=BotIcons(image_36='https://a/36.png'))
        assert bot.avatar_url == 'https://a/36.png'

    def test_profile_wins_over_icons(self):
        author = User(
            id='U1',
            profile=UserProfile(image_32='https://a/32.png'),
            icons=BotIcons(image_36='https://a/36.png'),
        )
        assert author.avatar_url == 'https://a/32.png'

    def test_no_avatar(self):
        assert Bot(id='B1').avatar_url == ''

    def test_from_api_payloads(self):
        user = User.model_validate(SAMPLE_USER_INFO['user'])
        bot = Bot.model_validate(SAMPLE_BOT_INFO['bot'])

        assert user.profile.display_name == 'Bob'
        assert bot.user_id == 'U9'


class TestMessage:
    """Tests for Message."""

    def test_extra_fields_kept(self):
        message = Message.model_validate({'ts': '1.2', 'text': 'hi', 'type': 'message', 'reply_count': 2})
        assert message.model_extra == {'type': 'message', 'reply_count': 2}

    def test_defaults(self):
        message = Message(ts='1.2')
        assert message.text == ''
        assert message.user is None
        assert message.bot_id is None
