# Tests for the message catalog

import pytest

from content_director.messages import MESSAGES, SUPPORTED_LOCALES, render


class TestMessageCatalog:
    """讯息目录: 每条讯息都有全部语系"""

    @pytest.mark.parametrize("message_id", sorted(MESSAGES))
    def test_every_message_has_every_locale(self, message_id):
        assert set(MESSAGES[message_id]) == set(SUPPORTED_LOCALES)

    def test_render_with_params(self):
        assert render("too_short", "en", min_len=10) == "String must contain at least 10 character(s)"
        assert render("too_short", "zh-TW", min_len=10) == "字串至少需要 10 個字元"

    def test_render_ignores_unused_params(self):
        assert render("content_items_count", "en", expected=8, received=7) == "must contain exactly 8 content items"

    def test_unknown_message_id(self):
        with pytest.raises(KeyError):
            render("no_such_message")

    def test_unknown_locale(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            render("required", "ja")
