import curses

import pytest

from utils.keys import key_name


class TestKeyName:

    @pytest.mark.parametrize("key, expected", [
        (curses.KEY_RIGHT, "right"),
        (curses.KEY_LEFT, "left"),
        (curses.KEY_BTAB, "shift+tab"),
        (curses.KEY_BACKSPACE, "backspace"),
        (curses.KEY_ENTER, "enter"),
        (curses.KEY_RESIZE, "resize"),
    ])
    def test_special_keys(self, key, expected):
        assert key_name(key) == expected

    @pytest.mark.parametrize("key, expected", [
        ("\x03", "ctrl+c"),
        ("\x1b", "esc"),
        ("\t", "tab"),
        ("\n", "enter"),
        ("\r", "enter"),
        ("\x7f", "backspace"),
    ])
    def test_control_characters(self, key, expected):
        assert key_name(key) == expected

    @pytest.mark.parametrize("key", ["q", " ", "你", "ǎ"])
    def test_printable_characters(self, key):
        assert key_name(key) == key

    def test_unnamed(self):
        assert key_name("\x01") is None
        assert key_name(curses.KEY_F1) is None
