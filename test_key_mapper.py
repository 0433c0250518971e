import curses

import pytest

from key_events import Key, KeyEvent
from key_mapper import KeyMapper


@pytest.mark.parametrize(
    "raw, expected",
    [
        (curses.KEY_UP, Key.UP),
        ("k", Key.UP),
        ("j", Key.DOWN),
        ("h", Key.LEFT),
        (curses.KEY_RIGHT, Key.RIGHT),
        (curses.KEY_NPAGE, Key.PAGE_DOWN),
        (curses.KEY_PPAGE, Key.PAGE_UP),
        (curses.KEY_HOME, Key.HOME),
        ("G", Key.END),
        ("0", Key.LINE_START),
        ("$", Key.LINE_END),
        ("a", Key.SORT_ASC),
        ("d", Key.SORT_DESC),
        ("o", Key.RESTORE_ORDER),
        ("/", Key.SEARCH_START),
        (" ", Key.SPACE),
        ("q", Key.QUIT),
        ("\x18", Key.QUIT),
        (3, Key.QUIT),
        ("\n", Key.ENTER),
        ("\x1b", Key.ESCAPE),
        (curses.KEY_RESIZE, Key.RESIZE),
    ],
)
def test_normal_mode_mapping(raw, expected):
    assert KeyMapper().translate(raw) == KeyEvent(expected)


def test_unknown_keys_map_to_nothing():
    mapper = KeyMapper()
    assert mapper.translate("z") is None
    assert mapper.translate(None) is None
    assert mapper.translate(-1) is None
    assert mapper.translate(curses.KEY_F1) is None


def test_gg_goes_home():
    mapper = KeyMapper()
    assert mapper.translate("g") is None
    assert mapper.translate("g") == KeyEvent(Key.HOME)
    # a lone g followed by something else is dropped
    assert mapper.translate("g") is None
    assert mapper.translate("j") == KeyEvent(Key.DOWN)
    assert mapper.translate("g") is None


def test_text_entry_turns_printables_into_chars():
    mapper = KeyMapper()
    assert mapper.translate("q", text_entry=True) == KeyEvent.of_char("q")
    assert mapper.translate(" ", text_entry=True) == KeyEvent.of_char(" ")
    assert mapper.translate("é", text_entry=True) == KeyEvent.of_char("é")
    assert mapper.translate(ord("/"), text_entry=True) == KeyEvent.of_char("/")
    assert mapper.translate("\x7f", text_entry=True) == KeyEvent(Key.BACKSPACE)
    assert mapper.translate(curses.KEY_BACKSPACE, text_entry=True) == KeyEvent(Key.BACKSPACE)
    assert mapper.translate("\r", text_entry=True) == KeyEvent(Key.ENTER)
    assert mapper.translate("\x11", text_entry=True) == KeyEvent(Key.QUIT)
    assert mapper.translate("\x01", text_entry=True) is None
