import pytest

from kubeglance.keys import Key, KeyCode, KeyEvent, KeyModifiers


def test_key_fmt():
    assert str(Key.LEFT) == "<Left Arrow Key>"
    assert str(Key.alt(" ")) == "<Alt+Space>"
    assert str(Key.alt("c")) == "<Alt+c>"
    assert str(Key.char("c")) == "<c>"
    assert str(Key.ENTER) == "<Enter>"
    assert str(Key.from_f(10)) == "<F10>"


def test_key_fmt_space_variants():
    assert str(Key.ctrl(" ")) == "<Ctrl+Space>"
    assert str(Key.char(" ")) == "<Space>"
    assert str(Key.ctrl("c")) == "<Ctrl+c>"
    assert str(Key.PAGE_UP) == "<PageUp>"


def test_key_from_event():
    assert Key.from_event(KeyEvent(KeyCode.ESC)) == Key.ESC
    assert Key.from_event(KeyEvent(KeyCode.F, number=2)) == Key.from_f(2)
    assert Key.from_event(KeyEvent(KeyCode.CHAR, char="J")) == Key.char("J")
    assert Key.from_event(
        KeyEvent(KeyCode.CHAR, KeyModifiers.ALT, char="c")
    ) == Key.alt("c")
    assert Key.from_event(
        KeyEvent(KeyCode.CHAR, KeyModifiers.CONTROL, char="c")
    ) == Key.ctrl("c")


def test_key_from_event_other_codes():
    assert Key.from_event(KeyEvent(KeyCode.INSERT)) == Key.INS
    assert Key.from_event(KeyEvent(KeyCode.BACK_TAB)) == Key.UNKNOWN
    assert Key.from_event(
        KeyEvent(KeyCode.CHAR, KeyModifiers.CONTROL | KeyModifiers.SHIFT, char="c")
    ) == Key.char("c")


def test_from_f_out_of_range():
    with pytest.raises(ValueError):
        Key.from_f(13)


def test_char_requires_single_character():
    with pytest.raises(ValueError):
        Key.char("ab")
    with pytest.raises(ValueError):
        KeyEvent(KeyCode.CHAR)