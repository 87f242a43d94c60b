import pytest

from theshot.input import JoyKey, Joypad, Key, Keyboard


def test_trigger_only_on_first_frame():
    kb = Keyboard()
    kb.update([Key.P])
    assert kb.trigger(Key.P) is True
    assert kb.press(Key.P) is True
    assert kb.repeat(Key.P) is False
    kb.update([Key.P])
    assert kb.trigger(Key.P) is False
    assert kb.repeat(Key.P) is True


def test_release_after_letting_go():
    kb = Keyboard()
    kb.update([Key.RETURN])
    kb.update([])
    assert kb.release(Key.RETURN) is True
    assert kb.press(Key.RETURN) is False
    kb.update([])
    assert kb.release(Key.RETURN) is False


def test_failed_read_keeps_state_but_ends_trigger():
    kb = Keyboard()
    kb.update([Key.A])
    kb.update(None)
    assert kb.press(Key.A) is True
    assert kb.trigger(Key.A) is False
    assert kb.repeat(Key.A) is True


def test_out_of_range_key_rejected():
    kb = Keyboard()
    with pytest.raises(ValueError):
        kb.press(256)
    with pytest.raises(ValueError):
        kb.update([-1])


def test_joypad_trigger_and_press():
    pad = Joypad()
    pad.update(1 << JoyKey.START)
    assert pad.trigger(JoyKey.START) is True
    assert pad.press(JoyKey.START) is True
    assert pad.press(JoyKey.A) is False
    pad.update(1 << JoyKey.START)
    assert pad.trigger(JoyKey.START) is False
    assert pad.press(JoyKey.START) is True


def test_joypad_disconnected_keeps_buttons():
    pad = Joypad()
    pad.update(1 << JoyKey.A)
    pad.update(None)
    assert pad.press(JoyKey.A) is True


def test_joypad_release_and_repeat_never_fire():
    pad = Joypad()
    pad.update(1 << JoyKey.B)
    pad.update(1 << JoyKey.B)
    assert pad.repeat(JoyKey.B) is False
    pad.update(0)
    assert pad.release(JoyKey.B) is False


def test_joypad_invalid_button():
    pad = Joypad()
    with pytest.raises(ValueError):
        pad.press(16)


@pytest.mark.parametrize(
    "stick,expected",
    [((0, 0), False), ((99, -99), False), ((100, 0), True), ((0, -100), True)],
)
def test_left_stick_deadzone(stick, expected):
    pad = Joypad()
    pad.update(0, left_stick=stick)
    assert pad.left_stick_tilted() is expected


def test_right_stick_repeat_timing():
    pad = Joypad()
    pad.update(0, right_stick=(1000, 0), now_ms=1000)
    assert pad.right_stick_repeating() is False
    pad.update(0, right_stick=(1000, 0), now_ms=1100)
    assert pad.right_stick_repeating() is False
    pad.update(0, right_stick=(1000, 0), now_ms=1160)
    assert pad.right_stick_repeating() is True
    pad.update(0, right_stick=(1000, 0), now_ms=1200)
    assert pad.right_stick_repeating() is False
    pad.update(0, right_stick=(1000, 0), now_ms=1320)
    assert pad.right_stick_repeating() is True


def test_right_stick_centered_never_repeats():
    pad = Joypad()
    for t in range(0, 2000, 100):
        pad.update(0, right_stick=(999, -999), now_ms=t)
        assert pad.right_stick_repeating() is False