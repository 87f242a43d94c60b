import pytest

from theshot.geometry import Mode
from theshot.input import JoyKey, Joypad, Key, Keyboard
from theshot.pause import TARGET_MODES, PauseChoice, PauseMenu


def frame(menu, keys=(), buttons=0):
    kb, pad = Keyboard(), Joypad()
    kb.update(keys)
    pad.update(buttons)
    return menu.update(kb, pad)


def test_starts_on_continue():
    assert PauseMenu().selected is PauseChoice.CONTINUE


def test_up_wraps_to_last():
    menu = PauseMenu()
    frame(menu, [Key.UP])
    assert menu.selected is PauseChoice.RANKING


def test_down_wraps_to_first():
    menu = PauseMenu()
    for _ in range(len(PauseChoice)):
        frame(menu, [Key.DOWN])
    assert menu.selected is PauseChoice.CONTINUE


def test_move_round_trip():
    menu = PauseMenu()
    menu.move(1)
    menu.move(-1)
    assert menu.selected is PauseChoice.CONTINUE
    assert menu.move(2) is PauseChoice.QUIT


def test_no_input_confirms_nothing():
    menu = PauseMenu()
    assert frame(menu) is None
    assert menu.selected is PauseChoice.CONTINUE


def test_return_confirms_selection():
    menu = PauseMenu()
    frame(menu, [Key.DOWN])
    assert frame(menu, [Key.RETURN]) is PauseChoice.RETRY


def test_joypad_navigation_and_confirm():
    menu = PauseMenu()
    frame(menu, buttons=1 << JoyKey.DOWN)
    frame(menu, buttons=1 << JoyKey.DOWN)
    assert frame(menu, buttons=1 << JoyKey.A) is PauseChoice.QUIT


def test_keyboard_only_update():
    menu = PauseMenu()
    kb = Keyboard()
    kb.update([Key.UP, Key.RETURN])
    assert menu.update(kb) is PauseChoice.RANKING


@pytest.mark.parametrize(
    "steps, expected",
    [(1, Mode.GAME), (2, Mode.TITLE), (3, Mode.RANKING)],
)
def test_target_modes(steps, expected):
    menu = PauseMenu()
    menu.move(steps)
    confirmed = frame(menu, [Key.RETURN])
    assert TARGET_MODES[confirmed] is expected


def test_continue_has_no_target_mode():
    menu = PauseMenu()
    confirmed = frame(menu, [Key.RETURN])
    assert confirmed is PauseChoice.CONTINUE
    assert confirmed not in TARGET_MODES