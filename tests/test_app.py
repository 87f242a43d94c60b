import pytest

from theshot.app import FrameClock, ModeManager
from theshot.fade import FadeState
from theshot.geometry import Mode


class RecordingScreen:
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def init(self):
        self.log.append((self.name, "init"))

    def uninit(self):
        self.log.append((self.name, "uninit"))

    def update(self):
        self.log.append((self.name, "update"))

    def draw(self):
        self.log.append((self.name, "draw"))


def make_manager():
    log = []
    screens = {mode: RecordingScreen(mode.name, log) for mode in Mode}
    return ModeManager(screens), log


def test_clock_waits_a_frame_interval():
    clock = FrameClock(0)
    assert clock.tick(5) is False
    assert clock.tick(16) is True
    assert clock.tick(31) is False
    assert clock.tick(32) is True


def test_clock_counts_frames():
    clock = FrameClock(0)
    ran = sum(clock.tick(t) for t in range(1, 200))
    assert ran == clock.frame_count
    assert ran > 0


def test_clock_measures_fps_near_sixty():
    clock = FrameClock(0)
    for t in range(1, 1001):
        clock.tick(t)
    assert 55 <= clock.fps <= 65


def test_clock_handles_wraparound():
    start = 2**32 - 10
    clock = FrameClock(start)
    assert clock.tick(5) is False
    assert clock.tick(6) is True


def test_clock_rejects_bad_interval():
    with pytest.raises(ValueError):
        FrameClock(0, frame_ms=0)


def test_set_mode_switches_screens():
    manager, log = make_manager()
    log.clear()
    manager.set_mode(Mode.GAME)
    assert manager.mode is Mode.GAME
    assert log == [("TITLE", "uninit"), ("GAME", "init")]


def test_update_runs_input_screen_and_fade():
    calls = []
    log = []
    manager = ModeManager(
        {Mode.TITLE: RecordingScreen("TITLE", log)}, poll_input=lambda: calls.append(1)
    )
    before = manager.fade.alpha
    manager.update()
    assert calls == [1]
    assert log[-1] == ("TITLE", "update")
    assert manager.fade.alpha < before


def test_draw_returns_fade_colour():
    manager, log = make_manager()
    color = manager.draw()
    assert log[-1] == ("TITLE", "draw")
    assert color.a == manager.fade.alpha
    assert (color.r, color.g, color.b) == (0.0, 0.0, 0.0)


def test_fade_out_switches_mode():
    manager, log = make_manager()
    manager.fade.start(Mode.RESULT)
    manager.update()
    assert manager.mode is Mode.RESULT
    assert ("RESULT", "init") in log
    assert manager.fade.state is FadeState.IN


def test_mode_without_screen_is_allowed():
    log = []
    manager = ModeManager({Mode.TITLE: RecordingScreen("TITLE", log)})
    manager.set_mode(Mode.EDIT)
    manager.update()
    assert manager.mode is Mode.EDIT
    assert log[-1] == ("TITLE", "uninit")