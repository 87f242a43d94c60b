"""Game state: running, ending and pausing."""

from __future__ import annotations

from enum import IntEnum

END_DELAY_FRAMES = 30


class GameState(IntEnum):
    NONE = 0
    NORMAL = 1
    END = 2


class GameFlow:
    """Decides when a game is over and whether it is paused."""

    def __init__(self) -> None:
        self.state = GameState.NORMAL
        self.counter = 0
        self.paused = False

    def update(self, player_alive: bool, wave_finished: bool, time_left: int) -> bool:
        """Advance one frame; True on the frame the game hands over to the results."""
        over = not player_alive or wave_finished or time_left <= 0
        if over and self.state is not GameState.NONE:
            self.state = GameState.END
        if self.state is GameState.END:
            self.counter += 1
            if self.counter >= END_DELAY_FRAMES:
                self.counter = 0
                self.state = GameState.NONE
                return True
        return False

    def toggle_pause(self) -> bool:
        """Flip the pause flag and return the new value."""
        self.paused = not self.paused
        return self.paused

    def set_state(self, state: GameState) -> None:
        """Switch state and restart the state counter."""
        self.state = GameState(state)
        self.counter = 0