"""Global engine mode, viewport and player selection state."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from hellkit.common import EngineMode, ViewportMode


@dataclass
class EngineState:
    """Current engine mode, viewport layout and active player."""

    engine_mode: EngineMode = EngineMode.GAME
    viewport_mode: ViewportMode = ViewportMode.FULLSCREEN
    mouse_ray: np.ndarray = field(default_factory=lambda: np.zeros(3))
    current_player: int = 0
    player_count: int = 2

    def next_player(self):
        """Advance to the next player, wrapping to the first one."""
        self.current_player += 1
        if self.current_player == self.player_count:
            self.current_player = 0
        print(f"Current player is: {self.current_player}")
        return self.current_player

    def next_viewport_mode(self):
        """Cycle to the next viewport layout."""
        value = int(self.viewport_mode) + 1
        if value == len(ViewportMode):
            value = 0
        self.viewport_mode = ViewportMode(value)
        print(f"Current player: {self.current_player}")
        return self.viewport_mode