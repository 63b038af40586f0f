"""Visualizer configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class VisualizerConfig:
    """Groups defaults and playback speed bounds."""

    default_input: tuple[int, ...] = constants.DEFAULT_INPUT
    speed: int = constants.DEFAULT_SPEED_MS
    min_speed: int = constants.MIN_SPEED_MS
    max_speed: int = constants.MAX_SPEED_MS
    speed_step: int = constants.SPEED_STEP_MS

    def clamp_speed(self, speed: int) -> int:
        return max(self.min_speed, min(self.max_speed, speed))
