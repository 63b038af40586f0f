"""Named constants — eliminates magic numbers across the codebase."""

from __future__ import annotations

SENTINEL = -1

DEFAULT_INPUT: tuple[int, ...] = (2, 1, 3, 0, 4)

# Playback interval bounds (milliseconds)
DEFAULT_SPEED_MS = 500
MIN_SPEED_MS = 100
MAX_SPEED_MS = 2000
SPEED_STEP_MS = 100

# Random input generation
RANDOM_MIN_LENGTH = 8
RANDOM_MAX_LENGTH = 15
RANDOM_MAX_VALUE = 50
RANDOM_SENTINEL_PROBABILITY = 0.1

INPUT_SPLIT_PATTERN = r"[,\s]+"

NO_CHANGE_TEXT = "(no change)"
