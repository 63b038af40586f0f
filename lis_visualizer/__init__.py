"""LIS algorithm visualizer: trace engine, step navigation, playback and hover state."""

from .trace import compute_trace  # noqa: F401
from .trace_types import ActionType, StepAction, StepSnapshot, Trace  # noqa: F401
from .navigator import NavigatorState, StepNavigator, create_navigator  # noqa: F401
from .input_parsing import (  # noqa: F401
    ParseResult,
    parse_input,
    deduplicate_input,
    normalize_sequence,
    generate_random_sequence,
)
from .session import VisualizerSession  # noqa: F401
