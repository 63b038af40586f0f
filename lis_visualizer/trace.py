"""Trace engine — runs greedy + binary-search LIS and records every step."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .chains import build_chain
from .constants import SENTINEL
from .trace_types import StepAction, StepSnapshot, Trace

logger = logging.getLogger(__name__)


def _find_insert_position(
    sequence: list[int], values: Sequence[int], target: int
) -> int:
    """Lower bound: first position in ``sequence`` whose value is >= ``target``.

    Compares the input *values* at the stored indices, not the indices.
    The caller guarantees ``sequence`` is non-empty and its tail value is
    >= ``target``, so the search never runs off the end.
    """
    low = 0
    high = len(sequence) - 1
    while low < high:
        middle = (low + high) // 2
        if values[sequence[middle]] < target:
            low = middle + 1
        else:
            high = middle
    return low


def _determine_action(
    values: Sequence[int],
    current_index: int,
    sequence: list[int],
    predecessors: list[int],
) -> StepAction:
    """Process one element, mutating ``sequence`` and ``predecessors`` in place."""
    current_value = values[current_index]

    if current_value == SENTINEL:
        return StepAction.skip(current_index)

    if not sequence or current_value > values[sequence[-1]]:
        predecessors[current_index] = sequence[-1] if sequence else SENTINEL
        sequence.append(current_index)
        return StepAction.append(current_index)

    position = _find_insert_position(sequence, values, current_value)
    replace_index = sequence[position]

    if current_value < values[replace_index]:
        predecessors[current_index] = sequence[position - 1] if position > 0 else SENTINEL
        sequence[position] = current_index
        return StepAction.replace(position, current_index)

    # Equal values: unreachable after deduplication, recorded as a plain skip
    logger.debug(
        "Value %d at index %d equals tail at position %d, skipping",
        current_value,
        current_index,
        position,
    )
    return StepAction.skip(current_index)


def compute_trace(values: Sequence[int]) -> Trace:
    """Run the LIS algorithm over ``values`` and record a snapshot per element.

    Args:
        values: Non-negative integers or the -1 sentinel. Non-sentinel values
            are expected to be unique (see ``deduplicate_input``).

    Returns:
        A Trace with ``len(values) + 1`` steps and the reconstructed LIS.
    """
    values = tuple(values)
    sequence: list[int] = []
    predecessors = [SENTINEL] * len(values)

    steps = [
        StepSnapshot(
            step_index=0,
            current_index=SENTINEL,
            current_value=SENTINEL,
            action=StepAction.init(),
            sequence=(),
            predecessors=tuple(predecessors),
        )
    ]

    for current_index, current_value in enumerate(values):
        action = _determine_action(values, current_index, sequence, predecessors)
        steps.append(
            StepSnapshot(
                step_index=current_index + 1,
                current_index=current_index,
                current_value=current_value,
                action=action,
                sequence=tuple(sequence),
                predecessors=tuple(predecessors),
            )
        )

    result = build_chain(sequence[-1], predecessors) if sequence else []

    logger.info(
        "Traced %d elements into %d steps, LIS length %d",
        len(values),
        len(steps),
        len(result),
    )
    return Trace(input=values, steps=tuple(steps), result=tuple(result))
