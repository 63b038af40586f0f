"""Input parsing collaborator — text to a deduplicated trace input.

Validation failures come back as a ``ParseResult`` instead of an exception
so a caller can show the message inline and keep its current trace.
"""

from __future__ import annotations

import logging
import math
import random
import re
from collections.abc import Sequence

from pydantic import BaseModel

from . import constants

logger = logging.getLogger(__name__)

_SPLIT = re.compile(constants.INPUT_SPLIT_PATTERN)


class ParseResult(BaseModel):
    success: bool
    data: list[int] = []
    error: str | None = None

    @classmethod
    def ok(cls, data: list[int]) -> ParseResult:
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: str) -> ParseResult:
        return cls(success=False, error=error)


def deduplicate_input(values: Sequence[int]) -> list[int]:
    """Replace every repeat of a value with the sentinel.

    The sentinel is never deduplicated, so ``[-1, 1, -1, 1]`` becomes
    ``[-1, 1, -1, -1]``.
    """
    seen: set[int] = set()
    result: list[int] = []
    for value in values:
        if value == constants.SENTINEL:
            result.append(value)
        elif value in seen:
            result.append(constants.SENTINEL)
        else:
            seen.add(value)
            result.append(value)
    return result


def _parse_number(token: str) -> int | float | None:
    """Exact int for integer text; a float only to classify non-integers."""
    if "_" in token:
        return None
    try:
        return int(token)
    except ValueError:
        pass
    try:
        number = float(token)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number


def parse_input(text: str) -> ParseResult:
    """Parse comma- and/or whitespace-separated integers.

    Only non-negative integers and the -1 sentinel are accepted. The parsed
    list is deduplicated before it is returned.
    """
    trimmed = text.strip()
    if not trimmed:
        return ParseResult.ok([])

    numbers: list[int] = []
    for token in (part for part in _SPLIT.split(trimmed) if part):
        number = _parse_number(token)
        if number is None:
            return ParseResult.failure(f'Invalid number: "{token}"')
        if number < constants.SENTINEL:
            return ParseResult.failure(
                f'Unsupported negative number: "{token}" (only -1 marks a new node)'
            )
        if isinstance(number, float) and (
            math.isinf(number) or not number.is_integer()
        ):
            return ParseResult.failure(f'Fractional values are not supported: "{token}"')
        numbers.append(int(number))

    deduplicated = deduplicate_input(numbers)
    if deduplicated != numbers:
        logger.debug("Replaced duplicate values with the sentinel: %s", deduplicated)
    return ParseResult.ok(deduplicated)


def normalize_sequence(values: Sequence[int]) -> list[int]:
    """Rank-map non-sentinel values onto ``0..k-1``, keeping their order.

    ``[10, -1, 5]`` becomes ``[1, -1, 0]``.
    """
    ranks = {
        value: rank
        for rank, value in enumerate(
            sorted(v for v in values if v != constants.SENTINEL)
        )
    }
    return [
        constants.SENTINEL if value == constants.SENTINEL else ranks[value]
        for value in values
    ]


def generate_random_sequence(rng: random.Random | None = None) -> list[int]:
    """Random normalized input with distinct values and occasional sentinels."""
    rng = rng or random.Random()
    length = rng.randint(constants.RANDOM_MIN_LENGTH, constants.RANDOM_MAX_LENGTH)
    pool = list(range(constants.RANDOM_MAX_VALUE + 1))
    rng.shuffle(pool)

    result: list[int] = []
    for _ in range(length):
        if rng.random() < constants.RANDOM_SENTINEL_PROBABILITY:
            result.append(constants.SENTINEL)
        else:
            result.append(pool.pop())
    return normalize_sequence(result)
