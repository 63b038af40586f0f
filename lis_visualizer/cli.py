"""Terminal front end for the LIS visualizer.

Usage:
    lis-visualizer 2 1 3 0 4
    lis-visualizer "5, 1, -1, 3" --json
    lis-visualizer --random --seed 7 --play --speed 200
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys

from .config import VisualizerConfig
from .constants import DEFAULT_SPEED_MS
from .highlight import action_label, describe_action
from .session import VisualizerSession
from .trace_types import StepSnapshot

logger = logging.getLogger(__name__)


def format_step(snapshot: StepSnapshot) -> str:
    sequence = ", ".join(str(i) for i in snapshot.sequence)
    predecessors = ", ".join(str(p) for p in snapshot.predecessors)
    return (
        f"[step {snapshot.step_index}] {action_label(snapshot.action):<7} "
        f"{describe_action(snapshot.action, snapshot.current_value)}\n"
        f"    sequence     = [{sequence}]\n"
        f"    predecessors = [{predecessors}]"
    )


def _print_result(session: VisualizerSession) -> None:
    trace = session.trace
    print(f"\nInput : {list(trace.input)}")
    print(f"LIS   : indices {list(trace.result)} -> values {trace.result_values()}")
    print(f"Length: {len(trace.result)}")


async def _play(session: VisualizerSession) -> None:
    """Auto-play from the first step, printing each step as it is reached."""
    done = asyncio.Event()
    session.handlers.handle_reset()
    last_printed = 0
    print(format_step(session.trace.steps[0]), flush=True)

    def on_change() -> None:
        nonlocal last_printed
        current = session.get_navigator().get_current_step()
        if current is not None and current.step_index != last_printed:
            last_printed = current.step_index
            print(format_step(current), flush=True)
        if not session.playback.is_playing:
            done.set()

    unsubscribe = session.subscribe(on_change)
    try:
        session.playback.start()
        await done.wait()
    finally:
        unsubscribe()
        session.dispose()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trace the longest increasing subsequence step by step"
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Integers separated by spaces or commas; -1 marks a new node",
    )
    parser.add_argument(
        "--random", action="store_true", help="Use a random normalized sequence"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the rendering view of the final step as JSON",
    )
    parser.add_argument(
        "--play", action="store_true", help="Auto-play the trace on a timer"
    )
    parser.add_argument(
        "--speed",
        type=int,
        default=DEFAULT_SPEED_MS,
        help=f"Milliseconds per step when playing (default: {DEFAULT_SPEED_MS})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    defaults = VisualizerConfig()
    config = VisualizerConfig(speed=defaults.clamp_speed(args.speed))
    session = VisualizerSession(config)

    if args.random:
        values = session.handlers.handle_random_input(random.Random(args.seed))
        logger.info("Generated random input %s", values)
    elif args.values:
        result = session.handlers.handle_text_input(" ".join(args.values))
        if not result.success:
            print(f"error: {result.error}", file=sys.stderr)
            session.dispose()
            return 2

    if args.play:
        asyncio.run(_play(session))
        _print_result(session)
        return 0

    if args.json:
        session.handlers.handle_go_to_end()
        print(session.view().model_dump_json(indent=2))
        session.dispose()
        return 0

    for snapshot in session.trace.steps:
        print(format_step(snapshot))
    _print_result(session)
    session.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
