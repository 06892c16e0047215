"""Cel animation generation entry point."""

import logging
from typing import Sequence

from .constants import DEFAULT_ALTERNATE, DEFAULT_FRAME_RATE, DEFAULT_ITERATIONS
from .declarations import IterationCount, StyleOutput, TimingConfig, animation_properties
from .keyframes import synthesize
from .names import NameFactory, next_id
from .timeline import partition, validate_cels

logger = logging.getLogger(__name__)


def generate(
    cels: Sequence[int],
    frame_rate: float = DEFAULT_FRAME_RATE,
    alternate: bool = DEFAULT_ALTERNATE,
    iterations: IterationCount = DEFAULT_ITERATIONS,
    name_gen: NameFactory | None = None,
) -> StyleOutput:
    """
    Generate a stepped-opacity cel animation.

    All input is validated before a single keyframe name is requested, so a
    failing call neither produces output nor consumes identifiers.

    Args:
        cels: Frame count for each positional child, in order
        frame_rate: Seconds each frame stays on screen
        alternate: Play the sequence back and forth
        iterations: Number of (forward, or forward-and-back) passes, or "infinite"
        name_gen: Identifier factory; the process-wide generator when omitted

    Returns:
        The computed timeline, shared properties, keyframe rules and bindings

    Raises:
        InvalidTiming: If the timing parameters are invalid
        InvalidSpec: If the cel durations are invalid
    """
    timing = TimingConfig(frame_rate=frame_rate, alternate=alternate, iterations=iterations)
    values = validate_cels(cels)

    timeline = partition(values)
    rules, bindings = synthesize(timeline.windows, name_gen or next_id)
    properties = animation_properties(timeline.total_frames, timing)

    logger.debug(
        "Generated %d cels over %d frames (duration=%ss, iterations=%s, direction=%s)",
        len(rules),
        timeline.total_frames,
        properties.duration,
        properties.iteration_count,
        properties.direction or "normal",
    )
    return StyleOutput(
        timeline=timeline,
        properties=properties,
        rules=rules,
        bindings=bindings,
    )
