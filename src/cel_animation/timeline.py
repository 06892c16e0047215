"""Timeline partitioning of cel durations into visibility windows."""

from dataclasses import dataclass
from typing import Sequence

from .errors import InvalidSpec


@dataclass(frozen=True)
class CelWindow:
    """The slice of the animation timeline during which one cel is visible.

    ``start`` and ``end`` are percentages of the total duration; the cel is
    shown for ``[start, end)``.
    """

    index: int
    frames: int
    frames_before: int
    start: float
    end: float


@dataclass(frozen=True)
class Timeline:
    total_frames: int
    frame_fraction: float
    windows: tuple[CelWindow, ...]


def validate_cels(cels: Sequence[int]) -> tuple[int, ...]:
    """
    Check that cel durations form a usable animation.

    Args:
        cels: Frame count for each positional child, in order

    Returns:
        The durations as a tuple

    Raises:
        InvalidSpec: If the sequence is empty or holds a non-positive or non-integer value
    """
    if isinstance(cels, (str, bytes)):
        raise InvalidSpec("Cel durations must be a sequence of integers")
    try:
        values = tuple(cels)
    except TypeError:
        raise InvalidSpec("Cel durations must be a sequence of integers")

    if not values:
        raise InvalidSpec("At least one cel duration is required")

    for position, frames in enumerate(values, start=1):
        # bool is an int subclass but never a meaningful frame count
        if isinstance(frames, bool) or not isinstance(frames, int):
            raise InvalidSpec(
                f"Cel {position} duration must be an integer (got {type(frames).__name__})"
            )
        if frames <= 0:
            raise InvalidSpec(f"Cel {position} duration must be positive (got {frames})")
    return values


def partition(cels: Sequence[int]) -> Timeline:
    """
    Split the animation timeline into one contiguous window per cel.

    Window bounds are computed from integer frame counts, so adjacent windows
    share the exact same boundary value and the last window ends at exactly 100.

    Args:
        cels: Frame count for each positional child, in order

    Returns:
        Timeline with total frame count, percentage per frame and ordered windows

    Raises:
        InvalidSpec: If the cel durations are invalid
    """
    values = validate_cels(cels)
    total_frames = sum(values)
    frame_fraction = 100 / total_frames

    windows: list[CelWindow] = []
    frames_before = 0
    for index, frames in enumerate(values, start=1):
        frames_after = frames_before + frames
        windows.append(
            CelWindow(
                index=index,
                frames=frames,
                frames_before=frames_before,
                start=_percent(frames_before, total_frames),
                end=_percent(frames_after, total_frames),
            )
        )
        frames_before = frames_after

    return Timeline(
        total_frames=total_frames,
        frame_fraction=frame_fraction,
        windows=tuple(windows),
    )


def _percent(frames: int, total_frames: int) -> float:
    return frames * 100 / total_frames
