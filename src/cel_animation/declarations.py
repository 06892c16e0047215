"""Shared animation properties and CSS emission."""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Literal, Union

from .constants import (
    ALTERNATE_DIRECTION,
    DEFAULT_ALTERNATE,
    DEFAULT_FRAME_RATE,
    DEFAULT_ITERATIONS,
    DEFAULT_SELECTOR,
    INFINITE,
    TIMING_FUNCTION,
)
from .errors import InvalidTiming
from .keyframes import Binding, KeyframeRule
from .timeline import Timeline

IterationCount = Union[int, Literal["infinite"]]

_CSS_DECIMALS = 6
_CSS_MAX_DECIMALS = 12


@dataclass(frozen=True)
class TimingConfig:
    """How fast and how often the cel sequence plays."""

    frame_rate: float = DEFAULT_FRAME_RATE
    alternate: bool = DEFAULT_ALTERNATE
    iterations: IterationCount = DEFAULT_ITERATIONS

    def __post_init__(self) -> None:
        validate_timing(self.frame_rate, self.alternate, self.iterations)


def validate_timing(frame_rate: float, alternate: bool, iterations: IterationCount) -> None:
    """
    Check timing parameters before anything is generated.

    Raises:
        InvalidTiming: If a parameter is out of range or of the wrong type
    """
    if isinstance(frame_rate, bool) or not isinstance(frame_rate, (int, float)):
        raise InvalidTiming(f"Frame rate must be a number (got {type(frame_rate).__name__})")
    if not math.isfinite(frame_rate) or frame_rate <= 0:
        raise InvalidTiming(f"Frame rate must be a positive number of seconds (got {frame_rate})")
    if not isinstance(alternate, bool):
        raise InvalidTiming(f"Alternate must be a boolean (got {type(alternate).__name__})")
    if iterations == INFINITE:
        return
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations <= 0:
        raise InvalidTiming(
            f"Iterations must be a positive integer or '{INFINITE}' (got {iterations!r})"
        )


@dataclass(frozen=True)
class AnimationProperties:
    """Animation properties shared by every cel."""

    duration: float
    direction: str | None
    iteration_count: IterationCount
    timing_function: str = TIMING_FUNCTION


def animation_properties(total_frames: int, timing: TimingConfig) -> AnimationProperties:
    """
    Compute the properties applied to all cels.

    A finite iteration count is doubled when alternating: callers count one
    forward-and-back pass as an iteration, CSS counts each direction separately.
    """
    iteration_count: IterationCount = timing.iterations
    if timing.alternate and timing.iterations != INFINITE:
        iteration_count = timing.iterations * 2

    return AnimationProperties(
        duration=total_frames * timing.frame_rate,
        direction=ALTERNATE_DIRECTION if timing.alternate else None,
        iteration_count=iteration_count,
    )


@dataclass(frozen=True)
class StyleOutput:
    """Everything needed to animate one container's children."""

    timeline: Timeline
    properties: AnimationProperties
    rules: tuple[KeyframeRule, ...]
    bindings: tuple[Binding, ...]

    def to_css(self, selector: str = DEFAULT_SELECTOR) -> str:
        return render_css(self, selector)


def render_css(output: StyleOutput, selector: str = DEFAULT_SELECTOR) -> str:
    """
    Render a stylesheet for ``output`` scoped to ``selector``.

    The shared block comes first so the positional bindings that follow can
    override it through higher specificity.
    """
    if not selector.strip():
        raise ValueError("Selector must not be empty")

    offsets = _css_nums(offset for rule in output.rules for offset, _ in rule.stops())
    parts = [_shared_block(output.properties, selector)]
    parts.extend(_keyframes_block(rule, offsets) for rule in output.rules)
    parts.extend(_binding_line(binding, selector) for binding in output.bindings)
    return "\n".join(parts) + "\n"


def _shared_block(properties: AnimationProperties, selector: str) -> str:
    lines = [
        f"{selector} > * {{",
        "  opacity: 0;",
        f"  animation-duration: {css_duration(properties.duration)};",
        f"  animation-timing-function: {properties.timing_function};",
        f"  animation-iteration-count: {properties.iteration_count};",
    ]
    if properties.direction is not None:
        lines.append(f"  animation-direction: {properties.direction};")
    lines.append("}")
    return "\n".join(lines)


def _keyframes_block(rule: KeyframeRule, offsets: dict[float, str]) -> str:
    lines = [f"@keyframes {rule.id} {{"]
    for offset, opacity in rule.stops():
        lines.append(f"  {offsets[offset]}% {{ opacity: {opacity}; }}")
    lines.append("}")
    return "\n".join(lines)


def _binding_line(binding: Binding, selector: str) -> str:
    return f"{selector} > :nth-child({binding.index}) {{ animation-name: {binding.rule_id}; }}"


@lru_cache(maxsize=8192)
def _css_num(value: float, places: int = _CSS_DECIMALS) -> str:
    if isinstance(value, int):
        return str(value)
    text = f"{value:.{places}f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def _css_nums(values: Iterable[float]) -> dict[float, str]:
    """
    Render numbers compactly without merging distinct values.

    Precision grows until every distinct value has its own text and no
    nonzero value prints as 0; past that the round-trip ``repr`` is used.
    """
    distinct = sorted(set(values))
    for places in range(_CSS_DECIMALS, _CSS_MAX_DECIMALS + 1):
        rendered = {value: _css_num(value, places) for value in distinct}
        if len(set(rendered.values())) == len(rendered) and all(
            text != "0" for value, text in rendered.items() if value != 0
        ):
            return rendered
    return {value: _css_repr(value) for value in distinct}


def _css_repr(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def css_duration(seconds: float) -> str:
    """Format a duration in seconds for CSS, never rounding a positive value to zero."""
    return f"{_css_nums([seconds])[seconds]}s"
