"""Stepped CSS keyframe generation for frame-by-frame cel animation."""

from .declarations import (
    AnimationProperties,
    StyleOutput,
    TimingConfig,
    animation_properties,
    render_css,
)
from .errors import (
    CelAnimationError,
    CelImageError,
    DuplicateKeyframeName,
    InvalidSpec,
    InvalidTiming,
)
from .generator import generate
from .keyframes import Binding, KeyframeRule, synthesize
from .names import NameGenerator, next_id
from .timeline import CelWindow, Timeline, partition

__all__ = [
    "AnimationProperties",
    "Binding",
    "CelAnimationError",
    "CelImageError",
    "CelWindow",
    "DuplicateKeyframeName",
    "InvalidSpec",
    "InvalidTiming",
    "KeyframeRule",
    "NameGenerator",
    "StyleOutput",
    "Timeline",
    "TimingConfig",
    "animation_properties",
    "generate",
    "next_id",
    "partition",
    "render_css",
    "synthesize",
]
