"""Exceptions raised while generating cel animations."""


class CelAnimationError(ValueError):
    """Base exception for invalid cel animation input."""
    pass


class InvalidSpec(CelAnimationError):
    """Cel durations are empty or contain a non-positive frame count."""
    pass


class InvalidTiming(CelAnimationError):
    """Frame rate, alternation or iteration settings are invalid."""
    pass


class DuplicateKeyframeName(CelAnimationError):
    """The name generator handed out an identifier twice."""
    pass


class CelImageError(CelAnimationError):
    """An image cel could not be loaded or encoded."""
    pass
