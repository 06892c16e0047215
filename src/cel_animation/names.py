"""Unique keyframe name generation."""

import re
import secrets
import threading
from itertools import count
from typing import Callable

from .constants import NAME_PREFIX, NAME_TOKEN_BYTES

NameFactory = Callable[[], str]

_DIGITS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_CSS_IDENT = re.compile(r"-?[_a-zA-Z][_a-zA-Z0-9-]*")


def _to_compact_name(value: int) -> str:
    """Encode a non-negative counter value as letters (a, b, ..., Z, aa, ab, ...)."""
    if value < 0:
        raise ValueError("Counter value must be non-negative")
    out = []
    current = value
    base = len(_DIGITS)
    while True:
        current, remainder = divmod(current, base)
        out.append(_DIGITS[remainder])
        current -= 1
        if current < 0:
            break
    return "".join(reversed(out))


class NameGenerator:
    """Hands out CSS identifiers that never repeat for the lifetime of the process.

    Each generator mixes a random token into its prefix, so identifiers also
    stay distinct between generators created in separate processes (for
    example two builds whose stylesheets end up on the same page).
    """

    def __init__(self, prefix: str | None = None):
        """
        Initialize the generator.

        Args:
            prefix: Fixed identifier prefix; a random one is derived when omitted
        """
        if prefix is None:
            prefix = f"{NAME_PREFIX}-{secrets.token_hex(NAME_TOKEN_BYTES)}"
        if not _CSS_IDENT.fullmatch(prefix):
            raise ValueError(f"Invalid CSS identifier prefix: {prefix!r}")
        self.prefix = prefix
        self._counter = count()
        self._lock = threading.Lock()

    def next_id(self) -> str:
        """Return an identifier never returned before by this generator."""
        with self._lock:
            value = next(self._counter)
        return f"{self.prefix}-{_to_compact_name(value)}"

    def __call__(self) -> str:
        return self.next_id()


_default_generator = NameGenerator()


def next_id() -> str:
    """Return a fresh identifier from the process-wide generator."""
    return _default_generator.next_id()
