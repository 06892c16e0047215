"""Keyframe rule synthesis for cel windows."""

from dataclasses import dataclass
from typing import Iterable

from .errors import DuplicateKeyframeName
from .names import NameFactory
from .timeline import CelWindow

APPEAR_OPACITY = 1
DISAPPEAR_OPACITY = 0


@dataclass(frozen=True)
class KeyframeRule:
    """A named two-stop keyframe rule: opaque at ``appear_at``, hidden at ``disappear_at``."""

    id: str
    appear_at: float
    disappear_at: float

    def stops(self) -> tuple[tuple[float, int], tuple[float, int]]:
        """Return ``(percentage, opacity)`` pairs in timeline order."""
        return (
            (self.appear_at, APPEAR_OPACITY),
            (self.disappear_at, DISAPPEAR_OPACITY),
        )


@dataclass(frozen=True)
class Binding:
    """Attaches a keyframe rule to the 1-based positional child it animates."""

    rule_id: str
    index: int


def synthesize(
    windows: Iterable[CelWindow], name_gen: NameFactory
) -> tuple[tuple[KeyframeRule, ...], tuple[Binding, ...]]:
    """
    Build one keyframe rule and one child binding per cel window.

    Args:
        windows: Cel windows in child order
        name_gen: Collaborator returning a fresh identifier on each call

    Returns:
        Rules and bindings, both in window order

    Raises:
        DuplicateKeyframeName: If the name generator repeats an identifier
    """
    rules: list[KeyframeRule] = []
    bindings: list[Binding] = []
    seen: set[str] = set()

    for window in windows:
        rule_id = name_gen()
        if rule_id in seen:
            raise DuplicateKeyframeName(f"Keyframe name '{rule_id}' was generated twice")
        seen.add(rule_id)

        # The first cel still declares its 0% stop: every child starts hidden.
        rules.append(
            KeyframeRule(id=rule_id, appear_at=window.start, disappear_at=window.end)
        )
        bindings.append(Binding(rule_id=rule_id, index=window.index))

    return tuple(rules), tuple(bindings)
