"""Tests for end-to-end cel animation generation."""

import re

import pytest

from cel_animation import (
    InvalidSpec,
    InvalidTiming,
    NameGenerator,
    TimingConfig,
    animation_properties,
    generate,
)


def test_scenario_equal_thirds_with_defaults():
    """Three single-frame cels use the default timing."""
    style = generate([1, 1, 1])

    bounds = [bound for rule in style.rules for bound in (rule.appear_at, rule.disappear_at)]
    assert bounds == pytest.approx(
        [0, 33.333333, 33.333333, 66.666667, 66.666667, 100], abs=1e-6
    )
    assert style.properties.duration == 0.75
    assert style.properties.iteration_count == "infinite"
    assert style.properties.direction is None
    assert style.properties.timing_function == "steps(1)"


def test_scenario_alternating_finite_iterations():
    """Alternating playback doubles a finite iteration count."""
    style = generate([3, 1, 2], frame_rate=0.1, alternate=True, iterations=2)

    assert style.timeline.total_frames == 6
    assert style.timeline.frame_fraction == pytest.approx(16.666667)
    bounds = [
        bound for window in style.timeline.windows for bound in (window.start, window.end)
    ]
    assert bounds == pytest.approx([0, 50, 50, 66.666667, 66.666667, 100], abs=1e-6)
    assert style.properties.duration == 6 * 0.1
    assert style.properties.duration == pytest.approx(0.6)
    assert style.properties.direction == "alternate"
    assert style.properties.iteration_count == 4


def test_scenario_single_cel():
    """One cel produces one full-length rule bound to the first child."""
    style = generate([10], name_gen=NameGenerator(prefix="solo"))

    assert len(style.rules) == 1
    assert (style.rules[0].appear_at, style.rules[0].disappear_at) == (0, 100)
    assert [(binding.rule_id, binding.index) for binding in style.bindings] == [("solo-a", 1)]
    assert style.properties.duration == 10 * 0.25


@pytest.mark.parametrize("cels", [[1], [2, 3], [5, 5, 5, 1], [13, 2, 8, 1, 1]])
@pytest.mark.parametrize("frame_rate", [0.25, 0.1, 1 / 24, 2])
def test_duration_is_total_frames_times_frame_rate(cels, frame_rate):
    """Duration equals the frame sum multiplied by the frame rate."""
    style = generate(cels, frame_rate=frame_rate)

    assert style.properties.duration == sum(cels) * frame_rate


@pytest.mark.parametrize(
    ("alternate", "iterations", "expected"),
    [
        (False, 1, 1),
        (False, 3, 3),
        (True, 1, 2),
        (True, 5, 10),
        (False, "infinite", "infinite"),
        (True, "infinite", "infinite"),
    ],
)
def test_iteration_count(alternate, iterations, expected):
    """Only finite alternating counts are doubled."""
    properties = animation_properties(
        4, TimingConfig(alternate=alternate, iterations=iterations)
    )

    assert properties.iteration_count == expected


def test_rule_ids_unique_within_call():
    """Every cel of a call gets its own keyframe name."""
    style = generate([1] * 200)

    assert len({rule.id for rule in style.rules}) == 200


def test_repeated_calls_do_not_share_names():
    """Two animations on the same page never share keyframe names."""
    first = generate([1, 2, 3])
    second = generate([1, 2, 3])

    assert {rule.id for rule in first.rules}.isdisjoint(rule.id for rule in second.rules)


def test_bindings_match_rules_in_order():
    """Binding i attaches rule i to child i."""
    style = generate([2, 4, 1, 3])

    assert [binding.rule_id for binding in style.bindings] == [rule.id for rule in style.rules]
    assert [binding.index for binding in style.bindings] == [1, 2, 3, 4]


@pytest.mark.parametrize("cels", [[], [1, 0, 2], [-3, 1]])
def test_invalid_cels_raise_invalid_spec(cels):
    """Bad cel durations fail before anything is generated."""
    with pytest.raises(InvalidSpec):
        generate(cels)


@pytest.mark.parametrize(
    "timing",
    [
        {"frame_rate": 0},
        {"frame_rate": -0.5},
        {"frame_rate": float("nan")},
        {"frame_rate": float("inf")},
        {"frame_rate": "0.25"},
        {"iterations": 0},
        {"iterations": -2},
        {"iterations": 1.5},
        {"iterations": "forever"},
        {"iterations": True},
        {"alternate": "yes"},
    ],
)
def test_invalid_timing_raises_invalid_timing(timing):
    """Bad timing parameters fail before anything is generated."""
    with pytest.raises(InvalidTiming):
        generate([1, 2], **timing)


def test_failed_call_requests_no_names():
    """Validation happens before the name generator is consulted."""
    calls = []

    def name_gen():
        calls.append(None)
        return f"n{len(calls)}"

    with pytest.raises(InvalidTiming):
        generate([1, 2], frame_rate=0, name_gen=name_gen)
    with pytest.raises(InvalidSpec):
        generate([1, 0], name_gen=name_gen)

    assert calls == []


def test_renders_shared_block_then_keyframes_then_bindings():
    """The stylesheet lists shared properties before per-child overrides."""
    style = generate([1, 1, 1], name_gen=NameGenerator(prefix="t"))

    assert style.to_css(".walker") == (
        ".walker > * {\n"
        "  opacity: 0;\n"
        "  animation-duration: 0.75s;\n"
        "  animation-timing-function: steps(1);\n"
        "  animation-iteration-count: infinite;\n"
        "}\n"
        "@keyframes t-a {\n"
        "  0% { opacity: 1; }\n"
        "  33.333333% { opacity: 0; }\n"
        "}\n"
        "@keyframes t-b {\n"
        "  33.333333% { opacity: 1; }\n"
        "  66.666667% { opacity: 0; }\n"
        "}\n"
        "@keyframes t-c {\n"
        "  66.666667% { opacity: 1; }\n"
        "  100% { opacity: 0; }\n"
        "}\n"
        ".walker > :nth-child(1) { animation-name: t-a; }\n"
        ".walker > :nth-child(2) { animation-name: t-b; }\n"
        ".walker > :nth-child(3) { animation-name: t-c; }\n"
    )


def test_renders_alternate_direction_and_doubled_count():
    """Alternating animations emit a direction and the doubled count."""
    css = generate([3, 1, 2], frame_rate=0.1, alternate=True, iterations=2).to_css()

    assert "animation-duration: 0.6s;" in css
    assert "animation-iteration-count: 4;" in css
    assert "animation-direction: alternate;" in css
    assert css.startswith(".cel-animation > * {")


def test_render_rejects_blank_selector():
    """A blank selector cannot scope the stylesheet."""
    with pytest.raises(ValueError):
        generate([1]).to_css("  ")


_STOP_RE = re.compile(r"^  (\S+)% \{ opacity: (\d); \}$", re.MULTILINE)


def _rendered_stops(css):
    return [(offset, int(opacity)) for offset, opacity in _STOP_RE.findall(css)]


def test_tiny_frame_rate_keeps_nonzero_duration():
    """A sub-microsecond frame rate never renders as a zero duration."""
    css = generate([1, 1], frame_rate=2e-7).to_css()

    assert "animation-duration: 0.0000004s;" in css
    assert "animation-duration: 0s;" not in generate([1], frame_rate=1e-30).to_css()


def test_huge_frame_total_keeps_windows_distinct():
    """A one-frame cel among a billion frames still gets its own window."""
    style = generate([1, 10**9], name_gen=NameGenerator(prefix="t"))

    css = style.to_css(".walker")

    assert "@keyframes t-a {\n  0% { opacity: 1; }\n  0.0000001% { opacity: 0; }\n}" in css
    assert "@keyframes t-b {\n  0.0000001% { opacity: 1; }\n  100% { opacity: 0; }\n}" in css


@pytest.mark.parametrize("cels", [[10**9, 1, 10**9], [1, 10**12], [3, 10**15, 1]])
def test_rendered_windows_stay_ordered(cels):
    """Rendered stops keep start before end and shared boundaries identical."""
    stops = _rendered_stops(generate(cels).to_css())

    starts = stops[0::2]
    ends = stops[1::2]
    assert len(starts) == len(ends) == len(cels)
    for (start, _), (end, _) in zip(starts, ends):
        assert float(start) < float(end)
    for (end, _), (start, _) in zip(ends, starts[1:]):
        assert start == end
    assert starts[0][0] == "0"
    assert ends[-1][0] == "100"
