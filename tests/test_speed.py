"""Tests for the score -> speed level policy."""

from taptiles.config import SPEED_PIXELS, SPEED_THRESHOLDS
from taptiles.speed import SpeedPolicy


def _policy() -> SpeedPolicy:
    return SpeedPolicy(SPEED_THRESHOLDS, SPEED_PIXELS)


def test_starts_at_level_zero():
    assert _policy().level_for(0) == 0
    assert _policy().level_for(9) == 0


def test_thresholds_raise_level():
    policy = _policy()
    assert policy.level_for(10) == 1
    assert policy.level_for(24) == 1
    assert policy.level_for(25) == 2
    assert policy.level_for(45) == 3
    assert policy.level_for(75) == 4


def test_scores_past_last_threshold_clamp_to_top_level():
    policy = _policy()
    assert policy.level_for(110) == policy.max_level
    assert policy.level_for(10_000) == policy.max_level


def test_level_is_monotonic_and_bounded():
    policy = _policy()
    levels = [policy.level_for(score) for score in range(300)]
    assert levels == sorted(levels)
    assert max(levels) <= policy.max_level


def test_level_never_drops_below_current():
    assert _policy().level_for(0, current=3) == 3


def test_pixels_per_level():
    policy = _policy()
    assert policy.pixels_for(0) == 2
    assert policy.pixels_for(4) == 15
    assert policy.pixels_for(99) == 15
