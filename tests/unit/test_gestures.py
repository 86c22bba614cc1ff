"""Tests for gesture tracking and swipe classification."""

import pytest

from src.core.config import ScrollerConfig
from src.core.geometry import Direction
from src.core.gestures import GestureDetector, GestureSample, check_swipe


def completed(
    start: tuple[float, float, float], end: tuple[float, float, float]
) -> GestureSample:
    detector = GestureDetector()
    detector.begin(*start)
    sample = detector.end(*end)
    assert sample is not None
    return sample


class TestGestureDetector:
    """Tests for GestureDetector."""

    def test_end_without_begin_returns_none(self) -> None:
        detector = GestureDetector()
        assert detector.end(10.0, 0.0, 1.0) is None

    def test_move_without_begin_returns_none(self) -> None:
        detector = GestureDetector()
        assert detector.move(10.0, 0.0, 1.0, scale=1.0) is None

    def test_begin_marks_active(self) -> None:
        detector = GestureDetector()
        detector.begin(0.0, 0.0, 0.0)
        assert detector.is_active
        detector.end(5.0, 0.0, 0.1)
        assert not detector.is_active

    def test_move_reports_scaled_distance_since_previous_sample(self) -> None:
        detector = GestureDetector()
        detector.begin(100.0, 0.0, 0.0)
        first = detector.move(70.0, 0.0, 0.1, scale=0.5)
        second = detector.move(90.0, 0.0, 0.2, scale=0.5)
        assert first is not None and second is not None
        assert first.distance == 15.0
        assert first.direction is Direction.LEFT
        assert first.signed == -15.0
        assert second.distance == 10.0
        assert second.direction is Direction.RIGHT

    def test_move_uses_euclidean_distance(self) -> None:
        detector = GestureDetector()
        detector.begin(0.0, 0.0, 0.0)
        delta = detector.move(-3.0, 4.0, 0.1, scale=1.0)
        assert delta is not None
        assert delta.distance == 5.0
        assert delta.direction is Direction.LEFT

    def test_stationary_move_returns_none(self) -> None:
        detector = GestureDetector()
        detector.begin(10.0, 10.0, 0.0)
        assert detector.move(10.0, 10.0, 0.1, scale=1.0) is None

    def test_cancel_drops_gesture(self) -> None:
        detector = GestureDetector()
        detector.begin(0.0, 0.0, 0.0)
        detector.cancel()
        assert detector.end(50.0, 0.0, 0.1) is None


class TestGestureSample:
    """Tests for GestureSample derived values."""

    def test_distance_elapsed_direction(self) -> None:
        sample = completed((100.0, 0.0, 1.0), (70.0, 40.0, 1.25))
        assert sample.distance == 50.0
        assert sample.elapsed == 0.25
        assert sample.direction is Direction.LEFT

    def test_incomplete_sample(self) -> None:
        sample = GestureSample(
            start_x=0.0, start_y=0.0, start_time=0.0, previous_x=0.0, previous_y=0.0
        )
        assert not sample.is_complete
        assert sample.distance == 0.0
        assert sample.elapsed == 0.0
        assert check_swipe(sample, ScrollerConfig()) is None


class TestCheckSwipe:
    """Tests for swipe threshold classification."""

    @pytest.fixture
    def config(self) -> ScrollerConfig:
        return ScrollerConfig(
            swipe_distance_threshold=50.0, swipe_time_threshold=0.5, scroll_sensitivity=5.0
        )

    def test_thresholds_are_inclusive(self, config: ScrollerConfig) -> None:
        swipe = check_swipe(completed((0.0, 0.0, 1.0), (-50.0, 0.0, 1.5)), config)
        assert swipe is not None
        assert swipe.direction is Direction.LEFT

    def test_distance_just_under_threshold(self, config: ScrollerConfig) -> None:
        assert check_swipe(completed((0.0, 0.0, 1.0), (-49.75, 0.0, 1.25)), config) is None

    def test_elapsed_just_over_threshold(self, config: ScrollerConfig) -> None:
        assert check_swipe(completed((0.0, 0.0, 1.0), (-80.0, 0.0, 1.501)), config) is None

    def test_velocity_is_distance_times_elapsed_times_sensitivity(
        self, config: ScrollerConfig
    ) -> None:
        swipe = check_swipe(completed((0.0, 0.0, 1.0), (-50.0, 0.0, 1.5)), config)
        assert swipe is not None
        assert swipe.velocity == -125.0

    def test_right_swipe_has_positive_velocity(self, config: ScrollerConfig) -> None:
        swipe = check_swipe(completed((0.0, 0.0, 0.0), (100.0, 0.0, 0.25)), config)
        assert swipe is not None
        assert swipe.direction is Direction.RIGHT
        assert swipe.velocity == 125.0
