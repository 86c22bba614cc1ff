"""Tests for cyclic geometry and wrap math."""

import math

import pytest

from src.core.geometry import (
    Direction,
    GeometryState,
    canonical_positions,
    compute_layout,
    nearest_index,
    rest_positions,
    wrap,
)


def make_geometry(count: int, width: float = 100.0) -> GeometryState:
    geometry = compute_layout(width, 50.0, count)
    assert geometry is not None
    return geometry


class TestComputeLayout:
    """Tests for compute_layout."""

    def test_item_width_fills_container(self) -> None:
        geometry = make_geometry(5, width=320.0)
        assert geometry.item_width == 320.0
        assert geometry.item_height == 50.0
        assert geometry.wrap_extent == 1600.0
        assert geometry.max_x == 1280.0
        assert geometry.min_x == -320.0

    def test_zero_items_is_no_op(self) -> None:
        assert compute_layout(320.0, 50.0, 0) is None

    def test_zero_width_is_no_op(self) -> None:
        assert compute_layout(0.0, 50.0, 3) is None

    def test_non_finite_width_is_no_op(self) -> None:
        assert compute_layout(math.nan, 50.0, 3) is None
        assert compute_layout(math.inf, 50.0, 3) is None

    def test_same_inputs_give_equal_geometry(self) -> None:
        assert compute_layout(320.0, 50.0, 4) == compute_layout(320.0, 50.0, 4)


class TestWrap:
    """Tests for the cyclic fold."""

    def test_move_inside_range(self) -> None:
        geometry = make_geometry(5)
        assert wrap(0.0, 30.0, geometry) == 30.0
        assert wrap(200.0, -50.0, geometry) == 150.0

    def test_moving_left_past_lower_bound_reappears_below_max(self) -> None:
        geometry = make_geometry(5)
        assert wrap(-90.0, -20.0, geometry) == 390.0

    def test_moving_right_past_max_reappears_above_lower_bound(self) -> None:
        geometry = make_geometry(5)
        assert wrap(390.0, 20.0, geometry) == -90.0

    def test_lower_bound_is_excluded(self) -> None:
        geometry = make_geometry(5)
        assert wrap(0.0, -100.0, geometry) == geometry.max_x

    def test_upper_bound_is_included(self) -> None:
        geometry = make_geometry(5)
        assert wrap(300.0, 100.0, geometry) == 400.0

    def test_many_periods_fold_exactly(self) -> None:
        geometry = make_geometry(5)
        assert wrap(0.0, 500.0 * 7 + 25.0, geometry) == 25.0
        assert wrap(0.0, -500.0 * 7 - 25.0, geometry) == -25.0

    @pytest.mark.parametrize("count", [1, 2, 3, 5, 8])
    @pytest.mark.parametrize(
        "deltas",
        [
            [37.5, -250.25, 1000.0, -0.5, 62.75],
            [-99.75] * 40,
            [412.5, 412.5, -825.0, 3.25],
        ],
    )
    def test_stepwise_wrap_matches_single_wrap(self, count: int, deltas: list[float]) -> None:
        geometry = make_geometry(count)
        for start in (geometry.max_x, 0.0, -99.5):
            stepped = start
            for delta in deltas:
                stepped = wrap(stepped, delta, geometry)
            assert stepped == wrap(start, sum(deltas), geometry)

    @pytest.mark.parametrize("delta", [-1234.5, -100.0, -0.25, 0.0, 0.25, 99.75, 5000.0])
    def test_result_always_in_range(self, delta: float) -> None:
        geometry = make_geometry(4)
        result = wrap(12.5, delta, geometry)
        assert geometry.min_x < result <= geometry.max_x


class TestRestPlacement:
    """Tests for rest and canonical positions."""

    def test_rest_positions(self) -> None:
        assert rest_positions(make_geometry(4)) == [0.0, 100.0, 200.0, 300.0]

    def test_canonical_at_index_zero_keeps_last_item_at_max(self) -> None:
        assert canonical_positions(make_geometry(5), 0) == [0.0, 100.0, 200.0, 300.0, 400.0]

    def test_canonical_in_the_middle(self) -> None:
        assert canonical_positions(make_geometry(5), 2) == [
            300.0,
            -100.0,
            0.0,
            100.0,
            200.0,
        ]

    def test_canonical_at_last_index(self) -> None:
        assert canonical_positions(make_geometry(5), 4) == [
            100.0,
            200.0,
            300.0,
            -100.0,
            0.0,
        ]

    def test_canonical_single_item(self) -> None:
        assert canonical_positions(make_geometry(1), 0) == [0.0]

    def test_canonical_two_items(self) -> None:
        geometry = make_geometry(2)
        assert canonical_positions(geometry, 0) == [0.0, 100.0]
        assert canonical_positions(geometry, 1) == [-100.0, 0.0]

    def test_nearest_index(self) -> None:
        assert nearest_index([210.0, -40.0, 60.0]) == 1
        assert nearest_index([50.0, -50.0]) == 0
        assert nearest_index([]) == 0


class TestDirection:
    """Tests for Direction helpers."""

    def test_from_delta(self) -> None:
        assert Direction.from_delta(-0.5) is Direction.LEFT
        assert Direction.from_delta(0.0) is Direction.RIGHT
        assert Direction.from_delta(3.0) is Direction.RIGHT

    def test_signed(self) -> None:
        assert Direction.LEFT.signed(12.0) == -12.0
        assert Direction.RIGHT.signed(12.0) == 12.0
