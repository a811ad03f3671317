"""Tests for laylines, waypoint reachability and tack angles."""

import pytest

from sailgeom.core.laylines import (
    Laylines,
    calculate_laylines,
    can_reach,
    navigation_course,
    solve_laylines,
    tack_angle,
)


class TestCalculateLaylines:
    def test_north_wind(self):
        assert calculate_laylines(0, 40) == Laylines(port=40.0, starboard=320.0)

    def test_wraps_through_north(self):
        assert calculate_laylines(350, 40) == Laylines(port=30.0, starboard=310.0)

    def test_absent_input(self):
        assert calculate_laylines(None, 40) is None
        assert calculate_laylines(0, float('nan')) is None


class TestCanReach:
    def test_port_layline(self):
        assert can_reach(90, 40, 0)
        assert can_reach(180, 40, 0)
        assert can_reach(40, 40, 0)
        assert can_reach(0, 40, 0)
        assert not can_reach(39, 40, 0)

    def test_port_excludes_no_go(self):
        # Inside the no-go cone between the wind and the port layline
        assert not can_reach(20, 40, 0)

    def test_starboard_layline(self):
        assert can_reach(270, 320, 0)
        assert can_reach(320, 320, 0)
        assert can_reach(0, 320, 0)
        assert not can_reach(340, 320, 0)
        assert not can_reach(321, 320, 0)

    def test_arc_across_north(self):
        # Wind 350, port layline 30
        assert can_reach(35, 30, 350)
        assert not can_reach(5, 30, 350)
        assert not can_reach(355, 30, 350)

    def test_absent_input(self):
        assert not can_reach(None, 40, 0)
        assert not can_reach(20, None, 0)


class TestTackAngle:
    def test_signed_turn(self):
        assert tack_angle(90, 40) == pytest.approx(-50.0)
        assert tack_angle(350, 40) == pytest.approx(50.0)

    def test_absent_course(self):
        assert tack_angle(None, 40) is None


class TestSolveLaylines:
    def test_solution(self):
        solution = solve_laylines(0, 40, 340, course=90)
        assert solution.laylines == Laylines(40.0, 320.0)
        assert solution.can_fetch_port
        assert not solution.can_fetch_starboard
        assert solution.port_tack_angle == pytest.approx(-50.0)
        assert solution.starboard_tack_angle == pytest.approx(-130.0)

    def test_without_course(self):
        solution = solve_laylines(0, 40, 90)
        assert solution.can_fetch_port
        assert solution.can_fetch_starboard
        assert solution.port_tack_angle is None

    def test_without_waypoint(self):
        assert solve_laylines(0, 40, None) is None

    def test_navigation_course_fallback(self):
        assert navigation_course(10, 20, 30) == 10
        assert navigation_course(None, 20, 30) == 20
        assert navigation_course(None, None, 390) == 30
        assert navigation_course() is None
