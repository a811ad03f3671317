"""Tests for velocity made good."""

import math

import pytest

from sailgeom.core.vmg import VMGRating, calculate_vmg, calculate_vmg_to_wind, rate_vmg


class TestVMGToWind:
    def test_straight_upwind(self):
        assert calculate_vmg_to_wind(6.0, 0, 0) == 6.0

    def test_straight_downwind(self):
        assert calculate_vmg_to_wind(6.0, 180, 0) == -6.0

    def test_beam_reach(self):
        assert calculate_vmg_to_wind(6.0, 90, 0) == pytest.approx(0.0, abs=1e-12)

    def test_across_north(self):
        assert calculate_vmg_to_wind(6.0, 350, 10) == pytest.approx(6.0 * math.cos(math.radians(20)))

    def test_unnormalized_course(self):
        assert calculate_vmg_to_wind(6.0, 720, 0) == 6.0

    def test_absent_input(self):
        assert calculate_vmg_to_wind(None, 0, 0) is None
        assert calculate_vmg_to_wind(6.0, None, 0) is None
        assert calculate_vmg_to_wind(6.0, 0, float('nan')) is None


class TestVMGToBearing:
    def test_toward_bearing(self):
        assert calculate_vmg(6.0, 0, 60) == pytest.approx(3.0)

    def test_absent_input(self):
        assert calculate_vmg(6.0, None, 60) is None


class TestRateVMG:
    def test_ratings(self):
        assert rate_vmg(-1.0, 6.0) is VMGRating.AWAY
        assert rate_vmg(2.0, 6.0) is VMGRating.POOR
        assert rate_vmg(4.0, 6.0) is VMGRating.GOOD

    def test_absent(self):
        assert rate_vmg(None, 6.0) is None
        assert rate_vmg(1.0, None) is VMGRating.GOOD
