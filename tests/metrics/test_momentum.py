"""Tests for RSI, SMA and slope helpers"""

import pytest

from updown_app.metrics.momentum import compute_rsi, slope_last, sma


class TestRSI:
    """Test RSI calculation"""

    def test_insufficient_data(self):
        """Test RSI needs period + 1 closes"""
        assert compute_rsi([1.0, 2.0, 3.0], period=3) is None

    def test_all_gains(self):
        """Test a rising series saturates at 100"""
        assert compute_rsi([float(i) for i in range(20)], period=14) == 100.0

    def test_all_losses(self):
        """Test a falling series bottoms at 0"""
        assert compute_rsi([float(20 - i) for i in range(20)], period=14) == 0.0

    def test_wilder_smoothing(self):
        """Test the smoothed averages on a hand-computed series"""
        # seed: gain 0.5, loss 0.5; then +1 -> 0.75 / 0.25; then -1 -> 0.375 / 0.625
        rsi = compute_rsi([1.0, 2.0, 1.0, 2.0, 1.0], period=2)
        assert rsi == pytest.approx(37.5)

    def test_bounded(self):
        """Test RSI stays within [0, 100]"""
        closes = [100.0, 101.5, 100.2, 103.0, 99.0, 104.0, 98.5, 102.0]
        rsi = compute_rsi(closes, period=3)
        assert 0.0 <= rsi <= 100.0


class TestSMA:
    """Test simple moving average"""

    def test_sma(self):
        """Test SMA of the last period values"""
        assert sma([1.0, 2.0, 3.0, 4.0], 2) == 3.5

    def test_sma_insufficient(self):
        """Test SMA with insufficient data"""
        assert sma([1.0], 2) is None


class TestSlope:
    """Test trailing slope"""

    def test_slope(self):
        """Test average per-step change"""
        assert slope_last([1.0, 2.0, 4.0, 7.0], 3) == 2.5

    def test_slope_insufficient(self):
        """Test slope with insufficient data"""
        assert slope_last([1.0, 2.0], 3) is None

    def test_slope_needs_two_points(self):
        """Test a single point has no slope"""
        assert slope_last([1.0, 2.0], 1) is None
