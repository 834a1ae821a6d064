"""Pytest configuration and shared fixtures."""

import pytest

from updown_app.data.models import MacdSnapshot, MarketSnapshot


@pytest.fixture
def empty_snapshot() -> MarketSnapshot:
    """Snapshot with every indicator unknown."""
    return MarketSnapshot()


@pytest.fixture
def bullish_snapshot() -> MarketSnapshot:
    """Snapshot where every indicator leans up, 0.6% above the strike."""
    return MarketSnapshot(
        price=100_600.0,
        price_to_beat=100_000.0,
        vwap=100_400.0,
        vwap_slope=1.5,
        rsi=62.0,
        rsi_slope=0.8,
        macd=MacdSnapshot(hist=4.0, hist_delta=1.0, macd=12.0),
        heiken_color="green",
        heiken_count=3,
        failed_vwap_reclaim=False,
    )


@pytest.fixture
def bearish_snapshot() -> MarketSnapshot:
    """Snapshot where every indicator leans down, 0.6% below the strike."""
    return MarketSnapshot(
        price=99_400.0,
        price_to_beat=100_000.0,
        vwap=99_700.0,
        vwap_slope=-1.5,
        rsi=38.0,
        rsi_slope=-0.8,
        macd=MacdSnapshot(hist=-4.0, hist_delta=-1.0, macd=-12.0),
        heiken_color="red",
        heiken_count=4,
        failed_vwap_reclaim=True,
    )


@pytest.fixture
def sample_closes() -> list[float]:
    """Sixty-one one-minute closes with alternating small moves."""
    closes = [100_000.0]
    for i in range(60):
        step = 40.0 if i % 3 else -55.0
        closes.append(closes[-1] + step)
    return closes


@pytest.fixture
def sample_payload() -> dict:
    """Raw indicator payload as emitted by the upstream indicator layer."""
    return {
        "price": 100_600.0,
        "priceToBeat": 100_000.0,
        "currentPrice": None,
        "vwap": 100_400.0,
        "vwapSlope": 1.5,
        "rsi": 62.0,
        "rsiSlope": 0.8,
        "macd": {"hist": 4.0, "histDelta": 1.0, "macd": 12.0},
        "heikenColor": "green",
        "heikenCount": 3,
        "failedVwapReclaim": False,
    }
