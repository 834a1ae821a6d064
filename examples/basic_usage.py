#!/usr/bin/env python3
"""
Basic Usage Example - UpDown Probability Engine

This script demonstrates the basic usage of the probability engine with a
simulated 15 minute "finish above the strike" market. It shows how to:
- Configure logging
- Build an engine for a market
- Estimate from a raw indicator payload and one-minute closes
- Watch the heuristic's influence fade as the market approaches expiry

Run: python examples/basic_usage.py
"""

import random
from typing import Any

from updown_app.engine import ProbabilityEngine
from updown_app.logging.config import configure_logging


def create_closes(start: float, count: int, seed: int = 7) -> list[float]:
    """Create a random walk of one-minute closes."""
    rng = random.Random(seed)
    closes = [start]
    for _ in range(count - 1):
        closes.append(closes[-1] * (1 + rng.gauss(0.0, 0.0006)))
    return closes


def create_payload(price: float, price_to_beat: float) -> dict[str, Any]:
    """Create an indicator payload as emitted by the indicator layer."""
    return {
        "price": price,
        "priceToBeat": price_to_beat,
        "vwap": price_to_beat * 1.0005,
        "vwapSlope": 0.8,
        "rsi": 58.0,
        "rsiSlope": 0.4,
        "macd": {"hist": 3.2, "histDelta": 0.6, "macd": 9.5},
        "heikenColor": "green",
        "heikenCount": 3,
        "failedVwapReclaim": False,
    }


def main() -> None:
    """Run the probability engine demo."""
    print("🚀 UpDown Probability Engine - Basic Usage Demo")
    print("=" * 50)

    configure_logging(level="WARNING")

    engine = ProbabilityEngine.for_market("BTC-UPDOWN-15M")
    closes = create_closes(100_000.0, 61)
    price_to_beat = 100_000.0
    payload = create_payload(closes[-1] * 1.001, price_to_beat)

    print(f"Strike: {price_to_beat:,.2f}  Price: {payload['price']:,.2f}")
    print()

    for remaining in (15.0, 10.0, 5.0, 1.0, 0.0):
        estimate = engine.estimate_from_payload(
            payload, closes, remaining_minutes=remaining, market_id="BTC-UPDOWN-15M"
        )
        data = estimate.to_dict()
        print(f"⏱  {remaining:>4.1f} min left")
        print(f"   Method: {data['method']}")
        print(f"   Heuristic up: {data['raw_up']:.3f}  Strike up: {data['strike_up']:.3f}")
        print(f"   Weight on heuristic: {data['w_ta']:.2f}")
        print(f"   ➜ P(up) = {data['up_probability']:.4f}")
        print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
