#!/usr/bin/env python3
"""Performance benchmark script for the cancelling checker."""

import random
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cancelling_app.data.models import TradeRecord, TradeType
from cancelling_app.detection.detector import CancellationDetector

COMPANIES = [f"Company {i}" for i in range(50)]


def generate_sample_data(count: int, seed: int = 7) -> List[TradeRecord]:
    """Generate a time ordered synthetic dataset."""
    rng = random.Random(seed)
    base_timestamp = int(datetime(2015, 2, 28, tzinfo=timezone.utc).timestamp() * 1000)

    data = []
    timestamp = base_timestamp
    for _ in range(count):
        timestamp += rng.choice([0, 0, 1000, 2000])
        data.append(TradeRecord(
            timestamp=timestamp,
            company_name=rng.choice(COMPANIES),
            trade_type=rng.choice([TradeType.ORDER, TradeType.ORDER, TradeType.CANCEL]),
            quantity=rng.randint(1, 500) * 100,
        ))

    return data


def benchmark_detector(data_points: int = 1000) -> Dict[str, Any]:
    """Benchmark a full detection scan."""
    print(f"🏃 Benchmarking detector with {data_points} trades...")

    detector = CancellationDetector()
    test_data = generate_sample_data(data_points)

    start_time = time.perf_counter()
    result = detector.detect(test_data)
    total_time = time.perf_counter() - start_time

    return {
        "total_time": total_time,
        "avg_time_per_trade": total_time / data_points,
        "trades_per_second": data_points / total_time,
        "flagged": len(result.flagged_companies),
        "companies": len(result.all_companies),
    }


def main():
    """Main benchmark function."""
    print("⚡ Cancelling Checker Performance Benchmark")
    print("=" * 40)

    for size in [1000, 10000, 50000]:
        results = benchmark_detector(size)

        print(f"\n📊 Results for {size} trades:")
        print(f"   Total time: {results['total_time']:.3f}s")
        print(f"   Avg per trade: {results['avg_time_per_trade']*1000:.4f}ms")
        print(f"   Trades/second: {results['trades_per_second']:.1f}")
        print(f"   Flagged: {results['flagged']} of {results['companies']} companies")


if __name__ == "__main__":
    main()
