#!/usr/bin/env python3
"""
Benchmark the exact and Barnes-Hut samplers on random body sets.

Usage:
    uv run python scripts/benchmark_sampling.py [--bodies N,...] [--thetas T,...]

Examples:
    uv run python scripts/benchmark_sampling.py
    uv run python scripts/benchmark_sampling.py --bodies 100,1000 --thetas 0,0.5,1
    uv run python scripts/benchmark_sampling.py --samples 5000 --output results.json
"""

from __future__ import annotations

import argparse
import json
import time
from typing import Any

import numpy as np

from gravity_model import (
    BarnesHutSampler,
    Body2D,
    ExactSampler,
    GravitySampler,
    exact_probabilities,
    total_variation_distance,
)


def make_bodies(n: int, seed: int = 42, extent: float = 1000.0) -> list[Body2D[int]]:
    """Generate n clustered bodies with random masses."""
    rng = np.random.default_rng(seed)
    centres = rng.uniform(-extent, extent, size=(max(1, n // 50), 2))
    owners = rng.integers(0, len(centres), size=n)
    positions = centres[owners] + rng.normal(0.0, extent / 20, size=(n, 2))
    masses = rng.uniform(1.0, 100.0, size=n)
    return [
        Body2D(float(x), float(y), mass=float(m), value=i)
        for i, ((x, y), m) in enumerate(zip(positions, masses))
    ]


def benchmark_sampler(
    sampler: GravitySampler[Any],
    reference: Body2D[Any],
    num_bodies: int,
    samples: int,
) -> dict[str, Any]:
    """
    Time repeated draws and measure distance to the exact distribution.

    Returns:
        Dict with timing and accuracy info
    """
    counts = np.zeros(num_bodies)

    start = time.perf_counter()
    for _ in range(samples):
        counts[sampler.sample_value(reference)] += 1
    elapsed = time.perf_counter() - start

    return {
        "time_seconds": elapsed,
        "us_per_sample": elapsed / samples * 1e6,
        "frequencies": counts / samples,
    }


def run_benchmarks(
    body_counts: list[int],
    thetas: list[float],
    samples: int = 2000,
) -> list[dict]:
    """Run benchmarks for every body count and theta."""
    results = []

    print(f"\nBenchmarking {len(thetas)} theta values on {len(body_counts)} body sets")
    print(f"Samples per run: {samples}")
    print("=" * 80)

    for n in body_counts:
        bodies = make_bodies(n)
        reference = Body2D.at(0.0, 0.0)
        expected = exact_probabilities(bodies, reference)

        print(f"\n{n} bodies")
        print("-" * 60)

        start = time.perf_counter()
        exact = ExactSampler(bodies, random_seed=42)
        build_time = time.perf_counter() - start
        result = benchmark_sampler(exact, reference, n, samples)
        tvd = total_variation_distance(result.pop("frequencies"), expected)
        print(f"  {'exact':12s}: {result['us_per_sample']:10.1f}us/sample  TVD {tvd:.4f}")
        results.append(
            {"bodies": n, "sampler": "exact", "build_seconds": build_time, "tvd": tvd, **result}
        )

        for theta in thetas:
            name = f"bh(theta={theta:g})"
            start = time.perf_counter()
            sampler = BarnesHutSampler(bodies, theta=theta, random_seed=42)
            build_time = time.perf_counter() - start
            result = benchmark_sampler(sampler, reference, n, samples)
            tvd = total_variation_distance(result.pop("frequencies"), expected)
            print(
                f"  {name:12s}: {result['us_per_sample']:10.1f}us/sample  TVD {tvd:.4f}"
                f"  (build {build_time:.3f}s, height {sampler.root.height()})"
            )
            results.append(
                {
                    "bodies": n,
                    "sampler": name,
                    "theta": theta,
                    "build_seconds": build_time,
                    "tvd": tvd,
                    **result,
                }
            )

    # Summary
    print("\n" + "=" * 80)
    print("SUMMARY (microseconds per sample)")
    print("=" * 80)

    sampler_names = list(dict.fromkeys(r["sampler"] for r in results))

    print(f"{'Bodies':<10s}", end="")
    for name in sampler_names:
        print(f"{name:>16s}", end="")
    print()
    print("-" * (10 + 16 * len(sampler_names)))

    for n in body_counts:
        print(f"{n:<10d}", end="")
        for name in sampler_names:
            matching = [r for r in results if r["bodies"] == n and r["sampler"] == name]
            if matching:
                print(f"{matching[0]['us_per_sample']:>16.1f}", end="")
            else:
                print(f"{'--':>16s}", end="")
        print()

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark gravity model samplers")
    parser.add_argument("--bodies", default="100,1000", help="Comma-separated body counts")
    parser.add_argument("--thetas", default="0,0.5,1", help="Comma-separated theta values")
    parser.add_argument("--samples", type=int, default=2000, help="Draws per sampler")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    results = run_benchmarks(
        body_counts=[int(n) for n in args.bodies.split(",")],
        thetas=[float(t) for t in args.thetas.split(",")],
        samples=args.samples,
    )

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
