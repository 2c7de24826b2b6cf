#!/usr/bin/env python3
# ABOUTME: Script to run the property lookup benchmarks with pytest-benchmark
# ABOUTME: Supports saving a baseline and comparing later runs against it

import argparse
import subprocess
import sys
from pathlib import Path

BENCHMARK_DIR = "src/propertyutil/tests/benchmark/"


def build_command(save_baseline: bool = False, compare_baseline: str | None = None, json_output: str | None = None):
    """Build the pytest command line for the benchmark suite."""
    cmd = [sys.executable, "-m", "pytest", BENCHMARK_DIR, "-v", "-m", "benchmark"]

    if save_baseline:
        cmd.append("--benchmark-save=baseline")
    if compare_baseline:
        cmd.append(f"--benchmark-compare={compare_baseline}")
    if json_output:
        cmd.append(f"--benchmark-json={json_output}")

    cmd.extend(
        [
            "--benchmark-min-rounds=5",
            "--benchmark-max-time=2.0",
            "--benchmark-warmup=on",
            "--benchmark-sort=mean",
        ]
    )
    return cmd


def main():
    parser = argparse.ArgumentParser(description="Run benchmark tests for property-util")
    parser.add_argument("--save-baseline", action="store_true", help="Save results as the 'baseline' run")
    parser.add_argument("--compare", type=str, help="Compare against a saved run, e.g. '0001'")
    parser.add_argument("--json", type=str, help="Write results to this JSON file")
    args = parser.parse_args()

    cmd = build_command(args.save_baseline, args.compare, args.json)
    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=Path(__file__).parent.parent)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
