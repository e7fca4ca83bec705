"""
Quick scan benchmark (latency & p95).

Examples:
    python -m tools.bench_scan ./data.csv --query paris --n 20
    python -m tools.bench_scan --generate 500000 --page 3
"""

from __future__ import annotations

import argparse
import csv
import statistics
import tempfile
import time
from pathlib import Path
from typing import List, Optional

from csvsearch.scan import scan
from csvsearch.sources import open_source


_CITIES = ["Paris", "Lyon", "Berlin", "Madrid", "Rome", "Lisbon", "Oslo"]


def generate(path: Path, rows: int) -> Path:
    with path.open("w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(["Name", "City", "Amount"])
        for i in range(rows):
            w.writerow([f"user{i}", _CITIES[i % len(_CITIES)], str(i * 7 % 1000)])
    return path


def bench(path: Path, query: str, page: int, page_size: int, n: int) -> None:
    latencies: List[float] = []
    total = 0
    for i in range(n):
        t0 = time.perf_counter()
        res = scan(open_source(path), query, page, page_size)
        dt = time.perf_counter() - t0
        latencies.append(dt)
        total = res.total_matches
        print(f"{i+1:>3}/{n}: {dt*1000:.1f} ms  (matches={res.total_matches}, count_only={res.stats.count_only})")

    mean = statistics.mean(latencies)
    p95 = statistics.quantiles(latencies, n=20)[18] if len(latencies) >= 20 else max(latencies)
    print(f"\nMean: {mean*1000:.1f} ms   p95: {p95*1000:.1f} ms   (n={n}, matches={total})")


def main(argv: Optional[list] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("path", nargs="?", help="CSV file to scan")
    ap.add_argument("--generate", type=int, default=0, help="Generate a synthetic CSV with this many rows")
    ap.add_argument("--query", type=str, default="", help="Search text")
    ap.add_argument("--page", type=int, default=1, help="Page number")
    ap.add_argument("--page-size", type=int, default=1000, help="Records per page")
    ap.add_argument("--n", type=int, default=10, help="Number of runs")
    args = ap.parse_args(argv)

    if args.generate > 0:
        with tempfile.TemporaryDirectory() as td:
            p = generate(Path(td) / "bench.csv", int(args.generate))
            bench(p, args.query, max(1, args.page), args.page_size, int(args.n))
        return 0

    if not args.path:
        print("No file given (pass a path or --generate N).")
        return 2
    bench(Path(args.path), args.query, max(1, args.page), args.page_size, int(args.n))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
