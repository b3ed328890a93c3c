#!/usr/bin/env python3
"""Shuttle Search benchmark: staged sieve vs closed-form CRT.

This script measures, on synthetic schedules with pairwise coprime (prime)
periods and random inactive gaps:
  - Time: staged_search (sieve) and aligned_departure_crt (crt)
  - Work: candidates scanned by the sieve across all stages
  - Size: bit length of the product of periods

Examples:
  python3 tools/bench_search.py --buses 9 --min-p 13 --max-p 1000
  python3 tools/bench_search.py --notes data/sample.txt --runs 20

Notes:
  - Every schedule is checked: both solvers must return the same T.
  - With --notes the given file is benchmarked instead of a synthetic one.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from bus_model import Bus  # noqa: E402
from bus_notes import INACTIVE_SLOT, load_notes, parse_buses  # noqa: E402
from shuttle_search import aligned_departure_crt, staged_search  # noqa: E402


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


def _random_schedule(rng: random.Random, buses: int, min_p: int, max_p: int, gap: float) -> str:
    pool = [p for p in range(min_p, max_p + 1) if _is_prime(p)]
    if len(pool) < buses:
        raise ValueError(f"only {len(pool)} primes in [{min_p}..{max_p}], need {buses}")
    periods = rng.sample(pool, buses)

    slots: list[str] = []
    for p in periods:
        while slots and rng.random() < gap:
            slots.append(INACTIVE_SLOT)
        slots.append(str(p))
    return ",".join(slots)


def _run_min_avg(fn, runs: int) -> tuple[float, float]:
    times: list[float] = []
    for _ in range(runs):
        t0 = time.perf_counter()
        fn()
        times.append(time.perf_counter() - t0)
    return (min(times), sum(times) / len(times))


def _md_table_row(cols: list[object]) -> str:
    return "| " + " | ".join(str(c) for c in cols) + " |"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark staged sieve vs closed-form CRT.")
    ap.add_argument("--notes", default=None, help="Notes file to benchmark (skips generation).")
    ap.add_argument("--buses", type=int, default=9, help="Active buses in the synthetic schedule.")
    ap.add_argument("--min-p", type=int, default=13, help="Smallest prime period.")
    ap.add_argument("--max-p", type=int, default=1000, help="Largest prime period.")
    ap.add_argument("--gap", type=float, default=0.6, help="Probability of another 'x' before a bus.")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for the synthetic schedule.")
    ap.add_argument("--runs", type=int, default=5, help="Repetitions per solver.")
    args = ap.parse_args(argv)

    if args.runs <= 0:
        raise ValueError("runs must be > 0")

    if args.notes:
        buses: tuple[Bus, ...] = load_notes(args.notes).buses
        source = args.notes
    else:
        line = _random_schedule(random.Random(args.seed), args.buses, args.min_p, args.max_p, args.gap)
        buses = parse_buses(line)
        source = f"synthetic seed={args.seed}"
        print(f"[bench] schedule: {line}")

    stages = staged_search(buses)
    t_sieve = stages[-1].candidate if stages else 0
    t_crt = aligned_departure_crt(buses)
    if t_sieve != t_crt:
        raise RuntimeError(f"solver mismatch: sieve={t_sieve} crt={t_crt}")

    scanned = sum(s.scanned for s in stages)
    step_bits = stages[-1].step.bit_length() if stages else 0

    sieve_min, sieve_avg = _run_min_avg(lambda: staged_search(buses), args.runs)
    crt_min, crt_avg = _run_min_avg(lambda: aligned_departure_crt(buses), args.runs)

    lines: list[str] = []
    lines.append("# Shuttle Search benchmark")
    lines.append("")
    lines.append(f"- source: {source}")
    lines.append(f"- buses: {len(buses)}  product_bits: {step_bits}  T: {t_sieve}")
    lines.append(f"- sieve candidates scanned: {scanned}")
    lines.append("")
    lines.append("| Solver | min (s) | avg (s) |")
    lines.append("|---|---:|---:|")
    lines.append(_md_table_row(["sieve", f"{sieve_min:.6f}", f"{sieve_avg:.6f}"]))
    lines.append(_md_table_row(["crt", f"{crt_min:.6f}", f"{crt_avg:.6f}"]))
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
