#!/usr/bin/env python3
"""
shuttle_search.py — earliest bus + staged CRT alignment of a bus schedule.

Idea (summary):
- Each active bus is (period, offset): it departs at every multiple of period,
  and offset is its position in the list (inactive 'x' slots count too).

- Part one: from a reference timestamp, the wait for bus p is
    wait = p - (timestamp mod p)   (0 if p divides timestamp)
  and the answer is min_wait * p for the bus with the smallest wait.

- Part two: the smallest T >= 0 with (T + offset) ≡ 0 (mod period) for every
  bus. The sieve adds one bus per stage: once T satisfies buses 0..k, every
  T + j*M (M = product of periods 0..k) keeps satisfying them, so stage k+1
  only has to scan T, T+M, T+2M, ... for the new bus. With pairwise coprime
  periods a stage never needs more than period_{k+1} candidates.

- aligned_departure_crt() gets the same T with the extended-Euclid CRT fold
  (T ≡ -offset mod period); it is the cross-check for the sieve.

CLI:
  python3 shuttle_search.py input.txt
  python3 shuttle_search.py input.txt --method crt --verbose
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from bus_model import Bus, StageResult

# --- Config di default ------------------------------------------------------

DEFAULT_INPUT_PATH = "input.txt"
DEFAULT_METHOD = "sieve"
METHODS: tuple[str, ...] = ("sieve", "crt")


class NoSolutionFound(RuntimeError):
    """A CRT stage exhausted its candidates without aligning the new bus."""

    def __init__(self, stage: int, bus: Bus, scanned: int) -> None:
        super().__init__(
            f"no solution: stage {stage} (period={bus.period}, offset={bus.offset}) "
            f"not aligned after {scanned} candidates"
        )
        self.stage = stage
        self.bus = bus
        self.scanned = scanned


# --- Part one ---------------------------------------------------------------


def earliest_departure(timestamp: int, buses: Sequence[Bus]) -> tuple[Bus, int]:
    """Return (bus, wait) for the first bus leaving at or after timestamp.

    A bus leaving exactly at timestamp wins immediately with wait 0.
    Ties keep the earliest bus in input order.
    """
    best: Bus | None = None
    best_wait = 0
    for bus in buses:
        rem = timestamp % bus.period
        if rem == 0:
            return bus, 0
        wait = bus.period - rem
        if best is None or wait < best_wait:
            best, best_wait = bus, wait
    if best is None:
        raise ValueError("part one: nessun bus attivo")
    return best, best_wait


def part_one(timestamp: int, buses: Sequence[Bus]) -> int:
    bus, wait = earliest_departure(timestamp, buses)
    return wait * bus.period


# --- Sequence generator -----------------------------------------------------


class StepSequence:
    """Unbounded arithmetic sequence start, start+step, start+2*step, ...

    Stateful and not restartable: each next_value() hands out the current
    value and advances. Callers stop pulling on their own.
    """

    def __init__(self, start: int, step: int) -> None:
        if step <= 0:
            raise ValueError(f"step deve essere positivo (step={step})")
        self._next = start
        self.step = step

    def peek(self) -> int:
        return self._next

    def next_value(self) -> int:
        value = self._next
        self._next += self.step
        return value


# --- Part two: staged sieve -------------------------------------------------


def _solve_stage(
    stage: int,
    buses: Sequence[Bus],
    seq: StepSequence,
    limit: int,
) -> tuple[int, int]:
    """Pull candidates until one aligns every bus in `buses`.

    Returns (candidate, scanned). Raises NoSolutionFound after `limit` misses.
    """
    for scanned in range(1, limit + 1):
        t = seq.next_value()
        if all(b.departs_at(t) for b in buses):
            return t, scanned
    raise NoSolutionFound(stage, buses[-1], limit)


def staged_search(
    buses: Sequence[Bus],
    *,
    max_candidates: int | None = None,
) -> list[StageResult]:
    """Run the staged sieve, one StageResult per bus.

    Stage 0 scans 0, 1, 2, ... for the first bus (0 itself when its offset
    is 0); stage k scans with step = product of periods 0..k-1.
    `max_candidates` overrides the per-stage cap (default: the stage's period).
    """
    if max_candidates is not None and max_candidates <= 0:
        raise ValueError("max_candidates deve essere positivo")

    buses = list(buses)
    stages: list[StageResult] = []
    seq = StepSequence(0, 1)
    step = 1

    for k, bus in enumerate(buses):
        limit = bus.period if max_candidates is None else max_candidates
        candidate, scanned = _solve_stage(k, buses[: k + 1], seq, limit)
        step *= bus.period
        stages.append(
            StageResult(
                index=k,
                period=bus.period,
                offset=bus.offset,
                candidate=candidate,
                step=step,
                scanned=scanned,
            )
        )
        seq = StepSequence(candidate, step)

    return stages


def part_two(buses: Sequence[Bus], *, max_candidates: int | None = None) -> int:
    """Smallest T >= 0 aligning every bus; 0 for an empty list."""
    stages = staged_search(buses, max_candidates=max_candidates)
    if not stages:
        return 0
    return stages[-1].candidate


# --- Closed-form CRT --------------------------------------------------------


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended GCD: (g, x, y) with a*x + b*y = g = gcd(a, b)."""
    if b == 0:
        return (abs(a), 1 if a >= 0 else -1, 0)
    g, x1, y1 = egcd(b, a % b)
    return (g, y1, x1 - (a // b) * y1)


def modinv(a: int, m: int) -> int:
    """Modular inverse of a mod m (requires gcd(a, m) = 1)."""
    a %= m
    g, x, _ = egcd(a, m)
    if g != 1:
        raise ValueError(f"modinv: a={a} non invertibile mod {m} (gcd={g})")
    return x % m


def crt_pair(a1: int, m1: int, a2: int, m2: int) -> tuple[int, int]:
    """
    CRT for coprime moduli:
      x ≡ a1 (mod m1)
      x ≡ a2 (mod m2)
    returns (x mod m1*m2, m1*m2).
    """
    if m1 <= 0 or m2 <= 0:
        raise ValueError("CRT: moduli devono essere positivi.")
    g = math.gcd(m1, m2)
    if g != 1:
        raise ValueError(f"CRT: moduli non coprimi (gcd={g}). m1={m1}, m2={m2}")

    # a1 + m1*t ≡ a2 (mod m2)  =>  m1*t ≡ (a2-a1) (mod m2)
    t = ((a2 - a1) % m2) * modinv(m1 % m2, m2) % m2
    x = a1 + m1 * t
    return (x % (m1 * m2), m1 * m2)


def aligned_departure_crt(buses: Sequence[Bus]) -> int:
    """Part two via the CRT fold of T ≡ -offset (mod period)."""
    x, m = 0, 1
    for bus in buses:
        x, m = crt_pair(x, m, (-bus.offset) % bus.period, bus.period)
    return x


if __name__ == "__main__":
    from cli import main

    raise SystemExit(main())
