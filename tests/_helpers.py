from __future__ import annotations

from bus_model import Bus


def product(xs: list[int]) -> int:
    out = 1
    for x in xs:
        out *= x
    return out


def collect_primes(k: int, *, start: int = 2) -> list[int]:
    """First k primes >= start (trial division, fine for test-sized periods)."""
    out: list[int] = []
    n = max(2, start)
    while len(out) < k:
        if all(n % d for d in range(2, int(n**0.5) + 1)):
            out.append(n)
        n += 1
    return out


def buses_from_periods(periods: list[int]) -> tuple[Bus, ...]:
    """Consecutive slots, no inactive gaps: offset = position."""
    return tuple(Bus(period=p, offset=i) for i, p in enumerate(periods))


def brute_force_alignment(buses: tuple[Bus, ...], upper: int) -> int | None:
    """Smallest T in [0, upper) aligning every bus, by plain scan."""
    for t in range(upper):
        if all(b.departs_at(t) for b in buses):
            return t
    return None
