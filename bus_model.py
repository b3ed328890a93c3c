"""Shuttle Search core data model.

Only frozen dataclasses live here: the parser builds them, the solvers read
them. No file I/O and no arithmetic beyond validation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bus:
    """One active slot of the bus list.

    period: bus id, the bus departs at every multiple of it.
    offset: zero-based position among ALL slots (inactive 'x' slots included).
    """

    period: int
    offset: int

    def __post_init__(self) -> None:
        if self.period <= 0:
            raise ValueError(f"period deve essere positivo (period={self.period})")
        if self.offset < 0:
            raise ValueError(f"offset deve essere non-negativo (offset={self.offset})")

    def departs_at(self, t: int) -> bool:
        """True if (t + offset) is a departure of this bus."""
        return (t + self.offset) % self.period == 0


@dataclass(frozen=True)
class Notes:
    """Parsed puzzle notes: reference timestamp + active buses in input order."""

    timestamp: int
    buses: tuple[Bus, ...]

    def __post_init__(self) -> None:
        if self.timestamp < 0:
            raise ValueError(f"timestamp deve essere non-negativo (timestamp={self.timestamp})")

    def periods(self) -> list[int]:
        return [b.period for b in self.buses]


@dataclass(frozen=True)
class StageResult:
    """One stage of the staged CRT search.

    candidate is the first timestamp aligning buses 0..index; step is the
    increment seeded into the next stage (product of periods 0..index).
    """

    index: int
    period: int
    offset: int
    candidate: int
    step: int
    scanned: int


__all__ = ["Bus", "Notes", "StageResult"]
