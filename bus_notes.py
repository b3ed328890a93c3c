"""Text backend for Shuttle Search notes.

File format:
  - Line 1: departure timestamp, base-10 non-negative integer.
  - Line 2: comma-separated slots, each a positive bus id or 'x' (inactive).
  - Further lines are ignored.

Inactive slots produce no Bus but still consume a position, so offsets stay
aligned with the original list.
"""

from __future__ import annotations

from bus_model import Bus, Notes

INACTIVE_SLOT = "x"


class NotesError(ValueError):
    pass


def _parse_timestamp(line: str) -> int:
    raw = line.strip()
    try:
        ts = int(raw)
    except ValueError:
        raise NotesError(f"Timestamp non numerico: {raw!r}") from None
    if ts < 0:
        raise NotesError(f"Timestamp negativo: {ts}")
    return ts


def _parse_slot(tok: str) -> int | None:
    """Bus id for a slot token, None for inactive/unparseable slots."""
    tok = tok.strip()
    if tok == INACTIVE_SLOT:
        return None
    try:
        d = int(tok)
    except ValueError:
        return None
    if d <= 0:
        return None
    return d


def parse_buses(line: str) -> tuple[Bus, ...]:
    buses: list[Bus] = []
    for i, tok in enumerate(line.split(",")):
        d = _parse_slot(tok)
        if d is None:
            continue
        buses.append(Bus(period=d, offset=i))
    return tuple(buses)


def parse_notes(text: str) -> Notes:
    """Parse the two-line notes text into a Notes record."""
    lines = text.splitlines()
    if len(lines) < 1 or not lines[0].strip():
        raise NotesError("Manca la riga del timestamp")
    if len(lines) < 2:
        raise NotesError("Manca la riga dei bus")

    timestamp = _parse_timestamp(lines[0])
    buses = parse_buses(lines[1])
    return Notes(timestamp=timestamp, buses=buses)


def load_notes(path: str) -> Notes:
    with open(path, "r", encoding="utf-8") as f:
        return parse_notes(f.read())


__all__ = ["INACTIVE_SLOT", "NotesError", "load_notes", "parse_buses", "parse_notes"]
