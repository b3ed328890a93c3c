#!/usr/bin/env python3
"""CLI for Shuttle Search.

Usage examples:
  - Both answers for the default input file:
      python3 cli.py

  - Another notes file, closed-form CRT for part two:
      python3 cli.py data/sample.txt --method crt

  - Stage-by-stage trace on stderr (stdout stays the two answer lines):
      python3 cli.py data/sample.txt --verbose
"""

from __future__ import annotations

import argparse
import sys

from bus_model import Notes, StageResult
from bus_notes import NotesError, load_notes
from shuttle_search import (
    DEFAULT_INPUT_PATH,
    DEFAULT_METHOD,
    METHODS,
    NoSolutionFound,
    aligned_departure_crt,
    part_one,
    staged_search,
)


def resolve_search_options(
    *,
    method: str | None,
    max_candidates: int | None,
) -> tuple[str, int | None]:
    """Resolve defaults + overrides.

    Returns: (method_effective, max_candidates)
    """
    method_eff = DEFAULT_METHOD if method is None else method
    if method_eff not in METHODS:
        raise ValueError(f"Unknown method: {method_eff!r}")

    if max_candidates is not None:
        max_candidates = int(max_candidates)
        if max_candidates <= 0:
            raise ValueError("max_candidates deve essere positivo")
        if method_eff != "sieve":
            raise ValueError("--max-candidates vale solo per method=sieve")

    return method_eff, max_candidates


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Shuttle Search — earliest bus + staged CRT alignment.")
    ap.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"Notes file: timestamp line + bus list line (default {DEFAULT_INPUT_PATH}).",
    )
    ap.add_argument(
        "--method",
        choices=list(METHODS),
        default=DEFAULT_METHOD,
        help="Part two solver: sieve (staged search, default) or crt (closed-form fold).",
    )
    ap.add_argument(
        "--max-candidates",
        type=int,
        default=None,
        help="Override: cap on candidates scanned per sieve stage (default: the stage's period).",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print notes summary and one line per sieve stage on stderr.",
    )
    return ap


def _print_notes_summary(notes: Notes) -> None:
    periods = notes.periods()
    print(
        f"[notes] timestamp={notes.timestamp}  buses={len(periods)}  periods={','.join(map(str, periods))}",
        file=sys.stderr,
    )


def _print_stage(stage: StageResult) -> None:
    print(
        f"[stage] k={stage.index}  period={stage.period}  offset={stage.offset}  "
        f"T={stage.candidate}  scanned={stage.scanned}  step_bits={stage.step.bit_length()}",
        file=sys.stderr,
    )


def _solve(notes: Notes, *, method: str, max_candidates: int | None, verbose: bool) -> tuple[int, int]:
    answer_one = part_one(notes.timestamp, notes.buses)

    if method == "crt":
        return answer_one, aligned_departure_crt(notes.buses)

    stages = staged_search(notes.buses, max_candidates=max_candidates)
    if verbose:
        for stage in stages:
            _print_stage(stage)
    answer_two = stages[-1].candidate if stages else 0
    return answer_one, answer_two


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    try:
        method, max_candidates = resolve_search_options(
            method=args.method,
            max_candidates=args.max_candidates,
        )
    except ValueError as e:
        ap.error(str(e))

    try:
        notes = load_notes(args.input)
        if args.verbose:
            _print_notes_summary(notes)
        answer_one, answer_two = _solve(
            notes,
            method=method,
            max_candidates=max_candidates,
            verbose=args.verbose,
        )
    except (OSError, NotesError, NoSolutionFound, ValueError) as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    print(f"part one answer is {answer_one}")
    print(f"part two answer is {answer_two}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
