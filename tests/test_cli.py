from __future__ import annotations

from pathlib import Path

import pytest

import cli


def _write_notes(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_prints_exactly_two_answer_lines(tmp_path: Path, capsys):
    path = _write_notes(tmp_path, "939\n7,13,x,x,59,x,31,19\n")

    rc = cli.main([str(path)])
    assert rc == 0
    captured = capsys.readouterr()
    assert captured.out == "part one answer is 295\npart two answer is 1068781\n"
    assert captured.err == ""


def test_cli_crt_method_same_answers(tmp_path: Path, capsys):
    path = _write_notes(tmp_path, "939\n7,13,x,x,59,x,31,19\n")

    rc = cli.main([str(path), "--method", "crt"])
    assert rc == 0
    assert capsys.readouterr().out == "part one answer is 295\npart two answer is 1068781\n"


def test_cli_verbose_traces_on_stderr_only(tmp_path: Path, capsys):
    path = _write_notes(tmp_path, "939\n7,13,x,x,59,x,31,19\n")

    rc = cli.main([str(path), "--verbose"])
    assert rc == 0
    captured = capsys.readouterr()
    assert captured.out == "part one answer is 295\npart two answer is 1068781\n"
    assert "[notes] timestamp=939" in captured.err
    assert captured.err.count("[stage]") == 5


def test_cli_bad_timestamp_exits_non_zero(tmp_path: Path, capsys):
    path = _write_notes(tmp_path, "abc\n7,13\n")

    rc = cli.main([str(path)])
    assert rc == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("[error]")


def test_cli_missing_file_exits_non_zero(tmp_path: Path, capsys):
    rc = cli.main([str(tmp_path / "nope.txt")])
    assert rc == 1
    assert "[error]" in capsys.readouterr().err


def test_cli_no_solution_exits_non_zero(tmp_path: Path, capsys):
    path = _write_notes(tmp_path, "10\n4,6\n")

    rc = cli.main([str(path)])
    assert rc == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "no solution" in captured.err


def test_cli_max_candidates_rejected_with_crt(tmp_path: Path):
    path = _write_notes(tmp_path, "939\n7,13\n")
    with pytest.raises(SystemExit) as exc:
        cli.main([str(path), "--method", "crt", "--max-candidates", "10"])
    assert exc.value.code == 2


def test_resolve_defaults():
    method, max_candidates = cli.resolve_search_options(method=None, max_candidates=None)
    assert method == "sieve"
    assert max_candidates is None


def test_resolve_overrides_win():
    method, max_candidates = cli.resolve_search_options(method="sieve", max_candidates=500)
    assert method == "sieve"
    assert max_candidates == 500


def test_resolve_rejects_unknown_method_and_bad_cap():
    with pytest.raises(ValueError):
        cli.resolve_search_options(method="magic", max_candidates=None)
    with pytest.raises(ValueError):
        cli.resolve_search_options(method="sieve", max_candidates=0)
