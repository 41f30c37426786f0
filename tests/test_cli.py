import io

import pytest

from contestkit.arrays import bar_queue_entries, min_max_deletion
from contestkit.cli import main, solve_text


def test_ipl_thala():
    assert solve_text("ipl", "7\n") == "THALA\n"


def test_ipl_boom():
    assert solve_text("ipl", "6") == "BOOM\n"


def test_bar_queue_matches_library_function():
    text = "3\n3\nBBB\n4\nGBBG\n5\nGGBBB\n"
    expected = [bar_queue_entries("BBB"), bar_queue_entries("GBBG"), bar_queue_entries("GGBBB")]
    assert solve_text("bar-queue", text).splitlines() == [str(v) for v in expected]


def test_bar_queue_characters_may_be_separated():
    joined = solve_text("bar-queue", "1\n4\nGBBB\n")
    spaced = solve_text("bar-queue", "1\n4\nG B B B\n")
    assert joined == spaced


def test_bar_queue_one_line_per_case():
    out = solve_text("bar-queue", "2\n2\nGG\n1\nB\n")
    assert len(out.splitlines()) == 2


def test_min_max_deletion_matches_library_function():
    text = "1\n4 3\n1 5 2 3\n1 2\n0 9\n3 -4\n"
    expected = min_max_deletion([1, 5, 2, 3], [(1, 2), (0, 9), (3, -4)])
    assert solve_text("min-max-deletion", text).splitlines() == [str(v) for v in expected]


def test_min_max_deletion_multiple_cases_concatenate():
    first = "1\n2 1\n3 4\n0 7\n"
    second = "1\n3 2\n1 1 1\n2 0\n1 5\n"
    both = "2\n2 1\n3 4\n0 7\n3 2\n1 1 1\n2 0\n1 5\n"
    assert solve_text("min-max-deletion", both) == (
        solve_text("min-max-deletion", first) + solve_text("min-max-deletion", second)
    )


def test_min_max_deletion_bad_index():
    with pytest.raises(IndexError):
        solve_text("min-max-deletion", "1\n2 1\n1 2\n5 3\n")


def test_unknown_problem():
    with pytest.raises(ValueError):
        solve_text("nope", "1")


def test_truncated_input():
    with pytest.raises(ValueError):
        solve_text("bar-queue", "2\n3\nBB")


def test_non_integer_input():
    with pytest.raises(ValueError):
        solve_text("ipl", "seven")


def test_empty_input():
    with pytest.raises(ValueError):
        solve_text("ipl", "")


def test_main_prints_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n"))
    assert main(["ipl"]) == 0
    assert capsys.readouterr().out == "THALA\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["ipl"]) == 1
    assert "end of input" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit) as info:
        main(["nope"])
    assert info.value.code == 2