import io
import sys

import pytest

from algodrills.combinations import find_ways
from algodrills.contests import (
    binary_string_winner,
    blackboard_winner,
    extreme_marks,
    main,
    mex_counts,
    tournament_verdict,
)


def _run(monkeypatch, capsys, command, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    status = main([command])
    return status, capsys.readouterr().out


@pytest.mark.parametrize(
    "k, s, expected",
    [(2, "0101", "Alice"), (1, "0101", "Bob"), (0, "000", "Alice"), (3, "1111", "Bob")],
)
def test_binary_string_winner(k, s, expected):
    assert binary_string_winner(k, s) == expected


@pytest.mark.parametrize("n, expected", [(4, "Bob"), (8, "Bob"), (5, "Alice"), (7, "Alice")])
def test_blackboard_winner(n, expected):
    assert blackboard_winner(n) == expected


def test_mex_counts_shape_and_monotone():
    values = [0, 1, 1, 2, 4, 0]
    counts = mex_counts(values)
    assert len(counts) == len(values) + 1
    assert all(a <= b for a, b in zip(counts, counts[1:]))
    assert counts[-1] <= len(values) + 1


def test_mex_counts_empty():
    assert mex_counts([]) == [1]


def test_mex_counts_rejects_out_of_range():
    with pytest.raises(ValueError):
        mex_counts([0, 5])


def test_extreme_marks_increasing():
    assert extreme_marks([1, 2, 3]) == "101"


def test_extreme_marks_decreasing_all_marked():
    values = [9, 7, 4, 2]
    assert extreme_marks(values) == "1" * len(values)


def test_extreme_marks_ends_always_marked():
    marks = extreme_marks([5, 1, 8, 3, 6, 2])
    assert len(marks) == 6
    assert marks[0] == "1" and marks[-1] == "1"


def test_extreme_marks_empty_raises():
    with pytest.raises(ValueError):
        extreme_marks([])


def test_tournament_verdict():
    strengths = [3, 7, 5]
    assert tournament_verdict(strengths, 2, 1) == "YES"
    assert tournament_verdict(strengths, 1, 1) == "NO"
    assert tournament_verdict(strengths, 1, 2) == "YES"


def test_tournament_verdict_bad_player():
    with pytest.raises(IndexError):
        tournament_verdict([1, 2], 3, 1)


def test_main_blackboard(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "blackboard", "3\n4\n5\n8\n")
    assert status == 0
    assert out == "Bob\nAlice\nBob\n"


def test_main_binary_string_battle(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "binary-string-battle", "2\n4 2\n0101\n4 1\n0101\n")
    assert status == 0
    assert out == "Alice\nBob\n"


def test_main_tournament(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "tournament", "2\n3 1 1\n3 7 5\n3 1 2\n3 7 5\n")
    assert status == 0
    assert out == "NO\nYES\n"


def test_main_mex_count_matches_function(monkeypatch, capsys):
    values = [0, 1, 1, 2, 4, 0]
    text = f"1\n{len(values)}\n{' '.join(map(str, values))}\n"
    status, out = _run(monkeypatch, capsys, "mex-count", text)
    assert status == 0
    assert out.endswith(" \n")
    assert out.split() == [str(v) for v in mex_counts(values)]


def test_main_prefix_suffix_matches_function(monkeypatch, capsys):
    values = [5, 1, 8, 3, 6, 2]
    text = f"1\n{len(values)}\n{' '.join(map(str, values))}\n"
    status, out = _run(monkeypatch, capsys, "prefix-suffix", text)
    assert status == 0
    assert out == extreme_marks(values) + "\n"


def test_main_coin_distribution(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "coin-distribution", "4\n1 2 2 3\n2\n")
    assert status == 0
    assert "Combinations of size 2 are:\n" in out
    body = out.split("Combinations of size 2 are:\n", 1)[1]
    combos = [[int(v) for v in line.split()] for line in body.splitlines()]
    assert combos == find_ways([1, 2, 2, 3], 2)


def test_main_truncated_input_fails(monkeypatch, capsys):
    status, _ = _run(monkeypatch, capsys, "blackboard", "3\n4\n")
    assert status == 1


def test_main_unknown_problem():
    with pytest.raises(SystemExit):
        main(["no-such-problem"])