"""Tests for the CLI application."""

import json

import pytest

from prisoners.cli.app import build_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_positional_arguments(self):
        args = build_parser().parse_args(["10", "cheat", "tit-for-tat"])
        assert args.rounds == 10
        assert args.strategy_a == "cheat"
        assert args.strategy_b == "tit-for-tat"
        assert args.seed is None
        assert not args.json

    def test_payoff_overrides(self):
        args = build_parser().parse_args(["1", "a", "b", "--partner", "4", "--backstabber", "6"])
        assert args.partner == 4
        assert args.backstabber == 6
        assert args.sucker is None


class TestMain:
    """Tests for main()."""

    def test_plays_match(self, capsys):
        assert main(["2", "cheat", "tit-for-tat"]) == 0
        out = capsys.readouterr().out
        assert "Cheat: 6 points" in out
        assert "Tit For Tat: 1 points" in out
        assert "cheat wins!" in out

    def test_running_score_table(self, capsys):
        main(["2", "cheat", "tit-for-tat"])
        lines = capsys.readouterr().out.splitlines()
        rows = [line.split() for line in lines if line.strip()[:1].isdigit()]
        assert rows == [["1", "D", "5", "C", "0"], ["2", "D", "6", "D", "1"]]

    def test_json_output(self, capsys):
        assert main(["1", "sucker", "sucker", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["a"]["total"] == 3
        assert data["b"]["total"] == 3
        assert data["winner"] == "tie!"

    def test_seeded_random_is_reproducible(self, capsys):
        main(["15", "random", "pavlov", "--seed", "9", "--json"])
        first = capsys.readouterr().out
        main(["15", "random", "pavlov", "--seed", "9", "--json"])
        assert capsys.readouterr().out == first

    def test_payoff_override(self, capsys):
        main(["1", "sucker", "sucker", "--partner", "4", "--backstabber", "6", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["payoffs"]["partner"] == 4
        assert data["a"]["total"] == 4

    def test_list_strategies(self, capsys):
        assert main(["--list"]) == 0
        out = capsys.readouterr().out.split()
        assert "tit-for-tat" in out
        assert "pavlov" in out

    @pytest.mark.parametrize(
        "argv,message",
        [
            (["3", "sucker", "nash"], "Unknown strategy"),
            (["-1", "sucker", "cheat"], "non-negative"),
            (["1", "sucker", "cheat", "--partner", "0"], "backstabber > partner"),
        ],
    )
    def test_errors_exit_2(self, capsys, argv, message):
        assert main(argv) == 2
        assert message in capsys.readouterr().err

    def test_invalid_environment_payoff_exit_2(self, capsys, monkeypatch):
        monkeypatch.setenv("PRISONERS_PAYOFF_SUCKER", "zero")
        assert main(["1", "sucker", "cheat"]) == 2
        assert "error: PRISONERS_PAYOFF_SUCKER must be an integer" in capsys.readouterr().err

    def test_missing_arguments(self, capsys):
        assert main(["3"]) == 2
        assert "required" in capsys.readouterr().err
