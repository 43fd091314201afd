import logging

import pytest

from poker_stats.cli import main
from poker_stats.config import settings
from poker_stats.display import format_aggregate, format_score, format_stats
from poker_stats.engine.cards import Deck
from poker_stats.engine.scoring import AggregateScore, HandScore, HandStats
from poker_stats.logging_config import logger


@pytest.fixture(autouse=True)
def detach_log_handlers():
    # main() binds a handler to the captured stderr of the running test.
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_format_stats_skips_empty_bins():
    hand = Deck().draw_hand(["5♣", "T♣", "8♠", "7♣", "9♦"])
    text = format_stats(HandStats.from_hand(hand))
    assert text.splitlines() == [
        "HandStats:",
        "  Count: 5",
        "  Suits: [♣]: 3, [♦]: 1, [♠]: 1",
        "  Ranks: [5]: 1, [7]: 1, [8]: 1, [9]: 1, [T]: 1",
        "  Flush: False",
    ]


def test_format_score():
    lines = format_score(HandScore(pair=True)).splitlines()
    assert lines[0] == "HandScore:"
    assert lines[1] == "  high_card         yes"
    assert lines[2] == "  pair              yes"
    assert lines[3] == "  two_pair          -"


def test_format_aggregate_percentages():
    lines = format_aggregate(AggregateScore(high_card=200, pair=100, flush=1)).splitlines()
    assert lines[0] == "AggregateScore (200 samples):"
    assert lines[1] == "  high_card         200 (100.000%)"
    assert lines[2] == "  pair              100 ( 50.000%)"
    assert lines[6] == "  flush             1   (  0.500%)"


def test_format_aggregate_without_samples():
    assert "(  0.000%)" in format_aggregate(AggregateScore())


def test_cli_sorted_deck(capsys):
    assert main(["sorted-deck"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Sorted Deck:"
    assert lines[1] == "  A♣    A♦    A♥    A♠"
    assert len(lines) == 14


def test_cli_draw_hand(capsys):
    assert main(["draw-hand", "7", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Hand: ")
    assert len(out.splitlines()[0].split(", ")) == 7
    assert "HandStats:" in out
    assert "  Count: 7" in out
    assert "HandScore:" in out


def test_cli_statistics(capsys):
    assert main(["statistics", "5", "1000", "--threads", "4", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "AggregateScore (1000 samples):" in out
    assert "  high_card         1000 (100.000%)" in out


def test_cli_rejects_invalid_hand_size(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["draw-hand", "6"])
    assert exc.value.code == 2
    assert "Invalid number. Enter either 5 or 7" in capsys.readouterr().err


def test_cli_rejects_negative_seed(capsys):
    for argv in (["draw-hand", "5", "--seed", "-1"], ["statistics", "5", "100", "--seed", "-1"]):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2
        assert "seed must be non-negative" in capsys.readouterr().err


def test_cli_statistics_logs_worker_cap(capsys, caplog, monkeypatch):
    monkeypatch.setattr(settings, "max_workers", 2)
    with caplog.at_level(logging.INFO, logger="poker_stats"):
        assert main(["--log-level", "INFO", "statistics", "5", "200", "--threads", "16", "--seed", "4"]) == 0
    assert "Requested 16 workers, capped at 2" in caplog.text
    assert "AggregateScore (200 samples):" in capsys.readouterr().out
