"""Plain-text rendering of cards, hands and scores for the command line."""
from typing import Callable, Dict, Iterable, List

from poker_stats.engine.cards import NUM_SUITS, Card, rank_to_string, suit_to_string
from poker_stats.engine.scoring import CATEGORIES, AggregateScore, HandScore, HandStats

NAME_PAD = len("three_of_a_kind:")


def _bins(counts: List[int], label: Callable[[int], str]) -> str:
    # Empty bins are skipped.
    return ", ".join(f"[{label(i)}]: {count}" for i, count in enumerate(counts) if count > 0)


def format_stats(stats: HandStats) -> str:
    return (
        "HandStats:\n"
        f"  Count: {stats.count_cards()}\n"
        f"  Suits: {_bins(stats.suit_count, suit_to_string)}\n"
        f"  Ranks: {_bins(stats.rank_count, rank_to_string)}\n"
        f"  Flush: {stats.is_flush()}"
    )


def format_categories(values: Dict[str, object], object_name: str, value_fmt: Callable[[object], str]) -> str:
    lines = [f"{object_name}:"]
    for name in CATEGORIES:
        lines.append(f"  {name:<{NAME_PAD}}  {value_fmt(values[name])}")
    return "\n".join(lines)


def format_score(score: HandScore) -> str:
    return format_categories(score.as_dict(), "HandScore", lambda flag: "yes" if flag else "-")


def format_aggregate(scores: AggregateScore) -> str:
    pad = len(str(scores.high_card))
    percentages = scores.percentages()
    counts = scores.counts()
    lines = [f"AggregateScore ({scores.samples} samples):"]
    for name in CATEGORIES:
        lines.append(f"  {name:<{NAME_PAD}}  {counts[name]:<{pad}} ({percentages[name]:>7.3f}%)")
    return "\n".join(lines)


def format_deck(cards: Iterable[Card]) -> str:
    """One rank per line, four suits across."""
    lines = []
    row: List[str] = []
    for card in cards:
        row.append(f"  {card}")
        if len(row) == NUM_SUITS:
            lines.append("  ".join(row))
            row = []
    if row:
        lines.append("  ".join(row))
    return "\n".join(lines)
