from dataclasses import dataclass, field, fields
from typing import Dict, List, Union

from poker_stats.engine.cards import NUM_RANKS, NUM_SUITS, Hand

CATEGORIES = (
    "high_card",
    "pair",
    "two_pair",
    "three_of_a_kind",
    "straight",
    "flush",
    "full_house",
    "four_of_a_kind",
    "straight_flush",
)


@dataclass
class HandStats:
    rank_count: List[int] = field(default_factory=lambda: [0] * NUM_RANKS)
    suit_count: List[int] = field(default_factory=lambda: [0] * NUM_SUITS)

    @classmethod
    def from_hand(cls, hand: Hand) -> "HandStats":
        stats = cls()
        for card in hand.cards:
            stats.rank_count[card.rank] += 1
            stats.suit_count[card.suit] += 1
        return stats

    def count_cards(self) -> int:
        return sum(self.suit_count)

    def is_flush(self) -> bool:
        return any(count >= 5 for count in self.suit_count)


def is_straight(stats: HandStats) -> bool:
    """
    Scan ranks ace-low through king. Works for both five and seven card hands,
    but a gap after the first present rank ends the scan, so a seven card hand
    only counts when its lowest ranks begin the run.
    """
    cards_in_straight = 0
    for count in stats.rank_count:
        if count > 0:
            cards_in_straight += 1
        elif cards_in_straight > 0:
            return False
        if cards_in_straight >= 5:
            return True
    return cards_in_straight >= 5


@dataclass(frozen=True)
class HandScore:
    high_card: bool = True
    pair: bool = False
    two_pair: bool = False
    three_of_a_kind: bool = False
    straight: bool = False
    flush: bool = False
    full_house: bool = False
    four_of_a_kind: bool = False
    straight_flush: bool = False

    def as_dict(self) -> Dict[str, bool]:
        return {name: getattr(self, name) for name in CATEGORIES}


def classify(hand_or_stats: Union[Hand, HandStats]) -> HandScore:
    if isinstance(hand_or_stats, HandStats):
        stats = hand_or_stats
    else:
        stats = HandStats.from_hand(hand_or_stats)

    pair = two_pair = three_of_a_kind = four_of_a_kind = False
    for count in stats.rank_count:
        if count == 2:
            if pair:
                two_pair = True
            else:
                pair = True
        elif count == 3:
            three_of_a_kind = True
        elif count == 4:
            four_of_a_kind = True

    # Order matters: full house is decided before trips/quads imply a pair.
    full_house = pair and three_of_a_kind
    if four_of_a_kind:
        three_of_a_kind = True
    if three_of_a_kind:
        pair = True

    straight = is_straight(stats)
    flush = stats.is_flush()
    return HandScore(
        high_card=True,
        pair=pair,
        two_pair=two_pair,
        three_of_a_kind=three_of_a_kind,
        straight=straight,
        flush=flush,
        full_house=full_house,
        four_of_a_kind=four_of_a_kind,
        # Suits are not compared, so a 7 card hand may report a false positive.
        straight_flush=straight and flush,
    )


@dataclass
class AggregateScore:
    """Running category counts over many sampled hands. high_card is the sample count."""

    high_card: int = 0
    pair: int = 0
    two_pair: int = 0
    three_of_a_kind: int = 0
    straight: int = 0
    flush: int = 0
    full_house: int = 0
    four_of_a_kind: int = 0
    straight_flush: int = 0

    @property
    def samples(self) -> int:
        return self.high_card

    def insert(self, score: HandScore) -> None:
        self.high_card += 1
        self.pair += int(score.pair)
        self.two_pair += int(score.two_pair)
        self.three_of_a_kind += int(score.three_of_a_kind)
        self.straight += int(score.straight)
        self.flush += int(score.flush)
        self.full_house += int(score.full_house)
        self.four_of_a_kind += int(score.four_of_a_kind)
        self.straight_flush += int(score.straight_flush)

    def merge(self, other: "AggregateScore") -> None:
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))

    def __add__(self, other: "AggregateScore") -> "AggregateScore":
        total = AggregateScore()
        total.merge(self)
        total.merge(other)
        return total

    def percentage(self, category: str) -> float:
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category}")
        if self.high_card == 0:
            return 0.0
        return 100.0 * getattr(self, category) / self.high_card

    def counts(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in CATEGORIES}

    def percentages(self) -> Dict[str, float]:
        return {name: self.percentage(name) for name in CATEGORIES}
