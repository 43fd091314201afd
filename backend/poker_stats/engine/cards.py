from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

NUM_CARDS = 52
NUM_RANKS = 13
NUM_SUITS = 4

RANK_NAMES = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K"]
SUIT_NAMES = ["♣", "♦", "♥", "♠"]


def rank_to_string(rank: int) -> str:
    return RANK_NAMES[rank]


def suit_to_string(suit: int) -> str:
    if 0 <= suit < NUM_SUITS:
        return SUIT_NAMES[suit]
    return "?"


@dataclass(frozen=True)
class Card:
    id: int

    @classmethod
    def new(cls, rank: int, suit: int) -> "Card":
        return cls(rank * NUM_SUITS + suit)

    @property
    def rank(self) -> int:
        """Ace, two, ..., king as 0..12."""
        return self.id // NUM_SUITS

    @property
    def suit(self) -> int:
        """Clubs, diamonds, hearts, spades as 0..3."""
        return self.id % NUM_SUITS

    def __str__(self) -> str:
        return f"{rank_to_string(self.rank)}{suit_to_string(self.suit)}"


@dataclass(frozen=True)
class Hand:
    cards: Tuple[Card, ...]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def names(self) -> List[str]:
        return [str(card) for card in self.cards]

    def __str__(self) -> str:
        return "Hand: " + ", ".join(self.names())


def cards_are_unique(hand: Hand) -> bool:
    return len({card.id for card in hand.cards}) == len(hand.cards)


def _first_duplicate(ids: List[int], start_index: int) -> Optional[int]:
    for i in range(start_index, len(ids)):
        for j in range(i):
            if ids[i] == ids[j]:
                return i
    return None


def draw_hand(hand_size: int, rng: Optional[np.random.Generator] = None) -> Hand:
    """
    Sample ``hand_size`` distinct cards uniformly from the deck.

    Cards are first drawn with replacement, then each duplicate slot is redrawn
    in place. The scan resumes at the slot that was just replaced, so earlier
    slots are never rechecked. Efficient for small hands; as hand_size
    approaches NUM_CARDS this becomes very slow and it never terminates for
    hand_size > NUM_CARDS.
    """
    if rng is None:
        rng = np.random.default_rng()
    ids = [int(card_id) for card_id in rng.integers(0, NUM_CARDS, size=hand_size)]
    start_index = 1
    while True:
        i = _first_duplicate(ids, start_index)
        if i is None:
            break
        ids[i] = int(rng.integers(0, NUM_CARDS))
        start_index = i
    return Hand(tuple(Card(card_id) for card_id in ids))


def sorted_deck() -> List[Card]:
    return [Card(card_id) for card_id in range(NUM_CARDS)]


class Deck:
    """Lookup of every card in a standard deck by its display name, e.g. "T♥"."""

    def __init__(self) -> None:
        self._cards_by_name: Dict[str, Card] = {}
        for rank in range(NUM_RANKS):
            for suit in range(NUM_SUITS):
                card = Card.new(rank, suit)
                self._cards_by_name[str(card)] = card

    def __len__(self) -> int:
        return len(self._cards_by_name)

    def draw_card(self, name: str) -> Optional[Card]:
        return self._cards_by_name.get(name.strip())

    def draw_hand(self, names: Sequence[str]) -> Optional[Hand]:
        cards = []
        for name in names:
            card = self.draw_card(name)
            if card is None:
                return None
            cards.append(card)
        return Hand(tuple(cards))
