import numpy as np

from poker_stats.engine.cards import NUM_CARDS, Card, Deck, Hand, cards_are_unique, draw_hand, sorted_deck


def test_card_rank_and_suit_decomposition():
    for card_id in range(NUM_CARDS):
        card = Card(card_id)
        assert card.rank == card_id // 4
        assert card.suit == card_id % 4
        assert Card.new(card.rank, card.suit) == card


def test_card_display_names():
    assert str(Card.new(0, 0)) == "A♣"
    assert str(Card.new(9, 2)) == "T♥"
    assert str(Card.new(12, 3)) == "K♠"
    assert str(Card.new(4, 1)) == "5♦"


def test_cards_compare_by_id():
    assert Card(17) == Card(17)
    assert len({Card(3), Card(3), Card(4)}) == 2


def test_unique_cards_in_randomly_drawn_hands():
    rng = np.random.default_rng(15234202)
    for _ in range(2000):
        for hand_size in range(1, 8):
            hand = draw_hand(hand_size, rng)
            assert len(hand) == hand_size
            assert cards_are_unique(hand)
            assert all(0 <= card.id < NUM_CARDS for card in hand)


def test_draw_hand_is_reproducible_with_seed():
    first = draw_hand(7, np.random.default_rng(99))
    second = draw_hand(7, np.random.default_rng(99))
    assert first == second


def test_draw_hand_covers_whole_deck():
    rng = np.random.default_rng(7)
    seen = set()
    for _ in range(500):
        seen.update(card.id for card in draw_hand(7, rng))
    assert seen == set(range(NUM_CARDS))


def test_large_hand_still_distinct():
    hand = draw_hand(20, np.random.default_rng(3))
    assert cards_are_unique(hand)


def test_cards_are_unique_detects_duplicates():
    assert not cards_are_unique(Hand((Card(1), Card(2), Card(1))))


def test_draw_card_by_name():
    deck = Deck()
    assert len(deck) == NUM_CARDS
    for name in ["A♦", "5♥", "Q♠", "2♣", "T♥"]:
        assert str(deck.draw_card(name)) == name
    assert deck.draw_card("10♥") is None
    assert deck.draw_card("Z♣") is None


def test_draw_hand_by_names():
    deck = Deck()
    hand = deck.draw_hand(["9♥", "7♥", "8♥", "T♥", "J♥"])
    assert hand is not None
    assert hand.names() == ["9♥", "7♥", "8♥", "T♥", "J♥"]
    assert str(hand) == "Hand: 9♥, 7♥, 8♥, T♥, J♥"
    assert deck.draw_hand(["9♥", "nope"]) is None


def test_sorted_deck_order():
    cards = sorted_deck()
    assert len(cards) == NUM_CARDS
    assert [str(c) for c in cards[:5]] == ["A♣", "A♦", "A♥", "A♠", "2♣"]
    assert str(cards[-1]) == "K♠"
