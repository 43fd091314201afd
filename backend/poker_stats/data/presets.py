from poker_stats.models import StatisticsRequest

# 20k five card hands on four workers.
DEFAULT_STATISTICS_REQUEST = StatisticsRequest()

# Named example hands with the categories they are expected to report.
EXAMPLE_HANDS = {
    "pair": ["5♣", "8♣", "8♠", "7♣", "9♦"],
    "two_pair": ["5♣", "4♦", "7♣", "7♦", "4♥"],
    "three_of_a_kind": ["5♣", "4♦", "7♣", "5♦", "5♥"],
    "straight": ["5♦", "9♠", "7♠", "8♦", "6♥"],
    "flush": ["5♣", "9♣", "8♣", "7♣", "2♣"],
    "full_house": ["4♦", "5♦", "5♣", "4♣", "5♥"],
    "straight_flush": ["9♥", "7♥", "8♥", "T♥", "J♥"],
    # Seven cards: hearts flush plus an unrelated mixed-suit straight.
    "straight_flush_false_positive": ["5♥", "6♥", "7♥", "8♣", "9♦", "Q♥", "K♥"],
}
