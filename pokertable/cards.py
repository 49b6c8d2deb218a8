"""Playing cards and the shuffled deck dealt at the start of a round."""

from __future__ import annotations

import random
from enum import IntEnum

TOTAL_NUMBER_CARDS = 52
COMMUNITY_CARD_COUNT = 5
HOLE_CARD_COUNT = 2
SHUFFLE_COUNT = 10000


class Suit(IntEnum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class Card(IntEnum):
    """One of the 52 cards, ordered by rank and then by suit."""

    TWO_CLUBS = 0
    TWO_DIAMONDS = 1
    TWO_HEARTS = 2
    TWO_SPADES = 3
    THREE_CLUBS = 4
    THREE_DIAMONDS = 5
    THREE_HEARTS = 6
    THREE_SPADES = 7
    FOUR_CLUBS = 8
    FOUR_DIAMONDS = 9
    FOUR_HEARTS = 10
    FOUR_SPADES = 11
    FIVE_CLUBS = 12
    FIVE_DIAMONDS = 13
    FIVE_HEARTS = 14
    FIVE_SPADES = 15
    SIX_CLUBS = 16
    SIX_DIAMONDS = 17
    SIX_HEARTS = 18
    SIX_SPADES = 19
    SEVEN_CLUBS = 20
    SEVEN_DIAMONDS = 21
    SEVEN_HEARTS = 22
    SEVEN_SPADES = 23
    EIGHT_CLUBS = 24
    EIGHT_DIAMONDS = 25
    EIGHT_HEARTS = 26
    EIGHT_SPADES = 27
    NINE_CLUBS = 28
    NINE_DIAMONDS = 29
    NINE_HEARTS = 30
    NINE_SPADES = 31
    TEN_CLUBS = 32
    TEN_DIAMONDS = 33
    TEN_HEARTS = 34
    TEN_SPADES = 35
    JACK_CLUBS = 36
    JACK_DIAMONDS = 37
    JACK_HEARTS = 38
    JACK_SPADES = 39
    QUEEN_CLUBS = 40
    QUEEN_DIAMONDS = 41
    QUEEN_HEARTS = 42
    QUEEN_SPADES = 43
    KING_CLUBS = 44
    KING_DIAMONDS = 45
    KING_HEARTS = 46
    KING_SPADES = 47
    ACE_CLUBS = 48
    ACE_DIAMONDS = 49
    ACE_HEARTS = 50
    ACE_SPADES = 51

    @property
    def suit(self) -> Suit:
        return Suit(self.value % len(Suit))

    @property
    def rank(self) -> Rank:
        return Rank(self.value // len(Suit))


def shuffle_cards(rng: random.Random | None = None) -> list[Card]:
    """Return all cards shuffled by a fixed number of random pair swaps."""
    rng = rng if rng is not None else random.Random()
    cards = list(Card)
    for _ in range(SHUFFLE_COUNT):
        first = rng.randrange(TOTAL_NUMBER_CARDS)
        second = rng.randrange(TOTAL_NUMBER_CARDS)
        cards[first], cards[second] = cards[second], cards[first]
    return cards


class Deck:
    """A shuffled deck split into community cards and one hole pair per player."""

    def __init__(self, player_count: int, rng: random.Random | None = None) -> None:
        needed = COMMUNITY_CARD_COUNT + HOLE_CARD_COUNT * player_count
        if player_count < 0 or needed > TOTAL_NUMBER_CARDS:
            raise ValueError(f"cannot deal to {player_count} players")
        cards = shuffle_cards(rng)
        self.community_cards: tuple[Card, ...] = tuple(cards[:COMMUNITY_CARD_COUNT])
        rest = iter(cards[COMMUNITY_CARD_COUNT:needed])
        self.hole_cards: list[tuple[Card, Card]] = list(zip(rest, rest))

    def flop(self) -> tuple[Card, ...]:
        """The first three community cards."""
        return self.community_cards[:3]

    def turn(self) -> tuple[Card, ...]:
        """The first four community cards."""
        return self.community_cards[:4]

    def river(self) -> tuple[Card, ...]:
        """All five community cards."""
        return self.community_cards[:5]