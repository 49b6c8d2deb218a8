import random

import pytest

from pokertable.cards import (
    TOTAL_NUMBER_CARDS,
    Card,
    Deck,
    Rank,
    Suit,
    shuffle_cards,
)


def test_card_count():
    cards = shuffle_cards(random.Random(0))
    assert len(cards) == TOTAL_NUMBER_CARDS
    assert len(set(cards)) == TOTAL_NUMBER_CARDS


def test_first_and_last_card():
    assert Card(0) is Card.TWO_CLUBS
    assert Card.TWO_CLUBS.suit is Suit.CLUBS
    assert Card.TWO_CLUBS.rank is Rank.TWO
    assert Card.ACE_SPADES.suit is Suit.SPADES
    assert Card.ACE_SPADES.rank is Rank.ACE


def test_every_rank_suit_pair_once():
    cards = shuffle_cards(random.Random(0))
    pairs = {(card.rank, card.suit) for card in cards}
    assert len(pairs) == TOTAL_NUMBER_CARDS
    assert all(card.name == f"{card.rank.name}_{card.suit.name}" for card in cards)


def test_shuffle_is_permutation():
    cards = shuffle_cards(random.Random(1))
    assert sorted(cards) == list(Card)


def test_shuffle_is_deterministic_with_seed():
    first = shuffle_cards(random.Random(7))
    second = shuffle_cards(random.Random(7))
    assert len(first) == TOTAL_NUMBER_CARDS
    assert first == second


def test_shuffle_changes_order():
    shuffled = shuffle_cards(random.Random(3))
    assert sorted(shuffled) == list(Card)
    moved = sum(1 for dealt, original in zip(shuffled, Card) if dealt is not original)
    assert moved > 0


def test_deck_deals_distinct_cards():
    deck = Deck(5, random.Random(2))
    assert len(deck.community_cards) == 5
    assert len(deck.hole_cards) == 5
    dealt = list(deck.community_cards) + [c for pair in deck.hole_cards for c in pair]
    assert len(set(dealt)) == len(dealt)


def test_stages_are_prefixes():
    deck = Deck(3, random.Random(4))
    assert len(deck.flop()) == 3
    assert deck.turn()[:3] == deck.flop()
    assert deck.river()[:4] == deck.turn()
    assert deck.river() == deck.community_cards


def test_deck_with_no_players():
    deck = Deck(0, random.Random(5))
    assert deck.hole_cards == []


def test_deck_maximum_players():
    deck = Deck(23, random.Random(6))
    assert len(deck.hole_cards) == 23


@pytest.mark.parametrize("count", [-1, 24, 100])
def test_deck_rejects_bad_player_count(count):
    with pytest.raises(ValueError):
        Deck(count, random.Random(0))