import random

import pytest

from interviewkit.cards import Card, Dealer, Deck, Player, Rank, Suit, create_card


def test_first_card_is_ace_of_clubs():
    assert create_card(0) == Card(Suit.CLUB, Rank.ACE)


def test_last_card_is_king_of_spades():
    assert create_card(51) == Card(Suit.SPADE, Rank.KING)


@pytest.mark.parametrize("num", [52, -1])
def test_create_card_out_of_range(num):
    with pytest.raises(ValueError):
        create_card(num)


def test_full_deck_distinct_cards():
    deck = Deck(52)
    assert len(deck) == 52
    assert len(set(deck)) == 52


def test_new_deck_is_sorted():
    cards = list(Deck(52))
    assert cards == sorted(cards)


def test_card_order_by_suit_then_rank():
    assert Card(Suit.CLUB, Rank.KING) < Card(Suit.DIAMOND, Rank.ACE)
    assert Card(Suit.HEART, Rank.TWO) < Card(Suit.HEART, Rank.THREE)


def test_shuffle_then_sort_restores_order():
    deck = Deck(52)
    original = list(deck)
    deck.shuffle(random.Random(1))
    assert sorted(deck) == original
    deck.sort()
    assert list(deck) == original


def test_draw_takes_top_card():
    deck = Deck(10)
    top = list(deck)[-1]
    assert deck.draw() == top
    assert len(deck) == 9


def test_add_card_goes_on_top():
    deck = Deck()
    card = Card(Suit.HEART, Rank.QUEEN)
    deck.add_card(card)
    assert deck.draw() == card


def test_draw_empty_deck():
    with pytest.raises(IndexError):
        Deck().draw()


def test_dealer_deals_whole_deck():
    players = [Player(name) for name in ("Ann", "Bob", "Cy", "Di")]
    dealer = Dealer(52, random.Random(3))
    dealer.deal(players, 13)
    assert len(dealer.deck) == 0
    assert all(len(player.hand) == 13 for player in players)
    dealt = [card for player in players for card in player.hand]
    assert sorted(dealt) == list(Deck(52))


def test_dealer_runs_out():
    dealer = Dealer(5, random.Random(0))
    with pytest.raises(IndexError):
        dealer.deal([Player("Ann"), Player("Bob")], 3)