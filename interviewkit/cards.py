"""A generic deck of playing cards with players and a dealer."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Optional

_RANKS_PER_SUIT = 13


class Rank(IntEnum):
    """Card ranks, ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class Suit(IntEnum):
    """Card suits."""

    CLUB = 1
    DIAMOND = 2
    HEART = 3
    SPADE = 4


@dataclass(frozen=True, order=True)
class Card:
    """A card; cards order by suit, then by rank."""

    suit: Suit
    rank: Rank


def create_card(card_num: int) -> Card:
    """The card numbered ``card_num``: 13 ranks per suit, clubs first."""
    if card_num < 0:
        raise ValueError("card number must not be negative")
    suit_num, rank_num = divmod(card_num, _RANKS_PER_SUIT)
    try:
        suit = Suit(suit_num + 1)
    except ValueError:
        raise ValueError(f"no card numbered {card_num}") from None
    return Card(suit, Rank(rank_num + 1))


class Deck:
    """A pile of cards; the last card is the top one."""

    def __init__(self, num_cards: int = 0) -> None:
        self._cards: list[Card] = [create_card(i) for i in range(num_cards)]

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the cards, drawing from ``rng`` if given."""
        (rng if rng is not None else random).shuffle(self._cards)

    def sort(self) -> None:
        """Sort the cards by suit, then rank."""
        self._cards.sort()

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise IndexError("draw from an empty deck")
        return self._cards.pop()

    def add_card(self, card: Card) -> None:
        """Put ``card`` on top."""
        self._cards.append(card)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)


class Player:
    """A player holding a hand of cards."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.hand = Deck()

    def add_card(self, card: Card) -> None:
        """Take ``card`` into the hand."""
        self.hand.add_card(card)


class Dealer:
    """Deals from a freshly shuffled deck."""

    def __init__(self, deck_size: int, rng: Optional[random.Random] = None) -> None:
        self.deck = Deck(deck_size)
        self.deck.shuffle(rng)

    def deal(self, players: Iterable[Player], num_cards: int) -> None:
        """Give each player ``num_cards`` cards from the top, one player at a time."""
        for player in players:
            for _ in range(num_cards):
                player.add_card(self.deck.draw())