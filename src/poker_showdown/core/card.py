"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import List


class Suit(Enum):
    """Card suits. Suits never break ties; the order here is only for listing."""
    DIAMONDS = 'd'
    CLUBS = 'c'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value


@total_ordering
class Rank(Enum):
    """Card ranks, Two lowest through Ace highest."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order < other.order

    @property
    def order(self) -> int:
        """Position of the rank, 0 for Two up to 12 for Ace."""
        return RANK_ORDER[self]

    @property
    def full_name(self) -> str:
        """English name, e.g. 'King'."""
        return RANK_NAMES[self]

    @property
    def plural_name(self) -> str:
        """English plural, e.g. 'Kings' or 'Sixes'."""
        name = RANK_NAMES[self]
        return f"{name}es" if name.endswith('x') else f"{name}s"


RANK_ORDER = {rank: index for index, rank in enumerate(Rank)}

RANK_NAMES = {
    Rank.TWO: 'Two',
    Rank.THREE: 'Three',
    Rank.FOUR: 'Four',
    Rank.FIVE: 'Five',
    Rank.SIX: 'Six',
    Rank.SEVEN: 'Seven',
    Rank.EIGHT: 'Eight',
    Rank.NINE: 'Nine',
    Rank.TEN: 'Ten',
    Rank.JACK: 'Jack',
    Rank.QUEEN: 'Queen',
    Rank.KING: 'King',
    Rank.ACE: 'Ace',
}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Equality and hashing use both rank and suit, so a card is only equal to
    the same physical card. The ordering operators look at rank only: a Two
    of Diamonds is neither stronger nor weaker than a Two of Hearts.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (diamonds, clubs, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def compare(self, other: 'Card') -> int:
        """Compare by rank only: -1, 0 or 1."""
        if self.rank < other.rank:
            return -1
        if self.rank > other.rank:
            return 1
        return 0

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = next(r for r in Rank if r.value == rank_str.upper())
            suit = next(s for s in Suit if s.value == suit_str.lower())
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)


def cards_from_string(cards_str: str) -> List[Card]:
    """
    Parse a run of cards such as "AsAhJs9s5s".

    Whitespace between cards is ignored.

    Raises:
        ValueError: If the string format is invalid
    """
    compact = ''.join(cards_str.split())
    if len(compact) % 2 != 0:
        raise ValueError(f"Invalid cards string length: {cards_str} (must be multiple of 2)")

    cards = []
    for i in range(0, len(compact), 2):
        try:
            cards.append(Card.from_string(compact[i:i + 2]))
        except ValueError as e:
            raise ValueError(f"Invalid card at position {i // 2 + 1} in '{cards_str}': {e}")
    return cards
