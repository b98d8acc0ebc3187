"""Poker hand combinations and their showdown ordering."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Dict, Tuple, Type

from poker_showdown.core.card import Rank

# Straight rank stored for A-2-3-4-5. Ace never denotes Broadway, whose rank is Ten.
WHEEL_RANK = Rank.ACE


class CombinationKind(IntEnum):
    """Hand categories; the value is the category's precedence."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIRS = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9

    @property
    def display_name(self) -> str:
        return KIND_NAMES[self]


KIND_NAMES = {
    CombinationKind.HIGH_CARD: 'High Card',
    CombinationKind.PAIR: 'Pair',
    CombinationKind.TWO_PAIRS: 'Two Pair',
    CombinationKind.THREE_OF_A_KIND: 'Three of a Kind',
    CombinationKind.STRAIGHT: 'Straight',
    CombinationKind.FLUSH: 'Flush',
    CombinationKind.FULL_HOUSE: 'Full House',
    CombinationKind.FOUR_OF_A_KIND: 'Four of a Kind',
    CombinationKind.STRAIGHT_FLUSH: 'Straight Flush',
}


def _straight_strength(rank: Rank) -> int:
    """Order straights by lowest card, with the wheel below every other run."""
    return -1 if rank is WHEEL_RANK else rank.order


def _straight_high_rank(rank: Rank) -> Rank:
    if rank is WHEEL_RANK:
        return Rank.FIVE
    return list(Rank)[rank.order + 4]


def _check_straight_rank(combination) -> None:
    if combination.rank is not WHEEL_RANK and combination.rank > Rank.TEN:
        raise ValueError(f"No straight runs up from {combination.rank.full_name}")


@dataclass(frozen=True)
class Combination(ABC):
    """
    Base class for the nine hand categories.

    Combinations are compared by category first, then by the ranks each
    category carries. Every comparison operator goes through ``sort_key``,
    so sorting, grouping and ``max`` all agree.
    """

    kind: ClassVar[CombinationKind]

    @abstractmethod
    def tiebreak(self) -> Tuple[int, ...]:
        """Rank orders deciding between two combinations of the same kind."""
        pass

    def sort_key(self) -> Tuple[int, ...]:
        return (self.kind.value,) + self.tiebreak()

    @property
    def name(self) -> str:
        """Category name, e.g. 'Full House'."""
        return self.kind.display_name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.sort_key() >= other.sort_key()


@dataclass(frozen=True)
class HighCard(Combination):
    kind: ClassVar[CombinationKind] = CombinationKind.HIGH_CARD
    rank: Rank

    def tiebreak(self) -> Tuple[int, ...]:
        return (self.rank.order,)


@dataclass(frozen=True)
class Pair(Combination):
    kind: ClassVar[CombinationKind] = CombinationKind.PAIR
    rank: Rank
    kicker: Rank

    def tiebreak(self) -> Tuple[int, ...]:
        return (self.rank.order, self.kicker.order)


@dataclass(frozen=True)
class TwoPairs(Combination):
    """Two paired ranks, stored low then high, and the unpaired kicker."""
    kind: ClassVar[CombinationKind] = CombinationKind.TWO_PAIRS
    low: Rank
    high: Rank
    kicker: Rank

    def __post_init__(self):
        if self.high < self.low:
            low, high = self.high, self.low
            object.__setattr__(self, 'low', low)
            object.__setattr__(self, 'high', high)

    def tiebreak(self) -> Tuple[int, ...]:
        # the higher pair decides first
        return (self.high.order, self.low.order, self.kicker.order)


@dataclass(frozen=True)
class ThreeOfAKind(Combination):
    kind: ClassVar[CombinationKind] = CombinationKind.THREE_OF_A_KIND
    rank: Rank
    kicker: Rank

    def tiebreak(self) -> Tuple[int, ...]:
        return (self.rank.order, self.kicker.order)


@dataclass(frozen=True)
class Straight(Combination):
    """
    Five consecutive ranks.

    ``rank`` is the lowest card of the run, except that ``Rank.ACE`` marks
    the wheel (A-2-3-4-5), the weakest straight.
    """
    kind: ClassVar[CombinationKind] = CombinationKind.STRAIGHT
    rank: Rank

    def __post_init__(self):
        _check_straight_rank(self)

    @property
    def is_wheel(self) -> bool:
        return self.rank is WHEEL_RANK

    @property
    def high_rank(self) -> Rank:
        """Top card of the run; Five for the wheel."""
        return _straight_high_rank(self.rank)

    def tiebreak(self) -> Tuple[int, ...]:
        return (_straight_strength(self.rank),)


@dataclass(frozen=True)
class Flush(Combination):
    kind: ClassVar[CombinationKind] = CombinationKind.FLUSH
    rank: Rank

    def tiebreak(self) -> Tuple[int, ...]:
        return (self.rank.order,)


@dataclass(frozen=True)
class FullHouse(Combination):
    kind: ClassVar[CombinationKind] = CombinationKind.FULL_HOUSE
    three: Rank
    two: Rank

    def tiebreak(self) -> Tuple[int, ...]:
        return (self.three.order, self.two.order)


@dataclass(frozen=True)
class FourOfAKind(Combination):
    kind: ClassVar[CombinationKind] = CombinationKind.FOUR_OF_A_KIND
    rank: Rank
    kicker: Rank

    def tiebreak(self) -> Tuple[int, ...]:
        return (self.rank.order, self.kicker.order)


@dataclass(frozen=True)
class StraightFlush(Combination):
    """Straight in a single suit; ``rank`` follows the same rule as Straight."""
    kind: ClassVar[CombinationKind] = CombinationKind.STRAIGHT_FLUSH
    rank: Rank

    def __post_init__(self):
        _check_straight_rank(self)

    @property
    def is_wheel(self) -> bool:
        return self.rank is WHEEL_RANK

    @property
    def high_rank(self) -> Rank:
        return _straight_high_rank(self.rank)

    def tiebreak(self) -> Tuple[int, ...]:
        return (_straight_strength(self.rank),)


COMBINATION_TYPES: Dict[CombinationKind, Type[Combination]] = {
    CombinationKind.HIGH_CARD: HighCard,
    CombinationKind.PAIR: Pair,
    CombinationKind.TWO_PAIRS: TwoPairs,
    CombinationKind.THREE_OF_A_KIND: ThreeOfAKind,
    CombinationKind.STRAIGHT: Straight,
    CombinationKind.FLUSH: Flush,
    CombinationKind.FULL_HOUSE: FullHouse,
    CombinationKind.FOUR_OF_A_KIND: FourOfAKind,
    CombinationKind.STRAIGHT_FLUSH: StraightFlush,
}
