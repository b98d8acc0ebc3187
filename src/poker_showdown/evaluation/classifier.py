"""Classify five cards into their poker combination."""
import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Union

from poker_showdown.core.card import Card, Rank
from poker_showdown.core.containers import Variant
from poker_showdown.evaluation.combination import (
    WHEEL_RANK, Combination, Flush, FourOfAKind, FullHouse, HighCard, Pair,
    Straight, StraightFlush, ThreeOfAKind, TwoPairs,
)

logger = logging.getLogger(__name__)

_WHEEL = (Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE)

# Sorted rank patterns of the ten straights, mapped to the rank the straight carries.
STRAIGHT_PATTERNS: Dict[tuple, Rank] = {_WHEEL: WHEEL_RANK}
for _low in list(Rank)[:9]:
    STRAIGHT_PATTERNS[tuple(list(Rank)[_low.order:_low.order + 5])] = _low


class _RankGroups:
    """Occurrence counts of each rank among the cards, computed once."""

    def __init__(self, cards: Iterable[Card]):
        self.counts = Counter(card.rank for card in cards)

    def with_count(self, n: int) -> List[Rank]:
        return sorted((rank for rank, count in self.counts.items() if count == n), reverse=True)

    def highest_single(self) -> Optional[Rank]:
        singles = self.with_count(1)
        return singles[0] if singles else None


def _straight_rank(cards: List[Card]) -> Optional[Rank]:
    ranks = tuple(sorted(card.rank for card in cards))
    return STRAIGHT_PATTERNS.get(ranks)


def _is_flush(cards: List[Card]) -> bool:
    return len({card.suit for card in cards}) == 1


def _try_straight_flush(cards, groups):
    if not _is_flush(cards):
        return None
    rank = _straight_rank(cards)
    return StraightFlush(rank=rank) if rank is not None else None


def _try_four_of_a_kind(cards, groups):
    quads = groups.with_count(4)
    if not quads:
        return None
    return FourOfAKind(rank=quads[0], kicker=groups.highest_single())


def _try_full_house(cards, groups):
    trips = groups.with_count(3)
    pairs = groups.with_count(2)
    if not trips or not pairs:
        return None
    return FullHouse(three=trips[0], two=pairs[0])


def _try_flush(cards, groups):
    if not _is_flush(cards):
        return None
    return Flush(rank=max(card.rank for card in cards))


def _try_straight(cards, groups):
    rank = _straight_rank(cards)
    return Straight(rank=rank) if rank is not None else None


def _try_three_of_a_kind(cards, groups):
    trips = groups.with_count(3)
    if not trips or groups.with_count(2):
        return None
    return ThreeOfAKind(rank=trips[0], kicker=groups.highest_single())


def _try_two_pairs(cards, groups):
    pairs = groups.with_count(2)
    if len(pairs) != 2:
        return None
    return TwoPairs(low=pairs[1], high=pairs[0], kicker=groups.highest_single())


def _try_pair(cards, groups):
    pairs = groups.with_count(2)
    if len(pairs) != 1 or groups.with_count(3):
        return None
    return Pair(rank=pairs[0], kicker=groups.highest_single())


def _try_high_card(cards, groups):
    return HighCard(rank=max(card.rank for card in cards))


# Strongest first; the first rule that matches wins.
CLASSIFICATION_RULES = (
    _try_straight_flush,
    _try_four_of_a_kind,
    _try_full_house,
    _try_flush,
    _try_straight,
    _try_three_of_a_kind,
    _try_two_pairs,
    _try_pair,
    _try_high_card,
)


def classify(variant: Union[Variant, Iterable[Card]]) -> Combination:
    """
    Determine the poker combination made by exactly five cards.

    Args:
        variant: A Variant, or any five cards (wrapped into a Variant)

    Returns:
        The single best-matching Combination

    Raises:
        InvalidSizeError: If given a collection that is not five cards
    """
    if not isinstance(variant, Variant):
        variant = Variant(variant)

    cards = variant.get_cards()
    groups = _RankGroups(cards)

    for rule in CLASSIFICATION_RULES:
        combination = rule(cards, groups)
        if combination is not None:
            logger.debug(f"Classified {variant} as {combination}")
            return combination

    raise AssertionError(f"No combination matched {variant}; high card must always match")
