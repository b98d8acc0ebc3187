"""Human-readable descriptions of poker combinations."""
from poker_showdown.evaluation.combination import (
    Combination, CombinationKind, Flush, FourOfAKind, FullHouse, HighCard,
    Pair, Straight, StraightFlush, ThreeOfAKind, TwoPairs,
)
from poker_showdown.core.card import Rank


def describe_hand(combination: Combination) -> str:
    """Get a basic description of the hand, e.g. 'Full House'."""
    return combination.name


def describe_hand_detailed(combination: Combination) -> str:
    """
    Get a detailed description of the hand.

    Examples: 'Pair of Kings', 'Full House, Kings over Sevens',
    'Five-high Straight', 'Royal Flush'.
    """
    kind = combination.kind
    if kind == CombinationKind.HIGH_CARD:
        return _describe_high_card(combination)
    elif kind == CombinationKind.PAIR:
        return _describe_pair(combination)
    elif kind == CombinationKind.TWO_PAIRS:
        return _describe_two_pair(combination)
    elif kind == CombinationKind.THREE_OF_A_KIND:
        return _describe_three_of_kind(combination)
    elif kind == CombinationKind.STRAIGHT:
        return _describe_straight(combination)
    elif kind == CombinationKind.FLUSH:
        return _describe_flush(combination)
    elif kind == CombinationKind.FULL_HOUSE:
        return _describe_full_house(combination)
    elif kind == CombinationKind.FOUR_OF_A_KIND:
        return _describe_four_of_kind(combination)
    elif kind == CombinationKind.STRAIGHT_FLUSH:
        return _describe_straight_flush(combination)
    raise AssertionError(f"No description for combination kind {kind}")


def _describe_high_card(combination: HighCard) -> str:
    return f"{combination.rank.full_name} High"


def _describe_pair(combination: Pair) -> str:
    return f"Pair of {combination.rank.plural_name}"


def _describe_two_pair(combination: TwoPairs) -> str:
    return f"Two Pair, {combination.high.plural_name} and {combination.low.plural_name}"


def _describe_three_of_kind(combination: ThreeOfAKind) -> str:
    return f"Three {combination.rank.plural_name}"


def _describe_straight(combination: Straight) -> str:
    return f"{combination.high_rank.full_name}-high Straight"


def _describe_flush(combination: Flush) -> str:
    return f"{combination.rank.full_name}-high Flush"


def _describe_full_house(combination: FullHouse) -> str:
    return f"Full House, {combination.three.plural_name} over {combination.two.plural_name}"


def _describe_four_of_kind(combination: FourOfAKind) -> str:
    return f"Four {combination.rank.plural_name}"


def _describe_straight_flush(combination: StraightFlush) -> str:
    if combination.high_rank == Rank.ACE:
        return "Royal Flush"
    return f"{combination.high_rank.full_name}-high Straight Flush"
