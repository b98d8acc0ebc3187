"""Showdown ranking: best hand per player, grouped and ordered by strength."""
import logging
from typing import Dict, List, Sequence, Tuple

from poker_showdown.core.card import Card
from poker_showdown.evaluation.combination import Combination
from poker_showdown.game.game import Game
from poker_showdown.game.game_result import HandResult
from poker_showdown.game.search import find_best_hand

logger = logging.getLogger(__name__)

RankedHand = Tuple[List[Card], Combination]


def evaluate_hands(game: Game) -> List[HandResult]:
    """
    Find the best hand of every player in the game.

    Results follow the order of ``game.hands``.
    """
    rules = game.rules
    board_cards = game.board_cards

    logger.info(f"Showdown for {rules.name} with {len(game.hands)} hands")

    results = []
    for position, hand in enumerate(game.hands):
        best = find_best_hand(hand.cards, board_cards, rules.best_hand)
        result = HandResult(
            cards=hand.cards,
            combination=best.combination,
            variant=best.variant,
            used_hole_cards=best.used_hole_cards,
        )
        logger.info(f"  Hand {position} ({hand}) has {result.hand_description}")
        results.append(result)
    return results


def rank_hands(game: Game) -> List[RankedHand]:
    """Pair each player's cards with their best combination, in input order."""
    return [(list(result.cards), result.combination) for result in evaluate_hands(game)]


def group_hands(hands: Sequence[RankedHand]) -> Dict[Combination, List[List[Card]]]:
    """
    Group hands holding exactly the same combination.

    Groups and the hands inside each group keep first-seen order.
    """
    groups: Dict[Combination, List[List[Card]]] = {}
    for cards, combination in hands:
        groups.setdefault(combination, []).append(cards)
    return groups


def sort_hands(grouped: Dict[Combination, List[List[Card]]]) -> List[List[List[Card]]]:
    """
    Order groups from weakest to strongest combination.

    The winners are the last group.
    """
    return [grouped[combination] for combination in sorted(grouped)]


def winning_hands(game: Game) -> List[List[Card]]:
    """Hands that share the strongest combination of the showdown."""
    ordered = sort_hands(group_hands(rank_hands(game)))
    if not ordered:
        return []
    logger.debug(f"{len(ordered[-1])} winning hand(s)")
    return ordered[-1]
