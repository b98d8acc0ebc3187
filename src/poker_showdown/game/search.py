"""Best five-card hand search over hole and board cards."""
import itertools
import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from poker_showdown.config.game_rules import HAND_SIZE, BestHandRule
from poker_showdown.core.card import Card
from poker_showdown.core.containers import Variant
from poker_showdown.evaluation.classifier import classify
from poker_showdown.evaluation.combination import Combination

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BestHand:
    """
    The strongest hand a player can make.

    Attributes:
        combination: Best combination found
        variant: The five cards that make it
        used_hole_cards: Which of the player's hole cards are in the variant
    """
    combination: Combination
    variant: Variant
    used_hole_cards: Tuple[Card, ...]


def candidate_hands(
    hole_cards: Sequence[Card],
    board_cards: Sequence[Card],
    rule: BestHandRule
) -> Iterator[Tuple[Tuple[Card, ...], Tuple[Card, ...]]]:
    """
    Generate every (hole part, board part) pair the rule allows.

    With ``anyCards`` every five-card subset of hole + board is produced.
    Otherwise each ``holeCards``-sized subset of the hole cards is paired
    with each ``communityCards``-sized subset of the board.

    Raises:
        ValueError: If there are too few cards for the rule
    """
    if rule.uses_any_cards:
        if len(hole_cards) + len(board_cards) < rule.any_cards:
            raise ValueError(
                f"Need {rule.any_cards} cards, have {len(hole_cards) + len(board_cards)}"
            )
        hole_count = len(hole_cards)
        pool = list(hole_cards) + list(board_cards)
        for indices in itertools.combinations(range(len(pool)), rule.any_cards):
            hole_part = tuple(pool[i] for i in indices if i < hole_count)
            board_part = tuple(pool[i] for i in indices if i >= hole_count)
            yield hole_part, board_part
        return

    if len(hole_cards) < rule.hole_cards:
        raise ValueError(f"Not enough hole cards: need {rule.hole_cards}, have {len(hole_cards)}")
    if len(board_cards) < rule.community_cards:
        raise ValueError(
            f"Not enough community cards: need {rule.community_cards}, have {len(board_cards)}"
        )

    hole_combos = itertools.combinations(hole_cards, rule.hole_cards)
    comm_combos = list(itertools.combinations(board_cards, rule.community_cards))
    for hole_combo, comm_combo in itertools.product(hole_combos, comm_combos):
        yield hole_combo, comm_combo


def find_best_hand(
    hole_cards: Sequence[Card],
    board_cards: Sequence[Card],
    rule: BestHandRule
) -> BestHand:
    """
    Classify every candidate hand and keep the strongest.

    When several candidates tie on combination the first one found is kept.

    Raises:
        ValueError: If there are too few cards for the rule
    """
    best = None
    count = 0
    for hole_part, board_part in candidate_hands(hole_cards, board_cards, rule):
        count += 1
        variant = Variant(hole_part + board_part)
        combination = classify(variant)
        if best is None or combination > best.combination:
            best = BestHand(combination=combination, variant=variant, used_hole_cards=hole_part)

    if best is None:
        raise ValueError(f"Rule {rule} produced no {HAND_SIZE}-card hands")

    logger.debug(f"Best of {count} candidates: {best.combination} from {best.variant}")
    return best
