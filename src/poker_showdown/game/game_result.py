from dataclasses import dataclass
from typing import Tuple

from poker_showdown.core.card import Card
from poker_showdown.core.containers import Variant
from poker_showdown.evaluation.combination import Combination
from poker_showdown.evaluation.hand_description import describe_hand, describe_hand_detailed


@dataclass(frozen=True)
class HandResult:
    """Information about a player's hand and its evaluation."""

    cards: Tuple[Card, ...]  # The player's own cards, as dealt
    combination: Combination  # Best combination the player can make
    variant: Variant  # Five cards making the combination
    used_hole_cards: Tuple[Card, ...]  # Player cards that are part of the variant

    @property
    def hand_name(self) -> str:
        """e.g., "Full House"."""
        return describe_hand(self.combination)

    @property
    def hand_description(self) -> str:
        """e.g., "Full House, Kings over Sevens"."""
        return describe_hand_detailed(self.combination)

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.cards)
        return f"{self.hand_description} ({cards_str})"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "cards": [str(card) for card in self.cards],
            "hand_name": self.hand_name,
            "hand_description": self.hand_description,
            "best_hand": [str(card) for card in self.variant],
            "used_hole_cards": [str(card) for card in self.used_hole_cards],
        }
