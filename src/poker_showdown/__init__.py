"""Poker hand classification and showdown ranking."""

from poker_showdown.core.card import Card, Rank, Suit, cards_from_string
from poker_showdown.core.containers import Board, CardContainer, InvalidSizeError, Variant
from poker_showdown.core.hand import Hand, HandOf2, HandOf4, HandOf5
from poker_showdown.evaluation.classifier import classify
from poker_showdown.evaluation.combination import (
    Combination,
    CombinationKind,
    Flush,
    FourOfAKind,
    FullHouse,
    HighCard,
    Pair,
    Straight,
    StraightFlush,
    ThreeOfAKind,
    TwoPairs,
)
from poker_showdown.game.game import FiveCardDraw, Game, OmahaHoldem, TexasHoldem
from poker_showdown.game.showdown import (
    evaluate_hands,
    group_hands,
    rank_hands,
    sort_hands,
    winning_hands,
)

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "cards_from_string",
    "Board",
    "CardContainer",
    "InvalidSizeError",
    "Variant",
    "Hand",
    "HandOf2",
    "HandOf4",
    "HandOf5",
    "classify",
    "Combination",
    "CombinationKind",
    "Flush",
    "FourOfAKind",
    "FullHouse",
    "HighCard",
    "Pair",
    "Straight",
    "StraightFlush",
    "ThreeOfAKind",
    "TwoPairs",
    "FiveCardDraw",
    "Game",
    "OmahaHoldem",
    "TexasHoldem",
    "evaluate_hands",
    "group_hands",
    "rank_hands",
    "sort_hands",
    "winning_hands",
]
