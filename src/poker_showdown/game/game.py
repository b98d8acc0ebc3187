"""The deals a showdown is run on, one class per supported game."""
from dataclasses import dataclass
from typing import ClassVar, Sequence, Tuple, Type, Union

from poker_showdown.config.game_rules import GameRules, get_game_rules
from poker_showdown.core.card import Card
from poker_showdown.core.containers import Board
from poker_showdown.core.hand import Hand, HandOf2, HandOf4, HandOf5


def _check_hands(game: str, hands: Sequence[Hand], hand_type: Type[Hand]) -> None:
    for i, hand in enumerate(hands):
        if not isinstance(hand, hand_type):
            raise TypeError(f"{game} hand {i} must be {hand_type.__name__}, got {type(hand).__name__}")


@dataclass(frozen=True)
class TexasHoldem:
    """A Texas Hold'em deal: five board cards and two hole cards per player."""
    rules_id: ClassVar[str] = "texas_holdem"
    board: Board
    hands: Tuple[HandOf2, ...]

    def __post_init__(self):
        object.__setattr__(self, 'hands', tuple(self.hands))
        _check_hands("Texas Hold'em", self.hands, HandOf2)

    @property
    def board_cards(self) -> Tuple[Card, ...]:
        return self.board.cards

    @property
    def rules(self) -> GameRules:
        return get_game_rules(self.rules_id)


@dataclass(frozen=True)
class OmahaHoldem:
    """An Omaha deal: five board cards and four hole cards per player."""
    rules_id: ClassVar[str] = "omaha_holdem"
    board: Board
    hands: Tuple[HandOf4, ...]

    def __post_init__(self):
        object.__setattr__(self, 'hands', tuple(self.hands))
        _check_hands("Omaha Hold'em", self.hands, HandOf4)

    @property
    def board_cards(self) -> Tuple[Card, ...]:
        return self.board.cards

    @property
    def rules(self) -> GameRules:
        return get_game_rules(self.rules_id)


@dataclass(frozen=True)
class FiveCardDraw:
    """A Five-Card Draw showdown: five hole cards per player, no board."""
    rules_id: ClassVar[str] = "five_card_draw"
    hands: Tuple[HandOf5, ...]

    def __post_init__(self):
        object.__setattr__(self, 'hands', tuple(self.hands))
        _check_hands("Five-Card Draw", self.hands, HandOf5)

    @property
    def board_cards(self) -> Tuple[Card, ...]:
        return ()

    @property
    def rules(self) -> GameRules:
        return get_game_rules(self.rules_id)


Game = Union[TexasHoldem, OmahaHoldem, FiveCardDraw]
