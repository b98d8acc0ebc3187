"""Fixed-size card containers."""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Tuple

from .card import Card, cards_from_string

logger = logging.getLogger(__name__)


class InvalidSizeError(ValueError):
    """Raised when a container is built from the wrong number of cards."""

    def __init__(self, container: str, expected: int, actual: int):
        self.container = container
        self.expected = expected
        self.actual = actual
        super().__init__(f"{container} requires exactly {expected} cards, got {actual}")


class CardContainer(ABC):
    """
    Interface for an immutable collection of a fixed number of cards.

    Subclasses set ``required_size``. The length is checked once, at
    construction; a container never changes afterwards.
    """

    __slots__ = ('_cards',)

    @property
    @abstractmethod
    def required_size(self) -> int:
        """Number of cards the container must hold."""
        pass

    def __init__(self, cards: Iterable[Card]):
        """
        Args:
            cards: Cards to hold, in the order given

        Raises:
            InvalidSizeError: If the number of cards is not ``required_size``
        """
        cards = tuple(cards)
        if len(cards) != self.required_size:
            logger.debug(f"Rejected {len(cards)} cards for {type(self).__name__}")
            raise InvalidSizeError(type(self).__name__, self.required_size, len(cards))
        if len(set(cards)) != len(cards):
            logger.warning(
                f"{type(self).__name__} built with duplicate cards: {' '.join(str(c) for c in cards)}"
            )
        self._cards: Tuple[Card, ...] = cards

    @classmethod
    def from_string(cls, cards_str: str):
        """Create the container from concatenated card codes, e.g. "KhKs"."""
        return cls(cards_from_string(cards_str))

    @property
    def cards(self) -> Tuple[Card, ...]:
        """The cards, in construction order."""
        return self._cards

    def get_cards(self) -> List[Card]:
        """Get a copy of the cards as a list."""
        return list(self._cards)

    @property
    def size(self) -> int:
        """Number of cards in the container."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._cards))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({' '.join(str(c) for c in self._cards)})"

    def __str__(self) -> str:
        return ' '.join(str(c) for c in self._cards)


class Variant(CardContainer):
    """Exactly five cards: the unit a hand is classified on."""

    __slots__ = ()
    required_size = 5


class Board(CardContainer):
    """The five community cards of a Hold'em or Omaha deal."""

    __slots__ = ()
    required_size = 5
