"""Player hand implementations."""

from .containers import CardContainer


class Hand(CardContainer):
    """A player's private (hole) cards."""

    __slots__ = ()


class HandOf2(Hand):
    """Two hole cards, as dealt in Texas Hold'em."""

    __slots__ = ()
    required_size = 2


class HandOf4(Hand):
    """Four hole cards, as dealt in Omaha Hold'em."""

    __slots__ = ()
    required_size = 4


class HandOf5(Hand):
    """Five hole cards, as dealt in Five-Card Draw."""

    __slots__ = ()
    required_size = 5
