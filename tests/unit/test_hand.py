"""Tests for fixed-size card containers."""
import logging

import pytest
from poker_showdown.core.card import Card, Rank, Suit
from poker_showdown.core.containers import Board, CardContainer, InvalidSizeError, Variant
from poker_showdown.core.hand import HandOf2, HandOf4, HandOf5


@pytest.fixture
def sample_cards():
    """Create a set of sample cards for testing."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.HEARTS),
        Card(Rank.QUEEN, Suit.DIAMONDS),
        Card(Rank.JACK, Suit.CLUBS),
        Card(Rank.TEN, Suit.SPADES),
    ]


@pytest.mark.parametrize("container_type,size", [
    (Variant, 5),
    (Board, 5),
    (HandOf2, 2),
    (HandOf4, 4),
    (HandOf5, 5),
])
def test_container_accepts_exact_size(container_type, size, sample_cards):
    container = container_type(sample_cards[:size])
    assert container.size == size
    assert len(container) == size
    assert container.get_cards() == sample_cards[:size]
    assert list(container) == sample_cards[:size]


@pytest.mark.parametrize("container_type,size", [
    (Variant, 4),
    (Board, 3),
    (HandOf2, 1),
    (HandOf2, 3),
    (HandOf4, 5),
    (HandOf5, 0),
])
def test_container_rejects_wrong_size(container_type, size, sample_cards):
    """Wrong sizes are an error; never truncated or padded."""
    with pytest.raises(InvalidSizeError) as excinfo:
        container_type(sample_cards[:size])
    assert excinfo.value.expected == container_type.required_size
    assert excinfo.value.actual == size
    assert excinfo.value.container == container_type.__name__


def test_invalid_size_is_value_error(sample_cards):
    with pytest.raises(ValueError):
        HandOf2(sample_cards)


def test_base_container_is_abstract(sample_cards):
    with pytest.raises(TypeError):
        CardContainer(sample_cards)


def test_container_does_not_alias_source(sample_cards):
    hand = HandOf5(sample_cards)
    sample_cards.pop()
    assert hand.size == 5

    cards = hand.get_cards()
    cards.clear()
    assert hand.size == 5


def test_container_equality_and_hash(sample_cards):
    assert HandOf2(sample_cards[:2]) == HandOf2(sample_cards[:2])
    assert HandOf2(sample_cards[:2]) != HandOf2(sample_cards[1:3])
    assert Board(sample_cards) != Variant(sample_cards)
    assert len({HandOf2(sample_cards[:2]), HandOf2(sample_cards[:2])}) == 1


def test_from_string():
    hand = HandOf2.from_string("KhKs")
    assert hand.cards == (Card(Rank.KING, Suit.HEARTS), Card(Rank.KING, Suit.SPADES))
    assert str(hand) == "Kh Ks"

    with pytest.raises(InvalidSizeError):
        Board.from_string("KhKs")


def test_duplicate_cards_accepted_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        hand = HandOf2.from_string("KhKh")
    assert hand.size == 2
    assert "duplicate" in caplog.text
