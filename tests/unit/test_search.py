"""Tests for best-hand search."""
import pytest
from poker_showdown.config.game_rules import BestHandRule, get_game_rules
from poker_showdown.core.card import Rank, cards_from_string
from poker_showdown.evaluation.combination import (
    Flush, FourOfAKind, FullHouse, Straight, StraightFlush, ThreeOfAKind,
)
from poker_showdown.game.search import candidate_hands, find_best_hand

HOLDEM = BestHandRule(any_cards=5)
OMAHA = BestHandRule(hole_cards=2, community_cards=3)
DRAW = BestHandRule(hole_cards=5, community_cards=0)


@pytest.fixture
def board():
    return cards_from_string("QsKdKs7cJd")


def test_holdem_candidate_count(board):
    assert len(list(candidate_hands(cards_from_string("Kh2c"), board, HOLDEM))) == 21


def test_omaha_candidate_count(board):
    candidates = list(candidate_hands(cards_from_string("Kc7d7h7s"), board, OMAHA))
    assert len(candidates) == 60
    assert all(len(hole) == 2 and len(comm) == 3 for hole, comm in candidates)


def test_draw_has_a_single_candidate():
    hand = cards_from_string("Kc7d7h7s7c")
    candidates = list(candidate_hands(hand, (), DRAW))
    assert candidates == [(tuple(hand), ())]


def test_holdem_best_hand(board):
    best = find_best_hand(cards_from_string("Kh2c"), board, HOLDEM)
    assert best.combination == ThreeOfAKind(rank=Rank.KING, kicker=Rank.QUEEN)
    assert sorted(str(c) for c in best.variant if c.rank == Rank.KING) == ["Kd", "Kh", "Ks"]


def test_holdem_can_play_the_board():
    board = cards_from_string("9h8h7h6h5h")
    best = find_best_hand(cards_from_string("2c3d"), board, HOLDEM)
    assert best.combination == StraightFlush(rank=Rank.FIVE)
    assert best.used_hole_cards == ()


def test_omaha_best_hand(board):
    best = find_best_hand(cards_from_string("Kc7d7h7s"), board, OMAHA)
    assert best.combination == FullHouse(three=Rank.KING, two=Rank.SEVEN)
    assert len(best.used_hole_cards) == 2


def test_omaha_must_use_exactly_two_hole_cards():
    """Four hearts in hand and one on board is no flush in Omaha."""
    board = cards_from_string("2h7c8d9sKc")
    hole = cards_from_string("AhQhJhTh")
    assert find_best_hand(hole, board, HOLDEM).combination == Flush(rank=Rank.ACE)
    best = find_best_hand(hole, board, OMAHA)
    assert best.combination == Straight(rank=Rank.SEVEN)


def test_omaha_cannot_play_one_hole_card():
    """Hold'em makes a royal flush with one hole card; Omaha needs two."""
    board = cards_from_string("AsKsQsJs2d")
    hole = cards_from_string("Ts9s3c4c")
    assert find_best_hand(hole, board, HOLDEM).combination == StraightFlush(rank=Rank.TEN)
    best = find_best_hand(hole, board, OMAHA)
    assert best.combination == StraightFlush(rank=Rank.NINE)
    assert sorted(str(c) for c in best.used_hole_cards) == ["9s", "Ts"]


def test_draw_best_hand():
    best = find_best_hand(cards_from_string("Kc7d7h7s7c"), (), DRAW)
    assert best.combination == FourOfAKind(rank=Rank.SEVEN, kicker=Rank.KING)


def test_wheel_loses_to_six_high_straight_in_search():
    board = cards_from_string("2c3d4h5sKd")
    best = find_best_hand(cards_from_string("Ah6c"), board, HOLDEM)
    assert best.combination == Straight(rank=Rank.TWO)


def test_rules_from_config_drive_search(board):
    rules = get_game_rules("omaha_holdem")
    best = find_best_hand(cards_from_string("Kc7d7h7s"), board, rules.best_hand)
    assert best.combination == FullHouse(three=Rank.KING, two=Rank.SEVEN)


@pytest.mark.parametrize("hole,board_cards,rule", [
    ("Kh", "", HOLDEM),
    ("Kh", "QsKdKs7cJd", OMAHA),
    ("Kc7d7h7s", "QsKd", OMAHA),
])
def test_too_few_cards(hole, board_cards, rule):
    with pytest.raises(ValueError):
        find_best_hand(cards_from_string(hole), cards_from_string(board_cards), rule)
