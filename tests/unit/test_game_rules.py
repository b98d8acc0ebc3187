"""Tests for game rules configuration."""
import json

import jsonschema
import pytest
from poker_showdown.config.game_rules import (
    DATA_DIR, BestHandRule, GameRules, GameRulesLoader, get_game_rules, load_schema,
)


@pytest.fixture
def schema():
    """Load the JSON schema for game rules."""
    return load_schema()


def test_all_game_rules_match_schema(schema):
    """Test that every shipped rules file is valid."""
    config_files = list((DATA_DIR / "game_rules").glob("*.json"))
    assert len(config_files) == 3

    for config_file in config_files:
        with open(config_file) as f:
            config = json.load(f)
        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.exceptions.ValidationError as e:
            pytest.fail(f"Schema validation failed for {config_file.name}: {e}")


@pytest.mark.parametrize("game_id,hole_cards,board_cards,best_hand", [
    ("texas_holdem", 2, 5, BestHandRule(any_cards=5)),
    ("omaha_holdem", 4, 5, BestHandRule(hole_cards=2, community_cards=3)),
    ("five_card_draw", 5, 0, BestHandRule(hole_cards=5, community_cards=0)),
])
def test_shipped_rules(game_id, hole_cards, board_cards, best_hand):
    rules = get_game_rules(game_id)
    assert rules.id == game_id
    assert rules.hole_cards == hole_cards
    assert rules.board_cards == board_cards
    assert rules.best_hand == best_hand


def test_unknown_game():
    with pytest.raises(ValueError, match="No rules found"):
        get_game_rules("razz")


def _rules_json(**overrides):
    data = {
        "id": "pineapple",
        "name": "Pineapple",
        "holeCards": 3,
        "boardCards": 5,
        "bestHand": {"anyCards": 5},
    }
    data.update(overrides)
    return json.dumps(data)


def test_from_json():
    rules = GameRules.from_json(_rules_json())
    assert rules.name == "Pineapple"
    assert rules.best_hand.uses_any_cards


@pytest.mark.parametrize("json_str", [
    "{not json",
    _rules_json(holeCards=0),
    _rules_json(bestHand={"anyCards": 5, "holeCards": 2}),
    _rules_json(bestHand={"holeCards": 2}),
    _rules_json(extra=True),
])
def test_from_json_invalid(json_str):
    with pytest.raises(ValueError):
        GameRules.from_json(json_str)


@pytest.mark.parametrize("best_hand,hole_cards,board_cards", [
    ({"holeCards": 2, "communityCards": 2}, 4, 5),   # only four cards
    ({"holeCards": 3, "communityCards": 2}, 2, 5),   # more hole cards than dealt
    ({"holeCards": 1, "communityCards": 4}, 2, 3),   # more board cards than dealt
    ({"anyCards": 5}, 2, 2),
])
def test_from_json_inconsistent_counts(best_hand, hole_cards, board_cards):
    with pytest.raises(ValueError):
        GameRules.from_json(_rules_json(bestHand=best_hand, holeCards=hole_cards, boardCards=board_cards))


def test_loader_skips_invalid_files(tmp_path, caplog):
    (tmp_path / "pineapple.json").write_text(_rules_json())
    (tmp_path / "broken.json").write_text("{")

    loader = GameRulesLoader(tmp_path)
    assert set(loader.get_all_rules()) == {"pineapple"}
    assert "broken.json" in caplog.text


def test_loader_missing_directory(tmp_path):
    loader = GameRulesLoader(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        loader.load_all_rules()
