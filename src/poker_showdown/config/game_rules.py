"""Showdown rules for each supported game, loaded from JSON."""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parents[1] / "data"

HAND_SIZE = 5


@dataclass(frozen=True)
class BestHandRule:
    """
    How a player's five-card hand is assembled at showdown.

    Either ``any_cards`` is set (any mix of hole and board cards), or exactly
    ``hole_cards`` hole cards are combined with exactly ``community_cards``
    board cards.
    """
    any_cards: int = 0
    hole_cards: int = 0
    community_cards: int = 0

    @property
    def uses_any_cards(self) -> bool:
        return self.any_cards > 0


@dataclass(frozen=True)
class GameRules:
    """Card counts and best-hand rule for one game."""
    id: str
    name: str
    hole_cards: int
    board_cards: int
    best_hand: BestHandRule

    @classmethod
    def from_file(cls, filepath: Path, schema: Optional[Dict[str, Any]] = None) -> 'GameRules':
        """
        Load GameRules from a JSON file.

        Raises:
            ValueError: If the file is not valid JSON or breaks the rules schema
        """
        with open(filepath, 'r') as f:
            return cls.from_json(f.read(), schema=schema, source=str(filepath))

    @classmethod
    def from_json(
        cls,
        json_str: str,
        schema: Optional[Dict[str, Any]] = None,
        source: str = "<string>"
    ) -> 'GameRules':
        """
        Create GameRules from a JSON string.

        Args:
            json_str: JSON document describing the game
            schema: JSON schema to validate against (defaults to the packaged one)
            source: Name used in error messages

        Raises:
            ValueError: If JSON is invalid or the rules are inconsistent
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {source}: {e}")

        if schema is None:
            schema = load_schema()
        try:
            jsonschema.validate(instance=data, schema=schema)
        except jsonschema.exceptions.ValidationError as e:
            raise ValueError(f"Invalid game rules in {source}: {e.message}") from e

        best_hand_data = data['bestHand']
        best_hand = BestHandRule(
            any_cards=best_hand_data.get('anyCards', 0),
            hole_cards=best_hand_data.get('holeCards', 0),
            community_cards=best_hand_data.get('communityCards', 0),
        )
        rules = cls(
            id=data['id'],
            name=data['name'],
            hole_cards=data['holeCards'],
            board_cards=data['boardCards'],
            best_hand=best_hand,
        )
        rules._check_card_counts(source)
        return rules

    def _check_card_counts(self, source: str) -> None:
        """Make sure the best-hand rule can be satisfied by the dealt cards."""
        rule = self.best_hand
        if rule.uses_any_cards:
            if self.hole_cards + self.board_cards < rule.any_cards:
                raise ValueError(
                    f"{source}: {rule.any_cards} cards required but only "
                    f"{self.hole_cards + self.board_cards} dealt"
                )
            return

        if rule.hole_cards + rule.community_cards != HAND_SIZE:
            raise ValueError(
                f"{source}: best hand must use {HAND_SIZE} cards, rule uses "
                f"{rule.hole_cards} hole + {rule.community_cards} community"
            )
        if rule.hole_cards > self.hole_cards:
            raise ValueError(f"{source}: rule uses {rule.hole_cards} hole cards but only {self.hole_cards} dealt")
        if rule.community_cards > self.board_cards:
            raise ValueError(
                f"{source}: rule uses {rule.community_cards} community cards but only {self.board_cards} dealt"
            )


def load_schema(schema_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the JSON schema for game rules files."""
    if schema_path is None:
        schema_path = DATA_DIR / "schemas" / "game_rules.json"
    with open(schema_path) as f:
        return json.load(f)


class GameRulesLoader:
    """Loads and caches the rules of every game in a directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory containing game rules JSON files.
                        Defaults to the rules shipped with the package.
        """
        if config_dir is None:
            config_dir = DATA_DIR / "game_rules"

        self.config_dir = config_dir
        self._rules: Dict[str, GameRules] = {}
        self._loaded = False

    def load_all_rules(self) -> None:
        """Load all game rules files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading game rules from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Game rules directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Game rules directory not found: {self.config_dir}")

        schema = load_schema()
        json_files = sorted(self.config_dir.glob("*.json"))
        if not json_files:
            logger.warning(f"No JSON game rules found in {self.config_dir}")

        for json_file in json_files:
            try:
                rules = GameRules.from_file(json_file, schema=schema)
            except ValueError as e:
                logger.error(f"Failed to load game rules from {json_file}: {e}")
                continue
            if rules.id != json_file.stem:
                logger.warning(f"Game id '{rules.id}' does not match file name {json_file.name}")
            self._rules[rules.id] = rules
            logger.debug(f"Loaded rules for {rules.id}")

        logger.info(f"Loaded {len(self._rules)} game rules")
        self._loaded = True

    def get_rules(self, game_id: str) -> GameRules:
        """
        Get the rules for a game.

        Raises:
            ValueError: If no rules are loaded for the game
        """
        if not self._loaded:
            self.load_all_rules()

        rules = self._rules.get(game_id)
        if rules is None:
            raise ValueError(f"No rules found for game: {game_id}")
        return rules

    def get_all_rules(self) -> Dict[str, GameRules]:
        """Get all loaded rules."""
        if not self._loaded:
            self.load_all_rules()

        return self._rules.copy()


# Global instance
game_rules_loader = GameRulesLoader()


def get_game_rules(game_id: str) -> GameRules:
    """Convenience function to get the rules of a game."""
    return game_rules_loader.get_rules(game_id)
