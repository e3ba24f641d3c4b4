import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

import yaml

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).with_name('rules.yaml')


@dataclass
class Rules:
    large_numbers: List[int]
    small_numbers: List[int]
    num_large: int
    num_small: int
    target_min: int
    target_max: int

    def validate(self) -> None:
        """Raise ValueError if these rules cannot deal a legal puzzle."""
        pool = self.large_numbers + self.small_numbers
        if not pool or any(not isinstance(n, int) or n <= 0 for n in pool):
            raise ValueError("Rules must list positive whole numbers")
        if not 0 <= self.num_large <= len(self.large_numbers):
            raise ValueError("num_large must be between 0 and the number of large numbers")
        if self.num_small < 0 or (self.num_small and not self.small_numbers):
            raise ValueError("num_small must be 0 or more, with small numbers to draw from")
        if not 0 < self.target_min <= self.target_max:
            raise ValueError("Target range must be positive and non-empty")


class Config:
    def __init__(self):
        self.redis_host = os.getenv('REDIS_HOST', 'localhost')
        self.redis_port = self._int_env('REDIS_PORT', 6379)
        self.cache_ttl = self._int_env('COUNTDOWN_CACHE_TTL', 3600)
        self.max_numbers = self._int_env('COUNTDOWN_MAX_NUMBERS', 6)
        self.rules_path = Path(os.getenv('COUNTDOWN_RULES', str(DEFAULT_RULES_PATH)))
        self.rules = self._load_rules()

        if self.cache_ttl <= 0 or self.max_numbers <= 0:
            raise ValueError("COUNTDOWN_CACHE_TTL and COUNTDOWN_MAX_NUMBERS must be positive")

    @staticmethod
    def _int_env(name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None or raw == '':
            return default
        try:
            return int(raw)
        except ValueError as e:
            raise ValueError(f"{name} must be a whole number, got {raw!r}") from e

    def _load_rules(self) -> Rules:
        try:
            with open(self.rules_path, 'r', encoding='utf-8') as f:
                rules_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("YAML parsing error in %s: %s", self.rules_path, e)
            raise ValueError(f"Invalid YAML in {self.rules_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load rules: {e}") from e

        if not rules_data:
            raise ValueError(f"Empty rules file: {self.rules_path}")

        try:
            rules = Rules(
                large_numbers=list(rules_data['large_numbers']),
                small_numbers=list(rules_data['small_numbers']),
                num_large=int(rules_data.get('num_large', 2)),
                num_small=int(rules_data.get('num_small', 4)),
                target_min=int(rules_data.get('target_min', 100)),
                target_max=int(rules_data.get('target_max', 999)),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid rules in {self.rules_path}: {e}") from e

        rules.validate()
        logger.debug("Loaded rules from %s: %s", self.rules_path, rules)
        return rules
