"""
Countdown puzzle dealing.

Deals large and small numbers plus a target the way the TV game does, and
can keep dealing until the solver finds a way to reach the target.
"""

import json
import logging
import random
from dataclasses import asdict, dataclass
from typing import List, Optional, Tuple

from config.config import Rules

from .expression import Expression
from .solver import solve

logger = logging.getLogger(__name__)


@dataclass
class Puzzle:
    """One dealt round: the numbers on the board and the target."""
    target: int
    numbers: List[int]
    large_numbers: List[int]
    small_numbers: List[int]

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, data: str) -> 'Puzzle':
        """Deserialize from JSON string."""
        parsed = json.loads(data)
        return cls(**parsed)


class PuzzleGenerator:
    """Deals puzzles according to a set of game rules."""

    def __init__(self, rules: Rules, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            rules: Number pools, counts and target range
            rng: Random source, e.g. random.Random(seed) for repeatable deals
        """
        self.rules = rules
        self.rng = rng or random.Random()

    def generate_numbers(self) -> Tuple[List[int], List[int], List[int]]:
        """
        Deal the numbers for a round.

        Returns:
            Tuple of (all_numbers, large_numbers, small_numbers)
        """
        large = self.rng.sample(self.rules.large_numbers, self.rules.num_large)
        small = self.rng.choices(self.rules.small_numbers, k=self.rules.num_small)  # Can repeat
        return large + small, large, small

    def generate_target(self) -> int:
        """Pick a random target number."""
        return self.rng.randint(self.rules.target_min, self.rules.target_max)

    def generate(self) -> Puzzle:
        numbers, large, small = self.generate_numbers()
        return Puzzle(
            target=self.generate_target(),
            numbers=numbers,
            large_numbers=large,
            small_numbers=small,
        )

    def generate_solvable(self, max_attempts: int = 20) -> Tuple[Puzzle, Expression]:
        """
        Deal until the target can be reached exactly.

        Returns:
            Tuple of (puzzle, first solution found)

        Raises:
            ValueError: If no solvable puzzle was dealt in max_attempts
        """
        for attempt in range(1, max_attempts + 1):
            puzzle = self.generate()
            solution = solve(puzzle.numbers, puzzle.target).first()
            if solution is not None:
                logger.debug("Dealt solvable puzzle on attempt %d: %s", attempt, puzzle)
                return puzzle, solution
            logger.debug("No solution for %s, dealing again", puzzle)

        raise ValueError(f"No solvable puzzle dealt in {max_attempts} attempts")
