import json
import logging
from typing import List, Optional, Sequence

import redis

logger = logging.getLogger(__name__)


class SolutionCache:
    def __init__(self, host: str, port: int, expiry: int = 3600):
        self.redis = redis.Redis(host=host, port=port, decode_responses=True)
        self.expiry = expiry  # seconds

    def _key(self, numbers: Sequence[int], target: int) -> str:
        """Numbers keep their input order, which fixes the solution order."""
        return f"countdown:solutions:{target}:{','.join(str(n) for n in numbers)}"

    def get_solutions(self, numbers: Sequence[int], target: int) -> Optional[List[str]]:
        """Rendered solutions from an earlier full search, or None if not cached"""
        data = self.redis.get(self._key(numbers, target))
        if data is None:
            return None
        logger.debug("Cache hit for %d from %s", target, list(numbers))
        return json.loads(data)

    def set_solutions(self, numbers: Sequence[int], target: int, solutions: List[str]):
        key = self._key(numbers, target)
        self.redis.set(key, json.dumps(solutions))
        self.redis.expire(key, self.expiry)

    def clear(self, numbers: Sequence[int], target: int):
        self.redis.delete(self._key(numbers, target))
