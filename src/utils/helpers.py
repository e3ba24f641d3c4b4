import logging
from typing import List, TextIO, Tuple

logger = logging.getLogger(__name__)


def read_problem(stream: TextIO) -> Tuple[int, List[int]]:
    """
    Reads a target and then the available numbers from a text stream.
    Numbers end at end of input or at the first token that is not a positive whole number.
    """
    tokens = (token for line in stream for token in line.split())

    first = next(tokens, None)
    if first is None:
        raise ValueError("No target given")
    if not _is_number(first):
        raise ValueError(f"Target must be a whole number, got {first!r}")
    target = int(first)
    if target <= 0:
        raise ValueError("Target must be positive")

    numbers = []
    for token in tokens:
        if not _is_number(token) or int(token) <= 0:
            logger.debug("Stopped reading numbers at %r", token)
            break
        numbers.append(int(token))
    return target, numbers


def _is_number(token: str) -> bool:
    """Plain digits only: no sign, no underscores."""
    return token.isdecimal()


def describe_stopped_search(count: int) -> str:
    return f"Stopped after {count} solution{'' if count == 1 else 's'}."


def describe_solution_count(count: int) -> str:
    if count == 0:
        return "Sorry, there are no solutions to this problem."
    if count == 1:
        return "This was the only solution."
    return f"There were {count} solutions."
