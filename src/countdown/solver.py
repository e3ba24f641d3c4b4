import logging
from typing import Iterator, Optional, Sequence, Tuple

from .combinatorics import subbags
from .expression import Expression, Leaf, Node, Result, evaluate
from .lazy import LazySequence, lazy
from .operators import OPERATORS, apply, valid_optimized
from .partition import non_empty_split

logger = logging.getLogger(__name__)


def combine(left: Expression, right: Expression) -> Iterator[Node]:
    """Every operator applied to left and right, unchecked."""
    for op in OPERATORS:
        yield Node(op, left, right)


@lazy
def exprs(numbers: Tuple[int, ...]) -> Iterator[Expression]:
    """
    Every expression whose leaves are exactly numbers, in order.

    Nothing is checked while building; use evaluate() to find out which of
    them are legal.
    """
    if not numbers:
        return
    if len(numbers) == 1:
        yield Leaf(numbers[0])
        return
    for ls, rs in non_empty_split(numbers):
        rights = exprs(rs).cached()
        for left in exprs(ls):
            for right in rights:
                yield from combine(left, right)


def combine_results(left: Result, right: Result) -> Iterator[Result]:
    """Legal, non-redundant combinations of two evaluated expressions."""
    for op in OPERATORS:
        if valid_optimized(op, left.value, right.value):
            yield Result(Node(op, left.expression, right.expression),
                         apply(op, left.value, right.value))


@lazy
def results(numbers: Tuple[int, ...]) -> Iterator[Result]:
    """
    Every legal expression over numbers, in order, paired with its value.

    Building and evaluating happen together, so a branch rejected by the
    validator is never expanded further.
    """
    if not numbers:
        return
    if len(numbers) == 1:
        if numbers[0] > 0:
            yield Result(Leaf(numbers[0]), numbers[0])
        return
    for ls, rs in non_empty_split(numbers):
        rights = results(rs).cached()
        for left in results(ls):
            for right in rights:
                yield from combine_results(left, right)


def solve(numbers: Sequence[int], target: int) -> LazySequence[Expression]:
    """
    All expressions over a selection of numbers that evaluate to target.

    Args:
        numbers: The available numbers, each usable at most once
        target: The number to reach

    Returns:
        A lazy sequence of expressions; nothing is searched until it is iterated
    """
    return (subbags(tuple(numbers))
            .flat_map(results)
            .filter(lambda result: result.value == target)
            .map(lambda result: result.expression))


def solve_naive(numbers: Sequence[int], target: int) -> LazySequence[Expression]:
    """Reference search: build every expression, then evaluate each one."""
    return (subbags(tuple(numbers))
            .flat_map(exprs)
            .filter(lambda expression: evaluate(expression) == target))


class CountdownSolver:
    """
    Solver for the Countdown Numbers Game.
    Finds every expression over the given numbers that reaches a target.
    """

    def __init__(self, optimized: bool = True):
        self.optimized = optimized

    def solve(self, numbers: Sequence[int], target: int) -> LazySequence[Expression]:
        """Lazy sequence of solutions, in search order."""
        logger.debug("Searching %s for %d (%s)", list(numbers), target,
                     "optimized" if self.optimized else "naive")
        if self.optimized:
            return solve(numbers, target)
        return solve_naive(numbers, target)

    def first(self, numbers: Sequence[int], target: int) -> Optional[Expression]:
        """The first solution found, or None if the target cannot be made."""
        return self.solve(numbers, target).first()
