"""
Expression trees for the Countdown Numbers Game.

An expression is either a Leaf holding one of the given numbers or a Node
applying an operator to two sub-expressions. Trees are immutable and compare
structurally.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Iterable, List, NamedTuple, Optional, Union

from .operators import Operator, apply, valid

Validator = Callable[[Operator, int, int], bool]


@dataclass(frozen=True)
class Leaf:
    """A single number taken from the input."""
    value: int


@dataclass(frozen=True)
class Node:
    """An operator applied to a left and a right operand."""
    operator: Operator
    left: 'Expression'
    right: 'Expression'


Expression = Union[Leaf, Node]


class Result(NamedTuple):
    """An expression together with its already computed value."""
    expression: Expression
    value: int


def evaluate(expression: Expression, validator: Validator = valid) -> Optional[int]:
    """
    Value of an expression, or None if it is not a legal Countdown expression.

    A leaf must be positive and every operator application must pass the
    validator. Passing valid_optimized also rejects redundant forms such as
    multiplying by 1.

    Args:
        expression: The expression to evaluate
        validator: Rule deciding whether an operator may be applied

    Returns:
        The positive integer value, or None on failure
    """
    if isinstance(expression, Leaf):
        return expression.value if expression.value > 0 else None

    left = evaluate(expression.left, validator)
    if left is None:
        return None
    right = evaluate(expression.right, validator)
    if right is None:
        return None
    if not validator(expression.operator, left, right):
        return None
    return apply(expression.operator, left, right)


def values(expression: Expression) -> List[int]:
    """Leaf values from left to right."""
    if isinstance(expression, Leaf):
        return [expression.value]
    return values(expression.left) + values(expression.right)


def render(expression: Expression) -> str:
    """Infix form, e.g. '(25 - 10) * (1 + 50)'. Only nodes are parenthesized."""
    if isinstance(expression, Leaf):
        return str(expression.value)
    return f"{_operand(expression.left)} {expression.operator.value} {_operand(expression.right)}"


def _operand(expression: Expression) -> str:
    if isinstance(expression, Leaf):
        return render(expression)
    return f"({render(expression)})"


def uses_available(expression: Expression, numbers: Iterable[int]) -> bool:
    """Check that no number is used more often than it is available."""
    used = Counter(values(expression))
    available = Counter(numbers)
    return all(count <= available[num] for num, count in used.items())


def is_solution(expression: Expression, numbers: Iterable[int], target: int,
                validator: Validator = valid) -> bool:
    """Whether expression only uses the given numbers and evaluates to target."""
    return uses_available(expression, numbers) and evaluate(expression, validator) == target
