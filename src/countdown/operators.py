"""
The four Countdown operators and the rules deciding when they may be applied.

Operands are always strictly positive: leaves are checked before they are
used and subtraction is only allowed when it stays positive, so the modulo
tests below never see a zero or negative divisor.
"""

from enum import Enum


class Operator(Enum):
    """A binary arithmetic operator; the value is its rendered symbol."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value


# Enumeration order used by every search
OPERATORS = (Operator.ADD, Operator.SUB, Operator.MUL, Operator.DIV)


def valid(op: Operator, m: int, n: int) -> bool:
    """
    Whether applying op to m and n yields a positive integer.

    Args:
        op: The operator
        m: Value of the left operand
        n: Value of the right operand
    """
    if op is Operator.ADD or op is Operator.MUL:
        return True
    if op is Operator.SUB:
        return m > n
    return m % n == 0


def valid_optimized(op: Operator, m: int, n: int) -> bool:
    """
    Like valid(), but also rejects redundant applications.

    Commutative operators must have the smaller operand on the left, and
    multiplying or dividing by 1 is never allowed.
    """
    if op is Operator.ADD:
        return m <= n
    if op is Operator.SUB:
        return m > n
    if op is Operator.MUL:
        return m != 1 and n != 1 and m <= n
    return n != 1 and m % n == 0


def apply(op: Operator, m: int, n: int) -> int:
    """Result of op on m and n. Division is exact for any valid pair."""
    if op is Operator.ADD:
        return m + n
    if op is Operator.SUB:
        return m - n
    if op is Operator.MUL:
        return m * n
    return m // n
