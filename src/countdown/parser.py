"""
Safe parser for Countdown answers.
Uses Python's ast module to turn typed expressions into expression trees
without eval().
"""

import ast
import re
from collections import Counter
from typing import Any, Dict, List, Optional, Tuple

from .expression import Expression, Leaf, Node, evaluate, render
from .operators import Operator


class ExpressionParser:
    """
    Parses infix answers into expression trees.
    Only allows: +, -, *, / operators, positive integers, and parentheses.
    """

    # Mapping of AST operators to Countdown operators
    AST_OPERATORS = {
        ast.Add: Operator.ADD,
        ast.Sub: Operator.SUB,
        ast.Mult: Operator.MUL,
        ast.Div: Operator.DIV,
    }

    # Common ways of typing multiplication and division
    REPLACEMENTS = {
        'x': '*',
        'X': '*',
        '×': '*',
        '÷': '/',
        '[': '(',
        ']': ')',
    }

    # Characters allowed in expressions
    ALLOWED_CHARS = set('0123456789+-*/() ')

    # Far more numbers than any board holds; keeps tree recursion shallow
    MAX_NUMBERS = 64

    def normalize(self, expression: str) -> str:
        """
        Normalize operator spellings.

        Raises:
            ValueError: If any other character is not allowed
        """
        normalized = ''.join(self.REPLACEMENTS.get(c, c) for c in expression)
        for c in normalized:
            if c not in self.ALLOWED_CHARS and not c.isspace():
                raise ValueError(f"Unexpected character {c!r}")
        return normalized

    def extract_numbers(self, expression: str) -> List[int]:
        """
        Extract all numbers from an expression.
        Returns list of integers found in the expression.
        """
        return [int(n) for n in re.findall(r'\d+', expression)]

    def validate_numbers(self, expression: str, available: List[int]) -> Tuple[bool, Optional[str]]:
        """
        Check if expression only uses available numbers (each once max).

        Args:
            expression: The mathematical expression
            available: List of available numbers to use

        Returns:
            Tuple of (is_valid, error_message or None)
        """
        available_counter = Counter(available)
        used_counter = Counter(self.extract_numbers(expression))

        for num, count in used_counter.items():
            if num not in available_counter:
                return False, f"Number {num} is not available"
            if count > available_counter[num]:
                return False, f"Number {num} used more times than available"

        return True, None

    def _to_expression(self, node: ast.AST) -> Expression:
        """
        Recursively convert an AST node into an expression tree.

        Raises:
            ValueError: If an unsupported construct is encountered
        """
        if isinstance(node, ast.Expression):
            return self._to_expression(node.body)

        if isinstance(node, ast.Constant):
            # bool is an int subclass but never a valid number here
            if not isinstance(node.value, int) or isinstance(node.value, bool):
                raise ValueError("Only whole numbers allowed")
            if node.value <= 0:
                raise ValueError("Numbers must be positive")
            return Leaf(node.value)

        if isinstance(node, ast.BinOp):
            op_type = type(node.op)
            if op_type not in self.AST_OPERATORS:
                raise ValueError(f"Operator not allowed: {op_type.__name__}")
            return Node(self.AST_OPERATORS[op_type],
                        self._to_expression(node.left),
                        self._to_expression(node.right))

        if isinstance(node, ast.UnaryOp):
            raise ValueError("Unary operators not allowed")

        raise ValueError("Invalid expression structure")

    def parse(self, expression: str) -> Expression:
        """
        Parse an infix expression into a tree.

        Raises:
            ValueError: If the expression is empty, too long or malformed
        """
        clean_expr = self.normalize(expression)
        if not clean_expr.strip():
            raise ValueError("Empty expression")
        if len(self.extract_numbers(clean_expr)) > self.MAX_NUMBERS:
            raise ValueError("Expression too long")

        try:
            tree = ast.parse(clean_expr.strip(), mode='eval')
            return self._to_expression(tree)
        except SyntaxError as e:
            raise ValueError(f"Invalid syntax: {e.msg}") from e
        except RecursionError as e:
            # deeply nested parentheses
            raise ValueError("Expression too long") from e

    def check(self, expression: str, available_numbers: List[int], target: int) -> Dict[str, Any]:
        """
        Complete validation of a player's answer.

        Args:
            expression: The answer as typed
            available_numbers: List of numbers the player can use
            target: The number to reach

        Returns:
            Dictionary with:
            - valid: bool, the expression is a legal Countdown expression
            - result: int or None
            - error: str or None
            - numbers_used: list of numbers used
            - solved: bool, valid and equal to the target
            - expression: canonical rendering, or None
        """
        result = {
            'valid': False,
            'result': None,
            'error': None,
            'numbers_used': [],
            'solved': False,
            'expression': None,
        }

        try:
            clean_expr = self.normalize(expression)
        except ValueError as e:
            result['error'] = str(e)
            return result
        result['numbers_used'] = self.extract_numbers(clean_expr)

        is_valid, error = self.validate_numbers(clean_expr, available_numbers)
        if not is_valid:
            result['error'] = error
            return result

        try:
            tree = self.parse(clean_expr)
        except ValueError as e:
            result['error'] = str(e)
            return result

        value = evaluate(tree)
        if value is None:
            result['error'] = "Every step must give a positive whole number"
            return result

        result['valid'] = True
        result['result'] = value
        result['expression'] = render(tree)
        result['solved'] = value == target
        return result
