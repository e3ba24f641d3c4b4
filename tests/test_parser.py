"""Tests for parsing and checking typed answers."""

import pytest

from countdown.expression import Leaf, Node, render
from countdown.operators import Operator
from countdown.parser import ExpressionParser
from countdown.solver import solve


@pytest.fixture
def parser():
    return ExpressionParser()


class TestParse:
    """Test conversion of text into expression trees."""

    def test_classic(self, parser, classic_solution):
        assert parser.parse("(25 - 10) * (1 + 50)") == classic_solution

    def test_left_associative(self, parser):
        assert parser.parse("1 + 2 + 3") == Node(
            Operator.ADD, Node(Operator.ADD, Leaf(1), Leaf(2)), Leaf(3))

    def test_alternative_symbols(self, parser):
        assert parser.normalize("25 x 4") == "25 * 4"
        assert parser.parse("12 ÷ [1 + 3]") == Node(
            Operator.DIV, Leaf(12), Node(Operator.ADD, Leaf(1), Leaf(3)))

    def test_rendered_solutions_parse_back(self, parser):
        for expression in solve([2, 3, 7], 17):
            assert parser.parse(render(expression)) == expression

    @pytest.mark.parametrize("text,message", [
        ("", "Empty expression"),
        ("1 +", "Invalid syntax"),
        ("-5 + 3", "Unary operators not allowed"),
        ("0 + 5", "Numbers must be positive"),
        ("2 ** 3", "Operator not allowed: Pow"),
        ("7 // 2", "Operator not allowed: FloorDiv"),
        ("2a5 + 1", "Unexpected character 'a'"),
        ("1 + " * 100 + "1", "Expression too long"),
        ("(" * 5000 + "1" + ")" * 5000, "Expression too long|Invalid syntax"),
    ])
    def test_rejects(self, parser, text, message):
        with pytest.raises(ValueError, match=message):
            parser.parse(text)


class TestCheck:
    """Test checking a player's answer."""

    def test_solved(self, parser, board):
        result = parser.check("(25-10)*(1+50)", board, 765)
        assert result['valid']
        assert result['solved']
        assert result['result'] == 765
        assert result['expression'] == "(25 - 10) * (1 + 50)"
        assert result['numbers_used'] == [25, 10, 1, 50]

    def test_valid_but_not_solved(self, parser, board):
        result = parser.check("25 + 50", board, 765)
        assert result['valid']
        assert not result['solved']
        assert result['result'] == 75

    def test_unavailable_number(self, parser, board):
        result = parser.check("100 * 7", board, 700)
        assert not result['valid']
        assert result['error'] == "Number 100 is not available"

    def test_number_reused(self, parser, board):
        result = parser.check("25 * 25", board, 625)
        assert not result['valid']
        assert "used more times" in result['error']

    @pytest.mark.parametrize("text", ["(3 - 7) + 10", "7 / 2", "(10 - 10) + 3"])
    def test_illegal_steps(self, parser, text):
        result = parser.check(text, [2, 3, 7, 10, 10], 6)
        assert not result['valid']
        assert result['error'] == "Every step must give a positive whole number"

    def test_syntax_error(self, parser, board):
        result = parser.check("(1 + 3", board, 4)
        assert not result['valid']
        assert result['error'].startswith("Invalid syntax")

    def test_letters_do_not_join_digits(self, parser):
        result = parser.check("2a5 + 1e0", [25, 10], 35)
        assert not result['valid']
        assert not result['solved']
        assert result['error'] == "Unexpected character 'a'"

    def test_very_long_expression(self, parser):
        result = parser.check("+".join(["1"] * 3000), [1] * 3000, 3000)
        assert not result['valid']
        assert result['error'] == "Expression too long"
