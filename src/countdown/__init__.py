# Countdown numbers game solver
from .expression import Expression, Leaf, Node, Result, evaluate, is_solution, render, values
from .lazy import LazySequence
from .operators import OPERATORS, Operator
from .parser import ExpressionParser
from .puzzle import Puzzle, PuzzleGenerator
from .solver import CountdownSolver, solve, solve_naive

__all__ = [
    'CountdownSolver',
    'Expression',
    'ExpressionParser',
    'LazySequence',
    'Leaf',
    'Node',
    'OPERATORS',
    'Operator',
    'Puzzle',
    'PuzzleGenerator',
    'Result',
    'evaluate',
    'is_solution',
    'render',
    'solve',
    'solve_naive',
    'values',
]
