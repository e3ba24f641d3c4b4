"""
Command-line driver for the Countdown numbers solver.

Commands:
- solve: read a target and numbers, print every way to make the target
- check: verify a player's answer
- random: deal a solvable puzzle
"""

import logging
import random
import sys
from typing import List, Optional

import click
import redis
from dotenv import load_dotenv

from config.config import Config
from countdown import CountdownSolver, ExpressionParser, PuzzleGenerator, render
from db.redis_client import SolutionCache
from utils.helpers import describe_solution_count, describe_stopped_search, read_problem

logger = logging.getLogger("countdown")


def _parse_numbers(ctx, param, value: str) -> List[int]:
    try:
        numbers = [int(n) for n in value.replace(',', ' ').split()]
    except ValueError:
        raise click.BadParameter("numbers must be whole numbers, e.g. 1,3,7,10,25,50") from None
    if not numbers or any(n <= 0 for n in numbers):
        raise click.BadParameter("give at least one positive number")
    return numbers


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """The Countdown numbers game solver."""
    load_dotenv()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        ctx.obj = Config()
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None,
              help="Stop after this many solutions")
@click.option("--naive", is_flag=True, help="Use the unpruned reference search")
@click.option("--cache", "use_cache", is_flag=True, help="Reuse solutions stored in Redis")
@click.pass_obj
def solve(config: Config, source, limit: Optional[int], naive: bool, use_cache: bool) -> None:
    """Print every way to make a target from some numbers.

    SOURCE holds the target followed by the numbers, separated by whitespace
    (standard input by default).
    """
    if source.isatty():
        click.echo("The Countdown Problem", err=True)
        click.echo("Please enter a positive natural number, then some positive natural numbers", err=True)
        click.echo("(each on its own line) ending with end-of-file:", err=True)

    try:
        target, numbers = read_problem(source)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if len(numbers) > config.max_numbers:
        logger.warning("Searching %d numbers (more than %d) may take a very long time",
                       len(numbers), config.max_numbers)

    click.echo(f"I can make {target} from these numbers in the following ways:")

    cache = None
    # Only complete result lists are cached
    if use_cache and limit is None and not naive:
        cache = SolutionCache(config.redis_host, config.redis_port, config.cache_ttl)
        try:
            cached = cache.get_solutions(numbers, target)
        except redis.exceptions.RedisError as e:
            logger.warning("Solution cache unavailable, searching without it: %s", e)
            cache, cached = None, None
        if cached is not None:
            for line in cached:
                click.echo(f"\t {line}")
            click.echo(describe_solution_count(len(cached)))
            return

    solutions = CountdownSolver(optimized=not naive).solve(numbers, target)
    if limit is not None:
        solutions = solutions.take(limit)

    found = []
    for expression in solutions:
        line = render(expression)
        found.append(line)
        click.echo(f"\t {line}")

    if limit is not None and len(found) == limit:
        # Stopped early, there may be more
        click.echo(describe_stopped_search(len(found)))
    else:
        click.echo(describe_solution_count(len(found)))

    if cache is not None:
        try:
            cache.set_solutions(numbers, target, found)
        except redis.exceptions.RedisError as e:
            logger.warning("Could not store solutions: %s", e)


@cli.command()
@click.argument("expression")
@click.option("--target", "-t", type=click.IntRange(min=1), required=True, help="Number to reach")
@click.option("--numbers", "-n", required=True, callback=_parse_numbers,
              help="Available numbers, e.g. 1,3,7,10,25,50")
def check(expression: str, target: int, numbers: List[int]) -> None:
    """Check whether EXPRESSION makes the target from the numbers."""
    result = ExpressionParser().check(expression, numbers, target)

    if not result['valid']:
        click.echo(f"Invalid: {result['error']}")
        sys.exit(1)
    if not result['solved']:
        click.echo(f"{result['expression']} = {result['result']}, "
                   f"{abs(target - result['result'])} away from {target}")
        sys.exit(1)
    click.echo(f"{result['expression']} = {target}")


@cli.command(name="random")
@click.option("--seed", type=int, default=None, help="Seed for a repeatable deal")
@click.option("--show-solution", is_flag=True, help="Also print one solution")
@click.option("--attempts", type=click.IntRange(min=1), default=20,
              help="Deals to try before giving up")
@click.pass_obj
def random_puzzle(config: Config, seed: Optional[int], show_solution: bool, attempts: int) -> None:
    """Deal a puzzle that has at least one solution."""
    generator = PuzzleGenerator(config.rules, random.Random(seed))
    try:
        puzzle, solution = generator.generate_solvable(attempts)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Numbers: {' '.join(str(n) for n in puzzle.numbers)}")
    click.echo(f"Target: {puzzle.target}")
    if show_solution:
        click.echo(f"Solution: {render(solution)}")


if __name__ == "__main__":
    cli()
