"""
Orderings and selections of the input numbers.

All sequences are tuples. Nothing here removes duplicates: equal numbers at
different positions give distinct (if equal-valued) permutations.
"""

from typing import Iterator, Tuple, TypeVar

from .lazy import LazySequence, lazy

T = TypeVar('T')


@lazy
def interleave(item: T, seq: Tuple[T, ...]) -> Iterator[Tuple[T, ...]]:
    """Every way of inserting item into seq, from the front backwards."""
    yield (item,) + seq
    if seq:
        head, tail = seq[0], seq[1:]
        for rest in interleave(item, tail):
            yield (head,) + rest


@lazy
def permute(seq: Tuple[T, ...]) -> Iterator[Tuple[T, ...]]:
    """All len(seq)! orderings of seq."""
    if not seq:
        yield ()
        return
    head, tail = seq[0], seq[1:]
    for perm in permute(tail):
        yield from interleave(head, perm)


def subsequences(seq: Tuple[T, ...]) -> LazySequence[Tuple[T, ...]]:
    """
    All 2**len(seq) order-preserving sub-sequences of seq.

    Sub-sequences without the first element come first, then the same ones
    with it prepended.
    """
    if not seq:
        return LazySequence.singleton(())
    head, tail = seq[0], seq[1:]
    ys = subsequences(tail).cached()
    return ys.concat(ys.map(lambda y: (head,) + y))


def subbags(seq: Tuple[T, ...]) -> LazySequence[Tuple[T, ...]]:
    """Every selection of the numbers, in every order."""
    return subsequences(tuple(seq)).flat_map(permute)
