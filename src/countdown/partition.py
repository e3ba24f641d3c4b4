from typing import Iterator, Tuple, TypeVar

from .lazy import LazySequence, lazy

T = TypeVar('T')

Split = Tuple[Tuple[T, ...], Tuple[T, ...]]


@lazy
def split(seq: Tuple[T, ...]) -> Iterator[Split]:
    """All (prefix, suffix) pairs that concatenate to seq, shortest prefix first."""
    yield (), seq
    if seq:
        head, tail = seq[0], seq[1:]
        for ls, rs in split(tail):
            yield (head,) + ls, rs


def non_empty_split(seq: Tuple[T, ...]) -> LazySequence[Split]:
    return split(seq).filter(lambda pair: bool(pair[0]) and bool(pair[1]))
