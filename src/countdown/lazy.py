"""
Lazy, re-iterable sequences for the Countdown search.

A LazySequence never computes an element before a consumer asks for it.
It wraps a factory that builds a fresh iterator, so the same sequence can be
walked any number of times and always yields the same elements in the same
order.
"""

import functools
import itertools
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar('T')
U = TypeVar('U')

_MISSING = object()


class _Memo(Generic[T]):
    """Shared state behind a cached() sequence."""

    def __init__(self, source: Iterator[T]):
        self.source = source
        self.items: List[T] = []
        self.exhausted = False

    def replay(self) -> Iterator[T]:
        i = 0
        while True:
            if i < len(self.items):
                yield self.items[i]
                i += 1
                continue
            if self.exhausted:
                return
            item = next(self.source, _MISSING)
            if item is _MISSING:
                self.exhausted = True
                return
            self.items.append(item)


class LazySequence(Generic[T]):
    """
    A finite sequence whose elements are produced on demand.

    Every transformation returns a new LazySequence and does no work until
    iterated.
    """

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())

    def __repr__(self) -> str:
        return f"<LazySequence {self._factory!r}>"

    # ==================== CONSTRUCTORS ====================

    @classmethod
    def empty(cls) -> 'LazySequence[T]':
        return cls(lambda: iter(()))

    @classmethod
    def singleton(cls, item: T) -> 'LazySequence[T]':
        return cls(lambda: iter((item,)))

    @classmethod
    def cons(cls, head: T, tail: Iterable[T]) -> 'LazySequence[T]':
        """Sequence of head followed by the elements of tail."""
        return cls(lambda: itertools.chain((head,), tail))

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'LazySequence[T]':
        """
        Wrap an existing iterable.

        The iterable must itself be re-iterable (a tuple, list or another
        LazySequence) for the result to be.
        """
        if isinstance(iterable, LazySequence):
            return iterable
        return cls(lambda: iter(iterable))

    @classmethod
    def concat_all(cls, *seqs: Iterable[T]) -> 'LazySequence[T]':
        return cls(lambda: itertools.chain(*seqs))

    @classmethod
    def flatten(cls, seqs: Iterable[Iterable[T]]) -> 'LazySequence[T]':
        """Concatenate a sequence of sequences, in order."""
        return cls(lambda: itertools.chain.from_iterable(seqs))

    # ==================== TRANSFORMATIONS ====================

    def concat(self, other: Iterable[T]) -> 'LazySequence[T]':
        return LazySequence.concat_all(self, other)

    def map(self, fn: Callable[[T], U]) -> 'LazySequence[U]':
        return LazySequence(lambda: map(fn, self))

    def flat_map(self, fn: Callable[[T], Iterable[U]]) -> 'LazySequence[U]':
        return LazySequence.flatten(self.map(fn))

    def filter(self, pred: Callable[[T], bool]) -> 'LazySequence[T]':
        return LazySequence(lambda: filter(pred, self))

    def take(self, k: int) -> 'LazySequence[T]':
        """First k elements; never pulls element k+1 from the source."""
        if k < 0:
            raise ValueError("take() needs a non-negative count")
        return LazySequence(lambda: itertools.islice(self, k))

    def cached(self) -> 'LazySequence[T]':
        """
        Memoizing view of this sequence.

        Elements are pulled from one shared iterator only as far as any
        consumer has asked, and replayed for later iterations.
        """
        memo: Optional[_Memo[T]] = None

        def factory() -> Iterator[T]:
            nonlocal memo
            if memo is None:
                memo = _Memo(iter(self))
            return memo.replay()

        return LazySequence(factory)

    # ==================== CONSUMERS ====================

    def first(self, default: Optional[T] = None) -> Optional[T]:
        return next(iter(self), default)

    def is_empty(self) -> bool:
        return next(iter(self), _MISSING) is _MISSING

    def to_list(self) -> List[T]:
        return list(self)

    def count(self) -> int:
        total = 0
        for _ in self:
            total += 1
        return total


def lazy(fn: Callable[..., Iterator[T]]) -> Callable[..., LazySequence[T]]:
    """Make a generator function return a re-iterable LazySequence."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs) -> LazySequence[T]:
        return LazySequence(lambda: fn(*args, **kwargs))

    return wrapper
