from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

if TYPE_CHECKING:
    from .jonad import Jonad

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Chunk(Generic[T]):
    """Immutable, re-iterable sequence produced by ``Jonad.stream()``.

    ``flat_map`` accepts any iterable result, so a function returning a
    container collapses empties away::

        Chunk.of("1", "x", "3").flat_map(lambda s: Jonad.of(s).try_map(int).filter(lambda v: isinstance(v, int)))
    """
    _items: Tuple[T, ...]

    @staticmethod
    def of(*items: T) -> "Chunk[T]":
        return Chunk(tuple(items))

    @staticmethod
    def from_iterable(items: Iterable[T]) -> "Chunk[T]":
        return Chunk(tuple(items))

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> List[T]:
        return list(self._items)

    def map(self, f: Callable[[T], U]) -> "Chunk[U]":
        return Chunk(tuple(f(x) for x in self._items))

    def flat_map(self, f: Callable[[T], Iterable[U]]) -> "Chunk[U]":
        out: List[U] = []
        for x in self._items:
            out.extend(f(x))
        return Chunk(tuple(out))

    def filter(self, p: Callable[[T], bool]) -> "Chunk[T]":
        return Chunk(tuple(x for x in self._items if p(x)))

    def head(self) -> "Jonad[T]":
        from .jonad import Jonad
        return Jonad.of(self._items[0]) if self._items else Jonad.empty()

    def find(self, p: Callable[[T], bool]) -> "Jonad[T]":
        from .jonad import Jonad
        for x in self._items:
            if p(x):
                return Jonad.of(x)
        return Jonad.empty()
