from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, Optional, TypeVar

if TYPE_CHECKING:
    from .chunk import Chunk
    from .logger import ConsoleLogger
    from .option import Option

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)


class Monad(Generic[T]):
    """Capability set of a single-value container.

    A container is either present (holds exactly one non-``None`` value) or
    empty. Every operation returns a container or a plain value; none of
    them mutates the receiver. Callbacks run synchronously, at most once,
    and never on an empty container unless the operation is about emptiness.

    A present container may hold an error object. The error-shaped
    operators (``do_on_error``, ``on_error_map`` and friends) inspect the
    held value with :func:`jonad.errors.is_error` and leave every other
    container untouched.
    """

    def map(self, f: Callable[[T], U]) -> "Monad[U]":
        """Transform the held value.

        Args:
            f: Mapping function, not called when empty

        Returns:
            A container of ``f(value)``; empty if ``f`` returns ``None``
        """
        raise NotImplementedError

    def flat_map(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        """Replace this container with the one ``f`` builds from the value.

        Args:
            f: Function returning a container, not called when empty

        Returns:
            ``f(value)`` as returned, or empty
        """
        raise NotImplementedError

    def filter(self, f: Callable[[T], bool]) -> "Monad[T]":
        """Keep the value only if ``f(value)`` is truthy.

        Returns:
            This very container when the predicate holds, else empty
        """
        raise NotImplementedError

    def filter_when(self, f: Callable[[T], "Monad[bool]"]) -> "Monad[T]":
        """Like :meth:`filter` with a predicate that answers in a container.

        An empty answer rejects the value, the same as a held ``False``.

        Returns:
            This very container when the answer holds a truthy value, else empty
        """
        raise NotImplementedError

    def get_or_none(self) -> Optional[T]:
        """Return the value, or ``None`` when empty."""
        raise NotImplementedError

    def to_optional(self) -> "Option[T]":
        """Convert to ``Some(value)`` or ``NONE``."""
        raise NotImplementedError

    def stream(self) -> "Chunk[T]":
        """Convert to a one-element or zero-element ``Chunk``."""
        raise NotImplementedError

    def __iter__(self) -> Iterator[T]:
        return iter(self.stream())

    def get_or_default(self, t: T) -> T:
        """Return the value, or ``t`` when empty."""
        raise NotImplementedError

    def or_else_get(self, f: Callable[[], T]) -> T:
        """Return the value, or call ``f`` and return its result when empty."""
        raise NotImplementedError

    def or_else_raise(self, f: Optional[Callable[[], Any]] = None) -> T:
        """Return the value, or raise when empty.

        Args:
            f: Factory for the failure to raise. An exception is raised as
               is; any other value is raised wrapped in ``Failure``. Without
               a factory ``NoValueError`` is raised.

        Raises:
            Whatever the factory supplies, when empty
        """
        raise NotImplementedError

    def is_empty(self) -> bool:
        """Return True if this container holds no value."""
        raise NotImplementedError

    def do_if_empty(self, f: Callable[[], Any]) -> "Monad[T]":
        """Call ``f()`` for effect when empty; return this container."""
        raise NotImplementedError

    def do_if_present(self, f: Callable[[T], Any]) -> "Monad[T]":
        """Call ``f(value)`` for effect when present; return this container."""
        raise NotImplementedError

    def log(self, logger: "ConsoleLogger", label: str = "jonad", level: str = "DEBUG") -> "Monad[T]":
        """Write one record describing this container; return this container."""
        raise NotImplementedError

    def do_on_error(self, f: Callable[[E], Any], kind: Optional[type] = None) -> "Monad[T]":
        """Call ``f(error)`` for effect when holding an error.

        Args:
            f: Error consumer
            kind: If given, fire only when the value is an instance of ``kind``

        Returns:
            This container
        """
        raise NotImplementedError

    def do_on_error_matching(self, p: Callable[[E], bool], f: Callable[[E], Any]) -> "Monad[T]":
        """Call ``f(error)`` when holding an error that satisfies ``p``."""
        raise NotImplementedError

    def on_error_map(self, f: Callable[[E], U]) -> "Monad[U]":
        """Replace a held error with ``f(error)``.

        Returns:
            A container of ``f(error)`` when holding an error, else this container
        """
        raise NotImplementedError

    def on_error_map_matching(self, p: Callable[[E], bool], f: Callable[[E], U]) -> "Monad[U]":
        """Replace a held error that satisfies ``p`` with ``f(error)``."""
        raise NotImplementedError

    def on_error_flat_map(self, f: Callable[[E], "Monad[U]"]) -> "Monad[U]":
        """Replace a container holding an error with ``f(error)``."""
        raise NotImplementedError

    def on_error_flat_map_matching(self, p: Callable[[E], bool], f: Callable[[E], "Monad[U]"]) -> "Monad[U]":
        """Replace a container holding an error that satisfies ``p`` with ``f(error)``."""
        raise NotImplementedError

    def try_map(self, f: Callable[[T], U]) -> "Monad[U]":
        """Best-effort :meth:`map`.

        If ``f`` raises, the exception is discarded and this container is
        returned unchanged. Nothing is logged or re-raised.
        """
        raise NotImplementedError

    def switch_if_empty(self, u: "Monad[U]") -> "Monad[U]":
        """Return ``u`` when empty, else a container of the held value."""
        raise NotImplementedError

    def default_if_empty(self, u: U) -> "Monad[U]":
        """Return a container of ``u`` when empty, else of the held value."""
        raise NotImplementedError
