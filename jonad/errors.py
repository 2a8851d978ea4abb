from __future__ import annotations
import contextvars
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Tuple, TypeVar

E = TypeVar("E")

_DEFAULT_KINDS: Tuple[type, ...] = (BaseException,)
_error_kinds: contextvars.ContextVar[Tuple[type, ...]] = contextvars.ContextVar(
    "jonad_error_kinds", default=_DEFAULT_KINDS
)


class Failure(Exception, Generic[E]):
    def __init__(self, error: E):
        super().__init__(repr(error)); self.error = error


class NoValueError(Failure[str], LookupError):
    def __init__(self, message: str = "no value present"):
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.error)


def current_error_kinds() -> Tuple[type, ...]:
    return _error_kinds.get()


def is_error(value: Any) -> bool:
    """Return True if ``value`` belongs to one of the configured error kinds.

    ``None`` is never an error: an empty container has nothing to inspect.
    """
    if value is None:
        return False
    return isinstance(value, current_error_kinds())


@contextmanager
def error_kinds(*kinds: type, replace: bool = False) -> Iterator[Tuple[type, ...]]:
    """Scope which stored values the error-shaped operators treat as errors.

    By default every ``BaseException`` counts. Extra kinds are added for the
    duration of the block, or the set is swapped out entirely with
    ``replace=True``. The previous setting is restored on exit.

    Example:
        ```python
        @dataclass(frozen=True)
        class Problem:
            reason: str

        with error_kinds(Problem):
            Jonad.of(Problem("late")).on_error_map(lambda p: p.reason)  # Present(value='late')
        ```
    """
    for k in kinds:
        if not isinstance(k, type):
            raise TypeError(f"error kind must be a type, got {k!r}")
    new = tuple(dict.fromkeys(kinds if replace else current_error_kinds() + kinds))
    token = _error_kinds.set(new)
    try:
        yield new
    finally:
        _error_kinds.reset(token)
