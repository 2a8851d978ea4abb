from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from .chunk import Chunk
from .errors import Failure, NoValueError, is_error
from .logger import ConsoleLogger
from .monad import Monad
from .option import NONE, Option, OptionLike, Some

T = TypeVar("T")
U = TypeVar("U")


class Jonad(Monad[T]):
    """The container: ``Present(value)`` or ``EMPTY``.

    Build one with the constructors rather than the variants::

        Jonad.of(user_id).map(load_user).filter(is_active).get_or_none()

    ``None`` is never held: wrapping it, or mapping to it, gives ``EMPTY``.
    """

    @staticmethod
    def of(val: Optional[T]) -> "Jonad[T]":
        return Present(val) if val is not None else EMPTY  # type: ignore[return-value]

    @staticmethod
    def empty() -> "Jonad[T]":
        return EMPTY  # type: ignore[return-value]

    @staticmethod
    def from_supplier(f: Callable[[], Optional[T]]) -> "Jonad[T]":
        return Jonad.of(f())

    @staticmethod
    def or_empty(val: Any) -> "Jonad[Any]":
        # Unwraps one level of Option (or any OptionLike); the element type is not checked.
        if val is None:
            return EMPTY
        if isinstance(val, OptionLike):
            return Jonad.of(val.get()) if val.is_some() else EMPTY
        return Jonad.of(val)

    def map(self, f: Callable[[T], U]) -> "Jonad[U]":
        if self.is_empty():
            return EMPTY  # type: ignore[return-value]
        return Jonad.of(f(self.value))  # type: ignore[attr-defined]

    def flat_map(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        if self.is_empty():
            return EMPTY  # type: ignore[return-value]
        return f(self.value)  # type: ignore[attr-defined]

    def filter(self, f: Callable[[T], bool]) -> "Jonad[T]":
        if self.is_empty() or not f(self.value):  # type: ignore[attr-defined]
            return EMPTY  # type: ignore[return-value]
        return self

    def filter_when(self, f: Callable[[T], "Monad[bool]"]) -> "Jonad[T]":
        if self.is_empty() or f(self.value).filter(bool).is_empty():  # type: ignore[attr-defined]
            return EMPTY  # type: ignore[return-value]
        return self

    def get_or_none(self) -> Optional[T]:
        return None if self.is_empty() else self.value  # type: ignore[attr-defined]

    def to_optional(self) -> Option[T]:
        return NONE if self.is_empty() else Some(self.value)  # type: ignore[attr-defined,return-value]

    def stream(self) -> Chunk[T]:
        return Chunk.of() if self.is_empty() else Chunk.of(self.value)  # type: ignore[attr-defined]

    def get_or_default(self, t: T) -> T:
        return t if self.is_empty() else self.value  # type: ignore[attr-defined]

    def or_else_get(self, f: Callable[[], T]) -> T:
        return f() if self.is_empty() else self.value  # type: ignore[attr-defined]

    def or_else_raise(self, f: Optional[Callable[[], Any]] = None) -> T:
        if not self.is_empty():
            return self.value  # type: ignore[attr-defined]
        if f is None:
            raise NoValueError()
        err = f()
        if isinstance(err, BaseException):
            raise err
        raise Failure(err)

    def do_if_empty(self, f: Callable[[], Any]) -> "Jonad[T]":
        if self.is_empty():
            f()
        return self

    def do_if_present(self, f: Callable[[T], Any]) -> "Jonad[T]":
        if not self.is_empty():
            f(self.value)  # type: ignore[attr-defined]
        return self

    def log(self, logger: ConsoleLogger, label: str = "jonad", level: str = "DEBUG") -> "Jonad[T]":
        if self.is_empty():
            logger.log(level, label, state="empty")
        elif is_error(self.value):  # type: ignore[attr-defined]
            logger.log("ERROR", label, state="error", kind=type(self.value).__name__, error=str(self.value))  # type: ignore[attr-defined]
        else:
            logger.log(level, label, state="present", value=repr(self.value))  # type: ignore[attr-defined]
        return self

    def _in_error(self) -> bool:
        return not self.is_empty() and is_error(self.value)  # type: ignore[attr-defined]

    def do_on_error(self, f: Callable[[Any], Any], kind: Optional[type] = None) -> "Jonad[T]":
        if kind is None:
            if self._in_error():
                f(self.value)  # type: ignore[attr-defined]
        elif not self.is_empty() and isinstance(self.value, kind):  # type: ignore[attr-defined]
            f(self.value)  # type: ignore[attr-defined]
        return self

    def do_on_error_matching(self, p: Callable[[Any], bool], f: Callable[[Any], Any]) -> "Jonad[T]":
        if self._in_error() and p(self.value):  # type: ignore[attr-defined]
            f(self.value)  # type: ignore[attr-defined]
        return self

    def on_error_map(self, f: Callable[[Any], U]) -> "Jonad[U]":
        if self._in_error():
            return Jonad.of(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def on_error_map_matching(self, p: Callable[[Any], bool], f: Callable[[Any], U]) -> "Jonad[U]":
        if self._in_error() and p(self.value):  # type: ignore[attr-defined]
            return Jonad.of(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def on_error_flat_map(self, f: Callable[[Any], "Monad[U]"]) -> "Monad[U]":
        if self._in_error():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def on_error_flat_map_matching(self, p: Callable[[Any], bool], f: Callable[[Any], "Monad[U]"]) -> "Monad[U]":
        if self._in_error() and p(self.value):  # type: ignore[attr-defined]
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def try_map(self, f: Callable[[T], U]) -> "Jonad[U]":
        if self.is_empty():
            return self  # type: ignore[return-value]
        try:
            return Jonad.of(f(self.value))  # type: ignore[attr-defined]
        except Exception:
            # absorbed: the original container is the fallback
            return self  # type: ignore[return-value]

    def switch_if_empty(self, u: "Monad[U]") -> "Monad[U]":
        if self.is_empty():
            return u
        return Jonad.of(self.value)  # type: ignore[attr-defined]

    def default_if_empty(self, u: Optional[U]) -> "Jonad[U]":
        if self.is_empty():
            return Jonad.of(u)
        return Jonad.of(self.value)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Present(Jonad[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Present cannot hold None; use Jonad.of or Jonad.empty")

    def is_empty(self) -> bool: return False


class _Empty(Jonad[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "Empty"
    def __eq__(self, other: object) -> bool: return isinstance(other, _Empty)
    def __hash__(self) -> int: return hash(_Empty)
    def __reduce__(self) -> str: return "EMPTY"
    def is_empty(self) -> bool: return True


EMPTY: Jonad[Any] = _Empty()


of = Jonad.of
empty = Jonad.empty
from_supplier = Jonad.from_supplier
or_empty = Jonad.or_empty
