from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from typing import cast

# Faults that no capturing operation will turn into a Failure.
FATAL_EXCEPTIONS: tuple[type[BaseException], ...] = (
    MemoryError,
    RecursionError,
    AssertionError,
)


class FailureError(RuntimeError):
    """Raised when the value of a Failure is requested with ``get()``."""

    def __init__(self, cause: BaseException):
        super().__init__(f"Failure has no value: {cause!r}")
        self.cause = cause


class Try[T]:
    """The outcome of a computation: either a Success or a Failure.

    Success and Failure are the only variants. Every transformation comes
    in two flavors: the plain one lets an exception raised by the given
    function propagate, while the ``try_`` one turns it into a Failure.
    ``fold`` and ``for_each`` are terminal and always propagate.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"{cls.__qualname__} cannot extend Try; "
                f"its only variants are Success and Failure"
            )

    @staticmethod
    def success[U](value: U, /) -> "Try[U]":
        return Success(value)

    @staticmethod
    def failure[U](cause: BaseException, /) -> "Try[U]":
        return Failure(cause)

    @staticmethod
    def exec[**A, U](
        fn: Callable[A, U], /, *args: A.args, **kwargs: A.kwargs
    ) -> "Try[U]":
        """Call ``fn`` and wrap what it returns, or the exception it raises."""
        try:
            value = fn(*args, **kwargs)
        except FATAL_EXCEPTIONS:
            raise
        except Exception as exception:
            return Failure(exception)
        return Success(value)

    @staticmethod
    def flat_exec[**A, U](
        fn: Callable[A, "Try[U]"], /, *args: A.args, **kwargs: A.kwargs
    ) -> "Try[U]":
        """Call ``fn`` and return its Try, or a Failure if it raises.

        A Failure returned by ``fn`` is passed through as is.
        """
        try:
            result = fn(*args, **kwargs)
        except FATAL_EXCEPTIONS:
            raise
        except Exception as exception:
            return Failure(exception)
        return _ensure_try(result, fn)

    def is_success(self) -> bool:
        match self:
            case Success():
                return True
            case Failure():
                return False

    def is_failure(self) -> bool:
        return not self.is_success()

    def get(self) -> T:
        match self:
            case Success(value):
                return value
            case Failure(cause):
                raise FailureError(cause) from cause

    def get_or_raise(self) -> T:
        """Return the value, or raise the original cause itself."""
        match self:
            case Success(value):
                return value
            case Failure(cause):
                raise cause

    def get_or_else(self, default: T, /) -> T:
        match self:
            case Success(value):
                return value
            case Failure():
                return default

    def get_or_call(self, fn: Callable[[], T], /) -> T:
        """Return the value, or the result of calling ``fn`` on a Failure.

        ``fn`` is never called for a Success.
        """
        match self:
            case Success(value):
                return value
            case Failure():
                return fn()

    def exception(self) -> BaseException | None:
        match self:
            case Success():
                return None
            case Failure(cause):
                return cause

    def to_optional(self) -> T | None:
        match self:
            case Success(value):
                return value
            case Failure():
                return None

    def map[U](self, fn: Callable[[T], U], /) -> "Try[U]":
        match self:
            case Success(value):
                return Success(fn(value))
            case Failure():
                return cast(Try[U], self)

    def try_map[U](self, fn: Callable[[T], U], /) -> "Try[U]":
        match self:
            case Success(value):
                return Try.exec(fn, value)
            case Failure():
                return cast(Try[U], self)

    def recover(self, fn: Callable[[BaseException], T], /) -> "Try[T]":
        match self:
            case Success():
                return self
            case Failure(cause):
                return Success(fn(cause))

    def try_recover(self, fn: Callable[[BaseException], T], /) -> "Try[T]":
        match self:
            case Success():
                return self
            case Failure(cause):
                return Try.exec(fn, cause)

    def flat_map[U](self, fn: Callable[[T], "Try[U]"], /) -> "Try[U]":
        match self:
            case Success(value):
                return _ensure_try(fn(value), fn)
            case Failure():
                return cast(Try[U], self)

    def try_flat_map[U](self, fn: Callable[[T], "Try[U]"], /) -> "Try[U]":
        match self:
            case Success(value):
                return Try.flat_exec(fn, value)
            case Failure():
                return cast(Try[U], self)

    def flat_recover(self, fn: Callable[[BaseException], "Try[T]"], /) -> "Try[T]":
        match self:
            case Success():
                return self
            case Failure(cause):
                return _ensure_try(fn(cause), fn)

    def try_flat_recover(
        self, fn: Callable[[BaseException], "Try[T]"], /
    ) -> "Try[T]":
        match self:
            case Success():
                return self
            case Failure(cause):
                return Try.flat_exec(fn, cause)

    def fold[U](
        self,
        on_success: Callable[[T], U],
        on_failure: Callable[[BaseException], U],
        /,
    ) -> U:
        match self:
            case Success(value):
                return on_success(value)
            case Failure(cause):
                return on_failure(cause)

    def for_each(
        self,
        on_success: Callable[[T], Any],
        on_failure: Callable[[BaseException], Any],
        /,
    ) -> None:
        match self:
            case Success(value):
                on_success(value)
            case Failure(cause):
                on_failure(cause)


@dataclass(frozen=True, repr=False)
class Success[T](Try[T]):
    value: T

    def __repr__(self):
        return f"Success({self.value!r})"


@dataclass(frozen=True, repr=False)
class Failure[T](Try[T]):
    cause: BaseException

    def __post_init__(self):
        if self.cause is None:
            raise TypeError("A Failure requires a cause, got None")
        if not isinstance(self.cause, BaseException):
            raise TypeError(
                f"A Failure cause must be an exception, "
                f"got: {type(self.cause).__name__}"
            )

    def __repr__(self):
        return f"Failure({self.cause!r})"


def _ensure_try[U](result: Try[U], fn: Callable[..., Any]) -> Try[U]:
    if not isinstance(result, Try):
        raise TypeError(
            f"{getattr(fn, '__qualname__', fn)!s} must return a Try, "
            f"got: {type(result).__name__}"
        )
    return result


success = Try.success
failure = Try.failure
