from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class Either[L, R]:
    """A value of one of two types, held as either a Left or a Right.

    Neither side means failure; ``fold`` and ``for_each`` dispatch to the
    function for whichever side is present and let its exceptions propagate.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"{cls.__qualname__} cannot extend Either; "
                f"its only variants are Left and Right"
            )

    def is_left(self) -> bool:
        match self:
            case Left():
                return True
            case Right():
                return False

    def is_right(self) -> bool:
        match self:
            case Left():
                return False
            case Right():
                return True

    def left(self) -> L:
        match self:
            case Left(value):
                return value
            case Right():
                raise ValueError("Right has no left value")

    def right(self) -> R:
        match self:
            case Left():
                raise ValueError("Left has no right value")
            case Right(value):
                return value

    def get(self) -> L | R:
        """Return whichever value is present."""
        match self:
            case Left(value) | Right(value):
                return value

    def fold[T](
        self,
        on_left: Callable[[L], T],
        on_right: Callable[[R], T],
        /,
    ) -> T:
        match self:
            case Left(value):
                return on_left(value)
            case Right(value):
                return on_right(value)

    def for_each(
        self,
        on_left: Callable[[L], Any],
        on_right: Callable[[R], Any],
        /,
    ) -> None:
        match self:
            case Left(value):
                on_left(value)
            case Right(value):
                on_right(value)


@dataclass(frozen=True, repr=False)
class Left[L, R](Either[L, R]):
    value: L

    def __repr__(self):
        return f"Left({self.value!r})"


@dataclass(frozen=True, repr=False)
class Right[L, R](Either[L, R]):
    value: R

    def __repr__(self):
        return f"Right({self.value!r})"


def left[L, R](value: L, /) -> Either[L, R]:
    return Left(value)


def right[L, R](value: R, /) -> Either[L, R]:
    return Right(value)
