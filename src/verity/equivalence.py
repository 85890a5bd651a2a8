"""Equivalence relations used by the collection checks.

An equivalence decides whether an expected element and a found element count
as equal for one comparison. Both sides may have different types, so a check
can compare, for example, domain objects against the dicts a service returned.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T", contravariant=True)
K = TypeVar("K", contravariant=True)


class Equivalence(Protocol[T, K]):
    """All relations passed to the collection checks must conform to this protocol.

    Implementations should be stateless, reflexive and give the same answer
    for the same pair on repeated calls. The checks do not verify this.
    """

    def equals(self, first: T, second: K) -> bool: ...


class NativeEquivalence:
    """Relation that delegates to the elements' own ``==``.

    ``None`` is only equal to ``None``.
    """

    def equals(self, first: Any, second: Any) -> bool:
        if first is None:
            return second is None
        return bool(first == second)

    def __repr__(self) -> str:
        return "NATIVE"


class FunctionEquivalence(Generic[T, K]):
    """Adapt a plain two-argument predicate to the :class:`Equivalence` protocol.

    Parameters
    ----------
    predicate : Callable[[T, K], bool]
        Called with the expected element first and the found element second.
    name : str | None
        Label used in ``repr``; defaults to the predicate's ``__name__``.
    """

    def __init__(self, predicate: Callable[[T, K], bool], name: str | None = None) -> None:
        self._predicate = predicate
        self.name = name or getattr(predicate, "__name__", repr(predicate))

    def equals(self, first: T, second: K) -> bool:
        return bool(self._predicate(first, second))

    def __repr__(self) -> str:
        return f"FunctionEquivalence({self.name})"


NATIVE = NativeEquivalence()


def relation(predicate: Callable[[T, K], bool]) -> FunctionEquivalence[T, K]:
    """Turn a predicate into an equivalence; usable as a decorator."""
    return FunctionEquivalence(predicate)


__all__ = ["NATIVE", "Equivalence", "FunctionEquivalence", "NativeEquivalence", "relation"]
