"""Conversions between safely results and ``returns`` containers.

``returns`` models the same idea with ``Success``/``Failure`` containers,
these helpers let both live side by side without manual unpacking.
"""
import typing as t

from returns import result as rr

from safely.result import Failure, Result, Success
from safely.utils.types import E, T


def to_returns(r: Result[T, E]) -> rr.Result[T, E]:
    if isinstance(r, Success):
        return rr.Success(r.data)
    return rr.Failure(r.error)


def from_returns(container: rr.Result[T, E]) -> Result[T, E]:
    if isinstance(container, rr.Success):
        return Success(container.unwrap())
    elif isinstance(container, rr.Failure):
        return Failure(container.failure())
    raise TypeError(
        f'Expected returns.result.Result container, but got {type(container)!r}',
    )


__all__ = (
    'from_returns',
    'to_returns',
)
