import dataclasses as dc
import typing as t

import typing_extensions as te

from safely import exceptions
from safely.utils.types import U

T_co = t.TypeVar('T_co', covariant=True)
E_co = t.TypeVar('E_co', covariant=True)

RT = t.TypeVar('RT')
RE = t.TypeVar('RE')


@te.final
@dc.dataclass(frozen=True)
class Success(t.Generic[T_co]):
    """Call ended normally and produced ``data``."""

    data: T_co
    success: t.ClassVar[te.Literal[True]] = True

    def __bool__(self) -> bool:
        return True

    def map(self, fn: t.Callable[[T_co], U]) -> 'Success[U]':
        return Success(fn(self.data))

    def map_error(self, fn: t.Callable[[t.Any], t.Any]) -> 'Success[T_co]':
        return self

    def unwrap(self) -> T_co:
        return self.data

    def unwrap_or(self, default: U) -> t.Union[T_co, U]:
        return self.data


@te.final
@dc.dataclass(frozen=True)
class Failure(t.Generic[E_co]):
    """Call ended with an error.

    ``error`` is whatever the callee reported on its own, the value returned
    by the error handler for a raised exception or ``None`` when no
    handler was given.
    """

    error: E_co
    success: t.ClassVar[te.Literal[False]] = False

    def __bool__(self) -> bool:
        return False

    def map(self, fn: t.Callable[[t.Any], t.Any]) -> 'Failure[E_co]':
        return self

    def map_error(self, fn: t.Callable[[E_co], U]) -> 'Failure[U]':
        return Failure(fn(self.error))

    def unwrap(self) -> te.NoReturn:
        raise exceptions.UnwrapFailedError(self)

    def unwrap_or(self, default: U) -> U:
        return default


Result = t.Union[Success[T_co], Failure[E_co]]


def is_success(r: Result[RT, RE]) -> te.TypeGuard[Success[RT]]:
    return r.success


def is_failure(r: Result[RT, RE]) -> te.TypeGuard[Failure[RE]]:
    return not r.success
