import functools
import inspect
import typing as t

from safely import boundary
from safely.result import Result, Success
from safely.utils import types
from safely.utils.types import E, EH, P, T

# awaitable overloads go first, plain ``T`` matches coroutines too


@t.overload
def safe_fn(
    fn: t.Callable[P, t.Awaitable[Result[T, E]]],
    handler: None = None,
) -> t.Callable[P, t.Awaitable[Result[T, t.Optional[E]]]]:
    ...  # pragma: no cover


@t.overload
def safe_fn(
    fn: t.Callable[P, t.Awaitable[Result[T, E]]],
    handler: types.ErrorHandler[EH],
) -> t.Callable[P, t.Awaitable[Result[T, t.Union[E, EH]]]]:
    ...  # pragma: no cover


@t.overload
def safe_fn(
    fn: t.Callable[P, Result[T, E]],
    handler: None = None,
) -> t.Callable[P, Result[T, t.Optional[E]]]:
    ...  # pragma: no cover


@t.overload
def safe_fn(
    fn: t.Callable[P, Result[T, E]],
    handler: types.ErrorHandler[EH],
) -> t.Callable[P, Result[T, t.Union[E, EH]]]:
    ...  # pragma: no cover


def safe_fn(
    fn: types.AnyCallable,
    handler: t.Optional[types.ErrorHandler[t.Any]] = None,
) -> types.AnyCallable:
    """Makes a callable that returns a result instead of raising.

    ``fn`` is expected to return a result (or an awaitable of one) on its
    own. The returned callable accepts exactly the same arguments. Whatever
    ``fn`` returns is handed back unchanged, only raised exceptions are turned
    into failures with ``handler``.

    Example::

        @safe_fn
        async def get_user(user_id: str) -> Result[User, str]:
            user = await db.find_user(user_id)
            if user is None:
                return Failure('USER_NOT_FOUND')
            return Success(user)

        result = await get_user('some-user-id')
        if result.success:
            print(result.data)

    """

    @functools.wraps(fn)
    def wrapper(*args: t.Any, **kwargs: t.Any) -> t.Any:
        try:
            outcome = fn(*args, **kwargs)
        except Exception as err:
            return boundary.convert(fn, err, handler)

        if inspect.isawaitable(outcome):
            return boundary.recover(fn, outcome, handler)

        return outcome

    return wrapper


@t.overload  # type: ignore
def from_unsafe(
    thunk: t.Callable[[], t.Awaitable[T]],
    handler: None = None,
) -> t.Awaitable[Result[T, None]]:
    ...  # pragma: no cover


@t.overload  # type: ignore
def from_unsafe(
    thunk: t.Callable[[], t.Awaitable[T]],
    handler: types.ErrorHandler[EH],
) -> t.Awaitable[Result[T, EH]]:
    ...  # pragma: no cover


@t.overload
def from_unsafe(
    thunk: t.Callable[[], T],
    handler: None = None,
) -> Result[T, None]:
    ...  # pragma: no cover


@t.overload
def from_unsafe(
    thunk: t.Callable[[], T],
    handler: types.ErrorHandler[EH],
) -> Result[T, EH]:
    ...  # pragma: no cover


def from_unsafe(
    thunk: t.Callable[[], t.Any],
    handler: t.Optional[types.ErrorHandler[t.Any]] = None,
) -> t.Any:
    """Calls ``thunk`` right away and wraps its outcome into a result.

    The shape follows ``thunk``: a plain value comes back as a result, an
    awaitable comes back as an awaitable of a result which never raises.
    Use :func:`from_unsafe_sync` or :func:`from_unsafe_async` to pin it.
    """
    try:
        outcome = thunk()
    except Exception as err:
        return boundary.convert(thunk, err, handler)

    if inspect.isawaitable(outcome):
        return boundary.recover(thunk, _as_success(outcome), handler)

    return Success(outcome)


@t.overload
def from_unsafe_sync(
    thunk: t.Callable[[], T],
    handler: None = None,
) -> Result[T, None]:
    ...  # pragma: no cover


@t.overload
def from_unsafe_sync(
    thunk: t.Callable[[], T],
    handler: types.ErrorHandler[EH],
) -> Result[T, EH]:
    ...  # pragma: no cover


def from_unsafe_sync(
    thunk: t.Callable[[], t.Any],
    handler: t.Optional[types.ErrorHandler[t.Any]] = None,
) -> Result[t.Any, t.Any]:
    """Synchronous only :func:`from_unsafe`.

    Whatever ``thunk`` returns, awaitables included, becomes the data of
    a success.
    """
    try:
        return Success(thunk())
    except Exception as err:
        return boundary.convert(thunk, err, handler)


@t.overload  # type: ignore
async def from_unsafe_async(
    thunk: t.Callable[[], t.Awaitable[T]],
    handler: None = None,
) -> Result[T, None]:
    ...  # pragma: no cover


@t.overload  # type: ignore
async def from_unsafe_async(
    thunk: t.Callable[[], t.Awaitable[T]],
    handler: types.ErrorHandler[EH],
) -> Result[T, EH]:
    ...  # pragma: no cover


@t.overload
async def from_unsafe_async(
    thunk: t.Callable[[], T],
    handler: None = None,
) -> Result[T, None]:
    ...  # pragma: no cover


@t.overload
async def from_unsafe_async(
    thunk: t.Callable[[], T],
    handler: types.ErrorHandler[EH],
) -> Result[T, EH]:
    ...  # pragma: no cover


async def from_unsafe_async(
    thunk: t.Callable[[], t.Any],
    handler: t.Optional[types.ErrorHandler[t.Any]] = None,
) -> Result[t.Any, t.Any]:
    """Asynchronous only :func:`from_unsafe`, always has to be awaited."""
    try:
        outcome = thunk()
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except Exception as err:
        return boundary.convert(thunk, err, handler)
    return Success(outcome)


@t.overload
def safe_return(
    thunk: t.Callable[[], t.Awaitable[Result[T, E]]],
    handler: None = None,
) -> t.Awaitable[Result[T, t.Optional[E]]]:
    ...  # pragma: no cover


@t.overload
def safe_return(
    thunk: t.Callable[[], t.Awaitable[Result[T, E]]],
    handler: types.ErrorHandler[EH],
) -> t.Awaitable[Result[T, t.Union[E, EH]]]:
    ...  # pragma: no cover


@t.overload
def safe_return(
    thunk: t.Callable[[], Result[T, E]],
    handler: None = None,
) -> t.Awaitable[Result[T, t.Optional[E]]]:
    ...  # pragma: no cover


@t.overload
def safe_return(
    thunk: t.Callable[[], Result[T, E]],
    handler: types.ErrorHandler[EH],
) -> t.Awaitable[Result[T, t.Union[E, EH]]]:
    ...  # pragma: no cover


def safe_return(
    thunk: t.Callable[[], t.Any],
    handler: t.Optional[types.ErrorHandler[t.Any]] = None,
) -> t.Awaitable[Result[t.Any, t.Any]]:
    """Calls ``thunk`` right away, its result comes back as an awaitable.

    The result ``thunk`` builds is returned as it is. Raised exceptions,
    including those raised while awaiting, end up as failures built by
    ``handler``. Always returns an awaitable, no matter what ``thunk`` is.
    """
    try:
        outcome = thunk()
    except Exception as err:
        return _ready(boundary.convert(thunk, err, handler))

    if inspect.isawaitable(outcome):
        return boundary.recover(thunk, outcome, handler)

    return _ready(t.cast(Result[t.Any, t.Any], outcome))


async def _ready(r: Result[T, t.Any]) -> Result[T, t.Any]:
    return r


async def _as_success(awaitable: t.Awaitable[T]) -> Success[T]:
    return Success(await awaitable)
