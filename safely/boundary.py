import typing as t

from loguru import logger

from safely.result import Failure, Result
from safely.utils import types
from safely.utils.types import EH, T


@t.overload
def make_failure(
    raw_error: Exception,
    handler: None = None,
) -> Failure[None]:
    ...  # pragma: no cover


@t.overload
def make_failure(
    raw_error: Exception,
    handler: types.ErrorHandler[EH],
) -> Failure[EH]:
    ...  # pragma: no cover


def make_failure(
    raw_error: Exception,
    handler: t.Optional[types.ErrorHandler[t.Any]] = None,
) -> Failure[t.Any]:
    """Builds the failure for a raised exception.

    The handler, when given, is called exactly once with ``raw_error`` and
    its return value becomes the error. Anything it raises is not caught.
    Without a handler the error is ``None``.
    """
    if handler is None:
        return Failure(None)
    return Failure(handler(raw_error))


def convert(
    fn: types.AnyCallable,
    raw_error: Exception,
    handler: t.Optional[types.ErrorHandler[t.Any]] = None,
) -> Failure[t.Any]:
    logger.opt(lazy=True).debug(
        'Caught {exc_type} from {fn}, converting into failure (handler={handler})',
        exc_type=lambda: type(raw_error).__name__,
        fn=lambda: types.callable_name(fn),
        handler=lambda: 'yes' if handler is not None else 'no',
    )
    return make_failure(raw_error, handler)


async def recover(
    fn: types.AnyCallable,
    awaitable: t.Awaitable[Result[T, t.Any]],
    handler: t.Optional[types.ErrorHandler[t.Any]] = None,
) -> Result[T, t.Any]:
    try:
        return await awaitable
    except Exception as err:
        return convert(fn, err, handler)
