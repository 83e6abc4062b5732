import asyncio

from _pytest import logging
import pytest
import pytest_mock as ptm

from safely import boundary
from safely import Failure, make_failure, Success


def test_make_failure_without_handler() -> None:
    assert make_failure(ValueError('x')) == Failure(None)


def test_make_failure_calls_handler_once(mocker: ptm.MockerFixture) -> None:
    raw_error = ValueError('x')
    handler = mocker.Mock(return_value='ERR')

    r = make_failure(raw_error, handler)

    assert r == Failure('ERR')
    handler.assert_called_once_with(raw_error)


def test_make_failure_does_not_catch_handler_errors() -> None:
    def handler(err: Exception) -> str:
        raise RuntimeError('broken handler') from err

    with pytest.raises(RuntimeError, match='broken handler'):
        make_failure(ValueError('x'), handler)


def test_convert_logs(caplog: logging.LogCaptureFixture) -> None:
    def unlucky() -> None:
        ...

    r = boundary.convert(unlucky, KeyError('k'), lambda e: 'ERR')

    assert r == Failure('ERR')
    assert 'Caught KeyError from' in caplog.text
    assert 'test_convert_logs.<locals>.unlucky' in caplog.text
    assert 'handler=yes' in caplog.text


async def test_recover_passes_value_through(mocker: ptm.MockerFixture) -> None:
    handler = mocker.Mock()

    async def fine() -> Failure[str]:
        return Failure('own-error')

    r = await boundary.recover(fine, fine(), handler)

    assert r == Failure('own-error')
    handler.assert_not_called()


async def test_recover_converts_failed_future(mocker: ptm.MockerFixture) -> None:
    raw_error = ValueError('x')
    handler = mocker.Mock(return_value='ERR')

    future: asyncio.Future = asyncio.get_running_loop().create_future()
    future.set_exception(raw_error)

    r = await boundary.recover(lambda: future, future, handler)

    assert r == Failure('ERR')
    handler.assert_called_once_with(raw_error)


async def test_recover_lets_cancellation_through() -> None:
    async def cancelled() -> Success[int]:
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await boundary.recover(cancelled, cancelled())
