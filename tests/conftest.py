import logging
import typing as t

from _pytest import logging as _logging
from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def safely_logger() -> t.Generator[None, None, None]:
    logger.enable('safely')
    yield
    logger.disable('safely')


@pytest.fixture
def caplog(
        caplog: _logging.LogCaptureFixture,
) -> t.Generator[_logging.LogCaptureFixture, None, None]:
    class LoguruHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            logging.getLogger(record.name).handle(record)

    handler_id = logger.add(
        LoguruHandler(),
        format='{message}',
        level='DEBUG',
    )
    caplog.set_level(logging.DEBUG)
    yield caplog
    logger.remove(handler_id)
