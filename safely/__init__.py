from loguru import logger

from safely.boundary import make_failure
from safely.exceptions import UnwrapFailedError
from safely.functions import (
    from_unsafe,
    from_unsafe_async,
    from_unsafe_sync,
    safe_fn,
    safe_return,
)
from safely.result import (Failure, is_failure, is_success, Result, Success)

__all__ = (
    'Failure',
    'from_unsafe',
    'from_unsafe_async',
    'from_unsafe_sync',
    'is_failure',
    'is_success',
    'make_failure',
    'Result',
    'safe_fn',
    'safe_return',
    'Success',
    'UnwrapFailedError',
)

# library, applications opt in with logger.enable('safely')
logger.disable(__name__)
