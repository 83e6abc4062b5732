import typing as t

import typing_extensions as te

if t.TYPE_CHECKING:  # pragma: no cover
    from safely.result import Failure


@te.final
class UnwrapFailedError(ValueError):
    __slots__ = ('_result', )

    def __init__(self, result: 'Failure[t.Any]') -> None:
        super().__init__(f'Called unwrap on a failure carrying error={result.error!r}')
        self._result = result

    @property
    def result(self) -> 'Failure[t.Any]':
        return self._result

    def __repr__(self) -> str:
        return f'UnwrapFailedError :: {self._result!r}'
