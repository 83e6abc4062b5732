import typing as t

import typing_extensions as te

AnyCallable = t.Callable[..., t.Any]

T = t.TypeVar('T')
T.__doc__ = 'Value produced by a successful call'

U = t.TypeVar('U')
U.__doc__ = 'Target type of a transformation'

E = t.TypeVar('E')
E.__doc__ = 'Error carried by a failure the callee built on its own'

EH = t.TypeVar('EH')
EH.__doc__ = 'Error produced by a user supplied error handler'

P = te.ParamSpec('P')

ErrorHandler = t.Callable[[Exception], EH]


def callable_name(fn: AnyCallable) -> str:
    name = getattr(fn, '__qualname__', None) or getattr(fn, '__name__', None)
    if not name:
        return repr(fn)
    module = getattr(fn, '__module__', None)
    return f'{module}.{name}' if module else str(name)
