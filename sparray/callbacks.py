import inspect
from typing import Any, Callable, Optional

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def positional_arity(func: Callable, default: int) -> Optional[int]:
    """
    number of positional arguments func accepts, None when it takes *args.
    callables without an inspectable signature (many builtins and types) get `default`.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return default

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in _POSITIONAL:
            count += 1
    return count


def bind(func: Callable, max_args: int, default: int = 1) -> Callable[..., Any]:
    """
    wrap a callback so it can always be called with `max_args` positional arguments,
    forwarding only the leading ones it declares. `lambda x: ...`, `lambda x, i: ...`
    and `lambda x, i, s: ...` all work wherever (element, index, sparray) is supplied.
    """
    arity = positional_arity(func, default)
    if arity is None or arity >= max_args:
        return func
    return lambda *args: func(*args[:arity])
