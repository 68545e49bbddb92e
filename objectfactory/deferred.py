"""
Deferred

Lazy values that are evaluated at construction time
"""

from types import FunctionType
from typing import Any, Callable, Iterable, List


class Deferred:
    """A zero-argument computation standing in for a literal argument.

    When closure expansion is enabled, the factory replaces every top-level
    argument that is a Deferred (or a plain function / lambda) by the value
    it returns.

    Example::

        construct({
            'class': Repository,
            'args': [Deferred(lambda: open_connection('main'))],
        })
    """

    __slots__ = ('_func',)

    def __init__(self, func: Callable[[], Any]):
        if not callable(func):
            raise TypeError(f"Deferred expects a callable, got {type(func).__name__}")
        self._func = func

    def __call__(self) -> Any:
        return self._func()

    def __repr__(self) -> str:
        return f"Deferred({self._func!r})"


def deferred(func: Callable[[], Any]) -> Deferred:
    """Decorator form of :class:`Deferred`."""
    return Deferred(func)


def is_deferred(value: Any) -> bool:
    """Return True if ``value`` is expanded by :func:`expand_deferred`.

    Only Deferred instances and plain Python functions count. Classes,
    bound methods, builtins and other callable objects are passed through.
    """
    return isinstance(value, (Deferred, FunctionType))


def expand_deferred(values: Iterable[Any]) -> List[Any]:
    """Evaluate the lazy values in a flat argument list.

    Expansion is shallow: containers holding lazy values are left alone.

    Args:
        values: Assembled argument list

    Returns:
        A new list with each lazy value replaced by its result
    """
    return [value() if is_deferred(value) else value for value in values]
