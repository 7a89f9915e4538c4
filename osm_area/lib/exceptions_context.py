import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, cast, override

from osm_area.exceptions import Exceptions

_DEFAULT = Exceptions()
_CTX: ContextVar[Exceptions] = ContextVar('Exceptions', default=_DEFAULT)  # noqa: B039


def current_exceptions() -> Exceptions:
    """Get the exceptions implementation active in the current context."""
    return _CTX.get()


@contextmanager
def exceptions_context(implementation: Exceptions | type[Exceptions]) -> Iterator[Exceptions]:
    """
    Install a host-specific exceptions implementation for the duration of the block.

    Accepts either an instance or an Exceptions subclass, which is instantiated.
    Outside of any block, the library's own ExtractError family is raised.
    """
    if isinstance(implementation, type):
        implementation = implementation()
    logging.debug('Using %s for raising', type(implementation).__qualname__)
    token = _CTX.set(implementation)
    try:
        yield implementation
    finally:
        _CTX.reset(token)


class _RaiseFor:
    @override
    def __getattribute__(self, name: str) -> Any:
        return getattr(_CTX.get(), name)


raise_for = cast(Exceptions, cast(object, _RaiseFor()))

__all__ = ('current_exceptions', 'exceptions_context', 'raise_for')
