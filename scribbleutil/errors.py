"""Helpers for chained exceptions and errno-based OS errors.

An exception is "nested" inside another when it is the other's
``__cause__``, as set by ``raise new from old`` or by
:func:`nest_exception`.
"""

from __future__ import annotations

import errno
import sys
from collections.abc import Iterator
from typing import Any, TextIO, TypeVar

E = TypeVar("E", bound=BaseException)

DEFAULT_FALLBACK = "Unknown exception"
DEFAULT_SEPARATOR = "; "


def _chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and every exception nested inside it, outermost first."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__


def _message(exc: BaseException) -> str:
    text = str(exc)
    return text if text else type(exc).__name__


def nest_exception(cause: BaseException, exc: E) -> E:
    """Wrap *cause* inside *exc* and return *exc*."""
    exc.__cause__ = cause
    return exc


def find_nested(exc: BaseException, exc_type: type[E]) -> E | None:
    """Return the first instance of *exc_type* in the chain of *exc*, or None."""
    for item in _chain(exc):
        if isinstance(item, exc_type):
            return item
    return None


def get_full_message(
    exc: Any,
    fallback: str = DEFAULT_FALLBACK,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Join the messages of an exception and all exceptions nested in it.

    A plain string is returned unchanged; anything that is neither a
    string nor an exception yields *fallback*.
    """
    if isinstance(exc, str):
        return exc
    if not isinstance(exc, BaseException):
        return fallback
    return separator.join(_message(item) for item in _chain(exc))


def print_exception(exc: Any, file: TextIO | None = None) -> None:
    """Print an exception and its nested exceptions, one per line."""
    out = sys.stderr if file is None else file
    if isinstance(exc, str):
        print(exc, file=out)
    elif isinstance(exc, BaseException):
        for item in _chain(exc):
            print(_message(item), file=out)
    else:
        print("Unrecognized exception", file=out)


def make_errno(code: int, msg: str) -> OSError:
    """Create an :class:`OSError` for the errno value *code*."""
    return OSError(code, msg)


def format_errno(code: int, fmt: str, *args: Any) -> OSError:
    """Create an :class:`OSError` with a printf-style formatted message."""
    return make_errno(code, fmt % args if args else fmt)


def is_errno(exc: BaseException, code: int) -> bool:
    """Is *exc* an OS error carrying the errno value *code*?"""
    return isinstance(exc, OSError) and exc.errno == code


def is_file_not_found(exc: BaseException) -> bool:
    return is_errno(exc, errno.ENOENT)


def is_path_not_found(exc: BaseException) -> bool:
    return is_errno(exc, errno.ENOTDIR)


def is_access_denied(exc: BaseException) -> bool:
    return is_errno(exc, errno.EACCES)