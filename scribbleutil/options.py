"""Command line option definitions and a small option parser.

Options are recognised in the forms ``--name``, ``--name=value``,
``--name value`` (for options taking a value), ``-c`` and ``-c value``.
Anything not starting with ``-`` is collected as a remaining argument.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


class OptionError(RuntimeError):
    """The command line contains an unknown option or lacks a value."""


@dataclass(frozen=True)
class OptionDef:
    """Definition of one command line option."""

    long_option: str | None
    short_option: str | None = None
    has_value: bool = False
    description: str | None = None

    def __post_init__(self) -> None:
        if self.short_option is not None and len(self.short_option) != 1:
            raise ValueError("short option must be a single character")

    @property
    def has_long_option(self) -> bool:
        return self.long_option is not None

    @property
    def has_short_option(self) -> bool:
        return self.short_option is not None

    @property
    def has_description(self) -> bool:
        return self.description is not None


@dataclass(frozen=True)
class OptionResult:
    """One recognised option: its index in the definitions and its value.

    An index of -1 means the end of the command line was reached; such
    a result is false in a boolean context.
    """

    index: int
    value: str | None = None

    def __bool__(self) -> bool:
        return self.index >= 0


class OptionParser:
    """Walk a command line, yielding recognised options one at a time.

    *argv* is the full command line; its first element (the program
    name) is skipped.
    """

    def __init__(self, options: Iterable[OptionDef], argv: Sequence[str]) -> None:
        self._options = list(options)
        self._args: deque[str] = deque(argv[1:])
        self._remaining: list[str] = []

    def _shift_value(self, arg: str, option: OptionDef) -> str | None:
        if not option.has_value:
            return None
        if not self._args:
            raise OptionError(f"Value expected after {arg}")
        return self._args.popleft()

    def _identify(self, arg: str) -> OptionResult:
        if arg.startswith("--"):
            name = arg[2:]
            for index, option in enumerate(self._options):
                if option.long_option is None or not name.startswith(option.long_option):
                    continue
                rest = name[len(option.long_option):]
                if not rest:
                    return OptionResult(index, self._shift_value(arg, option))
                if rest.startswith("="):
                    return OptionResult(index, rest[1:])
        elif len(arg) == 2:
            for index, option in enumerate(self._options):
                if option.short_option is not None and arg[1] == option.short_option:
                    return OptionResult(index, self._shift_value(arg, option))

        raise OptionError(f"Unknown option: {arg}")

    def next(self) -> OptionResult:
        """Return the next option, or a false result at the end.

        Raises :class:`OptionError` on an unknown option or a missing value.
        """
        while self._args:
            arg = self._args.popleft()
            if arg.startswith("-"):
                return self._identify(arg)
            self._remaining.append(arg)
        return OptionResult(-1, None)

    def __iter__(self) -> Iterator[OptionResult]:
        while result := self.next():
            yield result

    def remaining(self) -> list[str]:
        """The non-option arguments seen so far."""
        return list(self._remaining)