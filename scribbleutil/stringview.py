"""Lightweight views over sequences and strings.

A :class:`BufferView` refers to a window ``[start, end)`` of an
underlying sequence without copying it; shrinking the view only moves
its bounds.  :class:`StringView` adds string operations on top of that.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar, Union

from scribbleutil.charutil import is_whitespace_or_null
from scribbleutil.strings import (
    string_compare,
    string_ends_with_ignore_case,
    string_is_equal_ignore_case,
    string_starts_with_ignore_case,
)

T = TypeVar("T")


class BufferView(Generic[T]):
    """A read-only window onto a sequence."""

    def __init__(self, data: Sequence[T], start: int = 0, end: int | None = None) -> None:
        if end is None:
            end = len(data)
        if not 0 <= start <= end <= len(data):
            raise ValueError(
                f"invalid view bounds [{start}, {end}) for a sequence of length {len(data)}"
            )
        self._data = data
        self._start = start
        self._end = end

    @property
    def start(self) -> int:
        """Offset of the first element within the underlying sequence."""
        return self._start

    @property
    def end(self) -> int:
        """Offset just past the last element within the underlying sequence."""
        return self._end

    def __len__(self) -> int:
        return self._end - self._start

    def __iter__(self) -> Iterator[T]:
        for i in range(self._start, self._end):
            yield self._data[i]

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise ValueError("views do not support slice steps")
            stop = max(start, stop)
            return type(self)(self._data, self._start + start, self._start + stop)
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("view index out of range")
        return self._data[self._start + index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def empty(self) -> bool:
        return self._start == self._end

    def contains(self, item: Any) -> bool:
        """Does any element of the view compare equal to *item*?"""
        return any(item == element for element in self)

    def _require_not_empty(self) -> None:
        if self.empty():
            raise IndexError("view is empty")

    def front(self) -> T:
        """Return the first element; the view must not be empty."""
        self._require_not_empty()
        return self._data[self._start]

    def back(self) -> T:
        """Return the last element; the view must not be empty."""
        self._require_not_empty()
        return self._data[self._end - 1]

    def pop_front(self) -> None:
        """Drop the first element from the view."""
        self._require_not_empty()
        self._start += 1

    def pop_back(self) -> None:
        """Drop the last element from the view."""
        self._require_not_empty()
        self._end -= 1

    def shift(self) -> T:
        """Drop the first element and return it."""
        result = self.front()
        self.pop_front()
        return result

    def skip_front(self, n: int) -> None:
        """Drop the first *n* elements."""
        if not 0 <= n <= len(self):
            raise ValueError(f"cannot skip {n} elements of a view of length {len(self)}")
        self._start += n


def _text(value: Union[str, "StringView"]) -> str:
    return str(value)


class StringView(BufferView[str]):
    """A window onto a string with comparison and trimming operations."""

    def __init__(self, data: str = "", start: int = 0, end: int | None = None) -> None:
        super().__init__(data, start, end)

    def __str__(self) -> str:
        return self._data[self._start:self._end]  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"StringView({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, StringView)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def find(self, ch: str) -> int | None:
        """Index of the first occurrence of *ch* within the view, or None."""
        index = self._data.find(ch, self._start, self._end)  # type: ignore[attr-defined]
        return None if index < 0 else index - self._start

    def find_last(self, ch: str) -> int | None:
        """Index of the last occurrence of *ch* within the view, or None."""
        index = self._data.rfind(ch, self._start, self._end)  # type: ignore[attr-defined]
        return None if index < 0 else index - self._start

    def split(self, ch: str) -> tuple["StringView", "StringView | None"]:
        """Split at the first *ch*; without one, return the whole view and None."""
        index = self.find(ch)
        if index is None:
            return StringView(self._data, self._start, self._end), None  # type: ignore[arg-type]
        separator = self._start + index
        return (
            StringView(self._data, self._start, separator),  # type: ignore[arg-type]
            StringView(self._data, separator + len(ch), self._end),  # type: ignore[arg-type]
        )

    def starts_with(self, needle: Union[str, "StringView"]) -> bool:
        return str(self).startswith(_text(needle))

    def ends_with(self, needle: Union[str, "StringView"]) -> bool:
        return str(self).endswith(_text(needle))

    def compare(self, other: Union[str, "StringView"]) -> int:
        """Three-way comparison: negative, zero or positive."""
        return string_compare(str(self), _text(other))

    def equals(self, other: Union[str, "StringView"]) -> bool:
        return str(self) == _text(other)

    def starts_with_ignore_case(self, needle: Union[str, "StringView"]) -> bool:
        return string_starts_with_ignore_case(str(self), _text(needle))

    def ends_with_ignore_case(self, needle: Union[str, "StringView"]) -> bool:
        return string_ends_with_ignore_case(str(self), _text(needle))

    def equals_ignore_case(self, other: Union[str, "StringView"]) -> bool:
        return string_is_equal_ignore_case(str(self), _text(other))

    def strip_left(self) -> None:
        """Skip all whitespace (and null characters) at the beginning."""
        while not self.empty() and is_whitespace_or_null(self.front()):
            self.pop_front()

    def strip_right(self) -> None:
        """Skip all whitespace (and null characters) at the end."""
        while not self.empty() and is_whitespace_or_null(self.back()):
            self.pop_back()

    def strip(self) -> None:
        self.strip_left()
        self.strip_right()

    def skip_prefix(self, needle: Union[str, "StringView"]) -> bool:
        """Drop *needle* from the front if present; report whether it was."""
        text = _text(needle)
        match = self.starts_with(text)
        if match:
            self.skip_front(len(text))
        return match

    def remove_suffix(self, needle: Union[str, "StringView"]) -> bool:
        """Drop *needle* from the end if present; report whether it was."""
        text = _text(needle)
        match = self.ends_with(text)
        if match:
            self._end -= len(text)
        return match