"""Plain-text output of values and whitespace-separated token input."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterable, Iterator, TextIO, Union

_SEQUENCES = (list, deque, tuple)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, _SEQUENCES)


def _render(value: Any, scalar: Callable[[Any], str]) -> str:
    if isinstance(value, tuple):
        return " ".join(_render(item, scalar) for item in value)
    if isinstance(value, (list, deque)):
        items = list(value)
        sep = "\n" if items and all(_is_sequence(item) for item in items) else " "
        return sep.join(_render(item, scalar) for item in items)
    return scalar(value)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return str(int(value))
    return str(value)


def format_value(value: Any) -> str:
    """Render a value for output.

    Tuples and flat lists are joined by spaces; a list whose items are all
    sequences puts one item per line.
    """
    return _render(value, _scalar_text)


def format_indices(value: Any, base: int = 1) -> str:
    """Like :func:`format_value`, but with ``base`` added to every number."""
    return _render(value, lambda x: _scalar_text(x + base))


class TokenReader:
    """Reads whitespace-separated tokens from a string or a text stream."""

    def __init__(self, source: Union[str, TextIO, Iterable[str]]) -> None:
        lines = [source] if isinstance(source, str) else source
        self._tokens: Iterator[str] = (
            token for line in lines for token in line.split()
        )

    def __iter__(self) -> Iterator[str]:
        return self._tokens

    def next_token(self) -> str:
        """Return the next token; raise EOFError when input is exhausted."""
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("no more tokens") from None

    def read(self, kind: Callable[[str], Any] = int) -> Any:
        """Read one token converted with ``kind``."""
        return kind(self.next_token())

    def read_list(self, count: int, kind: Callable[[str], Any] = int) -> list[Any]:
        """Read ``count`` tokens converted with ``kind``."""
        return [self.read(kind) for _ in range(count)]

    def read_tuple(self, *args: Callable[[str], Any]) -> tuple[Any, ...]:
        """Read one token per converter given, in order."""
        return tuple(self.read(kind) for kind in args)

    def read_index(self, base: int = 1) -> int:
        """Read an integer written with offset ``base`` and return it zero-based."""
        return self.read(int) - base

    def read_index_list(self, count: int, base: int = 1) -> list[int]:
        """Read ``count`` indices written with offset ``base``."""
        return [self.read_index(base) for _ in range(count)]