"""A bounded collection of integers that reports the gaps between them."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator, Sequence

_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_UNDERLINE = "\033[4m"
_RESET = "\033[0m"
_SEPARATOR = f"{_CYAN}-----------------------------{_RESET}\n"


class SpanFullError(OverflowError):
    """Raised when adding numbers would exceed the span's capacity."""


class SpanTooSmallError(ValueError):
    """Raised when fewer than two numbers are stored for a span query."""


class Span:
    """Holds at most ``max_size`` integers and measures their spread."""

    __slots__ = ("_max_size", "_numbers")

    def __init__(self, max_size: int = 0) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._numbers: list[int] = []

    @property
    def max_size(self) -> int:
        """The number of integers this span can hold."""
        return self._max_size

    def __iter__(self) -> Iterator[int]:
        return iter(self._numbers)

    def __len__(self) -> int:
        return len(self._numbers)

    def __repr__(self) -> str:
        return f"Span(max_size={self._max_size}, numbers={self._numbers!r})"

    def add_number(self, number: int) -> None:
        """Store one number, or raise SpanFullError if there is no room."""
        if len(self._numbers) >= self._max_size:
            raise SpanFullError("Span is full")
        self._numbers.append(number)

    def add_range(self, values: Iterable[int]) -> None:
        """Store all of ``values`` at once, or none of them if they do not fit."""
        incoming = list(values)
        if len(self._numbers) + len(incoming) > self._max_size:
            raise SpanFullError("Adding this range would exceed the span capacity!")
        self._numbers.extend(incoming)

    def _require_pair(self) -> None:
        if len(self._numbers) < 2:
            raise SpanTooSmallError("Not enough numbers to compute a span")

    def shortest_span(self) -> int:
        """Return the smallest distance between any two stored numbers."""
        self._require_pair()
        ordered = sorted(self._numbers)
        return min(high - low for low, high in zip(ordered, ordered[1:]))

    def longest_span(self) -> int:
        """Return the distance between the smallest and largest numbers."""
        self._require_pair()
        return max(self._numbers) - min(self._numbers)


def _press_enter() -> None:
    print(f"{_YELLOW}Press ENTER to continue...{_RESET}", flush=True)
    sys.stdin.readline()


def _print_spans(span: Span) -> None:
    print(f"Shortest Span: {span.shortest_span()}")
    print(f"Longest Span : {span.longest_span()}")


def _demo_basic() -> None:
    print(f"{_UNDERLINE}🔍 Basic Span Test{_RESET}")
    span = Span(5)
    for number in (6, 3, 17, 9, 11):
        span.add_number(number)
    print("Numbers in Span: " + "".join(f"{n} " for n in span))
    _print_spans(span)


def _demo_too_few() -> None:
    print(f"{_UNDERLINE}💣 Exception for not enough numbers{_RESET}")
    span = Span(3)
    span.add_number(42)
    for query in (span.shortest_span, span.longest_span):
        try:
            query()
        except SpanTooSmallError as exc:
            print(f"Caught: {exc}", file=sys.stderr)


def _demo_big() -> None:
    print(f"{_UNDERLINE}🚀 Big Span Test (10000 elements){_RESET}")
    span = Span(10000)
    for i in range(10000):
        span.add_number(i * 3)
    _print_spans(span)


def _demo_overfill() -> None:
    print(f"{_UNDERLINE}🚫 Overfill Test{_RESET}")
    span = Span(2)
    span.add_number(1)
    span.add_number(2)
    try:
        span.add_number(3)
    except SpanFullError as exc:
        print(f"Caught: {exc}", file=sys.stderr)


def _demo_add_range() -> None:
    print("📥 Add Range Test")
    span = Span(6)
    values = [5, 15, 25, 35]
    print(f"Adding range from {values[0]} to {values[-1]}")
    span.add_range(values)
    span.add_number(1)
    span.add_number(50)
    _print_spans(span)


_DEMOS: tuple[tuple[str, Callable[[], None]], ...] = (
    ("Basic Span", _demo_basic),
    ("Too Few Elements", _demo_too_few),
    ("Big Span", _demo_big),
    ("Overfill", _demo_overfill),
    ("Test add Range", _demo_add_range),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive Span demonstration."""
    for name, demo in _DEMOS:
        print(_SEPARATOR)
        print(f"🧪 Running Test: {name}\n")
        demo()
        print(_SEPARATOR)
        _press_enter()
    return 0


if __name__ == "__main__":
    sys.exit(main())