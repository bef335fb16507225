"""Locate a value inside any iterable container."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Any

_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"
_SEPARATOR = f"{_CYAN}-----------------------------{_RESET}\n"


class ValueNotFoundError(LookupError):
    """Raised when the searched value is not in the container."""


def easyfind(container: Iterable[Any], value: Any) -> int:
    """Return the position of the first element equal to ``value``.

    Raises ValueNotFoundError when no element matches.
    """
    for position, element in enumerate(container):
        if element == value:
            return position
    raise ValueNotFoundError("Value not found")


def _press_enter() -> None:
    print(f"{_YELLOW}Press ENTER to continue...{_RESET}", flush=True)
    sys.stdin.readline()


def _report(kind: str, container: Sequence[int], value: int) -> None:
    try:
        position = easyfind(container, value)
    except ValueNotFoundError as exc:
        print(f"❌ Exception: {exc}", file=sys.stderr)
    else:
        print(f"✅ Found in {kind}: {container[position]}")


def _demo_vector() -> None:
    _report("vector", [10, 20, 30, 42, 50], 42)


def _demo_list() -> None:
    _report("list", [1, 2, 3, 4], 3)


def _demo_not_found() -> None:
    _report("vector", [1, 2, 3, 4], 42)


_DEMOS: tuple[tuple[str, Callable[[], None]], ...] = (
    ("Test Vector", _demo_vector),
    ("Test List", _demo_list),
    ("Test Not Found", _demo_not_found),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive easyfind demonstration."""
    for name, demo in _DEMOS:
        print(_SEPARATOR)
        print(f"🔍 {name}\n")
        demo()
        print(_SEPARATOR)
        _press_enter()
    return 0


if __name__ == "__main__":
    sys.exit(main())