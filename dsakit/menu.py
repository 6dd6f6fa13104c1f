"""Café ordering menu: pick a category letter and an item number."""

from __future__ import annotations

import sys
from typing import Sequence

WELCOME = "Welcome to CCD!"
INVALID = "INVALID OPTION!"

MENU: dict[str, tuple[str, ...]] = {
    "c": ("Espresso Coffee", "Cappuccino coffee", "Latte Coffee"),
    "t": (
        "Plain Tea",
        "Assam Tea",
        "Ginger Tea",
        "Ginger Tea",
        "Cardamom Tea",
        "Masala Tea",
        "Lemon Tea",
        "Organic Darjeeling Tea",
    ),
    "s": (
        "Hot and Sour Soup",
        "Veg Corn Soup",
        "Tomato Soup",
        "Spicy Tomato Soup",
    ),
    "b": ("Hot Chocolate Drink", "Badam Drink", "Badam-Pista Drink"),
}


class InvalidOptionError(ValueError):
    """Raised for a category or item number that is not on the menu."""


def order(category: str, number: int) -> str:
    """Return the greeting line for item ``number`` of ``category``."""
    items = MENU.get(category.lower()) if len(category) == 1 else None
    if items is None or not 1 <= number <= len(items):
        raise InvalidOptionError(INVALID)
    return f"Enjoy your {items[number - 1]}!"


def _parse(text: str) -> tuple[str, int]:
    stripped = text.lstrip()
    category, rest = stripped[:1], stripped[1:].split()
    if not category or not rest:
        raise InvalidOptionError(INVALID)
    try:
        return category, int(rest[0])
    except ValueError as exc:
        raise InvalidOptionError(INVALID) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Read a category letter and item number, then print the order."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = " ".join(args) if args else sys.stdin.read()
    try:
        message = order(*_parse(text))
    except InvalidOptionError:
        print(INVALID)
    else:
        print(WELCOME)
        print(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())