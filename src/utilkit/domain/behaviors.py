"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final, TypeVar

from .enums import Day, DayType
from .errors import InvalidArgumentError
from .models import Product, RatedItem, Vehicle

T = TypeVar("T")

#: Lowest rating kept by :func:`filter_by_rating`.
MIN_RATING: Final[float] = 4

_WEEKEND: Final[frozenset[Day]] = frozenset({Day.SATURDAY, Day.SUNDAY})


def format_string(text: str, to_upper: bool | None = None) -> str:
    """Return *text* uppercased unless ``to_upper`` is explicitly ``False``.

    An omitted flag (``None``) behaves like ``True``; only an explicit
    ``False`` switches to lowercase.

    Example:
        >>> format_string("Hello")
        'HELLO'
        >>> format_string("Hello", False)
        'hello'
    """
    if to_upper is False:
        return text.lower()
    return text.upper()


def filter_by_rating(items: Iterable[RatedItem]) -> list[RatedItem]:
    """Keep items rated at least :data:`MIN_RATING`, preserving order.

    Example:
        >>> filter_by_rating([RatedItem("A", 5), RatedItem("B", 2)])
        [RatedItem(title='A', rating=5)]
    """
    return [item for item in items if item.rating >= MIN_RATING]


def concatenate_arrays(*sequences: Iterable[T]) -> list[T]:
    """Concatenate every sequence into one list in argument order.

    Example:
        >>> concatenate_arrays([1, 2], [3], [])
        [1, 2, 3]
        >>> concatenate_arrays()
        []
    """
    result: list[T] = []
    for sequence in sequences:
        result.extend(sequence)
    return result


def process_value(value: str | int | float) -> int | float:
    """Return the length of text, or twice the value of a number.

    Raises:
        InvalidArgumentError: If *value* is a bool or neither text nor a number.

    Example:
        >>> process_value("abc")
        3
        >>> process_value(4)
        8
    """
    if isinstance(value, str):
        return len(value)
    # bool is an int subclass but not a meaningful number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"Expected text or number, got {type(value).__name__}")
    return value * 2


def get_most_expensive_product(products: Sequence[Product]) -> Product | None:
    """Return the highest-priced product, or ``None`` for an empty input.

    On equal prices the earliest product wins.

    Example:
        >>> get_most_expensive_product([])
        >>> get_most_expensive_product([Product("x", 3), Product("y", 7)])
        Product(name='y', price=7)
    """
    if not products:
        return None
    best = products[0]
    for candidate in products[1:]:
        if candidate.price > best.price:
            best = candidate
    return best


def get_day_type(day: Day) -> DayType:
    """Classify *day* as weekend or weekday.

    Example:
        >>> get_day_type(Day.SATURDAY)
        <DayType.WEEKEND: 'Weekend'>
        >>> get_day_type(Day.WEDNESDAY) == "Weekday"
        True
    """
    return DayType.WEEKEND if day in _WEEKEND else DayType.WEEKDAY


def describe_vehicle(vehicle: Vehicle) -> str:
    """Return the make/year description line.

    Example:
        >>> describe_vehicle(Vehicle("Toyota", 2020))
        'Make: Toyota, Year: 2020'
    """
    return f"Make: {vehicle.make}, Year: {vehicle.year}"


def describe_model(vehicle: Vehicle) -> str | None:
    """Return the model line, or ``None`` when the vehicle has no model.

    Example:
        >>> describe_model(Vehicle("Toyota", 2020, "Corolla"))
        'Model: Corolla'
    """
    if vehicle.model is None:
        return None
    return f"Model: {vehicle.model}"


__all__ = [
    "MIN_RATING",
    "concatenate_arrays",
    "describe_model",
    "describe_vehicle",
    "filter_by_rating",
    "format_string",
    "get_day_type",
    "get_most_expensive_product",
    "process_value",
]
