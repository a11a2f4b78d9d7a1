"""Type-safe domain enums for weekdays, day classification, and output formats."""

from __future__ import annotations

from enum import Enum, IntEnum

from .errors import InvalidArgumentError


class Day(IntEnum):
    """Ordered weekday symbols, Monday first.

    Integer values follow declaration order so days compare and sort
    naturally.

    Example:
        >>> Day.MONDAY < Day.SUNDAY
        True
        >>> int(Day.SATURDAY)
        5
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, text: str) -> Day:
        """Resolve a case-insensitive day name such as ``"saturday"``.

        Raises:
            InvalidArgumentError: If *text* names no weekday.

        Example:
            >>> Day.parse("Saturday")
            <Day.SATURDAY: 5>
        """
        try:
            return cls[text.strip().upper()]
        except KeyError as exc:
            raise InvalidArgumentError(f"Unknown day: {text!r}") from exc


class DayType(str, Enum):
    """Classification returned by :func:`~utilkit.domain.behaviors.get_day_type`.

    Inherits from str so members compare equal to their display text.

    Example:
        >>> DayType.WEEKEND == "Weekend"
        True
    """

    WEEKDAY = "Weekday"
    WEEKEND = "Weekend"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Day",
    "DayType",
    "OutputFormat",
]
