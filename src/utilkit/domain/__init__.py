"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Pure transformations (casing, filtering, ranking, ...)
    * :mod:`.squaring` - Delayed asynchronous square
    * :mod:`.models` - Value objects (RatedItem, Product, Vehicle)
    * :mod:`.enums` - Domain enumerations (Day, DayType, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    MIN_RATING,
    concatenate_arrays,
    describe_model,
    describe_vehicle,
    filter_by_rating,
    format_string,
    get_day_type,
    get_most_expensive_product,
    process_value,
)
from .enums import Day, DayType, OutputFormat
from .errors import ConfigurationError, InvalidArgumentError
from .models import Product, RatedItem, Vehicle
from .squaring import SQUARE_DELAY_MS, schedule_square, square_async, square_many

__all__ = [
    # Behaviors
    "MIN_RATING",
    "concatenate_arrays",
    "describe_model",
    "describe_vehicle",
    "filter_by_rating",
    "format_string",
    "get_day_type",
    "get_most_expensive_product",
    "process_value",
    # Squaring
    "SQUARE_DELAY_MS",
    "schedule_square",
    "square_async",
    "square_many",
    # Models
    "Product",
    "RatedItem",
    "Vehicle",
    # Enums
    "Day",
    "DayType",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidArgumentError",
]
