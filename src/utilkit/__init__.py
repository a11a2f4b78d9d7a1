"""Public package surface exposing the utility operations, configuration, and metadata.

Routes imports through the architectural layers:
- Domain exports: the pure transformations and the delayed square
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    MIN_RATING,
    SQUARE_DELAY_MS,
    Day,
    DayType,
    InvalidArgumentError,
    Product,
    RatedItem,
    Vehicle,
    concatenate_arrays,
    describe_model,
    describe_vehicle,
    filter_by_rating,
    format_string,
    get_day_type,
    get_most_expensive_product,
    process_value,
    schedule_square,
    square_async,
    square_many,
)

__all__ = [
    "MIN_RATING",
    "SQUARE_DELAY_MS",
    "Day",
    "DayType",
    "InvalidArgumentError",
    "Product",
    "RatedItem",
    "Vehicle",
    "concatenate_arrays",
    "describe_model",
    "describe_vehicle",
    "filter_by_rating",
    "format_string",
    "get_config",
    "get_day_type",
    "get_most_expensive_product",
    "print_info",
    "process_value",
    "schedule_square",
    "square_async",
    "square_many",
]
