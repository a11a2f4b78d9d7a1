"""Immutable value objects passed between the domain operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RatedItem:
    """A titled item carrying a numeric rating."""

    title: str
    rating: int | float


@dataclass(frozen=True, slots=True)
class Product:
    """A named product with a price."""

    name: str
    price: int | float


@dataclass(frozen=True, slots=True)
class Vehicle:
    """A vehicle described by make and year, optionally with a model.

    A single record covers both the plain vehicle and the car shape; the
    ``model`` field is simply absent for the former.

    Example:
        >>> Vehicle("Toyota", 2020).model is None
        True
        >>> Vehicle("Toyota", 2020, "Corolla").model
        'Corolla'
    """

    make: str
    year: int
    model: str | None = None


__all__ = [
    "Product",
    "RatedItem",
    "Vehicle",
]
