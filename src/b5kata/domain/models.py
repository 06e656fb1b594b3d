"""Immutable records used by the exercises.

``Car`` embeds a ``Vehicle`` instead of inheriting from it: nothing dispatches
across the two, so composition keeps each record flat and comparable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RatedItem:
    """A titled entry with a numeric rating."""

    title: str
    rating: float


@dataclass(frozen=True, slots=True)
class Product:
    """A named product with a price."""

    name: str
    price: float


@dataclass(frozen=True, slots=True)
class Vehicle:
    """A vehicle identified by make and model year.

    Example:
        >>> Vehicle("Toyota", 2020).get_info()
        'Make: Toyota, Year: 2020'
    """

    make: str
    year: int

    def get_info(self) -> str:
        return f"Make: {self.make}, Year: {self.year}"


@dataclass(frozen=True, slots=True)
class Car:
    """A vehicle with a model name.

    Example:
        >>> car = Car.build("Honda", 2018, "Civic")
        >>> car.get_info()
        'Make: Honda, Year: 2018'
        >>> car.get_model()
        'Model: Civic'
    """

    vehicle: Vehicle
    model: str

    @classmethod
    def build(cls, make: str, year: int, model: str) -> Car:
        """Create a car from flat make/year/model fields."""
        return cls(vehicle=Vehicle(make=make, year=year), model=model)

    def get_info(self) -> str:
        return self.vehicle.get_info()

    def get_model(self) -> str:
        return f"Model: {self.model}"


__all__ = ["Car", "Product", "RatedItem", "Vehicle"]
