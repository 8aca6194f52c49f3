"""Vegetable records and the species registry."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Vegetable:
    """A weighed vegetable with its nutrition and price."""

    name: str
    calories: float
    weight: float
    price: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("Weight must be positive")
        if self.calories < 0:
            raise ValueError("Calories cannot be negative")
        if self.price <= 0:
            raise ValueError("Price must be positive")

    @property
    def total_calories(self) -> float:
        """Calories for the whole weight, given calories per 100g."""
        return self.calories * self.weight / 100.0

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.weight:.1f}g, {self.calories:.1f} cal/100g, "
            f"${self.price:.2f}/kg)"
        )


@dataclass(frozen=True)
class SpeciesProfile:
    """Fixed constants shared by every vegetable of one species."""

    name: str
    calories: float
    price: float


class Species(Enum):
    """Known vegetable species (single source of truth for their constants)."""

    BELL_PEPPER = SpeciesProfile("Bell Pepper", 31.0, 3.99)
    CARROT = SpeciesProfile("Carrot", 41.0, 1.49)
    CUCUMBER = SpeciesProfile("Cucumber", 15.0, 1.99)
    LETTUCE = SpeciesProfile("Lettuce", 15.0, 2.49)
    ONION = SpeciesProfile("Onion", 40.0, 1.29)
    TOMATO = SpeciesProfile("Tomato", 18.0, 2.99)

    def create(self, weight: float) -> Vegetable:
        """Return a vegetable of this species weighing `weight` grams."""
        profile = self.value
        return Vegetable(
            name=profile.name,
            calories=profile.calories,
            weight=weight,
            price=profile.price,
        )

    @classmethod
    def from_name(cls, name: str) -> "Species":
        """Look a species up by its display name, ignoring case."""
        wanted = name.strip().lower()
        for species in cls:
            if species.value.name.lower() == wanted:
                return species
        raise KeyError(name)
