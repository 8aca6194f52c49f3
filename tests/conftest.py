"""Shared test fixtures."""

import pytest

from vegetable_set.collection import VegetableSet
from vegetable_set.domain.vegetables import Species, Vegetable


@pytest.fixture
def carrot() -> Vegetable:
    return Species.CARROT.create(150)


@pytest.fixture
def tomato() -> Vegetable:
    return Species.TOMATO.create(200)


@pytest.fixture
def cucumber() -> Vegetable:
    return Species.CUCUMBER.create(300)


@pytest.fixture
def populated_set(carrot, tomato, cucumber) -> VegetableSet:
    """Set holding a carrot, a tomato and a cucumber, in that order."""
    vegetables = VegetableSet()
    vegetables.add(carrot)
    vegetables.add(tomato)
    vegetables.add(cucumber)
    return vegetables
