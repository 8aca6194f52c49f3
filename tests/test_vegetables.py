"""Tests for vegetable records and species."""

import dataclasses

import pytest

from vegetable_set.domain.vegetables import Species, Vegetable


def test_total_calories_scales_by_weight() -> None:
    carrot = Species.CARROT.create(150)

    assert carrot.total_calories == pytest.approx(61.5)


def test_species_constants() -> None:
    pepper = Species.BELL_PEPPER.create(100)
    onion = Species.ONION.create(50)

    assert (pepper.name, pepper.calories, pepper.price) == ("Bell Pepper", 31.0, 3.99)
    assert (onion.name, onion.calories, onion.price) == ("Onion", 40.0, 1.29)
    assert onion.weight == 50
    assert type(onion) is Vegetable


def test_from_name_ignores_case() -> None:
    assert Species.from_name("bell pepper") is Species.BELL_PEPPER
    assert Species.from_name("Tomato") is Species.TOMATO

    with pytest.raises(KeyError):
        Species.from_name("potato")


@pytest.mark.parametrize(
    ("calories", "weight", "price", "message"),
    [
        (41.0, 0, 1.49, "Weight must be positive"),
        (41.0, -5, 1.49, "Weight must be positive"),
        (-1.0, 100, 1.49, "Calories cannot be negative"),
        (41.0, 100, 0, "Price must be positive"),
        (-1.0, 0, 0, "Weight must be positive"),
    ],
)
def test_invalid_fields_rejected(calories, weight, price, message) -> None:
    with pytest.raises(ValueError, match=message):
        Vegetable("Carrot", calories, weight, price)


def test_zero_calories_and_empty_name_allowed() -> None:
    vegetable = Vegetable("", 0.0, 10, 1.0)

    assert vegetable.name == ""
    assert vegetable.total_calories == 0


def test_vegetable_is_immutable() -> None:
    carrot = Species.CARROT.create(150)

    with pytest.raises(dataclasses.FrozenInstanceError):
        carrot.weight = 10  # type: ignore[misc]


def test_str_format() -> None:
    assert str(Species.CARROT.create(150)) == "Carrot (150.0g, 41.0 cal/100g, $1.49/kg)"
