"""Demonstration driver for the vegetable set."""

from vegetable_set.app_logging import configure_logging
from vegetable_set.collection import VegetableSet
from vegetable_set.config import Settings
from vegetable_set.domain.errors import CalorieRangeError
from vegetable_set.domain.vegetables import Species


def main() -> None:
    """Walk through the set's constructors and operations."""
    settings = Settings()
    configure_logging(settings.log_level)
    print("Vegetable Set")
    demonstrate_constructors()
    salad = create_sample_salad()
    demonstrate_duplicate_handling(salad)
    demonstrate_removal(salad)
    demonstrate_totals(salad)
    demonstrate_calorie_range_search(salad, settings)
    demonstrate_iteration(salad)


def _heading(title: str) -> None:
    print(f"\n=== {title} ===")


def demonstrate_constructors() -> None:
    _heading("Empty Constructor")
    empty = VegetableSet()
    print(f"Empty set: {empty}")
    print(f"Size: {len(empty)}")

    _heading("Single Element Constructor")
    single = VegetableSet.of(Species.CARROT.create(150))
    print(f"Single set: {single}")
    print(f"Size: {len(single)}")

    _heading("Collection Constructor")
    collected = VegetableSet.from_iterable(
        [
            Species.CARROT.create(150),
            Species.TOMATO.create(200),
            Species.CUCUMBER.create(300),
        ]
    )
    print(f"Collection set: {collected}")
    print(f"Size: {len(collected)}")


def create_sample_salad() -> VegetableSet:
    _heading("Add Operations")
    salad = VegetableSet()
    salad.add(Species.LETTUCE.create(100))
    salad.add(Species.TOMATO.create(150))
    salad.add(Species.CUCUMBER.create(200))
    salad.add(Species.BELL_PEPPER.create(100))
    salad.add(Species.ONION.create(50))
    print(f"Salad ingredients: {salad}")
    return salad


def demonstrate_duplicate_handling(salad: VegetableSet) -> None:
    _heading("Duplicate Handling")
    added = salad.add(Species.TOMATO.create(150))
    print(f"Added duplicate tomato? {added}")
    print(f"Salad ingredients: {salad}")


def demonstrate_removal(salad: VegetableSet) -> None:
    _heading("Remove Operations")
    removed = salad.remove(Species.ONION.create(50))
    print(f"Removed onion? {removed}")
    print(f"Updated salad: {salad}")


def demonstrate_totals(salad: VegetableSet) -> None:
    _heading("Totals")
    print(f"Total calories: {salad.total_calories():.2f} cal")
    print(f"Total cost: ${salad.total_cost():.2f}")


def demonstrate_calorie_range_search(salad: VegetableSet, settings: Settings) -> None:
    _heading("Calorie Range Search")
    low_max = settings.low_calorie_max
    medium_max = settings.medium_calorie_max
    try:
        low = salad.find_by_calorie_range(0, low_max)
        print(f"Low calorie vegetables (0-{low_max:g} cal/100g): {low}")
        medium = salad.find_by_calorie_range(low_max, medium_max)
        print(
            f"Medium calorie vegetables ({low_max:g}-{medium_max:g} cal/100g): "
            f"{medium}"
        )
    except CalorieRangeError as exc:
        print(f"Error: {exc}")


def demonstrate_iteration(salad: VegetableSet) -> None:
    _heading("Iterator")
    print("Iterating through salad ingredients:")
    for vegetable in salad:
        print(f"- {vegetable.name}: {vegetable.calories:.1f} calories per 100g")


if __name__ == "__main__":
    main()
