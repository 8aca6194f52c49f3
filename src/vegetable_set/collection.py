"""Array-backed set of vegetables with approximate equality."""

import logging
from collections.abc import Collection, Iterable, Iterator

from vegetable_set.domain.errors import (
    CalorieRangeError,
    ConcurrentModificationError,
    IteratorStateError,
)
from vegetable_set.domain.vegetables import Vegetable

DEFAULT_CAPACITY = 15
GROWTH_FACTOR = 1.3
EPSILON = 0.001

_MISSING = object()

_logger = logging.getLogger(__name__)


def approximately_equal(first: Vegetable, second: Vegetable) -> bool:
    """Compare names exactly and numeric fields within EPSILON.

    The relation is not transitive: a chain of values each within EPSILON of
    the next can still end far from where it started.
    """
    return (
        first.name == second.name
        and abs(first.weight - second.weight) < EPSILON
        and abs(first.calories - second.calories) < EPSILON
        and abs(first.price - second.price) < EPSILON
    )


class VegetableSet(Collection[Vegetable]):
    """Mutable set of vegetables, unique up to approximate equality.

    Elements live contiguously in insertion order in a fixed-size list that
    grows by GROWTH_FACTOR when full and never shrinks. Membership is a linear
    scan since approximately equal vegetables cannot share a hash.

    Iterators are fail-fast: a structural change made outside the iterator
    is reported as ConcurrentModificationError on its next call. This guards
    against mutation inside a loop body, not against other threads.
    """

    def __init__(self, source: object = _MISSING) -> None:
        self._elements: list[Vegetable | None] = [None] * DEFAULT_CAPACITY
        self._size = 0
        self.mod_count = 0
        if source is _MISSING:
            return
        if source is None:
            raise TypeError("Source cannot be None")
        if isinstance(source, Vegetable):
            self.add(source)
        else:
            self.add_all(source)

    @classmethod
    def of(cls, vegetable: Vegetable) -> "VegetableSet":
        """Return a set holding a single vegetable."""
        if vegetable is None:
            raise TypeError("Element cannot be None")
        return cls(vegetable)

    @classmethod
    def from_iterable(cls, vegetables: Iterable[Vegetable]) -> "VegetableSet":
        """Return a set built from `vegetables`, collapsing duplicates."""
        if vegetables is None:
            raise TypeError("Collection cannot be None")
        result = cls()
        result.add_all(vegetables)
        return result

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def contains(self, item: object) -> bool:
        """Return True if an approximately equal vegetable is stored."""
        if not isinstance(item, Vegetable):
            return False
        return self._index_of(item) >= 0

    __contains__ = contains

    def __iter__(self) -> "VegetableSetIterator":
        return VegetableSetIterator(self)

    def iterator(self) -> "VegetableSetIterator":
        """Return a fail-fast iterator supporting removal."""
        return VegetableSetIterator(self)

    def add(self, vegetable: Vegetable) -> bool:
        """Add `vegetable` unless an approximately equal one is present."""
        if vegetable is None:
            raise TypeError("Cannot add None element")
        if not isinstance(vegetable, Vegetable):
            raise TypeError(f"Expected Vegetable, got {type(vegetable).__name__}")
        if self.contains(vegetable):
            return False
        self._ensure_capacity(self._size + 1)
        self._elements[self._size] = vegetable
        self._size += 1
        self.mod_count += 1
        return True

    def remove(self, item: object) -> bool:
        """Remove the vegetable approximately equal to `item`, if any."""
        if not isinstance(item, Vegetable):
            return False
        index = self._index_of(item)
        if index < 0:
            return False
        self._fast_remove(index)
        self.mod_count += 1
        return True

    def contains_all(self, items: Iterable[object]) -> bool:
        return all(self.contains(item) for item in items)

    def add_all(self, vegetables: Iterable[Vegetable]) -> bool:
        """Add every vegetable; return True if the set changed."""
        modified = False
        for vegetable in vegetables:
            if self.add(vegetable):
                modified = True
        return modified

    def retain_all(self, items: Collection[object]) -> bool:
        """Keep only elements found in `items` by its own `in` operator.

        A plain list compares with exact equality, so an element that is only
        approximately equal to an entry of `items` is dropped.
        """
        return self._remove_where(lambda vegetable: vegetable not in items)

    def remove_all(self, items: Collection[object]) -> bool:
        """Drop every element found in `items` by its own `in` operator."""
        return self._remove_where(lambda vegetable: vegetable in items)

    def clear(self) -> None:
        """Remove all elements, keeping the current capacity."""
        for index in range(self._size):
            self._elements[index] = None
        self._size = 0
        self.mod_count += 1

    def to_array(self, destination: list | None = None) -> list:
        """Return a snapshot of the elements.

        If `destination` can hold every element it is filled in place and
        returned, with a None marker right after the last element when there
        is room. Otherwise a new list of exact size is returned.
        """
        if destination is None or len(destination) < self._size:
            return self._elements[: self._size]
        destination[: self._size] = self._elements[: self._size]
        if len(destination) > self._size:
            destination[self._size] = None
        return destination

    def total_calories(self) -> float:
        """Sum of calories over each vegetable's whole weight."""
        total = 0.0
        for vegetable in self._live():
            total += vegetable.total_calories
        return total

    def total_cost(self) -> float:
        """Sum of price per kg times weight converted to kilograms."""
        total = 0.0
        for vegetable in self._live():
            total += vegetable.price * vegetable.weight / 1000.0
        return total

    def find_by_calorie_range(
        self, min_calories: float, max_calories: float
    ) -> "VegetableSet":
        """Return a new set of vegetables whose calories per 100g are in range.

        Both bounds are inclusive.
        """
        if min_calories > max_calories:
            raise CalorieRangeError(
                "Minimum calories cannot be greater than maximum calories"
            )
        result = VegetableSet()
        for vegetable in self._live():
            if min_calories <= vegetable.calories <= max_calories:
                result.add(vegetable)
        _logger.debug(
            "Calorie range [%s, %s] matched %s of %s",
            min_calories,
            max_calories,
            len(result),
            self._size,
        )
        return result

    def __str__(self) -> str:
        return "[" + ", ".join(str(vegetable) for vegetable in self._live()) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._live())!r})"

    def _live(self) -> list[Vegetable]:
        return self._elements[: self._size]

    def _index_of(self, vegetable: Vegetable) -> int:
        for index in range(self._size):
            if approximately_equal(self._elements[index], vegetable):
                return index
        return -1

    def _ensure_capacity(self, min_capacity: int) -> None:
        current = len(self._elements)
        if min_capacity <= current:
            return
        new_capacity = max(int(current * GROWTH_FACTOR), min_capacity)
        self._elements.extend([None] * (new_capacity - current))
        _logger.debug("Grew vegetable set capacity: %s -> %s", current, new_capacity)

    def _fast_remove(self, index: int) -> None:
        """Shift the tail after `index` left by one; no bounds checks."""
        self._elements[index : self._size - 1] = self._elements[index + 1 : self._size]
        self._size -= 1
        self._elements[self._size] = None

    def _remove_where(self, predicate) -> bool:
        modified = False
        # Walk backwards so removals don't move unvisited elements.
        for index in range(self._size - 1, -1, -1):
            if predicate(self._elements[index]):
                self._fast_remove(index)
                self.mod_count += 1
                modified = True
        return modified


class VegetableSetIterator(Iterator[Vegetable]):
    """Fail-fast cursor over a VegetableSet."""

    def __init__(self, owner: VegetableSet) -> None:
        self._owner = owner
        self._cursor = 0
        self._last_returned = -1
        self._expected_mod_count = owner.mod_count

    def __iter__(self) -> "VegetableSetIterator":
        return self

    def has_next(self) -> bool:
        return self._cursor < len(self._owner)

    def next(self) -> Vegetable:
        """Return the next vegetable; raise StopIteration when exhausted."""
        self._check_for_comodification()
        if self._cursor >= len(self._owner):
            raise StopIteration
        self._last_returned = self._cursor
        self._cursor += 1
        return self._owner._elements[self._last_returned]

    __next__ = next

    def remove(self) -> None:
        """Remove the vegetable returned by the last `next` call."""
        if self._last_returned < 0:
            raise IteratorStateError("next() has not returned an element to remove")
        self._check_for_comodification()
        owner = self._owner
        owner._fast_remove(self._last_returned)
        owner.mod_count += 1
        self._cursor = self._last_returned
        self._last_returned = -1
        self._expected_mod_count = owner.mod_count

    def _check_for_comodification(self) -> None:
        if self._owner.mod_count != self._expected_mod_count:
            raise ConcurrentModificationError("Vegetable set changed during iteration")
