"""Error kinds raised by the vegetable set."""


class CalorieRangeError(ValueError):
    """Raised when a calorie range has its minimum above its maximum."""


class ConcurrentModificationError(RuntimeError):
    """Raised when a set changes structurally behind a live iterator."""


class IteratorStateError(RuntimeError):
    """Raised when an iterator removal has no element to remove."""
