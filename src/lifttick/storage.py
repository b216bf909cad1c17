from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Dict, MutableSequence

from .passenger import Passenger


class StoragePolicy(str, Enum):
    """How an elevator keeps its onboard passengers.

    Both policies hold the same passengers in the same order; the choice
    only changes the container backing the sequence.
    """

    ARRAY = "array-backed"
    LINKED = "linked"

    @classmethod
    def parse(cls, value: object) -> "StoragePolicy":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text.startswith("linked"):
            return cls.LINKED
        if text in ("array-backed", "array", "arraylist"):
            return cls.ARRAY
        raise ValueError(f"Unknown storage policy '{value}'. Available: {', '.join(p.value for p in cls)}")


OnboardStorage = MutableSequence[Passenger]

STORAGE_REGISTRY: Dict[StoragePolicy, Callable[[], OnboardStorage]] = {
    StoragePolicy.ARRAY: list,
    StoragePolicy.LINKED: deque,
}


def make_storage(policy: StoragePolicy) -> OnboardStorage:
    return STORAGE_REGISTRY[StoragePolicy.parse(policy)]()
