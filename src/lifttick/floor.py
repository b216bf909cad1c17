from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Deque, List

from .passenger import Passenger

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .elevator import Elevator


@dataclass
class Floor:
    """Represents a floor with a single queue of waiting passengers."""

    number: int
    waiting: Deque[Passenger] = field(default_factory=deque)

    def add_passenger(self, passenger: Passenger) -> None:
        self.waiting.append(passenger)

    def board_passengers(self, elevator: "Elevator") -> List[Passenger]:
        """Move every waiting passenger the elevator accepts into the car.

        The queue is scanned front to back; passengers the car turns away
        keep their place.
        """
        boarded: List[Passenger] = []
        remaining: Deque[Passenger] = deque()
        for passenger in self.waiting:
            if elevator.board_passenger(passenger):
                boarded.append(passenger)
            else:
                remaining.append(passenger)
        self.waiting = remaining
        return boarded

    def __len__(self) -> int:
        return len(self.waiting)
