from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .passenger import Direction, Passenger
from .storage import OnboardStorage, StoragePolicy, make_storage

logger = logging.getLogger(__name__)


@dataclass
class Elevator:
    """A car that reverses when none of its riders need to keep going."""

    elevator_id: int
    capacity: int
    max_travel_distance: int
    top_floor: int
    storage_policy: StoragePolicy = StoragePolicy.ARRAY
    current_floor: int = 0
    direction: Direction = Direction.UP
    passengers: OnboardStorage = field(init=False)

    def __post_init__(self) -> None:
        self.storage_policy = StoragePolicy.parse(self.storage_policy)
        self.passengers = make_storage(self.storage_policy)

    @property
    def load(self) -> int:
        return len(self.passengers)

    @property
    def available_capacity(self) -> int:
        return max(0, self.capacity - self.load)

    @property
    def is_idle(self) -> bool:
        return not self.passengers

    def should_change_direction(self) -> bool:
        if (self.current_floor == 0 and self.direction is Direction.DOWN) or (
            self.current_floor == self.top_floor and self.direction is Direction.UP
        ):
            return True
        for passenger in self.passengers:
            if self.direction is Direction.UP and passenger.destination > self.current_floor:
                return False
            if self.direction is Direction.DOWN and passenger.destination < self.current_floor:
                return False
        return True

    def move(self, check_direction_change: bool = True) -> None:
        # Idle cars wait where they are; they never go looking for hall calls.
        if not self.passengers:
            return

        if check_direction_change and self.should_change_direction():
            self.direction = self.direction.reversed()

        if self.current_floor == self.top_floor and self.direction is Direction.UP:
            self.direction = Direction.DOWN
        elif self.current_floor == 0 and self.direction is Direction.DOWN:
            self.direction = Direction.UP

        if self.direction is Direction.UP:
            self.current_floor = min(self.current_floor + self.max_travel_distance, self.top_floor)
        else:
            self.current_floor = max(self.current_floor - self.max_travel_distance, 0)
        logger.debug(
            "Elevator %s now on floor %s heading %s",
            self.elevator_id,
            self.current_floor,
            self.direction.name,
        )

    def can_board(self, passenger: Passenger) -> bool:
        return len(self.passengers) < self.capacity and passenger.direction is self.direction

    def board_passenger(self, passenger: Passenger) -> bool:
        if not self.can_board(passenger):
            return False
        self.passengers.append(passenger)
        return True

    def disembark_passengers(self) -> List[Passenger]:
        disembarking = [p for p in self.passengers if p.destination == self.current_floor]
        for passenger in disembarking:
            self.passengers.remove(passenger)
        return disembarking

    def snapshot(self) -> dict:
        return {
            "id": self.elevator_id,
            "floor": self.current_floor,
            "direction": self.direction.name,
            "passenger_count": self.load,
            "capacity": self.capacity,
            "storage_policy": self.storage_policy.value,
        }
