from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .elevator import Elevator
from .errors import InvalidFloorError
from .floor import Floor
from .passenger import Passenger
from .storage import StoragePolicy

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .config import SimulationProperties


@dataclass
class Building:
    """Owns the floor queues and the elevators serving them.

    Floors are numbered ``0..num_floors`` inclusive so that every floor an
    elevator can stop at has a queue.
    """

    num_floors: int
    elevators: List[Elevator] = field(default_factory=list)
    floors: List[Floor] = field(init=False)

    def __post_init__(self) -> None:
        self.floors = [Floor(i) for i in range(self.num_floors + 1)]

    @classmethod
    def from_properties(cls, properties: "SimulationProperties") -> "Building":
        elevators = [
            Elevator(
                elevator_id=i,
                capacity=properties.elevator_capacity,
                max_travel_distance=properties.max_travel_distance,
                top_floor=properties.floors,
                storage_policy=properties.storage_policy,
            )
            for i in range(properties.num_elevators)
        ]
        return cls(num_floors=properties.floors, elevators=elevators)

    @classmethod
    def with_elevators(
        cls,
        num_floors: int,
        count: int,
        capacity: int,
        max_travel_distance: int,
        storage_policy: StoragePolicy = StoragePolicy.ARRAY,
    ) -> "Building":
        elevators = [
            Elevator(i, capacity, max_travel_distance, num_floors, storage_policy)
            for i in range(count)
        ]
        return cls(num_floors=num_floors, elevators=elevators)

    @property
    def top_floor(self) -> int:
        return self.num_floors

    def get_floor(self, floor_number: int) -> Optional[Floor]:
        if 0 <= floor_number < len(self.floors):
            return self.floors[floor_number]
        return None

    def require_floor(self, floor_number: int) -> Floor:
        floor = self.get_floor(floor_number)
        if floor is None:
            raise InvalidFloorError(floor_number, self.top_floor)
        return floor

    def add_passenger(self, passenger: Passenger) -> None:
        self.require_floor(passenger.origin).add_passenger(passenger)

    def waiting_passengers(self) -> List[Passenger]:
        return [p for floor in self.floors for p in floor.waiting]

    def onboard_passengers(self) -> List[Passenger]:
        return [p for elevator in self.elevators for p in elevator.passengers]

    def snapshot(self) -> dict:
        return {
            "floors": [len(floor) for floor in self.floors],
            "elevators": [elevator.snapshot() for elevator in self.elevators],
        }
