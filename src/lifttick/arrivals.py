from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .building import Building
from .passenger import Passenger

logger = logging.getLogger(__name__)


@dataclass
class RandomArrivalGenerator:
    """Spawns at most one passenger per floor per tick with fixed probability."""

    probability: float
    num_floors: int
    random_state: random.Random = field(default_factory=random.Random)
    _next_passenger_id: int = field(init=False, default=0)
    _warned: bool = field(init=False, default=False)

    @classmethod
    def seeded(cls, probability: float, num_floors: int, seed: Optional[int] = None) -> "RandomArrivalGenerator":
        return cls(probability, num_floors, random.Random(seed))

    def generate(self, current_time: int) -> List[Passenger]:
        if self.num_floors < 2:
            if not self._warned:
                logger.warning(
                    "Building has %s floor(s); no destination differs from the origin, skipping arrivals",
                    self.num_floors,
                )
                self._warned = True
            return []

        passengers: List[Passenger] = []
        for floor in range(self.num_floors):
            if self.random_state.random() >= self.probability:
                continue
            passengers.append(
                Passenger(
                    passenger_id=self._next_passenger_id,
                    origin=floor,
                    destination=self._choose_destination(floor),
                    arrival_time=current_time,
                )
            )
            self._next_passenger_id += 1
        return passengers

    def populate(self, building: Building, current_time: int) -> List[Passenger]:
        arrivals = self.generate(current_time)
        for passenger in arrivals:
            building.add_passenger(passenger)
        return arrivals

    def _choose_destination(self, origin: int) -> int:
        destination = origin
        while destination == origin:
            destination = int(self.random_state.random() * self.num_floors)
        return destination
