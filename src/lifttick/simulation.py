from __future__ import annotations

import logging
import random
from dataclasses import asdict
from typing import Callable, Dict, List, Optional

from .arrivals import RandomArrivalGenerator
from .building import Building
from .config import SimulationProperties
from .elevator import Elevator
from .metrics import MetricsReport, MetricsTracker
from .passenger import Passenger

logger = logging.getLogger(__name__)


class Simulation:
    """Tick-stepped elevator simulation.

    Each tick spawns arrivals, then lets every elevator in list order move,
    drop off riders on its new floor and pick up waiting passengers there.
    """

    def __init__(
        self,
        building: Building,
        passenger_probability: float = 0.03,
        arrival_generator: Optional[RandomArrivalGenerator] = None,
        random_seed: Optional[int] = None,
        random_state: Optional[random.Random] = None,
        metrics_hook_interval: int = 1,
    ) -> None:
        self.building = building
        self.random = random_state or random.Random(random_seed)
        self.arrivals = arrival_generator or RandomArrivalGenerator(
            probability=passenger_probability,
            num_floors=building.num_floors,
            random_state=self.random,
        )
        self.current_time: int = 0
        self.metrics = MetricsTracker()
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}
        self.metrics_hook_interval = max(1, metrics_hook_interval)

    @classmethod
    def from_properties(
        cls,
        properties: SimulationProperties,
        random_seed: Optional[int] = None,
        random_state: Optional[random.Random] = None,
        metrics_hook_interval: int = 1,
    ) -> "Simulation":
        return cls(
            building=Building.from_properties(properties),
            passenger_probability=properties.passenger_probability,
            random_seed=random_seed,
            random_state=random_state,
            metrics_hook_interval=metrics_hook_interval,
        )

    @property
    def completed(self) -> List[Passenger]:
        return self.metrics.completed

    @property
    def last_tick(self) -> int:
        return max(self.current_time - 1, 0)

    def run(self, duration: int, include_in_transit: bool = False) -> MetricsReport:
        for _ in range(duration):
            self.step()
        return self.report(include_in_transit=include_in_transit)

    def step(self) -> None:
        tick = self.current_time
        arrivals = self.arrivals.populate(self.building, tick)
        if arrivals:
            self._emit("arrival", {"time": tick, "count": len(arrivals)})

        for elevator in self.building.elevators:
            elevator.move()
            self._handle_disembark(elevator, tick)
            self._handle_board(elevator, tick)

        if "metrics" in self.event_hooks and tick % self.metrics_hook_interval == 0:
            self._emit_metrics(tick)

        self.current_time += 1

    def report(self, include_in_transit: bool = False) -> MetricsReport:
        return self.metrics.report(
            self.last_tick,
            in_transit=self.passengers_in_transit(),
            include_in_transit=include_in_transit,
        )

    def passengers_in_transit(self) -> List[Passenger]:
        return self.building.waiting_passengers() + self.building.onboard_passengers()

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def state(self) -> dict:
        return {
            "time": self.current_time,
            "building": self.building.snapshot(),
            "metrics": asdict(self.report()),
        }

    def _handle_disembark(self, elevator: Elevator, tick: int) -> None:
        for passenger in elevator.disembark_passengers():
            passenger.record_alighting(tick)
            self.metrics.record_completion(passenger)
            self._emit("disembark", {"time": tick, "elevator_id": elevator.elevator_id, "passenger": passenger})

    def _handle_board(self, elevator: Elevator, tick: int) -> None:
        floor = self.building.get_floor(elevator.current_floor)
        if floor is None:
            logger.error(
                "Invalid floor index: %s for elevator %s, skipping boarding",
                elevator.current_floor,
                elevator.elevator_id,
            )
            self._emit(
                "invalid_floor",
                {"time": tick, "elevator_id": elevator.elevator_id, "floor": elevator.current_floor},
            )
            return

        for passenger in floor.board_passengers(elevator):
            passenger.record_boarding(tick)
            self.metrics.record_boarding(passenger)
            self._emit("board", {"time": tick, "elevator_id": elevator.elevator_id, "passenger": passenger})

    def _emit_metrics(self, tick: int) -> None:
        snapshot = self.metrics.report(tick, in_transit=self.passengers_in_transit())
        self._emit("metrics", {"metrics": snapshot, "building": self.building.snapshot()})

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
