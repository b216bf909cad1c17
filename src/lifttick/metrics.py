from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .passenger import Passenger


def total_time_taken(passenger: Passenger, current_tick: int) -> int:
    return passenger.total_time_taken(current_tick)


@dataclass
class MetricsReport:
    time_step: int
    average_time: float
    longest_time: int
    shortest_time: int
    completed_passengers: int
    in_transit_passengers: int
    average_wait: float
    included_in_transit: bool = False

    def lines(self) -> List[str]:
        return [
            f"Average time: {self.average_time}",
            f"Longest time: {self.longest_time}",
            f"Shortest time: {self.shortest_time}",
        ]


class MetricsTracker:
    """Completed-passenger ledger and the travel-time report built from it."""

    def __init__(self) -> None:
        self.completed: List[Passenger] = []
        self.wait_times: List[int] = []

    def record_boarding(self, passenger: Passenger) -> None:
        if passenger.wait_time is not None:
            self.wait_times.append(passenger.wait_time)

    def record_completion(self, passenger: Passenger) -> None:
        self.completed.append(passenger)

    def _average(self, values: List[int]) -> float:
        if not values:
            return 0.0
        return sum(values) / len(values)

    def report(
        self,
        current_tick: int,
        in_transit: Iterable[Passenger] = (),
        include_in_transit: bool = False,
    ) -> MetricsReport:
        """Summarise travel times as of ``current_tick``.

        Only completed passengers count unless ``include_in_transit`` is set,
        in which case waiting and riding passengers are charged the ticks
        elapsed since their arrival.
        """
        pending = list(in_transit)
        population = list(self.completed)
        if include_in_transit:
            population.extend(pending)
        times = [total_time_taken(p, current_tick) for p in population]
        return MetricsReport(
            time_step=current_tick,
            average_time=self._average(times),
            longest_time=max(times) if times else 0,
            shortest_time=min(times) if times else 0,
            completed_passengers=len(self.completed),
            in_transit_passengers=len(pending),
            average_wait=self._average(self.wait_times),
            included_in_transit=include_in_transit,
        )
