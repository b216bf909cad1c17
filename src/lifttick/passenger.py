from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Union


class Direction(IntEnum):
    UP = 1
    DOWN = -1

    def reversed(self) -> "Direction":
        return Direction.DOWN if self is Direction.UP else Direction.UP


@dataclass(frozen=True)
class Unset:
    """Completion state of a passenger still waiting or riding."""


@dataclass(frozen=True)
class ReachedAt:
    """Completion state holding the tick the passenger got off."""

    tick: int


UNSET = Unset()
Completion = Union[Unset, ReachedAt]


@dataclass(eq=False)
class Passenger:
    """Represents a rider moving between floors."""

    passenger_id: int
    origin: int
    destination: int
    arrival_time: int
    board_time: Optional[int] = None
    completion: Completion = UNSET
    _direction: Direction = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.origin == self.destination:
            raise ValueError(
                f"Passenger {self.passenger_id} has identical origin and destination ({self.origin})"
            )
        self._direction = Direction.UP if self.destination > self.origin else Direction.DOWN

    @property
    def direction(self) -> Direction:
        return self._direction

    def has_reached_destination(self) -> bool:
        return isinstance(self.completion, ReachedAt)

    def record_boarding(self, time_step: int) -> None:
        self.board_time = time_step

    def record_alighting(self, time_step: int) -> None:
        if isinstance(self.completion, ReachedAt):
            raise ValueError(
                f"Passenger {self.passenger_id} already reached floor {self.destination} "
                f"at tick {self.completion.tick}"
            )
        self.completion = ReachedAt(time_step)

    def total_time_taken(self, current_tick: int) -> int:
        """Ticks from arrival to completion, or to ``current_tick`` if still travelling."""
        if isinstance(self.completion, ReachedAt):
            return self.completion.tick - self.arrival_time
        return current_tick - self.arrival_time

    @property
    def wait_time(self) -> Optional[int]:
        if self.board_time is None:
            return None
        return self.board_time - self.arrival_time

    @property
    def ride_time(self) -> Optional[int]:
        if self.board_time is None or not isinstance(self.completion, ReachedAt):
            return None
        return self.completion.tick - self.board_time

    def to_dict(self) -> dict:
        reached = self.completion.tick if isinstance(self.completion, ReachedAt) else None
        return {
            "id": self.passenger_id,
            "origin": self.origin,
            "destination": self.destination,
            "direction": self.direction.name,
            "arrival_time": self.arrival_time,
            "board_time": self.board_time,
            "reached_at": reached,
        }
