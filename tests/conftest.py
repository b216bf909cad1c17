from __future__ import annotations

import random

import pytest

from lifttick import Building, Passenger, Simulation


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def quiet_simulation():
    """A simulation with no random arrivals, for hand-placed passengers."""

    def build(num_floors: int = 10, elevators: int = 1, capacity: int = 10, max_travel_distance: int = 1) -> Simulation:
        building = Building.with_elevators(num_floors, elevators, capacity, max_travel_distance)
        return Simulation(building, passenger_probability=0.0, random_seed=0)

    return build


def make_passenger(origin: int, destination: int, arrival_time: int = 0, passenger_id: int = 0) -> Passenger:
    return Passenger(passenger_id=passenger_id, origin=origin, destination=destination, arrival_time=arrival_time)
