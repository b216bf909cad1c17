import logging
import random

from lifttick import Building, Direction, RandomArrivalGenerator


def test_certain_arrival_spawns_one_passenger_per_floor(rng):
    generator = RandomArrivalGenerator(probability=1.0, num_floors=6, random_state=rng)
    passengers = generator.generate(current_time=4)

    assert [p.origin for p in passengers] == list(range(6))
    assert all(p.arrival_time == 4 for p in passengers)
    assert [p.passenger_id for p in passengers] == list(range(6))


def test_destination_never_equals_origin():
    generator = RandomArrivalGenerator.seeded(probability=1.0, num_floors=2, seed=7)
    for tick in range(200):
        for passenger in generator.generate(tick):
            assert passenger.destination != passenger.origin
            assert 0 <= passenger.destination < 2
            expected = Direction.UP if passenger.destination > passenger.origin else Direction.DOWN
            assert passenger.direction is expected


def test_zero_probability_spawns_nobody(rng):
    generator = RandomArrivalGenerator(probability=0.0, num_floors=32, random_state=rng)
    assert all(generator.generate(tick) == [] for tick in range(100))


def test_ids_keep_increasing_across_ticks(rng):
    generator = RandomArrivalGenerator(probability=1.0, num_floors=3, random_state=rng)
    ids = [p.passenger_id for tick in range(3) for p in generator.generate(tick)]
    assert ids == list(range(9))


def test_single_floor_building_has_no_destinations(caplog):
    generator = RandomArrivalGenerator(probability=1.0, num_floors=1, random_state=random.Random(0))
    with caplog.at_level(logging.WARNING, logger="lifttick.arrivals"):
        assert generator.generate(0) == []
        assert generator.generate(1) == []
    assert len([r for r in caplog.records if "skipping arrivals" in r.getMessage()]) == 1


def test_populate_appends_to_origin_queue(rng):
    building = Building(num_floors=4)
    generator = RandomArrivalGenerator(probability=1.0, num_floors=4, random_state=rng)
    arrivals = generator.populate(building, current_time=0)

    for passenger in arrivals:
        assert list(building.get_floor(passenger.origin).waiting) == [passenger]
    assert len(building.get_floor(4)) == 0


def test_same_seed_gives_same_stream():
    first = RandomArrivalGenerator.seeded(0.3, 10, seed=99)
    second = RandomArrivalGenerator.seeded(0.3, 10, seed=99)
    trips = lambda gen: [(p.origin, p.destination) for t in range(50) for p in gen.generate(t)]
    assert trips(first) == trips(second)
