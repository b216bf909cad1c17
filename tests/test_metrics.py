import pytest

from lifttick import MetricsTracker, Passenger, total_time_taken


def completed_passenger(passenger_id: int, arrival: int, boarded: int, reached: int) -> Passenger:
    passenger = Passenger(passenger_id, origin=0, destination=3, arrival_time=arrival)
    passenger.record_boarding(boarded)
    passenger.record_alighting(reached)
    return passenger


def test_empty_report_is_all_zero():
    report = MetricsTracker().report(current_tick=499)
    assert report.average_time == 0.0
    assert report.longest_time == 0
    assert report.shortest_time == 0
    assert report.completed_passengers == 0
    assert report.lines() == ["Average time: 0.0", "Longest time: 0", "Shortest time: 0"]


def test_report_aggregates_completed_passengers():
    tracker = MetricsTracker()
    for passenger in (
        completed_passenger(0, arrival=0, boarded=1, reached=3),
        completed_passenger(1, arrival=2, boarded=4, reached=7),
        completed_passenger(2, arrival=5, boarded=9, reached=15),
    ):
        tracker.record_boarding(passenger)
        tracker.record_completion(passenger)

    report = tracker.report(current_tick=100)
    assert report.average_time == 6.0
    assert report.longest_time == 10
    assert report.shortest_time == 3
    assert report.completed_passengers == 3
    assert report.average_wait == pytest.approx(7 / 3)


def test_in_transit_passengers_excluded_unless_requested():
    tracker = MetricsTracker()
    tracker.record_completion(completed_passenger(0, arrival=0, boarded=1, reached=4))
    waiting = Passenger(1, origin=2, destination=0, arrival_time=10)

    default = tracker.report(current_tick=30, in_transit=[waiting])
    assert default.longest_time == 4
    assert default.in_transit_passengers == 1
    assert not default.included_in_transit

    inclusive = tracker.report(current_tick=30, in_transit=[waiting], include_in_transit=True)
    assert inclusive.longest_time == 20
    assert inclusive.shortest_time == 4
    assert inclusive.average_time == 12.0
    assert inclusive.included_in_transit


def test_total_time_taken_is_stable_after_completion():
    passenger = completed_passenger(0, arrival=3, boarded=4, reached=9)
    assert {total_time_taken(passenger, tick) for tick in range(9, 60)} == {6}
