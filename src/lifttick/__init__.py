"""Tick-driven elevator dispatch simulation."""

from .arrivals import RandomArrivalGenerator
from .building import Building
from .config import LoadedProperties, SimulationProperties, load_properties
from .elevator import Elevator
from .errors import ConfigLoadError, InvalidFloorError, LiftTickError
from .floor import Floor
from .metrics import MetricsReport, MetricsTracker, total_time_taken
from .passenger import UNSET, Direction, Passenger, ReachedAt, Unset
from .simulation import Simulation
from .storage import StoragePolicy

__all__ = [
    "Building",
    "ConfigLoadError",
    "Direction",
    "Elevator",
    "Floor",
    "InvalidFloorError",
    "LiftTickError",
    "LoadedProperties",
    "MetricsReport",
    "MetricsTracker",
    "Passenger",
    "RandomArrivalGenerator",
    "ReachedAt",
    "Simulation",
    "SimulationProperties",
    "StoragePolicy",
    "UNSET",
    "Unset",
    "load_properties",
    "total_time_taken",
]
