from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class LiftTickError(Exception):
    """Base class for errors raised by the simulation package."""


class ConfigLoadError(LiftTickError):
    """A configuration source could not be read or parsed."""

    def __init__(self, source: Optional[Union[str, Path]], reason: str) -> None:
        super().__init__(f"Could not load properties from {source}: {reason}")
        self.source = source
        self.reason = reason


class InvalidFloorError(LiftTickError):
    def __init__(self, floor_number: int, top_floor: int) -> None:
        super().__init__(f"Invalid floor index: {floor_number} (valid range 0..{top_floor})")
        self.floor_number = floor_number
        self.top_floor = top_floor
