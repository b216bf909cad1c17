from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from .errors import ConfigLoadError
from .storage import StoragePolicy

logger = logging.getLogger(__name__)


class SimulationProperties(BaseModel):
    """Read-only settings for one simulation run.

    Keys follow the properties file (``floors``, ``passengers``,
    ``elevators``, ``elevatorCapacity``, ``duration``,
    ``maxTravelDistance``, ``listType``); field names are accepted too.
    A value that does not parse falls back to that field's default.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    floors: int = Field(32, ge=1, alias="floors")
    passenger_probability: float = Field(0.03, ge=0.0, le=1.0, alias="passengers")
    num_elevators: int = Field(1, ge=0, alias="elevators")
    elevator_capacity: int = Field(10, ge=0, alias="elevatorCapacity")
    duration: int = Field(500, ge=0, alias="duration")
    max_travel_distance: int = Field(5, ge=1, alias="maxTravelDistance")
    storage_policy: StoragePolicy = Field(StoragePolicy.ARRAY, alias="listType")

    @field_validator("storage_policy", mode="before")
    @classmethod
    def _parse_storage_policy(cls, value: Any) -> StoragePolicy:
        return StoragePolicy.parse(value)

    @field_validator("*", mode="wrap")
    @classmethod
    def _fallback_to_default(cls, value: Any, handler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except (ValidationError, ValueError):
            default = cls.model_fields[info.field_name].default
            logger.warning(
                "Invalid value %r for %s, using default %r", value, info.field_name, default
            )
            return default


@dataclass(frozen=True)
class LoadedProperties:
    properties: SimulationProperties
    file_loaded: bool
    source: Optional[Path] = None


_COMMENT_PREFIXES = ("#", "!")
_SEPARATORS = "=:"


def _logical_lines(text: str) -> Iterator[str]:
    """Join lines ending in an odd number of backslashes with the next one."""
    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip()
        if not pending and (not line or line.startswith(_COMMENT_PREFIXES)):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        yield pending + line
        pending = ""
    if pending:
        yield pending


def _split_entry(line: str) -> Tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char.isspace():
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip()
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip()
    return key.replace("\\", ""), rest


def parse_properties_text(text: str) -> Dict[str, str]:
    """Parse the contents of a Java properties file.

    Keys end at the first ``=``, ``:`` or whitespace; ``#`` and ``!`` start
    comments, leading whitespace is ignored, and a later duplicate key wins.
    """
    values: Dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        values[key] = value
    return values


def read_properties_source(path: Union[str, Path]) -> Dict[str, Any]:
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(source, str(exc)) from exc

    if source.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(source, f"invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigLoadError(source, "top-level JSON value must be an object")
        return data

    return parse_properties_text(text)


def load_properties(path: Optional[Union[str, Path]] = None) -> LoadedProperties:
    """Load settings from ``path``, substituting every default on failure."""
    if path is None or str(path) == "":
        return LoadedProperties(SimulationProperties(), file_loaded=False)

    try:
        values = read_properties_source(path)
    except ConfigLoadError as exc:
        logger.warning("%s; using default values", exc)
        return LoadedProperties(SimulationProperties(), file_loaded=False, source=Path(path))

    return LoadedProperties(
        SimulationProperties.model_validate(values),
        file_loaded=True,
        source=Path(path),
    )
