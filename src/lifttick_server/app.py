from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from lifttick import Simulation, SimulationProperties

logger = logging.getLogger(__name__)

MAX_TICKS_PER_REQUEST = 100_000
MAX_FLOORS = 1_000
MAX_ELEVATORS = 100


def check_limits(properties: SimulationProperties) -> None:
    if properties.duration > MAX_TICKS_PER_REQUEST:
        raise ValueError(f"duration {properties.duration} exceeds the limit of {MAX_TICKS_PER_REQUEST} ticks")
    if properties.floors > MAX_FLOORS:
        raise ValueError(f"floors {properties.floors} exceeds the limit of {MAX_FLOORS}")
    if properties.num_elevators > MAX_ELEVATORS:
        raise ValueError(f"elevators {properties.num_elevators} exceeds the limit of {MAX_ELEVATORS}")


class ResetRequest(BaseModel):
    properties: SimulationProperties = Field(default_factory=SimulationProperties)
    seed: Optional[int] = None


class StepRequest(BaseModel):
    ticks: int = Field(1, ge=1, le=MAX_TICKS_PER_REQUEST)


class RunRequest(BaseModel):
    properties: SimulationProperties = Field(default_factory=SimulationProperties)
    seed: Optional[int] = None
    include_in_transit: bool = False


class SimulationManager:
    """Holds one simulation and advances it only when asked to."""

    def __init__(self, properties: Optional[SimulationProperties] = None, seed: Optional[int] = None) -> None:
        self.properties = properties or SimulationProperties()
        self.seed = seed
        self.simulation = Simulation.from_properties(self.properties, random_seed=seed)
        self._lock = asyncio.Lock()

    async def reset(self, properties: SimulationProperties, seed: Optional[int]) -> dict:
        check_limits(properties)
        async with self._lock:
            self.properties = properties
            self.seed = seed
            self.simulation = Simulation.from_properties(properties, random_seed=seed)
            logger.info("Simulation reset with %s", properties)
            return self.current_state()

    async def step(self, ticks: int) -> dict:
        async with self._lock:
            for _ in range(ticks):
                self.simulation.step()
            return self.current_state()

    async def report(self, include_in_transit: bool) -> dict:
        async with self._lock:
            return asdict(self.simulation.report(include_in_transit=include_in_transit))

    def current_state(self) -> dict:
        state = self.simulation.state()
        state["properties"] = self.properties.model_dump(mode="json")
        state["seed"] = self.seed
        return state


manager = SimulationManager()
app = FastAPI(title="LiftTick Simulation API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.post("/simulation/reset")
async def reset_simulation(request: ResetRequest) -> dict:
    try:
        return await manager.reset(request.properties, request.seed)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/simulation/step")
async def step_simulation(request: StepRequest) -> dict:
    return await manager.step(request.ticks)


@app.get("/report")
async def get_report(include_in_transit: bool = False) -> dict:
    return await manager.report(include_in_transit)


@app.post("/runs")
def create_run(request: RunRequest) -> dict:
    try:
        check_limits(request.properties)
        simulation = Simulation.from_properties(request.properties, random_seed=request.seed)
        report = simulation.run(request.properties.duration, include_in_transit=request.include_in_transit)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {
        "properties": request.properties.model_dump(mode="json"),
        "seed": request.seed,
        "report": asdict(report),
        "lines": report.lines(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("lifttick_server.app:app", host="0.0.0.0", port=8000, reload=False)
