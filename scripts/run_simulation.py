"""Run one LiftTick simulation from an optional properties or JSON file."""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional

from lifttick import Simulation, load_properties


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", nargs="?", help="Path to a .properties or .json configuration file")
    parser.add_argument("--seed", type=int, help="Seed for the random arrival stream")
    parser.add_argument(
        "--include-in-transit",
        action="store_true",
        help="Count passengers still waiting or riding at the end of the run",
    )
    parser.add_argument("--output", type=Path, help="Optional file path to write the result as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.config is None:
        print("No properties file name provided. Using default simulation settings.")
    loaded = load_properties(args.config)
    if not loaded.file_loaded:
        print("Warning: Properties file not loaded correctly. Default values are used.")

    properties = loaded.properties
    simulation = Simulation.from_properties(properties, random_seed=args.seed)
    report = simulation.run(properties.duration, include_in_transit=args.include_in_transit)

    save_results(
        args.output,
        {
            "source": str(loaded.source) if loaded.source else None,
            "file_loaded": loaded.file_loaded,
            "properties": properties.model_dump(mode="json"),
            "seed": args.seed,
            "report": asdict(report),
        },
    )

    for line in report.lines():
        print(line)
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
