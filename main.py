"""
Dive Planner - DCIEM table reference calculator

Looks up decompression requirements for a square or multilevel air/nitrox
dive and prints the stop schedule, oxygen exposure and gas supply. Advisory
only: always dive your own tables or computer.

Usage:
    python main.py                                  # 30m for 30 min on air
    python main.py --depth 24 --time 50             # Quick square profile override
    python main.py --levels 30:10 20:15 --gas nitrox32
    python main.py --volume 15 --pressure 220 --rate 25
"""

import argparse
import logging
import sys

from diveplanner.config import load_effective_config
from diveplanner.errors import PlannerError
from diveplanner.gas_supply import calculate_gas_supply, depth_adjusted_bottom_time
from diveplanner.gases import GAS_MIXES, get_gas
from diveplanner.planner import DiveResult, calculate_decompression
from diveplanner.profile import ProfileBuilder
from diveplanner.repetitive import repetitive_factor
from diveplanner.tables import TableFamily


# --- USER CONFIGURATION ---
# Edit these values to plan your dive, or override via CLI arguments.

DIVE_CONFIG = {
    "depth_m": 30,              # Depth for square profiles (meters)
    "bottom_time_min": 30,      # Bottom time (minutes, includes descent)
    "gas": "air",               # Any key of GAS_MIXES
    "include_descent": False,   # Carve a descent leg out of the bottom time
    "surface_interval_min": 60, # For the repetitive factor readout
}


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=log_format,
        handlers=[logging.StreamHandler()],
    )


def parse_levels(values):
    """Parse DEPTH:MINUTES pairs into (depth, minutes) tuples."""
    levels = []
    for value in values:
        try:
            depth, minutes = value.split(":")
            levels.append((float(depth), float(minutes)))
        except ValueError:
            raise argparse.ArgumentTypeError(
                f"Level must look like DEPTH:MINUTES, got {value!r}"
            ) from None
    return levels


def print_dive_plan(result: DiveResult, table_type: TableFamily) -> None:
    """Print dive plan summary."""
    plan = result.plan
    print("--- DIVE PLAN ---")
    print(f"Tables: {table_type.value}")
    print(f"Max depth: {plan.max_depth:.0f}m")
    print(f"Bottom time: {plan.total_time - result.total_deco_time:.0f} min")
    print(f"Gas: {', '.join(sorted({g.label for g in plan.gases}))}")
    for seg in plan.segments:
        print(
            f"  {seg.start_depth:5.1f}m -> {seg.end_depth:5.1f}m  "
            f"{seg.duration:5.1f} min  {seg.gas.label}"
        )


def print_results(result: DiveResult) -> None:
    """Print decompression schedule and exposure."""
    print("\n--- DECOMPRESSION ---")
    if result.requires_deco:
        for stop in result.decompression:
            print(f"  Stop {stop.start_depth:4.0f}m  {stop.duration:4.0f} min  {stop.gas.label}")
    else:
        print("  No decompression stops")
    print(f"Total deco: {result.total_deco_time:.0f} min")
    print(f"Total dive time: {result.plan.total_time:.0f} min")
    print(f"Residual group: {result.table_group}")
    print(f"CNS: {result.cns:.1f}%")
    print(f"OTU: {result.otu:.1f}")

    if result.exceeds_table_range:
        print("\nWARNING: Bottom time is beyond the table!")
        print("The longest tabulated row was used and may understate decompression.")


def print_gas_supply(volume: float, pressure: float, rate: float, depth: float) -> None:
    supply = calculate_gas_supply(volume, pressure, rate)
    print("\n--- GAS SUPPLY ---")
    print(f"Supply: {volume:.0f} L @ {pressure:.0f} bar = {supply.total_volume:.0f} L")
    print(f"Available at surface ({rate:.0f} L/min): {supply.available_time} min")
    try:
        print(f"Available at {depth:.0f}m: {depth_adjusted_bottom_time(supply, depth)} min")
    except PlannerError as e:
        print(f"Available at {depth:.0f}m: n/a ({e})")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments for quick overrides."""
    parser = argparse.ArgumentParser(
        description="Dive Planner - DCIEM table reference calculator",
    )
    parser.add_argument("--depth", type=float, help="Dive depth in meters")
    parser.add_argument("--time", type=float, help="Bottom time in minutes")
    parser.add_argument(
        "--levels", nargs="+", metavar="DEPTH:MINUTES",
        help="Multilevel profile, deepest first (overrides --depth/--time)",
    )
    parser.add_argument("--gas", choices=sorted(GAS_MIXES), help="Breathing gas")
    parser.add_argument(
        "--table", choices=[f.value for f in TableFamily],
        help="Table family (overrides config)",
    )
    parser.add_argument("--volume", type=float, help="Cylinder volume in liters")
    parser.add_argument("--pressure", type=float, help="Fill pressure in bar")
    parser.add_argument("--rate", type=float, help="Consumption rate in L/min")
    parser.add_argument(
        "--interval", type=float,
        help="Surface interval in minutes for the repetitive factor",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to planner config YAML (default: config.yaml)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    setup_logging(args.verbose)

    # Apply CLI overrides to config
    config = DIVE_CONFIG.copy()
    if args.depth is not None:
        config["depth_m"] = args.depth
    if args.time is not None:
        config["bottom_time_min"] = args.time
    if args.gas is not None:
        config["gas"] = args.gas
    if args.interval is not None:
        config["surface_interval_min"] = args.interval

    try:
        effective = load_effective_config(table_override=args.table, config_path=args.config)
        options = effective["options"]
        supply = effective["gas_supply"]

        builder = ProfileBuilder(
            descent_rate=options.descent_speed if config["include_descent"] else None
        )
        gas = get_gas(config["gas"])
        if args.levels:
            segments = builder.multilevel(parse_levels(args.levels), gas=gas)
        else:
            segments = builder.square(config["depth_m"], config["bottom_time_min"], gas=gas)

        result = calculate_decompression(segments, options)
    except (PlannerError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_dive_plan(result, options.table_type)
    print_results(result)

    try:
        factor = repetitive_factor(result.table_group, config["surface_interval_min"])
        print(f"Repetitive factor after {config['surface_interval_min']:.0f} min: {factor}")
    except PlannerError as e:
        print(f"Repetitive factor: n/a ({e})")

    try:
        print_gas_supply(
            args.volume if args.volume is not None else supply["supply_volume"],
            args.pressure if args.pressure is not None else supply["supply_pressure"],
            args.rate if args.rate is not None else supply["consumption_rate"],
            result.plan.max_depth,
        )
    except PlannerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
