"""
Table-based dive planning.

Modules:
    - dciem_tables: DCIEM air decompression table data
    - tables: depth/bottom-time lookup against the tables
    - deco_stops: ordered decompression stop composition
    - oxygen: CNS and OTU exposure estimates
    - planner: full dive plan from segments and options
    - gas_supply: cylinder supply and available time
    - repetitive: surface interval and repetitive dive tables
    - bridge: JSON-in/JSON-out wrappers for the web front end

Results are advisory readings of reference tables, not a decompression model.
"""

from .errors import (
    PlannerError,
    InvalidInputError,
    UnsupportedDepthError,
    UnsupportedTableFamilyError,
    DurationExceedsTableError,
)
from .gases import Gas, AIR, GAS_MIXES
from .profile import DiveSegment, DivePlan, ProfileBuilder
from .tables import TableFamily, DiveTableResult, calculate_dive_table
from .deco_stops import compose_decompression
from .planner import PlannerOptions, DiveResult, calculate_decompression
from .gas_supply import GasSupplyResult, calculate_gas_supply, consumption_rates
from .repetitive import NRD, repetitive_factor, repetitive_no_decompression_limit

__version__ = "0.1.0"

__all__ = [
    "PlannerError",
    "InvalidInputError",
    "UnsupportedDepthError",
    "UnsupportedTableFamilyError",
    "DurationExceedsTableError",
    "Gas",
    "AIR",
    "GAS_MIXES",
    "DiveSegment",
    "DivePlan",
    "ProfileBuilder",
    "TableFamily",
    "DiveTableResult",
    "calculate_dive_table",
    "compose_decompression",
    "PlannerOptions",
    "DiveResult",
    "calculate_decompression",
    "GasSupplyResult",
    "calculate_gas_supply",
    "consumption_rates",
    "NRD",
    "repetitive_factor",
    "repetitive_no_decompression_limit",
]
