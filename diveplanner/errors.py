"""
Exceptions raised by the dive planner.

Every planner failure is synchronous and caller-visible. Input problems also
derive from ValueError so callers that already catch ValueError keep working.
"""


class PlannerError(Exception):
    """Base class for all dive planner errors."""


class InvalidInputError(PlannerError, ValueError):
    """Gas, segment, option or calculator input is out of range."""


class UnsupportedDepthError(PlannerError, ValueError):
    """Requested depth has no reference table."""

    def __init__(self, depth: float, max_depth: float):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"No reference table for depth {depth}m (deepest table is {max_depth}m)"
        )


class UnsupportedTableFamilyError(PlannerError, NotImplementedError):
    """Table family is a known name but has no table data."""

    def __init__(self, table_type: str):
        self.table_type = table_type
        super().__init__(f"{table_type} tables are not implemented; use DCIEM")


class DurationExceedsTableError(PlannerError, ValueError):
    """Bottom time is longer than the longest breakpoint of the depth table."""

    def __init__(self, duration: float, reference_depth: int, max_breakpoint: int):
        self.duration = duration
        self.reference_depth = reference_depth
        self.max_breakpoint = max_breakpoint
        super().__init__(
            f"Bottom time {duration} min exceeds the {reference_depth}m table "
            f"(longest entry {max_breakpoint} min)"
        )
