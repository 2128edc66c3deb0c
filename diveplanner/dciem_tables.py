"""
DCIEM air decompression tables.

Single source of truth for the standard air table data. One table per
reference depth (6-48 m, 3 m apart), each mapping a bottom-time breakpoint
(minutes) to the residual group, total decompression time and the named
in-water stops. Tables are read-only and shared by all callers.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

# Named stop depths in ascent order (meters)
NAMED_STOP_DEPTHS: Tuple[int, ...] = (15, 12, 9, 6)

# Group code for exceptional exposures not suited to repetitive diving
NO_REPETITIVE_GROUP = "NRG"


@dataclass(frozen=True)
class TableEntry:
    """One row of a depth table.

    total_deco is the whole decompression obligation in minutes; the named
    stops account for part of it and the remainder is spent at the final
    shallow stop. A stop time of 0 means the stop is not required.
    """
    group: str
    total_deco: int
    stop_15m: int = 0
    stop_12m: int = 0
    stop_9m: int = 0
    stop_6m: int = 0

    def stop_time(self, depth: int) -> int:
        """Minutes at a named stop depth (0 when absent)."""
        return getattr(self, f"stop_{depth}m")

    def named_stops(self) -> Iterator[Tuple[int, int]]:
        """Populated (depth, minutes) stops, deepest first."""
        for depth in NAMED_STOP_DEPTHS:
            minutes = self.stop_time(depth)
            if minutes > 0:
                yield depth, minutes

    @property
    def named_stop_total(self) -> int:
        return sum(minutes for _, minutes in self.named_stops())


def _shallow(groups: Mapping[int, str], total_deco: int) -> dict:
    """Group-only table; every entry shares the same decompression time."""
    return {t: TableEntry(group, total_deco) for t, group in groups.items()}


E = TableEntry

# The 6 m table lists residual groups only; its surfacing allowance is 1 min.
DCIEM_6M = _shallow({
    30: "A", 60: "B", 90: "C", 120: "D", 150: "E", 180: "F", 240: "G",
    300: "H", 360: "I", 420: "J", 480: "K", 600: "L", 720: "M",
}, total_deco=1)

DCIEM_9M = {
    30: E("A", 1),
    60: E("C", 1),
    90: E("D", 1),
    120: E("F", 1),
    150: E("G", 1),
    180: E("H", 1),
    240: E("J", 1),
    270: E("K", 1),
    300: E("L", 1),
    330: E("M", 3),
    360: E("N", 5),
    400: E("O", 7),
    420: E("P", 10),
    450: E("Q", 15),
    480: E("R", 20),
}

DCIEM_12M = {
    20: E("A", 1),
    30: E("B", 1),
    60: E("C", 1),
    90: E("D", 1),
    120: E("F", 1),
    150: E("G", 1),
    180: E("H", 1),
    210: E("J", 1),
    240: E("M", 5),
    270: E("N", 15),
    300: E("O", 25),
    330: E("P", 39),
    360: E("Q", 53),
}

DCIEM_15M = {
    10: E("A", 1),
    20: E("B", 1),
    30: E("C", 1),
    40: E("D", 1),
    50: E("E", 1),
    60: E("F", 1),
    75: E("G", 1),
    100: E("I", 5),
    120: E("K", 10),
    125: E("K", 13),
    130: E("L", 16),
    140: E("M", 21),
    150: E("NRG", 26),
    160: E("NRG", 31),
    170: E("NRG", 35),
    180: E("NRG", 40),
    200: E("NRG", 50),
    220: E("NRG", 59),
    240: E("NRG", 70),
    260: E("NRG", 81),
    280: E("NRG", 91),
}

DCIEM_18M = {
    10: E("A", 1),
    20: E("D", 1),
    30: E("E", 1),
    40: E("F", 1),
    50: E("G", 1),
    60: E("I", 5, stop_6m=5),
    80: E("J", 10, stop_6m=10),
    90: E("K", 16, stop_6m=16),
    100: E("L", 24, stop_6m=24),
    110: E("M", 30, stop_6m=30),
    120: E("NRG", 36, stop_6m=36),
    130: E("NRG", 42, stop_6m=2),
    140: E("NRG", 48, stop_6m=2),
    150: E("NRG", 55, stop_6m=3),
    160: E("NRG", 62, stop_6m=3),
    170: E("NRG", 69, stop_6m=4),
    180: E("NRG", 77, stop_6m=4),
    190: E("NRG", 85, stop_6m=5),
    200: E("NRG", 94, stop_6m=7),
    210: E("NRG", 104, stop_6m=13),
    220: E("NRG", 114, stop_6m=17),
    230: E("NRG", 124, stop_6m=21),
    240: E("NRG", 133, stop_6m=24),
}

DCIEM_21M = {
    10: E("A", 0),
    15: E("B", 1),
    20: E("C", 1),
    25: E("D", 1),
    30: E("D", 1),
    35: E("E", 1),
    40: E("F", 5, stop_6m=5),
    50: E("G", 10, stop_6m=10),
    60: E("H", 12, stop_6m=12),
    70: E("J", 20, stop_6m=17),
    80: E("K", 29, stop_6m=3),
    90: E("M", 37, stop_6m=4),
    100: E("N", 45, stop_6m=5),
    110: E("NRG", 53, stop_6m=6),
    120: E("NRG", 61, stop_6m=7),
    130: E("NRG", 70, stop_6m=8),
    140: E("NRG", 80, stop_6m=9),
    150: E("NRG", 92, stop_6m=15),
    160: E("NRG", 105, stop_6m=20),
    170: E("NRG", 118, stop_6m=25),
    180: E("NRG", 130, stop_6m=29),
    190: E("NRG", 143, stop_6m=34),
    200: E("NRG", 155, stop_6m=38),
}

DCIEM_24M = {
    10: E("A", 2),
    15: E("C", 2),
    20: E("E", 2),
    25: E("F", 2),
    30: E("G", 5),
    40: E("H", 11, stop_6m=5),
    50: E("I", 15, stop_9m=11, stop_6m=4),
    55: E("J", 20, stop_9m=15, stop_6m=5),
    60: E("K", 27, stop_9m=21, stop_6m=6),
    65: E("L", 32, stop_9m=25, stop_6m=7),
    70: E("M", 37, stop_9m=30, stop_6m=7),
    75: E("N", 42, stop_9m=34, stop_6m=8),
    80: E("NRG", 46, stop_9m=37, stop_6m=9),
    85: E("NRG", 51, stop_9m=42, stop_6m=9),
    90: E("NRG", 56, stop_9m=46, stop_6m=10),
    95: E("NRG", 61, stop_9m=50, stop_6m=11),
    100: E("NRG", 66, stop_9m=55, stop_6m=11),
    110: E("NRG", 78, stop_12m=2, stop_9m=64, stop_6m=12),
    120: E("NRG", 93, stop_12m=3, stop_9m=72, stop_6m=18),
    130: E("NRG", 109, stop_12m=4, stop_9m=82, stop_6m=23),
    140: E("NRG", 125, stop_12m=4, stop_9m=93, stop_6m=28),
    150: E("NRG", 142, stop_12m=5, stop_9m=104, stop_6m=33),
    160: E("NRG", 158, stop_12m=5, stop_9m=114, stop_6m=39),
}

DCIEM_27M = {
    5: E("A", 2),
    10: E("B", 2),
    15: E("C", 2),
    20: E("D", 2),
    25: E("E", 7),
    30: E("F", 11, stop_6m=2),
    40: E("H", 16, stop_6m=6),
    45: E("I", 21, stop_6m=7),
    50: E("J", 28, stop_6m=8),
    55: E("K", 35, stop_6m=9),
    60: E("L", 41, stop_9m=2, stop_6m=8),
    65: E("NRG", 47, stop_9m=3, stop_6m=8),
    70: E("NRG", 52, stop_9m=3, stop_6m=9),
    75: E("NRG", 58, stop_9m=4, stop_6m=9),
    80: E("NRG", 65, stop_9m=4, stop_6m=10),
    85: E("NRG", 71, stop_9m=5, stop_6m=10),
    90: E("NRG", 79, stop_9m=5, stop_6m=14),
    95: E("NRG", 87, stop_9m=6, stop_6m=17),
    100: E("NRG", 96, stop_9m=6, stop_6m=20),
    110: E("NRG", 115, stop_9m=7, stop_6m=26),
    120: E("NRG", 134, stop_9m=8, stop_6m=31),
}

DCIEM_30M = {
    5: E("A", 2),
    10: E("B", 2),
    15: E("C", 2),
    20: E("E", 8),
    25: E("F", 12, stop_6m=3),
    30: E("G", 15, stop_6m=5),
    35: E("H", 18, stop_6m=7),
    40: E("I", 25, stop_6m=9),
    45: E("J", 34, stop_9m=3, stop_6m=8),
    50: E("K", 41, stop_9m=4, stop_6m=8),
    55: E("NRG", 48, stop_9m=5, stop_6m=9),
    60: E("NRG", 55, stop_9m=6, stop_6m=9),
    65: E("NRG", 62, stop_9m=6, stop_6m=10),
    70: E("NRG", 69, stop_9m=7, stop_6m=10),
    75: E("NRG", 78, stop_9m=8, stop_6m=14),
    80: E("NRG", 87, stop_9m=8, stop_6m=18),
    85: E("NRG", 97, stop_9m=9, stop_6m=21),
    90: E("NRG", 107, stop_12m=2, stop_9m=8, stop_6m=24),
    95: E("NRG", 120, stop_12m=3, stop_9m=8, stop_6m=27),
    100: E("NRG", 132, stop_12m=3, stop_9m=8, stop_6m=31),
    105: E("NRG", 144, stop_12m=3, stop_9m=9, stop_6m=34),
    110: E("NRG", 158, stop_12m=4, stop_9m=10, stop_6m=38),
}

DCIEM_33M = {
    5: E("A", 2),
    10: E("B", 2),
    12: E("C", 2),
    15: E("D", 5),
    20: E("F", 12, stop_6m=3),
    25: E("G", 16, stop_6m=6),
    30: E("H", 19, stop_6m=9),
    35: E("I", 27, stop_9m=3, stop_6m=8),
    40: E("J", 37, stop_9m=5, stop_6m=8),
    45: E("K", 46, stop_9m=6, stop_6m=9),
    50: E("M", 54, stop_9m=7, stop_6m=9),
    55: E("N", 62, stop_9m=8, stop_6m=10),
    60: E("NRG", 70, stop_12m=2, stop_9m=7, stop_6m=10),
    65: E("NRG", 79, stop_12m=3, stop_9m=7, stop_6m=12),
    70: E("NRG", 92, stop_12m=4, stop_9m=7, stop_6m=19),
    75: E("NRG", 103, stop_12m=4, stop_9m=8, stop_6m=23),
    80: E("NRG", 116, stop_12m=5, stop_9m=8, stop_6m=26),
    85: E("NRG", 130, stop_12m=5, stop_9m=9, stop_6m=30),
    90: E("NRG", 144, stop_12m=6, stop_9m=9, stop_6m=34),
    95: E("NRG", 158, stop_12m=6, stop_9m=9, stop_6m=38),
    100: E("NRG", 172, stop_12m=7, stop_9m=9, stop_6m=42),
    105: E("NRG", 187, stop_12m=7, stop_9m=12, stop_6m=45),
    110: E("NRG", 201, stop_12m=8, stop_9m=15, stop_6m=48),
}

DCIEM_36M = {
    5: E("A", 2),
    10: E("C", 2),
    15: E("D", 10),
    20: E("F", 15, stop_6m=5),
    25: E("G", 19, stop_6m=9),
    30: E("I", 26, stop_9m=4, stop_6m=8),
    35: E("J", 38, stop_9m=6, stop_6m=8),
    40: E("K", 48, stop_9m=8, stop_6m=8),
    45: E("M", 57, stop_12m=3, stop_9m=6, stop_6m=10),
    50: E("N", 68, stop_12m=4, stop_9m=7, stop_6m=12),
    55: E("NRG", 78, stop_12m=5, stop_9m=7, stop_6m=13),
    60: E("NRG", 90, stop_12m=6, stop_9m=7, stop_6m=18),
    65: E("NRG", 102, stop_12m=6, stop_9m=8, stop_6m=22),
    70: E("NRG", 116, stop_12m=7, stop_9m=8, stop_6m=27),
    75: E("NRG", 133, stop_12m=8, stop_9m=8, stop_6m=31),
    80: E("NRG", 149, stop_15m=2, stop_12m=6, stop_9m=9, stop_6m=35),
    85: E("NRG", 166, stop_15m=3, stop_12m=6, stop_9m=10, stop_6m=40),
    90: E("NRG", 183, stop_15m=3, stop_12m=7, stop_9m=13, stop_6m=42),
    95: E("NRG", 200, stop_15m=4, stop_12m=6, stop_9m=16, stop_6m=46),
    100: E("NRG", 216, stop_15m=4, stop_12m=7, stop_9m=19, stop_6m=50),
}

DCIEM_39M = {
    5: E("A", 2),
    8: E("B", 2),
    10: E("C", 2),
    15: E("E", 12, stop_6m=4),
    20: E("G", 18, stop_6m=8),
    25: E("H", 23, stop_9m=5, stop_6m=7),
    30: E("J", 37, stop_9m=7, stop_6m=8),
    35: E("K", 48, stop_12m=3, stop_9m=6, stop_6m=9),
    40: E("M", 59, stop_12m=4, stop_9m=7, stop_6m=9),
    45: E("N", 70, stop_12m=5, stop_9m=7, stop_6m=12),
    50: E("NRG", 82, stop_12m=7, stop_9m=7, stop_6m=15),
    55: E("NRG", 97, stop_15m=2, stop_12m=6, stop_9m=8, stop_6m=20),
    60: E("NRG", 112, stop_15m=3, stop_12m=6, stop_9m=8, stop_6m=25),
    65: E("NRG", 127, stop_15m=4, stop_12m=6, stop_9m=8, stop_6m=30),
    70: E("NRG", 148, stop_15m=4, stop_12m=7, stop_9m=9, stop_6m=34),
    75: E("NRG", 167, stop_15m=5, stop_12m=6, stop_9m=11, stop_6m=39),
    80: E("NRG", 186, stop_15m=5, stop_12m=7, stop_9m=14, stop_6m=42),
    85: E("NRG", 206, stop_15m=6, stop_12m=7, stop_9m=17, stop_6m=47),
    90: E("NRG", 224, stop_15m=6, stop_12m=8, stop_9m=20, stop_6m=52),
}

DCIEM_42M = {
    7: E("B", 2),
    10: E("E", 7),
    15: E("F", 15, stop_6m=6),
    20: E("G", 21, stop_9m=4, stop_6m=7),
    25: E("I", 32, stop_9m=7, stop_6m=8),
    30: E("K", 46, stop_12m=4, stop_9m=6, stop_6m=8),
    35: E("L", 58, stop_12m=5, stop_9m=7, stop_6m=9),
    40: E("N", 70, stop_12m=7, stop_9m=7, stop_6m=10),
    45: E("O", 85, stop_15m=3, stop_12m=5, stop_9m=8, stop_6m=16),
    50: E("NRG", 101, stop_15m=4, stop_12m=6, stop_9m=8, stop_6m=21),
    55: E("NRG", 119, stop_15m=5, stop_12m=6, stop_9m=8, stop_6m=27),
    60: E("NRG", 139, stop_15m=6, stop_12m=6, stop_9m=9, stop_6m=32),
    65: E("NRG", 159, stop_15m=6, stop_12m=7, stop_9m=10, stop_6m=37),
    70: E("NRG", 182, stop_15m=3, stop_12m=5, stop_9m=14, stop_6m=40),
    75: E("NRG", 204, stop_15m=3, stop_12m=5, stop_9m=18, stop_6m=45),
    80: E("NRG", 225, stop_15m=3, stop_12m=6, stop_9m=21, stop_6m=51),
    85: E("NRG", 244, stop_15m=3, stop_12m=5, stop_9m=25, stop_6m=57),
    90: E("NRG", 263, stop_15m=4, stop_12m=6, stop_9m=28, stop_6m=65),
}

DCIEM_45M = {
    7: E("B", 3),
    10: E("D", 9),
    15: E("F", 17, stop_6m=8),
    20: E("H", 24, stop_9m=6, stop_6m=7),
    25: E("J", 40, stop_12m=4, stop_9m=5, stop_6m=8),
    30: E("K", 55, stop_12m=6, stop_9m=6, stop_6m=9),
    35: E("M", 67, stop_12m=5, stop_9m=6, stop_6m=10),
    40: E("O", 84, stop_12m=6, stop_9m=7, stop_6m=15),
    45: E("NRG", 101, stop_12m=5, stop_9m=8, stop_6m=21),
    50: E("NRG", 121, stop_12m=7, stop_9m=8, stop_6m=27),
    55: E("NRG", 144, stop_15m=3, stop_12m=5, stop_9m=9, stop_6m=33),
    60: E("NRG", 168, stop_15m=3, stop_12m=5, stop_9m=12, stop_6m=38),
    65: E("NRG", 194, stop_15m=4, stop_12m=5, stop_9m=16, stop_6m=42),
    70: E("NRG", 218, stop_15m=5, stop_12m=5, stop_9m=20, stop_6m=48),
    75: E("NRG", 240, stop_15m=5, stop_12m=6, stop_9m=24, stop_6m=55),
    80: E("NRG", 261, stop_15m=6, stop_12m=6, stop_9m=28, stop_6m=63),
}

DCIEM_48M = {
    6: E("B", 3),
    10: E("D", 11),
    15: E("G", 20, stop_9m=4, stop_6m=6),
    20: E("H", 30, stop_9m=8, stop_6m=8),
    25: E("K", 49, stop_12m=6, stop_9m=6, stop_6m=8),
    30: E("L", 64, stop_12m=5, stop_9m=7, stop_6m=10),
    35: E("N", 80, stop_12m=5, stop_9m=8, stop_6m=13),
    40: E("NRG", 99, stop_12m=6, stop_9m=8, stop_6m=20),
    45: E("NRG", 121, stop_15m=3, stop_12m=5, stop_9m=9, stop_6m=26),
    50: E("NRG", 146, stop_15m=4, stop_12m=5, stop_9m=9, stop_6m=33),
    55: E("NRG", 173, stop_15m=5, stop_12m=5, stop_9m=13, stop_6m=38),
    60: E("NRG", 201, stop_15m=6, stop_12m=5, stop_9m=17, stop_6m=43),
    65: E("NRG", 227, stop_15m=7, stop_12m=5, stop_9m=22, stop_6m=50),
    70: E("NRG", 251, stop_15m=7, stop_12m=6, stop_9m=26, stop_6m=58),
}

del E


def _freeze(table: dict) -> Mapping[int, TableEntry]:
    return MappingProxyType(dict(sorted(table.items())))


DCIEM_TABLES: Mapping[int, Mapping[int, TableEntry]] = MappingProxyType({
    6: _freeze(DCIEM_6M),
    9: _freeze(DCIEM_9M),
    12: _freeze(DCIEM_12M),
    15: _freeze(DCIEM_15M),
    18: _freeze(DCIEM_18M),
    21: _freeze(DCIEM_21M),
    24: _freeze(DCIEM_24M),
    27: _freeze(DCIEM_27M),
    30: _freeze(DCIEM_30M),
    33: _freeze(DCIEM_33M),
    36: _freeze(DCIEM_36M),
    39: _freeze(DCIEM_39M),
    42: _freeze(DCIEM_42M),
    45: _freeze(DCIEM_45M),
    48: _freeze(DCIEM_48M),
})

REFERENCE_DEPTHS: Tuple[int, ...] = tuple(DCIEM_TABLES)
MIN_REFERENCE_DEPTH = REFERENCE_DEPTHS[0]
MAX_REFERENCE_DEPTH = REFERENCE_DEPTHS[-1]


def breakpoints(reference_depth: int) -> Tuple[int, ...]:
    """Bottom-time breakpoints of a depth table, ascending."""
    return tuple(DCIEM_TABLES[reference_depth])
