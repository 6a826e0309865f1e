"""
Planar baselines for every Taipower grid sector.

Each sector is an 80 km (east-west) by 50 km (north-south) rectangle whose
south-west corner is its baseline. Mainland sectors follow a fixed letter
layout; Penghu, Jinmen and Mazu have their own constants.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, NamedTuple, Optional, Tuple

import structlog


logger = structlog.get_logger(__name__)

# Sector dimensions in meters
D_EW = 80000.0
D_NS = 50000.0

# Mainland reference lines (left edge of column 0, top edge of row 0)
TAIWAN_LEFT = 90000.0
TAIWAN_TOP = 2800000.0

PENGHU_LEFT = 275000.0
PENGHU_BOTTOM = 2564000.0

# Jinmen spans two sectors side by side that share the letter Z
JINMEN_LEFT = 10000.0
JINMEN_RIGHT = 170000.0
JINMEN_BOTTOM = 2675800.0
JINMEN_TOP = 2725800.0

MAZU_LEFT = 10000.0
MAZU_BOTTOM = 2894000.0
MAZU_TOP = 2944000.0

# Mainland layout, north to south, west to east. "_" marks an unused cell.
TAIWAN_ROWS: Tuple[str, ...] = (
    "_ABC",
    "_DEF",
    "_GH_",
    "JKL_",
    "MNO_",
    "PQR_",
    "_TU_",
    "_VW",
)

UNUSED_CELL = "_"

TAIWAN_BOTTOM = TAIWAN_TOP - len(TAIWAN_ROWS) * D_NS


class Baseline(NamedTuple):
    """South-west corner of a sector in planar meters."""

    origin_x: float
    origin_y: float


def mainland_sector_at(row: int, column: int) -> Optional[str]:
    """Sector letter at a mainland layout cell, or None for unused/outside cells."""
    if row < 0 or row >= len(TAIWAN_ROWS):
        return None
    letters = TAIWAN_ROWS[row]
    if column < 0 or column >= len(letters):
        return None
    letter = letters[column]
    return None if letter == UNUSED_CELL else letter


def _build_default_baselines() -> Dict[str, Baseline]:
    baselines = {
        "S": Baseline(MAZU_LEFT, MAZU_BOTTOM),
        "Y": Baseline(PENGHU_LEFT, PENGHU_BOTTOM),
        "X": Baseline(PENGHU_LEFT, PENGHU_BOTTOM + D_NS),
        "Z": Baseline(JINMEN_LEFT, JINMEN_BOTTOM),
    }

    bottom = TAIWAN_TOP
    for letters in TAIWAN_ROWS:
        bottom -= D_NS
        left = TAIWAN_LEFT
        for letter in letters:
            if letter != UNUSED_CELL:
                baselines[letter] = Baseline(left, bottom)
            left += D_EW

    return baselines


class RegionBaselineRegistry(Mapping):
    """Read-only mapping from sector letter to its baseline."""

    def __init__(self, baselines: Mapping[str, Tuple[float, float]]):
        self._baselines = MappingProxyType(
            {sector: Baseline(*origin) for sector, origin in baselines.items()}
        )

    @classmethod
    def build_default(cls) -> "RegionBaselineRegistry":
        """Registry covering the mainland and the three outlying-island regions."""
        registry = cls(_build_default_baselines())
        logger.debug("Built sector baseline registry", sectors=len(registry))
        return registry

    def __getitem__(self, sector: str) -> Baseline:
        return self._baselines[sector]

    def __iter__(self) -> Iterator[str]:
        return iter(self._baselines)

    def __len__(self) -> int:
        return len(self._baselines)

    def __repr__(self) -> str:
        return f"RegionBaselineRegistry(sectors={''.join(sorted(self._baselines))!r})"


@lru_cache(maxsize=1)
def get_baseline_registry() -> RegionBaselineRegistry:
    """Shared default registry, built on first use."""
    return RegionBaselineRegistry.build_default()
