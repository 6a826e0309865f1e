"""
Type definitions for grid coordinate text parsing.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog
import yaml

from ..model import GridCoordinate


logger = structlog.get_logger(__name__)

DEFAULT_STRATEGIES = ("spaced_strict", "compact_strict", "lenient")


@dataclass
class ParserConfig:
    """Configuration for the coordinate text parser."""

    # Strategies always run highest priority first; this only filters them
    enabled_strategies: List[str] = field(default_factory=lambda: list(DEFAULT_STRATEGIES))

    # Position-based OCR character correction
    apply_ocr_corrections: bool = True

    def __post_init__(self):
        unknown = [name for name in self.enabled_strategies if name not in DEFAULT_STRATEGIES]
        if unknown:
            raise ValueError(f"Unknown extraction strategies: {', '.join(unknown)}")

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "ParserConfig":
        """
        Load configuration from a YAML file.

        The settings may sit at the top level or under a ``parser`` key.
        Unreadable or invalid files fall back to the defaults.
        """
        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}

            parser_data = data.get("parser", data)
            return cls(**parser_data)

        except (OSError, yaml.YAMLError, TypeError, ValueError, AttributeError) as e:
            logger.error("Error loading parser config",
                         config_path=str(config_path), error=str(e))
            return cls()


@dataclass
class ParseResult:
    """Outcome of parsing one piece of OCR text."""

    coordinates: List[GridCoordinate] = field(default_factory=list)

    # Name of the strategy that produced the coordinates, if any
    strategy: Optional[str] = None

    normalized_text: str = ""

    # Corrected candidates that failed validation, in discovery order
    rejected: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.coordinates)

    @property
    def best(self) -> Optional[GridCoordinate]:
        """Best guess: the first coordinate found."""
        return self.coordinates[0] if self.coordinates else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "coordinates": [coordinate.to_dict() for coordinate in self.coordinates],
            "strategy": self.strategy,
            "normalized_text": self.normalized_text,
            "rejected": list(self.rejected),
        }
