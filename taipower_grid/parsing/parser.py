"""
Grid coordinate parser for OCR text.
"""

from functools import lru_cache
from typing import List, Optional, Sequence

import structlog

from ..model import GridCoordinate
from .corrector import apply_corrections
from .patterns import STRATEGIES, ExtractionStrategy, normalize_text
from .types import ParserConfig, ParseResult


logger = structlog.get_logger(__name__)


class CoordinateParser:
    """
    Extracts Taipower grid coordinates from noisy OCR text.

    Strategy:
    1. Keep only letters, digits and whitespace; uppercase
    2. Run extraction strategies from strict to lenient, stopping at the
       first one that yields a valid coordinate
    3. Correct each candidate position by position and validate it

    Parsing never raises: text without a coordinate gives an empty list,
    which is the normal state while OCR text is still arriving.
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        strategies: Optional[Sequence[ExtractionStrategy]] = None,
    ):
        """
        Initialize coordinate parser.

        Args:
            config: Parser configuration
            strategies: Extraction strategies to choose from; defaults to the built-in set
        """
        self.config = config or ParserConfig()
        self.logger = logger.bind(component="CoordinateParser")

        available = STRATEGIES if strategies is None else strategies
        enabled = [
            strategy for strategy in available
            if strategy.name in self.config.enabled_strategies
        ]

        # Sort by priority (higher priority first)
        enabled.sort(key=lambda strategy: strategy.priority, reverse=True)
        self.strategies: Sequence[ExtractionStrategy] = tuple(enabled)

    def parse_text(self, text: str) -> List[GridCoordinate]:
        """
        Find grid coordinates in text.

        Args:
            text: Raw OCR text, possibly multi-line with surrounding noise

        Returns:
            Coordinates in discovery order, best guess first; may be empty
        """
        return self.parse_with_details(text).coordinates

    def parse_with_details(self, text: str) -> ParseResult:
        """Parse text and report which strategy matched and what was rejected."""
        normalized = normalize_text(text)
        result = ParseResult(normalized_text=normalized)

        for strategy in self.strategies:
            coordinates = []
            for candidate in strategy.candidates(normalized):
                if self.config.apply_ocr_corrections:
                    candidate = apply_corrections(candidate)

                coordinate = self._build_coordinate(candidate)
                if coordinate is None:
                    result.rejected.append(candidate)
                    self.logger.debug("Candidate rejected",
                                      candidate=candidate, strategy=strategy.name)
                    continue

                coordinates.append(coordinate)

            if coordinates:
                result.coordinates = coordinates
                result.strategy = strategy.name
                self.logger.debug("Coordinates found",
                                  strategy=strategy.name, count=len(coordinates))
                break

        return result

    def parse_coordinate(self, text: str) -> Optional[GridCoordinate]:
        """Parse text and return only the best guess."""
        coordinates = self.parse_text(text)
        return coordinates[0] if coordinates else None

    def is_valid_format(self, text: str) -> bool:
        """Check whether text contains at least one grid coordinate."""
        return bool(self.parse_text(text))

    @staticmethod
    def _build_coordinate(candidate: str) -> Optional[GridCoordinate]:
        """Build a coordinate from a 9-character candidate."""
        if len(candidate) != 9:
            return None
        return GridCoordinate.parse(f"{candidate[:5]} {candidate[5:]}")


@lru_cache(maxsize=1)
def get_default_parser() -> CoordinateParser:
    """Shared parser with the default configuration."""
    return CoordinateParser()


def parse_text(text: str) -> List[GridCoordinate]:
    """Parse text with the shared default parser."""
    return get_default_parser().parse_text(text)
