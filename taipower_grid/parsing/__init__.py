"""
Text parsing of Taipower grid coordinates with OCR error correction.
"""

from .corrector import DIGIT_TO_LETTER, LETTER_TO_DIGIT, apply_corrections
from .parser import CoordinateParser, get_default_parser, parse_text
from .patterns import (
    COMPACT_STRICT,
    LENIENT,
    SPACED_STRICT,
    STRATEGIES,
    ExtractionStrategy,
    normalize_text,
)
from .types import DEFAULT_STRATEGIES, ParserConfig, ParseResult

__all__ = [
    # Core classes
    "CoordinateParser",
    "parse_text",
    "get_default_parser",
    # Strategies
    "ExtractionStrategy",
    "STRATEGIES",
    "SPACED_STRICT",
    "COMPACT_STRICT",
    "LENIENT",
    "DEFAULT_STRATEGIES",
    "normalize_text",
    # OCR correction
    "apply_corrections",
    "LETTER_TO_DIGIT",
    "DIGIT_TO_LETTER",
    # Data types
    "ParserConfig",
    "ParseResult",
]
