"""
Extraction strategies for grid coordinates in normalized OCR text.

Strategies are listed from strict to lenient. The parser stops at the first
strategy that yields a valid coordinate, so an explicitly spaced candidate
with clean character classes always wins over a looser reading.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterator, Tuple

WHITESPACE = re.compile(r"\s+")
DISALLOWED_CHARACTERS = re.compile(r"[^A-Za-z0-9\s]")


def normalize_text(text: str) -> str:
    """Drop everything except letters, digits and whitespace; uppercase the rest."""
    return DISALLOWED_CHARACTERS.sub("", text).upper()


def _keep(text: str) -> str:
    return text


def _remove_whitespace(text: str) -> str:
    return WHITESPACE.sub("", text)


@dataclass(frozen=True)
class ExtractionStrategy:
    """A named pattern plus the text preparation it runs on."""

    name: str
    pattern: re.Pattern
    prepare: Callable[[str], str] = _keep
    priority: int = 1

    def candidates(self, text: str) -> Iterator[str]:
        """
        Yield the 9-character candidate of every match, in discovery order.

        Args:
            text: Normalized text
        """
        for match in self.pattern.finditer(self.prepare(text)):
            yield "".join(match.groups())


SPACED_STRICT = ExtractionStrategy(
    "spaced_strict",
    re.compile(r"([A-Z])([0-9]{4})\s+([A-Z]{2})([0-9]{2})\b"),
    priority=3,
)

COMPACT_STRICT = ExtractionStrategy(
    "compact_strict",
    re.compile(r"([A-Z])([0-9]{4})([A-Z]{2})([0-9]{2})\b"),
    prepare=_remove_whitespace,
    priority=2,
)

# Zone and precision may hold letters, block may hold digits (OCR confusions)
LENIENT = ExtractionStrategy(
    "lenient",
    re.compile(r"([A-Z])([0-9A-Z]{4})\s+([A-Z0-9]{2})([0-9A-Z]{2})\b"),
    priority=1,
)

STRATEGIES: Tuple[ExtractionStrategy, ...] = (SPACED_STRICT, COMPACT_STRICT, LENIENT)
