"""Parser for camel-cards input files.

Each non-empty line holds one hand and its bid separated by a single space:

    32T3K 765
    T55J5 684
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from camel_cards.classification.hand_classifier import HandClassifier
from camel_cards.errors import HandParseError, InputFileError, InvalidCardError
from camel_cards.models.hand import HAND_SIZE, Hand

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(rf"^(?P<cards>\S{{{HAND_SIZE}}}) (?P<bid>[0-9]+)$")


class HandParser:
    """Parses and classifies hands from text input."""

    def __init__(self, classifier: HandClassifier | None = None):
        self.classifier = classifier or HandClassifier()

    def parse_line(self, line: str, line_number: int | None = None) -> Hand:
        """Parse a single '<cards> <bid>' line.

        Args:
            line: Raw input line; only a trailing newline is stripped
            line_number: 1-based line number used in error messages

        Returns:
            Classified Hand

        Raises:
            HandParseError: If the line is malformed or has an unknown card
        """
        text = line.rstrip("\r\n")
        match = LINE_PATTERN.fullmatch(text)
        if match is None:
            raise HandParseError(
                f"expected {HAND_SIZE} cards, a space and a bid", text, line_number
            )

        cards = match.group("cards")
        try:
            hand_type = self.classifier.classify(cards)
        except InvalidCardError as e:
            raise HandParseError(str(e), text, line_number) from e

        return Hand(cards=cards, bid=int(match.group("bid")), hand_type=hand_type)

    def parse_lines(self, lines: Iterable[str]) -> list[Hand]:
        """Parse every non-empty line into a Hand."""
        hands: list[Hand] = []
        for line_number, line in enumerate(lines, 1):
            if not line.rstrip("\r\n"):
                continue
            hands.append(self.parse_line(line, line_number))

        logger.info(f"Parsed {len(hands)} hands")
        return hands

    def parse_file(self, filepath: Path | str) -> list[Hand]:
        """Parse an input file.

        Raises:
            InputFileError: If the file can't be read
            HandParseError: If any line is malformed
        """
        path = Path(filepath)
        logger.debug(f"Reading hands from {path}")
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise InputFileError(f"Cannot read input file {path}: {e}") from e

        return self.parse_lines(lines)
