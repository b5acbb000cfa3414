"""Camel-cards command-line entry point.

Reads hands and bids, ranks them and prints the total winnings.

Usage:
    python -m camel_cards
    python -m camel_cards path/to/input.txt --joker
    python -m camel_cards --config path/to/config.env
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from camel_cards import __version__
from camel_cards.classification.hand_classifier import HandClassifier
from camel_cards.config.settings import CamelCardsSettings, get_settings
from camel_cards.errors import CamelCardsError
from camel_cards.models.hand import JOKER_WILD, STANDARD
from camel_cards.parsing.hand_parser import HandParser
from camel_cards.scoring.scorer import HandScorer, ScoreResult

logger = logging.getLogger(__name__)


def load_settings(config_path: str | None = None) -> CamelCardsSettings:
    """Load settings from config file or environment.

    Settings are loaded from:
    1. Specified config file (--config option), which overrides the environment
    2. Environment variables
    3. Default .env in current directory
    """
    if config_path:
        from dotenv import load_dotenv
        if not load_dotenv(config_path, override=True):
            logger.warning(f"Config file {config_path} not found or empty, using environment only")
        return CamelCardsSettings()  # type: ignore[call-arg]

    return get_settings()


def setup_logging(level: str) -> None:
    """Configure logging to stderr; stdout carries the result."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def run(input_path: Path | str, joker_wild: bool = False) -> ScoreResult:
    """Parse, classify, rank and score the hands in an input file."""
    classifier = HandClassifier(JOKER_WILD if joker_wild else STANDARD)
    hands = HandParser(classifier).parse_file(input_path)
    return HandScorer(classifier).score(hands)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="camel-cards",
        description="Rank camel-cards hands and print the total winnings",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Input file (default: $AOC_2023_07_PATH/input.txt)",
    )
    variant = parser.add_mutually_exclusive_group()
    variant.add_argument(
        "--joker",
        "-j",
        dest="joker_wild",
        action="store_true",
        default=None,
        help="Treat J as a wild joker",
    )
    variant.add_argument(
        "--standard",
        dest="joker_wild",
        action="store_false",
        default=None,
        help="Use the standard card ranking",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Path to config.env file",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (overrides LOG_LEVEL)",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"camel-cards {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        print(f"camel-cards: invalid settings: {problems}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or settings.log_level)

    input_path = args.input or settings.input_path
    joker_wild = settings.joker_wild if args.joker_wild is None else args.joker_wild

    try:
        result = run(input_path, joker_wild=joker_wild)
    except CamelCardsError as e:
        logger.error(f"Fatal error: {e}")
        print(f"camel-cards: {e}", file=sys.stderr)
        return 1

    print(result.total)
    return 0


def cli() -> None:
    """Command-line interface."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
