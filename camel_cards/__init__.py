"""Camel-cards hand ranking."""

from camel_cards.classification.hand_classifier import HandClassifier
from camel_cards.models.hand import (
    JOKER_WILD,
    STANDARD,
    CardStrengths,
    Hand,
    HandType,
)
from camel_cards.parsing.hand_parser import HandParser
from camel_cards.scoring.scorer import HandScorer, RankedHand, ScoreResult

__version__ = "1.0.0"
__all__ = [
    "CardStrengths",
    "Hand",
    "HandClassifier",
    "HandParser",
    "HandScorer",
    "HandType",
    "JOKER_WILD",
    "RankedHand",
    "STANDARD",
    "ScoreResult",
]
