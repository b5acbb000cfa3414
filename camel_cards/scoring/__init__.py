"""Hand ranking and scoring module."""

from camel_cards.scoring.scorer import HandScorer, RankedHand, ScoreResult

__all__ = [
    "HandScorer",
    "RankedHand",
    "ScoreResult",
]
