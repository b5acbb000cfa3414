"""Data models for camel-cards hands."""

from camel_cards.models.hand import (
    HAND_SIZE,
    JOKER_WILD,
    STANDARD,
    CardStrengths,
    Hand,
    HandType,
)

__all__ = [
    "HAND_SIZE",
    "CardStrengths",
    "Hand",
    "HandType",
    "JOKER_WILD",
    "STANDARD",
]
