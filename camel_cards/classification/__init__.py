"""Hand classification and ordering."""

from camel_cards.classification.hand_classifier import HandClassifier

__all__ = ["HandClassifier"]
