"""Input parsing."""

from camel_cards.parsing.hand_parser import HandParser

__all__ = ["HandParser"]
