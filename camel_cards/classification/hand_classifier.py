"""Hand classification and ordering."""

from collections.abc import Iterable

from camel_cards.models.hand import STANDARD, CardStrengths, Hand, HandType, count_labels


class HandClassifier:
    """Classifies and orders hands using a card strength table.

    If the table names a joker, jokers are added to the largest group of
    the other labels, and score lowest in tie-breaks.
    """

    def __init__(self, strengths: CardStrengths = STANDARD):
        self.strengths = strengths

    @property
    def joker(self) -> str | None:
        return self.strengths.joker

    def validate(self, cards: Iterable[str]) -> None:
        """Raise InvalidCardError on the first unknown label."""
        for label in cards:
            self.strengths.strength(label)

    def count_cards(self, cards: Iterable[str]) -> list[int]:
        """Return label occurrence counts, largest first."""
        return count_labels(cards)

    def classify(self, cards: str) -> HandType:
        """Classify a hand's cards into a HandType.

        Args:
            cards: Five card labels, e.g. "T55J5"

        Returns:
            The hand type, boosted by jokers when the table is joker-wild
        """
        self.validate(cards)
        return HandType.from_cards(cards, self.joker)

    def card_strengths(self, cards: str) -> tuple[int, ...]:
        """Strengths of each card, left to right."""
        return tuple(self.strengths.strength(c) for c in cards)

    def sort_key(self, hand: Hand) -> tuple[int, ...]:
        """Key ordering hands by type rank, then card by card.

        The type is recomputed with this classifier's table, so hands parsed
        under the other ranking still order correctly.
        """
        return (self.classify(hand.cards).rank, *self.card_strengths(hand.cards))

    def compare(self, hand1: Hand, hand2: Hand) -> int:
        """
        Compare two hands.

        Args:
            hand1: First hand
            hand2: Second hand

        Returns:
            -1 if hand1 ranks lower, 1 if hand1 ranks higher, 0 if equal
        """
        key1 = self.sort_key(hand1)
        key2 = self.sort_key(hand2)

        if key1 < key2:
            return -1
        elif key1 > key2:
            return 1
        return 0
