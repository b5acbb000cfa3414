"""Ranking hands and computing total winnings."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from camel_cards.classification.hand_classifier import HandClassifier
from camel_cards.models.hand import Hand, HandType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedHand:
    """A hand with its 1-based position in the final ordering."""

    rank: int
    hand: Hand
    hand_type: HandType  # under the scoring table, may differ from hand.hand_type

    @property
    def winnings(self) -> int:
        return self.rank * self.hand.bid


@dataclass
class ScoreResult:
    """Result of scoring a set of hands."""

    total: int
    ranked_hands: list[RankedHand] = field(default_factory=list)
    type_counts: dict[HandType, int] = field(default_factory=dict)

    @property
    def hand_count(self) -> int:
        return len(self.ranked_hands)


class HandScorer:
    """Ranks hands by type and card strength.

    Ranking:
    ========
    1. Hands are grouped into one bucket per HandType, classified with
       the scorer's own table
    2. Each bucket is sorted card by card with the classifier's table
    3. Ranks run 1..N across buckets, weakest type first, without resetting
    """

    def __init__(self, classifier: HandClassifier | None = None):
        self.classifier = classifier or HandClassifier()

    def group_by_type(self, hands: Iterable[Hand]) -> dict[HandType, list[Hand]]:
        """Split hands into per-type buckets, weakest type first."""
        buckets: dict[HandType, list[Hand]] = {
            hand_type: [] for hand_type in HandType.ordered()
        }
        for hand in hands:
            buckets[self.classifier.classify(hand.cards)].append(hand)
        return buckets

    def rank_hands(self, hands: Iterable[Hand]) -> list[RankedHand]:
        """Assign every hand its rank, weakest hand first."""
        ranked: list[RankedHand] = []
        rank = 1
        for hand_type, bucket in self.group_by_type(hands).items():
            bucket.sort(key=lambda hand: self.classifier.card_strengths(hand.cards))
            for hand in bucket:
                ranked.append(RankedHand(rank=rank, hand=hand, hand_type=hand_type))
                rank += 1
        return ranked

    def score(self, hands: Iterable[Hand]) -> ScoreResult:
        """Rank hands and sum rank * bid.

        Args:
            hands: Parsed and classified hands

        Returns:
            ScoreResult with the total and per-hand ranks
        """
        ranked = self.rank_hands(hands)

        type_counts: dict[HandType, int] = {hand_type: 0 for hand_type in HandType.ordered()}
        for ranked_hand in ranked:
            type_counts[ranked_hand.hand_type] += 1
            logger.debug(
                f"Rank {ranked_hand.rank}: {ranked_hand.hand.cards} "
                f"({ranked_hand.hand_type.display_name}) bid={ranked_hand.hand.bid}"
            )

        total = sum(ranked_hand.winnings for ranked_hand in ranked)

        logger.info(
            f"Scored {len(ranked)} hands with {self.classifier.strengths.name} table: "
            f"total={total}, "
            + ", ".join(f"{t.display_name}={n}" for t, n in type_counts.items())
        )

        return ScoreResult(total=total, ranked_hands=ranked, type_counts=type_counts)
