"""Data models for camel-cards hands."""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from types import MappingProxyType
from typing import Optional

from camel_cards.errors import InvalidCardError

HAND_SIZE = 5


def count_labels(cards: Iterable[str]) -> list[int]:
    """Return label occurrence counts, largest first."""
    return sorted(Counter(cards).values(), reverse=True)


@total_ordering
class HandType(Enum):
    """Hand categories from weakest to strongest.

    Each member carries an explicit ``rank`` and the descending card-count
    shape that produces it.
    """

    HIGH_CARD = (0, (1, 1, 1, 1, 1))
    ONE_PAIR = (1, (2, 1, 1, 1))
    TWO_PAIR = (2, (2, 2, 1))
    THREE_OF_A_KIND = (3, (3, 1, 1))
    FULL_HOUSE = (4, (3, 2))
    FOUR_OF_A_KIND = (5, (4, 1))
    FIVE_OF_A_KIND = (6, (5,))

    def __init__(self, rank: int, counts: tuple[int, ...]):
        self.rank = rank
        self.counts = counts

    @property
    def display_name(self) -> str:
        """Return human-readable name."""
        return self.name.replace("_", " ").title()

    @classmethod
    def ordered(cls) -> list["HandType"]:
        """All hand types sorted by rank, weakest first."""
        return sorted(cls, key=lambda hand_type: hand_type.rank)

    @classmethod
    def from_counts(cls, counts: Sequence[int]) -> "HandType":
        """Map a descending card-count multiset like [3, 1, 1] to its type."""
        shape = tuple(counts)
        for hand_type in cls:
            if hand_type.counts == shape:
                return hand_type
        raise ValueError(f"No hand type for card counts {list(counts)}")

    @classmethod
    def from_cards(cls, cards: str, joker: Optional[str] = None) -> "HandType":
        """Classify card labels, adding any jokers to the largest group."""
        if joker is None:
            return cls.from_counts(count_labels(cards))

        jokers = cards.count(joker)
        counts = count_labels(c for c in cards if c != joker)
        if not counts:
            # All jokers
            return cls.from_counts([jokers])

        counts[0] += jokers
        return cls.from_counts(counts)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandType):
            return NotImplemented
        return self.rank < other.rank


@dataclass(frozen=True, eq=False)
class CardStrengths:
    """Strength table mapping card labels to comparable integers."""

    name: str
    values: Mapping[str, int]
    joker: Optional[str] = None

    def __post_init__(self) -> None:
        # Freeze the mapping so shared tables can't be mutated
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        if self.joker is not None and self.joker not in self.values:
            raise ValueError(f"Joker label {self.joker!r} missing from {self.name} table")

    @property
    def labels(self) -> frozenset[str]:
        """Accepted card labels."""
        return frozenset(self.values)

    @property
    def is_joker_wild(self) -> bool:
        return self.joker is not None

    def strength(self, label: str) -> int:
        """Return the strength of a single card label."""
        try:
            return self.values[label]
        except KeyError:
            raise InvalidCardError(label) from None


_DIGITS = {str(n): n for n in range(2, 10)}

STANDARD = CardStrengths(
    name="standard",
    values={**_DIGITS, "T": 10, "J": 11, "Q": 12, "K": 13, "A": 14},
)

JOKER_WILD = CardStrengths(
    name="joker-wild",
    values={"J": 1, **_DIGITS, "T": 10, "Q": 11, "K": 12, "A": 13},
    joker="J",
)


@dataclass(frozen=True)
class Hand:
    """A five-card hand with its bid and classified type."""

    cards: str  # five labels, e.g. "32T3K"
    bid: int
    hand_type: HandType = field(compare=False)

    def __post_init__(self) -> None:
        if len(self.cards) != HAND_SIZE:
            raise ValueError(f"Hand must have {HAND_SIZE} cards, got {len(self.cards)}: {self.cards!r}")
        for label in self.cards:
            STANDARD.strength(label)
        if self.bid < 0:
            raise ValueError(f"Bid must be non-negative, got {self.bid}")

        # Stored type must match the cards under one of the two rankings
        allowed = {HandType.from_cards(self.cards), HandType.from_cards(self.cards, JOKER_WILD.joker)}
        if self.hand_type not in allowed:
            raise ValueError(
                f"Hand {self.cards!r} can't be {self.hand_type.display_name}, "
                f"expected one of {sorted(t.display_name for t in allowed)}"
            )

    def __str__(self) -> str:
        return f"{self.cards} {self.bid}"

    @property
    def type_name(self) -> str:
        """Get human-readable type name."""
        return self.hand_type.display_name
