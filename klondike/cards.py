from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, NamedTuple, Tuple

from .rng import SeededRandom

ACE = 1
KING = 13
RANK_LABELS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")


class Suit(str, Enum):
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    @property
    def color(self) -> str:
        return "red" if self in (Suit.HEARTS, Suit.DIAMONDS) else "black"


SUITS: Tuple[Suit, ...] = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)


def rank_label(rank: int) -> str:
    if not ACE <= rank <= KING:
        raise ValueError(f"rank out of range: {rank}")
    return RANK_LABELS[rank - 1]


def rank_from_label(label: str) -> int:
    try:
        return RANK_LABELS.index(label) + 1
    except ValueError:
        raise ValueError(f"unknown rank label: {label!r}") from None


class CardId(NamedTuple):
    rank: int
    suit: Suit
    deck: int

    def __str__(self) -> str:
        return f"{rank_label(self.rank)}-{self.suit.value}-{self.deck}"

    @classmethod
    def parse(cls, text: str) -> "CardId":
        parts = text.split("-")
        if len(parts) != 3:
            raise ValueError(f"malformed card id: {text!r}")
        label, suit, deck = parts
        try:
            return cls(rank_from_label(label), Suit(suit), int(deck))
        except ValueError:
            raise ValueError(f"malformed card id: {text!r}") from None


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: int
    deck: int = 0
    face_up: bool = False

    @property
    def card_id(self) -> CardId:
        return CardId(self.rank, self.suit, self.deck)

    @property
    def color(self) -> str:
        return self.suit.color

    def is_ace(self) -> bool:
        return self.rank == ACE

    def is_king(self) -> bool:
        return self.rank == KING

    def flipped(self, face_up: bool) -> "Card":
        if self.face_up == face_up:
            return self
        return replace(self, face_up=face_up)

    def label(self) -> str:
        return f"{rank_label(self.rank)}{self.suit.value[0].upper()}"

    def __str__(self) -> str:
        return self.label() if self.face_up else "--"


def iter_full_deck(num_decks: int) -> Iterable[Card]:
    for deck in range(num_decks):
        for suit in SUITS:
            for rank in range(ACE, KING + 1):
                yield Card(suit, rank, deck)


def shuffle(cards: List[Card], rng: SeededRandom) -> None:
    # Fisher-Yates, one draw per position
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        cards[i], cards[j] = cards[j], cards[i]


def build_deck(num_decks: int, rng: SeededRandom) -> List[Card]:
    deck = list(iter_full_deck(num_decks))
    shuffle(deck, rng)
    return deck
