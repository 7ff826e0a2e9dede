from __future__ import annotations

import hashlib
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Tuple

from .cards import Card, build_deck
from .piles import is_valid_sequence
from .rng import SeededRandom, choose_seed
from .rules import Ruleset

Pile = Tuple[Card, ...]


@dataclass(frozen=True)
class GameState:
    stock: Pile
    waste: Pile
    foundations: Tuple[Pile, ...]
    tableau: Tuple[Pile, ...]
    seed: int
    ruleset: Ruleset = field(default_factory=Ruleset)

    def all_cards(self) -> Iterator[Card]:
        yield from self.stock
        yield from self.waste
        for pile in self.foundations:
            yield from pile
        for pile in self.tableau:
            yield from pile

    def card_count(self) -> int:
        return sum(1 for _ in self.all_cards())

    def state_key(self) -> Tuple:
        def pile_key(pile: Pile) -> Tuple:
            return tuple((str(card.card_id), card.face_up) for card in pile)

        return (
            self.seed,
            pile_key(self.stock),
            pile_key(self.waste),
            tuple(pile_key(p) for p in self.foundations),
            tuple(pile_key(p) for p in self.tableau),
        )

    def stable_hash(self) -> str:
        return hashlib.sha256(repr(self.state_key()).encode("utf-8")).hexdigest()


def _check_foundation(pile: Pile) -> Tuple[bool, str]:
    if not pile:
        return True, ""
    if not pile[0].is_ace():
        return False, "foundation must start with an ace"
    for lower, upper in zip(pile, pile[1:]):
        if upper.suit != lower.suit or upper.rank != lower.rank + 1:
            return False, "foundation must ascend in one suit"
    if not all(card.face_up for card in pile):
        return False, "foundation cards must be face up"
    return True, ""


def _check_tableau(pile: Pile) -> Tuple[bool, str]:
    first_up = next((i for i, card in enumerate(pile) if card.face_up), len(pile))
    face_up = pile[first_up:]
    if any(not card.face_up for card in face_up):
        return False, "face-down card above a face-up card"
    if pile and not pile[-1].face_up:
        return False, "top tableau card must be face up"
    if not is_valid_sequence(face_up):
        return False, "face-up run must alternate colors and descend"
    return True, ""


def check_invariants(state: GameState) -> Tuple[bool, str]:
    ruleset = state.ruleset
    if len(state.foundations) != ruleset.foundation_count():
        return False, f"expected {ruleset.foundation_count()} foundations"
    if len(state.tableau) != ruleset.tableau_piles:
        return False, f"expected {ruleset.tableau_piles} tableau piles"

    counts = Counter(card.card_id for card in state.all_cards())
    duplicates = [str(card_id) for card_id, count in counts.items() if count > 1]
    if duplicates:
        return False, f"duplicate cards: {', '.join(sorted(duplicates))}"
    if sum(counts.values()) != ruleset.deck_size():
        return False, f"expected {ruleset.deck_size()} cards, found {sum(counts.values())}"

    if any(card.face_up for card in state.stock):
        return False, "stock cards must be face down"
    if any(not card.face_up for card in state.waste):
        return False, "waste cards must be face up"

    for idx, pile in enumerate(state.foundations):
        ok, reason = _check_foundation(pile)
        if not ok:
            return False, f"foundation {idx}: {reason}"
    for idx, pile in enumerate(state.tableau):
        ok, reason = _check_tableau(pile)
        if not ok:
            return False, f"tableau {idx}: {reason}"
    return True, ""


def deal(deck: Sequence[Card], seed: int, ruleset: Ruleset | None = None) -> GameState:
    ruleset = ruleset or Ruleset()
    tableau = []
    idx = 0
    for size in range(1, ruleset.tableau_piles + 1):
        pile = tuple(card.flipped(i == size - 1) for i, card in enumerate(deck[idx : idx + size]))
        tableau.append(pile)
        idx += size
    return GameState(
        stock=tuple(card.flipped(False) for card in deck[idx:]),
        waste=(),
        foundations=tuple(() for _ in range(ruleset.foundation_count())),
        tableau=tuple(tableau),
        seed=seed,
        ruleset=ruleset,
    )


def initialize_game(seed: Optional[int] = None, ruleset: Ruleset | None = None) -> GameState:
    ruleset = ruleset or Ruleset()
    if seed is None:
        seed = choose_seed(ruleset)
    rng = SeededRandom(seed)
    deck = build_deck(ruleset.num_decks, rng)
    return deal(deck, seed, ruleset)
