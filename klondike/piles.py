"""Stateless legality checks shared by the move engine and auto-move."""

from __future__ import annotations

from typing import Optional, Sequence

from .cards import Card


def top_card(pile: Sequence[Card]) -> Optional[Card]:
    return pile[-1] if pile else None


def is_valid_sequence(cards: Sequence[Card]) -> bool:
    for upper, lower in zip(cards, cards[1:]):
        if upper.color == lower.color:
            return False
        if upper.rank != lower.rank + 1:
            return False
    return True


def can_move_to_foundation(card: Card, foundation: Sequence[Card]) -> bool:
    top = top_card(foundation)
    if top is None:
        return card.is_ace()
    return card.suit == top.suit and card.rank == top.rank + 1


def can_move_to_tableau(card: Card, pile: Sequence[Card]) -> bool:
    top = top_card(pile)
    if top is None:
        return card.is_king()
    if not top.face_up:
        return False
    return card.color != top.color and card.rank == top.rank - 1


def can_move_sequence_to_tableau(cards: Sequence[Card], pile: Sequence[Card]) -> bool:
    # only the bottom-most moved card is checked against the pile
    if not cards:
        return False
    return can_move_to_tableau(cards[0], pile)
