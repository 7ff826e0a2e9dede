"""Double Klondike rule engine package."""

from .rules import Ruleset
from .rng import SeededRandom, choose_seed
from .cards import Card, CardId, Suit, build_deck
from .piles import can_move_sequence_to_tableau, can_move_to_foundation, can_move_to_tableau, is_valid_sequence
from .state import GameState, check_invariants, deal, initialize_game
from .move import Move, MoveKind, PileKind
from .engine import (
    apply_move,
    draw,
    draw_or_recycle,
    explain_move,
    find_foundation_for,
    has_won,
    is_legal_move,
    move_card,
    recycle,
    replay_event_log,
)
from .session import GameSession

__all__ = [
    "Ruleset",
    "SeededRandom",
    "choose_seed",
    "Card",
    "CardId",
    "Suit",
    "build_deck",
    "is_valid_sequence",
    "can_move_to_foundation",
    "can_move_to_tableau",
    "can_move_sequence_to_tableau",
    "GameState",
    "check_invariants",
    "deal",
    "initialize_game",
    "Move",
    "MoveKind",
    "PileKind",
    "apply_move",
    "draw",
    "draw_or_recycle",
    "explain_move",
    "find_foundation_for",
    "has_won",
    "is_legal_move",
    "move_card",
    "recycle",
    "replay_event_log",
    "GameSession",
]
