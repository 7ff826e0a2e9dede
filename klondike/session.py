"""Play session: the current snapshot plus the history used for undo.

The engine only ever produces the next state. A session keeps the previous
snapshots so undo is a pop, records accepted moves so a game can be replayed
from its seed, and only touches either list when a request actually changed
the state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .cards import CardId
from .engine import apply_move, find_foundation_for, has_won
from .move import Move, PileKind, coerce_card_id
from .rules import Ruleset
from .state import GameState, initialize_game

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    state: GameState
    initial_state: GameState
    history: List[GameState] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)

    @classmethod
    def new(cls, seed: Optional[int] = None, ruleset: Ruleset | None = None) -> "GameSession":
        state = initialize_game(seed, ruleset)
        logger.info(f"New game with seed {state.seed}")
        return cls(state=state, initial_state=state)

    @property
    def seed(self) -> int:
        return self.state.seed

    @property
    def has_won(self) -> bool:
        return has_won(self.state)

    def can_undo(self) -> bool:
        return bool(self.history)

    def apply(self, move: Move) -> bool:
        new_state = apply_move(self.state, move)
        if new_state is self.state:
            return False
        self.history.append(self.state)
        self.moves.append(move)
        self.state = new_state
        if has_won(new_state):
            logger.info(f"Game {new_state.seed} won after {len(self.moves)} moves")
        return True

    def draw(self) -> bool:
        return self.apply(Move.draw())

    def move(
        self,
        source_kind: Union[PileKind, str],
        source_index: int,
        dest_kind: Union[PileKind, str],
        dest_index: int,
        card_id: Union[CardId, str],
    ) -> bool:
        try:
            move = Move.transfer(source_kind, source_index, dest_kind, dest_index, card_id)
        except ValueError as exc:
            logger.debug(f"Ignoring malformed move request: {exc}")
            return False
        return self.apply(move)

    def auto_move_to_foundation(
        self, source_kind: Union[PileKind, str], source_index: int, card_id: Union[CardId, str]
    ) -> bool:
        """Send a card to the first foundation that accepts it."""
        try:
            card_id = coerce_card_id(card_id)
        except ValueError as exc:
            logger.debug(f"Ignoring malformed card id: {exc}")
            return False
        card = next((c for c in self.state.all_cards() if c.card_id == card_id), None)
        if card is None:
            return False
        target = find_foundation_for(self.state, card)
        if target is None:
            return False
        return self.move(source_kind, source_index, PileKind.FOUNDATION, target, card_id)

    def undo(self) -> bool:
        if not self.history:
            return False
        self.state = self.history.pop()
        self.moves.pop()
        logger.info(f"Undo in game {self.state.seed}, {len(self.history)} snapshots left")
        return True

    def restart(self) -> None:
        self.state = self.initial_state
        self.history.clear()
        self.moves.clear()
