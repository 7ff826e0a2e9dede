from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional, Tuple, Union

from .cards import KING, Card, CardId
from .move import Move, MoveKind, PileKind, TransferPayload, coerce_card_id
from .piles import can_move_sequence_to_tableau, can_move_to_foundation, is_valid_sequence
from .state import GameState, Pile

logger = logging.getLogger(__name__)

SOURCE_KINDS = (PileKind.WASTE, PileKind.TABLEAU, PileKind.FOUNDATION)
DEST_KINDS = (PileKind.TABLEAU, PileKind.FOUNDATION)


def _replace_pile(piles: Tuple[Pile, ...], index: int, pile: Pile) -> Tuple[Pile, ...]:
    return piles[:index] + (pile,) + piles[index + 1 :]


def _piles_of(state: GameState, kind: PileKind) -> Tuple[Pile, ...]:
    return state.foundations if kind == PileKind.FOUNDATION else state.tableau


def _with_piles(state: GameState, kind: PileKind, piles: Tuple[Pile, ...]) -> GameState:
    if kind == PileKind.FOUNDATION:
        return replace(state, foundations=piles)
    return replace(state, tableau=piles)


def _index_of(pile: Pile, card_id: CardId) -> int:
    for idx, card in enumerate(pile):
        if card.card_id == card_id:
            return idx
    return -1


def _take_group(state: GameState, kind: PileKind, index: int, card_id: CardId) -> Tuple[Optional[GameState], Pile, str]:
    """Remove the group headed by ``card_id`` from its source pile.

    Returns the state without the group (with the newly exposed tableau card
    turned face up), the group itself, and a reason when nothing can be taken.
    """
    if kind == PileKind.WASTE:
        if not state.waste or state.waste[0].card_id != card_id:
            return None, (), "only the top waste card can move"
        return replace(state, waste=state.waste[1:]), state.waste[:1], ""

    piles = _piles_of(state, kind)
    if not 0 <= index < len(piles):
        return None, (), f"no {kind.value} pile {index}"
    pile = piles[index]
    pos = _index_of(pile, card_id)
    if pos < 0:
        return None, (), f"card {card_id} is not in {kind.value} {index}"
    if not pile[pos].face_up:
        return None, (), f"card {card_id} is face down"

    remaining = pile[:pos]
    if kind == PileKind.TABLEAU and remaining and not remaining[-1].face_up:
        remaining = remaining[:-1] + (remaining[-1].flipped(True),)
    return _with_piles(state, kind, _replace_pile(piles, index, remaining)), pile[pos:], ""


def _plan_transfer(
    state: GameState,
    source_kind: Union[PileKind, str],
    source_index: int,
    dest_kind: Union[PileKind, str],
    dest_index: int,
    card_id: Union[CardId, str],
) -> Tuple[Optional[GameState], str]:
    try:
        source_kind = PileKind(source_kind)
        dest_kind = PileKind(dest_kind)
        card_id = coerce_card_id(card_id)
    except ValueError as exc:
        return None, str(exc)

    if source_kind not in SOURCE_KINDS:
        return None, f"cannot move cards out of the {source_kind.value}"
    if dest_kind not in DEST_KINDS:
        return None, f"cannot move cards onto the {dest_kind.value}"
    if source_kind == dest_kind and source_index == dest_index:
        return None, "source and destination are the same pile"

    dest_piles = _piles_of(state, dest_kind)
    if not 0 <= dest_index < len(dest_piles):
        return None, f"no {dest_kind.value} pile {dest_index}"

    taken, group, reason = _take_group(state, source_kind, source_index, card_id)
    if taken is None:
        return None, reason
    if not is_valid_sequence(group):
        return None, "cards do not form a valid sequence"

    dest_pile = _piles_of(taken, dest_kind)[dest_index]
    if dest_kind == PileKind.FOUNDATION:
        if len(group) != 1:
            return None, "only one card at a time can move to a foundation"
        if not can_move_to_foundation(group[0], dest_pile):
            return None, f"foundation {dest_index} does not accept {group[0].label()}"
    elif not can_move_sequence_to_tableau(group, dest_pile):
        return None, f"tableau {dest_index} does not accept {group[0].label()}"

    new_piles = _replace_pile(_piles_of(taken, dest_kind), dest_index, dest_pile + group)
    return _with_piles(taken, dest_kind, new_piles), ""


def explain_move(
    state: GameState,
    source_kind: Union[PileKind, str],
    source_index: int,
    dest_kind: Union[PileKind, str],
    dest_index: int,
    card_id: Union[CardId, str],
) -> Tuple[bool, str]:
    new_state, reason = _plan_transfer(state, source_kind, source_index, dest_kind, dest_index, card_id)
    return new_state is not None, reason


def move_card(
    state: GameState,
    source_kind: Union[PileKind, str],
    source_index: int,
    dest_kind: Union[PileKind, str],
    dest_index: int,
    card_id: Union[CardId, str],
) -> GameState:
    """Move a card, or the face-up run it heads, between piles.

    A rejected move returns ``state`` itself, so callers detect a no-op with
    ``new_state is state``.
    """
    new_state, reason = _plan_transfer(state, source_kind, source_index, dest_kind, dest_index, card_id)
    if new_state is None:
        logger.debug(f"Rejected move of {card_id} from {source_kind} {source_index} to {dest_kind} {dest_index}: {reason}")
        return state
    return new_state


def draw(state: GameState) -> GameState:
    if not state.stock:
        return state
    card = state.stock[0].flipped(True)
    return replace(state, stock=state.stock[1:], waste=(card,) + state.waste)


def recycle(state: GameState) -> GameState:
    if state.stock or not state.waste:
        return state
    stock = tuple(card.flipped(False) for card in reversed(state.waste))
    return replace(state, stock=stock, waste=())


def draw_or_recycle(state: GameState) -> GameState:
    if state.stock:
        return draw(state)
    return recycle(state)


def find_foundation_for(state: GameState, card: Card) -> Optional[int]:
    for idx, pile in enumerate(state.foundations):
        if can_move_to_foundation(card, pile):
            return idx
    return None


def has_won(state: GameState) -> bool:
    if state.stock or state.waste:
        return False
    if any(state.tableau):
        return False
    aces = sum(1 for pile in state.foundations for card in pile if card.is_ace())
    kings = sum(1 for pile in state.foundations for card in pile if card.is_king())
    expected = state.ruleset.foundation_count()
    if aces != expected or kings != expected:
        return False
    return all(len(pile) == KING for pile in state.foundations)


def is_legal_move(state: GameState, move: Move) -> Tuple[bool, str]:
    if move.kind == MoveKind.DRAW:
        if not state.stock and not state.waste:
            return False, "stock and waste are both empty"
        return True, ""

    if move.kind != MoveKind.TRANSFER or move.payload is None:
        return False, "invalid move payload"

    payload: TransferPayload = move.payload
    return explain_move(
        state, payload.source_kind, payload.source_index, payload.dest_kind, payload.dest_index, payload.card_id
    )


def apply_move(state: GameState, move: Move) -> GameState:
    if move.kind == MoveKind.DRAW:
        return draw_or_recycle(state)
    if move.kind == MoveKind.TRANSFER and move.payload is not None:
        payload = move.payload
        return move_card(
            state, payload.source_kind, payload.source_index, payload.dest_kind, payload.dest_index, payload.card_id
        )
    return state


def replay_event_log(initial_state: GameState, moves: Iterable[Move]) -> GameState:
    state = initial_state
    for idx, move in enumerate(moves):
        legal, reason = is_legal_move(state, move)
        if not legal:
            raise ValueError(f"move {idx} cannot be replayed: {reason}")
        state = apply_move(state, move)
    return state
