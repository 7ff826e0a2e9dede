from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .cards import CardId


class PileKind(str, Enum):
    STOCK = "stock"
    WASTE = "waste"
    FOUNDATION = "foundation"
    TABLEAU = "tableau"


class MoveKind(str, Enum):
    DRAW = "DRAW"
    TRANSFER = "TRANSFER"


def coerce_card_id(card_id: Union[CardId, str]) -> CardId:
    if isinstance(card_id, CardId):
        return card_id
    return CardId.parse(card_id)


@dataclass(frozen=True)
class TransferPayload:
    source_kind: PileKind
    source_index: int
    dest_kind: PileKind
    dest_index: int
    card_id: CardId


@dataclass(frozen=True)
class Move:
    kind: MoveKind
    payload: Optional[TransferPayload] = None

    @staticmethod
    def draw() -> "Move":
        return Move(MoveKind.DRAW)

    @staticmethod
    def transfer(
        source_kind: Union[PileKind, str],
        source_index: int,
        dest_kind: Union[PileKind, str],
        dest_index: int,
        card_id: Union[CardId, str],
    ) -> "Move":
        return Move(
            MoveKind.TRANSFER,
            TransferPayload(
                PileKind(source_kind),
                source_index,
                PileKind(dest_kind),
                dest_index,
                coerce_card_id(card_id),
            ),
        )
