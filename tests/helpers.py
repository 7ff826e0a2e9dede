from klondike.cards import Card, Suit
from klondike.engine import is_legal_move
from klondike.move import Move, PileKind
from klondike.state import GameState

SUIT_BY_LETTER = {"H": Suit.HEARTS, "D": Suit.DIAMONDS, "C": Suit.CLUBS, "S": Suit.SPADES}


def card(text: str, up: bool = True, deck: int = 0) -> Card:
    """Build a card from shorthand such as ``"10H"`` or ``"KS"``."""
    labels = {"A": 1, "J": 11, "Q": 12, "K": 13}
    rank_text, suit = text[:-1], text[-1]
    rank = labels[rank_text] if rank_text in labels else int(rank_text)
    return Card(SUIT_BY_LETTER[suit], rank, deck, up)


def make_state(tableau=None, foundations=None, stock=(), waste=(), seed=0) -> GameState:
    tableau = dict(tableau or {})
    foundations = dict(foundations or {})
    return GameState(
        stock=tuple(stock),
        waste=tuple(waste),
        foundations=tuple(tuple(foundations.get(i, ())) for i in range(8)),
        tableau=tuple(tuple(tableau.get(i, ())) for i in range(9)),
        seed=seed,
    )


def legal_moves(state: GameState):
    moves = []
    if state.stock or state.waste:
        moves.append(Move.draw())
    sources = []
    if state.waste:
        sources.append((PileKind.WASTE, 0, state.waste[0]))
    for idx, pile in enumerate(state.tableau):
        sources.extend((PileKind.TABLEAU, idx, c) for c in pile if c.face_up)
    for idx, pile in enumerate(state.foundations):
        if pile:
            sources.append((PileKind.FOUNDATION, idx, pile[-1]))
    for kind, idx, c in sources:
        for dest_kind, count in ((PileKind.TABLEAU, len(state.tableau)), (PileKind.FOUNDATION, len(state.foundations))):
            for dest_idx in range(count):
                move = Move.transfer(kind, idx, dest_kind, dest_idx, c.card_id)
                legal, _ = is_legal_move(state, move)
                if legal:
                    moves.append(move)
    return moves
