from __future__ import annotations

import argparse
import logging
from typing import Optional

from .engine import find_foundation_for
from .move import PileKind
from .session import GameSession


def _send_tops_home(session: GameSession) -> int:
    moved = 0
    progress = True
    while progress:
        progress = False
        state = session.state
        if state.waste and find_foundation_for(state, state.waste[0]) is not None:
            progress = session.auto_move_to_foundation(PileKind.WASTE, 0, state.waste[0].card_id)
        for idx, pile in enumerate(state.tableau):
            if progress:
                break
            if pile and find_foundation_for(state, pile[-1]) is not None:
                progress = session.auto_move_to_foundation(PileKind.TABLEAU, idx, pile[-1].card_id)
        moved += int(progress)
    return moved


def run_game(seed: Optional[int] = None, sweeps: int = 3) -> GameSession:
    session = GameSession.new(seed=seed)
    for _ in range(sweeps):
        _send_tops_home(session)
        while session.state.stock:
            session.draw()
            _send_tops_home(session)
        if session.has_won or not session.draw():
            break
    return session


def main() -> None:
    parser = argparse.ArgumentParser(description="Deal a Double Klondike game and play the foundation shortcut through the stock.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal.")
    parser.add_argument("--sweeps", type=int, default=3, help="Passes through the stock before stopping.")
    parser.add_argument("--verbose", action="store_true", help="Log engine decisions.")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    session = run_game(seed=args.seed, sweeps=args.sweeps)
    state = session.state
    print(f"Seed: {state.seed}")
    print(f"Moves applied: {len(session.moves)}")
    print("Stock / waste:", len(state.stock), "/", len(state.waste))
    print("Foundations:", [len(p) for p in state.foundations])
    print("Tableau:", [len(p) for p in state.tableau])
    print("Won" if session.has_won else "Not won")


if __name__ == "__main__":
    main()
