import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from helpers import card, make_state
from klondike.cli import main, run_game
from klondike.engine import replay_event_log
from klondike.move import PileKind
from klondike.session import GameSession
from klondike.state import check_invariants, initialize_game


def test_new_session_records_seed():
    session = GameSession.new(seed=42)
    assert session.seed == 42
    assert session.state == initialize_game(42)
    assert not session.can_undo()
    assert not session.has_won


def test_draw_pushes_history_and_undo_restores():
    session = GameSession.new(seed=8)
    before = session.state
    assert session.draw()
    assert session.history == [before]
    assert len(session.state.waste) == 1

    assert session.undo()
    assert session.state is before
    assert session.moves == []
    assert not session.undo()


def test_rejected_move_leaves_history_alone():
    session = GameSession.new(seed=8)
    before = session.state
    top = before.tableau[0][-1]
    assert not session.move("tableau", 0, "waste", 0, top.card_id)
    assert not session.move("tableau", 0, "tableau", 1, "not-a-card")
    assert session.state is before
    assert session.history == []


def test_auto_move_to_foundation():
    state = make_state(tableau={0: [card("KS", up=False), card("AH")]}, waste=[card("AH", deck=1)])
    session = GameSession(state=state, initial_state=state)
    assert session.auto_move_to_foundation(PileKind.TABLEAU, 0, card("AH").card_id)
    assert session.state.foundations[0] == (card("AH"),)
    assert session.state.tableau[0] == (card("KS"),)

    assert session.auto_move_to_foundation("waste", 0, "A-hearts-1")
    assert session.state.foundations[1] == (card("AH", deck=1),)
    assert not session.auto_move_to_foundation("tableau", 0, card("KS").card_id)
    assert not session.auto_move_to_foundation("tableau", 0, "Q-clubs-0")
    assert len(session.history) == 2


def test_moves_replay_to_current_state_and_restart():
    session = run_game(seed=42, sweeps=2)
    assert replay_event_log(session.initial_state, session.moves) == session.state
    ok, reason = check_invariants(session.state)
    assert ok, reason

    session.restart()
    assert session.state == initialize_game(42)
    assert session.history == [] and session.moves == []


def test_cli_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["double-klondike", "--seed", "42", "--sweeps", "1"])
    main()
    out = capsys.readouterr().out
    assert "Seed: 42" in out
    assert "Tableau:" in out
