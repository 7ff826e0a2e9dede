import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from helpers import card
from klondike.piles import (
    can_move_sequence_to_tableau,
    can_move_to_foundation,
    can_move_to_tableau,
    is_valid_sequence,
)


@pytest.mark.parametrize(
    "cards, expected",
    [
        ([], True),
        (["5H"], True),
        (["8S", "7H", "6C"], True),
        (["8S", "7S"], False),
        (["8S", "6H"], False),
        (["7H", "8S"], False),
        (["KD", "QC", "JH", "10S"], True),
    ],
)
def test_sequence_validity(cards, expected):
    assert is_valid_sequence([card(c) for c in cards]) is expected


def test_foundation_starts_with_ace_and_follows_suit():
    assert can_move_to_foundation(card("AH"), [])
    assert not can_move_to_foundation(card("2H"), [])
    assert can_move_to_foundation(card("2H"), [card("AH")])
    assert not can_move_to_foundation(card("2D"), [card("AH")])
    assert not can_move_to_foundation(card("3H"), [card("AH")])


def test_foundation_accepts_suit_from_other_deck():
    assert can_move_to_foundation(card("2H", deck=1), [card("AH", deck=0)])


def test_tableau_single_card_rules():
    assert can_move_to_tableau(card("KS"), [])
    assert not can_move_to_tableau(card("QS"), [])
    assert can_move_to_tableau(card("8C"), [card("9D")])
    assert not can_move_to_tableau(card("8H"), [card("9D")])
    assert not can_move_to_tableau(card("7C"), [card("9D")])
    assert not can_move_to_tableau(card("8C"), [card("9D", up=False)])


def test_tableau_sequence_checks_only_bottom_card():
    group = [card("8S"), card("7H"), card("6C")]
    assert can_move_sequence_to_tableau(group, [card("9H")])
    assert not can_move_sequence_to_tableau(group, [card("9S")])
    assert can_move_sequence_to_tableau([card("KH"), card("QS")], [])
    assert not can_move_sequence_to_tableau([], [card("9H")])
