"""
游戏规则测试
Game Rules Tests
"""
from itertools import combinations

import pytest

from rpsls.game.game_logic import GameRules, Move, RoundOutcome


def test_beats_table():
    """胜负表与规则一致"""
    expected = {
        Move.ROCK: {Move.LIZARD, Move.SCISSORS},
        Move.PAPER: {Move.ROCK, Move.SPOCK},
        Move.SCISSORS: {Move.LIZARD, Move.PAPER},
        Move.LIZARD: {Move.SPOCK, Move.PAPER},
        Move.SPOCK: {Move.ROCK, Move.SCISSORS},
    }
    for move, losers in expected.items():
        assert GameRules.get_losing_moves(move) == losers


def test_exactly_one_side_wins_between_distinct_moves():
    for a, b in combinations(Move, 2):
        assert GameRules.beats(a, b) != GameRules.beats(b, a)


def test_move_never_beats_itself():
    for move in Move:
        assert not GameRules.beats(move, move)


def test_each_move_beats_two_and_loses_to_two():
    for move in Move:
        assert len(GameRules.get_losing_moves(move)) == 2
        assert len(GameRules.get_winning_moves(move)) == 2
        assert move not in GameRules.get_winning_moves(move)


@pytest.mark.parametrize("token,expected", [
    ('r', 'rock'),
    ('p', 'paper'),
    ('s', 'scissors'),
    ('l', 'lizard'),
    ('sp', 'spock'),
    ('rock', 'rock'),
    ('spock', 'spock'),
    ('x', 'x'),
    ('R', 'R'),
    ('', ''),
])
def test_translate_shorthand(token, expected):
    assert GameRules.translate_shorthand(token) == expected


def test_resolve_canonical_names():
    assert GameRules.resolve('lizard') is Move.LIZARD
    assert GameRules.resolve('Rock') is None
    assert GameRules.resolve('r') is None
    assert GameRules.is_valid_move('spock')
    assert not GameRules.is_valid_move('fire')


def test_judge():
    assert GameRules.judge(Move.ROCK, Move.SCISSORS) == RoundOutcome.HUMAN_WIN
    assert GameRules.judge(Move.SPOCK, Move.LIZARD) == RoundOutcome.COMPUTER_WIN
    assert GameRules.judge(Move.PAPER, Move.PAPER) == RoundOutcome.TIE


def test_every_move_has_a_glyph():
    assert Move.ROCK.glyph == "\U0001FAA8"
    assert all(move.glyph for move in Move)
    assert str(Move.SCISSORS) == "scissors"
