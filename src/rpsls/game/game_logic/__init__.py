"""
游戏逻辑模块
Game Logic Module
"""
from .move import Move
from .game_rules import GameRules, RoundOutcome, WINNING_SCORE
from .player import Player, PlayerController, HumanController, ComputerController, COMPUTER_NAMES
from .game_manager import GameManager, RoundResult, GameSummary

__all__ = [
    'Move',
    'GameRules',
    'RoundOutcome',
    'WINNING_SCORE',
    'Player',
    'PlayerController',
    'HumanController',
    'ComputerController',
    'COMPUTER_NAMES',
    'GameManager',
    'RoundResult',
    'GameSummary'
]
