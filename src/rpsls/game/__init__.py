"""
游戏模块
Game Module
"""
from .console import Console
from .game_controller import GameController
from .game_logic import (
    Move, GameRules, RoundOutcome, Player, HumanController, ComputerController,
    GameManager, RoundResult, GameSummary
)
from .state_machine import GameState, GameStateMachine

__all__ = [
    'Console',
    'GameController',
    'Move',
    'GameRules',
    'RoundOutcome',
    'Player',
    'HumanController',
    'ComputerController',
    'GameManager',
    'RoundResult',
    'GameSummary',
    'GameState',
    'GameStateMachine'
]
