"""
测试共用夹具
Shared Test Fixtures
"""
import io
from typing import List

import pytest

from rpsls.game import Console, Move, Player
from rpsls.game.game_logic import PlayerController


class ScriptedInput:
    """按顺序返回预设输入，用完后抛出EOFError"""

    def __init__(self, lines: List[str]):
        self.lines = list(lines)
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class ScriptedController(PlayerController):
    """按顺序出招的控制器"""

    def __init__(self, name: str, moves: List[Move]):
        self.name = name
        self.moves = list(moves)

    def establish_name(self) -> str:
        return self.name

    def choose_move(self) -> Move:
        return self.moves.pop(0)


@pytest.fixture
def make_console():
    """创建使用预设输入、输出写入StringIO的终端"""
    def _make(lines=()):
        return Console(input_func=ScriptedInput(lines), output=io.StringIO(), clear_enabled=False)
    return _make


@pytest.fixture
def scripted_player():
    """创建按预设招式出招的玩家"""
    def _make(name: str, moves=()):
        player = Player(ScriptedController(name, moves))
        player.establish_name()
        return player
    return _make
