"""
游戏状态枚举
Game State Enumeration
"""
from enum import Enum, auto


class GameState(Enum):
    """游戏状态枚举"""
    IDLE = auto()              # 尚未开始
    WELCOME = auto()           # 欢迎界面
    ROUND = auto()             # 回合进行中
    GAME_OVER = auto()         # 本局结束
    REMATCH_DECISION = auto()  # 询问是否再来一局
    END = auto()               # 会话结束

    def __str__(self):
        return self.name
