"""
招式枚举类型
Move Enumeration
"""
from enum import Enum
from typing import Optional


class Move(Enum):
    """招式枚举"""
    ROCK = "rock"          # 石头
    PAPER = "paper"        # 布
    SCISSORS = "scissors"  # 剪刀
    LIZARD = "lizard"      # 蜥蜴
    SPOCK = "spock"        # 斯波克

    def __str__(self):
        return self.value

    @property
    def glyph(self) -> str:
        """招式对应的表情符号"""
        return MOVE_GLYPHS[self]

    @classmethod
    def from_string(cls, value: str) -> Optional["Move"]:
        """
        从规范名称创建招式枚举（区分大小写）

        Args:
            value: 招式名称（rock, paper, scissors, lizard, spock）

        Returns:
            Optional[Move]: 招式枚举值，名称无效返回None
        """
        for move in cls:
            if move.value == value:
                return move
        return None


MOVE_GLYPHS = {
    Move.ROCK: "\U0001FAA8",
    Move.PAPER: "\U0001F4C4",
    Move.SCISSORS: "✂",
    Move.LIZARD: "\U0001F98E",
    Move.SPOCK: "\U0001F596",
}
