"""
游戏规则实现
Game Rules Implementation
"""
from typing import FrozenSet, Optional
from enum import Enum
from .move import Move
from ...utils.logger import setup_logger

logger = setup_logger("RPSLS.GameRules")

# 获胜所需分数，不可配置
WINNING_SCORE = 5


class RoundOutcome(Enum):
    """回合结果枚举"""
    HUMAN_WIN = "human_win"        # 玩家获胜
    COMPUTER_WIN = "computer_win"  # 电脑获胜
    TIE = "tie"                    # 平局


class GameRules:
    """游戏规则类"""

    # 胜负规则：key胜value中的两个招式
    WIN_RULES = {
        Move.ROCK: frozenset({Move.LIZARD, Move.SCISSORS}),
        Move.PAPER: frozenset({Move.ROCK, Move.SPOCK}),
        Move.SCISSORS: frozenset({Move.LIZARD, Move.PAPER}),
        Move.LIZARD: frozenset({Move.SPOCK, Move.PAPER}),
        Move.SPOCK: frozenset({Move.ROCK, Move.SCISSORS}),
    }

    # 简写输入
    SHORTHAND_MOVES = {
        'r': "rock",
        'p': "paper",
        's': "scissors",
        'l': "lizard",
        'sp': "spock",
    }

    @staticmethod
    def resolve(name: str) -> Optional[Move]:
        """
        根据规范名称查找招式

        Args:
            name: 招式名称

        Returns:
            Optional[Move]: 招式，名称不是五个规范名称之一时返回None
        """
        return Move.from_string(name)

    @staticmethod
    def translate_shorthand(token: str) -> str:
        """
        将简写转换为完整招式名称，其他输入原样返回

        Args:
            token: 玩家输入

        Returns:
            str: 招式名称或原输入
        """
        return GameRules.SHORTHAND_MOVES.get(token, token)

    @staticmethod
    def beats(move: Move, other: Move) -> bool:
        """
        判断move是否战胜other

        Args:
            move: 招式
            other: 对方招式

        Returns:
            bool: move的胜利集合包含other时为True，相同招式永远为False
        """
        return other in GameRules.WIN_RULES[move]

    @staticmethod
    def judge(human_move: Move, computer_move: Move) -> RoundOutcome:
        """
        判断回合结果

        Args:
            human_move: 玩家招式
            computer_move: 电脑招式

        Returns:
            RoundOutcome: 回合结果
        """
        if GameRules.beats(human_move, computer_move):
            logger.debug(f"玩家获胜: {human_move} 胜 {computer_move}")
            return RoundOutcome.HUMAN_WIN
        if GameRules.beats(computer_move, human_move):
            logger.debug(f"电脑获胜: {computer_move} 胜 {human_move}")
            return RoundOutcome.COMPUTER_WIN
        logger.debug(f"平局: {human_move}")
        return RoundOutcome.TIE

    @staticmethod
    def get_winning_moves(move: Move) -> FrozenSet[Move]:
        """
        获取能战胜指定招式的招式

        Args:
            move: 目标招式

        Returns:
            FrozenSet[Move]: 能战胜目标的两个招式
        """
        return frozenset(winner for winner, losers in GameRules.WIN_RULES.items()
                         if move in losers)

    @staticmethod
    def get_losing_moves(move: Move) -> FrozenSet[Move]:
        """获取会被指定招式战胜的招式"""
        return GameRules.WIN_RULES[move]

    @staticmethod
    def is_valid_move(name: str) -> bool:
        return GameRules.resolve(name) is not None
