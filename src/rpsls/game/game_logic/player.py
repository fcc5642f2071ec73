"""
玩家与出招控制器
Players and Move Controllers
"""
import random
import re
from abc import ABC, abstractmethod
from collections import Counter
from typing import Optional, Tuple
from .move import Move
from .game_rules import GameRules, WINNING_SCORE
from ..console import Console
from ...utils.exceptions import InvalidInputException
from ...utils.logger import setup_logger

logger = setup_logger("RPSLS.Player")

COMPUTER_NAMES: Tuple[str, ...] = ("R2D2", "C3PO", "Wally", "BB4")

NAME_PATTERN = re.compile(r"[A-Za-z]+")

NAME_ERROR = "Sorry, must enter a name..."
MOVE_ERROR = "Sorry, invalid choice."


def parse_name(raw: str) -> str:
    """
    校验玩家名字

    Args:
        raw: 玩家输入

    Returns:
        str: 名字（原样）

    Raises:
        InvalidInputException: 为空或包含非字母字符
    """
    if not NAME_PATTERN.fullmatch(raw):
        raise InvalidInputException("名字必须是非空的纯字母", value=raw)
    return raw


def parse_move(raw: str) -> Move:
    """
    将输入解析为招式，支持简写（r, p, s, l, sp）

    Args:
        raw: 玩家输入

    Returns:
        Move: 招式

    Raises:
        InvalidInputException: 不是有效招式
    """
    move = GameRules.resolve(GameRules.translate_shorthand(raw))
    if move is None:
        raise InvalidInputException("无效的招式", value=raw)
    return move


def move_prompt() -> str:
    shorthand = {name: token for token, name in GameRules.SHORTHAND_MOVES.items()}
    choices = [f"{move}/{shorthand[move.value]}  {move.glyph}" for move in Move]
    return f"Please choose {', '.join(choices[:-1])} or {choices[-1]}:"


class PlayerController(ABC):
    """出招控制器抽象基类，决定玩家的名字和每回合的招式"""

    @abstractmethod
    def establish_name(self) -> str:
        """
        确定玩家名字

        Returns:
            str: 名字
        """
        pass

    @abstractmethod
    def choose_move(self) -> Move:
        """
        选择本回合招式

        Returns:
            Move: 招式
        """
        pass


class HumanController(PlayerController):
    """通过终端提示由人类玩家输入"""

    def __init__(self, console: Console):
        self.console = console

    def establish_name(self) -> str:
        self.console.clear_screen()
        return self.console.prompt(["Hello there...", "What's your name?"], parse_name, NAME_ERROR)

    def choose_move(self) -> Move:
        return self.console.prompt([move_prompt()], parse_move, MOVE_ERROR)


class ComputerController(PlayerController):
    """电脑玩家：名字和招式都均匀随机"""

    def __init__(self, console: Optional[Console] = None, rng: Optional[random.Random] = None):
        """
        初始化电脑控制器

        Args:
            console: 终端，出招后清屏（可选）
            rng: 随机数生成器（可选，测试时可传入固定种子）
        """
        self.console = console
        self.rng = rng or random.Random()

    def establish_name(self) -> str:
        return self.rng.choice(COMPUTER_NAMES)

    def choose_move(self) -> Move:
        move = self.rng.choice(list(Move))
        if self.console:
            self.console.clear_screen()
        return move


class Player:
    """玩家：名字、累计分数、回合分数、出招统计和当前招式"""

    def __init__(self, controller: PlayerController, name: Optional[str] = None):
        """
        初始化玩家

        Args:
            controller: 出招控制器
            name: 名字，为None时需调用establish_name()
        """
        self.controller = controller
        self.name = name
        self.move: Optional[Move] = None
        self.score = 0
        self.round_score = 0
        self.moves: Counter = Counter()

    @classmethod
    def human(cls, console: Console) -> "Player":
        """创建人类玩家并询问名字"""
        player = cls(HumanController(console))
        player.establish_name()
        return player

    @classmethod
    def computer(cls, console: Optional[Console] = None,
                 rng: Optional[random.Random] = None) -> "Player":
        """创建电脑玩家并随机选择名字"""
        player = cls(ComputerController(console, rng))
        player.establish_name()
        return player

    def establish_name(self):
        self.name = self.controller.establish_name()
        logger.info(f"玩家名字: {self.name}")

    def choose_move(self):
        """选择招式并计入出招统计"""
        self.move = self.controller.choose_move()
        self.moves[self.move] += 1
        logger.debug(f"{self.name} 出招: {self.move}")

    def record_win(self):
        self.score += 1
        self.round_score += 1

    def has_won(self) -> bool:
        return self.score == WINNING_SCORE

    def reset_history(self):
        """清空分数和出招统计"""
        self.score = 0
        self.round_score = 0
        self.moves = Counter()

    def move_history_report(self) -> str:
        """
        生成出招统计文本

        Returns:
            str: 标题行加每个出过的招式一行，按首次出招顺序
        """
        lines = [f"Moves so far for {self.name}:"]
        lines.extend(f"{move} = {count}" for move, count in self.moves.items() if count > 0)
        return "\n".join(lines)

    def __str__(self):
        return self.name or ""
