"""
游戏管理器
Game Manager
"""
from typing import Optional, List
from dataclasses import dataclass, field
from datetime import datetime
from .move import Move
from .game_rules import GameRules, RoundOutcome
from .player import Player
from ...utils.exceptions import GameException
from ...utils.logger import setup_logger

logger = setup_logger("RPSLS.GameManager")


@dataclass
class RoundResult:
    """回合结果数据类"""
    round_number: int
    human_move: Move
    computer_move: Move
    outcome: RoundOutcome
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'round_number': self.round_number,
            'human_move': self.human_move.value,
            'computer_move': self.computer_move.value,
            'outcome': self.outcome.value,
            'timestamp': self.timestamp.isoformat()
        }


@dataclass
class GameSummary:
    """一局游戏的最终结果（在清空分数之前记录）"""
    winner: Player
    human_won: bool
    human_score: int
    computer_score: int
    rounds_played: int


class GameManager:
    """游戏管理器类，持有两名玩家并结算回合"""

    def __init__(self, human: Player, computer: Player):
        """
        初始化游戏管理器

        Args:
            human: 人类玩家
            computer: 电脑玩家
        """
        self.human = human
        self.computer = computer
        self.current_round = 0
        self.round_history: List[RoundResult] = []

        logger.info(f"游戏管理器初始化: {human} vs {computer}")

    def play_round(self) -> RoundResult:
        """
        进行一回合：双方出招并结算

        Returns:
            RoundResult: 回合结果

        Raises:
            GameException: 已有玩家达到获胜分数
        """
        if self.has_winner():
            raise GameException("已有玩家获胜，无法继续回合", game_state="GAME_OVER")

        self.human.choose_move()
        self.computer.choose_move()
        return self.resolve_round()

    def resolve_round(self) -> RoundResult:
        """
        按双方当前招式结算回合，胜者加分

        Returns:
            RoundResult: 回合结果
        """
        if self.human.move is None or self.computer.move is None:
            raise GameException("双方都出招后才能结算", game_state="ROUND")

        self.current_round += 1
        outcome = GameRules.judge(self.human.move, self.computer.move)

        if outcome == RoundOutcome.HUMAN_WIN:
            self.human.record_win()
        elif outcome == RoundOutcome.COMPUTER_WIN:
            self.computer.record_win()

        round_result = RoundResult(
            round_number=self.current_round,
            human_move=self.human.move,
            computer_move=self.computer.move,
            outcome=outcome
        )
        self.round_history.append(round_result)

        logger.info(f"回合 {self.current_round}: {self.human.move} vs {self.computer.move} -> "
                    f"{outcome.value} ({self.human.score}:{self.computer.score})")
        return round_result

    def has_winner(self) -> bool:
        return self.human.has_won() or self.computer.has_won()

    def get_winner(self) -> Optional[Player]:
        """获取达到获胜分数的玩家，没有则返回None"""
        if self.human.has_won():
            return self.human
        if self.computer.has_won():
            return self.computer
        return None

    def finish_game(self) -> GameSummary:
        """
        结束本局：记录最终结果后清空双方分数和出招统计

        Returns:
            GameSummary: 本局结果

        Raises:
            GameException: 还没有玩家获胜
        """
        winner = self.get_winner()
        if winner is None:
            raise GameException("还没有玩家获胜", game_state="ROUND")

        summary = GameSummary(
            winner=winner,
            human_won=winner is self.human,
            human_score=self.human.score,
            computer_score=self.computer.score,
            rounds_played=self.current_round
        )

        self.human.reset_history()
        self.computer.reset_history()
        self.current_round = 0
        self.round_history.clear()

        logger.info(f"游戏结束，胜者: {winner}，比分 {summary.human_score}:{summary.computer_score}，"
                    f"共 {summary.rounds_played} 回合")
        return summary

    def get_round_history(self) -> List[RoundResult]:
        """获取回合历史"""
        return self.round_history.copy()

    def get_last_round_result(self) -> Optional[RoundResult]:
        if self.round_history:
            return self.round_history[-1]
        return None
