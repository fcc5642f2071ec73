"""
游戏控制器
Game Controller - 整合所有游戏逻辑
"""
from .console import Console
from .state_machine import GameState, GameStateMachine
from .game_logic import GameManager, Move, Player, RoundOutcome, RoundResult, WINNING_SCORE
from ..utils.exceptions import InvalidInputException, GameException
from ..utils.logger import setup_logger

logger = setup_logger("RPSLS.GameController")

REMATCH_PROMPT = "Would you like to play again? (Please enter Y or N)"
REMATCH_ERROR = "Sorry, must be Y or N..."


def parse_yes_no(raw: str) -> bool:
    """
    解析是否再来一局

    Args:
        raw: 玩家输入

    Returns:
        bool: y/Y为True，n/N为False

    Raises:
        InvalidInputException: 其他输入
    """
    answer = raw.lower()
    if answer not in ('y', 'n'):
        raise InvalidInputException("只能输入Y或N", value=raw)
    return answer == 'y'


class GameController:
    """游戏控制器类，驱动欢迎、回合、结算、再来一局和告别"""

    def __init__(self, console: Console, human: Player, computer: Player):
        """
        初始化游戏控制器

        Args:
            console: 终端
            human: 人类玩家（已确定名字）
            computer: 电脑玩家（已确定名字）
        """
        self.console = console
        self.human = human
        self.computer = computer

        self.game_manager = GameManager(human, computer)

        self.state_machine = GameStateMachine(initial_state=GameState.IDLE)
        self._setup_state_handlers()

        self.games_played = 0

        logger.info("游戏控制器初始化完成")

    def _setup_state_handlers(self):
        """设置状态处理函数"""
        self.state_machine.register_state_handler(GameState.WELCOME, self._handle_welcome)
        self.state_machine.register_state_handler(GameState.ROUND, self._handle_round)
        self.state_machine.register_state_handler(GameState.GAME_OVER, self._handle_game_over)
        self.state_machine.register_state_handler(GameState.REMATCH_DECISION, self._handle_rematch_decision)

    def play(self):
        """进行一个完整的会话，直到玩家不再继续"""
        logger.info("会话开始")
        self.state_machine.reset(GameState.IDLE)
        if not self.state_machine.transition_to(GameState.WELCOME):
            raise GameException("无法进入欢迎界面", game_state=str(self.state_machine.get_current_state()))

        self.state_machine.run_until(GameState.END)

        self.display_goodbye_message()
        logger.info(f"会话结束，共进行 {self.games_played} 局")

    def _handle_welcome(self) -> GameState:
        self.display_welcome_message()
        return GameState.ROUND

    def _handle_round(self) -> GameState:
        round_result = self.game_manager.play_round()
        self.display_round(round_result)

        if self.game_manager.has_winner():
            return GameState.GAME_OVER
        return GameState.ROUND

    def _handle_game_over(self) -> GameState:
        self.display_winner()
        self.display_final_score()
        self.game_manager.finish_game()
        self.games_played += 1
        return GameState.REMATCH_DECISION

    def _handle_rematch_decision(self) -> GameState:
        if self.console.prompt([REMATCH_PROMPT], parse_yes_no, REMATCH_ERROR):
            logger.info("玩家选择再来一局")
            return GameState.WELCOME
        return GameState.END

    def display_welcome_message(self):
        glyphs = "  ".join(move.glyph for move in Move)
        self.console.clear_screen()
        self.console.center("Welcome to the Rock, Paper, Scissors, Lizard, Spock game!")
        self.console.center(f"({glyphs})")
        self.console.write()
        self.console.center(f"The first one to {WINNING_SCORE} points wins the game.")
        self.console.center("-" * 40)
        self.console.center("You earn a point each time you win a round.")
        self.console.write()
        self.console.write()
        self.console.center(f"Good luck {self.human}!")

    def display_round(self, round_result: RoundResult):
        """
        显示回合：双方招式、胜负、回合比分和出招统计

        Args:
            round_result: 回合结果
        """
        self.console.write(f"{self.human} chose {round_result.human_move}")
        self.console.write(f"{self.computer} chose {round_result.computer_move}.")
        self.console.write()
        self.console.write(self._round_outcome_text(round_result.outcome))
        self.console.write("Round score so far:")
        self.console.write(f"{self.human} = {self.human.round_score}")
        self.console.write(f"{self.computer} = {self.computer.round_score}")
        self.console.write()
        self.console.write(self.human.move_history_report())
        self.console.write()
        self.console.write(self.computer.move_history_report())
        self.console.write()

    def _round_outcome_text(self, outcome: RoundOutcome) -> str:
        if outcome == RoundOutcome.HUMAN_WIN:
            return f"{self.human} won this round!"
        elif outcome == RoundOutcome.COMPUTER_WIN:
            return f"{self.computer} won this round!"
        else:
            return "It's a tie!"

    def display_winner(self):
        self.console.clear_screen()
        if self.human.has_won():
            self.console.write(f"Congrats {self.human}, you won the game! \U0001F483 \U0001F57A")
            self.console.write()
            self.console.write("Quick happy celebratory dance...\U0001F929 \U0001F973 \U0001F60E")
            self.console.write()
        elif self.computer.has_won():
            self.console.write(f"Aww... {self.computer} won the game! \U0001F63F \U0001F63F \U0001F63F")
            self.console.write()
            self.console.write("You did your best though... \U0001F62C")
            self.console.write()

    def display_final_score(self):
        self.console.write("Final score:")
        self.console.write(f"{self.human} {self.human.score} and {self.computer} {self.computer.score}!")
        self.console.write()

    def display_goodbye_message(self):
        self.console.clear_screen()
        self.console.write(f"Thanks for playing {self.human}.")
        self.console.write()
        self.console.write("Please come play again soon!")
        self.console.write()
        self.console.write("And have a wonderful rest of your day!")
        self.console.write()

    def get_current_state(self) -> GameState:
        """获取当前状态"""
        return self.state_machine.get_current_state()
