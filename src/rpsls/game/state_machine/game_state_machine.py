"""
游戏状态机
Game State Machine
"""
from typing import Optional, Callable, Dict, List
from .game_state import GameState
from ...utils.exceptions import GameException
from ...utils.logger import setup_logger

logger = setup_logger("RPSLS.GameStateMachine")


class GameStateMachine:
    """游戏状态机类"""

    # 状态转换规则
    VALID_TRANSITIONS: Dict[GameState, List[GameState]] = {
        GameState.IDLE: [GameState.WELCOME],
        GameState.WELCOME: [GameState.ROUND],
        GameState.ROUND: [GameState.ROUND, GameState.GAME_OVER],
        GameState.GAME_OVER: [GameState.REMATCH_DECISION],
        GameState.REMATCH_DECISION: [GameState.WELCOME, GameState.END],
        GameState.END: []
    }

    def __init__(self, initial_state: GameState = GameState.IDLE):
        """
        初始化状态机

        Args:
            initial_state: 初始状态
        """
        self.current_state = initial_state
        self.previous_state: Optional[GameState] = None
        self.state_handlers: Dict[GameState, Callable[[], GameState]] = {}

        logger.info(f"游戏状态机初始化，初始状态: {self.current_state}")

    def register_state_handler(self, state: GameState, handler: Callable[[], GameState]):
        """
        注册状态处理函数

        Args:
            state: 状态
            handler: 处理函数，执行该状态的工作并返回下一个状态
        """
        self.state_handlers[state] = handler
        logger.debug(f"注册状态处理函数: {state}")

    def transition_to(self, new_state: GameState, force: bool = False) -> bool:
        """
        转换到新状态

        Args:
            new_state: 新状态
            force: 是否强制转换（忽略转换规则）

        Returns:
            bool: 转换是否成功
        """
        if not force and not self.can_transition_to(new_state):
            logger.warning(f"无效的状态转换: {self.current_state} -> {new_state}")
            return False

        # 如果状态相同，不执行转换
        if self.current_state == new_state:
            logger.debug(f"状态未改变: {self.current_state}")
            return True

        old_state = self.current_state
        self.previous_state = old_state
        self.current_state = new_state

        logger.info(f"状态转换: {old_state} -> {new_state}")
        return True

    def step(self) -> GameState:
        """
        执行当前状态的处理函数，并转换到它返回的状态

        Returns:
            GameState: 转换后的状态

        Raises:
            GameException: 当前状态没有处理函数，或返回了无效的下一个状态
        """
        state = self.current_state
        handler = self.state_handlers.get(state)
        if handler is None:
            raise GameException(f"状态没有处理函数: {state}", game_state=str(state))

        next_state = handler()
        if not self.transition_to(next_state):
            raise GameException(f"无效的状态转换: {state} -> {next_state}", game_state=str(state))
        return self.current_state

    def run_until(self, final_state: GameState) -> GameState:
        """
        反复执行step()直到进入final_state

        Args:
            final_state: 终止状态

        Returns:
            GameState: 终止状态
        """
        while not self.is_in_state(final_state):
            self.step()
        return self.current_state

    def get_current_state(self) -> GameState:
        """获取当前状态"""
        return self.current_state

    def get_previous_state(self) -> Optional[GameState]:
        """获取上一个状态"""
        return self.previous_state

    def can_transition_to(self, state: GameState) -> bool:
        """
        检查是否可以转换到指定状态

        Args:
            state: 目标状态

        Returns:
            bool: 是否可以转换
        """
        return state in self.VALID_TRANSITIONS.get(self.current_state, [])

    def reset(self, state: GameState = GameState.IDLE):
        """
        重置状态机

        Args:
            state: 重置后的状态
        """
        self.previous_state = self.current_state
        self.current_state = state
        logger.info(f"状态机已重置到: {state}")

    def is_in_state(self, state: GameState) -> bool:
        return self.current_state == state
