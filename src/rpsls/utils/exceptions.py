"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional


class GameException(Exception):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class InvalidInputException(Exception):
    """玩家输入无效（名字、出招、是否再来一局）"""
    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value
        self.message = message


class ConfigurationException(Exception):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message
