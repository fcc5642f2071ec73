"""
应用程序主类
Application Main Class
"""
import random
from typing import Any, Dict, Optional
import yaml
from .game import Console, GameController, Player
from .utils.logger import setup_logger, configure_logging
from .utils.config_loader import ConfigLoader
from .utils.error_handler import global_error_handler
from .utils.exceptions import ConfigurationException

logger = setup_logger("RPSLS.App")


class Application:
    """应用程序主类"""

    def __init__(self, config_path: Optional[str] = None,
                 console: Optional[Console] = None,
                 rng: Optional[random.Random] = None):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径（可选，不提供时使用默认配置）
            console: 终端（可选，不提供时按显示配置创建）
            rng: 电脑玩家使用的随机数生成器（可选）
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self.console = console
        self.rng = rng

        self.human: Optional[Player] = None
        self.computer: Optional[Player] = None
        self.game_controller: Optional[GameController] = None

        self.is_running = False

    def initialize(self) -> bool:
        """
        加载配置、设置日志并创建终端

        Returns:
            bool: 初始化是否成功
        """
        if not self._load_config():
            return False

        try:
            configure_logging(ConfigLoader.get_logging_config(self.config))
            if self.console is None:
                self.console = self._create_console()
        except ConfigurationException as e:
            global_error_handler.handle(e, "初始化")
            return False

        logger.info("应用程序初始化成功")
        return True

    def _load_config(self) -> bool:
        """加载配置文件"""
        try:
            loaded = ConfigLoader.load_config(self.config_path) if self.config_path else {}
            self.config = ConfigLoader.merge_defaults(loaded)
            return True
        except FileNotFoundError:
            logger.error(f"配置文件不存在: {self.config_path}")
            return False
        except yaml.YAMLError as e:
            global_error_handler.handle(ConfigurationException(str(e)), "加载配置")
            return False
        except ConfigurationException as e:
            global_error_handler.handle(e, "加载配置")
            return False

    def _create_console(self) -> Console:
        display = ConfigLoader.get_display_config(self.config)
        return Console(
            clear_enabled=display.get('clear_screen', True),
            width=display['width']
        )

    def _create_game_controller(self) -> GameController:
        """询问玩家名字并创建游戏控制器"""
        self.human = Player.human(self.console)
        self.computer = Player.computer(self.console, self.rng)
        return GameController(self.console, self.human, self.computer)

    def start(self) -> bool:
        """
        启动应用程序并运行一个会话

        Returns:
            bool: 是否正常运行（初始化失败或运行异常时为False）

        Raises:
            EOFError: 输入流已关闭（KeyboardInterrupt同样向上传播）
        """
        if not self.initialize():
            logger.error("应用程序初始化失败")
            return False

        self.is_running = True
        try:
            self.game_controller = self._create_game_controller()
            self.game_controller.play()
        except EOFError:
            raise
        except Exception as e:
            logger.error(f"运行异常: {e}")
            global_error_handler.handle(e, "主循环")
            return False
        finally:
            self.is_running = False

        return True
