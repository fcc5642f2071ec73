"""
终端输入输出
Terminal Console
"""
import sys
from typing import Callable, Optional, TextIO, TypeVar
from ..utils.exceptions import InvalidInputException
from ..utils.logger import setup_logger

logger = setup_logger("RPSLS.Console")

T = TypeVar("T")

DEFAULT_WIDTH = 74


class Console:
    """终端类，封装读取、输出、清屏和居中"""

    # ANSI：光标归位并清屏
    CLEAR_SEQUENCE = "\033[H\033[2J"

    def __init__(self,
                 input_func: Callable[[], str] = input,
                 output: Optional[TextIO] = None,
                 clear_enabled: bool = True,
                 width: int = DEFAULT_WIDTH):
        """
        初始化终端

        Args:
            input_func: 读取一行输入的函数（测试时可替换为脚本输入）
            output: 输出流，None时使用当前的sys.stdout
            clear_enabled: 是否真正清屏
            width: 居中文本的宽度
        """
        self.input_func = input_func
        self.output = output
        self.clear_enabled = clear_enabled
        self.width = width

    @property
    def stream(self) -> TextIO:
        return self.output if self.output is not None else sys.stdout

    def write(self, text: str = ""):
        """输出一行文本"""
        print(text, file=self.stream, flush=True)

    def center(self, text: str):
        """输出一行居中文本"""
        self.write(text.center(self.width))

    def clear_screen(self):
        if self.clear_enabled:
            self.stream.write(self.CLEAR_SEQUENCE)
            self.stream.flush()

    def read_line(self, *prompt_lines: str) -> str:
        """
        输出提示并读取一行输入

        Args:
            prompt_lines: 提示文本，每个参数一行

        Returns:
            str: 去掉行尾换行符后的输入（其余空白保留）

        Raises:
            EOFError: 输入流已关闭
        """
        for line in prompt_lines:
            self.write(line)
        return self.input_func().rstrip("\r\n")

    def prompt(self, prompt_lines, parser: Callable[[str], T], error_message: str) -> T:
        """
        反复提示直到输入通过解析

        Args:
            prompt_lines: 提示文本列表
            parser: 解析函数，输入无效时抛出InvalidInputException
            error_message: 输入无效时显示的提示

        Returns:
            T: 解析结果
        """
        while True:
            raw = self.read_line(*prompt_lines)
            try:
                return parser(raw)
            except InvalidInputException as e:
                logger.debug(f"无效输入 {e.value!r}: {e.message}")
                self.write(error_message)
