"""
石头剪刀布蜥蜴斯波克游戏主程序入口
Rock Paper Scissors Lizard Spock Game Main Entry
"""
import sys
import argparse
from typing import List, Optional

from .app import Application
from .utils.logger import setup_logger

logger = setup_logger("RPSLS.Main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='rpsls', description='石头剪刀布蜥蜴斯波克游戏')
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（可选，例如: config/config.yaml）'
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """主函数"""
    args = parse_args(argv)

    logger.info("石头剪刀布蜥蜴斯波克游戏启动")

    app = Application(config_path=args.config)

    try:
        success = app.start()
        if not success:
            logger.error("应用程序启动失败")
            sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        print()
        logger.info("用户中断程序")
    except Exception as e:
        logger.error(f"程序异常退出: {e}", exc_info=True)
        sys.exit(1)
    finally:
        logger.info("程序退出")


if __name__ == "__main__":
    main()
