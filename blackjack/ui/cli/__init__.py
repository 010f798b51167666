"""二十一点CLI用户界面模块.

这个包提供命令行界面的二十一点游戏实现，包括：
- CLI游戏主类与click命令入口
- 渲染器（显示逻辑）
- 输入处理器（用户交互）
"""

from .cli_game import BlackjackCLI, main, setup_logging
from .render import CLIRenderer
from .input_handler import CLIInputHandler, HumanPlayer

__all__ = [
    'BlackjackCLI',
    'main',
    'setup_logging',
    'CLIRenderer',
    'CLIInputHandler',
    'HumanPlayer'
]
