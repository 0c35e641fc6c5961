"""日志配置

核心模块只通过 logging 输出，CLI 启动时在根 logger 上安装 RichHandler。
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """配置根 logger

    Args:
        verbose: 为 True 时输出 DEBUG 级别日志
        console: 日志输出使用的 rich Console（默认写 stderr）
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger()
    # 重复调用时替换旧的 handler
    for old in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
