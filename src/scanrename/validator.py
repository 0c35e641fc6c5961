"""目录校验器

在任何文件操作之前检查目标目录，并防止对同一目录重复处理。
"""

import logging
import re
from pathlib import Path

from scanrename.errors import (
    AlreadyProcessedError,
    DirectoryNotFoundError,
    PathNotDirectoryError,
)
from scanrename.models import BACKUP_DIR_NAME

logger = logging.getLogger(__name__)

_DIGIT = re.compile(r"\d")


class DirectoryValidator:
    """目录校验器"""

    def __init__(self, backup_dir_name: str = BACKUP_DIR_NAME):
        self.backup_dir_name = backup_dir_name

    def validate(self, directory: Path) -> None:
        """执行全部检查

        Args:
            directory: 目标目录

        Raises:
            DirectoryNotFoundError: 目录不存在
            PathNotDirectoryError: 路径不是目录
            AlreadyProcessedError: 目录看起来已经处理过
        """
        self.validate_directory(directory)
        self.check_already_processed(directory)

    def validate_directory(self, directory: Path) -> None:
        """检查路径存在且为目录"""
        directory = Path(directory)

        if not directory.exists():
            raise DirectoryNotFoundError(f"目录不存在: {directory}")

        if not directory.is_dir():
            raise PathNotDirectoryError(f"路径不是目录: {directory}")

    def check_already_processed(self, directory: Path) -> None:
        """检查目录是否已经重命名过

        启发式判断：备份目录已存在，且有文件名形如 ``{目录名}_...`` 并含数字。
        可能误报（无关文件恰好符合模式），也可能漏报（备份目录被删除）。

        Raises:
            AlreadyProcessedError: 两个条件同时满足
        """
        directory = Path(directory)
        if not (directory / self.backup_dir_name).exists():
            return

        renamed = self.find_renamed_files(directory)
        if renamed:
            logger.debug(f"发现已编号文件: {renamed}")
            raise AlreadyProcessedError(
                f"目录似乎已经重命名过，请检查: {directory} "
                f"(已存在 {len(renamed)} 个编号文件和备份目录 '{self.backup_dir_name}')"
            )

    def find_renamed_files(self, directory: Path) -> list[str]:
        """列出符合 ``{目录名}_<含数字>`` 模式的文件名"""
        directory = Path(directory)
        prefix = f"{directory.resolve().name}_"
        return sorted(
            item.name
            for item in directory.iterdir()
            if item.name.startswith(prefix)
            and _DIGIT.search(item.name[len(prefix):])
            and item.is_file()
        )
