"""文件扫描器

列出目录下可重命名的文件（不递归），按文件名排序。
"""

import locale
import logging
from pathlib import Path

from scanrename.models import BACKUP_DIR_NAME, FileEntry

logger = logging.getLogger(__name__)


def sort_key(name: str) -> tuple[str, str]:
    """文件名排序键：按当前 locale、忽略大小写，不做数字感知

    大小写不同的同名文件按原始名称区分先后。
    """
    return (locale.strxfrm(name.casefold()), name)


class FileScanner:
    """文件扫描器 - 扫描目录生成 FileEntry 列表"""

    def __init__(self, backup_dir_name: str = BACKUP_DIR_NAME):
        """初始化扫描器

        Args:
            backup_dir_name: 备份子目录名，扫描时排除
        """
        self.backup_dir_name = backup_dir_name

    def scan(self, directory: Path) -> list[FileEntry]:
        """扫描目录，返回排好序的文件列表

        只包含普通文件；隐藏文件（以 . 开头）和备份目录被排除。

        Args:
            directory: 要扫描的目录

        Returns:
            FileEntry 列表
        """
        entries: list[FileEntry] = []

        for item in Path(directory).iterdir():
            if not self._is_eligible(item):
                continue
            entries.append(FileEntry(name=item.name, path=item, extension=item.suffix))

        entries.sort(key=lambda entry: sort_key(entry.name))
        logger.debug(f"扫描到 {len(entries)} 个文件: {[e.name for e in entries]}")
        return entries

    def _is_eligible(self, item: Path) -> bool:
        """判断是否为可重命名的文件"""
        if item.name.startswith("."):
            return False
        if item.name == self.backup_dir_name:
            return False
        try:
            return item.is_file()
        except OSError as e:
            logger.warning(f"无法访问 {item}: {e}")
            return False
