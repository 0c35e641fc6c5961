"""scanrename - 按字母顺序批量编号重命名工具

将目录中的文件按文件名排序后重命名为 ``{目录名}_{编号}{后缀}{扩展名}``，
原文件先复制到备份子目录（默认 ``lab scans``）。
"""

__version__ = "0.1.0"

from scanrename.errors import (
    AlreadyProcessedError,
    DirectoryNotFoundError,
    DirectoryValidationError,
    PathNotDirectoryError,
    ScanRenameError,
    SkipNumberParseError,
)
from scanrename.models import (
    BACKUP_DIR_NAME,
    FileEntry,
    RenameOptions,
    RenameRecord,
    RenameResult,
    StartMode,
)
from scanrename.renamer import FileRenamer
from scanrename.sequencer import IndexSequencer, build_file_name

__all__ = [
    "AlreadyProcessedError",
    "DirectoryNotFoundError",
    "DirectoryValidationError",
    "PathNotDirectoryError",
    "ScanRenameError",
    "SkipNumberParseError",
    "BACKUP_DIR_NAME",
    "FileEntry",
    "RenameOptions",
    "RenameRecord",
    "RenameResult",
    "StartMode",
    "FileRenamer",
    "IndexSequencer",
    "build_file_name",
]
