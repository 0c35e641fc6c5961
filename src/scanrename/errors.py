"""scanrename 异常类型

致命错误在修改文件系统之前抛出，由 CLI 转换为退出码 1。
单个文件的复制/重命名失败不在此列，由重命名器记录后跳过。
"""


class ScanRenameError(Exception):
    """所有 scanrename 错误的基类"""


class DirectoryValidationError(ScanRenameError):
    """目标路径校验失败"""


class DirectoryNotFoundError(DirectoryValidationError, FileNotFoundError):
    """目录不存在"""


class PathNotDirectoryError(DirectoryValidationError, NotADirectoryError):
    """路径存在但不是目录"""


class AlreadyProcessedError(ScanRenameError):
    """目录看起来已经处理过（存在已编号文件且备份目录已存在）"""


class SkipNumberParseError(ScanRenameError, ValueError):
    """跳过编号参数格式错误"""
