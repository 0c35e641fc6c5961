"""scanrename 数据模型

运行参数使用 Pydantic 校验，扫描和结果使用 dataclass。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

# 备份子目录的默认名称
BACKUP_DIR_NAME = "lab scans"


class StartMode(str, Enum):
    """起始编号模式"""

    DEFAULT = "default"  # 01, 02, 03...
    ZERO = "0"  # 0, 01, 02...
    DOUBLE_ZERO = "00"  # _00, 0, 01...
    EXTENDED = "x"  # __X, _00, 0, 01...

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "StartMode":
        """从命令行原始字符串解析模式

        只有扩展模式忽略大小写，无法识别的值回退到默认模式。

        Args:
            raw: 原始字符串（可为 None 或空）

        Returns:
            对应的 StartMode
        """
        if isinstance(raw, cls):
            return raw
        if raw in ("x", "X"):
            return cls.EXTENDED
        if raw == "00":
            return cls.DOUBLE_ZERO
        if raw == "0":
            return cls.ZERO
        return cls.DEFAULT

    @property
    def special_tokens(self) -> tuple[str, ...]:
        """该模式下排在数字编号之前的特殊编号"""
        return _SPECIAL_TOKENS[self]


_SPECIAL_TOKENS: dict[StartMode, tuple[str, ...]] = {
    StartMode.DEFAULT: (),
    StartMode.ZERO: ("0",),
    StartMode.DOUBLE_ZERO: ("_00", "0"),
    StartMode.EXTENDED: ("__X", "_00", "0"),
}


class RenameOptions(BaseModel):
    """一次重命名运行的参数"""

    model_config = ConfigDict(frozen=True)

    start_mode: StartMode = StartMode.DEFAULT
    skip_numbers: frozenset[int] = frozenset()
    letter_suffix: str = ""
    backup_dir_name: str = BACKUP_DIR_NAME

    @field_validator("start_mode", mode="before")
    @classmethod
    def _resolve_start_mode(cls, value: object) -> StartMode:
        return StartMode.from_raw(value)  # type: ignore[arg-type]

    @field_validator("letter_suffix", mode="before")
    @classmethod
    def _none_suffix(cls, value: object) -> object:
        return "" if value is None else value


@dataclass(frozen=True)
class FileEntry:
    """待重命名的文件"""

    name: str  # 原文件名
    path: Path  # 完整路径
    extension: str  # 扩展名（含点，可为空）


@dataclass
class RenameRecord:
    """单个文件的重命名记录"""

    original_name: str
    new_name: str


@dataclass
class RenameResult:
    """一次运行的结果"""

    success_count: int = 0
    failed_count: int = 0
    records: list[RenameRecord] = field(default_factory=list)
    failures: list[tuple[str, str]] = field(default_factory=list)  # (原文件名, 错误信息)
    backup_dir: Optional[Path] = None
    dry_run: bool = False
