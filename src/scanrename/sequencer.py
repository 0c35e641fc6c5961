"""编号生成器

根据文件在排序列表中的位置、起始模式和跳过编号生成文件名中的编号。
"""

from collections.abc import Iterable

from scanrename.models import StartMode


class IndexSequencer:
    """编号生成器

    每次运行创建一个实例。特殊编号（``__X``、``_00``、``0``）不消耗计数器，
    数字编号从 1 开始，跳过 skip_numbers 中的值，并且只会递增。
    """

    def __init__(
        self,
        start_mode: StartMode = StartMode.DEFAULT,
        skip_numbers: Iterable[int] = (),
    ):
        """初始化编号生成器

        Args:
            start_mode: 起始模式
            skip_numbers: 不允许出现的数字编号
        """
        self.start_mode = start_mode
        self.skip_numbers = frozenset(skip_numbers)
        self.next_number = 1

    def next_token(self, position: int) -> str:
        """返回指定位置的编号

        Args:
            position: 文件在排序列表中的位置（从 0 开始）

        Returns:
            编号字符串，如 ``01``、``_00``、``__X``
        """
        special = self.start_mode.special_tokens
        if position < len(special):
            return special[position]
        return self._next_numeric()

    def _next_numeric(self) -> str:
        candidate = self.next_number
        while candidate in self.skip_numbers:
            candidate += 1
        self.next_number = candidate + 1
        return f"{candidate:02d}"


def build_file_name(
    dir_name: str, token: str, letter_suffix: str, extension: str
) -> str:
    """拼接新文件名：``{目录名}_{编号}{后缀}{扩展名}``

    后缀原样拼接，不做字符校验。
    """
    return f"{dir_name}_{token}{letter_suffix}{extension}"
