"""文件重命名器

按字母顺序为目录中的文件编号：先把原文件复制到备份目录，再原地重命名。
"""

import logging
import shutil
from pathlib import Path

from scanrename.models import FileEntry, RenameOptions, RenameRecord, RenameResult
from scanrename.scanner import FileScanner
from scanrename.sequencer import IndexSequencer, build_file_name
from scanrename.validator import DirectoryValidator

logger = logging.getLogger(__name__)


class FileRenamer:
    """文件重命名器"""

    def __init__(self, options: RenameOptions | None = None):
        """初始化重命名器

        Args:
            options: 运行参数，默认使用 RenameOptions()
        """
        self.options = options or RenameOptions()
        self.validator = DirectoryValidator(self.options.backup_dir_name)
        self.scanner = FileScanner(self.options.backup_dir_name)

    def rename_directory(self, directory: Path, dry_run: bool = False) -> RenameResult:
        """重命名目录中的所有文件

        Args:
            directory: 目标目录
            dry_run: 是否只模拟执行（不创建备份目录、不复制、不重命名）

        Returns:
            重命名结果

        Raises:
            DirectoryNotFoundError: 目录不存在
            PathNotDirectoryError: 路径不是目录
            AlreadyProcessedError: 目录看起来已经处理过
        """
        directory = Path(directory)
        self.validator.validate(directory)
        directory = directory.resolve()
        dir_name = directory.name

        if dry_run:
            entries = self.scanner.scan(directory)
            return RenameResult(
                success_count=len(entries),
                records=self.plan(entries, dir_name),
                backup_dir=directory / self.options.backup_dir_name,
                dry_run=True,
            )

        backup_dir = self.ensure_backup_dir(directory)
        entries = self.scanner.scan(directory)

        if not entries:
            logger.info(f"目录中没有可重命名的文件: {directory}")
            return RenameResult(backup_dir=backup_dir)

        self._log_run_info(entries, dir_name)
        result = self.rename_entries(entries, directory, backup_dir)
        logger.info(f"处理完成，成功 {result.success_count} 个，失败 {result.failed_count} 个")
        return result

    def ensure_backup_dir(self, directory: Path) -> Path:
        """创建备份目录，已存在则直接复用（包括其中已有的内容）"""
        backup_dir = Path(directory) / self.options.backup_dir_name

        if backup_dir.exists():
            logger.info(f"使用已有备份目录: {backup_dir}")
        else:
            backup_dir.mkdir()
            logger.info(f"创建备份目录: {backup_dir}")

        return backup_dir

    def plan(self, entries: list[FileEntry], dir_name: str) -> list[RenameRecord]:
        """计算每个文件的新名称，不修改文件系统"""
        sequencer = self._new_sequencer()
        return [
            RenameRecord(
                original_name=entry.name,
                new_name=self._new_name(sequencer, position, entry, dir_name),
            )
            for position, entry in enumerate(entries)
        ]

    def rename_entries(
        self, entries: list[FileEntry], directory: Path, backup_dir: Path
    ) -> RenameResult:
        """依次处理文件列表

        单个文件失败只记录日志并跳过，不影响后续文件。

        Args:
            entries: 已排序的文件列表
            directory: 文件所在目录
            backup_dir: 备份目录

        Returns:
            重命名结果
        """
        sequencer = self._new_sequencer()
        result = RenameResult(backup_dir=backup_dir)

        for position, entry in enumerate(entries):
            new_name = self._new_name(sequencer, position, entry, directory.name)
            try:
                self._process_single(entry, directory / new_name, backup_dir)
            except OSError as e:
                logger.error(f"处理失败 {entry.name}: {e}")
                result.failed_count += 1
                result.failures.append((entry.name, str(e)))
                continue

            result.success_count += 1
            result.records.append(RenameRecord(original_name=entry.name, new_name=new_name))

        return result

    def _process_single(self, entry: FileEntry, target: Path, backup_dir: Path) -> None:
        """复制原文件到备份目录，然后原地重命名

        备份目录中的同名文件会被覆盖。
        """
        shutil.copy2(entry.path, backup_dir / entry.name)
        entry.path.rename(target)
        logger.info(
            f"重命名: {entry.name} -> {target.name} "
            f"(原文件已备份到 {backup_dir.name}/{entry.name})"
        )

    def _new_sequencer(self) -> IndexSequencer:
        return IndexSequencer(self.options.start_mode, self.options.skip_numbers)

    def _new_name(
        self, sequencer: IndexSequencer, position: int, entry: FileEntry, dir_name: str
    ) -> str:
        token = sequencer.next_token(position)
        return build_file_name(dir_name, token, self.options.letter_suffix, entry.extension)

    def _log_run_info(self, entries: list[FileEntry], dir_name: str) -> None:
        logger.info(f"在目录 {dir_name} 中找到 {len(entries)} 个文件")
        for i, entry in enumerate(entries, start=1):
            logger.debug(f"{i}. {entry.name}")

        if self.options.skip_numbers:
            logger.info(f"跳过编号: {', '.join(map(str, sorted(self.options.skip_numbers)))}")
        if self.options.letter_suffix:
            logger.info(f'字母后缀: "{self.options.letter_suffix}"')
