"""scanrename CLI

使用 typer 实现命令行界面。
"""

import locale
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scanrename.errors import ScanRenameError, SkipNumberParseError
from scanrename.logging_setup import setup_logging
from scanrename.models import BACKUP_DIR_NAME, RenameOptions, RenameResult
from scanrename.renamer import FileRenamer

app = typer.Typer(
    name="scanrename",
    help="按字母顺序为目录中的文件编号重命名，原文件备份到子目录",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def setup_collation() -> None:
    """按环境变量设置 LC_COLLATE，使文件名排序遵循用户的 locale"""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"无法设置排序 locale，使用默认排序: {e}")


def parse_skip_numbers(raw: Optional[str]) -> frozenset[int]:
    """解析跳过编号参数

    支持 ``10,11,22`` 和 ``[10,11,22]`` 两种格式。

    Args:
        raw: 命令行原始字符串

    Returns:
        跳过编号集合

    Raises:
        SkipNumberParseError: 存在非整数项或负数
    """
    if not raw:
        return frozenset()

    cleaned = raw.replace("[", "").replace("]", "").strip()
    if not cleaned:
        return frozenset()

    numbers: set[int] = set()
    for part in cleaned.split(","):
        part = part.strip()
        try:
            number = int(part)
        except ValueError:
            raise SkipNumberParseError(f"无效的编号: {part!r}") from None
        if number < 0:
            raise SkipNumberParseError(f"编号不能为负数: {part!r}")
        numbers.add(number)
    return frozenset(numbers)


def print_summary(result: RenameResult, directory: Path) -> None:
    """输出运行结果"""
    table = Table(title="预览" if result.dry_run else "重命名结果")
    table.add_column("#", justify="right", style="dim")
    table.add_column("原文件名")
    table.add_column("新文件名", style="cyan")
    for i, record in enumerate(result.records, start=1):
        table.add_row(str(i), escape(record.original_name), escape(record.new_name))
    console.print(table)

    if result.dry_run:
        console.print(f"[yellow]模拟执行模式[/yellow]，共 {result.success_count} 个文件，未做任何修改")
        return

    console.print(f"\n[green]成功:[/green] {result.success_count}")
    console.print(f"[red]失败:[/red] {result.failed_count}")
    for name, message in result.failures[:5]:
        console.print(f"  • {escape(name)}: {escape(message)}")
    if len(result.failures) > 5:
        console.print(f"  ... 还有 {len(result.failures) - 5} 个失败")

    console.print(f"\n重命名后的文件位于: {escape(str(directory))}")
    console.print(f"原文件备份位于: {escape(str(result.backup_dir))}")
    console.print("确认无误后可删除备份目录中的文件；如需还原，请从备份目录复制回来。")


@app.command(epilog="以 - 开头的参数值（如后缀 -a）需放在 -- 之后: scanrename -- DIR 0 2 -a")
def main(
    directory: Annotated[
        Optional[Path],
        typer.Argument(help="要处理的目录（默认当前目录）", show_default=False),
    ] = None,
    start_mode: Annotated[
        str,
        typer.Argument(help='起始编号模式: "x" (__X, _00, 0, 01...), "00" (_00, 0, 01...), "0" (0, 01...)，其他为默认 (01...)'),
    ] = "",
    skip_numbers: Annotated[
        str,
        typer.Argument(help='跳过的编号，逗号分隔（如 "10,11" 或 "[10,11]"，不接受负数）'),
    ] = "",
    letter_suffix: Annotated[
        str,
        typer.Argument(help="追加在编号后的后缀（原样使用）"),
    ] = "",
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="只预览，不实际重命名"),
    ] = False,
    backup_dir: Annotated[
        str,
        typer.Option("--backup-dir", help="备份子目录名"),
    ] = BACKUP_DIR_NAME,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="输出调试日志"),
    ] = False,
) -> None:
    """按字母顺序重命名目录中的文件，原文件备份到子目录"""
    setup_logging(verbose)
    setup_collation()

    try:
        skip = parse_skip_numbers(skip_numbers)
    except SkipNumberParseError as e:
        console.print(f"[red]跳过编号解析错误:[/red] {escape(str(e))}")
        console.print(escape('请使用 "[10,11,22]" 或 "10,11,22" 格式'))
        raise typer.Exit(1)

    target = directory or Path.cwd()
    options = RenameOptions(
        start_mode=start_mode,
        skip_numbers=skip,
        letter_suffix=letter_suffix,
        backup_dir_name=backup_dir,
    )

    console.print(f"处理目录: {escape(str(target))}")
    if start_mode:
        console.print(f'起始编号模式: "{escape(start_mode)}"')
    if skip:
        console.print(f"跳过编号: {', '.join(map(str, sorted(skip)))}")
    if letter_suffix:
        console.print(f'字母后缀: "{escape(letter_suffix)}"')

    try:
        result = FileRenamer(options).rename_directory(target, dry_run=dry_run)
    except (ScanRenameError, OSError) as e:
        console.print(f"[red]错误:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not result.records and not result.failures:
        console.print("[yellow]目录中没有可重命名的文件[/yellow]")
        return

    print_summary(result, target)


if __name__ == "__main__":
    app()
