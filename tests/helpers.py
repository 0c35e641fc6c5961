"""测试用的文件辅助函数"""

from pathlib import Path


def make_files(directory: Path, names: list[str]) -> None:
    for name in names:
        (directory / name).write_text(f"Test content for {name}", encoding="utf-8")


def renamed_files(directory: Path) -> list[str]:
    prefix = f"{directory.name}_"
    return sorted(
        p.name for p in directory.iterdir() if p.is_file() and p.name.startswith(prefix)
    )
