import locale
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_collation():
    """测试结束后恢复 LC_COLLATE，避免排序结果受其他测试影响"""
    saved = locale.setlocale(locale.LC_COLLATE)
    yield
    locale.setlocale(locale.LC_COLLATE, saved)


@pytest.fixture
def photo_dir(tmp_path: Path) -> Path:
    """不含数字的目录名，避免与已编号文件的判断混淆"""
    directory = tmp_path / "roll"
    directory.mkdir()
    return directory
