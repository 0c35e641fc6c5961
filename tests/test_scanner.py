import locale
import os
import unicodedata
from pathlib import Path

import pytest

from scanrename.scanner import FileScanner
from tests.helpers import make_files


def names(directory: Path, **kwargs) -> list[str]:
    return [entry.name for entry in FileScanner(**kwargs).scan(directory)]


def test_sorts_case_insensitively(photo_dir: Path) -> None:
    make_files(photo_dir, ["Zebra.jpg", "apple.png", "Banana.gif", "cherry.txt"])
    assert names(photo_dir) == ["apple.png", "Banana.gif", "cherry.txt", "Zebra.jpg"]


def test_sort_is_not_numeric_aware(photo_dir: Path) -> None:
    make_files(photo_dir, ["10.jpg", "2.png", "1.gif", "20.txt"])
    assert names(photo_dir) == ["1.gif", "10.jpg", "2.png", "20.txt"]


def test_excludes_hidden_files_and_directories(photo_dir: Path) -> None:
    make_files(photo_dir, ["a.jpg", ".DS_Store", ".hidden.png"])
    (photo_dir / "subdir").mkdir()
    (photo_dir / "lab scans").mkdir()
    assert names(photo_dir) == ["a.jpg"]


def test_excludes_custom_backup_dir_name(photo_dir: Path) -> None:
    make_files(photo_dir, ["a.jpg", "originals"])
    assert names(photo_dir, backup_dir_name="originals") == ["a.jpg"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="需要符号链接支持")
def test_excludes_symlink_to_directory(photo_dir: Path, tmp_path: Path) -> None:
    target = tmp_path / "elsewhere"
    target.mkdir()
    try:
        (photo_dir / "link").symlink_to(target, target_is_directory=True)
    except OSError:
        pytest.skip("无法创建符号链接")
    make_files(photo_dir, ["a.jpg"])
    assert names(photo_dir) == ["a.jpg"]


def test_entry_fields(photo_dir: Path) -> None:
    make_files(photo_dir, ["scan.tif", "README"])
    entries = FileScanner().scan(photo_dir)

    assert [(e.name, e.extension) for e in entries] == [("README", ""), ("scan.tif", ".tif")]
    assert entries[1].path == photo_dir / "scan.tif"


def test_empty_directory(photo_dir: Path) -> None:
    assert FileScanner().scan(photo_dir) == []


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def test_sort_uses_locale_collation(photo_dir: Path, monkeypatch) -> None:
    make_files(photo_dir, ["zebra.jpg", "éclair.jpg", "fig.jpg", "Ärger.jpg", "banana.jpg"])
    monkeypatch.setattr("scanrename.scanner.locale.strxfrm", _strip_accents)

    assert names(photo_dir) == ["Ärger.jpg", "banana.jpg", "éclair.jpg", "fig.jpg", "zebra.jpg"]


def test_sort_accented_names_with_real_locale(photo_dir: Path) -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "en_US.UTF-8")
    except locale.Error:
        pytest.skip("系统未安装 en_US.UTF-8 locale")
    make_files(photo_dir, ["zebra.jpg", "éclair.jpg", "fig.jpg", "Ärger.jpg", "banana.jpg"])

    assert names(photo_dir) == ["Ärger.jpg", "banana.jpg", "éclair.jpg", "fig.jpg", "zebra.jpg"]
