"""scanrename 入口点（``python -m scanrename``）"""

import io
import sys

from scanrename.cli import app


def _force_utf8(stream: io.TextIOBase) -> io.TextIOBase:
    """Windows 控制台下改用 UTF-8 输出，避免中文乱码"""
    if not hasattr(stream, "buffer"):
        return stream
    return io.TextIOWrapper(
        stream.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )


def main() -> None:
    """CLI 主入口"""
    if sys.platform == "win32":
        sys.stdout = _force_utf8(sys.stdout)
        sys.stderr = _force_utf8(sys.stderr)
    app()


if __name__ == "__main__":
    main()
