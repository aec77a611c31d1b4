"""
neondb.utils.sql_loader
-----------------------

SQL 文件读取工具：
- 按目录列出 .sql 文件；
- 读取单个 .sql 文件内容（空文件视为错误）。

注意：
- 不关心具体业务目录结构，仅处理传入路径；
- 禁止引用 neondb.db 下的任何内容。
"""

from __future__ import annotations

from pathlib import Path
from typing import List


def list_sql_files(sql_dir: str | Path) -> List[Path]:
    """
    列出指定目录下的所有 .sql 文件（不递归），按文件名排序。

    异常：
        FileNotFoundError: 目录不存在时抛出；
        NotADirectoryError: 路径存在但不是目录时抛出。
    """
    dir_path = Path(sql_dir)
    if not dir_path.exists():
        raise FileNotFoundError(f"SQL 目录不存在：{dir_path.absolute()}")
    if not dir_path.is_dir():
        raise NotADirectoryError(f"传入路径不是目录：{dir_path.absolute()}")
    return sorted(p for p in dir_path.glob("*.sql") if p.is_file())


def read_sql_file(path: str | Path, encoding: str = "utf-8") -> str:
    """
    读取单个 .sql 文件，返回去除首尾空白后的 SQL 文本。

    输入：
        path: .sql 文件路径；
        encoding: 文本编码，默认 utf-8。
    输出：
        str: SQL 文本（末尾分号保留，由服务端处理）。
    异常：
        FileNotFoundError: 文件不存在；
        IsADirectoryError: 传入路径为目录；
        ValueError: 文件内容为空或仅含空白。
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"SQL 文件不存在：{file_path.absolute()}")
    if file_path.is_dir():
        raise IsADirectoryError(f"期望为文件但得到目录：{file_path.absolute()}")

    sql_text = file_path.read_text(encoding=encoding).strip()
    if not sql_text:
        raise ValueError(f"SQL 文件内容为空，请检查：{file_path.name}")
    return sql_text
