"""
scripts/run_sql_export.py
-------------------------

读取指定目录下的 *.sql，逐个通过 sql 句柄执行，
并将结果保存为 {filename}_res.csv 到该目录的上一级（需求目录根目录）。

使用方式（示例）：
1. 在项目根目录 .env 中设置 DATABASE_URL（开发模式另设 APP_ENV=development）；
2. 如需调整超时或证书校验，在 configs/db_local.yaml 的 database 段中配置；
3. 在项目根目录下运行：
   python -m scripts.run_sql_export path/to/workspace/sql
   不传参数时使用本脚本末尾的 SQL_DIR。
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Tuple

# 将项目根目录加入 sys.path，保证 from neondb.xxx 可被解析（无论从何处执行脚本）
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from neondb.db import NeonHttpClient, init_database, load_settings  # noqa: E402
from neondb.utils import list_sql_files, read_sql_file  # noqa: E402


def export_sql_dir(sql_dir: str | Path, sql: NeonHttpClient) -> Tuple[List[str], List[str]]:
    """
    执行 sql_dir 下全部 .sql 文件并导出 CSV。

    输入：
        sql_dir: 含 .sql 文件的目录；
        sql: SQL 执行器；文件内容原样发送，不经查询构造客户端改写。
    输出：
        (成功文件名列表, 失败文件名列表)。单个文件失败不会中断后续文件。
    异常：
        FileNotFoundError / NotADirectoryError: 目录不存在或不是目录。
    """
    sql_path = Path(sql_dir)
    sql_files = list_sql_files(sql_path)
    success_files: List[str] = []
    failed_files: List[str] = []
    if not sql_files:
        print(f"[提示] 目录中未找到任何 .sql 文件：{sql_path}")
        return success_files, failed_files

    out_dir = sql_path.resolve().parent
    total = len(sql_files)
    print(f"[开始] SQL 目录：{sql_path}，待运行 SQL 文件数：{total}")

    for idx, file_path in enumerate(sql_files, start=1):
        print(f"[执行] 第 {idx}/{total} 个：{file_path.name}")
        try:
            df = sql.to_frame(read_sql_file(file_path))
            df.to_csv(out_dir / f"{file_path.stem}_res.csv", index=False)
            print(f"[完成] 第 {idx} 个：{file_path.name}，{len(df)} 行")
            success_files.append(file_path.name)
        except Exception as exc:
            print(f"[失败] 第 {idx} 个：{file_path.name}，错误：{exc!s}")
            failed_files.append(file_path.name)

    print(f"[总结] 共 {total} 个 SQL 文件，成功 {len(success_files)} 个，失败 {len(failed_files)} 个。")
    if success_files:
        print(f"[成功列表] {', '.join(success_files)}")
    if failed_files:
        print(f"[失败列表] {', '.join(failed_files)}")
    return success_files, failed_files


def main(argv: List[str]) -> int:
    sql_dir = argv[0] if argv else SQL_DIR
    if not sql_dir:
        raise ValueError(
            "请通过命令行参数传入 SQL 目录，或在 scripts/run_sql_export.py 中设置 SQL_DIR。"
        )
    handles = init_database(load_settings())
    _, failed = export_sql_dir(sql_dir, handles.sql)
    return 1 if failed else 0


# 不传命令行参数时使用的默认目录
SQL_DIR = ""


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
