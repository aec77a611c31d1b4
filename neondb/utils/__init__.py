# neondb.utils: 通用工具（配置加载、SQL 文件读取等）
# 禁止引用 neondb.db 下的任何内容

from neondb.utils.config_loader import load_yaml, parse_bool
from neondb.utils.sql_loader import list_sql_files, read_sql_file

__all__ = ["load_yaml", "parse_bool", "list_sql_files", "read_sql_file"]
