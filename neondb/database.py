"""
neondb.database: 进程级数据库句柄。

导入即读取 .env / 环境变量并构造：
- sql: NeonHttpClient，接收原始 SQL 文本与位置参数；
- db: Database，基于 SQLAlchemy Core 的查询构造客户端。

两者在进程生命周期内只构造一次，视为只读单例；没有显式的关闭逻辑。
缺少 DATABASE_URL 时导入直接失败。
"""

from neondb.db.initializer import init_database
from neondb.db.settings import load_settings

handles = init_database(load_settings())
sql = handles.sql
db = handles.db

__all__ = ["db", "sql"]
