"""
neondb.db: 数据库访问的底层工具。

当前实现：
- NeonHttpClient：HTTP SQL 执行器（基于 requests），执行 SQL 并返回行或 DataFrame；
- Database：基于 SQLAlchemy Core 的查询构造客户端；
- init_database / load_settings：按配置构造上述两个句柄。

注意：
- 执行器与查询构造客户端不读取环境变量，配置统一由 settings 注入；
- 禁止引用 scripts 下的任何内容。
"""

from __future__ import annotations

from .http_client import FetchOptions, NeonConfig, NeonDbError, NeonHttpClient, QueryResult
from .initializer import DatabaseHandles, init_database
from .proxy import rewrite_for_local_proxy
from .query_builder import BoundQuery, Database
from .settings import DatabaseSettings, load_settings

__all__ = [
    "BoundQuery",
    "Database",
    "DatabaseHandles",
    "DatabaseSettings",
    "FetchOptions",
    "NeonConfig",
    "NeonDbError",
    "NeonHttpClient",
    "QueryResult",
    "init_database",
    "load_settings",
    "rewrite_for_local_proxy",
]
