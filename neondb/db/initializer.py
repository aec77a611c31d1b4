"""
neondb.db.initializer
---------------------

数据库客户端初始化：根据 DatabaseSettings 构造 SQL 执行器（sql）与查询构造客户端（db）。

流程：
1. 开发模式下，把连接串改写为本地代理地址，作为执行器的 fetch endpoint；
2. 以原始连接串构造 NeonHttpClient，并传入 FetchOptions（TLS 校验开关、超时）；
3. 用同一个执行器实例构造 Database。

本模块不做任何异常处理，也不发起网络请求；连接相关错误在第一次查询时由执行器抛出。
"""

from __future__ import annotations

from dataclasses import dataclass

from neondb.db.http_client import FetchOptions, NeonConfig, NeonHttpClient
from neondb.db.proxy import mask_password, rewrite_for_local_proxy
from neondb.db.query_builder import Database
from neondb.db.settings import DatabaseSettings
from neondb.logger import get_logger

_logger = get_logger(__name__)


@dataclass(frozen=True)
class DatabaseHandles:
    """初始化结果：sql 为底层执行器，db 为包装它的查询构造客户端。"""

    sql: NeonHttpClient
    db: Database


def init_database(settings: DatabaseSettings) -> DatabaseHandles:
    """
    构造 sql / db 两个句柄。

    输入：
        settings: DatabaseSettings，通常由 load_settings() 得到。
    输出：
        DatabaseHandles(sql, db)，db.client 即 sql。
    异常：
        RuntimeError: 连接串缺失（开发模式在改写阶段抛出，其余模式在构造执行器时抛出）。
    """
    config = NeonConfig()
    if settings.is_development:
        config = NeonConfig(fetch_endpoint=rewrite_for_local_proxy(settings.database_url))
        _logger.info("开发模式：SQL 请求发往本地代理 %s", mask_password(config.fetch_endpoint))

    sql = NeonHttpClient(
        settings.database_url,
        config=config,
        fetch_options=FetchOptions(
            verify_tls=settings.verify_tls,
            timeout=settings.timeout,
        ),
    )
    db = Database(sql)
    return DatabaseHandles(sql=sql, db=db)
