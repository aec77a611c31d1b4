# neondb: 通过 HTTP 访问 Neon/Postgres 的 SQL 执行器与查询构造客户端
# 进程级单例 sql / db 位于 neondb.database，按需导入（导入即读取环境配置）

__version__ = "0.1.0"
