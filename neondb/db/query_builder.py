"""
neondb.db.query_builder
-----------------------

查询构造客户端：在 NeonHttpClient 之上提供基于 SQLAlchemy Core 的结构化查询。

要点：
- 语句由 SQLAlchemy Core 构造（select/insert/update/delete/text），
  使用 PostgreSQL 方言编译为 $1, $2, ... 位置参数后交给执行器；
- Database 只持有执行器引用，不管理连接、不做重试，也不翻译异常；
- db.select(...) 等方法返回 BoundQuery，可链式调用 where/order_by/limit 等，
  最后以 all()/first()/scalar()/to_frame() 执行。
"""

from __future__ import annotations

import functools
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql.base import PGDialect
from sqlalchemy.sql.base import Executable
from sqlalchemy.sql.elements import TextClause

from neondb.db.http_client import NeonHttpClient, Row

Statement = Union[str, Executable]


class Database:
    """
    查询构造客户端。

    Input:
        client: 已构造好的 NeonHttpClient（即导出的 sql 句柄），原样保存在 self.client。
    Output:
        无（构造器）。
    """

    def __init__(self, client: NeonHttpClient) -> None:
        self.client = client
        self.dialect = PGDialect(paramstyle="numeric_dollar")

    # -- 编译 ----------------------------------------------------------------

    def compile(
        self,
        statement: Statement,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Tuple[str, List[Any]]:
        """
        将语句编译为 (SQL 文本, 位置参数列表)。

        输入：
            statement: SQLAlchemy 可执行语句，或原始 SQL 字符串；
            params: 命名参数字典，绑定到语句中的同名参数。
        输出：
            (sql_text, params)：sql_text 使用 $n 占位符，params 按占位符顺序排列。
        说明：
            原始 SQL 字符串且未传 params 时原样返回，不做任何改写（其中的 :word、JSON 字面量等保持不变）；
            传了 params 时按 sqlalchemy.text 解析 :name 命名参数，字面冒号需写成 \\:。
        """
        if isinstance(statement, str) and not params:
            return statement, []
        stmt = _bind(statement, params)
        compiled = stmt.compile(
            dialect=self.dialect,
            compile_kwargs={"render_postcompile": True},
        )
        values = compiled.params
        ordered = [values[name] for name in (compiled.positiontup or [])]
        return str(compiled), ordered

    # -- 执行 ----------------------------------------------------------------

    def execute(self, statement: Statement, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        """编译并执行语句，返回行列表。"""
        sql_text, values = self.compile(statement, params)
        return self.client.query(sql_text, values)

    def all(self, statement: Statement, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        return self.execute(statement, params)

    def first(self, statement: Statement, params: Optional[Mapping[str, Any]] = None) -> Optional[Row]:
        rows = self.execute(statement, params)
        return rows[0] if rows else None

    def scalar(self, statement: Statement, params: Optional[Mapping[str, Any]] = None) -> Any:
        """返回第一行第一列；无数据时返回 None。"""
        row = self.first(statement, params)
        if row is None:
            return None
        if isinstance(row, dict):
            return next(iter(row.values()), None)
        return row[0] if row else None

    def to_frame(self, statement: Statement, params: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
        sql_text, values = self.compile(statement, params)
        return self.client.to_frame(sql_text, values)

    def transaction(self, statements: Sequence[Statement], **options: Any) -> List[Any]:
        """
        在同一事务中执行多条语句。

        输入：
            statements: 语句序列（SQLAlchemy 语句、原始 SQL 或 BoundQuery）；
            **options: 透传给 NeonHttpClient.transaction 的事务选项
                       （isolation_level / read_only / deferrable）。
        输出：
            与 statements 一一对应的结果列表。
        """
        queries = [self.compile(_unwrap(s)) for s in statements]
        return self.client.transaction(queries, **options)

    # -- 流式构造 --------------------------------------------------------------

    def select(self, *entities: Any) -> "BoundQuery":
        return BoundQuery(self, sa.select(*entities))

    def insert(self, table: Any) -> "BoundQuery":
        return BoundQuery(self, sa.insert(table))

    def update(self, table: Any) -> "BoundQuery":
        return BoundQuery(self, sa.update(table))

    def delete(self, table: Any) -> "BoundQuery":
        return BoundQuery(self, sa.delete(table))

    def __repr__(self) -> str:
        return f"Database(client={self.client!r})"


class BoundQuery:
    """
    绑定到 Database 的语句包装。

    SQLAlchemy 的生成式方法（where/order_by/limit/values/returning 等）
    返回新的 BoundQuery；all/first/scalar/to_frame/execute 负责执行。
    """

    def __init__(self, db: Database, statement: Executable) -> None:
        self.db = db
        self.statement = statement

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self.statement, name)
        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def _generative(*args: Any, **kwargs: Any) -> Any:
            result = attr(*args, **kwargs)
            if isinstance(result, Executable):
                return BoundQuery(self.db, result)
            return result

        return _generative

    @property
    def sql(self) -> str:
        """编译后的 SQL 文本（$n 占位符），便于调试。"""
        return self.db.compile(self.statement)[0]

    def execute(self, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        return self.db.execute(self.statement, params)

    def all(self, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        return self.db.all(self.statement, params)

    def first(self, params: Optional[Mapping[str, Any]] = None) -> Optional[Row]:
        return self.db.first(self.statement, params)

    def scalar(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.db.scalar(self.statement, params)

    def to_frame(self, params: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
        return self.db.to_frame(self.statement, params)

    def __repr__(self) -> str:
        return f"BoundQuery({self.sql!r})"


def _unwrap(statement: Union[Statement, BoundQuery]) -> Statement:
    if isinstance(statement, BoundQuery):
        return statement.statement
    return statement


def _bind(statement: Union[Statement, BoundQuery], params: Optional[Mapping[str, Any]]) -> Executable:
    stmt = _unwrap(statement)
    if isinstance(stmt, str):
        stmt = sa.text(stmt)
    if not params:
        return stmt
    values: Dict[str, Any] = dict(params)
    if isinstance(stmt, TextClause):
        return stmt.bindparams(**values)
    return stmt.params(**values)
