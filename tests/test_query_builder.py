"""Tests for the SQLAlchemy-based query client."""

from unittest.mock import MagicMock

import pandas as pd
import pytest
import sqlalchemy as sa

from neondb.db.http_client import NeonHttpClient
from neondb.db.query_builder import BoundQuery, Database

metadata = sa.MetaData()
users = sa.Table(
    "users",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True),
    sa.Column("name", sa.String),
    sa.Column("active", sa.Boolean),
)


@pytest.fixture
def client():
    mock = MagicMock(spec=NeonHttpClient)
    mock.query.return_value = [{"id": 1, "name": "ada"}]
    return mock


@pytest.fixture
def db(client):
    return Database(client)


def test_holds_the_given_client(client):
    assert Database(client).client is client


def test_compile_uses_dollar_placeholders(db):
    stmt = sa.select(users.c.id, users.c.name).where(users.c.name == "ada", users.c.active.is_(True))
    sql_text, params = db.compile(stmt)
    assert "$1" in sql_text
    assert ":" not in sql_text
    assert params == ["ada"]


def test_compile_orders_params_by_position(db):
    stmt = sa.update(users).where(users.c.id == 7).values(name="bob")
    sql_text, params = db.compile(stmt)
    assert sql_text.startswith("UPDATE users SET name=$1")
    assert params == ["bob", 7]


def test_raw_string_with_named_params(db, client):
    db.execute("SELECT * FROM users WHERE id = :id", {"id": 5})
    client.query.assert_called_once_with("SELECT * FROM users WHERE id = $1", [5])


def test_fluent_select(db, client):
    query = db.select(users).where(users.c.id == 1).limit(1)
    assert isinstance(query, BoundQuery)

    assert query.first() == {"id": 1, "name": "ada"}
    sql_text, params = client.query.call_args[0]
    assert "FROM users" in sql_text
    assert "LIMIT $2" in sql_text
    assert params == [1, 1]


def test_fluent_insert_returning(db, client):
    db.insert(users).values(name="bob", active=True).returning(users.c.id).all()
    sql_text, params = client.query.call_args[0]
    assert sql_text.startswith("INSERT INTO users (name, active) VALUES ($1, $2) RETURNING users.id")
    assert params == ["bob", True]


def test_scalar(db, client):
    client.query.return_value = [{"count": 3}]
    assert db.scalar(sa.select(sa.func.count()).select_from(users)) == 3

    client.query.return_value = []
    assert db.scalar("SELECT 1 WHERE false") is None


def test_to_frame_delegates_to_client(db, client):
    client.to_frame.return_value = pd.DataFrame({"id": [1]})
    df = db.select(users.c.id).to_frame()
    assert df["id"].tolist() == [1]
    client.to_frame.assert_called_once()


def test_transaction_compiles_each_statement(db, client):
    db.transaction(
        [db.delete(users).where(users.c.id == 1), "SELECT count(*) FROM users"],
        isolation_level="ReadCommitted",
    )
    queries = client.transaction.call_args[0][0]
    assert queries == [
        ("DELETE FROM users WHERE users.id = $1", [1]),
        ("SELECT count(*) FROM users", []),
    ]
    assert client.transaction.call_args[1] == {"isolation_level": "ReadCommitted"}


def test_driver_errors_propagate(db, client):
    client.query.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError, match="boom"):
        db.select(users).all()


def test_raw_string_without_params_is_sent_verbatim(db, client):
    text = """SELECT '{"a":1}'::jsonb AS j WHERE note <> 'at 10:30'"""
    assert db.compile(text) == (text, [])

    db.execute(text)
    client.query.assert_called_once_with(text, [])


def test_raw_string_in_transaction_is_sent_verbatim(db, client):
    text = """SELECT '{"a":1}'::jsonb"""
    db.transaction([text])
    assert client.transaction.call_args[0][0] == [(text, [])]
