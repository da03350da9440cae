from __future__ import annotations

from src.hris_dashboard.hris_dashboard.database.bootstrap import _strip_create_db_and_use, iter_sql_statements


def test_split_ignores_semicolons_inside_quotes():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\nINSERT INTO a VALUES (\"p;q\")"

    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('x;y')",
        'INSERT INTO a VALUES ("p;q")',
    ]


def test_split_handles_escaped_quotes():
    sql = "INSERT INTO a VALUES ('it\\'s; fine'); SELECT 1;"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO a VALUES ('it\\'s; fine')", "SELECT 1"]


def test_create_database_and_use_lines_are_dropped():
    sql = "CREATE DATABASE IF NOT EXISTS hris_db;\nUSE hris_db;\nCREATE TABLE t (id INT);"

    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
