"""
Integration tests for Database fetch helpers and Result against a live MySQL.

Skipped unless DB_HOSTNAME, DB_USERNAME and DB_DATABASE are set.
"""

from collections.abc import Generator

import pytest

from tinymysql import Database
from tinymysql.exceptions import QueryError


@pytest.fixture(scope="module")
def messages(db: Database) -> Generator[Database, None, None]:
    db.query(
        """CREATE TEMPORARY TABLE unit_tests (
            `id` INT(10) UNSIGNED AUTO_INCREMENT PRIMARY KEY,
            `subject` VARCHAR(50) CHARACTER SET utf8mb4 NOT NULL,
            `message` VARCHAR(100) CHARACTER SET utf8mb4 NOT NULL,
            `updated_at` DATETIME NOT NULL,
            `deleted_at` DATETIME DEFAULT NULL
        ) ENGINE=MEMORY"""
    )
    rows = [
        {
            "subject": f"Subject #{n}",
            "message": f"This is message {n} {symbol}",
            "updated_at": f"2022-01-0{n} 12:34:56",
        }
        for n, symbol in enumerate(["🔴", "🟢", "🟣", "🔴", "🟡", "🟡", "🔴", "🟢", "🟣"], start=1)
    ]
    for row in rows:
        db.query("INSERT INTO unit_tests SET ?u", row)
    yield db
    db.query("DROP TABLE IF EXISTS unit_tests")


class TestFetching:
    def test_get_all(self, messages: Database):
        rows = messages.get_all(
            "SELECT id, subject, deleted_at FROM unit_tests WHERE BINARY ?n LIKE ?s", "message", "%🟣%"
        )
        assert rows == [
            {"id": "3", "subject": "Subject #3", "deleted_at": None},
            {"id": "9", "subject": "Subject #9", "deleted_at": None},
        ]
        assert list(rows[0]) == ["id", "subject", "deleted_at"]
        assert messages.get_all("SELECT * FROM unit_tests WHERE BINARY ?n LIKE ?s", "message", "%🟤%") == []

    def test_get_row(self, messages: Database):
        assert messages.get_row("SELECT `subject`, id FROM unit_tests WHERE id=?i", 5) == {
            "subject": "Subject #5",
            "id": "5",
        }
        assert messages.get_row("SELECT id FROM unit_tests WHERE id IN (?a)", [3, 4]) == {"id": "3"}
        assert messages.get_row("SELECT * FROM unit_tests WHERE id=?i", 123456) is None

    def test_get_col(self, messages: Database):
        col = messages.get_col(
            "SELECT id, subject FROM unit_tests WHERE updated_at BETWEEN ?s AND ?s",
            "2022-01-03 00:00:00",
            "2022-01-05 23:59:59",
        )
        assert col == ["3", "4", "5"]
        assert messages.get_col("SELECT id FROM unit_tests WHERE ?n LIKE ?s", "subject", "Nope%") == []

    def test_get_one(self, messages: Database):
        assert messages.get_one("SELECT `subject` FROM unit_tests WHERE id=?i", 7) == "Subject #7"
        assert messages.get_one("SELECT deleted_at FROM unit_tests LIMIT 1", default=False) is None
        assert messages.get_one("SELECT id FROM unit_tests WHERE ?n=?s", "subject", "x", default=False) is False

    def test_query_error(self, messages: Database):
        with pytest.raises(QueryError):
            messages.get_all("SELECT * FROM a_table_that_does_not_exists")


@pytest.fixture()
def symbols(db: Database) -> Generator[Database, None, None]:
    db.query(
        """CREATE TEMPORARY TABLE result_tests (
            `id` INT(10) UNSIGNED AUTO_INCREMENT PRIMARY KEY,
            `symbol` VARCHAR(4) CHARACTER SET utf8mb4 COLLATE utf8mb4_bin NOT NULL,
            `word` VARCHAR(50) CHARACTER SET utf8mb4 DEFAULT NULL,
            UNIQUE KEY (`symbol`)
        ) ENGINE=MEMORY"""
    )
    yield db
    db.query("DROP TABLE IF EXISTS result_tests")


class TestResult:
    def test_fetch_row(self, symbols: Database):
        symbols.query(
            "INSERT INTO result_tests (symbol, word) VALUES (?a), (?a)", ["🍰", "cake"], ["◾", None]
        )
        result = symbols.query("SELECT * FROM result_tests")
        assert result.fetch_row() == {"id": "1", "symbol": "🍰", "word": "cake"}
        assert result.fetch_row() == {"id": "2", "symbol": "◾", "word": None}
        assert result.fetch_row() is None
        assert result.fetch_row() is None
        result.free()

    def test_row_count_and_insert_id(self, symbols: Database):
        result = symbols.query("INSERT INTO result_tests SET ?u", {"symbol": "1", "word": "one"})
        assert result.row_count == 1
        assert result.insert_id == 1

        result = symbols.query(
            "INSERT INTO result_tests (symbol, word) VALUES (?a), (?a)", ["2", "two"], ["3", "three"]
        )
        assert result.row_count == 2
        assert result.insert_id == 2

        result = symbols.query("SELECT * FROM result_tests WHERE word LIKE ?s", "t%")
        assert result.row_count == 2
        assert result.insert_id is None
        result.free()
