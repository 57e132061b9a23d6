"""Tests for database bootstrap."""

from app.repositories import get_write_connection


class TestWriteConnection:
    def test_creates_tables(self, tmp_path):
        conn = get_write_connection(str(tmp_path / "visibility.duckdb"))
        try:
            tables = {r[0] for r in conn.execute("SELECT table_name FROM information_schema.tables").fetchall()}
        finally:
            conn.close()

        assert {"backlink_velocity", "keyword", "keyword_group", "keyword_group_membership", "keyword_position"} <= tables

    def test_reopen_keeps_data(self, tmp_path):
        path = str(tmp_path / "visibility.duckdb")
        conn = get_write_connection(path)
        conn.execute("INSERT INTO keyword VALUES ('k1', 'example.com', 'shoes', now())")
        conn.close()

        conn = get_write_connection(path)
        try:
            assert conn.execute("SELECT COUNT(*) FROM keyword").fetchone()[0] == 1
        finally:
            conn.close()
