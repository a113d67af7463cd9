from timekeeper.database.bootstrap import SCHEMA_PATH, split_statements


def test_schema_defines_all_tables():
    statements = split_statements(SCHEMA_PATH.read_text(encoding="utf-8"))
    tables = [stmt.split()[5] for stmt in statements]
    assert tables == ["accounts", "work_logs", "pay_settings", "punch_sessions"]


def test_split_skips_comments_and_blank_statements():
    sql = "-- header\nCREATE TABLE a (x INT);\n\n;\nCREATE TABLE b (y INT)"
    assert split_statements(sql) == ["CREATE TABLE a (x INT)", "CREATE TABLE b (y INT)"]
