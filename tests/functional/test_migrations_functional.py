"""Tests for the SQL migrations runner."""

from __future__ import annotations

from sqlalchemy import create_engine, inspect
from sqlalchemy import text as sql_text

from catalog.db.migrations_runner import applied_migrations, apply_migrations


def _engine(tmp_path, name="m.db"):
    return create_engine(f"sqlite:///{tmp_path / name}", future=True)


def test_apply_creates_catalog_tables(tmp_path):
    engine = _engine(tmp_path)
    applied = apply_migrations(engine)
    assert applied == ["001_catalog_schema.sql"]
    tables = set(inspect(engine).get_table_names())
    assert {"enterprises", "products", "news", "sliders", "schema_migrations"} <= tables
    engine.dispose()


def test_apply_is_idempotent_per_database(tmp_path):
    first = _engine(tmp_path, "a.db")
    second = _engine(tmp_path, "b.db")
    apply_migrations(first)
    assert apply_migrations(first) == []
    # The journal lives in each database, so a fresh file still gets the schema
    assert apply_migrations(second) == ["001_catalog_schema.sql"]
    assert applied_migrations(first) == {"001_catalog_schema.sql"}
    first.dispose()
    second.dispose()


def test_custom_dir_skips_rollbacks_and_comment_semicolons(tmp_path):
    mig = tmp_path / "migs"
    mig.mkdir()
    (mig / "001_a.sql").write_text(
        "-- first; with a semicolon in a comment\nCREATE TABLE a (id INTEGER);\nCREATE TABLE b (id INTEGER);\n",
        encoding="utf-8",
    )
    (mig / "002_rollback.sql").write_text("DROP TABLE a;", encoding="utf-8")
    (mig / "003_empty.sql").write_text("   \n", encoding="utf-8")
    engine = _engine(tmp_path)

    assert apply_migrations(engine, mig) == ["001_a.sql"]

    with engine.connect() as conn:
        conn.execute(sql_text("SELECT * FROM a")).fetchall()
        conn.execute(sql_text("SELECT * FROM b")).fetchall()
    engine.dispose()


def test_missing_dir_is_a_no_op(tmp_path):
    engine = _engine(tmp_path)
    assert apply_migrations(engine, tmp_path / "absent") == []
    engine.dispose()
