"""Tests for engine construction.

Invariants:
1. File databases give each session its own connection
2. In-memory databases share one connection across sessions
3. Foreign keys are enforced on every connection
"""

from sqlalchemy import text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mediadesk.db.schema import Base, Model
from mediadesk.db.session import build_engine


class TestPooling:
    """Connection pooling per database kind."""

    def test_memory_database_uses_static_pool(self):
        engine = build_engine("sqlite:///:memory:")
        assert isinstance(engine.pool, StaticPool)

    def test_file_database_does_not_share_connection(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
        assert not isinstance(engine.pool, StaticPool)

    def test_rollback_does_not_discard_other_session_writes(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
        Base.metadata.create_all(engine)
        Session = sessionmaker(bind=engine)

        writer = Session()
        writer.add(Model(name="Ava"))
        writer.flush()

        failing = Session()
        failing.execute(text("SELECT 1"))
        failing.rollback()
        failing.close()

        writer.commit()
        writer.close()

        with Session() as check:
            assert check.query(Model).count() == 1


class TestConnectionSetup:
    """Per-connection pragmas and functions."""

    def test_foreign_keys_enabled(self, engine):
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1

    def test_lower_folds_unicode(self, engine):
        with engine.connect() as conn:
            assert conn.execute(text("SELECT lower('ÉLODIE')")).scalar() == "élodie"
