import os
import unittest
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from ra_server.db.session import Base
from ra_server.models.post import Post  # noqa: F401
from ra_server.models.user import User  # noqa: F401

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class MigrationTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        config = Config(str(PROJECT_ROOT / "alembic.ini"))
        config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
        with cls.engine.begin() as connection:
            config.attributes["connection"] = connection
            command.upgrade(config, "head")
        cls.inspector = inspect(cls.engine)

    @classmethod
    def tearDownClass(cls):
        cls.engine.dispose()

    def test_upgrade_head_creates_expected_tables(self):
        expected = {"users", "posts", "alembic_version"}
        tables = set(self.inspector.get_table_names())
        self.assertTrue(expected.issubset(tables), f"Missing tables: {expected - tables}")

    def test_alembic_version_is_set(self):
        with self.engine.connect() as conn:
            version = conn.execute(text("SELECT version_num FROM alembic_version")).scalar_one()
        self.assertEqual(version, "0001_init")

    def test_posts_reference_users(self):
        foreign_keys = self.inspector.get_foreign_keys("posts")
        self.assertEqual([(fk["referred_table"], fk["constrained_columns"]) for fk in foreign_keys], [("users", ["user_id"])])
        self.assertIn("ix_posts_user_id", {index["name"] for index in self.inspector.get_indexes("posts")})

    def test_migrated_schema_matches_models(self):
        for table in Base.metadata.sorted_tables:
            migrated = {column["name"] for column in self.inspector.get_columns(table.name)}
            self.assertEqual(migrated, set(table.columns.keys()), table.name)


if __name__ == "__main__":
    unittest.main()
