# app/data/migrations.py
import logging
import os

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from app.core.config import BASE_DIR

logger = logging.getLogger(__name__)

ALEMBIC_DIR = os.path.join(BASE_DIR, "alembic")
BASELINE_REVISION = "0001"


def get_alembic_config(database_url: str) -> Config:
    config = Config()
    config.set_main_option("script_location", ALEMBIC_DIR)
    # ConfigParser interpolation treats % specially.
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def run_migrations(database_url: str) -> None:
    """
    Bring the database schema up to the latest Alembic revision.

    A database created before migrations existed is stamped at the baseline
    instead of being recreated. The legacy phone-based users table is refused
    outright so that no data is dropped behind the operator's back.
    """
    engine = create_engine(database_url)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        if "users" in tables:
            columns = {column["name"] for column in inspector.get_columns("users")}
            if "phone" in columns:
                raise RuntimeError(
                    "Found legacy 'users.phone' column. Migrate the old users/queries tables "
                    "manually before starting the service."
                )
        unversioned = {"users", "queries"} <= tables and "alembic_version" not in tables
    finally:
        engine.dispose()

    config = get_alembic_config(database_url)
    if unversioned:
        logger.warning(f"Existing schema without version table, stamping revision {BASELINE_REVISION}")
        command.stamp(config, BASELINE_REVISION)

    command.upgrade(config, "head")
    logger.info("Database migrations applied")
