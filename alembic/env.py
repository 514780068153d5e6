from logging.config import fileConfig
from alembic import context
from sqlalchemy import engine_from_config, pool
import os
from ra_server.db.session import Base

# import models
from ra_server.models.user import User
from ra_server.models.post import Post

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)
target_metadata = Base.metadata

def get_url():
    return os.getenv("DATABASE_URL") or config.get_main_option("sqlalchemy.url")

def run_migrations_offline():
    context.configure(url=get_url(), target_metadata=target_metadata, literal_binds=True, compare_type=True)
    with context.begin_transaction():
        context.run_migrations()

def _run_with_connection(connection):
    context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    # Programmatic callers (tests) hand over an open connection.
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with_connection(connection)
        return
    cfg = config.get_section(config.config_ini_section)
    cfg["sqlalchemy.url"] = get_url()
    connectable = engine_from_config(cfg, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        _run_with_connection(connection)

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
