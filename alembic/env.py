from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from condofee.db import _get_url

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Schema lives in hand-written migrations; there is no MetaData to autogenerate from.
connectable = create_engine(_get_url(), poolclass=pool.NullPool)

with connectable.connect() as connection:
    context.configure(connection=connection, target_metadata=None, render_as_batch=True)
    with context.begin_transaction():
        context.run_migrations()
