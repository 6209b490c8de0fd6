# alembic/env.py
#
# Runs under plain `alembic` (config from ./alembic.ini, app built from wsgi)
# and under `flask db ...` (Flask-Migrate points at alembic/alembic.ini, which
# does not exist, and the app is already pushed as current_app).
from logging.config import fileConfig
import os
import pathlib
import sys

from alembic import context
from flask import current_app, has_app_context
from sqlalchemy import engine_from_config, pool

BASE_DIR = pathlib.Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

config = context.config
if config.config_file_name and os.path.exists(config.config_file_name):
    fileConfig(config.config_file_name)


def _load_app():
    if has_app_context():
        return current_app._get_current_object()
    # migrations own the schema; keep create_app from calling create_all
    os.environ["SKIP_CREATE_ALL"] = "1"
    from wsgi import app
    return app


app = _load_app()

from summarizer.extensions import db  # noqa: E402

with app.app_context():
    # Config already honours DATABASE_URL
    url = app.config.get("SQLALCHEMY_DATABASE_URI")
    import summarizer.models  # noqa: F401
    target_metadata = db.metadata


def run_migrations_offline():
    context.configure(url=url, target_metadata=target_metadata,
                      literal_binds=True, compare_type=True, render_as_batch=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = engine_from_config({"sqlalchemy.url": url},
                                     prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata,
                          compare_type=True, render_as_batch=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
