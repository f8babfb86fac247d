"""Application-wide Flask extensions."""

import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine


# A single SQLAlchemy handle shared across the application. The engine is
# configured in :func:`blog.create_app` and only backs the local post store;
# deployments pointed at Supabase never open it.
db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with foreign keys off, which would silently skip the
    # ``ON DELETE CASCADE`` on comments.
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
