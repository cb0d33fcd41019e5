"""
Engine, session factory and declarative base.

Also installs session-wide behaviours: SQLite connections enforce foreign
keys and fold case with a Unicode-aware ``lower()``, and every ORM SELECT
against a soft-deletable model excludes deleted rows unless the statement
carries ``include_deleted=True``.
"""
import sqlite3

from sqlalchemy import create_engine, event, false
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker, with_loader_criteria

from .config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

connect_args = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def _configure_sqlite(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        # SQLite ignores FOREIGN KEY clauses unless asked per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        # built-in lower() only folds ASCII letters
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


@event.listens_for(Session, "do_orm_execute")
def _filter_soft_deleted(execute_state):
    if (
        execute_state.is_select
        and not execute_state.is_column_load
        and not execute_state.is_relationship_load
        and not execute_state.execution_options.get("include_deleted", False)
    ):
        from .models import SoftDeleteMixin

        execute_state.statement = execute_state.statement.options(
            with_loader_criteria(
                SoftDeleteMixin,
                lambda cls: cls.is_deleted == false(),
                include_aliases=True,
            )
        )
