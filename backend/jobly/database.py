import re
from collections.abc import Sequence

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, Result
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from jobly.config import settings


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(database_url: str | None = None) -> Engine:
    url = database_url or settings.database_url
    if url.startswith("sqlite"):
        engine = create_engine(url, connect_args={"check_same_thread": False})
        event.listen(engine, "connect", _set_sqlite_pragmas)
    else:
        engine = create_engine(url, pool_pre_ping=True)
    return engine


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None):
    # Registers the tables on Base.metadata
    import jobly.models  # noqa: F401

    Base.metadata.create_all(bind or engine)


_PLACEHOLDER = re.compile(r"\$(\d+)")


def execute(db: Session, sql: str, values: Sequence = ()) -> Result:
    """Run SQL written with ``$1..$N`` placeholders.

    Each ``$n`` becomes the named bind ``:pn`` holding ``values[n - 1]``, so
    the statement text never contains a value and runs unchanged on any
    dialect SQLAlchemy supports.
    """
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return db.execute(text(_PLACEHOLDER.sub(r":p\1", sql)), params)
