from sqlalchemy import create_engine, event        # SQLAlchemy engine factory
from sqlalchemy.orm import declarative_base         # Base class for the models
from sqlalchemy.orm import sessionmaker             # session factory

from config.settings import settings                # ✅ settings from .env


def configure_sqlite(engine):
    """
    Let SQLAlchemy own BEGIN on SQLite so SAVEPOINT / rollback behave like on
    MySQL, and turn on foreign key enforcement.
    """
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


def make_engine(url: str, **kwargs):
    if url.startswith("sqlite"):
        # SQLite connections are shared across FastAPI's threadpool
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        return configure_sqlite(create_engine(url, **kwargs))
    return create_engine(url, pool_pre_ping=True, **kwargs)


# ✅ engine built from the configured DB URL
engine = make_engine(settings.DATABASE_URL)

# ✅ session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ declarative Base shared by all models
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    # register every table on Base.metadata
    import models.users, models.courses, models.professor_pages, models.ratings  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
