import os
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker


Base = declarative_base()


def make_engine(database_url: str) -> Engine:
    connect_args = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


def make_session_factory(engine: Engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_database(engine: Engine):
    url = engine.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        directory = os.path.dirname(url.database)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
    # Imported for their side effect of registering tables on Base.metadata.
    from roombooker.models import booking, room  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db(request: Request):
    """Provide a database session."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
