import os
import pytest
from fastapi.testclient import TestClient

from roombooker.config import Settings
from roombooker.db import Base, init_database
from roombooker.main import create_app

# Test database setup
if not os.path.exists("./out"):
    os.makedirs("./out")

test_settings = Settings(database_url="sqlite:///./out/tests.db", log_level="DEBUG")
app = create_app(test_settings)
engine = app.state.engine
TestingSessionLocal = app.state.session_factory

# Create test tables
init_database(engine)

client = TestClient(app)


# Fixtures
@pytest.fixture(autouse=True)
def clear_db():
    """Clear all data from all tables after each test"""
    with engine.connect() as conn:
        trans = conn.begin()
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
        trans.commit()


@pytest.fixture
def test_db():
    """Provide a database session for testing"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
