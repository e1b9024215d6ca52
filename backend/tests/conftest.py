import os

import pytest

# Use in-memory sqlite for tests; must be set before trackpace.db is imported
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")


@pytest.fixture
def client():
    # Import after env is set so engine is created with sqlite
    from trackpace.main import app  # noqa: WPS433
    from fastapi.testclient import TestClient  # noqa: WPS433

    c = TestClient(app)
    c.delete("/sessions")
    return c
