"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def client():
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh client to avoid state contamination.
    """
    from main import app
    from services.metadata_service import MetadataService

    app.state.metadata_service = MetadataService(max_upload_bytes=1024 * 1024)
    app.state.config = {"system": {"log_level": "INFO", "debug": False}}

    # Create test client (no context manager to skip the lifespan handler)
    test_client = TestClient(app, raise_server_exceptions=False)

    yield test_client
