"""
Pytest fixtures for doctor query service tests
"""

import os
import tempfile

# Keep test runs from writing into the project's logging/ directory
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="doctor-query-logs-"))

import pytest
from typing import Any, Dict, List
from fastapi.testclient import TestClient

from main import app
from config import BACKEND_BASE_URL


@pytest.fixture
def client():
    """Test client for the FastAPI app"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def backend_url():
    """Builds the outbound backend URL for a category"""
    def _url(category: str) -> str:
        return f"{BACKEND_BASE_URL.rstrip('/')}/{category}"
    return _url


@pytest.fixture
def surgery_doctors() -> List[Dict[str, Any]]:
    """Sample backend payload for the surgery category"""
    return [
        {
            "name": "thomas collins",
            "hospital": "grand oak community hospital",
            "category": "surgery",
            "availability": "9.00 a.m - 11.00 a.m",
            "fee": 7000.0,
        },
        {
            "name": "henry parker",
            "hospital": "grand oak community hospital",
            "category": "surgery",
            "availability": "9.00 a.m - 11.00 a.m",
            "fee": 4500.0,
        },
        {
            "name": "anne clement",
            "hospital": "clemency medical center",
            "category": "surgery",
            "availability": "8.00 a.m - 10.00 a.m",
            "fee": 12000.5,
        },
    ]
