"""
Pytest configuration and shared fixtures.
"""

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from app.api import create_app
from app.settings import Settings
from app.storage import MemStorage


@pytest.fixture
def heart_failure_problem() -> Dict[str, Any]:
    """Clinical problem with only a description."""
    return {"description": "heart failure readmission cardiology"}


@pytest.fixture
def two_researchers() -> List[Dict[str, Any]]:
    """One overlapping and one unrelated researcher."""
    return [
        {"id": "A", "description": "cardiology heart failure readmission protocols", "keywords": []},
        {"id": "B", "description": "oncology immunotherapy clinical trials", "keywords": []},
    ]


@pytest.fixture
def five_researchers() -> List[Dict[str, Any]]:
    return [
        {"id": "r1", "description": "Pulmonary rehabilitation for COPD patients", "keywords": ["copd"]},
        {"id": "r2", "description": "Reducing heart failure readmission after discharge", "keywords": ["heart failure", "cardiology"]},
        {"id": "r3", "description": "Diabetes medication adherence", "keywords": ["diabetes"]},
        {"id": "r4", "description": "Remote monitoring of cardiac patients", "keywords": ["cardiology"]},
        {"id": "r5", "description": "Falls prevention in older adults", "keywords": ["geriatrics"]},
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", top_n=5, seed_researchers=False, log_level="WARNING")


@pytest.fixture
def mem_storage() -> MemStorage:
    return MemStorage(seed=False)


@pytest.fixture
def client(settings, mem_storage) -> TestClient:
    return TestClient(create_app(settings=settings, storage=mem_storage))
