"""
Shared fixtures for the memorial API tests.
Environment is set before any src import so settings and log handlers pick it up.
"""

import os
import sys
import tempfile

TEST_DIR = tempfile.mkdtemp(prefix="memorial-tests-")
os.environ["LOG_DIR"] = os.path.join(TEST_DIR, "logs")
os.environ["DATA_SOURCE"] = "json"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(TEST_DIR, 'memorial.db')}"
os.environ["REDIS_URL"] = "redis://localhost:1/0"

# Add the project root directory to the path so we can import src
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest  # noqa: E402

from src.core.config import settings  # noqa: E402
from src.schemas.testimony_schemas import Testimony  # noqa: E402
from src.services.testimonies import ContentLoader, MemorialOrchestrator, ImageCatalog  # noqa: E402


def make_testimony(**overrides) -> Testimony:
    """Minimal valid testimony; override any field by name."""
    data = {
        "id": "sample",
        "title": "Sample Title",
        "author": "Sample Author",
        "relationship": "Friend",
        "content": "Sample content",
        "page": 1,
        "category": "friends",
        "tags": [],
    }
    data.update(overrides)
    return Testimony.model_validate(data)


@pytest.fixture(scope="session")
def corpus():
    """The bundled sample corpus."""
    loader = ContentLoader(data_file_path=settings.testimonies_data_file, source="json")
    return loader.load_testimonies_from_file()


@pytest.fixture(scope="session")
def corpus_by_id(corpus):
    return {testimony.id: testimony for testimony in corpus}


@pytest.fixture(scope="session")
def catalog():
    return ImageCatalog()


@pytest.fixture
def orchestrator(corpus):
    return MemorialOrchestrator(corpus)
