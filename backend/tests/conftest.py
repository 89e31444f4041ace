"""
Pytest configuration and fixtures
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi import HTTPException

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Point the app at a throwaway SQLite database before it is imported
DB_PATH = Path(tempfile.mkdtemp(prefix="petclinic-tests-")) / "petclinic.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["SEED_DATA"] = "false"

from fastapi.testclient import TestClient

from api.main import app
from core.config import settings
from models import Owner, OwnerPage


@pytest.fixture
def client():
    """Test client on an empty database"""
    if DB_PATH.exists():
        DB_PATH.unlink()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(monkeypatch):
    """Test client on a database holding the sample owners"""
    if DB_PATH.exists():
        DB_PATH.unlink()
    monkeypatch.setattr(settings, "SEED_DATA", True)
    with TestClient(app) as test_client:
        yield test_client


class FakeOwnerStore:
    """In-memory stand-in for OwnerService that records every save."""

    def __init__(self, owners=()):
        self.owners = {}
        self.saved = []
        self.searches = []
        self._next_id = 1
        for owner in owners:
            self._store(owner)

    def _store(self, owner: Owner) -> Owner:
        if owner.id is None:
            owner.id = self._next_id
        self._next_id = max(self._next_id, owner.id + 1)
        self.owners[owner.id] = owner
        return owner

    async def get_owner_by_id(self, owner_id: int) -> Owner:
        if owner_id not in self.owners:
            raise HTTPException(status_code=404, detail="Owner not found")
        return self.owners[owner_id]

    async def find_by_last_name(self, last_name: str, page: int = 1, per_page: int = 5) -> OwnerPage:
        self.searches.append((last_name, page, per_page))
        matches = sorted(
            (owner for owner in self.owners.values() if owner.last_name.startswith(last_name)),
            key=lambda owner: (owner.last_name, owner.first_name, owner.id),
        )
        start = (page - 1) * per_page
        return OwnerPage(
            content=matches[start:start + per_page],
            page=page,
            per_page=per_page,
            total=len(matches),
            total_pages=(len(matches) + per_page - 1) // per_page,
        )

    async def save(self, owner: Owner) -> Owner:
        self.saved.append(owner)
        return self._store(owner)


def make_owner(first_name="George", last_name="Franklin", owner_id=None, **kwargs) -> Owner:
    values = {
        "address": "110 W. Liberty St.",
        "city": "Madison",
        "telephone": "6085551023",
    }
    values.update(kwargs)
    return Owner(id=owner_id, first_name=first_name, last_name=last_name, **values)


@pytest.fixture
def owner_store():
    return FakeOwnerStore()
