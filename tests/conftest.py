"""
Test configuration and fixtures for pytest.

The API is exercised through FastAPI's TestClient with the repository
dependency replaced by an in-memory fake, so no MongoDB server is needed.
The client is not entered as a context manager: the lifespan (which
would connect to MongoDB) does not run.
"""
import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
import bson
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from employeelist.config import Settings
from employeelist.main import create_app
from employeelist.repositories import EmployeeRepository
from employeelist.services import EmployeeService
from employeelist.utils.dependencies import get_database, get_employee_repository


class FakeEmployeeRepository(EmployeeRepository):
    """In-memory stand-in for the MongoDB employee repository."""

    def __init__(self):
        super().__init__(collection=None)
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.calls: List[str] = []
        self.fail = False
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise ServerSelectionTimeoutError("connection refused")

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        self._record("create")
        now = self._tick()
        doc_id = str(ObjectId())
        stored = {**document, "id": doc_id, "createdAt": now, "updatedAt": now}
        # Same encoding limits as a real insert (e.g. 8-byte integers)
        bson.encode(stored)
        self.documents[doc_id] = stored
        return copy.deepcopy(stored)

    async def find_by_id(self, doc_id: str) -> Optional[Dict[str, Any]]:
        self._record("find_by_id")
        document = self.documents.get(doc_id)
        return copy.deepcopy(document) if document else None

    async def find_newest_first(self) -> List[Dict[str, Any]]:
        self._record("find_newest_first")
        ordered = sorted(
            self.documents.values(),
            key=lambda d: (d["createdAt"], d["id"]),
            reverse=True
        )
        return copy.deepcopy(ordered)

    async def update(self, doc_id: str, update_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._record("update")
        bson.encode({"$set": update_data})
        document = self.documents.get(doc_id)
        if document is None:
            return None
        document.update(update_data)
        document["updatedAt"] = self._tick()
        return copy.deepcopy(document)

    async def delete(self, doc_id: str) -> Optional[Dict[str, Any]]:
        self._record("delete")
        return self.documents.pop(doc_id, None)


class FakeDatabase:
    """Database handle whose ping result is fixed."""

    def __init__(self, reachable: bool = True):
        self.reachable = reachable

    async def ping(self) -> bool:
        return self.reachable


@pytest.fixture
def repo():
    return FakeEmployeeRepository()


@pytest.fixture
def service(repo):
    return EmployeeService(repo)


@pytest.fixture
def static_dir(tmp_path):
    """A minimal frontend build."""
    (tmp_path / "index.html").write_text("<html><body>employee list</body></html>")
    (tmp_path / "main.js").write_text("console.log('app');")
    return tmp_path


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def app(repo, fake_db, static_dir):
    application = create_app(Settings(STATIC_DIR=str(static_dir)))
    application.dependency_overrides[get_employee_repository] = lambda: repo
    application.dependency_overrides[get_database] = lambda: fake_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """HTTP client for API testing."""
    return TestClient(app)


@pytest.fixture
def missing_id():
    """Well-formed identifier that matches no record."""
    return str(ObjectId())
