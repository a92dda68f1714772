"""
Tests for the MongoDB repository layer against a mocked Motor collection.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError

from employeelist.repositories import BaseRepository, EmployeeRepository


@pytest.fixture
def collection():
    """Create mock Motor collection."""
    mock = MagicMock()
    mock.name = "employees"
    return mock


@pytest.fixture
def repository(collection):
    return EmployeeRepository(collection)


class TestIdentifierSyntax:

    def test_valid(self):
        assert BaseRepository.is_valid_id(str(ObjectId()))

    @pytest.mark.parametrize("value", ["not-an-id", "", "z" * 24, None, 123])
    def test_invalid(self, value):
        assert not BaseRepository.is_valid_id(value)


class TestCreate:

    async def test_assigns_id_and_timestamps(self, repository, collection):
        oid = ObjectId()
        collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=oid))

        created = await repository.create({"name": "Alice"})

        stored = collection.insert_one.await_args.args[0]
        assert stored["name"] == "Alice"
        assert stored["createdAt"] == stored["updatedAt"]
        assert stored["createdAt"].tzinfo is not None
        assert created["id"] == str(oid)
        assert "_id" not in created

    async def test_driver_errors_propagate(self, repository, collection):
        collection.insert_one = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))

        with pytest.raises(ServerSelectionTimeoutError):
            await repository.create({"name": "Alice"})


class TestFind:

    async def test_find_by_id_maps_object_id(self, repository, collection):
        oid = ObjectId()
        collection.find_one = AsyncMock(return_value={"_id": oid, "name": "Alice"})

        document = await repository.find_by_id(str(oid))

        collection.find_one.assert_awaited_once_with({"_id": oid})
        assert document == {"id": str(oid), "name": "Alice"}

    async def test_find_by_id_missing(self, repository, collection):
        collection.find_one = AsyncMock(return_value=None)

        assert await repository.find_by_id(str(ObjectId())) is None

    async def test_newest_first_sort(self, repository, collection):
        oid = ObjectId()
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.to_list = AsyncMock(return_value=[{"_id": oid, "name": "Alice"}])
        collection.find.return_value = cursor

        documents = await repository.find_newest_first()

        collection.find.assert_called_once_with({})
        cursor.sort.assert_called_once_with([("createdAt", DESCENDING), ("_id", DESCENDING)])
        cursor.to_list.assert_awaited_once_with(length=None)
        assert documents == [{"id": str(oid), "name": "Alice"}]


class TestUpdate:

    async def test_set_and_return_after(self, repository, collection):
        oid = ObjectId()
        collection.find_one_and_update = AsyncMock(
            return_value={"_id": oid, "name": "Alice", "position": "Manager"}
        )

        updated = await repository.update(str(oid), {"position": "Manager"})

        args, kwargs = collection.find_one_and_update.await_args
        assert args[0] == {"_id": oid}
        assert args[1]["$set"]["position"] == "Manager"
        assert isinstance(args[1]["$set"]["updatedAt"], datetime)
        assert "name" not in args[1]["$set"]
        assert kwargs["return_document"] == ReturnDocument.AFTER
        assert updated["id"] == str(oid)

    async def test_missing_returns_none(self, repository, collection):
        collection.find_one_and_update = AsyncMock(return_value=None)

        assert await repository.update(str(ObjectId()), {"name": "Bob"}) is None

    async def test_does_not_mutate_input(self, repository, collection):
        collection.find_one_and_update = AsyncMock(return_value=None)
        fields = {"name": "Bob"}

        await repository.update(str(ObjectId()), fields)

        assert fields == {"name": "Bob"}


class TestDelete:

    async def test_delete_existing(self, repository, collection):
        oid = ObjectId()
        collection.find_one_and_delete = AsyncMock(return_value={"_id": oid, "name": "Alice"})

        deleted = await repository.delete(str(oid))

        collection.find_one_and_delete.assert_awaited_once_with({"_id": oid})
        assert deleted["id"] == str(oid)

    async def test_delete_missing(self, repository, collection):
        collection.find_one_and_delete = AsyncMock(return_value=None)

        assert await repository.delete(str(ObjectId())) is None


async def test_ensure_indexes(repository, collection):
    collection.create_index = AsyncMock(return_value="createdAt_-1__id_-1")

    name = await repository.ensure_indexes()

    collection.create_index.assert_awaited_once_with([("createdAt", DESCENDING), ("_id", DESCENDING)])
    assert name == "createdAt_-1__id_-1"


def test_timestamps_are_utc():
    from employeelist.repositories.base_repository import utcnow

    now = utcnow()
    assert now.tzinfo == timezone.utc
    assert now.microsecond % 1000 == 0
