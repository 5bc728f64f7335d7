"""Tests for the in-memory repositories."""

import pytest
from bson import ObjectId

from tasklists.domain.shared.errors import BadUserInputError
from tasklists.infrastructure.persistence.in_memory import (
    InMemoryTaskListRepository,
    InMemoryUserRepository,
)

CREATED_AT = "2024-05-01T12:30:00.000Z"


class TestInMemoryUserRepository:
    @pytest.fixture
    def repository(self):
        return InMemoryUserRepository()

    @pytest.mark.asyncio
    async def test_create_generates_id(self, repository):
        user = await repository.create("Ada", "ada@example.com", "hash")

        assert ObjectId.is_valid(user.id)
        assert user.name == "Ada"
        assert user.password_hash == "hash"
        assert repository.count() == 1

    @pytest.mark.asyncio
    async def test_get(self, repository):
        user = await repository.create("Ada", "ada@example.com", "hash", avatar="a.png")

        found = await repository.get(user.id)

        assert found == user

    @pytest.mark.asyncio
    async def test_get_unknown_and_malformed(self, repository):
        assert await repository.get(str(ObjectId())) is None
        assert await repository.get("not-an-id") is None

    @pytest.mark.asyncio
    async def test_find_by_email_returns_first_match(self, repository):
        first = await repository.create("Ada", "dup@example.com", "h1")
        await repository.create("Bob", "dup@example.com", "h2")

        found = await repository.find_by_email("dup@example.com")

        assert found.id == first.id
        assert repository.count() == 2

    @pytest.mark.asyncio
    async def test_find_by_email_missing(self, repository):
        assert await repository.find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_clear(self, repository):
        await repository.create("Ada", "ada@example.com", "hash")

        repository.clear()

        assert repository.count() == 0


class TestInMemoryTaskListRepository:
    @pytest.fixture
    def repository(self):
        return InMemoryTaskListRepository()

    @pytest.fixture
    def member(self):
        return str(ObjectId())

    @pytest.mark.asyncio
    async def test_create_and_get(self, repository, member):
        created = await repository.create("Groceries", CREATED_AT, [member])

        found = await repository.get(created.id)

        assert found == created
        assert found.user_ids == [member]
        assert found.created_at == CREATED_AT

    @pytest.mark.asyncio
    async def test_list_for_member(self, repository, member):
        other = str(ObjectId())
        mine = await repository.create("Mine", CREATED_AT, [member])
        await repository.create("Theirs", CREATED_AT, [other])

        lists = await repository.list_for_member(member)

        assert [task_list.id for task_list in lists] == [mine.id]

    @pytest.mark.asyncio
    async def test_update_title(self, repository, member):
        created = await repository.create("Old", CREATED_AT, [member])

        updated = await repository.update_title(created.id, "New")

        assert updated.title == "New"
        assert updated.created_at == CREATED_AT
        assert (await repository.get(created.id)).title == "New"

    @pytest.mark.asyncio
    async def test_update_missing(self, repository):
        assert await repository.update_title(str(ObjectId()), "New") is None
        assert await repository.update_title("bad", "New") is None

    @pytest.mark.asyncio
    async def test_delete_true_then_false(self, repository, member):
        created = await repository.create("Groceries", CREATED_AT, [member])

        assert await repository.delete(created.id) is True
        assert await repository.delete(created.id) is False
        assert await repository.get(created.id) is None

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, repository):
        assert await repository.delete("bad") is False

    @pytest.mark.asyncio
    async def test_add_member_is_idempotent(self, repository, member):
        created = await repository.create("Groceries", CREATED_AT, [member])
        newcomer = str(ObjectId())

        once = await repository.add_member(created.id, newcomer)
        twice = await repository.add_member(created.id, newcomer)

        assert once.user_ids == [member, newcomer]
        assert twice.user_ids == [member, newcomer]

    @pytest.mark.asyncio
    async def test_add_member_missing_list(self, repository):
        assert await repository.add_member(str(ObjectId()), str(ObjectId())) is None

    @pytest.mark.asyncio
    async def test_add_member_malformed_user(self, repository, member):
        created = await repository.create("Groceries", CREATED_AT, [member])

        with pytest.raises(BadUserInputError):
            await repository.add_member(created.id, "bad")

    @pytest.mark.asyncio
    async def test_returned_entities_are_snapshots(self, repository, member):
        created = await repository.create("Groceries", CREATED_AT, [member])

        await repository.add_member(created.id, str(ObjectId()))

        assert created.user_ids == [member]
