"""Unit tests for BazService."""

import pytest

from baz.domain.error import NotFoundError, ValidationError
from baz.domain.repository import BazRepository
from baz.domain.service import BazService
from baz.domain.value import BazId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, in-memory repository
unit_env = create_env_fixture()


class TestBazLifecycle:
    """The full create, read, edit, remove cycle."""

    @pytest.mark.asyncio
    async def test_lifecycle_scenario(self, unit_env):
        """Create, update and delete should each be visible to later reads."""
        # Arrange
        baz_service = await unit_env.get(BazService)
        count_before = await baz_service.count_baz()

        # Act & Assert - create assigns the first id
        created = await baz_service.create_baz("hello")
        assert created.id == 1
        assert (await baz_service.get_baz_by_id(BazId(1))).payload == "hello"

        # Edit is reflected on the next read
        await baz_service.update_baz(BazId(1), "world")
        assert (await baz_service.get_baz_by_id(BazId(1))).payload == "world"

        # Remove makes the record unreadable and count drops
        count_with = await baz_service.count_baz()
        await baz_service.delete_baz(BazId(1))
        assert await baz_service.get_baz_by_id(BazId(1)) is None
        assert await baz_service.count_baz() == count_with - 1 == count_before


class TestCreateBaz:
    @pytest.mark.asyncio
    async def test_create_assigns_distinct_ids(self, unit_env):
        baz_service = await unit_env.get(BazService)

        first = await baz_service.create_baz("a")
        second = await baz_service.create_baz("a")

        assert first.id is not None
        assert second.id is not None
        assert first != second

    @pytest.mark.asyncio
    async def test_create_accepts_null_payload(self, unit_env):
        baz_service = await unit_env.get(BazService)

        created = await baz_service.create_baz(None)

        found = await baz_service.get_baz_by_id(BazId(created.id))
        assert found == created
        assert found.payload is None


class TestUpdateBaz:
    @pytest.mark.asyncio
    async def test_update_unknown_id_raises(self, unit_env):
        baz_service = await unit_env.get(BazService)

        with pytest.raises(NotFoundError):
            await baz_service.update_baz(BazId(99), "nope")

    @pytest.mark.asyncio
    async def test_update_does_not_touch_other_records(self, unit_env):
        baz_service = await unit_env.get(BazService)
        first = await baz_service.create_baz("first")
        second = await baz_service.create_baz("second")

        await baz_service.update_baz(BazId(first.id), "changed")

        assert (await baz_service.get_baz_by_id(BazId(second.id))).payload == "second"


class TestDeleteBaz:
    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, unit_env):
        baz_service = await unit_env.get(BazService)

        with pytest.raises(NotFoundError, match="Baz not found: 42"):
            await baz_service.delete_baz(BazId(42))

    @pytest.mark.asyncio
    async def test_delete_twice_raises_second_time(self, unit_env):
        baz_service = await unit_env.get(BazService)
        created = await baz_service.create_baz("x")

        await baz_service.delete_baz(BazId(created.id))

        with pytest.raises(NotFoundError):
            await baz_service.delete_baz(BazId(created.id))


class TestListBaz:
    @pytest.mark.asyncio
    async def test_list_is_ordered_by_id_and_matches_count(self, unit_env):
        baz_service = await unit_env.get(BazService)
        for payload in ("c", "a", "b"):
            await baz_service.create_baz(payload)

        items = await baz_service.list_baz()

        assert [baz.id for baz in items] == [1, 2, 3]
        assert [baz.payload for baz in items] == ["c", "a", "b"]
        assert len(items) == await baz_service.count_baz()

    @pytest.mark.asyncio
    async def test_list_range_is_inclusive(self, unit_env):
        baz_service = await unit_env.get(BazService)
        for i in range(5):
            await baz_service.create_baz(f"item-{i}")

        items = await baz_service.list_baz_range(1, 3)

        assert [baz.payload for baz in items] == ["item-1", "item-2", "item-3"]

    @pytest.mark.asyncio
    async def test_list_range_invalid_bounds_raise(self, unit_env):
        baz_service = await unit_env.get(BazService)

        with pytest.raises(ValidationError):
            await baz_service.list_baz_range(3, 1)

    @pytest.mark.asyncio
    async def test_service_uses_container_repository(self, unit_env):
        """Service and repository resolved from one container share state."""
        baz_service = await unit_env.get(BazService)
        baz_repo = await unit_env.get(BazRepository)

        await baz_service.create_baz("shared")

        assert await baz_repo.count() == 1
