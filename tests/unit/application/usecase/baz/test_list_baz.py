"""Unit tests for ListBazUseCase and CountBazUseCase."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from baz.application.usecase.baz import (
    CountBazUseCase,
    CreateBazRequest,
    CreateBazUseCase,
    ListBazRequest,
    ListBazUseCase,
)
from baz.domain.error import ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create_many(env, payloads):
    create = await env.get(CreateBazUseCase)
    for payload in payloads:
        await create.execute(CreateBazRequest(payload=payload))


class TestListBazRequest:
    def test_no_bounds_is_valid(self):
        request = ListBazRequest()
        assert request.from_index is None
        assert request.to_index is None

    def test_single_bound_is_rejected(self):
        with pytest.raises(PydanticValidationError, match="both"):
            ListBazRequest(from_index=1)

    def test_negative_bound_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            ListBazRequest(from_index=-1, to_index=2)


class TestListBazUseCase:
    @pytest.mark.asyncio
    async def test_list_all(self, unit_env):
        await _create_many(unit_env, ["a", "b", "c"])
        use_case = await unit_env.get(ListBazUseCase)

        result = await use_case.execute(ListBazRequest())

        assert [item.payload for item in result.items] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_list_range(self, unit_env):
        await _create_many(unit_env, ["a", "b", "c", "d"])
        use_case = await unit_env.get(ListBazUseCase)

        result = await use_case.execute(ListBazRequest(from_index=1, to_index=2))

        assert [item.payload for item in result.items] == ["b", "c"]

    @pytest.mark.asyncio
    async def test_reversed_range_raises(self, unit_env):
        use_case = await unit_env.get(ListBazUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListBazRequest(from_index=3, to_index=1))


class TestCountBazUseCase:
    @pytest.mark.asyncio
    async def test_count_matches_list(self, unit_env):
        await _create_many(unit_env, ["a", "b"])
        count = await unit_env.get(CountBazUseCase)
        listing = await unit_env.get(ListBazUseCase)

        result = await count.execute()

        assert result.count == 2
        assert result.count == len((await listing.execute(ListBazRequest())).items)
