"""Unit tests for UpdateBazUseCase."""

import pytest

from baz.application.usecase.baz import (
    CreateBazRequest,
    CreateBazUseCase,
    UpdateBazRequest,
    UpdateBazUseCase,
)
from baz.domain.error import NotFoundError, ValidationError
from baz.domain.repository import BazRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateBazUseCase:
    """Tests for UpdateBazUseCase."""

    @pytest.mark.asyncio
    async def test_update_payload_success(self, unit_env):
        """Updating an existing Baz replaces its payload."""
        # Arrange
        create = await unit_env.get(CreateBazUseCase)
        use_case = await unit_env.get(UpdateBazUseCase)
        created = await create.execute(CreateBazRequest(payload="hello"))

        # Act
        result = await use_case.execute(
            UpdateBazRequest(baz_id=created.id, payload="world")
        )

        # Assert
        assert result.id == created.id
        assert result.payload == "world"

    @pytest.mark.asyncio
    async def test_matching_body_id_is_accepted(self, unit_env):
        create = await unit_env.get(CreateBazUseCase)
        use_case = await unit_env.get(UpdateBazUseCase)
        created = await create.execute(CreateBazRequest(payload="hello"))

        result = await use_case.execute(
            UpdateBazRequest(baz_id=created.id, body_id=created.id, payload="same")
        )

        assert result.payload == "same"

    @pytest.mark.asyncio
    async def test_mismatched_body_id_is_rejected(self, unit_env):
        """A body id that contradicts the addressed id changes nothing."""
        # Arrange
        create = await unit_env.get(CreateBazUseCase)
        use_case = await unit_env.get(UpdateBazUseCase)
        baz_repo = await unit_env.get(BazRepository)
        created = await create.execute(CreateBazRequest(payload="hello"))

        # Act & Assert
        with pytest.raises(ValidationError, match="does not match"):
            await use_case.execute(
                UpdateBazRequest(baz_id=created.id, body_id=created.id + 1, payload="x")
            )

        assert (await baz_repo.find(created.id)).payload == "hello"

    @pytest.mark.asyncio
    async def test_update_missing_baz_raises(self, unit_env):
        use_case = await unit_env.get(UpdateBazUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(UpdateBazRequest(baz_id=404, payload="x"))
