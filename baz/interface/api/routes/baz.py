"""Baz routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Path, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from baz.application.usecase.baz import (
    CountBazUseCase,
    CreateBazRequest,
    CreateBazResponse,
    CreateBazUseCase,
    DeleteBazRequest,
    DeleteBazUseCase,
    GetBazRequest,
    GetBazResponse,
    GetBazUseCase,
    ListBazRequest,
    ListBazResponse,
    ListBazUseCase,
    UpdateBazRequest,
    UpdateBazResponse,
    UpdateBazUseCase,
)
from baz.domain.error import NotFoundError, PersistenceError, ValidationError
from baz.domain.value import MAX_BAZ_ID

router = APIRouter(prefix="/baz", tags=["baz"], route_class=DishkaRoute)

# Ids outside the column range are rejected with 422 before reaching the store
BazIdPath = Annotated[int, Path(ge=1, le=MAX_BAZ_ID)]
IndexPath = Annotated[int, Path(ge=0, le=MAX_BAZ_ID)]


class BazAPIRequest(BaseModel):
    """API request body for creating or updating a Baz."""

    id: int | None = None
    payload: str | None = None


def _persistence_failure(action: str, error: PersistenceError) -> HTTPException:
    logfire.error(
        "Baz {action} failed",
        action=action,
        error=str(error),
        cause=repr(error.__cause__),
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action} baz",
    )


@router.post("", response_model=CreateBazResponse, status_code=status.HTTP_201_CREATED)
async def create_baz(
    request: BazAPIRequest,
    use_case: FromDishka[CreateBazUseCase],
) -> CreateBazResponse:
    """Create a new Baz.

    Any id in the body is ignored; the store assigns one.

    Returns:
        Created Baz with its id
    """
    try:
        return await use_case.execute(CreateBazRequest(payload=request.payload))
    except PersistenceError as e:
        raise _persistence_failure("create", e)


@router.get("", response_model=ListBazResponse)
async def list_baz(use_case: FromDishka[ListBazUseCase]) -> ListBazResponse:
    """List every Baz, ordered by id."""
    try:
        return await use_case.execute(ListBazRequest())
    except PersistenceError as e:
        raise _persistence_failure("list", e)


# Declared before /{baz_id} so "count" is never parsed as an id
@router.get("/count", response_class=PlainTextResponse)
async def count_baz(use_case: FromDishka[CountBazUseCase]) -> str:
    """Number of stored Baz, as plain text.

    Example:
        GET /baz/count  ->  "3"
    """
    try:
        result = await use_case.execute()
    except PersistenceError as e:
        raise _persistence_failure("count", e)
    return str(result.count)


@router.get("/{baz_id}", response_model=GetBazResponse)
async def get_baz(
    baz_id: BazIdPath,
    use_case: FromDishka[GetBazUseCase],
) -> GetBazResponse:
    """Get a Baz by id.

    Raises:
        HTTPException: 404 if no Baz has this id
    """
    try:
        baz = await use_case.execute(GetBazRequest(baz_id=baz_id))
    except PersistenceError as e:
        raise _persistence_failure("load", e)

    if baz is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Baz {baz_id} not found",
        )
    return baz


@router.put("/{baz_id}", response_model=UpdateBazResponse)
async def update_baz(
    baz_id: BazIdPath,
    request: BazAPIRequest,
    use_case: FromDishka[UpdateBazUseCase],
) -> UpdateBazResponse:
    """Replace a Baz's payload.

    The path id addresses the record. A body id, when present, must match it.

    Raises:
        HTTPException: 400 on id mismatch, 404 if no Baz has this id
    """
    try:
        return await use_case.execute(
            UpdateBazRequest(baz_id=baz_id, body_id=request.id, payload=request.payload)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError as e:
        raise _persistence_failure("update", e)


@router.delete("/{baz_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_baz(
    baz_id: BazIdPath,
    use_case: FromDishka[DeleteBazUseCase],
) -> None:
    """Delete a Baz by id.

    Raises:
        HTTPException: 404 if no Baz has this id
    """
    try:
        await use_case.execute(DeleteBazRequest(baz_id=baz_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError as e:
        raise _persistence_failure("delete", e)


@router.get("/{from_index}/{to_index}", response_model=ListBazResponse)
async def list_baz_range(
    from_index: IndexPath, to_index: IndexPath
) -> ListBazResponse:
    """Range listing over HTTP is deliberately not offered.

    Raises:
        HTTPException: Always 501
    """
    logfire.info("Baz range requested", from_index=from_index, to_index=to_index)
    raise HTTPException(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        detail="Listing Baz by range is not supported",
    )
