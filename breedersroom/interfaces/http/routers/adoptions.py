from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, Response, status

from breedersroom.application.use_cases.adoptions import (
    create_adoption,
    delete_adoption,
    list_adoptions,
    update_adoption,
)
from breedersroom.application.use_cases.adoptions.rules import load_owned_adoption
from breedersroom.config.settings import Settings
from breedersroom.infrastructure.auth.context import AuthContext
from breedersroom.interfaces.http.deps import (
    commit_and_dispatch,
    get_app_settings,
    get_auth_context,
    get_uow,
)
from breedersroom.interfaces.http.schemas.adoptions import (
    AdoptionCreate,
    AdoptionListResponse,
    AdoptionResponse,
    AdoptionUpdate,
)

router = APIRouter(prefix="/adoptions", tags=["adoptions"])


@router.post("", response_model=AdoptionResponse, status_code=status.HTTP_201_CREATED)
async def create_adoption_endpoint(
    payload: AdoptionCreate,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    adoption = await create_adoption.execute(
        uow,
        context.user_id,
        create_adoption.CreateAdoptionInput(**payload.model_dump()),
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return adoption


@router.get("", response_model=AdoptionListResponse)
async def list_adoptions_endpoint(
    status_filter: str | None = Query(None, alias="status"),
    limit: int | None = None,
    offset: int = 0,
    context: AuthContext = Depends(get_auth_context),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    limit = settings.clamp_limit(limit)
    result = await list_adoptions.execute(
        uow, context.user_id, status=status_filter, limit=limit, offset=max(offset, 0)
    )
    return {
        "items": result.items,
        "total": result.total,
        "limit": limit,
        "offset": result.offset,
    }


@router.get("/{adoption_id}", response_model=AdoptionResponse)
async def get_adoption_endpoint(
    adoption_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    return await load_owned_adoption(uow, context.user_id, adoption_id)


@router.patch("/{adoption_id}", response_model=AdoptionResponse)
async def update_adoption_endpoint(
    adoption_id: UUID,
    payload: AdoptionUpdate,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    adoption = await update_adoption.execute(
        uow,
        context.user_id,
        adoption_id,
        update_adoption.UpdateAdoptionInput(
            **payload.model_dump(),
            provided=frozenset(payload.model_fields_set),
        ),
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return adoption


@router.delete("/{adoption_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_adoption_endpoint(
    adoption_id: UUID,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    await delete_adoption.execute(uow, context.user_id, adoption_id)
    await commit_and_dispatch(uow, request, background_tasks)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
