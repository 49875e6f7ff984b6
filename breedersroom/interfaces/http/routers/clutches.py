from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response, status

from breedersroom.application.use_cases.breeding import (
    create_clutch,
    delete_clutch,
    get_clutch,
    update_clutch_date,
)
from breedersroom.infrastructure.auth.context import AuthContext
from breedersroom.interfaces.http.deps import commit_and_dispatch, get_auth_context, get_uow
from breedersroom.interfaces.http.routers.matings import clutch_response
from breedersroom.interfaces.http.schemas.breeding import (
    ClutchCreate,
    ClutchDateUpdate,
    ClutchResponse,
)

router = APIRouter(prefix="/clutches", tags=["breeding"])


@router.post("", response_model=ClutchResponse, status_code=status.HTTP_201_CREATED)
async def create_clutch_endpoint(
    payload: ClutchCreate,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    view = await create_clutch.execute(
        uow,
        context.user_id,
        create_clutch.CreateClutchInput(
            mating_id=payload.mating_id,
            laid_on=payload.laid_on,
            clutch_order=payload.clutch_order,
            egg_count=payload.egg_count,
            temperature=payload.temperature,
            eggs=[
                create_clutch.EggSeed(status=e.status, temperature=e.temperature, name=e.name)
                for e in payload.eggs
            ],
        ),
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return clutch_response(view)


@router.get("/{clutch_id}", response_model=ClutchResponse)
async def get_clutch_endpoint(
    clutch_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    view = await get_clutch.execute(uow, context.user_id, clutch_id)
    return clutch_response(view)


@router.patch("/{clutch_id}", response_model=ClutchResponse)
async def update_clutch_date_endpoint(
    clutch_id: UUID,
    payload: ClutchDateUpdate,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    await update_clutch_date.execute(uow, context.user_id, clutch_id, payload.laid_on)
    view = await get_clutch.execute(uow, context.user_id, clutch_id)
    await commit_and_dispatch(uow, request, background_tasks)
    return clutch_response(view)


@router.delete("/{clutch_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_clutch_endpoint(
    clutch_id: UUID,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    await delete_clutch.execute(uow, context.user_id, clutch_id)
    await commit_and_dispatch(uow, request, background_tasks)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
