from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response, status

from breedersroom.application.use_cases.breeding import (
    delete_mating,
    get_mating,
    list_matings,
    record_mating,
    update_mating,
)
from breedersroom.application.use_cases.breeding.views import ClutchView, MatingView
from breedersroom.config.settings import Settings
from breedersroom.infrastructure.auth.context import AuthContext
from breedersroom.interfaces.http.deps import (
    commit_and_dispatch,
    get_app_settings,
    get_auth_context,
    get_uow,
)
from breedersroom.interfaces.http.schemas.breeding import (
    ClutchResponse,
    EggResponse,
    MatingCreate,
    MatingListResponse,
    MatingResponse,
)
from breedersroom.interfaces.http.schemas.individuals import IndividualSummary

router = APIRouter(prefix="/matings", tags=["breeding"])


def clutch_response(view: ClutchView) -> ClutchResponse:
    data = ClutchResponse.model_validate(view.clutch)
    data.eggs = [EggResponse.model_validate(egg) for egg in view.eggs]
    return data


def mating_response(view: MatingView) -> MatingResponse:
    data = MatingResponse.model_validate(view.mating)
    if view.father is not None:
        data.father = IndividualSummary.model_validate(view.father)
    if view.mother is not None:
        data.mother = IndividualSummary.model_validate(view.mother)
    data.clutches = [clutch_response(c) for c in view.clutches]
    return data


@router.post("", response_model=MatingResponse, status_code=status.HTTP_201_CREATED)
async def record_mating_endpoint(
    payload: MatingCreate,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    mating = await record_mating.execute(
        uow,
        context.user_id,
        record_mating.MatingInput(
            mated_on=payload.mated_on,
            father_id=payload.father_id,
            mother_id=payload.mother_id,
        ),
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return mating_response(MatingView(mating=mating))


@router.get("", response_model=MatingListResponse)
async def list_matings_endpoint(
    father_id: UUID | None = None,
    mother_id: UUID | None = None,
    species: str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    limit: int | None = None,
    offset: int = 0,
    context: AuthContext = Depends(get_auth_context),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    limit = settings.clamp_limit(limit)
    result = await list_matings.execute(
        uow,
        context.user_id,
        father_id=father_id,
        mother_id=mother_id,
        species=species,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
        offset=max(offset, 0),
    )
    return MatingListResponse(
        items=[mating_response(view) for view in result.items],
        total=result.total,
        limit=limit,
        offset=result.offset,
    )


@router.get("/{mating_id}", response_model=MatingResponse)
async def get_mating_endpoint(
    mating_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    view = await get_mating.execute(uow, context.user_id, mating_id)
    return mating_response(view)


@router.put("/{mating_id}", response_model=MatingResponse)
async def update_mating_endpoint(
    mating_id: UUID,
    payload: MatingCreate,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    await update_mating.execute(
        uow,
        context.user_id,
        mating_id,
        record_mating.MatingInput(
            mated_on=payload.mated_on,
            father_id=payload.father_id,
            mother_id=payload.mother_id,
        ),
    )
    view = await get_mating.execute(uow, context.user_id, mating_id)
    await commit_and_dispatch(uow, request, background_tasks)
    return mating_response(view)


@router.delete("/{mating_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_mating_endpoint(
    mating_id: UUID,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    await delete_mating.execute(uow, context.user_id, mating_id)
    await commit_and_dispatch(uow, request, background_tasks)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
