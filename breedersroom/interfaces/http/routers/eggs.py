from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status

from breedersroom.application.use_cases.breeding import hatch_egg, update_egg
from breedersroom.infrastructure.auth.context import AuthContext
from breedersroom.interfaces.http.deps import commit_and_dispatch, get_auth_context, get_uow
from breedersroom.interfaces.http.schemas.breeding import (
    EggResponse,
    EggUpdate,
    HatchRequest,
    HatchResponse,
)
from breedersroom.interfaces.http.schemas.individuals import IndividualResponse
from breedersroom.interfaces.http.schemas.parent_links import ParentLinkResponse

router = APIRouter(prefix="/eggs", tags=["breeding"])


@router.patch("/{egg_id}", response_model=EggResponse)
async def update_egg_endpoint(
    egg_id: UUID,
    payload: EggUpdate,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    egg = await update_egg.execute(
        uow,
        context.user_id,
        egg_id,
        update_egg.UpdateEggInput(status=payload.status, temperature=payload.temperature),
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return egg


@router.post("/{egg_id}/hatch", response_model=HatchResponse, status_code=status.HTTP_201_CREATED)
async def hatch_egg_endpoint(
    egg_id: UUID,
    payload: HatchRequest,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    result = await hatch_egg.execute(
        uow,
        context.user_id,
        egg_id,
        hatch_egg.HatchEggInput(hatched_on=payload.hatched_on, name=payload.name, sex=payload.sex),
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return HatchResponse(
        egg=EggResponse.model_validate(result.egg),
        individual=IndividualResponse.model_validate(result.individual),
        links=[ParentLinkResponse.model_validate(link) for link in result.links],
    )
