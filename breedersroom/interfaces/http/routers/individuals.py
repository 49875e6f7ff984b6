from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response, status

from breedersroom.application.use_cases.individuals import (
    delete_individual,
    get_individual,
    register_individual,
)
from breedersroom.application.use_cases.pedigree import (
    list_link_history,
    resolve_parents,
    unlink_parent,
)
from breedersroom.infrastructure.auth.context import AuthContext
from breedersroom.interfaces.http.deps import commit_and_dispatch, get_auth_context, get_uow
from breedersroom.interfaces.http.schemas.individuals import (
    IndividualCreate,
    IndividualCreatedResponse,
    IndividualDetailResponse,
    IndividualResponse,
    ParentsResponse,
)
from breedersroom.interfaces.http.schemas.parent_links import ParentLinkResponse

router = APIRouter(prefix="/individuals", tags=["individuals"])


@router.post("", response_model=IndividualCreatedResponse, status_code=status.HTTP_201_CREATED)
async def register_individual_endpoint(
    payload: IndividualCreate,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    result = await register_individual.execute(
        uow,
        context.user_id,
        register_individual.RegisterIndividualInput(
            species=payload.species,
            name=payload.name,
            sex=payload.sex,
            hatched_on=payload.hatched_on,
            father_id=payload.father_id,
            mother_id=payload.mother_id,
            message=payload.message,
        ),
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return IndividualCreatedResponse(
        individual=IndividualResponse.model_validate(result.individual),
        links=[ParentLinkResponse.model_validate(link) for link in result.links],
    )


@router.get("/{individual_id}", response_model=IndividualDetailResponse)
async def get_individual_endpoint(
    individual_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    view = await get_individual.execute(uow, individual_id, context.user_id)
    data = IndividualDetailResponse.model_validate(view.individual)
    data.parents = ParentsResponse.model_validate(view.parents)
    return data


@router.delete("/{individual_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_individual_endpoint(
    individual_id: UUID,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    await delete_individual.execute(uow, context.user_id, individual_id)
    await commit_and_dispatch(uow, request, background_tasks)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{individual_id}/parents", response_model=ParentsResponse)
async def get_parents_endpoint(
    individual_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    resolved = await resolve_parents.execute(uow, individual_id, context.user_id)
    return ParentsResponse.model_validate(resolved)


@router.get("/{individual_id}/parent-links", response_model=list[ParentLinkResponse])
async def list_parent_links_endpoint(
    individual_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    return await list_link_history.execute(uow, context.user_id, individual_id)


@router.delete("/{individual_id}/parents/{role}", response_model=ParentLinkResponse)
async def unlink_parent_endpoint(
    individual_id: UUID,
    role: str,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    link = await unlink_parent.execute(uow, context.user_id, individual_id, role)
    await commit_and_dispatch(uow, request, background_tasks)
    return link
