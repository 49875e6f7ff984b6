from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status

from breedersroom.application.use_cases.pedigree import decide_link, propose_link
from breedersroom.infrastructure.auth.context import AuthContext
from breedersroom.interfaces.http.deps import commit_and_dispatch, get_auth_context, get_uow
from breedersroom.interfaces.http.schemas.parent_links import (
    ParentLinkCreate,
    ParentLinkDecision,
    ParentLinkResponse,
)

router = APIRouter(prefix="/parent-links", tags=["pedigree"])


@router.post("", response_model=ParentLinkResponse, status_code=status.HTTP_201_CREATED)
async def propose_link_endpoint(
    payload: ParentLinkCreate,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    link = await propose_link.execute(
        uow,
        context.user_id,
        propose_link.ProposeLinkInput(
            child_id=payload.child_id,
            parent_id=payload.parent_id,
            role=payload.role,
            message=payload.message,
        ),
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return link


@router.patch("/{request_id}", response_model=ParentLinkResponse)
async def decide_link_endpoint(
    request_id: UUID,
    payload: ParentLinkDecision,
    background_tasks: BackgroundTasks,
    request: Request,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    link = await decide_link.execute(
        uow,
        context.user_id,
        request_id,
        decide_link.DecideLinkInput(status=payload.status, reject_reason=payload.reject_reason),
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return link
