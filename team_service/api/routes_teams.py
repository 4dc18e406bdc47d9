# team_service/api/routes_teams.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status
from loguru import logger
from sqlalchemy.orm import Session

from team_service.core.errors import (
    BadRequestError,
    ConcurrencyConflictError,
    DuplicateTeamError,
    NotFoundError,
    StoreUnavailableError,
)
from team_service.db.session import get_db
from team_service.deps import get_paging
from team_service.schemas.player import Player
from team_service.schemas.team import Team, TeamDTO
from team_service.services.paging import Page
from team_service.services.teams import (
    add_player_to_team,
    create_team,
    delete_team,
    get_roster,
    get_team,
    list_teams,
    remove_player_from_team,
    replace_team,
)

router = APIRouter(prefix="/teams", tags=["teams"])


# ---------------- TEAMS ----------------
@router.get("", response_model=List[Team])
def list_teams_route(
    sort_order: Optional[str] = Query(
        default=None,
        alias="sortOrder",
        description="name | name_desc | location | location_desc",
    ),
    paging: Page = Depends(get_paging),
    db: Session = Depends(get_db),
):
    try:
        teams = list_teams(db, sort_order=sort_order, page=paging.page, items_per_page=paging.items_per_page)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    return [Team.model_validate(t) for t in teams]


@router.get("/{team_id}", response_model=Team)
def get_team_route(
    team_id: int = Path(..., ge=0),
    db: Session = Depends(get_db),
):
    try:
        team = get_team(db, team_id)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    return Team.model_validate(team)


@router.post("", response_model=Team, status_code=status.HTTP_201_CREATED)
def create_team_route(
    dto: TeamDTO,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    try:
        team = create_team(db, dto)
    except BadRequestError as br:
        raise HTTPException(status_code=400, detail=br.detail)
    except DuplicateTeamError as dup:
        raise HTTPException(status_code=409, detail=dup.detail)
    except StoreUnavailableError as su:
        raise HTTPException(status_code=500, detail=su.detail)

    response.headers["Location"] = str(request.url_for("get_team_route", team_id=team.id))
    return Team.model_validate(team)


@router.put("/{team_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def replace_team_route(
    dto: TeamDTO,
    team_id: int = Path(..., ge=0),
    db: Session = Depends(get_db),
):
    try:
        replace_team(db, team_id, dto)
    except BadRequestError as br:
        raise HTTPException(status_code=400, detail=br.detail)
    except DuplicateTeamError as dup:
        raise HTTPException(status_code=409, detail=dup.detail)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    except ConcurrencyConflictError as cc:
        logger.error("Unrecoverable conflict updating team {}: {}", team_id, cc.detail)
        raise HTTPException(status_code=500, detail=cc.detail)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_team_route(
    team_id: int = Path(..., ge=0),
    db: Session = Depends(get_db),
):
    try:
        delete_team(db, team_id)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    except ConcurrencyConflictError as cc:
        logger.error("Unrecoverable conflict deleting team {}: {}", team_id, cc.detail)
        raise HTTPException(status_code=500, detail=cc.detail)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------------- ROSTER ----------------
@router.get("/{team_id}/players", response_model=List[Player])
def team_roster_route(
    team_id: int = Path(..., ge=0),
    db: Session = Depends(get_db),
):
    """
    Current roster of the team; an empty list when nobody has been added yet.
    """
    try:
        players = get_roster(db, team_id)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    return [Player.model_validate(p) for p in players]


@router.put("/{team_id}/players/{player_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def add_player_route(
    team_id: int = Path(..., ge=0),
    player_id: int = Path(..., ge=0),
    db: Session = Depends(get_db),
):
    try:
        add_player_to_team(db, team_id, player_id)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    except BadRequestError as br:
        raise HTTPException(status_code=400, detail=br.detail)
    except ConcurrencyConflictError as cc:
        logger.error("Unrecoverable conflict adding player {} to team {}: {}", player_id, team_id, cc.detail)
        raise HTTPException(status_code=500, detail=cc.detail)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{team_id}/players/{player_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def remove_player_route(
    team_id: int = Path(..., ge=0),
    player_id: int = Path(..., ge=0),
    db: Session = Depends(get_db),
):
    try:
        remove_player_from_team(db, team_id, player_id)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    except ConcurrencyConflictError as cc:
        logger.error("Unrecoverable conflict removing player {} from team {}: {}", player_id, team_id, cc.detail)
        raise HTTPException(status_code=500, detail=cc.detail)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
