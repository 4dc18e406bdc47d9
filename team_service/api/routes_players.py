# team_service/api/routes_players.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status
from loguru import logger
from sqlalchemy.orm import Session

from team_service.core.errors import (
    BadRequestError,
    ConcurrencyConflictError,
    NotFoundError,
    StoreUnavailableError,
)
from team_service.db.session import get_db
from team_service.deps import get_paging
from team_service.schemas.player import Player, PlayerIn
from team_service.services.paging import Page
from team_service.services.players import (
    create_player,
    delete_player,
    get_player,
    list_players,
    replace_player,
)

router = APIRouter(prefix="/players", tags=["players"])


@router.get("", response_model=List[Player])
def list_players_route(
    last_name: Optional[str] = Query(default=None, alias="lastName", description="Exact, case-sensitive last name"),
    paging: Page = Depends(get_paging),
    db: Session = Depends(get_db),
):
    """
    One page of players, optionally only those with the given last name.
    """
    try:
        players = list_players(db, last_name=last_name, page=paging.page, items_per_page=paging.items_per_page)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    return [Player.model_validate(p) for p in players]


@router.get("/{player_id}", response_model=Player)
def get_player_route(
    player_id: int = Path(..., ge=0),
    db: Session = Depends(get_db),
):
    try:
        player = get_player(db, player_id)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    return Player.model_validate(player)


@router.post("", response_model=Player, status_code=status.HTTP_201_CREATED)
def create_player_route(
    payload: PlayerIn,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    try:
        player = create_player(db, payload)
    except BadRequestError as br:
        raise HTTPException(status_code=400, detail=br.detail)
    except StoreUnavailableError as su:
        raise HTTPException(status_code=500, detail=su.detail)

    response.headers["Location"] = str(request.url_for("get_player_route", player_id=player.id))
    return Player.model_validate(player)


@router.put("/{player_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def replace_player_route(
    payload: PlayerIn,
    player_id: int = Path(..., ge=0),
    db: Session = Depends(get_db),
):
    try:
        replace_player(db, player_id, payload)
    except BadRequestError as br:
        raise HTTPException(status_code=400, detail=br.detail)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    except ConcurrencyConflictError as cc:
        logger.error("Unrecoverable conflict updating player {}: {}", player_id, cc.detail)
        raise HTTPException(status_code=500, detail=cc.detail)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_player_route(
    player_id: int = Path(..., ge=0),
    db: Session = Depends(get_db),
):
    try:
        delete_player(db, player_id)
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=nf.detail)
    except ConcurrencyConflictError as cc:
        logger.error("Unrecoverable conflict deleting player {}: {}", player_id, cc.detail)
        raise HTTPException(status_code=500, detail=cc.detail)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
