# team_service/services/players.py
from __future__ import annotations

from typing import List, Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from team_service.core.errors import BadRequestError, ConcurrencyConflictError, NotFoundError
from team_service.db.models import Player
from team_service.db.unit_of_work import SaveResult, save_changes, store_guard
from team_service.schemas.player import PlayerIn
from team_service.services.paging import Page
from team_service.services.validation import invalid_player


def player_exists(db: Session, player_id: int) -> bool:
    return db.scalar(select(Player.id).where(Player.id == player_id)) is not None


def list_players(
    db: Session,
    last_name: Optional[str] = None,
    page: int = 1,
    items_per_page: int = 10,
) -> List[Player]:
    """
    One page of players in storage order.
    `last_name`, when given, is an exact case-sensitive match applied before paging.
    """
    p = Page.clamped(page, items_per_page)
    stmt = select(Player)
    if last_name:
        stmt = stmt.where(Player.last_name == last_name)
    stmt = stmt.offset(p.offset).limit(p.limit)

    with store_guard("Players"):
        return list(db.scalars(stmt))


def get_player(db: Session, player_id: int) -> Player:
    with store_guard("Players"):
        player = db.get(Player, player_id)
    if player is None:
        raise NotFoundError(f"Player {player_id} does not exist.")
    return player


def create_player(db: Session, payload: PlayerIn) -> Player:
    if invalid_player(payload):
        raise BadRequestError("First name and last name are required.")

    player = Player(first_name=payload.first_name, last_name=payload.last_name)
    with store_guard("Players"):
        db.add(player)
        save_changes(db)

    logger.info("Created player {} ({} {})", player.id, player.first_name, player.last_name)
    return player


def replace_player(db: Session, player_id: int, payload: PlayerIn) -> None:
    """Full replace of the name fields. Roster membership is left alone."""
    if payload.id != player_id:
        raise BadRequestError("Path id does not match the player id.")
    if invalid_player(payload):
        raise BadRequestError("First name and last name are required.")

    with store_guard("Players"):
        player = db.get(Player, player_id)
        if player is None:
            raise NotFoundError(f"Player {player_id} does not exist.")

        player.first_name = payload.first_name
        player.last_name = payload.last_name
        _save_or_raise(db, player_id)

    logger.info("Replaced player {}", player_id)


def delete_player(db: Session, player_id: int) -> None:
    """Deleting a player also takes them off whatever roster they were on."""
    player = get_player(db, player_id)
    team_id = player.team_id
    with store_guard("Players"):
        db.delete(player)
        _save_or_raise(db, player_id)

    if team_id is not None:
        logger.info("Deleted player {} (removed from team {})", player_id, team_id)
    else:
        logger.info("Deleted player {}", player_id)


def _save_or_raise(db: Session, player_id: int) -> None:
    if save_changes(db) is SaveResult.CONFLICT:
        if not player_exists(db, player_id):
            raise NotFoundError(f"Player {player_id} does not exist.")
        raise ConcurrencyConflictError(f"Player {player_id} was modified by another request.")
