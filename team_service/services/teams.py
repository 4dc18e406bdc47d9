# team_service/services/teams.py
from __future__ import annotations

from typing import List, Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from team_service.core.config import settings
from team_service.core.errors import (
    BadRequestError,
    ConcurrencyConflictError,
    DuplicateTeamError,
    NotFoundError,
)
from team_service.db.models import Player, Team
from team_service.db.unit_of_work import SaveResult, save_changes, store_guard
from team_service.schemas.team import TeamDTO
from team_service.services.paging import Page
from team_service.services.players import player_exists
from team_service.services.validation import invalid_team, null_safe_lower

SORT_ORDERS = {
    "name": Team.name.asc(),
    "name_desc": Team.name.desc(),
    "location": Team.location.asc(),
    "location_desc": Team.location.desc(),
}

MISSING_TEAM_OR_PLAYER = "Either the Team or Player does not exist."
PLAYER_COUNT_EXCEEDED = "Player count exceeded."
ALREADY_ON_A_TEAM = "Player already a member of another team."


def team_exists(db: Session, team_id: int) -> bool:
    return db.scalar(select(Team.id).where(Team.id == team_id)) is not None


def duplicate_team_exists(
    db: Session,
    name: Optional[str],
    location: Optional[str],
    exclude_id: Optional[int] = None,
) -> bool:
    """
    True if any other team has the same name OR the same location, ignoring case.
    Missing values compare as "" (two teams without a location collide).
    """
    name_key = null_safe_lower(name)
    location_key = null_safe_lower(location)
    rows = db.execute(select(Team.id, Team.name, Team.location)).all()
    for team_id, other_name, other_location in rows:
        if exclude_id is not None and team_id == exclude_id:
            continue
        if null_safe_lower(other_name) == name_key or null_safe_lower(other_location) == location_key:
            return True
    return False


def list_teams(
    db: Session,
    sort_order: Optional[str] = None,
    page: int = 1,
    items_per_page: int = 10,
) -> List[Team]:
    p = Page.clamped(page, items_per_page)
    stmt = select(Team)
    order = SORT_ORDERS.get(null_safe_lower(sort_order))
    if order is not None:
        stmt = stmt.order_by(order)
    stmt = stmt.offset(p.offset).limit(p.limit)

    with store_guard("Teams"):
        return list(db.scalars(stmt))


def get_team(db: Session, team_id: int) -> Team:
    with store_guard("Teams"):
        team = db.get(Team, team_id)
    if team is None:
        raise NotFoundError(f"Team {team_id} does not exist.")
    return team


def get_roster(db: Session, team_id: int) -> List[Player]:
    stmt = select(Team).options(selectinload(Team.players)).where(Team.id == team_id)
    with store_guard("Teams"):
        team = db.scalars(stmt).first()
    if team is None:
        raise NotFoundError(f"Team {team_id} does not exist.")
    return list(team.players or [])


def create_team(db: Session, dto: TeamDTO) -> Team:
    if invalid_team(dto):
        raise BadRequestError("Name and location are required.")

    team = Team(name=dto.name, location=dto.location)
    with store_guard("Teams"):
        if duplicate_team_exists(db, dto.name, dto.location):
            logger.warning("Rejected duplicate team name={!r} location={!r}", dto.name, dto.location)
            raise DuplicateTeamError()
        db.add(team)
        save_changes(db)

    logger.info("Created team {} ({}, {})", team.id, team.name, team.location)
    return team


def replace_team(db: Session, team_id: int, dto: TeamDTO) -> None:
    """Replaces name and location. The roster only changes through the membership operations."""
    if dto.id != team_id or invalid_team(dto):
        raise BadRequestError("Path id must match the team id, and name and location are required.")

    with store_guard("Teams"):
        if duplicate_team_exists(db, dto.name, dto.location, exclude_id=team_id):
            logger.warning("Rejected duplicate team name={!r} location={!r}", dto.name, dto.location)
            raise DuplicateTeamError()

        team = db.get(Team, team_id)
        if team is None:
            raise NotFoundError(f"Team {team_id} does not exist.")

        team.name = dto.name
        team.location = dto.location
        _save_or_raise(db, team_id)
    logger.info("Replaced team {}", team_id)


def delete_team(db: Session, team_id: int) -> None:
    team = get_team(db, team_id)
    with store_guard("Teams"):
        db.delete(team)
        _save_or_raise(db, team_id)
    logger.info("Deleted team {}", team_id)


def add_player_to_team(db: Session, team_id: int, player_id: int) -> None:
    """
    Checks run in order: both exist, roster below capacity, player on no team.
    The checks and the save are not one transaction; two concurrent adds can both
    pass the capacity check.
    """
    with store_guard("Teams"):
        if not team_exists(db, team_id) or not player_exists(db, player_id):
            raise NotFoundError(MISSING_TEAM_OR_PLAYER)

        team = db.scalars(
            select(Team).options(selectinload(Team.players)).where(Team.id == team_id)
        ).one()
        if len(team.players) >= settings.ROSTER_CAPACITY:
            logger.warning("Team {} is full, player {} not added", team_id, player_id)
            raise BadRequestError(PLAYER_COUNT_EXCEEDED)

        player = db.get(Player, player_id)
        if player.team_id is not None:
            logger.warning("Player {} already on team {}", player_id, player.team_id)
            raise BadRequestError(ALREADY_ON_A_TEAM)

        team.players.append(player)
        _save_or_raise(db, team_id)
    logger.info("Added player {} to team {}", player_id, team_id)


def remove_player_from_team(db: Session, team_id: int, player_id: int) -> None:
    """Removing a player who is not on this roster is a no-op."""
    with store_guard("Teams"):
        if not team_exists(db, team_id) or not player_exists(db, player_id):
            raise NotFoundError(MISSING_TEAM_OR_PLAYER)

        team = db.scalars(
            select(Team).options(selectinload(Team.players)).where(Team.id == team_id)
        ).one()
        player = db.get(Player, player_id)

        if player not in team.players:
            logger.debug("Player {} is not on team {}, nothing to remove", player_id, team_id)
            return
        team.players.remove(player)
        _save_or_raise(db, team_id)
    logger.info("Removed player {} from team {}", player_id, team_id)


def _save_or_raise(db: Session, team_id: int) -> None:
    if save_changes(db) is SaveResult.CONFLICT:
        if not team_exists(db, team_id):
            raise NotFoundError(f"Team {team_id} does not exist.")
        raise ConcurrencyConflictError(f"Team {team_id} was modified by another request.")
