from __future__ import annotations

from typing import Any, Optional


def null_safe_lower(value: Optional[str]) -> str:
    return (value or "").lower()


def is_null_or_empty(value: Optional[str]) -> bool:
    return value is None or value == ""


def invalid_player(player: Any) -> bool:
    # first and last name are required
    return is_null_or_empty(player.first_name) or is_null_or_empty(player.last_name)


def invalid_team(team: Any) -> bool:
    # name and location are required
    return is_null_or_empty(team.name) or is_null_or_empty(team.location)
