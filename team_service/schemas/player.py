from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict

class PlayerIn(BaseModel):
    # id is ignored on create, and must match the path on replace
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

class Player(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    team_id: Optional[int] = None  # None when the player is on no roster
