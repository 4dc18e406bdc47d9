from typing import Optional
from pydantic import BaseModel, ConfigDict

class TeamDTO(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    location: Optional[str] = None

class Team(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    location: Optional[str] = None
