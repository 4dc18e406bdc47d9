from __future__ import annotations

from typing import List, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class Team(Base):
    __tablename__ = "teams"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Optimistic concurrency: UPDATE ... WHERE version = <loaded version>
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Roster. Deleting a team leaves its players without a team.
    players: Mapped[List["Player"]] = relationship(
        back_populates="team",
        order_by="Player.id",
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, name={self.name!r}, location={self.location!r})"


class Player(Base):
    __tablename__ = "players"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)

    # A player is on at most one team at a time
    team_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True
    )
    team: Mapped[Optional[Team]] = relationship(back_populates="players")

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"Player(id={self.id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"
