from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import date

if TYPE_CHECKING:
    from .people import Owner

class PetType(SQLModel, table=True):
    __tablename__ = "types"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=80, index=True)

class Pet(SQLModel, table=True):
    __tablename__ = "pets"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=30, index=True)
    birth_date: Optional[date] = None

    type_id: Optional[int] = Field(default=None, foreign_key="types.id")
    owner_id: Optional[int] = Field(default=None, foreign_key="owners.id")

    type: Optional[PetType] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin"}
    )
    owner: Optional["Owner"] = Relationship(back_populates="pets")
