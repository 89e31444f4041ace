import re
from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional, TYPE_CHECKING
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

if TYPE_CHECKING:
    from .pets import Pet

TELEPHONE_PATTERN = re.compile(r"\d{10}")

# column sizes of the owners table
MAX_LENGTHS = {
    "first_name": 30,
    "last_name": 30,
    "address": 255,
    "city": 80,
    "telephone": 20,
}

class OwnerBase(SQLModel):
    first_name: str = Field(default="", max_length=MAX_LENGTHS["first_name"])
    last_name: str = Field(default="", max_length=MAX_LENGTHS["last_name"], index=True)
    address: str = Field(default="", max_length=MAX_LENGTHS["address"])
    city: str = Field(default="", max_length=MAX_LENGTHS["city"])
    telephone: str = Field(default="", max_length=MAX_LENGTHS["telephone"])

class Owner(OwnerBase, table=True):
    __tablename__ = "owners"
    id: Optional[int] = Field(default=None, primary_key=True)

    pets: List["Pet"] = Relationship(
        back_populates="owner",
        sa_relationship_kwargs={
            "lazy": "selectin",
            "order_by": "Pet.name",
        }
    )

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

class OwnerForm(BaseModel):
    """Submitted owner fields, keyed by their camelCase form names.

    The id is never bound from client input: unknown keys, ``id`` included,
    are ignored.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_default=True,
        extra="ignore",
    )

    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    telephone: str = ""

    @field_validator("first_name", "last_name", "address", "city", "telephone")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("not_blank", "must not be blank")
        return v

    @field_validator("first_name", "last_name", "address", "city")
    @classmethod
    def within_column_size(cls, v: str, info: ValidationInfo) -> str:
        max_length = MAX_LENGTHS[info.field_name]
        if len(v) > max_length:
            raise PydanticCustomError(
                "too_long",
                "size must be between 1 and {max_length}",
                {"max_length": max_length},
            )
        return v

    @field_validator("telephone")
    @classmethod
    def ten_digits(cls, v: str) -> str:
        if not TELEPHONE_PATTERN.fullmatch(v):
            raise PydanticCustomError("telephone", "Telephone must be a 10-digit number")
        return v
