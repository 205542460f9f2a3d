from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from ..catalog.models import Carb, MainGenre, MenuRecord
from ..errors import InvalidFilter


class _FilterBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class GenreFilter(_FilterBase):
    mode: Literal["genre"] = "genre"
    main_genre: MainGenre = Field(..., alias="mainGenre")


class DessertFilter(_FilterBase):
    mode: Literal["dessert"] = "dessert"


class CarbFilter(_FilterBase):
    mode: Literal["carb"] = "carb"
    carb: Carb

    @field_validator("carb")
    @classmethod
    def _selectable_carb(cls, v: Carb) -> Carb:
        # どちらでもない describes menu items, it is not something to ask for
        if v is Carb.either:
            raise ValueError("carb filter accepts only 米 or 麺")
        return v


class RandomFilter(_FilterBase):
    mode: Literal["random"] = "random"


Filter = Annotated[
    Union[GenreFilter, DessertFilter, CarbFilter, RandomFilter],
    Field(discriminator="mode"),
]

_FILTER_ADAPTER: TypeAdapter[Any] = TypeAdapter(Filter)


def parse_filter(data: Any) -> GenreFilter | DessertFilter | CarbFilter | RandomFilter:
    """Validate a plain mapping such as ``{"mode": "carb", "carb": "米"}``."""
    try:
        return _FILTER_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise InvalidFilter(f"invalid filter {data!r}: {exc}") from exc


class Decision(BaseModel):
    pick: MenuRecord | None = None
    candidate_count: int = Field(..., ge=0)
