from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MainGenre(str, Enum):
    japanese = "和食"
    western = "洋食"
    chinese = "中華"
    other = "その他"
    dessert = "デザート"


class Carb(str, Enum):
    rice = "米"
    noodle = "麺"
    either = "どちらでもない"


MAIN_GENRES: list[str] = [g.value for g in MainGenre]
CARBS: list[str] = [c.value for c in Carb]


class MenuRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., min_length=1)
    main_genre: MainGenre
    carb: Carb
