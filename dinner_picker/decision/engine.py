from __future__ import annotations

import logging
import random
from typing import Sequence

from ..catalog.models import Carb, MainGenre, MenuRecord
from ..errors import InvalidFilter
from .models import CarbFilter, Decision, DessertFilter, GenreFilter, RandomFilter

logger = logging.getLogger(__name__)


def select_candidates(records: Sequence[MenuRecord], menu_filter: object) -> list[MenuRecord]:
    """
    Return the records matching ``menu_filter``, in catalog order.

    Rules:
    - random  -> everything except デザート
    - carb    -> carb matches or is どちらでもない, except デザート
    - genre   -> main genre matches (デザート included when asked for)
    - dessert -> only デザート
    """
    if isinstance(menu_filter, RandomFilter):
        return [r for r in records if r.main_genre is not MainGenre.dessert]

    if isinstance(menu_filter, CarbFilter):
        target = menu_filter.carb
        return [
            r
            for r in records
            if r.main_genre is not MainGenre.dessert
            and (r.carb is target or r.carb is Carb.either)
        ]

    if isinstance(menu_filter, GenreFilter):
        return [r for r in records if r.main_genre is menu_filter.main_genre]

    if isinstance(menu_filter, DessertFilter):
        return [r for r in records if r.main_genre is MainGenre.dessert]

    raise InvalidFilter(f"Unknown filter: {menu_filter!r}")


def pick_one(
    candidates: Sequence[MenuRecord],
    rng: random.Random | None = None,
) -> MenuRecord | None:
    """Pick one candidate uniformly at random, or None when there are none."""
    if not candidates:
        return None
    source = rng if rng is not None else random
    return candidates[source.randrange(len(candidates))]


def decide(
    records: Sequence[MenuRecord],
    menu_filter: object,
    rng: random.Random | None = None,
) -> Decision:
    candidates = select_candidates(records, menu_filter)
    logger.debug(
        "Filter %s matched %d candidate(s)",
        getattr(menu_filter, "mode", "?"),
        len(candidates),
    )
    return Decision(pick=pick_one(candidates, rng), candidate_count=len(candidates))


def reroll(
    records: Sequence[MenuRecord],
    menu_filter: object,
    previous_id: str | None = None,
    rng: random.Random | None = None,
) -> Decision:
    """Draw again from the same candidates.

    ``previous_id`` is accepted but unused: the same menu may come up again.
    """
    return decide(records, menu_filter, rng)
