"""Achievement models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal

from .drinks import HistoryPayload

Rarity = Literal["common", "rare", "epic", "legendary"]


class AchievementOut(BaseModel):
    """An unlocked achievement ready for display."""

    id: str
    title: str
    description: str
    icon: str
    color: str
    rarity: Rarity


class EvaluateRequest(HistoryPayload):
    """History plus the ids the user has already unlocked."""

    model_config = ConfigDict(populate_by_name=True)

    unlocked: list[str] = []


class EvaluateResponse(BaseModel):
    """Achievements unlocked by this evaluation and the updated id set."""

    model_config = ConfigDict(populate_by_name=True)

    newly_unlocked: list[AchievementOut] = Field(serialization_alias="newlyUnlocked")
    unlocked: list[str]
