from enum import Enum
from typing import List
from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def new_participant_id() -> str:
    return uuid4().hex


class Category(str, Enum):
    A = "A"
    B = "B"


class Participant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    score: int
    category: Category
    id: str = Field(default_factory=new_participant_id)


class Group(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    members: List[Participant] = Field(default_factory=list)

    @property
    def score(self) -> int:
        return sum(p.score for p in self.members)


class BalanceStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    average: float
    max: int
    min: int
    difference: int
    standard_deviation: float


class AllocationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    groups: List[Group]
    group_scores: List[int]
    statistics: BalanceStats
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    refinement_swaps: int = 0
