from typing import Dict, List, Optional

from pydantic import BaseModel, Field, validator

SUPPORTED_HAND_SIZES = (5, 7)


def _check_hand_size(v: int) -> int:
    if v not in SUPPORTED_HAND_SIZES:
        raise ValueError("Invalid number. Enter either 5 or 7")
    return v


class DrawRequest(BaseModel):
    hand_size: int = 5
    seed: Optional[int] = Field(None, ge=0)

    @validator("hand_size")
    def validate_hand_size(cls, v: int) -> int:
        return _check_hand_size(v)


class ClassifyRequest(BaseModel):
    cards: List[str] = Field(..., min_length=1, max_length=52)


class HandStatsView(BaseModel):
    count: int
    rank_count: List[int]
    suit_count: List[int]
    flush: bool


class HandView(BaseModel):
    cards: List[str]
    stats: HandStatsView
    score: Dict[str, bool]


class StatisticsRequest(BaseModel):
    hand_size: int = 5
    num_samples: int = Field(20_000, ge=1)
    num_workers: int = Field(4, ge=1, le=64)
    seed: Optional[int] = Field(None, ge=0)
    use_processes: bool = False

    @validator("hand_size")
    def validate_hand_size(cls, v: int) -> int:
        return _check_hand_size(v)


class StatisticsStatus(BaseModel):
    status: str  # queued | running | done | failed
    progress: float
    samples_done: int
    samples_total: int
    error: Optional[str] = None


class StatisticsResult(BaseModel):
    hand_size: int
    num_samples: int
    counts: Dict[str, int]
    percentages: Dict[str, float]
    meta: Dict[str, str] = Field(default_factory=dict)
