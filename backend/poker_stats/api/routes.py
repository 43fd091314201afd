import uuid
from typing import Dict, List

import numpy as np
from fastapi import APIRouter, HTTPException

from poker_stats.data.presets import DEFAULT_STATISTICS_REQUEST, EXAMPLE_HANDS
from poker_stats.engine.cards import Deck, Hand, cards_are_unique, draw_hand, sorted_deck
from poker_stats.engine.scoring import HandStats, classify
from poker_stats.models import (
    ClassifyRequest,
    DrawRequest,
    HandStatsView,
    HandView,
    StatisticsRequest,
    StatisticsResult,
    StatisticsStatus,
)
from poker_stats.services.stats_runner import InMemoryStatisticsRunner

router = APIRouter(tags=["poker"])

runner = InMemoryStatisticsRunner()
deck = Deck()


def hand_view(hand: Hand) -> HandView:
    stats = HandStats.from_hand(hand)
    return HandView(
        cards=hand.names(),
        stats=HandStatsView(
            count=stats.count_cards(),
            rank_count=stats.rank_count,
            suit_count=stats.suit_count,
            flush=stats.is_flush(),
        ),
        score=classify(stats).as_dict(),
    )


@router.post("/hands/draw", response_model=HandView)
async def draw(request: DrawRequest) -> HandView:
    rng = np.random.default_rng(request.seed)
    return hand_view(draw_hand(request.hand_size, rng))


@router.post("/hands/classify", response_model=HandView)
async def classify_cards(request: ClassifyRequest) -> HandView:
    hand = deck.draw_hand(request.cards)
    if hand is None:
        raise HTTPException(status_code=400, detail="Unknown card name in hand")
    if not cards_are_unique(hand):
        raise HTTPException(status_code=400, detail="Hand contains duplicate cards")
    return hand_view(hand)


@router.get("/deck")
async def get_deck() -> Dict[str, List[str]]:
    return {"cards": [str(card) for card in sorted_deck()]}


@router.post("/statistics")
async def create_statistics(request: StatisticsRequest) -> Dict[str, str]:
    job_id = str(uuid.uuid4())
    runner.start(job_id, request)
    return {"id": job_id}


@router.get("/statistics/{job_id}", response_model=StatisticsResult)
async def get_statistics(job_id: str) -> StatisticsResult:
    result = runner.get(job_id)
    if not result:
        raise HTTPException(status_code=404, detail="Statistics job not found or not complete")
    return result


@router.get("/statistics/{job_id}/status", response_model=StatisticsStatus)
async def get_statistics_status(job_id: str) -> StatisticsStatus:
    status = runner.status(job_id)
    if not status:
        raise HTTPException(status_code=404, detail="Statistics job not found")
    return status


@router.get("/libraries/defaults")
async def get_defaults() -> Dict:
    return {
        "statistics": DEFAULT_STATISTICS_REQUEST,
        "example_hands": EXAMPLE_HANDS,
    }
