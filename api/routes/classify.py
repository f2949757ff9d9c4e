"""
TitleGuard — Classification Routes
POST /classify/title | /classify/batch
"""
import time
import logging
from fastapi import APIRouter, HTTPException

from api.schemas import (
    TitleClassifyRequest,
    BatchClassifyRequest,
    ClassificationResponse,
    BatchClassificationResponse,
)
from scoring.engine import ScoreResult, classify_title, classify_titles, get_classifier

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/classify", tags=["Classification"])


def to_response(title: str, result: ScoreResult) -> ClassificationResponse:
    return ClassificationResponse(
        title=title,
        score=result.score,
        blocked=result.blocked,
        reasons=result.reason_text,
        reason_list=list(result.reasons),
        threshold=get_classifier().config.threshold,
        diagnostic=result.diagnostic,
    )


@router.post(
    "/title",
    response_model=ClassificationResponse,
    summary="Classify one title",
    description="Scores a video title with the clickbait / vague-title heuristics.",
)
async def classify_one(body: TitleClassifyRequest) -> ClassificationResponse:
    logger.info("classify/title called | chars=%d", len(body.title))
    try:
        return to_response(body.title, classify_title(body.title))
    except Exception as exc:
        logger.exception("classify/title error: %s", exc)
        raise HTTPException(status_code=500, detail=f"Classification failed: {exc}") from exc


@router.post(
    "/batch",
    response_model=BatchClassificationResponse,
    summary="Classify many titles",
    description="Scores every title in order; repeated titles are only scored once.",
)
async def classify_batch(body: BatchClassifyRequest) -> BatchClassificationResponse:
    start = time.perf_counter()
    logger.info("classify/batch called | titles=%d", len(body.titles))
    results = [to_response(t, r) for t, r in zip(body.titles, classify_titles(body.titles))]
    blocked = sum(1 for r in results if r.blocked)
    return BatchClassificationResponse(
        total=len(results),
        blocked=blocked,
        allowed=len(results) - blocked,
        results=results,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
    )
