"""
TitleGuard — Filter Routes
POST /filter/video  — one tile: user rules, blocked IDs, then heuristics
POST /rules/test    — dry-run keyword rules against sample titles
"""
import logging
from fastapi import APIRouter, HTTPException, status

from api.routes.classify import to_response
from api.schemas import (
    VideoFilterRequest,
    VideoFilterResponse,
    RuleTestRequest,
    RuleTestResponse,
)
from filtering.blocklist import BlockList, dry_run_rules
from scoring.engine import evaluate_video

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Filtering"])


@router.post(
    "/filter/video",
    response_model=VideoFilterResponse,
    summary="Decide whether to hide a video tile",
    description=(
        "Checks blocked video IDs and keyword rules first, then the title heuristics. "
        "Rules are sent with the request; nothing is stored server-side."
    ),
)
async def filter_video(body: VideoFilterRequest) -> VideoFilterResponse:
    logger.info("filter/video called | rules=%d ids=%d", len(body.rules), len(body.blocked_video_ids))
    blocklist = BlockList(body.rules, body.blocked_video_ids)
    decision = evaluate_video(
        body.title,
        href=body.url,
        blocklist=blocklist,
        heuristics_enabled=body.heuristics_enabled,
    )
    return VideoFilterResponse(
        blocked=decision.blocked,
        source=decision.source,
        video_id=decision.video_id,
        matched_rules=list(decision.matched_rules),
        heuristic=to_response(body.title, decision.heuristic) if decision.heuristic else None,
    )


@router.post(
    "/rules/test",
    response_model=RuleTestResponse,
    summary="Dry-run keyword rules",
    description="Reports which titles the given rules would block. Uses built-in sample titles when none are sent.",
)
async def run_rule_test(body: RuleTestRequest) -> RuleTestResponse:
    rules = [r.strip() for r in body.rules if r.strip()]
    if not rules:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="No rules to test",
        )
    report = dry_run_rules(rules, body.titles)
    logger.info("rules/test | %s", report.summary)
    return RuleTestResponse(
        total=report.total,
        blocked=report.blocked,
        allowed=report.allowed,
        summary=report.summary,
        lines=report.lines,
    )
