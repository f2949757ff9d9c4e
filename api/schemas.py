"""
TitleGuard — Pydantic Request / Response Schemas
"""
from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


# ── Request Models ─────────────────────────────────────────────────────────────

class TitleClassifyRequest(BaseModel):
    title: str = Field(..., max_length=1_000, description="Video title as shown on the page")


class BatchClassifyRequest(BaseModel):
    titles: list[str] = Field(..., min_length=1, max_length=500)


class VideoFilterRequest(BaseModel):
    title: str = Field(..., max_length=1_000)
    url: Optional[str] = Field(None, description="Tile link, /watch?v=... or /shorts/...")
    rules: list[str] = Field(default_factory=list, description="Keyword rules, matched case-insensitively")
    blocked_video_ids: list[str] = Field(default_factory=list)
    heuristics_enabled: Optional[bool] = Field(
        None, description="Override the server default for the title heuristics",
    )


class RuleTestRequest(BaseModel):
    rules: list[str] = Field(default_factory=list)
    titles: list[str] = Field(
        default_factory=list,
        description="Titles to test against; the built-in samples are used when empty",
    )


# ── Response Models ───────────────────────────────────────────────────────────

class ClassificationResponse(BaseModel):
    title: str
    score: int = Field(..., ge=0)
    blocked: bool
    reasons: str = Field("", description="Comma-joined triggered heuristics, in evaluation order")
    reason_list: list[str] = Field(default_factory=list)
    threshold: int
    diagnostic: Optional[str] = None


class BatchClassificationResponse(BaseModel):
    total: int
    blocked: int
    allowed: int
    results: list[ClassificationResponse]
    processing_time_ms: Optional[float] = None


class VideoFilterResponse(BaseModel):
    blocked: bool
    source: Optional[str] = Field(None, description="video_id | rule | heuristic")
    video_id: Optional[str] = None
    matched_rules: list[str] = Field(default_factory=list)
    heuristic: Optional[ClassificationResponse] = None


class RuleTestResponse(BaseModel):
    total: int
    blocked: int
    allowed: int
    summary: str
    lines: list[str]


# ── Error ─────────────────────────────────────────────────────────────────────

class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    code: Optional[str] = None
