"""
TitleGuard — User Block Rules
Keyword rules and blocked video IDs, as entered by the user one per line:

    keyword rules        blocked video IDs
    -------------        -----------------
    reaction             dQw4w9WgXcQ: Never Gonna Give You Up
    asmr                 oHg5SJYRHA0

Keyword rules match anywhere in the title, case-insensitively.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

UNKNOWN_TITLE = "Unknown Title"

_VIDEO_ID = re.compile(r"^[a-zA-Z0-9_-]{11}$")
_VIDEO_ID_IN_URL = re.compile(r"v=([a-zA-Z0-9_-]{11})|/shorts/([a-zA-Z0-9_-]{11})")

# Handy titles for trying rules out before saving them
DEFAULT_SAMPLE_TITLES = [
    "Amazing Cat Videos Compilation",
    "SCAMMER Gets EXPOSED!!!",
    "Clickbait Title YOU WON'T BELIEVE",
    "How to Cook Pasta - Simple Tutorial",
    "Reaction Video to Popular Song",
    "I Tried Fortnite Cheats… And This Happened",
    "I Tried the Viral Money Hack – Insane Results!",
    "Win Free PS5 Now – Limited Spots Left!",
    "One Stock to Make You Rich Overnight",
    "Cure Diseases with This Kitchen Item Fast",
    "ASMR Challenge That Almost Killed Me",
]


@dataclass(frozen=True)
class BlockedVideo:
    id: str
    title: str = UNKNOWN_TITLE

    def to_line(self) -> str:
        return f"{self.id}: {self.title}"


@dataclass(frozen=True)
class BlockDecision:
    blocked: bool
    matched_rules: tuple[str, ...] = ()
    matched_video_id: Optional[str] = None


@dataclass
class RuleTestReport:
    total: int
    blocked: int
    allowed: int
    lines: list[str] = field(default_factory=list)

    @property
    def summary(self) -> str:
        return f"{self.blocked} blocked, {self.allowed} allowed out of {self.total} titles"


def is_video_id(value: str) -> bool:
    return bool(_VIDEO_ID.match(value or ""))


def parse_rules(text: str) -> list[str]:
    """One keyword rule per line; blank lines dropped."""
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def parse_blocked_video_ids(text: str) -> list[BlockedVideo]:
    """Parse "ID: title" lines; lines without a valid 11-character ID are skipped."""
    entries = []
    for line in (text or "").splitlines():
        vid, *title_parts = [part.strip() for part in line.split(":")]
        if not is_video_id(vid):
            if line.strip():
                logger.debug("Skipping invalid video ID line: %r", line)
            continue
        entries.append(BlockedVideo(vid, ":".join(title_parts) or UNKNOWN_TITLE))
    return entries


def extract_video_id(href: str | None) -> Optional[str]:
    """Pull the video ID out of a /watch?v= or /shorts/ link."""
    if not href:
        return None
    m = _VIDEO_ID_IN_URL.search(href)
    if not m:
        return None
    return m.group(1) or m.group(2)


class BlockList:
    def __init__(self, rules: Iterable[str] = (), blocked_videos: Iterable[BlockedVideo | str] = ()):
        self.rules = [r.strip() for r in rules if r and r.strip()]
        self.blocked_videos: dict[str, BlockedVideo] = {}
        for entry in blocked_videos:
            # plain strings use the same "ID: title" form as the settings text
            parsed = parse_blocked_video_ids(entry) if isinstance(entry, str) else [entry]
            for video in parsed:
                if is_video_id(video.id):
                    self.blocked_videos.setdefault(video.id, video)

    def __len__(self) -> int:
        return len(self.rules) + len(self.blocked_videos)

    def matching_rules(self, title: str) -> list[str]:
        lower = (title or "").lower()
        return [rule for rule in self.rules if rule.lower() in lower]

    def check(self, title: str, video_id: str | None = None) -> BlockDecision:
        matched = tuple(self.matching_rules(title))
        hit_id = video_id if video_id and video_id in self.blocked_videos else None
        return BlockDecision(bool(matched or hit_id), matched, hit_id)

    def block_video(self, video_id: str, title: str | None = None) -> bool:
        """Add a video ID; False if the ID is invalid or already blocked."""
        if not is_video_id(video_id) or video_id in self.blocked_videos:
            return False
        self.blocked_videos[video_id] = BlockedVideo(video_id, title or UNKNOWN_TITLE)
        return True


def dry_run_rules(rules: Iterable[str], titles: Iterable[str] | None = None) -> RuleTestReport:
    """Dry-run keyword rules against sample titles."""
    blocklist = BlockList(rules)
    titles = [t.strip() for t in (titles or []) if t and t.strip()] or list(DEFAULT_SAMPLE_TITLES)

    lines = []
    blocked = 0
    for title in titles:
        matched = blocklist.matching_rules(title)
        if matched:
            blocked += 1
            lines.append(f'❌ "{title}" (matches: {", ".join(matched)})')
        else:
            lines.append(f'✅ "{title}"')
    return RuleTestReport(total=len(titles), blocked=blocked, allowed=len(titles) - blocked, lines=lines)
