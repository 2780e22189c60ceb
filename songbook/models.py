from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .diagnostics import DiagnosticCode, get_reporter
from .ids import IdGenerator, default_ids
from .text_utils import contains_folded, fold, join_tags, normalize_key
from .validation import TrackValidator

logger = logging.getLogger(__name__)

UNASSIGNED_ID = 0


@dataclass(slots=True)
class Track:
    id: int = UNASSIGNED_ID
    title: str = ""
    artist: str = ""
    duration_seconds: int = 0
    rating: int = 0
    tags: List[str] = field(default_factory=list)
    valid: bool = False

    def __post_init__(self) -> None:
        # the track owns its tag list; never alias a caller's list
        self.tags = list(self.tags)

    @classmethod
    def create(
        cls,
        title: str,
        artist: str,
        duration_seconds: int,
        rating: int,
        *,
        ids: Optional[IdGenerator] = None,
    ) -> "Track":
        """
        Build a track from raw input.

        All four fields are checked and every failure is reported. A failed
        construction returns a track with ``valid`` False and does not consume
        an id.

        This is the only supported way to obtain a valid track. Calling the
        dataclass constructor directly skips validation and id assignment.
        """
        result = TrackValidator.validate_track(title, artist, duration_seconds, rating)
        if not result.valid:
            get_reporter().emit_all(result.errors)
            logger.debug("Rejected track input: %s", [code.value for code in result.errors])
            return cls()
        clean_title, clean_artist, duration, clean_rating = result.sanitized_value
        track_id = (ids or default_ids).next_id()
        return cls(
            id=track_id,
            title=clean_title,
            artist=clean_artist,
            duration_seconds=duration,
            rating=clean_rating,
            valid=True,
        )

    def set_title(self, title: str) -> bool:
        result = TrackValidator.validate_title(title, DiagnosticCode.TITLE_CHANGE_IGNORED)
        if not result.valid:
            get_reporter().emit_all(result.errors)
            return False
        self.title = result.sanitized_value
        return True

    def set_artist(self, artist: str) -> bool:
        result = TrackValidator.validate_artist(artist, DiagnosticCode.ARTIST_CHANGE_IGNORED)
        if not result.valid:
            get_reporter().emit_all(result.errors)
            return False
        self.artist = result.sanitized_value
        return True

    def set_duration(self, seconds: int) -> bool:
        result = TrackValidator.validate_duration(seconds, DiagnosticCode.DURATION_CHANGE_IGNORED)
        if not result.valid:
            get_reporter().emit_all(result.errors)
            return False
        self.duration_seconds = result.sanitized_value
        return True

    def set_rating(self, rating: int) -> bool:
        result = TrackValidator.validate_rating(rating, DiagnosticCode.RATING_CHANGE_IGNORED)
        if not result.valid:
            get_reporter().emit_all(result.errors)
            return False
        self.rating = result.sanitized_value
        return True

    def add_tag(self, tag: str) -> bool:
        result = TrackValidator.validate_new_tag(tag, self.tags)
        if not result.valid:
            get_reporter().emit_all(result.errors)
            return False
        self.tags.append(result.sanitized_value)
        return True

    def remove_tag(self, tag: str) -> bool:
        target = normalize_key(tag)
        for index, existing in enumerate(self.tags):
            if fold(existing) == target:
                del self.tags[index]
                return True
        get_reporter().emit(DiagnosticCode.TAG_NOT_FOUND)
        return False

    def has_tag(self, tag: str) -> bool:
        target = normalize_key(tag)
        return any(fold(existing) == target for existing in self.tags)

    def matches_keyword(self, keyword: str) -> bool:
        needle = normalize_key(keyword)
        if not needle:
            return False
        if contains_folded(self.title, needle):
            return True
        if contains_folded(self.artist, needle):
            return True
        return any(contains_folded(tag, needle) for tag in self.tags)

    def sort_key(self) -> Tuple[int, str, int]:
        return (-self.rating, self.title, self.id)

    def render(self) -> str:
        return render(self)

    def to_record(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "duration_seconds": self.duration_seconds,
            "rating": self.rating,
            "tags": list(self.tags),
            "valid": self.valid,
        }

    def __str__(self) -> str:
        return render(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return compare(self, other) < 0


def render(track: Track) -> str:
    stars = "*" * max(track.rating, 0)
    line = (
        f"[#{track.id}] {track.artist} - {track.title} "
        f"({track.duration_seconds}s) {stars}"
    )
    if track.tags:
        line += f"  [tags: {join_tags(track.tags)}]"
    return line


def compare(a: Track, b: Track) -> int:
    """Rating descending, then title, then id. Returns <0, 0 or >0."""
    if a.rating != b.rating:
        return -1 if a.rating > b.rating else 1
    if a.title != b.title:
        return -1 if a.title < b.title else 1
    if a.id != b.id:
        return -1 if a.id < b.id else 1
    return 0


def sort_tracks(tracks: Iterable[Track]) -> List[Track]:
    return sorted(tracks, key=Track.sort_key)
