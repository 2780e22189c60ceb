"""
Diagnostic channel for track validation failures.

Every rejected input produces exactly one human-readable line on the
``songbook.diagnostics`` logger. Callers never receive these messages as
return values; they get a boolean (or an invalid Track) instead.
"""
from __future__ import annotations

import logging
from enum import Enum
from threading import Lock
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class DiagnosticCode(Enum):
    """Conditions that are reported on the diagnostic channel."""
    EMPTY_TITLE = "empty_title"
    EMPTY_ARTIST = "empty_artist"
    INVALID_DURATION = "invalid_duration"
    INVALID_RATING = "invalid_rating"
    TITLE_CHANGE_IGNORED = "title_change_ignored"
    ARTIST_CHANGE_IGNORED = "artist_change_ignored"
    DURATION_CHANGE_IGNORED = "duration_change_ignored"
    RATING_CHANGE_IGNORED = "rating_change_ignored"
    EMPTY_TAG = "empty_tag"
    DUPLICATE_TAG = "duplicate_tag"
    TAG_NOT_FOUND = "tag_not_found"


# Construction failures are errors; everything else is a hint.
ERROR_CODES = frozenset(
    {
        DiagnosticCode.EMPTY_TITLE,
        DiagnosticCode.EMPTY_ARTIST,
        DiagnosticCode.INVALID_DURATION,
        DiagnosticCode.INVALID_RATING,
    }
)

PREFIXES: Dict[str, Dict[int, str]] = {
    "en": {logging.ERROR: "[error]", logging.WARNING: "[hint]"},
    "zh": {logging.ERROR: "[错误]", logging.WARNING: "[提示]"},
}

MESSAGES: Dict[str, Dict[DiagnosticCode, str]] = {
    "en": {
        DiagnosticCode.EMPTY_TITLE: "title must not be empty",
        DiagnosticCode.EMPTY_ARTIST: "artist must not be empty",
        DiagnosticCode.INVALID_DURATION: "duration must be a positive integer (seconds)",
        DiagnosticCode.INVALID_RATING: "rating must be between 1 and 5",
        DiagnosticCode.TITLE_CHANGE_IGNORED: "title must not be empty, change ignored",
        DiagnosticCode.ARTIST_CHANGE_IGNORED: "artist must not be empty, change ignored",
        DiagnosticCode.DURATION_CHANGE_IGNORED: "duration must be a positive integer, change ignored",
        DiagnosticCode.RATING_CHANGE_IGNORED: "rating must be between 1 and 5, change ignored",
        DiagnosticCode.EMPTY_TAG: "empty tag ignored",
        DiagnosticCode.DUPLICATE_TAG: "tag already exists (case-insensitive)",
        DiagnosticCode.TAG_NOT_FOUND: "tag not found",
    },
    "zh": {
        DiagnosticCode.EMPTY_TITLE: "标题不能为空",
        DiagnosticCode.EMPTY_ARTIST: "艺人不能为空",
        DiagnosticCode.INVALID_DURATION: "时长必须为正整数（秒）",
        DiagnosticCode.INVALID_RATING: "评分必须在 1...5 之间",
        DiagnosticCode.TITLE_CHANGE_IGNORED: "标题不能为空，已忽略本次修改",
        DiagnosticCode.ARTIST_CHANGE_IGNORED: "艺人不能为空，已忽略本次修改",
        DiagnosticCode.DURATION_CHANGE_IGNORED: "时长需为正整数，已忽略本次修改",
        DiagnosticCode.RATING_CHANGE_IGNORED: "评分需在 1..5，已忽略本次修改",
        DiagnosticCode.EMPTY_TAG: "空标签忽略。",
        DiagnosticCode.DUPLICATE_TAG: "标签已存在（忽略大小写）",
        DiagnosticCode.TAG_NOT_FOUND: "未找到该标签",
    },
}

SUPPORTED_LANGUAGES = tuple(MESSAGES)


def level_for(code: DiagnosticCode) -> int:
    return logging.ERROR if code in ERROR_CODES else logging.WARNING


class DiagnosticReporter:
    def __init__(self, language: str = "en", log: Optional[logging.Logger] = None) -> None:
        if language not in MESSAGES:
            raise ValueError(f"Unsupported diagnostics language: {language}")
        self.language = language
        self.log = log or logger

    def format(self, code: DiagnosticCode) -> str:
        level = level_for(code)
        return f"{PREFIXES[self.language][level]} {MESSAGES[self.language][code]}"

    def emit(self, code: DiagnosticCode) -> None:
        self.log.log(level_for(code), self.format(code), extra={"diagnostic_code": code.value})

    def emit_all(self, codes: Iterable[DiagnosticCode]) -> None:
        for code in codes:
            self.emit(code)


_reporter = DiagnosticReporter()
_reporter_lock = Lock()


def get_reporter() -> DiagnosticReporter:
    return _reporter


def set_reporter(reporter: DiagnosticReporter) -> DiagnosticReporter:
    """Install ``reporter`` as the process default and return the previous one."""
    global _reporter
    with _reporter_lock:
        previous = _reporter
        _reporter = reporter
    return previous
