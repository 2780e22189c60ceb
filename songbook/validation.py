"""
Validation layer for track fields.

Each check is a pure decision: it returns a ``ValidationResult`` carrying the
sanitized value and the diagnostic codes for whatever failed. Emitting those
diagnostics is left to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .diagnostics import DiagnosticCode
from .text_utils import fold, trim


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    sanitized_value: Any = None
    errors: list[DiagnosticCode] = field(default_factory=list)

    def merge(self, other: "ValidationResult") -> None:
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)


class TrackValidator:
    """Validates constructor and setter inputs for tracks."""

    MIN_RATING = 1
    MAX_RATING = 5

    @classmethod
    def _non_empty_text(cls, value: str, code: DiagnosticCode) -> ValidationResult:
        sanitized = trim(value)
        if not sanitized:
            return ValidationResult(valid=False, errors=[code])
        return ValidationResult(valid=True, sanitized_value=sanitized)

    @classmethod
    def validate_title(cls, value: str, code: DiagnosticCode = DiagnosticCode.EMPTY_TITLE) -> ValidationResult:
        return cls._non_empty_text(value, code)

    @classmethod
    def validate_artist(cls, value: str, code: DiagnosticCode = DiagnosticCode.EMPTY_ARTIST) -> ValidationResult:
        return cls._non_empty_text(value, code)

    @classmethod
    def validate_duration(
        cls, value: int, code: DiagnosticCode = DiagnosticCode.INVALID_DURATION
    ) -> ValidationResult:
        if not _is_int(value) or value <= 0:
            return ValidationResult(valid=False, errors=[code])
        return ValidationResult(valid=True, sanitized_value=value)

    @classmethod
    def validate_rating(
        cls, value: int, code: DiagnosticCode = DiagnosticCode.INVALID_RATING
    ) -> ValidationResult:
        if not _is_int(value) or value < cls.MIN_RATING or value > cls.MAX_RATING:
            return ValidationResult(valid=False, errors=[code])
        return ValidationResult(valid=True, sanitized_value=value)

    @classmethod
    def validate_new_tag(cls, value: str, existing: Iterable[str]) -> ValidationResult:
        """
        Validate a tag about to be appended.

        Rules:
        - Remove leading/trailing whitespace
        - Reject empty tags
        - Reject tags equal to an existing one when lower-cased
        """
        sanitized = trim(value)
        if not sanitized:
            return ValidationResult(valid=False, errors=[DiagnosticCode.EMPTY_TAG])
        key = fold(sanitized)
        for tag in existing:
            if fold(tag) == key:
                return ValidationResult(valid=False, errors=[DiagnosticCode.DUPLICATE_TAG])
        return ValidationResult(valid=True, sanitized_value=sanitized)

    @classmethod
    def validate_track(cls, title: str, artist: str, duration_seconds: int, rating: int) -> ValidationResult:
        """
        Run every constructor check and collect all failures.

        On success ``sanitized_value`` is ``(title, artist, duration, rating)``.
        """
        result = ValidationResult(valid=True)
        checks = (
            cls.validate_title(title),
            cls.validate_artist(artist),
            cls.validate_duration(duration_seconds),
            cls.validate_rating(rating),
        )
        for check in checks:
            result.merge(check)
        if result.valid:
            result.sanitized_value = tuple(check.sanitized_value for check in checks)
        return result


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a valid duration or rating
    return isinstance(value, int) and not isinstance(value, bool)
