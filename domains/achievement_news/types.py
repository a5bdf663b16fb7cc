"""Type definitions for the achievement news pipeline."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class FailureReason(str, Enum):
    """Why a game could not be resolved from the catalog."""
    REQUEST_FAILED = "request_failed"          # Network, timeout, HTTP status, auth
    NOT_FOUND = "not_found"                    # Catalog returned no game record
    NO_ACHIEVEMENTS = "no_achievements"        # Achievement collection absent or empty
    MALFORMED_RESPONSE = "malformed_response"  # Payload or dates could not be read
    MISSING_CREDENTIALS = "missing_credentials"


@dataclass(frozen=True)
class GameSummary:
    """Everything the news post needs to know about a game."""
    id: int  # As requested by the caller, never taken from the response
    title: str
    console_name: str
    genre: str
    developer: str
    release_date: str  # Display string, not parsed
    achievement_set_date: date


@dataclass(frozen=True)
class GameInfoResult:
    """Outcome of a catalog lookup: either a summary or a failure reason."""
    summary: Optional[GameSummary] = None
    reason: Optional[FailureReason] = None

    def __post_init__(self):
        if (self.summary is None) == (self.reason is None):
            raise ValueError("GameInfoResult needs exactly one of summary or reason")

    @property
    def ok(self) -> bool:
        return self.summary is not None

    @classmethod
    def success(cls, summary: GameSummary) -> "GameInfoResult":
        return cls(summary=summary)

    @classmethod
    def failure(cls, reason: FailureReason) -> "GameInfoResult":
        return cls(reason=reason)
