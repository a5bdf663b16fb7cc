"""Exceptions raised by the achievement news services.

Service functions raise these; the pipeline converts them into a failed
GameInfoResult or a missing longplay link, so nothing here reaches Discord.
"""


class AchievementNewsError(Exception):
    """Base class for achievement news errors."""


class CatalogError(AchievementNewsError):
    """Raised when the RetroAchievements API cannot be reached or returns junk."""


class GameNotFoundError(CatalogError):
    """Raised when the catalog has no game with the requested ID."""

    def __init__(self, game_id: int) -> None:
        super().__init__(f"Game {game_id} not found in catalog")


class MediaSearchError(AchievementNewsError):
    """Raised when the YouTube search request fails."""
