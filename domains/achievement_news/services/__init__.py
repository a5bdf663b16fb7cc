"""Achievement news external services."""

from .retroachievements import get_game_info, reduce_achievement_set_date
from .youtube import get_longplay_link

__all__ = ["get_game_info", "reduce_achievement_set_date", "get_longplay_link"]
