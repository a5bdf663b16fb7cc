"""Achievement news domain - news post templates for new achievement sets."""

from .commands import handle_genachnews, build_news_post, parse_game_id
from .config import (
    COMMAND_NAME,
    COMMAND_ALIASES,
    COMMAND_DESCRIPTION,
    THROTTLE_USES,
    THROTTLE_PERIOD,
)

__all__ = [
    "handle_genachnews",
    "build_news_post",
    "parse_game_id",
    "COMMAND_NAME",
    "COMMAND_ALIASES",
    "COMMAND_DESCRIPTION",
    "THROTTLE_USES",
    "THROTTLE_PERIOD",
]
