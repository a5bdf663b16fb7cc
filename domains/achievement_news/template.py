"""Achievement news post rendering.

The post is shown to the requester as copy-ready markdown: the escaped
fence (\\`\\`\\`md) survives Discord formatting so the author can paste the
block into the news channel as-is.
"""

from typing import Optional

from config import RA_SITE_URL
from .config import AUTHOR_PLACEHOLDER, LONGPLAY_PLACEHOLDER
from .types import GameSummary

ESCAPED_FENCE = r"\`\`\`"
FENCE = "```"


def strip_tildes(text: str) -> str:
    """Remove tildes, which Discord would treat as strikethrough markers."""
    return text.replace("~", "")


def game_page_url(game_id: int) -> str:
    return f"{RA_SITE_URL.rstrip('/')}/game/{game_id}"


def render_news_post(summary: GameSummary, link: Optional[str]) -> str:
    """Render the achievement-news post for a resolved game.

    Args:
        summary: Resolved game info
        link: Longplay video URL, or None to leave the placeholder in

    Returns:
        The post text, starting and ending with a newline
    """
    lines = [
        "",
        f"{ESCAPED_FENCE}md",
        f"{FENCE}md",
        f"< {strip_tildes(summary.title)} >",
        f"[{summary.console_name}, {summary.genre}]({summary.developer})< {summary.release_date} >",
        f"{FENCE}{ESCAPED_FENCE}",
        f"A new set was published by @{AUTHOR_PLACEHOLDER} on {summary.achievement_set_date.isoformat()}",
        link or LONGPLAY_PLACEHOLDER,
        f"<{game_page_url(summary.id)}>",
        "",
    ]
    return "\n".join(lines)


def render_progress(game_id: int) -> str:
    return f":hourglass: Getting info for game ID `{game_id}`, please wait..."


def render_failure(game_id: int) -> str:
    return f"Unable to get info from the game ID `{game_id}`... :frowning:"


def render_reply(mention: str, post: str) -> str:
    return f"{mention}, here's your achievement-news post template:\n{post}"
