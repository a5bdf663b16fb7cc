"""Command handler for the achievement news post generator.

Provides:
- parse_game_id - accepts "4650" or "https://retroachievements.org/game/4650"
- build_news_post - catalog lookup -> longplay search -> rendered post
- handle_genachnews - the full command flow with progress message
"""

import re
from typing import Awaitable, Callable, Optional
from urllib.parse import urlparse

from config import RA_SITE_URL
from logger import logger
from utils import sanitize_for_log
from .config import COMMAND_EXAMPLE
from .services import get_game_info, get_longplay_link
from .template import render_news_post, render_progress, render_failure, render_reply, strip_tildes

_GAME_URL_PATTERN = re.compile(
    rf"^https?://{re.escape(urlparse(RA_SITE_URL).netloc)}/game/(\d+)$",
    re.IGNORECASE
)

# Longer than any game ID or game page URL
MAX_ARG_LENGTH = 200


def parse_game_id(arg: Optional[str]) -> Optional[int]:
    """Extract a positive game ID from a bare number or a game page URL."""
    if not arg:
        return None

    arg = arg.strip()
    if len(arg) > MAX_ARG_LENGTH:
        return None

    if arg.isascii() and arg.isdigit():
        game_id = int(arg)
    else:
        match = _GAME_URL_PATTERN.match(arg)
        if not match:
            return None
        game_id = int(match.group(1))

    return game_id if game_id > 0 else None


async def build_news_post(game_id: int) -> tuple[bool, str]:
    """Generate the news post for a game.

    Returns:
        (True, post) on success, (False, failure message) if the game
        could not be resolved. A missing longplay is not a failure.
    """
    result = await get_game_info(game_id)
    if not result.ok:
        logger.info(f"News post for game {game_id} aborted: {result.reason.value}")
        return False, render_failure(game_id)

    summary = result.summary
    link = await get_longplay_link(f"{strip_tildes(summary.title)} {summary.console_name}")

    return True, render_news_post(summary, link)


async def handle_genachnews(
    arg: Optional[str],
    mention: str,
    send: Callable[[str], Awaitable],
    edit: Callable[[str], Awaitable],
) -> bool:
    """Run the genachnews command.

    Args:
        arg: Raw game ID argument as typed by the user
        mention: Requester mention to prefix the reply with
        send: Posts a new message
        edit: Replaces the text of the message posted by send

    Returns:
        True if a post was generated
    """
    game_id = parse_game_id(arg)
    if game_id is None:
        await send(
            "**Usage:** give a game ID or game page URL.\n\n"
            f"Example: {COMMAND_EXAMPLE}"
        )
        return False

    logger.info(f"Generating achievement news for game {game_id}")
    await send(render_progress(game_id))

    try:
        ok, text = await build_news_post(game_id)
    except Exception as e:
        logger.error(f"Achievement news failed for game {game_id}: {sanitize_for_log(e)}")
        ok, text = False, render_failure(game_id)

    await edit(render_reply(mention, text) if ok else text)
    return ok
