"""RetroAchievements catalog lookup and achievement-set date reduction."""

from datetime import date, datetime
from typing import Iterable

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from config import RA_USER, RA_WEB_API_KEY, RA_API_BASE, RA_TIMEOUT_SECONDS, RA_MAX_ATTEMPTS
from logger import logger
from utils import sanitize_for_log
from ..exceptions import CatalogError, GameNotFoundError
from ..types import FailureReason, GameInfoResult, GameSummary


def build_authorization(user_name: str, web_api_key: str) -> dict:
    """Build the query params the Web API uses to authenticate a request."""
    return {"z": user_name, "y": web_api_key}


async def fetch_game_extended(game_id: int, authorization: dict) -> dict:
    """Fetch the extended game record (display fields plus achievements).

    Transport errors are retried up to RA_MAX_ATTEMPTS in total; HTTP status
    errors are not.

    Raises:
        GameNotFoundError: The API answered 404 for this game.
        CatalogError: Any other network, HTTP or decoding failure.
    """
    url = f"{RA_API_BASE}/API_GetGameExtended.php"
    params = {**authorization, "i": game_id}

    try:
        async with httpx.AsyncClient(timeout=RA_TIMEOUT_SECONDS) as client:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(httpx.TransportError),
                stop=stop_after_attempt(max(1, RA_MAX_ATTEMPTS)),
                wait=wait_exponential(multiplier=1, min=1, max=8),
                reraise=True,
            ):
                with attempt:
                    response = await client.get(url, params=params)

        if response.status_code == 404:
            raise GameNotFoundError(game_id)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as e:
        raise CatalogError(f"GetGameExtended failed for game {game_id}: {sanitize_for_log(e)}") from e
    except ValueError as e:
        raise CatalogError(f"GetGameExtended returned invalid JSON for game {game_id}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"GetGameExtended returned {type(data).__name__} for game {game_id}")

    return data


def _day_of(timestamp: str) -> date:
    """Truncate a "YYYY-MM-DD HH:MM:SS" timestamp to its calendar date."""
    return datetime.fromisoformat(timestamp.strip()).date()


def reduce_achievement_set_date(achievements: Iterable[dict]) -> date:
    """Return the latest modification date across all achievements.

    Dates are day-truncated and de-duplicated before taking the maximum, so
    neither iteration order nor repeated dates affect the result.

    Raises:
        ValueError: No achievements were given, or a timestamp is unreadable.
        KeyError: An achievement has no DateModified.
    """
    dates = {_day_of(achievement["DateModified"]) for achievement in achievements}
    if not dates:
        raise ValueError("No achievement dates to reduce")
    return max(dates)


def _achievement_records(game: dict) -> list[dict]:
    # The API sends an object keyed by achievement ID, or [] when there are none
    achievements = game.get("Achievements")
    if not achievements:
        return []
    if isinstance(achievements, dict):
        return list(achievements.values())
    return list(achievements)


async def get_game_info(game_id: int) -> GameInfoResult:
    """Resolve a game ID into a GameSummary.

    Never raises for catalog problems: every failure comes back as
    GameInfoResult.failure() with the reason logged.
    """
    if not RA_USER or not RA_WEB_API_KEY:
        logger.error("RA_USER / RA_WEB_API_KEY not configured")
        return GameInfoResult.failure(FailureReason.MISSING_CREDENTIALS)

    authorization = build_authorization(RA_USER, RA_WEB_API_KEY)

    try:
        game = await fetch_game_extended(game_id, authorization)
    except GameNotFoundError:
        logger.warning(f"Game {game_id} not found")
        return GameInfoResult.failure(FailureReason.NOT_FOUND)
    except CatalogError as e:
        logger.error(f"Catalog lookup failed for game {game_id}: {e}")
        return GameInfoResult.failure(FailureReason.REQUEST_FAILED)

    if not game.get("Title"):
        logger.warning(f"Game {game_id} not found (empty record)")
        return GameInfoResult.failure(FailureReason.NOT_FOUND)

    records = _achievement_records(game)
    if not records:
        logger.warning(f"Game {game_id} has no achievements")
        return GameInfoResult.failure(FailureReason.NO_ACHIEVEMENTS)

    try:
        achievement_set_date = reduce_achievement_set_date(records)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.error(f"Unreadable achievement dates for game {game_id}: {sanitize_for_log(e)}")
        return GameInfoResult.failure(FailureReason.MALFORMED_RESPONSE)

    summary = GameSummary(
        id=game_id,
        title=game.get("Title") or "",
        console_name=game.get("ConsoleName") or "",
        genre=game.get("Genre") or "",
        developer=game.get("Developer") or "",
        release_date=game.get("Released") or "",
        achievement_set_date=achievement_set_date,
    )
    logger.info(f"Resolved game {game_id}: {summary.title} ({summary.console_name}), "
                f"set date {achievement_set_date.isoformat()}")
    return GameInfoResult.success(summary)
