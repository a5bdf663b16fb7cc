"""YouTube longplay search.

Best effort only: any problem is logged and reported as "no link".
"""

from typing import Optional

import httpx

from config import YOUTUBE_API_KEY, YOUTUBE_API_BASE, YOUTUBE_TIMEOUT_SECONDS
from logger import logger
from utils import sanitize_for_log
from ..config import LONGPLAY_QUALIFIER, LONGPLAY_MAX_RESULTS
from ..exceptions import MediaSearchError


def result_link(item: dict) -> Optional[str]:
    """Build a watch/playlist/channel URL from a search result item."""
    ids = item.get("id") if isinstance(item, dict) else None
    if not isinstance(ids, dict):
        return None
    kind = ids.get("kind")

    if kind == "youtube#video" and ids.get("videoId"):
        return f"https://www.youtube.com/watch?v={ids['videoId']}"
    if kind == "youtube#playlist" and ids.get("playlistId"):
        return f"https://www.youtube.com/playlist?list={ids['playlistId']}"
    if kind == "youtube#channel" and ids.get("channelId"):
        return f"https://www.youtube.com/channel/{ids['channelId']}"
    return None


async def search_videos(query: str, max_results: int = LONGPLAY_MAX_RESULTS) -> list[dict]:
    """Run a YouTube Data API search and return the raw result items.

    Raises:
        MediaSearchError: The request failed or the response was not JSON.
    """
    params = {
        "part": "snippet",
        "q": query,
        "maxResults": max_results,
        "key": YOUTUBE_API_KEY,
    }

    try:
        async with httpx.AsyncClient(timeout=YOUTUBE_TIMEOUT_SECONDS) as client:
            response = await client.get(f"{YOUTUBE_API_BASE}/search", params=params)
            response.raise_for_status()
            data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        raise MediaSearchError(f"YouTube search failed: {sanitize_for_log(e)}") from e

    if not isinstance(data, dict):
        raise MediaSearchError(f"YouTube search returned {type(data).__name__}")
    return [item for item in data.get("items") or [] if isinstance(item, dict)]


async def get_longplay_link(terms: str) -> Optional[str]:
    """Return the top longplay video link for the given terms, or None."""
    if not YOUTUBE_API_KEY:
        logger.warning("YOUTUBE_API_KEY not configured, skipping longplay search")
        return None

    query = f"{LONGPLAY_QUALIFIER} {terms}"

    try:
        items = await search_videos(query)
        link = result_link(items[0]) if items else None
    except MediaSearchError as e:
        logger.warning(f"Longplay search for '{query}' failed: {e}")
        return None
    except Exception as e:
        logger.warning(f"Longplay search for '{query}' failed: {sanitize_for_log(e)}")
        return None

    if link:
        logger.info(f"Longplay for '{query}': {link}")
    else:
        logger.info(f"No longplay found for '{query}'")
    return link
