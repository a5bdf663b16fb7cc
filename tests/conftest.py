"""Pytest configuration and fixtures."""

import os
import sys
from unittest.mock import Mock, AsyncMock, patch

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _make_response(payload=None, status_code: int = 200) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json = Mock(return_value=payload)
    response.raise_for_status = Mock()
    return response


@pytest.fixture
def make_response():
    """Factory for stand-in httpx.Response objects."""
    return _make_response


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx client."""
    with patch('httpx.AsyncClient') as mock:
        client = AsyncMock()
        mock.return_value.__aenter__.return_value = client
        yield client


@pytest.fixture
def ra_credentials(monkeypatch):
    """Configure RetroAchievements credentials for the catalog service."""
    import domains.achievement_news.services.retroachievements as ra

    monkeypatch.setattr(ra, 'RA_USER', 'newsbot')
    monkeypatch.setattr(ra, 'RA_WEB_API_KEY', 'abcdef0123456789abcdef0123456789')
    monkeypatch.setattr(ra, 'RA_MAX_ATTEMPTS', 1)


@pytest.fixture
def youtube_key(monkeypatch):
    """Configure a YouTube API key for the search service."""
    import domains.achievement_news.services.youtube as yt

    monkeypatch.setattr(yt, 'YOUTUBE_API_KEY', 'yt-test-key')


@pytest.fixture
def game_payload():
    """GetGameExtended response for game 4650."""
    return {
        "ID": 4650,
        "Title": "Pokemon Snap",
        "ConsoleName": "Nintendo 64",
        "Genre": "Photography",
        "Developer": "HAL Laboratory",
        "Released": "1999-03-21",
        "Achievements": {
            "101": {"ID": 101, "Title": "First Shot", "DateModified": "2020-01-01 10:00:00"},
            "102": {"ID": 102, "Title": "Pro Snapper", "DateModified": "2020-03-15 22:10:05"},
        },
    }
