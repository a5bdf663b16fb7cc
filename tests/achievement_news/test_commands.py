"""Tests for the genachnews command flow."""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from domains.achievement_news.commands import build_news_post, handle_genachnews, parse_game_id
from domains.achievement_news.types import FailureReason, GameInfoResult, GameSummary

COMMANDS = 'domains.achievement_news.commands'


def _summary(game_id=4650, title="Pokemon Snap"):
    return GameSummary(
        id=game_id,
        title=title,
        console_name="Nintendo 64",
        genre="Photography",
        developer="HAL Laboratory",
        release_date="1999-03-21",
        achievement_set_date=date(2020, 3, 15),
    )


class TestParseGameId:
    """Tests for game ID argument parsing."""

    @pytest.mark.parametrize("arg,expected", [
        ("4650", 4650),
        ("  4650 ", 4650),
        ("https://retroachievements.org/game/4650", 4650),
        ("http://RetroAchievements.org/game/12", 12),
    ])
    def test_valid(self, arg, expected):
        assert parse_game_id(arg) == expected

    @pytest.mark.parametrize("arg", [
        None,
        "",
        "0",
        "-5",
        "12abc",
        "²",
        "https://retroachievements.org/game/0",
        "https://retroachievements.org/game/4650/hashes",
        "https://example.com/game/4650",
        "Pokemon Snap",
        "9" * 5000,
        "https://retroachievements.org/game/" + "9" * 5000,
    ])
    def test_invalid(self, arg):
        assert parse_game_id(arg) is None


class TestBuildNewsPost:
    """Tests for the lookup -> search -> render pipeline."""

    @pytest.mark.asyncio
    async def test_success(self):
        with patch(f'{COMMANDS}.get_game_info', AsyncMock(return_value=GameInfoResult.success(_summary()))), \
             patch(f'{COMMANDS}.get_longplay_link', AsyncMock(return_value="https://youtu.be/x")) as mock_link:
            ok, text = await build_news_post(4650)

        assert ok
        assert "< Pokemon Snap >" in text
        assert "on 2020-03-15" in text
        assert "https://youtu.be/x" in text
        mock_link.assert_awaited_once_with("Pokemon Snap Nintendo 64")

    @pytest.mark.asyncio
    async def test_failure_short_circuits(self):
        with patch(f'{COMMANDS}.get_game_info',
                   AsyncMock(return_value=GameInfoResult.failure(FailureReason.NO_ACHIEVEMENTS))), \
             patch(f'{COMMANDS}.get_longplay_link', AsyncMock()) as mock_link, \
             patch(f'{COMMANDS}.render_news_post') as mock_render:
            ok, text = await build_news_post(9999)

        assert not ok
        assert text == "Unable to get info from the game ID `9999`... :frowning:"
        mock_link.assert_not_awaited()
        mock_render.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_terms_without_tildes(self):
        with patch(f'{COMMANDS}.get_game_info',
                   AsyncMock(return_value=GameInfoResult.success(_summary(title="Foo~Bar")))), \
             patch(f'{COMMANDS}.get_longplay_link', AsyncMock(return_value=None)) as mock_link:
            ok, text = await build_news_post(4650)

        assert ok
        mock_link.assert_awaited_once_with("FooBar Nintendo 64")
        assert "FooBar" in text
        assert "~" not in text

    @pytest.mark.asyncio
    async def test_no_longplay_uses_placeholder(self):
        with patch(f'{COMMANDS}.get_game_info', AsyncMock(return_value=GameInfoResult.success(_summary()))), \
             patch(f'{COMMANDS}.get_longplay_link', AsyncMock(return_value=None)):
            ok, text = await build_news_post(4650)

        assert ok
        assert "{LONGPLAY-LINK}" in text


class TestHandleGenachnews:
    """Tests for the full command flow."""

    @pytest.mark.asyncio
    async def test_progress_then_reply(self):
        send, edit = AsyncMock(), AsyncMock()

        with patch(f'{COMMANDS}.build_news_post', AsyncMock(return_value=(True, "POST"))):
            ok = await handle_genachnews("https://retroachievements.org/game/4650", "<@42>", send, edit)

        assert ok
        send.assert_awaited_once_with(":hourglass: Getting info for game ID `4650`, please wait...")
        edit.assert_awaited_once_with("<@42>, here's your achievement-news post template:\nPOST")

    @pytest.mark.asyncio
    async def test_failure_message(self):
        send, edit = AsyncMock(), AsyncMock()
        failure = "Unable to get info from the game ID `9999`... :frowning:"

        with patch(f'{COMMANDS}.build_news_post', AsyncMock(return_value=(False, failure))):
            ok = await handle_genachnews("9999", "<@42>", send, edit)

        assert not ok
        edit.assert_awaited_once_with(failure)

    @pytest.mark.asyncio
    async def test_unexpected_error_still_edits(self):
        send, edit = AsyncMock(), AsyncMock()

        with patch(f'{COMMANDS}.build_news_post', AsyncMock(side_effect=RuntimeError("boom"))):
            ok = await handle_genachnews("4650", "<@42>", send, edit)

        assert not ok
        edit.assert_awaited_once_with("Unable to get info from the game ID `4650`... :frowning:")

    @pytest.mark.asyncio
    async def test_invalid_argument(self):
        send, edit = AsyncMock(), AsyncMock()

        with patch(f'{COMMANDS}.build_news_post', AsyncMock()) as mock_build:
            ok = await handle_genachnews("not-a-game", "<@42>", send, edit)

        assert not ok
        assert "Usage" in send.call_args.args[0]
        mock_build.assert_not_awaited()
        edit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_oversized_argument_gets_usage(self):
        send, edit = AsyncMock(), AsyncMock()

        ok = await handle_genachnews("9" * 5000, "<@42>", send, edit)

        assert not ok
        assert "Usage" in send.call_args.args[0]
        edit.assert_not_awaited()


class TestEndToEnd:
    """Catalog and search mocked at the HTTP layer."""

    @pytest.mark.asyncio
    async def test_scenario_4650_without_longplay(self, ra_credentials, youtube_key, make_response,
                                                  mock_httpx_client, game_payload):
        mock_httpx_client.get.side_effect = [
            make_response(game_payload),
            make_response({"items": []}),
        ]

        ok, text = await build_news_post(4650)

        assert ok
        assert "A new set was published by @{AUTHOR_NAME} on 2020-03-15" in text
        assert "{LONGPLAY-LINK}" in text
        assert "<https://retroachievements.org/game/4650>" in text

    @pytest.mark.asyncio
    async def test_scenario_9999_empty_set(self, ra_credentials, youtube_key, make_response,
                                           mock_httpx_client, game_payload):
        game_payload["Achievements"] = []
        mock_httpx_client.get.return_value = make_response(game_payload)

        ok, text = await build_news_post(9999)

        assert not ok
        assert "`9999`" in text
        assert mock_httpx_client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_malformed_search_item_keeps_post(self, ra_credentials, youtube_key, make_response,
                                                    mock_httpx_client, game_payload):
        mock_httpx_client.get.side_effect = [
            make_response(game_payload),
            make_response({"items": [{"id": "abc123"}]}),
        ]

        ok, text = await build_news_post(4650)

        assert ok
        assert "{LONGPLAY-LINK}" in text
        assert "on 2020-03-15" in text
