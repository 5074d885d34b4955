from __future__ import annotations

import asyncio
import unittest
from unittest.mock import patch

import requests

from digest.ingestion.cfbd_client import (
    UpstreamFetchError,
    build_games_params,
    fetch_games,
    fetch_games_async,
)


class _FakeResponse:
    def __init__(self, status_code: int, payload, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else str(payload)

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def _fetch(**overrides):
    kwargs = {"api_key": "secret", "base_url": "https://cfbd.example/", "timeout_seconds": 7}
    kwargs.update(overrides)
    return fetch_games(2025, 1, "cfb", **kwargs)


class BuildGamesParamsTests(unittest.TestCase):
    def test_regular_season_params_per_scope(self) -> None:
        self.assertEqual(
            {"year": "2025", "week": "4", "seasonType": "regular", "division": "fcs"},
            build_games_params(2025, 4, "fcs"),
        )

    def test_unknown_scope_raises(self) -> None:
        with self.assertRaises(ValueError):
            build_games_params(2025, 4, "nba")


class FetchGamesTests(unittest.TestCase):
    def test_returns_games_and_sends_bearer_token(self) -> None:
        games = [{"id": 1, "home_team": "A", "away_team": "B"}]

        with patch(
            "digest.ingestion.cfbd_client.requests.get",
            return_value=_FakeResponse(200, games),
        ) as mock_get:
            result = _fetch()

        self.assertEqual(games, result)
        args, kwargs = mock_get.call_args
        self.assertEqual("https://cfbd.example/games", args[0])
        self.assertEqual("Bearer secret", kwargs["headers"]["Authorization"])
        self.assertEqual("regular", kwargs["params"]["seasonType"])
        self.assertEqual("2025", kwargs["params"]["year"])
        self.assertEqual(7, kwargs["timeout"])

    def test_missing_api_key_fails_without_request(self) -> None:
        with patch("digest.ingestion.cfbd_client.requests.get") as mock_get:
            with self.assertRaises(UpstreamFetchError) as ctx:
                _fetch(api_key=None)

        mock_get.assert_not_called()
        self.assertIn("Missing CFBD API key", str(ctx.exception))

    def test_transport_error_is_wrapped(self) -> None:
        with patch(
            "digest.ingestion.cfbd_client.requests.get",
            side_effect=requests.ConnectionError("boom"),
        ) as mock_get:
            with self.assertRaises(UpstreamFetchError):
                _fetch()

        self.assertEqual(1, mock_get.call_count)

    def test_error_status_is_reported(self) -> None:
        with patch(
            "digest.ingestion.cfbd_client.requests.get",
            return_value=_FakeResponse(401, {"message": "Unauthorized"}, text="Unauthorized"),
        ):
            with self.assertRaises(UpstreamFetchError) as ctx:
                _fetch()

        self.assertIn("401", str(ctx.exception))

    def test_non_json_body_is_reported(self) -> None:
        with patch(
            "digest.ingestion.cfbd_client.requests.get",
            return_value=_FakeResponse(200, ValueError("bad json"), text="<html>"),
        ):
            with self.assertRaises(UpstreamFetchError) as ctx:
                _fetch()

        self.assertIn("non-JSON", str(ctx.exception))

    def test_non_list_body_is_reported(self) -> None:
        with patch(
            "digest.ingestion.cfbd_client.requests.get",
            return_value=_FakeResponse(200, {"games": []}),
        ):
            with self.assertRaises(UpstreamFetchError):
                _fetch()

    def test_async_wrapper_returns_same_payload(self) -> None:
        with patch(
            "digest.ingestion.cfbd_client.requests.get",
            return_value=_FakeResponse(200, []),
        ):
            result = asyncio.run(
                fetch_games_async(2025, 1, "cfb", api_key="secret", base_url="https://cfbd.example")
            )

        self.assertEqual([], result)


if __name__ == "__main__":
    unittest.main()
