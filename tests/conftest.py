"""Shared fixtures for anigraph tests."""

from typing import Any

import pytest

from anigraph.models import AuthorizationState
from anigraph.utils.debug import setup_logger

PROFILE = {
    "id": 12345,
    "name": "someUsername",
    "about": "hello",
    "avatar": {"large": "https://example.com/l.png", "medium": "https://example.com/m.png"},
    "siteUrl": "https://anilist.co/user/someUsername",
}

STATISTICS = {
    "anime": {"count": 120, "meanScore": 74.5, "minutesWatched": 90000, "episodesWatched": 3600},
    "manga": {"count": 30, "meanScore": 71.0, "chaptersRead": 2400, "volumesRead": 210},
}


@pytest.fixture(autouse=True, scope="session")
def _bind_logger() -> None:
    """Attach the anigraph log handler before any CliRunner swaps stderr."""
    setup_logger()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep real tokens and config files out of tests."""
    monkeypatch.delenv("ANILIST_TOKEN", raising=False)
    monkeypatch.delenv("ANILIST_API_URL", raising=False)
    monkeypatch.delenv("ANIGRAPH_TOKEN", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def profile_data() -> dict[str, Any]:
    return dict(PROFILE)


@pytest.fixture
def statistics_data() -> dict[str, Any]:
    return dict(STATISTICS)


@pytest.fixture
def activities() -> list[dict[str, Any]]:
    """One activity of each variant, newest first."""
    return [
        {"id": 903, "userId": 12345, "type": "TEXT", "text": "hi", "createdAt": 3, "likeCount": 0, "replies": []},
        {"id": 902, "recipientId": 1, "type": "MESSAGE", "message": "yo", "createdAt": 2, "likeCount": 1, "replies": []},
        {
            "id": 901,
            "status": "watched episode",
            "type": "ANIME_LIST",
            "progress": "5",
            "media": {"id": 1535, "title": {"romaji": "Death Note"}, "type": "ANIME"},
            "createdAt": 1,
            "likeCount": 2,
            "replies": [],
        },
    ]


@pytest.fixture
def authorized() -> AuthorizationState:
    return AuthorizationState(token="secret-token")
